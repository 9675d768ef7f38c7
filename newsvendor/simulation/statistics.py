"""
Estatisticas agregadas dos cenarios de uma politica.
"""

from typing import Sequence

import numpy as np
import pandas as pd

from newsvendor.config import HISTOGRAM_BINS, HISTOGRAM_BINS_LARGE, HISTOGRAM_LARGE_THRESHOLD
from newsvendor.inventory.rounding import round_half_up
from newsvendor.models import PolicyRun, PolicyStatistics, ScenarioResult


def _finite(value):
    value = float(value)
    return 0.0 if np.isnan(value) else value


def _zero_nan(values):
    """Entradas nan viram 0 antes de agregar."""
    values = np.asarray(values, dtype=float)
    return np.where(np.isnan(values), 0.0, values)


def aggregate(policy_name: str, order_quantity, results: Sequence[ScenarioResult]) -> PolicyStatistics:
    """
    Media, extremos, desvio padrao populacional (divide por n) do lucro
    e percentual de cenarios sem falta. Sem resultados, tudo zero.
    """
    n = len(results)
    if n == 0:
        return PolicyStatistics(policy_name=policy_name, order_quantity=order_quantity)

    profits = _zero_nan([r.profit for r in results])
    excess = _zero_nan([r.excess_units for r in results])
    raw_shortage = np.array([r.shortage_units for r in results], dtype=float)
    shortage = _zero_nan(raw_shortage)

    # Falta nan nao conta como esgotamento
    sellout_count = np.count_nonzero(raw_shortage == 0)

    return PolicyStatistics(
        policy_name=policy_name,
        order_quantity=order_quantity,
        average_profit=_finite(profits.mean()),
        average_excess=_finite(excess.mean()),
        average_shortage=_finite(shortage.mean()),
        max_profit=_finite(profits.max()),
        min_profit=_finite(profits.min()),
        std_dev_profit=_finite(profits.std(ddof=0)),
        sellout_percentage=_finite(100.0 * sellout_count / n),
        total_simulations=n,
    )


def aggregate_run(run: PolicyRun) -> PolicyStatistics:
    return aggregate(run.policy_name, run.order_quantity, run.results)


def profit_histogram(results: Sequence[ScenarioResult]) -> pd.DataFrame:
    """
    Histograma de lucros com largura fixa: 15 faixas acima de 500
    cenarios, 10 caso contrario. Se todos os lucros forem iguais, a
    largura vira 1 e tudo cai na primeira faixa.
    """
    if len(results) == 0:
        return pd.DataFrame(columns=['range', 'count', 'midpoint'])

    profits = np.array([r.profit for r in results], dtype=float)
    bins = HISTOGRAM_BINS_LARGE if len(profits) > HISTOGRAM_LARGE_THRESHOLD else HISTOGRAM_BINS

    low = profits.min()
    span = profits.max() - low
    bin_size = 1.0 if span == 0 else span / bins

    counts = np.zeros(bins, dtype=int)
    if span == 0:
        counts[0] = len(profits)
    else:
        idx = np.minimum(np.floor((profits - low) / bin_size).astype(int), bins - 1)
        np.add.at(counts, idx, 1)

    rows = []
    for i in range(bins):
        start = low + i * bin_size
        end = low + (i + 1) * bin_size
        rows.append({
            'range': f"{round_half_up(start)} - {round_half_up(end)}",
            'count': int(counts[i]),
            'midpoint': low + (i + 0.5) * bin_size,
        })

    return pd.DataFrame(rows)
