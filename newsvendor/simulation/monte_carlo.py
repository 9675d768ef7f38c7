"""
Simulacao Monte Carlo do modelo do jornaleiro.
Cada politica (quantidade Q) e avaliada de forma independente.
"""

import logging
from numbers import Integral
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from newsvendor.config import (
    LCG_MODULUS,
    OPTIMAL_POLICY_NAME,
    POLICY_1_NAME,
    POLICY_1_QUANTITY,
    POLICY_2_NAME,
    POLICY_2_QUANTITY,
)
from newsvendor.inventory.profit import calculate_profit
from newsvendor.models import AnalyticalSolution, PolicyRun, ScenarioResult, SimulationParameters
from newsvendor.simulation.demand import generate_demand, lcg_uniforms
from newsvendor.simulation.statistics import aggregate

logger = logging.getLogger(__name__)


def _check_count(num_simulations):
    if isinstance(num_simulations, bool) or not isinstance(num_simulations, Integral):
        raise ValueError(f"num_simulations must be an integer, got {num_simulations!r}")
    if num_simulations < 0:
        raise ValueError(f"num_simulations must be >= 0, got {num_simulations}")
    return int(num_simulations)


def run_simulation(order_quantity, params: SimulationParameters, num_simulations: int,
                   seed: Optional[int] = None, rng: Optional[np.random.Generator] = None,
                   fully_seeded: bool = False) -> List[ScenarioResult]:
    """
    Executa `num_simulations` cenarios para uma quantidade de pedido.

    Com `seed`, o uniforme de cada cenario vem do gerador congruencial
    (mesma semente -> mesma sequencia de uniformes). O termo do cosseno
    continua vindo de `rng`, entao a demanda so e reprodutivel se `rng`
    tambem for. `fully_seeded=True` deriva esse segundo gerador da propria
    semente (reduzida modulo 233280, aceita sementes negativas) e torna a
    rodada inteira reprodutivel; nesse modo um `rng` informado e ignorado.
    `fully_seeded=True` sem `seed` levanta ValueError.
    """
    n = _check_count(num_simulations)

    if fully_seeded:
        if seed is None:
            raise ValueError("fully_seeded requires a seed")
        rng = np.random.default_rng(int(seed) % LCG_MODULUS)

    if seed is not None:
        uniforms = lcg_uniforms(seed, n)
    else:
        uniforms = (None for _ in range(n))

    logger.debug("Running %d scenarios for Q=%s (seed=%s)", n, order_quantity, seed)

    results = []
    for i, u in enumerate(uniforms):
        draw = generate_demand(params.mean, params.std_dev, uniform=u, rng=rng)
        outcome = calculate_profit(draw.demand, order_quantity, params)

        results.append(ScenarioResult(
            simulation_number=i + 1,
            uniform=draw.uniform,
            z_score=draw.z_score,
            demand=draw.demand,
            units_sold=outcome.units_sold,
            excess_units=outcome.excess_units,
            shortage_units=outcome.shortage_units,
            profit=outcome.profit,
        ))

    return results


def run_policy(policy_name: str, order_quantity, params: SimulationParameters,
               num_simulations: int, seed: Optional[int] = None,
               rng: Optional[np.random.Generator] = None,
               fully_seeded: bool = False) -> PolicyRun:
    results = run_simulation(order_quantity, params, num_simulations,
                             seed=seed, rng=rng, fully_seeded=fully_seeded)
    return PolicyRun(policy_name=policy_name, order_quantity=order_quantity,
                     results=tuple(results))


def default_policies(solution: Optional[AnalyticalSolution] = None) -> List[Tuple[str, int]]:
    """
    Politicas de referencia: duas fixas e a otima analitica.
    Sem solucao, a otima usa a quantidade da Politica 1.
    """
    optimal_q = solution.optimal_quantity if solution is not None else POLICY_1_QUANTITY
    return [
        (POLICY_1_NAME, POLICY_1_QUANTITY),
        (POLICY_2_NAME, POLICY_2_QUANTITY),
        (OPTIMAL_POLICY_NAME, optimal_q),
    ]


def results_to_frame(results: Sequence[ScenarioResult]) -> pd.DataFrame:
    """Uma linha por cenario, na ordem de sorteio."""
    columns = list(ScenarioResult.__dataclass_fields__)
    return pd.DataFrame([[getattr(r, c) for c in columns] for r in results], columns=columns)


def compare_policies(params: SimulationParameters, policies: Sequence[Tuple[str, int]],
                     num_simulations: int, seed: Optional[int] = None,
                     rng: Optional[np.random.Generator] = None,
                     fully_seeded: bool = False) -> Tuple[List[PolicyRun], pd.DataFrame]:
    """
    Simula cada politica e devolve as rodadas e uma tabela de estatisticas
    (uma linha por politica).
    """
    runs = []
    comparison = []

    for name, quantity in policies:
        run = run_policy(name, quantity, params, num_simulations,
                         seed=seed, rng=rng, fully_seeded=fully_seeded)
        stats = aggregate(run.policy_name, run.order_quantity, run.results)
        runs.append(run)
        comparison.append(stats.as_dict())
        logger.info("%s (Q=%s): average profit %.2f over %d scenarios",
                    name, quantity, stats.average_profit, stats.total_simulations)

    return runs, pd.DataFrame(comparison)
