"""
Solucao analitica (fechada) do modelo do jornaleiro.
"""

import logging

from newsvendor.inventory.quantile import inverse_normal_cdf
from newsvendor.inventory.rounding import round_half_up
from newsvendor.models import AnalyticalSolution, SimulationParameters

logger = logging.getLogger(__name__)


def critical_ratio(cu, co):
    """Razao critica Cu / (Cu + Co). Precondicao: Cu + Co > 0."""
    return cu / (cu + co)


def solve(params: SimulationParameters) -> AnalyticalSolution:
    """
    Q* = mu + z * sigma, com z = Phi^-1(Cu / (Cu + Co)).

    Cu e o ganho perdido por unidade faltante, Co a perda por unidade
    que sobra. Com Co = 0 a razao critica e 1 e Q* nao existe (ValueError).
    """
    cu = params.profit
    co = params.excess_loss

    ratio = critical_ratio(cu, co)
    if not 0 < ratio < 1:
        raise ValueError(
            f"critical ratio must be in (0, 1), got {ratio} (Cu={cu}, Co={co}); "
            "excess_loss must be > 0 to solve for Q*"
        )
    z_value = inverse_normal_cdf(ratio)
    optimal_quantity = round_half_up(params.mean + z_value * params.std_dev)

    logger.debug("Critical ratio %.4f -> z=%.4f, Q*=%d", ratio, z_value, optimal_quantity)

    return AnalyticalSolution(
        cu=cu,
        co=co,
        critical_ratio=ratio,
        z_value=z_value,
        optimal_quantity=optimal_quantity,
    )
