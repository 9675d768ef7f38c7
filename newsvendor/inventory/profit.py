from typing import NamedTuple

from newsvendor.models import SimulationParameters


class ProfitBreakdown(NamedTuple):
    units_sold: int
    excess_units: int
    shortage_units: int
    profit: float


def calculate_profit(demand, order_quantity, params: SimulationParameters) -> ProfitBreakdown:
    """
    Lucro de um cenario:
    G(Q, D) = min(Q, D) * g - max(0, Q - D) * p_s

    Demanda negativa nao e rejeitada; entra direto na aritmetica.
    """
    units_sold = min(demand, order_quantity)
    excess_units = max(0, order_quantity - demand)
    shortage_units = max(0, demand - order_quantity)

    profit = units_sold * params.profit - excess_units * params.excess_loss

    return ProfitBreakdown(units_sold, excess_units, shortage_units, profit)
