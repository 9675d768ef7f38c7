"""
Modelo do jornaleiro (newsvendor) com simulacao Monte Carlo.
"""

from newsvendor.inventory import calculate_profit, inverse_normal_cdf, solve
from newsvendor.models import (
    AnalyticalSolution,
    PolicyRun,
    PolicyStatistics,
    RandomNumberExample,
    ScenarioResult,
    SimulationParameters,
)
from newsvendor.simulation import aggregate, generate_demand, run_simulation

__all__ = [
    'SimulationParameters',
    'ScenarioResult',
    'PolicyRun',
    'PolicyStatistics',
    'AnalyticalSolution',
    'RandomNumberExample',
    'inverse_normal_cdf',
    'generate_demand',
    'calculate_profit',
    'run_simulation',
    'aggregate',
    'solve',
]
