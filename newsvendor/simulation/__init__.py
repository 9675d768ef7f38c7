"""
Modulo de inicializacao para simulacao.
"""

from newsvendor.simulation.demand import (
    DemandDraw,
    generate_demand,
    generate_random_examples,
    lcg_uniforms,
)
from newsvendor.simulation.monte_carlo import (
    compare_policies,
    default_policies,
    results_to_frame,
    run_policy,
    run_simulation,
)
from newsvendor.simulation.statistics import aggregate, aggregate_run, profit_histogram

__all__ = [
    'DemandDraw',
    'generate_demand',
    'generate_random_examples',
    'lcg_uniforms',
    'run_simulation',
    'run_policy',
    'default_policies',
    'compare_policies',
    'results_to_frame',
    'aggregate',
    'aggregate_run',
    'profit_histogram',
]
