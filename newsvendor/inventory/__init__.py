from newsvendor.inventory.analytical import solve
from newsvendor.inventory.profit import calculate_profit
from newsvendor.inventory.quantile import inverse_normal_cdf
from newsvendor.inventory.rounding import round_half_up
from newsvendor.inventory.service_levels import expected_outcome

__all__ = [
    'inverse_normal_cdf',
    'calculate_profit',
    'solve',
    'round_half_up',
    'expected_outcome',
]
