import numpy as np
import pytest
from scipy.stats import norm

from newsvendor.inventory.analytical import critical_ratio, solve
from newsvendor.inventory.rounding import round_half_up
from newsvendor.inventory.service_levels import expected_outcome, standard_loss
from newsvendor.models import SimulationParameters
from newsvendor.simulation.monte_carlo import run_simulation
from newsvendor.simulation.statistics import aggregate


def test_reference_solution(params):
    solution = solve(params)
    assert solution.cu == 35
    assert solution.co == 15
    assert solution.critical_ratio == pytest.approx(0.7)
    assert solution.z_value == pytest.approx(0.5244, abs=1e-4)
    assert solution.optimal_quantity == 7420


def test_equal_costs_order_the_mean():
    p = SimulationParameters(mean=500, std_dev=40, profit=10, excess_loss=10)
    solution = solve(p)
    assert solution.critical_ratio == 0.5
    assert solution.z_value == pytest.approx(0.0, abs=1e-12)
    assert solution.optimal_quantity == 500


def test_no_uncertainty_orders_the_mean():
    p = SimulationParameters(mean=7000, std_dev=0, profit=35, excess_loss=15)
    assert solve(p).optimal_quantity == 7000


def test_cheap_overage_orders_more_than_expensive_overage():
    cheap = SimulationParameters(mean=1000, std_dev=100, profit=50, excess_loss=1)
    dear = SimulationParameters(mean=1000, std_dev=100, profit=1, excess_loss=50)
    assert solve(cheap).optimal_quantity > 1000 > solve(dear).optimal_quantity


def test_zero_overage_cost_has_no_solution():
    p = SimulationParameters(mean=7000, std_dev=800, profit=35, excess_loss=0)
    with pytest.raises(ValueError, match="critical ratio"):
        solve(p)


def test_critical_ratio():
    assert critical_ratio(35, 15) == pytest.approx(0.7)
    assert critical_ratio(1, 0) == 1.0


@pytest.mark.parametrize("x, expected", [
    (2.5, 3), (-2.5, -2), (1.49, 1), (7419.52, 7420), (-0.5, 0), (0.0, 0), (-1.6, -2),
])
def test_round_half_up(x, expected):
    assert round_half_up(x) == expected


def test_standard_loss_at_zero():
    assert standard_loss(0.0) == pytest.approx(norm.pdf(0.0))


def test_expected_outcome_at_the_mean(params):
    outcome = expected_outcome(7000, params)
    shortage = 800 * norm.pdf(0.0)
    assert outcome["expected_shortage"] == pytest.approx(shortage)
    assert outcome["expected_sold"] == pytest.approx(7000 - shortage)
    assert outcome["expected_excess"] == pytest.approx(shortage)
    assert outcome["expected_profit"] == pytest.approx((7000 - shortage) * 35 - shortage * 15)
    assert outcome["in_stock_probability"] == pytest.approx(0.5)


def test_expected_outcome_without_uncertainty():
    p = SimulationParameters(mean=100, std_dev=0, profit=2, excess_loss=1)
    above = expected_outcome(120, p)
    assert above["expected_excess"] == 20
    assert above["expected_profit"] == 180
    assert above["in_stock_probability"] == 1.0
    below = expected_outcome(80, p)
    assert below["expected_shortage"] == 20
    assert below["expected_profit"] == 160
    assert below["in_stock_probability"] == 0.0


def test_optimal_quantity_maximises_expected_profit(params):
    q_star = solve(params).optimal_quantity
    best = expected_outcome(q_star, params)["expected_profit"]
    for q in (q_star - 200, q_star - 50, q_star + 50, q_star + 200):
        assert expected_outcome(q, params)["expected_profit"] < best


def test_simulation_agrees_with_closed_form(params):
    q_star = solve(params).optimal_quantity
    results = run_simulation(q_star, params, 20000, seed=2024, fully_seeded=True)
    stats = aggregate("Optimal Policy", q_star, results)
    theory = expected_outcome(q_star, params)
    assert stats.average_profit == pytest.approx(theory["expected_profit"], rel=0.01)
    assert stats.sellout_percentage / 100 == pytest.approx(theory["in_stock_probability"], abs=0.02)
    assert np.isfinite(stats.std_dev_profit)
