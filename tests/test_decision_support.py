import pandas as pd
import pytest

from newsvendor.decision_support import (
    best_policy,
    most_stable_policy,
    policy_justification,
    rank_policies,
)
from newsvendor.inventory.analytical import solve
from newsvendor.models import PolicyStatistics


def _stats(name, q, profit, std, sellout, n=100):
    return PolicyStatistics(
        policy_name=name,
        order_quantity=q,
        average_profit=profit,
        std_dev_profit=std,
        sellout_percentage=sellout,
        total_simulations=n,
    )


@pytest.fixture
def trio():
    return [
        _stats("Policy 1", 7000, 225000.0, 20000.0, 50.0),
        _stats("Policy 2", 6800, 221000.0, 15000.0, 40.0),
        _stats("Optimal Policy", 7420, 228000.0, 24000.0, 70.0),
    ]


def test_rank_policies_orders_by_adjusted_score(trio):
    table = pd.DataFrame([s.as_dict() for s in trio])
    ranked = rank_policies(table)
    assert ranked.loc[0, "policy_name"] == "Optimal Policy"
    assert ranked["adjusted_score"].is_monotonic_decreasing
    assert ranked["meets_sellout"].all()


def test_rank_policies_penalises_low_sellout(trio):
    table = pd.DataFrame([s.as_dict() for s in trio])
    ranked = rank_policies(table, min_sellout=60.0)
    assert ranked.loc[0, "policy_name"] == "Optimal Policy"
    assert list(ranked["meets_sellout"]) == [True, False, False]


def test_rank_policies_with_identical_rows():
    table = pd.DataFrame([_stats(f"P{i}", 100, 10.0, 1.0, 50.0).as_dict() for i in range(3)])
    ranked = rank_policies(table)
    assert list(ranked["decision_score"]) == pytest.approx([100.0] * 3)


def test_rank_policies_falls_back_to_default_weights(trio):
    table = pd.DataFrame([s.as_dict() for s in trio])
    ranked = rank_policies(table, weight_profit=0, weight_risk=0, weight_service=0)
    assert ranked["decision_score"].notna().all()


def test_best_and_most_stable(trio):
    assert best_policy(trio).policy_name == "Optimal Policy"
    assert most_stable_policy(trio).policy_name == "Policy 2"


def test_empty_runs_are_ignored():
    empty = PolicyStatistics(policy_name="Empty", order_quantity=1)
    assert best_policy([empty]) is None
    assert most_stable_policy([]) is None
    assert policy_justification([empty]) == ["Not enough simulation data to justify a recommendation."]


def test_justification_names_the_best_policy(trio, params):
    reasons = policy_justification(trio, solve(params))
    assert "Optimal Policy" in reasons[0]
    assert any("Policy 2 is the most stable" in r for r in reasons)
    assert any("Q*=7420" in r for r in reasons)
    assert any("2.33x" in r for r in reasons)


def test_justification_when_best_is_also_most_stable():
    stats = [_stats("A", 10, 100.0, 1.0, 30.0), _stats("B", 12, 90.0, 5.0, 60.0)]
    reasons = policy_justification(stats)
    assert "lowest profit variability" in reasons[2]
    assert "unmet-demand" in reasons[3]
