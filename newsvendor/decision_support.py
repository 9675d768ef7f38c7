"""
Support functions for choosing between simulated order policies.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from newsvendor.models import AnalyticalSolution, PolicyStatistics


def _min_max_score(series: pd.Series, higher_is_better: bool) -> pd.Series:
    values = pd.to_numeric(series, errors="coerce").astype(float)
    span = values.max() - values.min()
    if np.isnan(span) or np.isclose(span, 0.0):
        return pd.Series(1.0, index=values.index)
    normalized = (values - values.min()) / span
    return normalized if higher_is_better else (1.0 - normalized)


def rank_policies(
    stats_df: pd.DataFrame,
    min_sellout: float = 0.0,
    weight_profit: float = 0.6,
    weight_risk: float = 0.25,
    weight_service: float = 0.15,
    below_target_penalty: float = 0.35,
) -> pd.DataFrame:
    """Rank policies from a statistics table (one row per PolicyStatistics)."""
    ranked = stats_df.copy()

    weights = np.array([weight_profit, weight_risk, weight_service], dtype=float)
    if weights.sum() <= 0:
        weights = np.array([0.6, 0.25, 0.15], dtype=float)
    weights = weights / weights.sum()

    ranked["score_profit"] = _min_max_score(ranked["average_profit"], higher_is_better=True)
    ranked["score_risk"] = _min_max_score(ranked["std_dev_profit"], higher_is_better=False)
    ranked["score_service"] = _min_max_score(ranked["sellout_percentage"], higher_is_better=True)
    ranked["meets_sellout"] = ranked["sellout_percentage"] >= min_sellout

    ranked["decision_score"] = (
        ranked["score_profit"] * weights[0]
        + ranked["score_risk"] * weights[1]
        + ranked["score_service"] * weights[2]
    ) * 100

    ranked["adjusted_score"] = np.where(
        ranked["meets_sellout"],
        ranked["decision_score"],
        ranked["decision_score"] * (1.0 - below_target_penalty),
    )

    ranked = ranked.sort_values(
        ["meets_sellout", "adjusted_score", "average_profit"],
        ascending=[False, False, False],
    ).reset_index(drop=True)
    return ranked


def best_policy(stats: Sequence[PolicyStatistics]) -> PolicyStatistics | None:
    """Highest average profit; first one wins ties."""
    valid = [s for s in stats if s.total_simulations > 0]
    if not valid:
        return None
    best = valid[0]
    for current in valid[1:]:
        if current.average_profit > best.average_profit:
            best = current
    return best


def most_stable_policy(stats: Sequence[PolicyStatistics]) -> PolicyStatistics | None:
    """Lowest profit standard deviation; first one wins ties."""
    valid = [s for s in stats if s.total_simulations > 0]
    if not valid:
        return None
    stable = valid[0]
    for current in valid[1:]:
        if current.std_dev_profit < stable.std_dev_profit:
            stable = current
    return stable


def policy_justification(
    stats: Sequence[PolicyStatistics],
    solution: AnalyticalSolution | None = None,
) -> list[str]:
    best = best_policy(stats)
    if best is None:
        return ["Not enough simulation data to justify a recommendation."]

    stable = most_stable_policy(stats)
    valid = [s for s in stats if s.total_simulations > 0]
    avg_profit = float(np.mean([s.average_profit for s in valid]))

    reasons = [
        (
            f"Recommend {best.policy_name} (Q={best.order_quantity}): highest average profit "
            f"of {best.average_profit:,.2f} over {best.total_simulations} scenarios."
        ),
        (
            f"Average profit {best.average_profit - avg_profit:,.2f} above the mean "
            f"of the compared policies ({avg_profit:,.2f})."
        ),
    ]

    if stable is best:
        reasons.append("It also shows the lowest profit variability.")
    else:
        reasons.append(
            f"{stable.policy_name} is the most stable "
            f"(profit std dev {stable.std_dev_profit:,.2f}); "
            f"{best.policy_name} trades some stability for profit."
        )

    if best.sellout_percentage > 50:
        reasons.append(
            f"No stockout in {best.sellout_percentage:.1f}% of scenarios, "
            "so unsold-inventory risk dominates."
        )
    else:
        reasons.append(
            f"Stockouts in {100 - best.sellout_percentage:.1f}% of scenarios, "
            "so unmet-demand risk dominates."
        )

    if solution is not None:
        text = (
            f"Analytical optimum Q*={solution.optimal_quantity} "
            f"(critical ratio {solution.critical_ratio:.2%}, z={solution.z_value:.4f})."
        )
        if solution.co > 0:
            text += f" Shortage cost is {solution.cu / solution.co:.2f}x the overage cost."
        reasons.append(text)

    return reasons
