"""End-to-end expected-profit analysis for one scenario."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from order_engine.core.errors import DimensionMismatchError, InvalidScenarioError
from order_engine.core.params import Scenario
from order_engine.decision.matrix import (
    build_expected_value_matrix,
    build_profit_matrix,
    sum_expected_profits,
)
from order_engine.decision.quality_checks import (
    DIMENSION_CHECK,
    QualityReport,
    run_quality_checks,
)
from order_engine.decision.selection import OptimalOrder, select_optimal_order


@dataclass(frozen=True)
class DecisionAnalysis:
    """Matrices, expected profits and the chosen order for a scenario."""

    scenario: Scenario
    profit_matrix: np.ndarray
    expected_value_matrix: np.ndarray
    expected_profits: np.ndarray
    optimal: OptimalOrder | None
    quality: QualityReport

    def to_dict(self) -> dict[str, Any]:
        """Convert the analysis to plain Python containers."""
        return {
            "scenario": self.scenario.to_dict(),
            "profit_matrix": self.profit_matrix.tolist(),
            "expected_value_matrix": self.expected_value_matrix.tolist(),
            "expected_profits": [
                {"order_qty": int(order_qty), "expected_profit": float(value)}
                for order_qty, value in zip(self.scenario.orders, self.expected_profits)
            ],
            "optimal": self.optimal.to_dict() if self.optimal is not None else None,
            "quality": self.quality.to_dict(),
        }


def run_decision_analysis(
    scenario: Scenario,
    *,
    strict: bool = False,
    sum_atol: float = 1e-9,
) -> DecisionAnalysis:
    """Validate ``scenario`` and compute the full decision table.

    Raises:
        DimensionMismatchError: probabilities do not match the demand levels.
        InvalidScenarioError: any other hard check fails, or a conceptual
            check fails while ``strict`` is set.
    """
    quality = run_quality_checks(
        scenario,
        sum_atol=sum_atol,
        strict_conceptual=strict,
    )
    for failure in quality.hard_failures:
        if failure.name == DIMENSION_CHECK:
            raise DimensionMismatchError(failure.details)
    if not quality.passed:
        failed = quality.hard_failures or quality.conceptual_warnings
        raise InvalidScenarioError(
            "; ".join(f"{check.name}: {check.details}" for check in failed)
        )

    profit_matrix = build_profit_matrix(
        scenario.orders,
        scenario.demands,
        scenario.pricing,
    )
    expected_value_matrix = build_expected_value_matrix(
        profit_matrix,
        scenario.probabilities,
    )
    expected_profits = sum_expected_profits(expected_value_matrix)
    # Without demand levels every row sums to zero; no order is preferable.
    optimal = (
        select_optimal_order(expected_profits, scenario.orders)
        if scenario.demands
        else None
    )

    return DecisionAnalysis(
        scenario=scenario,
        profit_matrix=profit_matrix,
        expected_value_matrix=expected_value_matrix,
        expected_profits=expected_profits,
        optimal=optimal,
        quality=quality,
    )
