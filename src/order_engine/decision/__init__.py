"""Expected-profit decision table over discrete order/demand candidates."""

from order_engine.decision.analysis import DecisionAnalysis, run_decision_analysis
from order_engine.decision.matrix import (
    build_expected_value_matrix,
    build_profit_matrix,
    sum_expected_profits,
)
from order_engine.decision.selection import OptimalOrder, select_optimal_order

__all__ = [
    "DecisionAnalysis",
    "OptimalOrder",
    "build_expected_value_matrix",
    "build_profit_matrix",
    "run_decision_analysis",
    "select_optimal_order",
    "sum_expected_profits",
]
