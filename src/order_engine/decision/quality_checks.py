"""Precondition checks for decision-table scenarios."""

from __future__ import annotations

from dataclasses import dataclass
import math

from order_engine.core.errors import DimensionMismatchError, InvalidScenarioError
from order_engine.core.params import Scenario

DIMENSION_CHECK = "probability_dimensions"


@dataclass(frozen=True)
class CheckResult:
    """One quality-check result."""

    name: str
    passed: bool
    details: str
    metric: float | None = None

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "name": self.name,
            "passed": self.passed,
            "details": self.details,
        }
        if self.metric is not None:
            payload["metric"] = self.metric
        return payload


@dataclass(frozen=True)
class QualityReport:
    """Aggregated hard/conceptual checks."""

    hard_checks: tuple[CheckResult, ...]
    conceptual_checks: tuple[CheckResult, ...]
    strict_conceptual: bool

    @property
    def hard_failures(self) -> tuple[CheckResult, ...]:
        return tuple(check for check in self.hard_checks if not check.passed)

    @property
    def conceptual_warnings(self) -> tuple[CheckResult, ...]:
        return tuple(check for check in self.conceptual_checks if not check.passed)

    @property
    def passed(self) -> bool:
        if self.hard_failures:
            return False
        if self.strict_conceptual and self.conceptual_warnings:
            return False
        return True

    def to_dict(self) -> dict[str, object]:
        return {
            "hard_checks": [check.to_dict() for check in self.hard_checks],
            "conceptual_checks": [check.to_dict() for check in self.conceptual_checks],
            "strict_conceptual": self.strict_conceptual,
            "passed": self.passed,
        }


def run_quality_checks(
    scenario: Scenario,
    *,
    sum_atol: float = 1e-9,
    strict_conceptual: bool = False,
) -> QualityReport:
    """Run hard + conceptual checks against a scenario."""
    hard_checks = (
        _check_probability_dimensions(scenario),
        _check_probability_range(scenario),
        _check_non_negative_quantities(scenario),
        _check_pricing_domain(scenario),
    )
    conceptual_checks = (
        _check_probability_sum(scenario, sum_atol=sum_atol),
        _check_non_empty_candidates(scenario),
    )
    return QualityReport(
        hard_checks=hard_checks,
        conceptual_checks=conceptual_checks,
        strict_conceptual=strict_conceptual,
    )


def _check_probability_dimensions(scenario: Scenario) -> CheckResult:
    try:
        scenario.validate()
    except DimensionMismatchError as exc:
        return CheckResult(name=DIMENSION_CHECK, passed=False, details=str(exc))
    return CheckResult(
        name=DIMENSION_CHECK,
        passed=True,
        details=f"One probability per demand level ({len(scenario.demands)}).",
    )


def _check_probability_range(scenario: Scenario) -> CheckResult:
    bad = [
        prob
        for prob in scenario.probabilities
        if math.isnan(prob) or prob < 0.0 or prob > 1.0
    ]
    if bad:
        details = f"Probabilities outside [0, 1]: {bad}."
    else:
        details = "All probabilities lie in [0, 1]."
    return CheckResult(
        name="probability_range",
        passed=not bad,
        details=details,
        metric=float(len(bad)),
    )


def _check_non_negative_quantities(scenario: Scenario) -> CheckResult:
    negative_orders = [order for order in scenario.orders if order < 0]
    negative_demands = [demand for demand in scenario.demands if demand < 0]
    passed = not negative_orders and not negative_demands
    if passed:
        details = "All order and demand quantities are non-negative."
    else:
        details = (
            f"Negative orders: {negative_orders}; negative demands: {negative_demands}."
        )
    return CheckResult(name="non_negative_quantities", passed=passed, details=details)


def _check_pricing_domain(scenario: Scenario) -> CheckResult:
    try:
        scenario.pricing.validate()
    except InvalidScenarioError as exc:
        return CheckResult(name="pricing_domain", passed=False, details=str(exc))
    return CheckResult(
        name="pricing_domain",
        passed=True,
        details="Prices and unit cost are non-negative.",
    )


def _check_probability_sum(scenario: Scenario, *, sum_atol: float) -> CheckResult:
    total = math.fsum(scenario.probabilities)
    passed = abs(total - 1.0) <= sum_atol
    return CheckResult(
        name="probability_sum",
        passed=passed,
        details=f"Probabilities sum to {total:.12g} (atol={sum_atol:g}).",
        metric=total,
    )


def _check_non_empty_candidates(scenario: Scenario) -> CheckResult:
    passed = bool(scenario.orders) and bool(scenario.demands)
    if passed:
        details = "Order and demand candidate lists are non-empty."
    else:
        details = (
            f"Empty candidates: {len(scenario.orders)} orders, "
            f"{len(scenario.demands)} demand levels; no optimal order exists."
        )
    return CheckResult(name="non_empty_candidates", passed=passed, details=details)
