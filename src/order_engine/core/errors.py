"""Exception types raised by the decision-table pipeline."""

from __future__ import annotations


class DecisionTableError(ValueError):
    """Base class for invalid decision-table inputs."""


class DimensionMismatchError(DecisionTableError):
    """Raised when parallel sequences or matrix axes disagree in length."""


class InvalidScenarioError(DecisionTableError):
    """Raised when a scenario fails a precondition other than dimensions."""
