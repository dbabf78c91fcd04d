"""Pricing parameters and decision scenarios."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any
import math

from order_engine.core.errors import DimensionMismatchError, InvalidScenarioError


@dataclass(frozen=True)
class PricingParams:
    """Two-tier unit prices and the linear unit cost.

    Attributes:
        first_half_price: Price for units sold up to realized demand.
        second_half_price: Liquidation price for units produced above demand.
        unit_cost: Production cost charged on every ordered unit.
    """

    first_half_price: float = 49_000.0
    second_half_price: float = 15_000.0
    unit_cost: float = 25_000.0

    def validate(self) -> None:
        for name in ("first_half_price", "second_half_price", "unit_cost"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidScenarioError(f"{name} must be finite, got {value}.")
            if value < 0.0:
                raise InvalidScenarioError(f"{name} must be non-negative.")

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


DEFAULT_PRICING = PricingParams()


@dataclass(frozen=True)
class Scenario:
    """Candidate order quantities, demand levels and demand probabilities."""

    orders: tuple[int, ...]
    demands: tuple[int, ...]
    probabilities: tuple[float, ...]
    pricing: PricingParams = field(default_factory=PricingParams)

    def validate(self) -> None:
        """Check that probabilities run parallel to the demand levels."""
        if len(self.probabilities) != len(self.demands):
            raise DimensionMismatchError(
                f"{len(self.probabilities)} probabilities for {len(self.demands)} demand levels."
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert scenario to a plain dict."""
        return {
            "orders": [int(order) for order in self.orders],
            "demands": [int(demand) for demand in self.demands],
            "probabilities": [float(prob) for prob in self.probabilities],
            "pricing": self.pricing.to_dict(),
        }


def default_scenario(pricing: PricingParams | None = None) -> Scenario:
    """Return the five-by-five reference scenario."""
    return Scenario(
        orders=(100, 150, 200, 250, 300),
        demands=(100, 150, 200, 250, 300),
        probabilities=(0.1, 0.15, 0.25, 0.3, 0.2),
        pricing=pricing if pricing is not None else DEFAULT_PRICING,
    )
