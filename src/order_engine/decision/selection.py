"""Optimal order selection over expected profits."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from order_engine.core.errors import DimensionMismatchError


@dataclass(frozen=True)
class OptimalOrder:
    """Order candidate with the highest expected profit."""

    index: int
    order_qty: int
    expected_profit: float

    def to_dict(self) -> dict[str, object]:
        return {
            "index": self.index,
            "order_qty": self.order_qty,
            "expected_profit": self.expected_profit,
        }


def select_optimal_order(
    expected_profits: Sequence[float],
    orders: Sequence[int],
) -> OptimalOrder | None:
    """Return the argmax order, or ``None`` when there are no candidates.

    Only a strictly larger value replaces the running best, so ties resolve
    to the lowest index.
    """
    if len(expected_profits) != len(orders):
        raise DimensionMismatchError(
            f"Got {len(expected_profits)} expected profits for {len(orders)} orders."
        )

    best: OptimalOrder | None = None
    for index, (order_qty, value) in enumerate(zip(orders, expected_profits)):
        if best is None or value > best.expected_profit:
            best = OptimalOrder(
                index=index,
                order_qty=int(order_qty),
                expected_profit=float(value),
            )
    return best
