"""Two-tier profit model for a single order/demand outcome."""

from __future__ import annotations

from order_engine.core.params import DEFAULT_PRICING, PricingParams


def compute_profit(
    order_qty: int,
    demand_qty: int,
    pricing: PricingParams = DEFAULT_PRICING,
) -> float:
    """Return profit for ordering ``order_qty`` units when demand is ``demand_qty``.

    Units up to demand sell at the first-half price; any surplus is liquidated
    at the second-half price. Every ordered unit costs ``unit_cost``.
    Negative quantities are not rejected.
    """
    sold = min(order_qty, demand_qty)
    surplus = max(0, order_qty - demand_qty)
    revenue = pricing.first_half_price * sold + pricing.second_half_price * surplus
    total_cost = pricing.unit_cost * order_qty
    return float(revenue - total_cost)
