"""Profit and expected-value matrices over order/demand candidates."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from order_engine.core.errors import DimensionMismatchError
from order_engine.core.params import DEFAULT_PRICING, PricingParams
from order_engine.core.profit import compute_profit


def build_profit_matrix(
    orders: Sequence[int],
    demands: Sequence[int],
    pricing: PricingParams = DEFAULT_PRICING,
) -> np.ndarray:
    """Return the ``len(orders) x len(demands)`` profit matrix.

    Cell ``[i, j]`` is the profit of ordering ``orders[i]`` units when demand
    turns out to be ``demands[j]``. Empty inputs give a matrix with zero rows
    or zero columns.
    """
    profit_matrix = np.zeros((len(orders), len(demands)), dtype=np.float64)
    for i, order_qty in enumerate(orders):
        for j, demand_qty in enumerate(demands):
            profit_matrix[i, j] = compute_profit(order_qty, demand_qty, pricing)
    return _freeze(profit_matrix)


def build_expected_value_matrix(
    profit_matrix: np.ndarray | Sequence[Sequence[float]],
    probabilities: Sequence[float],
) -> np.ndarray:
    """Scale every profit column by the probability of its demand level."""
    probs = np.asarray(probabilities, dtype=np.float64)
    if probs.ndim != 1:
        raise DimensionMismatchError("probabilities must be a flat sequence.")

    profits = np.asarray(profit_matrix, dtype=np.float64)
    # A bare ``[]`` has no column axis; treat it as zero rows.
    if profits.ndim == 1 and profits.size == 0:
        profits = profits.reshape(0, probs.size)
    if profits.ndim != 2:
        raise DimensionMismatchError(
            f"profit_matrix must be two-dimensional, got shape {profits.shape}."
        )
    if profits.shape[1] != probs.size:
        raise DimensionMismatchError(
            f"profit_matrix has {profits.shape[1]} demand columns but "
            f"{probs.size} probabilities were given."
        )
    return _freeze(profits * probs[np.newaxis, :])


def sum_expected_profits(
    expected_value_matrix: np.ndarray | Sequence[Sequence[float]],
) -> np.ndarray:
    """Return the row sums of the expected-value matrix (one per order)."""
    values = np.asarray(expected_value_matrix, dtype=np.float64)
    if values.ndim == 1 and values.size == 0:
        return _freeze(np.zeros(0, dtype=np.float64))
    if values.ndim != 2:
        raise DimensionMismatchError(
            f"expected_value_matrix must be two-dimensional, got shape {values.shape}."
        )
    return _freeze(values.sum(axis=1))


def _freeze(array: np.ndarray) -> np.ndarray:
    out = np.array(array, dtype=np.float64, copy=True)
    out.setflags(write=False)
    return out
