"""Tests for profit and expected-value matrix builders."""

from __future__ import annotations

import numpy as np
import pytest

from order_engine.core.errors import DimensionMismatchError
from order_engine.core.profit import compute_profit
from order_engine.decision.matrix import (
    build_expected_value_matrix,
    build_profit_matrix,
    sum_expected_profits,
)


@pytest.mark.parametrize("n_orders,n_demands", [(1, 1), (2, 5), (5, 2), (4, 4)])
def test_profit_matrix_shape(n_orders: int, n_demands: int) -> None:
    orders = [10 * (i + 1) for i in range(n_orders)]
    demands = [7 * (j + 1) for j in range(n_demands)]
    matrix = build_profit_matrix(orders, demands)
    assert matrix.shape == (n_orders, n_demands)


def test_profit_matrix_cells_match_profit_function() -> None:
    orders = [100, 150, 200, 250, 300]
    demands = [100, 150, 200, 250, 300]
    matrix = build_profit_matrix(orders, demands)
    for i, order_qty in enumerate(orders):
        for j, demand_qty in enumerate(demands):
            assert matrix[i][j] == compute_profit(order_qty, demand_qty)
    assert matrix[0][0] == pytest.approx(2_400_000.0)
    assert matrix[4][0] == pytest.approx(400_000.0)


def test_profit_matrix_is_read_only() -> None:
    matrix = build_profit_matrix([1, 2], [1])
    with pytest.raises(ValueError):
        matrix[0, 0] = 5.0


@pytest.mark.parametrize(
    "orders,demands,shape",
    [([], [1, 2, 3], (0, 3)), ([1, 2], [], (2, 0)), ([], [], (0, 0))],
)
def test_profit_matrix_empty_inputs(orders, demands, shape) -> None:
    assert build_profit_matrix(orders, demands).shape == shape


def test_expected_values_scale_columns() -> None:
    profits = build_profit_matrix([1, 2, 3], [1, 3])
    probabilities = [0.25, 0.75]
    expected = build_expected_value_matrix(profits, probabilities)
    assert expected.shape == profits.shape
    for i in range(profits.shape[0]):
        for j in range(profits.shape[1]):
            assert expected[i][j] == pytest.approx(profits[i][j] * probabilities[j])
    assert expected.tolist() == [[6000.0, 18000.0], [3500.0, 36000.0], [1000.0, 54000.0]]


def test_expected_values_accept_nested_lists() -> None:
    expected = build_expected_value_matrix([[10.0, -20.0]], (0.5, 0.5))
    assert expected.tolist() == [[5.0, -10.0]]


def test_expected_values_do_not_alias_input() -> None:
    profits = np.array([[1.0, 2.0]])
    expected = build_expected_value_matrix(profits, [1.0, 1.0])
    profits[0, 0] = 99.0
    assert expected[0, 0] == 1.0


@pytest.mark.parametrize("probabilities", [[0.5], [0.2, 0.3, 0.5]])
def test_expected_values_reject_probability_length_mismatch(probabilities) -> None:
    profits = build_profit_matrix([1, 2], [1, 2])
    with pytest.raises(DimensionMismatchError, match="probabilities"):
        build_expected_value_matrix(profits, probabilities)


def test_expected_values_reject_non_matrix() -> None:
    with pytest.raises(DimensionMismatchError):
        build_expected_value_matrix([1.0, 2.0], [0.5, 0.5])


def test_expected_values_zero_rows() -> None:
    profits = build_profit_matrix([], [1, 2])
    assert build_expected_value_matrix(profits, [0.4, 0.6]).shape == (0, 2)
    assert build_expected_value_matrix([], [0.4, 0.6]).shape == (0, 2)


def test_row_sums() -> None:
    matrix = [[1.0, 2.0, 3.5], [-4.0, 0.0, 1.0]]
    sums = sum_expected_profits(matrix)
    assert sums.tolist() == [sum(row) for row in matrix]


def test_row_sums_degenerate_shapes() -> None:
    assert sum_expected_profits(np.zeros((0, 3))).shape == (0,)
    assert sum_expected_profits([]).shape == (0,)
    assert sum_expected_profits(np.zeros((2, 0))).tolist() == [0.0, 0.0]


def test_row_sums_reject_flat_vector() -> None:
    with pytest.raises(DimensionMismatchError):
        sum_expected_profits([1.0, 2.0])
