"""Text, CSV, JSON and YAML renderings of decision tables."""

from __future__ import annotations

from collections.abc import Sequence
import json
import sys
from typing import Any, TextIO

import numpy as np
import pandas as pd
import yaml

from order_engine.core.errors import DimensionMismatchError
from order_engine.decision.analysis import DecisionAnalysis

TABLE_FORMATS: tuple[str, ...] = ("text", "csv", "json")
REPORT_FORMATS: tuple[str, ...] = ("text", "csv", "json", "yaml")

CORNER_LABEL = "Order\\Demand"
LABEL_WIDTH = 12
CELL_WIDTH = 11

PROFIT_TITLE = "Profit Matrix"
EXPECTED_VALUES_TITLE = "Expected Values (eij*qj)"


def render_table(
    title: str,
    row_labels: Sequence[Any],
    col_labels: Sequence[Any],
    matrix: np.ndarray | Sequence[Sequence[float]],
    fmt: str = "text",
) -> str:
    """Render ``matrix`` with labelled rows and columns.

    ``text`` gives the fixed-width console table; ``csv`` and ``json`` go
    through a DataFrame with values rounded to cents.
    """
    normalized_fmt = fmt.lower()
    if normalized_fmt not in TABLE_FORMATS:
        raise ValueError(f"fmt must be one of {TABLE_FORMATS}, got {fmt!r}.")
    values = _as_matrix(matrix, n_rows=len(row_labels), n_cols=len(col_labels))

    if normalized_fmt == "text":
        header = f"{CORNER_LABEL:<{LABEL_WIDTH}}" + "".join(
            f"{label!s:>{CELL_WIDTH}}" for label in col_labels
        )
        lines = [title, header]
        for label, row in zip(row_labels, values):
            lines.append(
                f"{label!s:<{LABEL_WIDTH}}"
                + "".join(f"{value:>{CELL_WIDTH}.2f}" for value in row)
            )
        return "\n".join(lines) + "\n"

    df = pd.DataFrame(
        values,
        index=[str(label) for label in row_labels],
        columns=[str(label) for label in col_labels],
    ).round(2)
    if normalized_fmt == "csv":
        return df.to_csv(index_label=CORNER_LABEL)
    return json.dumps({"title": title, "table": json.loads(df.to_json(orient="split"))})


def print_table(
    orders: Sequence[int],
    demands: Sequence[int],
    matrix: np.ndarray | Sequence[Sequence[float]],
    title: str,
    stream: TextIO | None = None,
) -> None:
    """Write the fixed-width table for an order x demand matrix."""
    out = stream if stream is not None else sys.stdout
    out.write(render_table(title, _order_labels(orders), list(demands), matrix))


def render_report(analysis: DecisionAnalysis, fmt: str = "text") -> str:
    """Render the full decision report for one analysis."""
    normalized_fmt = fmt.lower()
    if normalized_fmt not in REPORT_FORMATS:
        raise ValueError(f"fmt must be one of {REPORT_FORMATS}, got {fmt!r}.")

    if normalized_fmt == "json":
        return json.dumps(analysis.to_dict(), indent=2) + "\n"
    if normalized_fmt == "yaml":
        return yaml.safe_dump(analysis.to_dict(), sort_keys=False)

    scenario = analysis.scenario
    row_labels = _order_labels(scenario.orders)
    col_labels = list(scenario.demands)
    if normalized_fmt == "csv":
        profits = pd.DataFrame(
            {
                "order_qty": list(scenario.orders),
                "expected_profit": [float(value) for value in analysis.expected_profits],
            }
        ).round(2)
        return "\n".join(
            [
                render_table(PROFIT_TITLE, row_labels, col_labels, analysis.profit_matrix, "csv"),
                render_table(
                    EXPECTED_VALUES_TITLE,
                    row_labels,
                    col_labels,
                    analysis.expected_value_matrix,
                    "csv",
                ),
                profits.to_csv(index=False),
            ]
        )

    sections = [
        render_table(PROFIT_TITLE, row_labels, col_labels, analysis.profit_matrix),
        render_table(
            EXPECTED_VALUES_TITLE,
            row_labels,
            col_labels,
            analysis.expected_value_matrix,
        ),
        _expected_profit_listing(scenario.orders, analysis.expected_profits),
        _optimal_summary(analysis),
    ]
    return "\n".join(sections)


def _expected_profit_listing(
    orders: Sequence[int],
    expected_profits: np.ndarray,
) -> str:
    lines = ["Expected Profits:"]
    for order_qty, value in zip(orders, expected_profits):
        lines.append(f"For Order {order_qty}: Expected Profit = {value:.2f} dollars")
    return "\n".join(lines) + "\n"


def _optimal_summary(analysis: DecisionAnalysis) -> str:
    if analysis.optimal is None:
        reason = "no order candidates" if not analysis.scenario.orders else "no demand levels"
        return f"Optimal order quantity: none ({reason})\n"
    return (
        f"Optimal order quantity: {analysis.optimal.order_qty}\n"
        f"Optimal expected profit: {analysis.optimal.expected_profit:.2f} dollars\n"
    )


def _order_labels(orders: Sequence[int]) -> list[str]:
    return [f"Order {order_qty}" for order_qty in orders]


def _as_matrix(
    matrix: np.ndarray | Sequence[Sequence[float]],
    *,
    n_rows: int,
    n_cols: int,
) -> np.ndarray:
    values = np.asarray(matrix, dtype=np.float64)
    if values.ndim == 1 and values.size == 0:
        values = values.reshape(0, n_cols)
    if values.ndim != 2 or values.shape != (n_rows, n_cols):
        raise DimensionMismatchError(
            f"Matrix shape {values.shape} does not match {n_rows} row labels "
            f"and {n_cols} column labels."
        )
    return values
