"""Print the expected-profit decision table for the reference scenario."""

from __future__ import annotations

import argparse
from dataclasses import replace
import math
import sys

from order_engine.core.errors import DecisionTableError
from order_engine.core.params import PricingParams, default_scenario
from order_engine.decision.analysis import run_decision_analysis
from order_engine.report.render import REPORT_FORMATS, render_report


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compute expected profit per order quantity and pick the best one."
    )
    parser.add_argument(
        "--format",
        choices=REPORT_FORMATS,
        default="text",
        help="Output format for the report (default: text).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on conceptual warnings (probability sum, empty candidates).",
    )
    parser.add_argument(
        "--sum-atol",
        type=float,
        default=1e-9,
        help="Tolerance for the probabilities-sum-to-one check.",
    )
    parser.add_argument("--first-half-price", type=float, default=None)
    parser.add_argument("--second-half-price", type=float, default=None)
    parser.add_argument("--unit-cost", type=float, default=None)
    args = parser.parse_args(argv)
    if not math.isfinite(args.sum_atol) or args.sum_atol < 0.0:
        parser.error("--sum-atol must be a non-negative finite number.")

    scenario = default_scenario(pricing=_resolve_pricing(args))
    try:
        analysis = run_decision_analysis(
            scenario,
            strict=args.strict,
            sum_atol=args.sum_atol,
        )
    except DecisionTableError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(render_report(analysis, fmt=args.format))
    if analysis.quality.conceptual_warnings:
        print(
            "Conceptual warnings: "
            + ", ".join(check.name for check in analysis.quality.conceptual_warnings),
            file=sys.stderr,
        )
    return 0


def _resolve_pricing(args: argparse.Namespace) -> PricingParams:
    overrides = {
        name: value
        for name, value in (
            ("first_half_price", args.first_half_price),
            ("second_half_price", args.second_half_price),
            ("unit_cost", args.unit_cost),
        )
        if value is not None
    }
    return replace(PricingParams(), **overrides)


if __name__ == "__main__":
    raise SystemExit(main())
