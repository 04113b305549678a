"""CLI wrapper for the sales analytics engine.

This module provides a command-line interface that runs the forecast,
anomaly detection and benchmark analyses on a daily sales CSV.
All analytics logic lives in the forecasting, anomaly and benchmark packages.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

import pandas as pd

from pos_analytics.anomaly import AnomalyConfig, detect_anomalies
from pos_analytics.benchmark import calculate_benchmark_data
from pos_analytics.config import (
    BASELINE_TYPES,
    DEFAULT_BASELINE_TYPE,
    DEFAULT_FORECAST_DAYS,
    DEFAULT_WINDOW_SIZE,
    DEFAULT_ZSCORE_THRESHOLD,
    FORECAST_PERIODS,
    METRICS,
)
from pos_analytics.formatters.console import (
    format_anomalies_for_console,
    format_benchmark_for_console,
    format_forecast_for_console,
)
from pos_analytics.forecasting import generate_forecast
from pos_analytics.series import TimeSeries, prepare_series


def load_trends(csv_path: Path) -> TimeSeries:
    """Load a daily sales CSV (date, revenue, transactions, average_ticket).

    Raises:
        FileNotFoundError: If the CSV file does not exist
        DataQualityError: If the CSV has no 'date' column
    """
    if not csv_path.exists():
        raise FileNotFoundError(f"Sales trend data not found at {csv_path}")

    df = pd.read_csv(csv_path)
    return prepare_series(df)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run sales dashboard analytics.")
    parser.add_argument(
        "--file",
        type=str,
        required=True,
        help="Path to a daily sales CSV with date, revenue, transactions, average_ticket columns.",
    )
    parser.add_argument(
        "--metric",
        type=str,
        default="revenue",
        choices=list(METRICS),
        help="Metric to forecast and scan for anomalies (default: revenue)",
    )
    parser.add_argument(
        "--horizon",
        type=int,
        default=DEFAULT_FORECAST_DAYS,
        choices=list(FORECAST_PERIODS),
        help=f"Number of days to forecast ahead (default: {DEFAULT_FORECAST_DAYS})",
    )
    parser.add_argument(
        "--baseline",
        type=str,
        default=DEFAULT_BASELINE_TYPE,
        choices=[b for b in BASELINE_TYPES if b != "custom_target"],
        help=f"Benchmark baseline (default: {DEFAULT_BASELINE_TYPE})",
    )
    parser.add_argument(
        "--window",
        type=int,
        default=DEFAULT_WINDOW_SIZE,
        help=f"Anomaly rolling window in days (default: {DEFAULT_WINDOW_SIZE})",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=DEFAULT_ZSCORE_THRESHOLD,
        help=f"Anomaly z-score threshold (default: {DEFAULT_ZSCORE_THRESHOLD})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main CLI entry point.

    Loads the CSV, runs all three analyses, and prints console reports.
    The last day of the file is benchmarked against the days before it.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print("=" * 60)
    print("Sales Analytics")
    print("=" * 60)

    print("\n[1/4] Loading sales trends...")
    series = load_trends(Path(args.file))
    print(f"[OK] Loaded {len(series)} days")
    if len(series) == 0:
        print("[INFO] No valid rows; nothing to analyze")
        return

    print(f"\n[2/4] Forecasting {args.metric} {args.horizon} days ahead...")
    forecast = generate_forecast(series, args.metric, days_ahead=args.horizon)
    print(format_forecast_for_console(forecast))

    print("\n[3/4] Detecting anomalies...")
    config = AnomalyConfig(window_size=args.window, threshold=args.threshold)
    anomalies = detect_anomalies(series, args.metric, config)
    print(format_anomalies_for_console(anomalies, args.metric))

    print("\n[4/4] Benchmarking latest day...")
    latest = series[-1]
    history = TimeSeries(series.points[:-1])
    benchmark = calculate_benchmark_data(
        current_revenue=latest.revenue,
        current_transactions=latest.transactions,
        current_average_ticket=latest.average_ticket,
        data=history,
        baseline_type=args.baseline,
    )
    print(f"Latest day: {latest.date.isoformat()}")
    print(format_benchmark_for_console(benchmark))

    print("[OK] Analytics completed successfully")


if __name__ == "__main__":
    main()
