"""Console output formatting utilities."""

from __future__ import annotations

import math
import re

from pos_analytics.anomaly.types import AnomalyDetectionResult
from pos_analytics.benchmark.api import BenchmarkData
from pos_analytics.formatters.palette import baseline_label, benchmark_status_label
from pos_analytics.forecasting.api import ForecastResult
from pos_analytics.forecasting.reliability import assess_forecast_reliability

METRIC_NAMES = {
    "revenue": "Revenue",
    "transactions": "Transactions",
    "average_ticket": "Average Ticket",
}


def sanitize_for_console(text: str) -> str:
    """Sanitize text for console output by removing non-ASCII characters and HTML tags.

    This prevents UnicodeEncodeError on Windows consoles using cp1252 encoding.

    Args:
        text: Text that may contain symbols such as R² and HTML tags

    Returns:
        Sanitized text safe for console output
    """
    text = text.replace("²", "2")
    text = re.sub(r"[^\x00-\x7F]+", "", text)
    text = re.sub(r"<[^>]+>", "", text)
    return text


def _format_value(value: float, metric: str) -> str:
    if metric == "transactions":
        return f"{value:,.0f}"
    return f"{value:,.2f}"


def format_forecast_for_console(result: ForecastResult | None) -> str:
    """Build a human-readable forecast report with trend statistics and reliability.

    Args:
        result: ForecastResult, or None when the forecast is unavailable

    Returns:
        Human-readable text string for console output
    """
    if result is None:
        return "Forecast unavailable: not enough historical data."

    metric_display = METRIC_NAMES.get(result.metric, result.metric)
    reliability = assess_forecast_reliability(result)

    lines = [
        f"{metric_display} Forecast - Next {len(result.forecast)} Days",
        "=" * 60,
        f"History: {len(result.historical)} days "
        f"({result.historical.first_date} to {result.historical.last_date})",
        f"Trend: {result.slope:+,.2f} per day, R2 = {result.r_squared:.3f}",
        f"Confidence: {reliability.confidence}"
        + ("" if reliability.is_reliable else " (unreliable)"),
    ]
    for warning in reliability.warnings:
        lines.append(f"  ! {warning}")
    lines.append("")

    total = 0.0
    for point in result.forecast:
        lines.append(
            f"  {point.date.isoformat()}: {_format_value(point.value, result.metric)} "
            f"[{_format_value(point.lower_bound, result.metric)} - "
            f"{_format_value(point.upper_bound, result.metric)}]"
        )
        total += point.value

    lines.append(f"  Total: {_format_value(total, result.metric)}")
    return sanitize_for_console("\n".join(lines))


def format_anomalies_for_console(result: AnomalyDetectionResult, metric: str | None = None) -> str:
    """Build a human-readable anomaly report, newest first."""
    title = "Anomalies"
    if metric is not None:
        title = f"{METRIC_NAMES.get(metric, metric)} Anomalies"

    lines = [
        title,
        "=" * 60,
        f"Window: {result.window_size} days, threshold: {result.threshold} sigma",
        f"Total: {result.total_anomalies} "
        f"(spikes: {result.spikes_count}, drops: {result.drops_count}, flat: {result.flat_count})",
    ]

    if not result.anomalies:
        lines.append("No anomalies detected.")
        return "\n".join(lines)

    lines.append("")
    for anomaly in result.anomalies:
        z = "inf" if math.isinf(anomaly.z_score) else f"{anomaly.z_score:+.2f}"
        lines.append(
            f"  {anomaly.date.isoformat()} [{anomaly.type.upper()}/{anomaly.severity}] "
            f"{anomaly.description} (z={z})"
        )

    return sanitize_for_console("\n".join(lines))


def format_benchmark_for_console(data: BenchmarkData) -> str:
    """Build a human-readable benchmark table."""
    lines = ["Benchmarks", "=" * 60]

    for metric in data.metrics().values():
        unit = f" {metric.unit}" if metric.unit else ""
        lines.append(f"{metric.label}:")
        lines.append(f"  Current: {metric.current:,.2f}{unit}")
        lines.append(
            f"  Baseline ({baseline_label(metric.baseline_type)}): {metric.baseline:,.2f}{unit}"
        )
        lines.append(
            f"  Variance: {metric.variance:+.1f}% - {benchmark_status_label(metric.status)}"
        )
        lines.append("")

    return sanitize_for_console("\n".join(lines))
