"""Output formatting utilities."""

from pos_analytics.formatters.console import (
    format_anomalies_for_console,
    format_benchmark_for_console,
    format_forecast_for_console,
    sanitize_for_console,
)
from pos_analytics.formatters.palette import (
    anomaly_color,
    anomaly_icon,
    baseline_label,
    benchmark_status_color,
    benchmark_status_label,
    progress_percentage,
)

__all__ = [
    "anomaly_color",
    "anomaly_icon",
    "baseline_label",
    "benchmark_status_color",
    "benchmark_status_label",
    "format_anomalies_for_console",
    "format_benchmark_for_console",
    "format_forecast_for_console",
    "progress_percentage",
    "sanitize_for_console",
]
