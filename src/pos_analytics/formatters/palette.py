"""Design-system token tables for analytics results.

These map analysis outcomes to the dashboard's color classes, icon names
and labels. They are plain lookups and carry no statistics; swap the tables
to retheme the dashboard.
"""

from __future__ import annotations

from pos_analytics.anomaly.types import Anomaly
from pos_analytics.config import MAX_PROGRESS_PERCENTAGE

DEFAULT_ANOMALY_COLOR = "text-gray-500"
FLAT_ANOMALY_COLOR = "text-warning-500"

# (type, severity) -> color; severities not listed fall back to the type default
ANOMALY_COLORS = {
    ("spike", "critical"): "text-success-600",
    ("spike", "high"): "text-success-500",
    ("spike", None): "text-success-400",
    ("drop", "critical"): "text-danger-600",
    ("drop", "high"): "text-danger-500",
    ("drop", None): "text-danger-400",
}

ANOMALY_ICONS = {
    "spike": "TrendingUp",
    "drop": "TrendingDown",
    "flat": "Minus",
}
DEFAULT_ANOMALY_ICON = "AlertCircle"

BENCHMARK_STATUS_COLORS = {
    "below_target": "text-danger-600 dark:text-danger-400",
    "on_track": "text-info-600 dark:text-info-400",
    "above_target": "text-success-600 dark:text-success-400",
}

BENCHMARK_STATUS_LABELS = {
    "below_target": "Below Target",
    "on_track": "On Track",
    "above_target": "Above Target",
}

BASELINE_LABELS = {
    "avg_7_days": "7-day average",
    "avg_30_days": "30-day average",
    "avg_90_days": "90-day average",
    "all_time": "All-time average",
    "custom_target": "Custom target",
}


def anomaly_color(anomaly: Anomaly) -> str:
    """Color class for an anomaly, by type and severity."""
    if anomaly.type == "flat":
        return FLAT_ANOMALY_COLOR
    color = ANOMALY_COLORS.get((anomaly.type, anomaly.severity))
    if color is None:
        color = ANOMALY_COLORS.get((anomaly.type, None), DEFAULT_ANOMALY_COLOR)
    return color


def anomaly_icon(anomaly_type: str) -> str:
    """Icon name for an anomaly type."""
    return ANOMALY_ICONS.get(anomaly_type, DEFAULT_ANOMALY_ICON)


def benchmark_status_color(status: str) -> str:
    return BENCHMARK_STATUS_COLORS.get(status, DEFAULT_ANOMALY_COLOR)


def benchmark_status_label(status: str) -> str:
    return BENCHMARK_STATUS_LABELS.get(status, status)


def baseline_label(baseline_type: str) -> str:
    return BASELINE_LABELS.get(baseline_type, baseline_type)


def progress_percentage(current: float, baseline: float) -> float:
    """Current as a percentage of baseline, clamped to [0, 200] for progress bars.

    Examples:
        >>> progress_percentage(150, 100)
        150.0
        >>> progress_percentage(500, 100)
        200.0
        >>> progress_percentage(10, 0)
        0.0

    """
    if baseline == 0:
        return 0.0
    percentage = current / baseline * 100
    return float(max(0.0, min(MAX_PROGRESS_PERCENTAGE, percentage)))
