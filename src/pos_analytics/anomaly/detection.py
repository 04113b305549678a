"""Rolling-window statistics for sales anomaly detection.

Each day from index window_size onward is compared against the window_size
days before it (the day itself is not part of its own baseline):

- spikes and drops: population z-score against the window mean/std
- flat days: percent distance from the window mean below a threshold
"""

from __future__ import annotations

import math

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from pos_analytics.anomaly.types import Anomaly, AnomalySeverity, AnomalyType
from pos_analytics.config import SEVERITY_CUTOFFS
from pos_analytics.series import TimeSeries

METRIC_LABELS = {
    "revenue": "Revenue",
    "transactions": "Transactions",
    "average_ticket": "Average ticket",
}


def rolling_baseline(values: np.ndarray, window_size: int) -> tuple[np.ndarray, np.ndarray]:
    """Compute trailing-window mean and population std for each day after the first window.

    Args:
        values: Metric values in date order
        window_size: Number of preceding days in each baseline

    Returns:
        Tuple (means, stds), each of length len(values) - window_size, where
        entry k describes the window before day window_size + k.

    Examples:
        >>> means, stds = rolling_baseline(np.array([1.0, 3.0, 5.0, 7.0]), 2)
        >>> means.tolist(), stds.tolist()
        ([2.0, 4.0], [1.0, 1.0])

    """
    if len(values) <= window_size:
        return np.empty(0), np.empty(0)

    windows = sliding_window_view(values, window_size)[:-1]
    return windows.mean(axis=1), windows.std(axis=1)


def calculate_zscores(current: np.ndarray, means: np.ndarray, stds: np.ndarray) -> np.ndarray:
    """Compute (current - mean) / std with a guard for flat windows.

    A window with zero spread gives z = 0 when the day matches the mean, and
    an unbounded z (+/-inf) when it does not.
    """
    diff = current - means
    with np.errstate(divide="ignore", invalid="ignore"):
        unbounded = np.where(diff == 0, 0.0, np.copysign(np.inf, diff))
        return np.where(stds > 0, diff / stds, unbounded)


def percent_variance(current: float, mean: float) -> float:
    """Percent deviation of current from mean; 0 when the mean is 0."""
    if mean == 0:
        return 0.0
    return (current - mean) / mean * 100


def determine_severity(z_score: float) -> AnomalySeverity:
    """Map |z| to a severity: <2.5 low, <3 medium, <4 high, else critical."""
    abs_z = abs(z_score)
    for severity, cutoff in SEVERITY_CUTOFFS:
        if abs_z >= cutoff:
            return severity
    return "low"


def describe_anomaly(anomaly_type: AnomalyType, metric: str, variance: float, day: str) -> str:
    """Build the human-readable description shown on the dashboard."""
    label = METRIC_LABELS.get(metric, metric)
    abs_variance = abs(variance)

    if anomaly_type == "spike":
        return f"{label} spike of {abs_variance:.1f}% on {day}"
    if anomaly_type == "drop":
        return f"{label} drop of {abs_variance:.1f}% on {day}"
    return f"{label} flat ({abs_variance:.1f}% from recent average) on {day}"


def detect_zscore_anomalies(
    series: TimeSeries,
    metric: str,
    window_size: int,
    threshold: float,
) -> list[Anomaly]:
    """Flag spikes and drops where |z| >= threshold.

    Args:
        series: Prepared series (sorted by date)
        metric: Metric to analyze
        window_size: Trailing window size in days
        threshold: z-score magnitude required to flag a day

    Returns:
        Spike/drop anomalies in date order.
    """
    values = series.values(metric)
    means, stds = rolling_baseline(values, window_size)
    if len(means) == 0:
        return []

    current = values[window_size:]
    z_scores = calculate_zscores(current, means, stds)

    anomalies = []
    for offset in np.flatnonzero(np.abs(z_scores) >= threshold):
        index = window_size + int(offset)
        z = float(z_scores[offset])
        mean = float(means[offset])
        value = float(current[offset])
        anomaly_type: AnomalyType = "spike" if z > 0 else "drop"
        variance = percent_variance(value, mean)
        day = series[index].date

        anomalies.append(
            Anomaly(
                date=day,
                type=anomaly_type,
                severity=determine_severity(z),
                metric=metric,
                value=value,
                expected_value=mean,
                variance=variance,
                z_score=z,
                description=describe_anomaly(anomaly_type, metric, variance, day.isoformat()),
            )
        )

    return anomalies


def detect_flat_periods(
    series: TimeSeries,
    metric: str,
    window_size: int,
    flat_threshold: float,
) -> list[Anomaly]:
    """Flag days that sit within flat_threshold percent of a positive window mean.

    Returns:
        Flat anomalies in date order, all with severity 'low' and z_score 0.
    """
    values = series.values(metric)
    means, _ = rolling_baseline(values, window_size)

    anomalies = []
    for offset, mean in enumerate(means):
        mean = float(mean)
        if mean <= 0:
            continue

        value = float(values[window_size + offset])
        variance = abs(percent_variance(value, mean))
        if variance >= flat_threshold or math.isnan(variance):
            continue

        day = series[window_size + offset].date
        anomalies.append(
            Anomaly(
                date=day,
                type="flat",
                severity="low",
                metric=metric,
                value=value,
                expected_value=mean,
                variance=variance,
                z_score=0.0,
                description=describe_anomaly("flat", metric, variance, day.isoformat()),
            )
        )

    return anomalies
