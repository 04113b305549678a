"""Public API for sales anomaly detection.

This module provides an in-memory API for flagging unusual days in a daily
sales series without reading or writing any files.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from pos_analytics.anomaly.detection import detect_flat_periods, detect_zscore_anomalies
from pos_analytics.anomaly.types import SEVERITIES, Anomaly, AnomalyDetectionResult, AnomalySummary
from pos_analytics.config import (
    DEFAULT_FLAT_THRESHOLD,
    DEFAULT_MIN_DATA_POINTS,
    DEFAULT_WINDOW_SIZE,
    DEFAULT_ZSCORE_THRESHOLD,
    FLAT_DETECTION_MAX_RATIO,
    METRICS,
)
from pos_analytics.exceptions import ConfigError
from pos_analytics.series import SeriesInput, prepare_series, validate_metric

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnomalyConfig:
    """Configuration for anomaly detection.

    Attributes:
        window_size: Days in the trailing baseline window (default: 7).
        threshold: |z| needed to flag a spike or drop (default: 2.0).
        flat_threshold: Percent distance from the baseline below which a day
            counts as flat (default: 5.0).
        min_data_points: Series shorter than this give an empty result (default: 14).
    """

    window_size: int = DEFAULT_WINDOW_SIZE
    threshold: float = DEFAULT_ZSCORE_THRESHOLD
    flat_threshold: float = DEFAULT_FLAT_THRESHOLD
    min_data_points: int = DEFAULT_MIN_DATA_POINTS

    def __post_init__(self) -> None:
        if self.window_size < 1:
            raise ConfigError(f"window_size must be at least 1, got {self.window_size}")
        if self.threshold < 0:
            raise ConfigError(f"threshold must be non-negative, got {self.threshold}")
        if self.flat_threshold < 0:
            raise ConfigError(f"flat_threshold must be non-negative, got {self.flat_threshold}")
        if self.min_data_points < 0:
            raise ConfigError(f"min_data_points must be non-negative, got {self.min_data_points}")


def detect_anomalies(
    data: SeriesInput,
    metric: str,
    config: Optional[AnomalyConfig] = None,
    *,
    calculated_at: Optional[datetime] = None,
) -> AnomalyDetectionResult:
    """Detect spikes, drops and flat days in one metric.

    This function:
    - does NOT read or write any files,
    - does NOT raise on short or messy data (returns an empty result instead),
    - MAY log progress via the logging module.

    Flat days are only looked for when spikes and drops are absent or cover
    less than 10% of the series, so they never drown out a stronger signal.

    Args:
        data: Historical trend data (TimeSeries, DataFrame or records).
        metric: Metric to analyze ('revenue', 'transactions' or 'average_ticket').
        config: AnomalyConfig. If None, uses defaults.
        calculated_at: Timestamp stored on the result. Defaults to now (UTC).

    Returns:
        AnomalyDetectionResult with anomalies sorted newest first.

    Raises:
        ConfigError: If the metric is not supported.
    """
    validate_metric(metric)
    if config is None:
        config = AnomalyConfig()
    if calculated_at is None:
        calculated_at = datetime.now(timezone.utc)

    series = prepare_series(data)

    def build(anomalies: list[Anomaly]) -> AnomalyDetectionResult:
        return AnomalyDetectionResult(
            anomalies=tuple(anomalies),
            window_size=config.window_size,
            threshold=config.threshold,
            min_data_points=config.min_data_points,
            calculated_at=calculated_at,
        )

    if len(series) < config.min_data_points:
        logger.warning(
            f"Insufficient data points for anomaly detection on {metric}. "
            f"Required: {config.min_data_points}, Got: {len(series)}"
        )
        return build([])

    anomalies = detect_zscore_anomalies(series, metric, config.window_size, config.threshold)

    if not anomalies or len(anomalies) < len(series) * FLAT_DETECTION_MAX_RATIO:
        anomalies.extend(
            detect_flat_periods(series, metric, config.window_size, config.flat_threshold)
        )

    # Stable sort keeps spikes/drops ahead of flat days on the same date
    anomalies.sort(key=lambda a: a.date, reverse=True)

    result = build(anomalies)
    logger.info(
        f"Anomaly detection {metric}: {result.spikes_count} spikes, "
        f"{result.drops_count} drops, {result.flat_count} flat over {len(series)} days"
    )
    return result


def detect_all_anomalies(
    data: SeriesInput,
    config: Optional[AnomalyConfig] = None,
    *,
    calculated_at: Optional[datetime] = None,
) -> dict[str, AnomalyDetectionResult]:
    """Run detect_anomalies() for every tracked metric on the same series.

    Returns:
        Dictionary {metric: AnomalyDetectionResult}
    """
    series = prepare_series(data)
    if calculated_at is None:
        calculated_at = datetime.now(timezone.utc)
    return {
        metric: detect_anomalies(series, metric, config, calculated_at=calculated_at)
        for metric in METRICS
    }


def get_critical_anomalies(result: AnomalyDetectionResult, limit: int = 5) -> list[Anomaly]:
    """Return up to limit high/critical anomalies, most recent first."""
    critical = [a for a in result.anomalies if a.severity in ("high", "critical")]
    return critical[: max(0, limit)]


def summarize_anomalies(result: AnomalyDetectionResult) -> AnomalySummary:
    """Count anomalies by type and severity for the dashboard overview."""
    by_severity = {severity: 0 for severity in SEVERITIES}
    for anomaly in result.anomalies:
        by_severity[anomaly.severity] += 1

    return AnomalySummary(
        total=result.total_anomalies,
        spikes=result.spikes_count,
        drops=result.drops_count,
        flat=result.flat_count,
        by_severity=by_severity,
    )
