"""Anomaly detection module.

This module flags unusual days in daily sales using a trailing rolling window.

Example:
    >>> from pos_analytics.anomaly import detect_anomalies, get_critical_anomalies
    >>>
    >>> result = detect_anomalies(trends, "revenue")  # doctest: +SKIP
    >>> print(result.total_anomalies)  # doctest: +SKIP
    >>> for anomaly in get_critical_anomalies(result, limit=3):  # doctest: +SKIP
    ...     print(anomaly.description)

"""

from pos_analytics.anomaly.api import (
    AnomalyConfig,
    detect_all_anomalies,
    detect_anomalies,
    get_critical_anomalies,
    summarize_anomalies,
)
from pos_analytics.anomaly.types import Anomaly, AnomalyDetectionResult, AnomalySummary

__all__ = [
    "Anomaly",
    "AnomalyConfig",
    "AnomalyDetectionResult",
    "AnomalySummary",
    "detect_all_anomalies",
    "detect_anomalies",
    "get_critical_anomalies",
    "summarize_anomalies",
]
