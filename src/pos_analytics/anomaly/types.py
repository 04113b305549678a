"""Shared types for anomaly detection results."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Literal

AnomalyType = Literal["spike", "drop", "flat"]
AnomalySeverity = Literal["low", "medium", "high", "critical"]

SEVERITIES: tuple[AnomalySeverity, ...] = ("low", "medium", "high", "critical")


@dataclass(frozen=True)
class Anomaly:
    """One flagged day.

    Attributes:
        date: Day of the observation.
        type: 'spike', 'drop' or 'flat'.
        severity: Severity from |z_score|; always 'low' for flat days.
        metric: Metric the anomaly was found in.
        value: Observed value.
        expected_value: Mean of the trailing window.
        variance: Percent deviation from expected_value.
        z_score: Standard deviations from the window mean (0 for flat days,
            +/-inf when the window has no spread).
        description: Human-readable summary.
    """

    date: date
    type: AnomalyType
    severity: AnomalySeverity
    metric: str
    value: float
    expected_value: float
    variance: float
    z_score: float
    description: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the dashboard. An unbounded z-score is sent as None."""
        return {
            "date": self.date.isoformat(),
            "type": self.type,
            "severity": self.severity,
            "metric": self.metric,
            "value": self.value,
            "expectedValue": self.expected_value,
            "variance": self.variance,
            "zScore": self.z_score if math.isfinite(self.z_score) else None,
            "description": self.description,
        }


@dataclass(frozen=True)
class AnomalyDetectionResult:
    """Anomalies found in one metric of a series.

    Counts are derived from the anomalies tuple, never tracked separately.

    Attributes:
        anomalies: Flagged days, newest first.
        window_size: Trailing window used for the baseline.
        threshold: |z| needed to flag a spike or drop.
        min_data_points: Minimum series length that was required.
        calculated_at: When the detection ran.
    """

    anomalies: tuple[Anomaly, ...]
    window_size: int
    threshold: float
    min_data_points: int
    calculated_at: datetime

    @property
    def total_anomalies(self) -> int:
        return len(self.anomalies)

    @property
    def spikes_count(self) -> int:
        return sum(1 for a in self.anomalies if a.type == "spike")

    @property
    def drops_count(self) -> int:
        return sum(1 for a in self.anomalies if a.type == "drop")

    @property
    def flat_count(self) -> int:
        return sum(1 for a in self.anomalies if a.type == "flat")

    @property
    def detection_params(self) -> dict[str, Any]:
        return {
            "windowSize": self.window_size,
            "threshold": self.threshold,
            "minDataPoints": self.min_data_points,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "anomalies": [a.to_dict() for a in self.anomalies],
            "totalAnomalies": self.total_anomalies,
            "spikesCount": self.spikes_count,
            "dropsCount": self.drops_count,
            "flatCount": self.flat_count,
            "detectionParams": self.detection_params,
            "calculatedAt": self.calculated_at.isoformat(),
        }


@dataclass(frozen=True)
class AnomalySummary:
    """Dashboard overview of a detection result."""

    total: int
    spikes: int
    drops: int
    flat: int
    by_severity: dict[str, int] = field(default_factory=dict)

    @property
    def has_anomalies(self) -> bool:
        return self.total > 0

    @property
    def has_critical(self) -> bool:
        return self.by_severity.get("critical", 0) > 0
