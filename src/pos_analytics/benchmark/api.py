"""Public API for sales benchmarks.

Compares current sales figures against a historical baseline (rolling
average or fixed target) and classifies performance as below target,
on track, or above target (+/-10% band).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Literal, Mapping, Optional

from pos_analytics.config import (
    BASELINE_TYPES,
    BASELINE_WINDOWS,
    BENCHMARK_STATUS_THRESHOLD,
    CURRENCY_UNIT,
    DEFAULT_BASELINE_TYPE,
)
from pos_analytics.series import SeriesInput, TimeSeries, prepare_series, validate_metric

logger = logging.getLogger(__name__)

BaselineType = Literal["avg_7_days", "avg_30_days", "avg_90_days", "all_time", "custom_target"]
BenchmarkStatus = Literal["below_target", "on_track", "above_target"]


@dataclass(frozen=True)
class BenchmarkMetric:
    """One metric compared against its baseline.

    Attributes:
        label: Display label, e.g. "Revenue".
        current: Current value.
        baseline: Baseline value it is compared with.
        baseline_type: How the baseline was computed.
        variance: Percent difference of current vs baseline.
        status: 'below_target', 'on_track' or 'above_target'.
        unit: Optional unit, e.g. "Rp" or "transactions".
    """

    label: str
    current: float
    baseline: float
    baseline_type: BaselineType
    variance: float
    status: BenchmarkStatus
    unit: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "label": self.label,
            "current": self.current,
            "baseline": self.baseline,
            "baselineType": self.baseline_type,
            "variance": self.variance,
            "status": self.status,
        }
        if self.unit is not None:
            data["unit"] = self.unit
        return data


@dataclass(frozen=True)
class BenchmarkData:
    """Benchmarks for all tracked metrics against one shared history."""

    revenue: BenchmarkMetric
    transactions: BenchmarkMetric
    average_ticket: BenchmarkMetric
    calculated_at: datetime

    def metrics(self) -> dict[str, BenchmarkMetric]:
        return {
            "revenue": self.revenue,
            "transactions": self.transactions,
            "average_ticket": self.average_ticket,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "revenue": self.revenue.to_dict(),
            "transactions": self.transactions.to_dict(),
            "averageTicket": self.average_ticket.to_dict(),
            "calculatedAt": self.calculated_at.isoformat(),
        }


def calculate_baseline(
    data: SeriesInput,
    metric: str,
    baseline_type: str,
    custom_target: Optional[float] = None,
) -> float:
    """Compute the baseline value for a metric.

    Rolling averages use the last N points, or all points when the series
    is shorter than N. An empty series gives 0; custom_target ignores the
    history entirely (0 when no target is given). An unknown baseline type
    also gives 0 and is logged as a warning.

    Args:
        data: Historical trend data.
        metric: Metric to baseline.
        baseline_type: avg_7_days, avg_30_days, avg_90_days, all_time or custom_target.
        custom_target: Target value for custom_target.

    Returns:
        Baseline value.

    Raises:
        ConfigError: If metric is not a tracked metric name.

    Examples:
        >>> calculate_baseline([], "revenue", "avg_7_days")
        0.0
        >>> calculate_baseline([], "revenue", "custom_target", custom_target=500.0)
        500.0
        >>> calculate_baseline([], "revenue", "avg_365_days")
        0.0

    """
    validate_metric(metric)

    if baseline_type not in BASELINE_TYPES:
        logger.warning(
            f"Unknown baseline type '{baseline_type}' for {metric}; using a baseline of 0. "
            f"Expected one of {list(BASELINE_TYPES)}"
        )
        return 0.0

    if baseline_type == "custom_target":
        return float(custom_target) if custom_target is not None else 0.0

    series = prepare_series(data)
    if len(series) == 0:
        return 0.0

    window = BASELINE_WINDOWS[baseline_type]
    if window is not None:
        series = series.tail(window)

    return float(series.values(metric).mean())


def calculate_variance(current: float, baseline: float) -> float:
    """Percent difference of current vs baseline.

    A zero baseline gives 100 when current is positive and 0 otherwise.
    """
    if baseline == 0:
        return 100.0 if current > 0 else 0.0
    return (current - baseline) / baseline * 100


def determine_benchmark_status(variance: float) -> BenchmarkStatus:
    """Classify a variance: below -10% is below target, above +10% is above target.

    Exactly -10 and +10 are on track.
    """
    if variance < -BENCHMARK_STATUS_THRESHOLD:
        return "below_target"
    if variance > BENCHMARK_STATUS_THRESHOLD:
        return "above_target"
    return "on_track"


def create_benchmark_metric(
    label: str,
    current: float,
    data: SeriesInput,
    metric: str,
    baseline_type: str,
    unit: Optional[str] = None,
    custom_target: Optional[float] = None,
) -> BenchmarkMetric:
    """Compare one current value against its baseline."""
    baseline = calculate_baseline(data, metric, baseline_type, custom_target)
    variance = calculate_variance(current, baseline)

    return BenchmarkMetric(
        label=label,
        current=current,
        baseline=baseline,
        baseline_type=baseline_type,  # type: ignore[arg-type]
        variance=variance,
        status=determine_benchmark_status(variance),
        unit=unit,
    )


def calculate_benchmark_data(
    current_revenue: float,
    current_transactions: float,
    current_average_ticket: float,
    data: SeriesInput,
    baseline_type: str = DEFAULT_BASELINE_TYPE,
    *,
    custom_targets: Optional[Mapping[str, float]] = None,
    calculated_at: Optional[datetime] = None,
) -> BenchmarkData:
    """Benchmark revenue, transactions and average ticket against one history.

    The history is sorted and filtered once and shared by all three metrics.

    Args:
        current_revenue: Current period revenue.
        current_transactions: Current period transaction count.
        current_average_ticket: Current period average ticket.
        data: Historical trend data.
        baseline_type: Baseline to use (default: avg_30_days).
        custom_targets: Targets per metric name, used with custom_target.
        calculated_at: Timestamp stored on the result. Defaults to now (UTC).

    Returns:
        BenchmarkData with one BenchmarkMetric per tracked metric. An unknown
        baseline_type gives 0 baselines rather than an error.
    """
    series: TimeSeries = prepare_series(data)
    targets = dict(custom_targets or {})
    if calculated_at is None:
        calculated_at = datetime.now(timezone.utc)

    logger.debug(f"Benchmarking against {baseline_type} over {len(series)} days")

    return BenchmarkData(
        revenue=create_benchmark_metric(
            "Revenue",
            current_revenue,
            series,
            "revenue",
            baseline_type,
            CURRENCY_UNIT,
            targets.get("revenue"),
        ),
        transactions=create_benchmark_metric(
            "Transactions",
            current_transactions,
            series,
            "transactions",
            baseline_type,
            "transactions",
            targets.get("transactions"),
        ),
        average_ticket=create_benchmark_metric(
            "Average Ticket",
            current_average_ticket,
            series,
            "average_ticket",
            baseline_type,
            CURRENCY_UNIT,
            targets.get("average_ticket"),
        ),
        calculated_at=calculated_at,
    )
