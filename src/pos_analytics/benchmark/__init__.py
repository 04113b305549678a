"""Benchmark module.

This module compares current sales against historical baselines.

Example:
    >>> from pos_analytics.benchmark import calculate_benchmark_data
    >>>
    >>> data = calculate_benchmark_data(
    ...     current_revenue=1_200_000,
    ...     current_transactions=120,
    ...     current_average_ticket=10_000,
    ...     data=trends,
    ...     baseline_type="avg_7_days",
    ... )  # doctest: +SKIP
    >>> data.revenue.status  # doctest: +SKIP
    'above_target'

"""

from pos_analytics.benchmark.api import (
    BenchmarkData,
    BenchmarkMetric,
    calculate_baseline,
    calculate_benchmark_data,
    calculate_variance,
    create_benchmark_metric,
    determine_benchmark_status,
)

__all__ = [
    "BenchmarkData",
    "BenchmarkMetric",
    "calculate_baseline",
    "calculate_benchmark_data",
    "calculate_variance",
    "create_benchmark_metric",
    "determine_benchmark_status",
]
