"""POS Analytics - time-series analytics for the sales dashboard.

This package turns daily sales aggregates (revenue, transactions, average
ticket) into the dashboard's trend forecast, anomaly alerts and benchmark
cards. All analyses are pure in-memory functions.

Module Structure:
    pos_analytics.series: Daily sales time series (TimeSeries, prepare_series)
    pos_analytics.forecasting: Linear trend forecasting and reliability checks
    pos_analytics.anomaly: Rolling z-score spike/drop and flat-day detection
    pos_analytics.benchmark: Current vs baseline comparisons
    pos_analytics.formatters: Color/icon/label tables and console reports
    pos_analytics.pipeline: Command-line entry point

Quick Start:
    >>> from pos_analytics.anomaly import detect_anomalies
    >>> from pos_analytics.benchmark import calculate_benchmark_data
    >>> from pos_analytics.forecasting import generate_forecast
    >>>
    >>> trends = [
    ...     {"date": "2025-01-01", "revenue": 1_000_000, "transactions": 100, "average_ticket": 10_000},
    ...     ...
    ... ]  # doctest: +SKIP
    >>>
    >>> forecast = generate_forecast(trends, "revenue", days_ahead=30)  # doctest: +SKIP
    >>> if forecast is None:  # doctest: +SKIP
    ...     print("Not enough data for a forecast")
    >>>
    >>> anomalies = detect_anomalies(trends, "revenue")  # doctest: +SKIP
    >>> benchmark = calculate_benchmark_data(1_200_000, 110, 10_900, trends, "avg_7_days")  # doctest: +SKIP

Series Contract:
    One point per calendar day, dates unique. Points with unparseable dates
    are dropped and the rest sorted ascending before any analysis runs.
"""

__version__ = "0.3.0"

from pos_analytics.exceptions import ConfigError, DataQualityError, PosAnalyticsError
from pos_analytics.series import TimeSeries, TimeSeriesPoint, prepare_series

__all__ = [
    "ConfigError",
    "DataQualityError",
    "PosAnalyticsError",
    "TimeSeries",
    "TimeSeriesPoint",
    "__version__",
    "prepare_series",
]
