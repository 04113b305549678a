"""Sales trend forecasting module.

This module fits a linear trend to daily sales and projects it forward with
a confidence band.

Example:
    >>> from pos_analytics.forecasting import generate_forecast, assess_forecast_reliability
    >>>
    >>> trends = [
    ...     {"date": "2025-01-01", "revenue": 1000, "transactions": 10, "average_ticket": 100},
    ...     {"date": "2025-01-02", "revenue": 1100, "transactions": 11, "average_ticket": 100},
    ...     {"date": "2025-01-03", "revenue": 1200, "transactions": 12, "average_ticket": 100},
    ... ]
    >>> result = generate_forecast(trends, "revenue", days_ahead=7)
    >>> result.forecast[0].date.isoformat()
    '2025-01-04'
    >>> assess_forecast_reliability(result).confidence
    'high'

"""

from pos_analytics.forecasting.api import (
    ForecastConfig,
    ForecastPoint,
    ForecastResult,
    generate_forecast,
)
from pos_analytics.forecasting.reliability import ForecastReliability, assess_forecast_reliability

__all__ = [
    "ForecastConfig",
    "ForecastPoint",
    "ForecastReliability",
    "ForecastResult",
    "assess_forecast_reliability",
    "generate_forecast",
]
