"""Public API for sales trend forecasting.

This module provides a clean, configurable API for projecting a daily sales
metric forward with in-memory data and no side effects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Optional

import pandas as pd

from pos_analytics.config import (
    DEFAULT_CONFIDENCE_LEVEL,
    DEFAULT_FORECAST_DAYS,
    FORECAST_PERIODS,
)
from pos_analytics.exceptions import ConfigError
from pos_analytics.forecasting.models.base import ForecastModel
from pos_analytics.forecasting.models.linear import LinearTrendModel
from pos_analytics.series import SeriesInput, TimeSeries, missing_dates, prepare_series, validate_metric

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastConfig:
    """Configuration for trend forecasting.

    Attributes:
        days_ahead: Number of days to forecast (one of 7, 14, 30, 60, 90; default: 30).
        confidence_level: z-value for the confidence band (default: 1.96, ~95%).
        model: Optional forecast model instance. If None, uses LinearTrendModel.
    """

    days_ahead: int = DEFAULT_FORECAST_DAYS
    confidence_level: float = DEFAULT_CONFIDENCE_LEVEL
    model: Optional[ForecastModel] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.days_ahead not in FORECAST_PERIODS:
            raise ConfigError(
                f"Unsupported forecast horizon {self.days_ahead}. "
                f"Must be one of {list(FORECAST_PERIODS)}"
            )
        if self.confidence_level < 0:
            raise ConfigError(f"confidence_level must be non-negative, got {self.confidence_level}")


@dataclass(frozen=True)
class ForecastPoint:
    """One projected future day.

    Attributes:
        date: Forecast day, strictly after the last historical date.
        value: Projected metric value, clamped to >= 0.
        lower_bound: Lower confidence bound, clamped to >= 0.
        upper_bound: Upper confidence bound, clamped to >= 0.
    """

    date: date
    value: float
    lower_bound: float
    upper_bound: float
    is_forecasted: bool = True

    @property
    def interval_width(self) -> float:
        return self.upper_bound - self.lower_bound

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "value": self.value,
            "lowerBound": self.lower_bound,
            "upperBound": self.upper_bound,
            "isForecasted": self.is_forecasted,
        }


@dataclass(frozen=True)
class ForecastResult:
    """Result of a trend forecast.

    Attributes:
        historical: The prepared (sorted, filtered) input series.
        forecast: Projected points, one per day ahead.
        metric: Forecast metric name.
        r_squared: Goodness of fit of the trend line (0-1).
        slope: Trend per day.
        intercept: Trend value at the first historical day.
        standard_error: Residual standard error of the fit.
    """

    historical: TimeSeries
    forecast: tuple[ForecastPoint, ...]
    metric: str
    r_squared: float
    slope: float
    intercept: float
    standard_error: float = 0.0

    def forecast_dataframe(self) -> pd.DataFrame:
        """Return forecast points as a DataFrame with columns date, value, lower, upper."""
        if not self.forecast:
            return pd.DataFrame(columns=["date", "value", "lower", "upper"])
        df = pd.DataFrame(
            [
                {
                    "date": p.date,
                    "value": p.value,
                    "lower": p.lower_bound,
                    "upper": p.upper_bound,
                }
                for p in self.forecast
            ]
        )
        df["date"] = pd.to_datetime(df["date"])
        return df

    def to_dict(self) -> dict[str, Any]:
        return {
            "historical": self.historical.to_records(),
            "forecast": [p.to_dict() for p in self.forecast],
            "metric": self.metric,
            "rSquared": self.r_squared,
            "slope": self.slope,
            "intercept": self.intercept,
        }


def generate_forecast(
    data: SeriesInput,
    metric: str,
    days_ahead: int = DEFAULT_FORECAST_DAYS,
    confidence_level: float = DEFAULT_CONFIDENCE_LEVEL,
    *,
    config: Optional[ForecastConfig] = None,
) -> ForecastResult | None:
    """Fit a linear trend to the history and project it forward.

    This function:
    - does NOT read or write any files,
    - does NOT mutate its input,
    - MAY log progress via the logging module.

    Dates are mapped to day indices 0..n-1, so the series is assumed to hold
    one point per consecutive day. Gaps are logged as a warning but not filled.

    Args:
        data: Historical trend data (TimeSeries, DataFrame or records).
        metric: Metric to forecast ('revenue', 'transactions' or 'average_ticket').
        days_ahead: Number of days to forecast (7, 14, 30, 60 or 90).
        confidence_level: z-value for the confidence band (default: 1.96).
        config: Optional ForecastConfig. Overrides days_ahead and confidence_level.

    Returns:
        ForecastResult, or None when fewer than 2 points have a valid date.

    Raises:
        ConfigError: If the metric or horizon is not supported.
    """
    validate_metric(metric)
    if config is None:
        config = ForecastConfig(days_ahead=days_ahead, confidence_level=confidence_level)

    series = prepare_series(data)
    if len(series) < 2:
        logger.info(
            f"Forecast unavailable for {metric}: {len(series)} valid data points (need 2)"
        )
        return None

    gaps = missing_dates(series)
    if gaps:
        logger.warning(
            f"{metric}: {len(gaps)} calendar days missing between {series.first_date} and "
            f"{series.last_date}; trend treats points as consecutive days"
        )

    model = config.model if config.model is not None else LinearTrendModel()

    fit = model.train(series.values(metric))
    projection = model.forecast(fit, steps=config.days_ahead, confidence_level=config.confidence_level)

    last_date = series.last_date
    assert last_date is not None

    points = []
    for i, (predicted, lower, upper) in enumerate(projection, start=1):
        points.append(
            ForecastPoint(
                date=last_date + timedelta(days=i),
                value=max(0.0, float(predicted)),
                lower_bound=max(0.0, float(lower)),
                upper_bound=max(0.0, float(upper)),
            )
        )

    logger.info(
        f"Forecast {metric}: {len(series)} days of history, {config.days_ahead} days ahead, "
        f"slope={fit.slope:.4f}, r2={fit.r_squared:.3f}"
    )

    return ForecastResult(
        historical=series,
        forecast=tuple(points),
        metric=metric,
        r_squared=fit.r_squared,
        slope=fit.slope,
        intercept=fit.intercept,
        standard_error=fit.standard_error,
    )

