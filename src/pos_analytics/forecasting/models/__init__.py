"""Forecasting models module.

Adding a model
==============

A model subclasses ForecastModel and implements:

1. ``train(values)``: fit on the metric values in date order and return a
   RegressionFit. Raise ValueError when there are too few observations.

2. ``forecast(model, steps, confidence_level)``: return an array of shape
   ``(steps, 3)`` holding predicted, lower and upper values. Do not clamp;
   generate_forecast() clamps everything to zero.

The RegressionFit carries ``slope``, ``intercept``, ``r_squared`` and
``standard_error``, which the result and the reliability check report.
"""

from pos_analytics.forecasting.models.base import ForecastModel
from pos_analytics.forecasting.models.linear import (
    LinearTrendModel,
    RegressionFit,
    fit_linear_regression,
)

__all__ = ["ForecastModel", "LinearTrendModel", "RegressionFit", "fit_linear_regression"]
