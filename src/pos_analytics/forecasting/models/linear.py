"""Linear trend model for daily sales forecasting.

Fits an ordinary least-squares line of metric value on day index using
statsmodels OLS, and projects it with a confidence band that widens with
forecast distance.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import statsmodels.api as sm

from pos_analytics.forecasting.models.base import ForecastModel


@dataclass(frozen=True)
class RegressionFit:
    """Coefficients and fit statistics of a linear trend.

    Attributes:
        slope: Change in the metric per day.
        intercept: Fitted value at day index 0.
        r_squared: Coefficient of determination, clamped to [0, 1].
        standard_error: Residual standard error, sqrt(SS_res / (n - 2)).
        n_observations: Number of historical points used.
    """

    slope: float
    intercept: float
    r_squared: float
    standard_error: float
    n_observations: int

    def predict(self, x: np.ndarray | float) -> np.ndarray | float:
        return self.slope * x + self.intercept


def fit_linear_regression(values: np.ndarray) -> RegressionFit:
    """Fit y = slope * x + intercept with x = 0..n-1.

    Degenerate cases are guarded: slope is 0 when all x are equal, r_squared
    is 0 when y has no variance, and the standard error is 0 for two points.

    Args:
        values: Metric values ordered by date

    Returns:
        RegressionFit with slope, intercept, r_squared and standard_error

    Raises:
        ValueError: If fewer than 2 values are given

    Examples:
        >>> fit = fit_linear_regression(np.array([5.0, 7.0, 9.0, 11.0]))
        >>> round(fit.slope, 6), round(fit.intercept, 6), round(fit.r_squared, 6)
        (2.0, 5.0, 1.0)

    """
    y = np.asarray(values, dtype=float)
    n = len(y)
    if n < 2:
        raise ValueError(f"At least 2 data points required for linear regression, got {n}")

    x = np.arange(n, dtype=float)
    x_mean = x.mean()
    y_mean = y.mean()
    sxx = float(np.sum((x - x_mean) ** 2))

    if sxx == 0:
        slope = 0.0
        intercept = float(y_mean)
    else:
        result = sm.OLS(y, sm.add_constant(x, has_constant="add")).fit()
        intercept, slope = (float(p) for p in result.params)

    residuals = y - (slope * x + intercept)
    ss_res = float(np.sum(residuals**2))
    ss_tot = float(np.sum((y - y_mean) ** 2))

    r_squared = 1.0 - ss_res / ss_tot if ss_tot != 0 else 0.0
    r_squared = min(1.0, max(0.0, r_squared))

    standard_error = float(np.sqrt(ss_res / (n - 2))) if n > 2 else 0.0

    return RegressionFit(
        slope=slope,
        intercept=intercept,
        r_squared=r_squared,
        standard_error=standard_error,
        n_observations=n,
    )


class LinearTrendModel(ForecastModel):
    """Least-squares linear trend with a distance-scaled confidence band.

    The interval half-width at step i is z * SE * sqrt(1 + i / n), so it never
    shrinks as the forecast moves away from the data.
    """

    def train(self, values: np.ndarray) -> RegressionFit:
        """Fit the trend line on the metric values.

        Raises:
            ValueError: If fewer than 2 values are given
        """
        return fit_linear_regression(values)

    def forecast(self, model: RegressionFit, steps: int, confidence_level: float) -> np.ndarray:
        """Project the fitted line for steps days after the last observation."""
        n = model.n_observations
        step = np.arange(1, steps + 1, dtype=float)
        x = n + step - 1

        predicted = model.slope * x + model.intercept
        margin = confidence_level * model.standard_error * np.sqrt(1.0 + step / n)

        return np.column_stack([predicted, predicted - margin, predicted + margin])
