"""Tests for the linear trend model."""

import numpy as np
import pytest

from pos_analytics.forecasting.models import ForecastModel, LinearTrendModel
from pos_analytics.forecasting.models.linear import RegressionFit, fit_linear_regression


def test_fit_perfect_line() -> None:
    """Test that y = 2x + 5 is recovered exactly."""
    values = np.array([2.0 * x + 5.0 for x in range(10)])

    fit = fit_linear_regression(values)

    assert fit.slope == pytest.approx(2.0)
    assert fit.intercept == pytest.approx(5.0)
    assert fit.r_squared == pytest.approx(1.0)
    assert fit.standard_error == pytest.approx(0.0, abs=1e-9)
    assert fit.n_observations == 10


def test_fit_matches_numpy_polyfit() -> None:
    """Test that the OLS coefficients match numpy's least squares on noisy data."""
    values = np.array([120.0, 95.0, 130.0, 150.0, 110.0, 170.0, 160.0, 140.0, 190.0, 175.0])
    x = np.arange(len(values), dtype=float)

    fit = fit_linear_regression(values)
    expected_slope, expected_intercept = np.polyfit(x, values, 1)
    expected_r2 = np.corrcoef(x, values)[0, 1] ** 2

    assert fit.slope == pytest.approx(expected_slope)
    assert fit.intercept == pytest.approx(expected_intercept)
    assert fit.r_squared == pytest.approx(expected_r2)

    residuals = values - (expected_slope * x + expected_intercept)
    assert fit.standard_error == pytest.approx(np.sqrt(np.sum(residuals**2) / 8))


def test_fit_constant_series() -> None:
    """Test that a series without variance has zero slope and zero r_squared."""
    fit = fit_linear_regression(np.array([100.0] * 8))

    assert fit.slope == pytest.approx(0.0, abs=1e-9)
    assert fit.intercept == pytest.approx(100.0)
    assert fit.r_squared == 0.0
    assert fit.standard_error == pytest.approx(0.0, abs=1e-9)


def test_fit_two_points_has_zero_standard_error() -> None:
    """Test the n = 2 edge case."""
    fit = fit_linear_regression(np.array([10.0, 30.0]))

    assert fit.slope == pytest.approx(20.0)
    assert fit.intercept == pytest.approx(10.0)
    assert fit.standard_error == 0.0


def test_fit_requires_two_points() -> None:
    """Test that fewer than 2 points is rejected."""
    with pytest.raises(ValueError, match="At least 2"):
        fit_linear_regression(np.array([5.0]))


def test_r_squared_stays_in_unit_interval() -> None:
    """Test r_squared bounds on an oscillating series."""
    values = np.array([100.0, 200.0] * 10)

    fit = fit_linear_regression(values)

    assert 0.0 <= fit.r_squared <= 1.0


def test_regression_fit_predict() -> None:
    """Test RegressionFit.predict on scalars and arrays."""
    fit = RegressionFit(slope=2.0, intercept=1.0, r_squared=1.0, standard_error=0.0, n_observations=3)

    assert fit.predict(4) == 9.0
    assert fit.predict(np.array([0.0, 1.0])).tolist() == [1.0, 3.0]


def test_linear_trend_model_forecast_shape_and_band() -> None:
    """Test that the projection continues the line and the band widens."""
    model = LinearTrendModel()
    assert isinstance(model, ForecastModel)

    fit = RegressionFit(slope=1.0, intercept=0.0, r_squared=0.9, standard_error=2.0, n_observations=10)
    projection = model.forecast(fit, steps=5, confidence_level=1.96)

    assert projection.shape == (5, 3)
    # First step is day index 10
    assert projection[0, 0] == pytest.approx(10.0)
    assert projection[4, 0] == pytest.approx(14.0)
    # Band is symmetric around the prediction
    assert projection[0, 2] - projection[0, 0] == pytest.approx(projection[0, 0] - projection[0, 1])
    assert projection[0, 2] - projection[0, 0] == pytest.approx(1.96 * 2.0 * np.sqrt(1.1))

    widths = projection[:, 2] - projection[:, 1]
    assert np.all(np.diff(widths) > 0)
