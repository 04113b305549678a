"""Tests for the forecasting API."""

import logging
from datetime import date, timedelta

import numpy as np
import pandas as pd
import pytest

from pos_analytics.exceptions import ConfigError
from pos_analytics.forecasting import ForecastConfig, ForecastResult, generate_forecast
from pos_analytics.forecasting.models import ForecastModel, LinearTrendModel, RegressionFit


def _trend(values: list[float], start: date = date(2025, 1, 1)) -> list[dict]:
    """Daily records with the given revenue, one per consecutive day."""
    return [
        {
            "date": (start + timedelta(days=i)).isoformat(),
            "revenue": value,
            "transactions": int(value // 10),
            "average_ticket": 10.0,
        }
        for i, value in enumerate(values)
    ]


def test_forecast_perfect_line() -> None:
    """Test that a perfect linear history is extended exactly, with a zero-width band."""
    values = [2.0 * x + 5.0 for x in range(10)]

    result = generate_forecast(_trend(values), "revenue", days_ahead=7)

    assert isinstance(result, ForecastResult)
    assert result.slope == pytest.approx(2.0)
    assert result.intercept == pytest.approx(5.0)
    assert result.r_squared == pytest.approx(1.0)
    assert len(result.forecast) == 7
    for i, point in enumerate(result.forecast, start=1):
        assert point.value == pytest.approx(2.0 * (9 + i) + 5.0)
        assert point.interval_width == pytest.approx(0.0, abs=1e-6)
        assert point.is_forecasted is True


def test_forecast_dates_follow_last_day() -> None:
    """Test that forecast day i is last_date + i days."""
    result = generate_forecast(_trend([100.0, 110.0, 125.0, 130.0]), "revenue", days_ahead=14)

    assert result is not None
    last = date(2025, 1, 4)
    assert [p.date for p in result.forecast] == [last + timedelta(days=i) for i in range(1, 15)]


def test_forecast_default_horizon() -> None:
    """Test that the default horizon is 30 days."""
    result = generate_forecast(_trend([1.0, 2.0, 3.0]), "revenue")

    assert result is not None
    assert len(result.forecast) == 30


@pytest.mark.parametrize("days_ahead", [7, 14, 30, 60, 90])
def test_forecast_supported_horizons(days_ahead: int) -> None:
    """Test every supported horizon."""
    result = generate_forecast(_trend([1.0, 2.0, 3.0]), "revenue", days_ahead=days_ahead)

    assert result is not None
    assert len(result.forecast) == days_ahead


def test_forecast_unsupported_horizon() -> None:
    """Test that horizons outside the supported set are rejected."""
    with pytest.raises(ConfigError, match="Unsupported forecast horizon"):
        generate_forecast(_trend([1.0, 2.0, 3.0]), "revenue", days_ahead=10)


def test_forecast_unknown_metric() -> None:
    """Test that unknown metrics are rejected."""
    with pytest.raises(ConfigError, match="Unknown metric"):
        generate_forecast(_trend([1.0, 2.0, 3.0]), "profit")


def test_forecast_needs_two_valid_points() -> None:
    """Test that 0 or 1 valid points give no forecast."""
    assert generate_forecast([], "revenue") is None
    assert generate_forecast(_trend([100.0]), "revenue") is None

    # Three records, but only one has a usable date
    records = _trend([100.0, 200.0, 300.0])
    records[1]["date"] = "garbage"
    records[2]["date"] = None
    assert generate_forecast(records, "revenue") is None


def test_forecast_two_points() -> None:
    """Test the smallest forecastable history."""
    result = generate_forecast(_trend([100.0, 120.0]), "revenue", days_ahead=7)

    assert result is not None
    assert result.slope == pytest.approx(20.0)
    assert result.standard_error == 0.0
    assert result.forecast[0].value == pytest.approx(140.0)


def test_forecast_interval_width_never_shrinks() -> None:
    """Test that the confidence band widens with forecast distance."""
    values = [100.0 + 5.0 * i + (10.0 if i % 2 else -10.0) for i in range(20)]

    result = generate_forecast(_trend(values), "revenue", days_ahead=30)

    assert result is not None
    widths = [p.interval_width for p in result.forecast]
    assert widths[0] > 0
    assert all(later >= earlier for earlier, later in zip(widths, widths[1:]))
    for point in result.forecast:
        assert point.lower_bound <= point.value <= point.upper_bound


def test_forecast_is_never_negative() -> None:
    """Test that a steep decline is clamped at zero."""
    values = [100.0 - 10.0 * i + (3.0 if i % 2 else -3.0) for i in range(10)]

    result = generate_forecast(_trend(values), "revenue", days_ahead=30)

    assert result is not None
    assert result.slope < 0
    for point in result.forecast:
        assert point.value >= 0
        assert point.lower_bound >= 0
        assert point.upper_bound >= 0
        assert point.lower_bound <= point.value <= point.upper_bound
    assert result.forecast[-1].value == 0.0


def test_forecast_unsorted_input() -> None:
    """Test that input order does not change the result."""
    records = _trend([100.0, 130.0, 120.0, 160.0, 150.0])
    shuffled = [records[3], records[0], records[4], records[2], records[1]]

    assert generate_forecast(shuffled, "revenue", days_ahead=7) == generate_forecast(
        records, "revenue", days_ahead=7
    )


def test_forecast_is_deterministic() -> None:
    """Test that repeated runs on the same input give equal results."""
    records = _trend([100.0, 130.0, 120.0, 160.0, 150.0, 175.0, 170.0])

    first = generate_forecast(records, "revenue", days_ahead=30)
    second = generate_forecast(records, "revenue", days_ahead=30)

    assert first is not None
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_forecast_from_dataframe() -> None:
    """Test forecasting from a DataFrame input."""
    df = pd.DataFrame(_trend([10.0, 20.0, 30.0]))

    result = generate_forecast(df, "transactions", days_ahead=7)

    assert result is not None
    assert result.metric == "transactions"
    assert result.slope == pytest.approx(1.0)


def test_forecast_config_overrides_arguments() -> None:
    """Test that an explicit ForecastConfig wins over positional arguments."""
    config = ForecastConfig(days_ahead=14, confidence_level=1.0, model=LinearTrendModel())

    result = generate_forecast(_trend([1.0, 3.0, 2.0, 5.0]), "revenue", days_ahead=90, config=config)

    assert result is not None
    assert len(result.forecast) == 14


class FlatTrendModel(ForecastModel):
    """Projects the historical mean with a fixed band."""

    def train(self, values: np.ndarray) -> RegressionFit:
        return RegressionFit(
            slope=0.0,
            intercept=float(values.mean()),
            r_squared=0.0,
            standard_error=5.0,
            n_observations=len(values),
        )

    def forecast(self, model: RegressionFit, steps: int, confidence_level: float) -> np.ndarray:
        predicted = np.full(steps, model.intercept)
        margin = confidence_level * model.standard_error
        return np.column_stack([predicted, predicted - margin, predicted + margin])


def test_forecast_reports_statistics_of_custom_model() -> None:
    """Test that result statistics come from the model's RegressionFit."""
    config = ForecastConfig(days_ahead=7, confidence_level=2.0, model=FlatTrendModel())

    result = generate_forecast(_trend([100.0, 120.0, 140.0]), "revenue", config=config)

    assert result is not None
    assert result.slope == 0.0
    assert result.intercept == pytest.approx(120.0)
    assert result.r_squared == 0.0
    assert result.standard_error == 5.0
    assert all(p.value == pytest.approx(120.0) for p in result.forecast)
    assert result.forecast[0].interval_width == pytest.approx(20.0)


def test_forecast_confidence_level_scales_band() -> None:
    """Test that a larger z-value gives a wider band."""
    records = _trend([100.0, 130.0, 120.0, 160.0, 150.0])

    narrow = generate_forecast(records, "revenue", days_ahead=7, confidence_level=1.0)
    wide = generate_forecast(records, "revenue", days_ahead=7, confidence_level=2.0)

    assert narrow is not None and wide is not None
    assert wide.forecast[0].interval_width == pytest.approx(2 * narrow.forecast[0].interval_width)


def test_forecast_config_validation() -> None:
    """Test ForecastConfig validation."""
    with pytest.raises(ConfigError):
        ForecastConfig(days_ahead=45)
    with pytest.raises(ConfigError, match="confidence_level"):
        ForecastConfig(confidence_level=-1.0)


def test_forecast_logs_gaps(caplog: pytest.LogCaptureFixture) -> None:
    """Test that calendar gaps are logged as a warning."""
    records = [
        {"date": "2025-01-01", "revenue": 100.0},
        {"date": "2025-01-02", "revenue": 110.0},
        {"date": "2025-01-06", "revenue": 150.0},
    ]

    with caplog.at_level(logging.WARNING):
        result = generate_forecast(records, "revenue", days_ahead=7)

    assert result is not None
    assert "3 calendar days missing" in caplog.text


def test_forecast_result_serialization() -> None:
    """Test to_dict and forecast_dataframe."""
    result = generate_forecast(_trend([100.0, 110.0, 120.0]), "revenue", days_ahead=7)
    assert result is not None

    data = result.to_dict()
    assert data["metric"] == "revenue"
    assert data["rSquared"] == pytest.approx(1.0)
    assert len(data["historical"]) == 3
    assert set(data["forecast"][0]) == {"date", "value", "lowerBound", "upperBound", "isForecasted"}
    assert data["forecast"][0]["date"] == "2025-01-04"

    df = result.forecast_dataframe()
    assert list(df.columns) == ["date", "value", "lower", "upper"]
    assert len(df) == 7
