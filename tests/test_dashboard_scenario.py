"""End-to-end dashboard scenario: one month of rising revenue with a bad day.

All three analyses run on the same 30-day history, the way the dashboard
requests them together.
"""

from datetime import date, datetime, timedelta, timezone

import numpy as np
import pytest

from pos_analytics.anomaly import detect_anomalies, get_critical_anomalies
from pos_analytics.benchmark import calculate_benchmark_data
from pos_analytics.forecasting import assess_forecast_reliability, generate_forecast

START = date(2025, 6, 1)
DROP_INDEX = 19  # day 20


def _revenue(with_drop: bool = True) -> np.ndarray:
    values = np.linspace(1_000_000.0, 2_000_000.0, 30)
    if with_drop:
        values[DROP_INDEX] = 200_000.0
    return values


def _trends(values: np.ndarray) -> list[dict]:
    return [
        {
            "date": (START + timedelta(days=i)).isoformat(),
            "revenue": float(value),
            "transactions": 100 + i,
            "average_ticket": float(value) / (100 + i),
        }
        for i, value in enumerate(values)
    ]


def test_forecast_follows_the_ramp() -> None:
    """Test the trend fit with and without the bad day."""
    clean = generate_forecast(_trends(_revenue(with_drop=False)), "revenue", days_ahead=7)
    assert clean is not None
    assert clean.r_squared == pytest.approx(1.0)
    assert clean.slope == pytest.approx(1_000_000.0 / 29)
    assert assess_forecast_reliability(clean).confidence == "high"

    values = _revenue()
    result = generate_forecast(_trends(values), "revenue", days_ahead=7)
    assert result is not None
    expected_r2 = np.corrcoef(np.arange(30), values)[0, 1] ** 2
    assert result.r_squared == pytest.approx(expected_r2)
    # One outlier pulls the fit down but the upward trend stays
    assert result.r_squared > 0.5
    assert result.slope > 0
    assert result.forecast[0].value > values.mean()


def test_bad_day_is_a_severe_drop() -> None:
    """Test that day 20 is flagged as the only drop."""
    result = detect_anomalies(_trends(_revenue()), "revenue")

    drops = [a for a in result.anomalies if a.type == "drop"]
    assert len(drops) == 1
    drop = drops[0]
    assert drop.date == START + timedelta(days=DROP_INDEX)
    assert drop.severity in ("high", "critical")
    assert drop.variance < -80.0
    assert drop in get_critical_anomalies(result, limit=10)


def test_latest_day_benchmarks() -> None:
    """Test the last day against different baselines of the full month."""
    values = _revenue()
    trends = _trends(values)
    now = datetime(2025, 7, 1, tzinfo=timezone.utc)

    def revenue_status(baseline_type: str) -> str:
        data = calculate_benchmark_data(
            current_revenue=2_000_000.0,
            current_transactions=129,
            current_average_ticket=2_000_000.0 / 129,
            data=trends,
            baseline_type=baseline_type,
            calculated_at=now,
        )
        return data.revenue.status

    # The month average is dragged down by the early days and the bad day
    assert revenue_status("avg_30_days") == "above_target"
    assert revenue_status("all_time") == "above_target"
    # The last week already sits close to 2M
    assert revenue_status("avg_7_days") == "on_track"
