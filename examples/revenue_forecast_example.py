"""Example: Forecasting daily revenue with the linear trend model

This example demonstrates how to project a daily sales metric forward and
check how far the projection can be trusted before showing it on the
dashboard.

Prerequisites:
- A daily sales CSV with date, revenue, transactions and average_ticket
  columns (modify data_file below), or nothing: synthetic data is used
  when the file is missing
"""

from pathlib import Path

import numpy as np
import pandas as pd

from pos_analytics.forecasting import ForecastConfig, assess_forecast_reliability, generate_forecast

data_file = Path("data/daily_sales_trends.csv")

print("=" * 80)
print("Revenue Forecast")
print("=" * 80)

if data_file.exists():
    print(f"\nLoading data from: {data_file}")
    trends = pd.read_csv(data_file)
else:
    print("\nNo CSV found, generating 60 days of synthetic sales...")
    rng = np.random.default_rng(7)
    days = pd.date_range("2025-01-01", periods=60, freq="D")
    revenue = 1_500_000 + 12_000 * np.arange(60) + rng.normal(0, 80_000, 60)
    transactions = np.round(revenue / 15_000).astype(int)
    trends = pd.DataFrame(
        {
            "date": days,
            "revenue": revenue,
            "transactions": transactions,
            "average_ticket": revenue / transactions,
        }
    )

print(f"Loaded {len(trends)} days")

# Default config: linear trend, 95% band
result = generate_forecast(trends, "revenue", days_ahead=30)

if result is None:
    print("Not enough data for a forecast (need at least 2 days)")
else:
    reliability = assess_forecast_reliability(result)
    print(f"\nSlope: {result.slope:+,.0f} per day")
    print(f"R2: {result.r_squared:.3f} (confidence: {reliability.confidence})")
    for warning in reliability.warnings:
        print(f"  ! {warning}")

    print("\nForecast (first 10 days):")
    print(result.forecast_dataframe().head(10))

# Example 2: narrower band (z = 1.0, ~68%) over two weeks
config = ForecastConfig(days_ahead=14, confidence_level=1.0)
narrow = generate_forecast(trends, "transactions", config=config)
if narrow is not None:
    print("\nTransactions, 14 days, 68% band:")
    for point in narrow.forecast[:5]:
        print(f"  {point.date}: {point.value:,.0f} [{point.lower_bound:,.0f} - {point.upper_bound:,.0f}]")
