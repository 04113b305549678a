"""Example: Building the sales dashboard analytics cards

This example runs all three analyses the dashboard shows side by side:
- trend forecast for revenue
- anomaly alerts for every metric
- benchmark of today's figures against the last 7 days

The results are serialized with to_dict(), which produces the camelCase
payload the dashboard frontend consumes.
"""

import json
from datetime import date, timedelta

from pos_analytics.anomaly import detect_all_anomalies, get_critical_anomalies, summarize_anomalies
from pos_analytics.benchmark import calculate_benchmark_data
from pos_analytics.forecasting import generate_forecast
from pos_analytics.formatters import anomaly_color, anomaly_icon, benchmark_status_label, progress_percentage

# Four weeks of history with a slow weekend and one outage day
start = date(2025, 3, 1)
trends = []
for i in range(28):
    day = start + timedelta(days=i)
    revenue = 2_000_000.0 + 15_000.0 * i
    if day.weekday() >= 5:
        revenue *= 0.85
    if i == 23:
        revenue = 300_000.0  # POS outage
    transactions = int(revenue // 18_000)
    trends.append(
        {
            "date": day.isoformat(),
            "revenue": revenue,
            "transactions": transactions,
            "average_ticket": revenue / transactions,
        }
    )

forecast = generate_forecast(trends, "revenue", days_ahead=7)
print("Forecast card:")
print(json.dumps(forecast.to_dict()["forecast"][:3] if forecast else None, indent=2))

print("\nAnomaly alerts:")
results = detect_all_anomalies(trends)
for metric, result in results.items():
    summary = summarize_anomalies(result)
    print(f"  {metric}: {summary.total} anomalies ({summary.by_severity})")
    for anomaly in get_critical_anomalies(result, limit=3):
        print(f"    [{anomaly_icon(anomaly.type)} {anomaly_color(anomaly)}] {anomaly.description}")

print("\nBenchmark cards (today vs 7-day average):")
benchmark = calculate_benchmark_data(
    current_revenue=2_500_000.0,
    current_transactions=140,
    current_average_ticket=2_500_000.0 / 140,
    data=trends,
    baseline_type="avg_7_days",
)
for metric in benchmark.metrics().values():
    progress = progress_percentage(metric.current, metric.baseline)
    print(
        f"  {metric.label}: {metric.variance:+.1f}% "
        f"({benchmark_status_label(metric.status)}, progress bar {progress:.0f}%)"
    )
