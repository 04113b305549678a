"""Configuration constants for the sales analytics engine.

Per-call settings live in frozen dataclasses next to each component
(ForecastConfig, AnomalyConfig); this module only holds their defaults
and the fixed classification cut-offs.
"""

# Metrics tracked per day in a sales trend
METRICS = ("revenue", "transactions", "average_ticket")

# Supported forecast horizons (days ahead)
FORECAST_PERIODS = (7, 14, 30, 60, 90)
DEFAULT_FORECAST_DAYS = 30

# z-value for the forecast confidence interval (1.96 = ~95% two-sided)
DEFAULT_CONFIDENCE_LEVEL = 1.96

# Forecast reliability
MIN_RELIABLE_HISTORY_DAYS = 7
LOW_R_SQUARED = 0.3
MODERATE_R_SQUARED = 0.7

# Anomaly detection defaults
DEFAULT_WINDOW_SIZE = 7
DEFAULT_ZSCORE_THRESHOLD = 2.0
DEFAULT_FLAT_THRESHOLD = 5.0  # percent
DEFAULT_MIN_DATA_POINTS = 14

# Lower |z| bound for each severity above "low"
SEVERITY_CUTOFFS = (
    ("critical", 4.0),
    ("high", 3.0),
    ("medium", 2.5),
)

# Flat days are only reported while spikes/drops stay under this share of the series
FLAT_DETECTION_MAX_RATIO = 0.1

# Benchmark baselines: rolling windows in days (None = whole history)
BASELINE_WINDOWS = {
    "avg_7_days": 7,
    "avg_30_days": 30,
    "avg_90_days": 90,
    "all_time": None,
}
BASELINE_TYPES = ("avg_7_days", "avg_30_days", "avg_90_days", "all_time", "custom_target")
DEFAULT_BASELINE_TYPE = "avg_30_days"

# Percent variance beyond which a benchmark leaves "on_track"
BENCHMARK_STATUS_THRESHOLD = 10.0

# Progress bar clamp for benchmark cards
MAX_PROGRESS_PERCENTAGE = 200.0

CURRENCY_UNIT = "Rp"
