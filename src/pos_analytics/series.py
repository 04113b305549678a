"""Daily sales time series shared by all analytics components.

A sales trend is one point per calendar day with revenue, transaction count
and average ticket. Upstream reporting hands these over as JSON-like records
or as a DataFrame; prepare_series() turns either into an immutable,
date-sorted TimeSeries and drops records whose date cannot be parsed.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Iterable, Iterator, Literal, Mapping, Union

import numpy as np
import pandas as pd

from pos_analytics.config import METRICS
from pos_analytics.exceptions import ConfigError, DataQualityError

logger = logging.getLogger(__name__)

Metric = Literal["revenue", "transactions", "average_ticket"]

SERIES_COLUMNS = ["date", "revenue", "transactions", "average_ticket"]


def validate_metric(metric: str) -> str:
    """Return metric unchanged, or raise ConfigError if it is not tracked."""
    if metric not in METRICS:
        raise ConfigError(f"Unknown metric '{metric}'. Must be one of {list(METRICS)}")
    return metric


def parse_trend_date(value: Any) -> date | None:
    """Parse a trend date as a calendar day.

    Accepts date/datetime objects, pandas Timestamps, numpy datetime64 and
    ISO-8601 strings. Values carrying a UTC offset are converted to UTC
    before the time of day is dropped. Anything else, numbers included, is
    treated as unparseable.

    Returns:
        The calendar date, or None if the value is missing or unparseable.

    Examples:
        >>> parse_trend_date("2025-01-31")
        datetime.date(2025, 1, 31)
        >>> parse_trend_date("2025-01-31T23:30:00-05:00")
        datetime.date(2025, 2, 1)
        >>> parse_trend_date(20250131) is None
        True

    """
    if isinstance(value, str):
        if not value.strip():
            return None
        parsed = pd.to_datetime(value, errors="coerce")
    elif isinstance(value, (datetime, np.datetime64)):
        parsed = pd.Timestamp(value)
    elif isinstance(value, date):
        return value
    else:
        return None

    if parsed is None or pd.isna(parsed):
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.tz_convert("UTC")
    return parsed.date()


def _as_float(value: Any) -> float:
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if np.isnan(number) else number


@dataclass(frozen=True)
class TimeSeriesPoint:
    """One calendar day of aggregated sales.

    Attributes:
        date: Calendar day (unique within a series).
        revenue: Total revenue for the day.
        transactions: Number of transactions for the day.
        average_ticket: Average ticket value, typically revenue / transactions.
    """

    date: date
    revenue: float = 0.0
    transactions: int = 0
    average_ticket: float = 0.0

    def value(self, metric: str) -> float:
        """Return the named metric as a float."""
        return float(getattr(self, validate_metric(metric)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "revenue": self.revenue,
            "transactions": self.transactions,
            "average_ticket": self.average_ticket,
        }


@dataclass(frozen=True)
class TimeSeries:
    """Immutable, ordered sequence of daily sales points.

    Build instances through prepare_series() (or the from_* constructors),
    which guarantee ascending date order and valid dates.
    """

    points: tuple[TimeSeriesPoint, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[TimeSeriesPoint]:
        return iter(self.points)

    def __getitem__(self, index: int) -> TimeSeriesPoint:
        return self.points[index]

    @property
    def dates(self) -> list[date]:
        return [point.date for point in self.points]

    @property
    def first_date(self) -> date | None:
        return self.points[0].date if self.points else None

    @property
    def last_date(self) -> date | None:
        return self.points[-1].date if self.points else None

    def values(self, metric: str) -> np.ndarray:
        """Return the metric values as a float array, in date order."""
        validate_metric(metric)
        return np.array([p.value(metric) for p in self.points], dtype=float)

    def tail(self, n: int) -> TimeSeries:
        """Return the last n points (the whole series if it is shorter)."""
        if n >= len(self.points):
            return self
        return TimeSeries(self.points[-n:] if n > 0 else ())

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a DataFrame with columns date, revenue, transactions, average_ticket."""
        if not self.points:
            return pd.DataFrame(columns=SERIES_COLUMNS)
        df = pd.DataFrame([p.to_dict() for p in self.points], columns=SERIES_COLUMNS)
        df["date"] = pd.to_datetime(df["date"])
        return df

    def to_records(self) -> list[dict[str, Any]]:
        return [p.to_dict() for p in self.points]

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any] | TimeSeriesPoint]) -> TimeSeries:
        """Build a sorted series from records, dropping unparseable dates."""
        points: list[TimeSeriesPoint] = []
        dropped = 0
        for record in records:
            if isinstance(record, TimeSeriesPoint):
                points.append(record)
                continue

            point_date = parse_trend_date(record.get("date"))
            if point_date is None:
                dropped += 1
                continue

            points.append(
                TimeSeriesPoint(
                    date=point_date,
                    revenue=_as_float(record.get("revenue")),
                    transactions=int(_as_float(record.get("transactions"))),
                    average_ticket=_as_float(record.get("average_ticket")),
                )
            )

        if dropped:
            logger.debug(f"Dropped {dropped} trend records with missing or invalid dates")

        # list.sort is stable, so same-day records keep their input order
        points.sort(key=lambda p: p.date)

        duplicates = _find_duplicates(points)
        if duplicates:
            logger.warning(
                f"Trend data has {len(duplicates)} duplicated dates "
                f"(first: {duplicates[0].isoformat()}); expected one point per day"
            )

        return cls(tuple(points))

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> TimeSeries:
        """Build a sorted series from a DataFrame with a 'date' column.

        Metric columns that are absent are treated as zero.

        Raises:
            DataQualityError: If the 'date' column is missing.
        """
        if "date" not in df.columns:
            raise DataQualityError(
                f"Missing required column 'date' in trend data. Columns: {list(df.columns)}"
            )

        frame = df.copy()
        for metric in METRICS:
            if metric not in frame.columns:
                frame[metric] = 0.0
        return cls.from_records(frame[SERIES_COLUMNS].to_dict(orient="records"))


SeriesInput = Union[TimeSeries, pd.DataFrame, Iterable[Union[Mapping[str, Any], TimeSeriesPoint]]]


def prepare_series(data: SeriesInput) -> TimeSeries:
    """Sort and filter trend input into a TimeSeries.

    The input is never modified. Records without a parseable date are dropped.

    Args:
        data: A TimeSeries, a DataFrame with a 'date' column, or an iterable of
            mappings / TimeSeriesPoint objects.

    Returns:
        TimeSeries sorted ascending by date.
    """
    if isinstance(data, TimeSeries):
        if all(a.date <= b.date for a, b in zip(data.points, data.points[1:])):
            return data
        return TimeSeries.from_records(data.points)
    if isinstance(data, pd.DataFrame):
        return TimeSeries.from_dataframe(data)
    return TimeSeries.from_records(data)


def _find_duplicates(points: list[TimeSeriesPoint]) -> list[date]:
    counts = Counter(p.date for p in points)
    return sorted(d for d, count in counts.items() if count > 1)


def duplicate_dates(series: TimeSeries) -> list[date]:
    """Return dates that appear more than once in the series."""
    return _find_duplicates(list(series.points))


def missing_dates(series: TimeSeries) -> list[date]:
    """Return calendar days missing between the first and last date of the series."""
    if len(series) < 2:
        return []

    present = set(series.dates)
    first, last = series.first_date, series.last_date
    assert first is not None and last is not None
    span = (last - first).days
    return [
        first + timedelta(days=offset)
        for offset in range(1, span)
        if first + timedelta(days=offset) not in present
    ]
