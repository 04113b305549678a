"""Reliability assessment for trend forecasts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from pos_analytics.config import LOW_R_SQUARED, MIN_RELIABLE_HISTORY_DAYS, MODERATE_R_SQUARED
from pos_analytics.forecasting.api import ForecastResult

Confidence = Literal["low", "medium", "high"]


@dataclass(frozen=True)
class ForecastReliability:
    """How far a forecast can be trusted.

    Attributes:
        is_reliable: True when there is at most one warning and r_squared >= 0.3.
        confidence: 'low', 'medium' or 'high', from r_squared.
        warnings: Informational messages for the dashboard banner.
    """

    is_reliable: bool
    confidence: Confidence
    warnings: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "isReliable": self.is_reliable,
            "confidence": self.confidence,
            "warnings": list(self.warnings),
        }


def assess_forecast_reliability(result: ForecastResult) -> ForecastReliability:
    """Grade a forecast by history length, fit quality and trend direction.

    A declining revenue trend is flagged for attention but does not by itself
    make the forecast unreliable.

    Args:
        result: ForecastResult from generate_forecast()

    Returns:
        ForecastReliability with confidence level and warnings
    """
    warnings: list[str] = []

    if len(result.historical) < MIN_RELIABLE_HISTORY_DAYS:
        warnings.append(
            f"Limited historical data (less than {MIN_RELIABLE_HISTORY_DAYS} days). "
            "Forecast may be unreliable."
        )

    confidence: Confidence = "high"
    if result.r_squared < LOW_R_SQUARED:
        confidence = "low"
        warnings.append("Low R² value indicates poor fit. Data may not follow linear trend.")
    elif result.r_squared < MODERATE_R_SQUARED:
        confidence = "medium"
        warnings.append("Moderate R² value. Forecast has moderate accuracy.")

    if result.metric == "revenue" and result.slope < 0:
        warnings.append("Declining trend detected. Review business conditions.")

    is_reliable = len(warnings) < 2 and result.r_squared >= LOW_R_SQUARED

    return ForecastReliability(
        is_reliable=is_reliable,
        confidence=confidence,
        warnings=tuple(warnings),
    )
