"""Base model interface for trend forecasting models.

This module defines the abstract base class that forecasting models implement,
so the forecast API can project any fitted model the same way.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from pos_analytics.forecasting.models.linear import RegressionFit


class ForecastModel(ABC):
    """Abstract base class for forecasting models.

    Models are fitted on the values of one metric, in date order, with the
    day index (0..n-1) as the time axis.
    """

    @abstractmethod
    def train(self, values: np.ndarray) -> RegressionFit:
        """Fit the model on a metric's values.

        Args:
            values: Metric values ordered by date (at least 2 observations)

        Returns:
            RegressionFit with the trend coefficients and fit statistics that
            ForecastResult and the reliability check report

        Raises:
            ValueError: If fewer observations are given than the model needs
        """
        pass

    @abstractmethod
    def forecast(self, model: RegressionFit, steps: int, confidence_level: float) -> np.ndarray:
        """Project a fitted model forward.

        Args:
            model: Fitted trend (from train() method)
            steps: Number of days to forecast ahead
            confidence_level: z-value used for the interval half-width

        Returns:
            Array of shape (steps, 3) with columns predicted, lower, upper,
            before any clamping to zero
        """
        pass
