"""Domain-specific exceptions for POS Analytics.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from PosAnalyticsError for easy catching.

Note that insufficient or messy business data never raises: the analytics
functions return an empty result (or None for forecasts) instead.
"""


class PosAnalyticsError(Exception):
    """Base exception for all POS Analytics errors.

    Users can catch this exception to handle any POS Analytics error.
    """

    pass


class ConfigError(PosAnalyticsError):
    """Raised when there is a configuration error.

    This exception is raised when:
    - An unknown metric name is requested
    - An unsupported forecast horizon is requested
    - Anomaly detection parameters are out of range
    """

    pass


class DataQualityError(PosAnalyticsError):
    """Raised when input data is structurally unusable.

    This exception is raised when:
    - Required columns are missing from an input DataFrame
    """

    pass
