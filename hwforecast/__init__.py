"""Multiplicative Holt-Winters seasonal forecasting."""

import logging

from .validation import validate
from .forecaster import forecast, forecast_with, forecast_series, components
from .helpers    import DegenerateSeriesError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "validate",
    "forecast",
    "forecast_with",
    "forecast_series",
    "components",
    "DegenerateSeriesError",
]
