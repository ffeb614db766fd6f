"""Domain layer - Core models and errors.

This module contains the station/connection data model, query results
and typed errors used throughout the application. No external
dependencies.
"""

from .errors import (
    ConfigurationError,
    MalformedInputError,
    MetroNetworkError,
    NetworkLoadError,
    NoPathError,
    UnknownStationError,
)
from .models import (
    Connection,
    ConnectivityReport,
    LineCut,
    Link,
    RouteResult,
    RouteSegment,
    Station,
)

__all__ = [
    # Models
    "Station",
    "Connection",
    "Link",
    "RouteSegment",
    "RouteResult",
    "LineCut",
    "ConnectivityReport",
    # Errors
    "MetroNetworkError",
    "UnknownStationError",
    "NoPathError",
    "MalformedInputError",
    "NetworkLoadError",
    "ConfigurationError",
]
