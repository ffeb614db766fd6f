"""Typed domain errors for the metro network.

Every failure the graph engine can report is a subclass of
MetroNetworkError. Callers get an explicit, typed error instead of an
empty result that could be confused with "no route exists".

All errors can optionally wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MetroNetworkError(Exception):
    """Base error for the metro network domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UnknownStationError(MetroNetworkError):
    """A query or connection references a station that was never ingested.

    Attributes:
        station_name: The name that could not be resolved
    """

    station_name: str = ""


@dataclass
class NoPathError(MetroNetworkError):
    """The search exhausted its frontier without reaching the destination.

    Attributes:
        source: Departure station name
        destination: Arrival station name
        disabled_line: Line excluded from the search, if any
    """

    source: str = ""
    destination: str = ""
    disabled_line: Optional[str] = None


@dataclass
class MalformedInputError(MetroNetworkError):
    """An ingestion line does not carry a line name and at least one station.

    Attributes:
        line_number: 1-based position of the offending line in the input
        content: The raw text of the offending line
    """

    line_number: int = 0
    content: str = ""


@dataclass
class NetworkLoadError(MetroNetworkError):
    """The network description could not be read.

    Attributes:
        file_path: Path to the network file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(MetroNetworkError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
