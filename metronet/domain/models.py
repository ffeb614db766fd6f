"""Domain models for the metro network.

Stations are the only mutable model: they accumulate connections while
the network is ingested. Everything produced by a query (routes, cuts,
connectivity reports) is a frozen dataclass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass
class Station:
    """A named node of the network.

    Equality and hashing only look at ``name``; a station's connections
    change during ingestion and must not affect its identity.

    Attributes:
        name: Unique station name
        connections: Incident connections in insertion order
    """

    name: str
    connections: List[Connection] = field(
        default_factory=list, repr=False, compare=False
    )

    def __hash__(self) -> int:
        return hash(self.name)


@dataclass(frozen=True, slots=True)
class Connection:
    """Directed half of a bidirectional link, owned by its source station.

    Attributes:
        destination: Station reached through this connection
        line: Label of the line the connection belongs to
        weight: Travel time in abstract units
    """

    destination: Station
    line: str
    weight: int = 1

    def __post_init__(self) -> None:
        """Validate the weight."""
        if isinstance(self.weight, bool) or not isinstance(self.weight, int):
            raise ValueError(f"Weight must be an integer, got {self.weight!r}")
        if self.weight <= 0:
            raise ValueError(f"Weight must be positive, got {self.weight}")


@dataclass(frozen=True, slots=True)
class Link:
    """One undirected link as registered on the network."""

    a: str
    b: str
    line: str
    weight: int = 1


@dataclass(frozen=True, slots=True)
class RouteSegment:
    """One hop of a route."""

    from_station: str
    to_station: str
    line: str
    time: int


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-path query.

    Attributes:
        path: Ordered station names from source to destination inclusive
        total_time: Sum of the weights along the path
        segments: Per-hop details, one fewer than the number of stops
        disabled_line: Line that was excluded from the search, if any
    """

    path: Tuple[str, ...]
    total_time: int
    segments: Tuple[RouteSegment, ...] = field(default_factory=tuple)
    disabled_line: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of stations on the route."""
        return len(self.path)

    @property
    def lines_used(self) -> Tuple[str, ...]:
        """Return the lines ridden, in travel order, without repeats."""
        lines: List[str] = []
        for segment in self.segments:
            if segment.line not in lines:
                lines.append(segment.line)
        return tuple(lines)

    @property
    def num_transfers(self) -> int:
        """Return how many times the route changes line."""
        changes = 0
        for previous, current in zip(self.segments, self.segments[1:]):
            if previous.line != current.line:
                changes += 1
        return changes


@dataclass(frozen=True, slots=True)
class LineCut:
    """A set of lines whose joint removal disconnects the network.

    Attributes:
        lines: Line names, sorted
        witness: One pair of stations left unreachable from each other
    """

    lines: Tuple[str, ...]
    witness: Tuple[str, str]

    @property
    def size(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class ConnectivityReport:
    """Outcome of the per-line connectivity analysis.

    Attributes:
        already_disconnected: True if the full network has several components
        components: Connected components of the full network, each sorted
        broken_lines: Lines whose single removal disconnects the network,
            mapped to one witness pair of now unreachable stations
        minimum_cut: Smallest set of lines found whose removal disconnects
            the network, if any within the configured search size
    """

    already_disconnected: bool
    components: Tuple[Tuple[str, ...], ...] = field(default_factory=tuple)
    broken_lines: Dict[str, Tuple[str, str]] = field(default_factory=dict)
    minimum_cut: Optional[LineCut] = None

    @property
    def minimum_lines_to_break(self) -> Optional[int]:
        """Return how many lines must fail before two stations are cut off.

        Zero when the network is already disconnected, None when no cut
        was found within the search size.
        """
        if self.already_disconnected:
            return 0
        if self.minimum_cut is None:
            return None
        return self.minimum_cut.size
