"""In-memory graph of the metro network.

This module defines the Network type used throughout the project: a
mapping from station name to Station plus the list of undirected links
registered on it. Every link is stored as two mirrored connections so
that neighbor queries never have to look at the other endpoint.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Set, Tuple

from ..domain.errors import UnknownStationError
from ..domain.models import Connection, Link, Station


class Network:
    """Stations and the lines connecting them.

    The network is built once during ingestion and only read afterwards.
    """

    def __init__(self) -> None:
        self._stations: Dict[str, Station] = {}
        self._links: List[Link] = []

    def add_station(self, name: str) -> Station:
        """Register a station, or return the existing one with that name."""
        station = self._stations.get(name)
        if station is None:
            station = Station(name)
            self._stations[name] = station
        return station

    def add_connection(self, a: str, b: str, line: str, weight: int = 1) -> Link:
        """Link two registered stations in both directions.

        Both directions carry the same line and weight. Calling this twice
        for the same pair creates parallel connections; callers ingesting
        a link from both ends must only register it once.

        Raises:
            UnknownStationError: If either endpoint is not registered.
            ValueError: If the weight is not a positive integer.
        """
        source = self.station(a)
        destination = self.station(b)

        # Build both halves before touching either station.
        forward = Connection(destination, line, weight)
        backward = Connection(source, line, weight)
        source.connections.append(forward)
        destination.connections.append(backward)

        link = Link(a, b, line, weight)
        self._links.append(link)
        return link

    def station(self, name: str) -> Station:
        """Return the station called ``name``.

        Raises:
            UnknownStationError: If no such station was registered.
        """
        try:
            return self._stations[name]
        except KeyError:
            raise UnknownStationError(
                f"Unknown station: {name}", station_name=name
            ) from None

    def connections(self, name: str) -> Tuple[Connection, ...]:
        """Return the connections leaving ``name``."""
        return tuple(self.station(name).connections)

    def neighbors(self, name: str) -> Set[str]:
        """Return the distinct stations one connection away from ``name``."""
        return {c.destination.name for c in self.station(name).connections}

    def stations_sharing_a_line(self, name: str) -> Set[str]:
        """Return the stations directly connected to ``name`` by any line.

        Lines are only known through connection labels, so this is the
        one-hop neighborhood of the station.
        """
        return self.neighbors(name)

    def stations_on_line(self, line: str) -> Set[str]:
        """Return every station served by ``line``."""
        stations: Set[str] = set()
        for link in self._links:
            if link.line == line:
                stations.add(link.a)
                stations.add(link.b)
        return stations

    def stations(self) -> List[str]:
        """Return all station names, sorted."""
        return sorted(self._stations)

    def lines(self) -> List[str]:
        """Return the distinct line labels, sorted."""
        return sorted({link.line for link in self._links})

    @property
    def links(self) -> Tuple[Link, ...]:
        """Undirected links in registration order."""
        return tuple(self._links)

    def __contains__(self, name: object) -> bool:
        return name in self._stations

    def __iter__(self) -> Iterator[str]:
        return iter(self._stations)

    def __len__(self) -> int:
        return len(self._stations)

    def __repr__(self) -> str:
        return f"Network(stations={len(self._stations)}, links={len(self._links)})"
