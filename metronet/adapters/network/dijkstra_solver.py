"""Dijkstra Route Solver adapter.

This adapter wraps the search in graph/dijkstra.py and adds:
- Domain model output (RouteResult with per-hop segments)
- Typed errors for unknown stations and unreachable destinations
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ...domain.errors import NoPathError, UnknownStationError
from ...domain.models import RouteResult, RouteSegment
from ...graph.dijkstra import dijkstra
from ...graph.network import Network


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        network: Network,
        source: str,
        destination: str,
        disabled_line: Optional[str] = None,
    ) -> RouteResult:
        """Find the minimum-time path between two stations.

        Args:
            network: The metro network.
            source: Departure station name.
            destination: Arrival station name.
            disabled_line: Line whose connections must not be used.

        Returns:
            RouteResult with path, total time and segments.

        Raises:
            UnknownStationError: If source or destination is not in the network.
            NoPathError: If no route survives the line exclusion.
        """
        self._logger.debug(
            "Solving route",
            extra={
                "source": source,
                "destination": destination,
                "disabled_line": disabled_line,
            },
        )

        # Validate inputs
        for name in (source, destination):
            if name not in network:
                raise UnknownStationError(
                    f"Station not in network: {name}",
                    station_name=name,
                )

        path, total_time = dijkstra(network, source, destination, disabled_line)

        if not path:
            self._logger.warning(
                "No route found",
                extra={
                    "source": source,
                    "destination": destination,
                    "disabled_line": disabled_line,
                },
            )
            message = f"No path from {source} to {destination}"
            if disabled_line is not None:
                message += f" with line {disabled_line} out of service"
            raise NoPathError(
                message,
                source=source,
                destination=destination,
                disabled_line=disabled_line,
            )

        segments = self._segments(network, path, disabled_line)

        self._logger.info(
            "Route found",
            extra={
                "source": source,
                "destination": destination,
                "stops": len(path),
                "total_time": total_time,
            },
        )

        return RouteResult(
            path=tuple(path),
            total_time=int(total_time),
            segments=segments,
            disabled_line=disabled_line,
        )

    def _segments(
        self,
        network: Network,
        path: Sequence[str],
        disabled_line: Optional[str],
    ) -> Tuple[RouteSegment, ...]:
        """Describe each hop with the lightest usable connection."""
        segments: List[RouteSegment] = []
        for from_station, to_station in zip(path, path[1:]):
            candidates = [
                c
                for c in network.station(from_station).connections
                if c.destination.name == to_station and c.line != disabled_line
            ]
            best = min(candidates, key=lambda c: (c.weight, c.line))
            segments.append(
                RouteSegment(
                    from_station=from_station,
                    to_station=to_station,
                    line=best.line,
                    time=best.weight,
                )
            )
        return tuple(segments)
