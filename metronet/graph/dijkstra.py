"""Shortest-path computation using Dijkstra's algorithm.

This module computes the minimum-time path between two stations of the
network, optionally with one line taken out of service. Connections of
the disabled line are skipped entirely, so an unreachable destination is
reported as such instead of as a very long route.
"""

import heapq
import logging
from typing import Dict, List, Optional, Set, Tuple

from .network import Network

logger = logging.getLogger(__name__)


def dijkstra(
    network: Network,
    start: str,
    end: str,
    disabled_line: Optional[str] = None,
) -> Tuple[List[str], float]:
    """Compute the shortest path between two stations using Dijkstra.

    Parameters
    ----------
    network:
        Metro network as produced by ``build_network``.
    start:
        Name of the departure station.
    end:
        Name of the arrival station.
    disabled_line:
        Optional line whose connections must not be used.

    Returns
    -------
    list[str], float
        The sequence of station names representing the path from
        ``start`` to ``end`` (inclusive) and the total time.
        If no path exists, returns ``([], float("inf"))``.
    """
    if start not in network or end not in network:
        return [], float("inf")

    distances: Dict[str, float] = {start: 0}
    previous: Dict[str, str] = {}

    heap: List[Tuple[float, str]] = [(0, start)]
    visited: Set[str] = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        if u in visited:
            continue

        visited.add(u)

        if u == end:
            break

        for connection in network.station(u).connections:
            if disabled_line is not None and connection.line == disabled_line:
                continue
            v = connection.destination.name
            if v in visited:
                continue
            new_distance = current_distance + connection.weight
            if new_distance < distances.get(v, float("inf")):
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    if end not in visited:
        logger.debug(
            "Frontier exhausted",
            extra={"start": start, "end": end, "visited": len(visited)},
        )
        return [], float("inf")

    path: List[str] = [end]
    current = end
    while current != start:
        current = previous[current]
        path.append(current)

    path.reverse()
    return path, distances[end]
