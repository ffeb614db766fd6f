"""Per-line connectivity analysis.

A line is "broken" when removing every connection that carries its label
leaves at least two stations unable to reach each other. The analysis
masks one line at a time and recomputes the connected components of the
whole network; it never attributes a single line to a station, so
interchange stations are handled like any other.
"""

from __future__ import annotations

import logging
from itertools import combinations
from typing import Collection, Dict, List, Optional, Set, Tuple

from ..domain.models import ConnectivityReport, LineCut
from .network import Network

logger = logging.getLogger(__name__)


def reachable_from(
    network: Network,
    source: str,
    disabled_lines: Collection[str] = (),
) -> Set[str]:
    """Return every station reachable from ``source``.

    Connections whose line is in ``disabled_lines`` are ignored. The
    traversal uses an explicit stack so deep networks do not hit the
    recursion limit.
    """
    seen: Set[str] = {network.station(source).name}
    stack: List[str] = [source]

    while stack:
        current = stack.pop()
        for connection in network.station(current).connections:
            if connection.line in disabled_lines:
                continue
            neighbor = connection.destination.name
            if neighbor not in seen:
                seen.add(neighbor)
                stack.append(neighbor)

    return seen


def connected_components(
    network: Network,
    disabled_lines: Collection[str] = (),
) -> List[Set[str]]:
    """Partition the stations into connected components.

    Stations are visited in sorted order, so components come out ordered
    by their smallest station name.
    """
    components: List[Set[str]] = []
    assigned: Set[str] = set()

    for name in network.stations():
        if name in assigned:
            continue
        component = reachable_from(network, name, disabled_lines)
        assigned.update(component)
        components.append(component)

    return components


def witness_pair(components: List[Set[str]]) -> Optional[Tuple[str, str]]:
    """Return the first unreachable station pair in sorted order.

    Enumerating pairs (a, b) over sorted names, the first disconnected
    pair is the smallest station overall together with the smallest
    station outside its component.
    """
    if len(components) < 2:
        return None
    return min(components[0]), min(components[1])


def find_broken_lines(network: Network) -> Dict[str, Tuple[str, str]]:
    """Return the lines whose removal alone disconnects the network.

    Each broken line maps to one witness pair of stations that can no
    longer reach each other once the line is out of service.
    """
    broken: Dict[str, Tuple[str, str]] = {}

    for line in network.lines():
        components = connected_components(network, disabled_lines={line})
        pair = witness_pair(components)
        if pair is not None:
            broken[line] = pair
            logger.debug(
                "Line disconnects network",
                extra={"line": line, "components": len(components)},
            )

    return broken


def minimum_line_cut(network: Network, max_size: int) -> Optional[LineCut]:
    """Find the smallest set of lines whose removal disconnects the network.

    Combinations of line labels are tried by increasing size, each size in
    lexicographic order, up to ``max_size`` lines. Returns None if the
    network stays connected for every combination tried.
    """
    lines = network.lines()

    for size in range(1, min(max_size, len(lines)) + 1):
        for candidate in combinations(lines, size):
            pair = witness_pair(connected_components(network, set(candidate)))
            if pair is not None:
                return LineCut(lines=tuple(candidate), witness=pair)

    return None


def analyze_connectivity(network: Network, max_cut_size: int = 2) -> ConnectivityReport:
    """Run the full connectivity analysis on ``network``.

    If the network is already split into several components no line has
    to be broken, and the report says so without checking lines.
    """
    components = connected_components(network)
    sorted_components = tuple(tuple(sorted(c)) for c in components)

    if len(components) > 1:
        return ConnectivityReport(
            already_disconnected=True,
            components=sorted_components,
        )

    return ConnectivityReport(
        already_disconnected=False,
        components=sorted_components,
        broken_lines=find_broken_lines(network),
        minimum_cut=minimum_line_cut(network, max_cut_size),
    )
