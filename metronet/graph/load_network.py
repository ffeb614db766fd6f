"""Network loading from the line-oriented text format.

Each non-blank input line describes one line segment::

    <lineName> <station1> <station2> ... <stationN>

Tokens are whitespace-delimited and N >= 1. Every station is registered
once and each consecutive pair is linked on ``lineName`` with weight 1.
Blank lines and lines starting with ``#`` are ignored. A line with a
name but no station is malformed: it raises MalformedInputError, or is
logged and skipped when ``skip_malformed`` is set.

Ingestion is incremental. If reading fails part way, the segments read
before the failure stay in the network that was passed in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from ..domain.errors import MalformedInputError, NetworkLoadError
from .network import Network

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


@dataclass(frozen=True, slots=True)
class LineSegment:
    """One parsed input line: a line name and its ordered stations."""

    line: str
    stations: Tuple[str, ...]
    line_number: int = 0


def parse_network_line(text: str, line_number: int = 0) -> Optional[LineSegment]:
    """Parse a single input line.

    Returns None for blank and comment lines.

    Raises:
        MalformedInputError: If the line has fewer than two tokens.
    """
    stripped = text.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None

    tokens = stripped.split()
    if len(tokens) < 2:
        raise MalformedInputError(
            f"Line {line_number}: expected a line name followed by stations",
            line_number=line_number,
            content=stripped,
        )

    return LineSegment(line=tokens[0], stations=tuple(tokens[1:]), line_number=line_number)


def add_segment(network: Network, segment: LineSegment) -> int:
    """Register a segment's stations and links; return the links added."""
    added = 0
    previous: Optional[str] = None

    for name in segment.stations:
        network.add_station(name)
        # A station repeated back to back would link to itself.
        if previous is not None and previous != name:
            network.add_connection(previous, name, segment.line)
            added += 1
        previous = name

    return added


def build_network(
    lines: Iterable[str],
    network: Optional[Network] = None,
    skip_malformed: bool = False,
) -> Network:
    """Build (or extend) a network from lines of text."""
    if network is None:
        network = Network()

    segments = 0
    links = 0
    for line_number, text in enumerate(lines, start=1):
        try:
            segment = parse_network_line(text, line_number)
        except MalformedInputError as e:
            if not skip_malformed:
                raise
            logger.warning(
                "Skipping malformed line",
                extra={"line_number": e.line_number, "content": e.content},
            )
            continue

        if segment is None:
            continue

        links += add_segment(network, segment)
        segments += 1

    logger.debug(
        "Network built",
        extra={"segments": segments, "links": links, "stations": len(network)},
    )
    return network


def load_network(
    path: Union[str, Path],
    encoding: str = "utf-8",
    skip_malformed: bool = False,
    network: Optional[Network] = None,
) -> Network:
    """Load a network description from a text file.

    Raises:
        NetworkLoadError: If the file cannot be opened or read.
        MalformedInputError: On a malformed line, unless ``skip_malformed``.
    """
    path = Path(path)
    try:
        with path.open(encoding=encoding) as f:
            return build_network(f, network=network, skip_malformed=skip_malformed)
    except (OSError, UnicodeDecodeError) as e:
        raise NetworkLoadError(
            f"Failed to read network file {path}",
            file_path=str(path),
            cause=e,
        ) from e
