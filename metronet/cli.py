"""
metronet - Command line entry point.

Usage:
    python -m metronet stations Chatelet
    python -m metronet line 4
    python -m metronet path Nation Etoile
    python -m metronet path Nation Etoile --line-out 1
    python -m metronet broken-lines
    python -m metronet --network paris.txt --skip-malformed broken-lines
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import LOG_LEVELS, AppConfig, get_config
from .domain.errors import ConfigurationError, MetroNetworkError
from .domain.models import ConnectivityReport, RouteResult
from .services import MetroNetworkService

logger = logging.getLogger(__name__)


def format_route(result: RouteResult) -> str:
    """Format a route as the lines printed by the ``path`` command."""
    lines = [f"Shortest path: {' -> '.join(result.path)}"]
    lines.append(f"Total time: {result.total_time}")
    lines.append(f"Stops: {result.num_stops}")
    if result.disabled_line is not None:
        lines.append(f"Line out of service: {result.disabled_line}")
    if result.segments:
        lines.append(f"Transfers: {result.num_transfers}")
        for segment in result.segments:
            lines.append(
                f"  {segment.from_station} -> {segment.to_station}"
                f" [{segment.line}, {segment.time}]"
            )
    return "\n".join(lines)


def format_report(report: ConnectivityReport) -> str:
    """Format a connectivity report as printed by ``broken-lines``."""
    if report.already_disconnected:
        lines = [
            f"Network already disconnected: {len(report.components)} components",
            "Minimum number of lines that must be broken: 0",
        ]
        for component in report.components:
            lines.append(f"  Component: {' '.join(component)}")
        return "\n".join(lines)

    minimum = report.minimum_lines_to_break
    lines = [
        "Minimum number of lines that must be broken: "
        + (str(minimum) if minimum is not None else "unknown")
    ]
    if report.minimum_cut is not None:
        a, b = report.minimum_cut.witness
        lines.append(
            f"Minimum cut: {', '.join(report.minimum_cut.lines)} (disconnects {a} and {b})"
        )
    if not report.broken_lines:
        lines.append("No single line disconnects the network")
    for line, (a, b) in report.broken_lines.items():
        lines.append(f"Broken line: {line}")
        lines.append(f"  Disconnected stations: {a} and {b}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metronet",
        description="Query a metro network: shared lines, routes and line outages",
    )
    parser.add_argument(
        "--network",
        type=Path,
        default=None,
        help="Path to the network description (default: from configuration)",
    )
    parser.add_argument(
        "--skip-malformed",
        action="store_true",
        help="Skip malformed lines instead of failing",
    )
    parser.add_argument(
        "--max-cut-size",
        type=int,
        default=None,
        help="Largest set of lines tried when searching for a minimum cut",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Logging level, one of {', '.join(LOG_LEVELS)} (default: from configuration)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    stations = subparsers.add_parser(
        "stations", help="List the stations sharing a line with a station"
    )
    stations.add_argument("station")

    line = subparsers.add_parser("line", help="List the stations served by a line")
    line.add_argument("line")

    path = subparsers.add_parser("path", help="Find the minimum-time path")
    path.add_argument("source")
    path.add_argument("destination")
    path.add_argument(
        "--line-out",
        default=None,
        help="Line taken out of service",
    )

    subparsers.add_parser(
        "broken-lines", help="Find the lines whose outage disconnects the network"
    )

    return parser


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Return a copy of ``config`` with the command line options applied.

    Raises:
        ConfigurationError: If an option holds an invalid value.
    """
    network = config.network
    if args.network is not None:
        network = network.model_copy(
            update={"data_dir": args.network.parent, "network_file": args.network.name}
        )
    if args.skip_malformed:
        network = network.model_copy(update={"skip_malformed": True})

    analysis = config.analysis
    if args.max_cut_size is not None:
        if args.max_cut_size < 1:
            raise ConfigurationError(
                message="--max-cut-size must be at least 1",
                setting_name="max_cut_size",
            )
        analysis = analysis.model_copy(update={"max_cut_size": args.max_cut_size})

    observability = config.observability
    if args.log_level is not None:
        level = args.log_level.upper()
        if level not in LOG_LEVELS:
            raise ConfigurationError(
                message=(
                    f"--log-level must be one of {', '.join(LOG_LEVELS)},"
                    f" got {args.log_level!r}"
                ),
                setting_name="log_level",
            )
        observability = observability.model_copy(update={"level": level})

    return config.model_copy(
        update={"network": network, "analysis": analysis, "observability": observability}
    )


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.observability.level,
        format=config.observability.format,
        stream=sys.stderr,
    )


def run(service: MetroNetworkService, args: argparse.Namespace) -> str:
    """Execute the selected command and return its output."""
    if args.command == "stations":
        stations = sorted(service.stations_sharing_a_line(args.station))
        return f"Stations sharing a line with {args.station}: {', '.join(stations)}"
    if args.command == "line":
        stations = sorted(service.stations_on_line(args.line))
        if not stations:
            return f"No station on line {args.line}"
        return f"Stations on line {args.line}: {', '.join(stations)}"
    if args.command == "path":
        result = service.shortest_path(args.source, args.destination, args.line_out)
        return format_route(result)
    return format_report(service.connectivity_report())


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = apply_overrides(get_config(), args)
    except ConfigurationError as e:
        parser.error(str(e))

    configure_logging(config)
    service = MetroNetworkService.from_config(config)

    try:
        output = run(service, args)
    except MetroNetworkError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
