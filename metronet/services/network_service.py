"""Metro network service - The query surface.

This service is what presentation layers talk to. It loads the network
once through its repository and answers the queries against it:
stations sharing a line, the stations of a line, shortest paths with
or without a line out of service, and the lines whose outage
disconnects the network.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Set, Tuple

from ..config import AppConfig, get_config
from ..domain.models import ConnectivityReport, RouteResult
from ..graph.network import Network
from ..ports.network import (
    ConnectivityAnalyzerPort,
    NetworkRepositoryPort,
    RouteSolverPort,
)


@dataclass
class MetroNetworkService:
    """Main service for querying the metro network.

    Attributes:
        repository: Loads the network
        route_solver: Computes shortest paths
        connectivity_analyzer: Analyzes line outages
    """

    repository: NetworkRepositoryPort
    route_solver: RouteSolverPort
    connectivity_analyzer: ConnectivityAnalyzerPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: Optional[AppConfig] = None) -> MetroNetworkService:
        """Create a service wired with the default adapters.

        Args:
            config: Optional configuration override.
        """
        from ..adapters.network import (
            DijkstraRouteSolver,
            LineCutAnalyzer,
            TextNetworkRepository,
        )

        config = config or get_config()
        return cls(
            repository=TextNetworkRepository(config.network),
            route_solver=DijkstraRouteSolver(),
            connectivity_analyzer=LineCutAnalyzer(config.analysis),
        )

    @property
    def network(self) -> Network:
        """The network, loaded on first access."""
        return self.repository.load()

    def stations_sharing_a_line(self, station: str) -> Set[str]:
        """Return the stations directly connected to ``station``.

        Raises:
            UnknownStationError: If the station is not in the network.
        """
        return self.network.stations_sharing_a_line(station)

    def stations_on_line(self, line: str) -> Set[str]:
        """Return the stations served by ``line``, empty for an unknown line."""
        return self.network.stations_on_line(line)

    def shortest_path(
        self,
        source: str,
        destination: str,
        disabled_line: Optional[str] = None,
    ) -> RouteResult:
        """Return the minimum-time route, optionally with a line out.

        Raises:
            UnknownStationError: If either station is not in the network.
            NoPathError: If the destination cannot be reached.
        """
        return self.route_solver.solve(
            self.network, source, destination, disabled_line
        )

    def connectivity_report(self) -> ConnectivityReport:
        """Return the full connectivity analysis of the network."""
        return self.connectivity_analyzer.analyze(self.network)

    def minimum_broken_lines(self) -> Dict[str, Tuple[str, str]]:
        """Return each line whose outage disconnects the network.

        Each line maps to one witness pair of stations that can no
        longer reach each other. Empty when no single line disconnects
        the network, or when it is already disconnected.
        """
        report = self.connectivity_report()
        if report.already_disconnected:
            self._logger.info(
                "No line to break, network already disconnected",
                extra={"components": len(report.components)},
            )
        return dict(report.broken_lines)
