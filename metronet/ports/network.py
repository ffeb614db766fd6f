"""Network ports - Abstractions for loading, routing and analysis.

These protocols define the contracts between the query service and the
concrete adapters: where the network comes from, how routes are
computed and how line outages are analyzed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import ConnectivityReport, RouteResult
    from ..graph.network import Network


class NetworkRepositoryPort(Protocol):
    """Port for loading the metro network.

    Implementation: adapters/network/text_repository.py
    """

    def load(self) -> Network:
        """Load the metro network.

        Returns:
            The fully ingested network. Callers must not mutate it.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/network/dijkstra_solver.py
    """

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
            disabled_line: Line taken out of service, if any.

        Returns:
            RouteResult with path, total time and segments.
        """
        ...


class ConnectivityAnalyzerPort(Protocol):
    """Port for the per-line connectivity analysis.

    Implementation: adapters/network/line_cut_analyzer.py
    """

    def analyze(self, network: Network) -> ConnectivityReport:
        """Report which lines disconnect the network when removed."""
        ...
