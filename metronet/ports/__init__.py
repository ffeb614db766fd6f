"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and its
adapters, so that the query service can be wired with any network
source, solver or analyzer.
"""

from .network import ConnectivityAnalyzerPort, NetworkRepositoryPort, RouteSolverPort

__all__ = [
    "NetworkRepositoryPort",
    "RouteSolverPort",
    "ConnectivityAnalyzerPort",
]
