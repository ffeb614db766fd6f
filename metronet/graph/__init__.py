"""Graph engine for the metro network.

This subpackage holds the in-memory network, its text loader, the
shortest-path search and the per-line connectivity analysis.
"""

from .connectivity import analyze_connectivity, connected_components
from .dijkstra import dijkstra
from .load_network import build_network, load_network
from .network import Network

__all__ = [
    "Network",
    "build_network",
    "load_network",
    "dijkstra",
    "connected_components",
    "analyze_connectivity",
]
