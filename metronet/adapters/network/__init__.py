"""Network adapters - Implementations of network-related ports.

Available implementations:
- TextNetworkRepository: Loads the network from a text file
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
- LineCutAnalyzer: Finds lines whose outage disconnects the network
"""

from .dijkstra_solver import DijkstraRouteSolver
from .line_cut_analyzer import LineCutAnalyzer
from .text_repository import TextNetworkRepository

__all__ = ["TextNetworkRepository", "DijkstraRouteSolver", "LineCutAnalyzer"]
