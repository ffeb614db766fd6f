"""Services layer - Application orchestration.

Available services:
- MetroNetworkService: Query surface over the metro network
"""

from .network_service import MetroNetworkService

__all__ = ["MetroNetworkService"]
