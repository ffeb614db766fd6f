"""Text network repository adapter.

This adapter wraps the loader in graph/load_network.py and adds:
- Configuration injection (path, encoding, malformed-line policy)
- Caching of the built network
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...config import NetworkConfig, get_config
from ...graph.load_network import load_network
from ...graph.network import Network


@dataclass
class TextNetworkRepository:
    """Network repository that loads from a line-oriented text file.

    This adapter implements NetworkRepositoryPort.

    Attributes:
        config: Network configuration (path, encoding, malformed policy)
    """

    config: NetworkConfig = field(default_factory=lambda: get_config().network)
    _logger: logging.Logger = field(init=False, repr=False)

    _network: Optional[Network] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Network:
        """Load the metro network from the configured text file.

        Returns:
            The ingested network, cached after the first call.

        Raises:
            NetworkLoadError: If the file cannot be read.
            MalformedInputError: On a malformed line, unless the config
                asks for malformed lines to be skipped.
        """
        if self._network is not None:
            return self._network

        path = self.config.network_path
        self._logger.debug(
            "Loading network",
            extra={"network_path": str(path), "skip_malformed": self.config.skip_malformed},
        )

        network = load_network(
            path,
            encoding=self.config.encoding,
            skip_malformed=self.config.skip_malformed,
        )
        self._network = network
        self._logger.info(
            "Network loaded",
            extra={"stations": len(network), "lines": len(network.lines())},
        )
        return network
