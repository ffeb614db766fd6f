"""Line cut analyzer adapter.

Wraps graph/connectivity.py with the configured search size and logs
the outcome of each analysis.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...config import AnalysisConfig, get_config
from ...domain.models import ConnectivityReport
from ...graph.connectivity import analyze_connectivity
from ...graph.network import Network


@dataclass
class LineCutAnalyzer:
    """Connectivity analyzer that masks lines and rechecks the network.

    This adapter implements ConnectivityAnalyzerPort.

    Attributes:
        config: Analysis configuration (maximum cut size)
    """

    config: AnalysisConfig = field(default_factory=lambda: get_config().analysis)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def analyze(self, network: Network) -> ConnectivityReport:
        """Report which lines disconnect the network when removed."""
        report = analyze_connectivity(network, max_cut_size=self.config.max_cut_size)

        if report.already_disconnected:
            self._logger.warning(
                "Network already disconnected",
                extra={"components": len(report.components)},
            )
        else:
            self._logger.info(
                "Connectivity analyzed",
                extra={
                    "lines": len(network.lines()),
                    "broken_lines": len(report.broken_lines),
                    "minimum_lines_to_break": report.minimum_lines_to_break,
                },
            )
        return report
