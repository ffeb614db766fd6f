"""Tests for the line cut analyzer adapter."""

import logging

import pytest
from pydantic import ValidationError

from metronet.adapters.network import LineCutAnalyzer
from metronet.config import AnalysisConfig
from metronet.graph.load_network import build_network


class TestLineCutAnalyzer:
    """Test suite for LineCutAnalyzer."""

    @pytest.fixture
    def triangle(self):
        return build_network(["L1 A B", "L2 B C", "L3 C A"])

    def test_default_search_finds_two_line_cut(self, triangle):
        report = LineCutAnalyzer(AnalysisConfig()).analyze(triangle)

        assert report.broken_lines == {}
        assert report.minimum_lines_to_break == 2
        assert report.minimum_cut.lines == ("L1", "L2")

    def test_search_size_limits_minimum_cut(self, triangle):
        report = LineCutAnalyzer(AnalysisConfig(max_cut_size=1)).analyze(triangle)

        assert report.minimum_cut is None
        assert report.minimum_lines_to_break is None

    def test_max_cut_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            AnalysisConfig(max_cut_size=0)

    def test_already_disconnected_is_logged(self, caplog):
        network = build_network(["L1 A B", "L2 C D"])

        with caplog.at_level(logging.WARNING):
            report = LineCutAnalyzer(AnalysisConfig()).analyze(network)

        assert report.already_disconnected
        assert "Network already disconnected" in caplog.text
