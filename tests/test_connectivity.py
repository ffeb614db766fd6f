"""Tests for the per-line connectivity analysis."""

import pytest

from metronet.domain.errors import UnknownStationError
from metronet.domain.models import LineCut
from metronet.graph.connectivity import (
    analyze_connectivity,
    connected_components,
    find_broken_lines,
    minimum_line_cut,
    reachable_from,
    witness_pair,
)
from metronet.graph.load_network import build_network
from metronet.graph.network import Network


@pytest.fixture
def scenario():
    return build_network(["Line1 A B C", "Line2 C D E"])


@pytest.fixture
def triangle():
    # Every station is an interchange; no single line isolates anything.
    return build_network(["L1 A B", "L2 B C", "L3 C A"])


def test_connected_network_has_one_component(scenario):
    assert connected_components(scenario) == [{"A", "B", "C", "D", "E"}]


def test_components_are_ordered_by_smallest_station():
    network = build_network(["L1 C D", "L2 A B"])
    assert connected_components(network) == [{"A", "B"}, {"C", "D"}]


def test_components_with_masked_line(scenario):
    components = connected_components(scenario, disabled_lines={"Line2"})
    assert components == [{"A", "B", "C"}, {"D"}, {"E"}]


def test_reachable_from(scenario):
    assert reachable_from(scenario, "A") == {"A", "B", "C", "D", "E"}
    assert reachable_from(scenario, "A", disabled_lines={"Line2"}) == {"A", "B", "C"}


def test_reachable_from_unknown_station(scenario):
    with pytest.raises(UnknownStationError):
        reachable_from(scenario, "Z")


def test_witness_pair():
    assert witness_pair([{"A", "B"}]) is None
    assert witness_pair([]) is None
    assert witness_pair([{"B", "A"}, {"D", "C"}, {"E"}]) == ("A", "C")


def test_find_broken_lines(scenario):
    assert find_broken_lines(scenario) == {"Line1": ("A", "B"), "Line2": ("A", "D")}


def test_find_broken_lines_handles_interchange_stations(triangle):
    assert find_broken_lines(triangle) == {}


def test_only_the_isolating_line_is_broken():
    # L2 is a loop back onto L1; only L3 serves Z.
    network = build_network(["L1 A B C D", "L2 D A", "L3 C Z"])

    assert find_broken_lines(network) == {"L1": ("A", "B"), "L3": ("A", "Z")}


def test_minimum_line_cut_single_line(scenario):
    assert minimum_line_cut(scenario, max_size=2) == LineCut(("Line1",), ("A", "B"))


def test_minimum_line_cut_needs_two_lines(triangle):
    assert minimum_line_cut(triangle, max_size=2) == LineCut(("L1", "L2"), ("A", "B"))


def test_minimum_line_cut_respects_max_size(triangle):
    assert minimum_line_cut(triangle, max_size=1) is None


def test_analyze_connectivity_connected(scenario):
    report = analyze_connectivity(scenario)

    assert not report.already_disconnected
    assert report.components == (("A", "B", "C", "D", "E"),)
    assert report.broken_lines == {"Line1": ("A", "B"), "Line2": ("A", "D")}
    assert report.minimum_lines_to_break == 1


def test_analyze_connectivity_already_disconnected():
    network = build_network(["L1 A B", "L2 C D"])

    report = analyze_connectivity(network)

    assert report.already_disconnected
    assert report.components == (("A", "B"), ("C", "D"))
    assert report.broken_lines == {}
    assert report.minimum_cut is None
    assert report.minimum_lines_to_break == 0


def test_analyze_connectivity_empty_network():
    report = analyze_connectivity(Network())

    assert not report.already_disconnected
    assert report.components == ()
    assert report.broken_lines == {}
    assert report.minimum_lines_to_break is None


def test_traversal_handles_long_lines():
    stations = " ".join(f"S{i:05d}" for i in range(5000))
    network = build_network([f"L1 {stations}"])

    components = connected_components(network)

    assert len(components) == 1
    assert len(components[0]) == 5000
