"""Tests for the text network repository adapter."""

import pytest

from metronet.adapters.network import TextNetworkRepository
from metronet.config import NetworkConfig
from metronet.domain.errors import MalformedInputError, NetworkLoadError


def write_network(directory, content, name="metro.txt"):
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return path


class TestTextNetworkRepository:
    """Test suite for TextNetworkRepository."""

    def test_load_reads_configured_file(self, tmp_path):
        write_network(tmp_path, "Line1 A B C\nLine2 C D E\n", name="custom.txt")
        repository = TextNetworkRepository(
            NetworkConfig(data_dir=tmp_path, network_file="custom.txt")
        )

        network = repository.load()

        assert network.stations() == ["A", "B", "C", "D", "E"]

    def test_load_is_cached(self, tmp_path):
        write_network(tmp_path, "L1 A B\n")
        repository = TextNetworkRepository(NetworkConfig(data_dir=tmp_path))

        first = repository.load()
        assert repository.load() is first


    def test_malformed_line_raises_by_default(self, tmp_path):
        write_network(tmp_path, "L1 A B\nBroken\n")
        repository = TextNetworkRepository(NetworkConfig(data_dir=tmp_path))

        with pytest.raises(MalformedInputError):
            repository.load()

    def test_malformed_line_skipped_when_configured(self, tmp_path):
        write_network(tmp_path, "L1 A B\nBroken\nL2 B C\n")
        repository = TextNetworkRepository(
            NetworkConfig(data_dir=tmp_path, skip_malformed=True)
        )

        assert repository.load().stations() == ["A", "B", "C"]

    def test_missing_file_raises(self, tmp_path):
        repository = TextNetworkRepository(
            NetworkConfig(data_dir=tmp_path, network_file="missing.txt")
        )

        with pytest.raises(NetworkLoadError) as exc_info:
            repository.load()

        assert exc_info.value.file_path == str(tmp_path / "missing.txt")

    def test_bundled_network_loads(self):
        repository = TextNetworkRepository(NetworkConfig())

        network = repository.load()

        assert "Chatelet" in network
        assert {"PalaisRoyal", "HotelDeVille", "GareDeLEst", "Cite"} <= (
            network.stations_sharing_a_line("Chatelet")
        )
