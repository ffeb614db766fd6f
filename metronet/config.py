"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for where the network
description lives, how ingestion treats malformed lines, how far the
connectivity analysis searches, and how logging is set up.

Configuration can be overridden via environment variables:
- METRONET_NETWORK_DATA_DIR=/path/to/data
- METRONET_NETWORK_NETWORK_FILE=paris.txt
- METRONET_NETWORK_SKIP_MALFORMED=true
- METRONET_ANALYSIS_MAX_CUT_SIZE=3
- METRONET_LOG_LEVEL=DEBUG

The default data directory is the ``data/`` folder of a source checkout
or editable install. A regular (non-editable) install does not ship it,
so there METRONET_NETWORK_DATA_DIR or the CLI's ``--network`` option must
point at a network file.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, get_args

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS = get_args(LogLevel)


class NetworkConfig(BaseSettings):
    """Network data configuration.

    Environment variables prefixed with METRONET_NETWORK_.
    """

    model_config = SettingsConfigDict(env_prefix="METRONET_NETWORK_")

    # Only exists in a source checkout or editable install.
    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    network_file: str = "metro.txt"
    encoding: str = "utf-8"
    skip_malformed: bool = False

    @property
    def network_path(self) -> Path:
        """Full path to the network description file."""
        return self.data_dir / self.network_file


class AnalysisConfig(BaseSettings):
    """Connectivity analysis configuration.

    Environment variables prefixed with METRONET_ANALYSIS_.
    """

    model_config = SettingsConfigDict(env_prefix="METRONET_ANALYSIS_")

    # Combinations grow quickly with the number of lines.
    max_cut_size: int = Field(default=2, ge=1)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with METRONET_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="METRONET_LOG_")

    level: LogLevel = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.network.network_path)
        print(config.analysis.max_cut_size)

    Environment variables prefixed with METRONET_.
    """

    model_config = SettingsConfigDict(env_prefix="METRONET_")

    network: NetworkConfig = Field(default_factory=NetworkConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Raises:
        ConfigurationError: If an environment variable holds an invalid value.
    """
    try:
        return AppConfig()
    except ValidationError as e:
        error = e.errors()[0]
        setting_name = ".".join(str(part) for part in error["loc"])
        raise ConfigurationError(
            message=f"Invalid setting {setting_name}: {error['msg']}",
            setting_name=setting_name,
        ) from e


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
