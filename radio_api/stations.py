"""Station config loading and station lookup.

The config file is re-read on every call so edits take effect on the next
request without a restart.

Example config.toml::

    MusicRoot = "/music"

    [[Stations]]
    Id = "jazz"
    Name = "Jazz FM"
    Paths = ["jazz", "fusion"]
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .exceptions import ConfigError
from .models import Station, StationConfig

logger = logging.getLogger(__name__)

CONFIG_SUBPATH = Path("radio-api") / "config.toml"


def config_path() -> Path:
    """Locate the station config file.

    Uses ``$XDG_CONFIG_HOME`` when set, otherwise ``~/.config``.

    Returns:
        Path: Location of config.toml.

    Raises:
        ConfigError: If no config directory can be determined.
    """
    config_dir = os.getenv("XDG_CONFIG_HOME")
    if not config_dir:
        try:
            config_dir = str(Path.home() / ".config")
        except RuntimeError as e:
            raise ConfigError(f"Cannot determine home directory: {e}") from e
    return Path(config_dir) / CONFIG_SUBPATH


def load_config(path: Optional[Path] = None) -> StationConfig:
    """Read and validate the station config.

    Args:
        path: Config file to read. Defaults to :func:`config_path`.

    Returns:
        StationConfig: Music root and station list.

    Raises:
        ConfigError: If the file is missing, unreadable or malformed.
    """
    path = Path(path) if path else config_path()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Malformed config file {path}: {e}") from e

    try:
        config = StationConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e

    logger.debug(f"Loaded {len(config.stations)} stations from {path}")
    return config


def resolve_station(config: StationConfig, station_id: str) -> Optional[Station]:
    """Find a station by id. The first match wins if ids repeat."""
    for station in config.stations:
        if station.id == station_id:
            return station
    return None
