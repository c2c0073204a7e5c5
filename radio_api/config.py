"""Service settings for the radio API.

Loaded from environment variables prefixed with ``RADIO_API_``. The station
list itself lives in a separate TOML file (see :mod:`radio_api.stations`).
"""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_prefix="RADIO_API_", case_sensitive=False)

    # Application
    app_name: str = "Radio API"
    app_version: str = "1.0.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 8100
    log_level: str = "INFO"

    # Explicit station file; defaults to $XDG_CONFIG_HOME/radio-api/config.toml
    config_path: Optional[str] = None

    # Reject now-playing writes for stations missing from the config
    strict_station_writes: bool = False

    # Stop the process when the station config breaks at request time
    exit_on_config_error: bool = True

    @field_validator("port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not (1 <= value <= 65535):
            raise ValueError(f"Invalid port: {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {value}. Must be one of {VALID_LOG_LEVELS}")
        return value
