"""Exception types for the radio API.

Each error carries the message shown to API clients and the HTTP status
it maps to. Underlying causes stay in the exception chain for logging.
"""

from fastapi import status


class RadioAPIError(Exception):
    """Base class for all radio API errors."""

    message = "Internal server error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.message)
        self.detail = detail or self.message


class ConfigError(RadioAPIError):
    """Station config file is missing, unreadable or malformed."""

    message = "Configuration error"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class StationNotFoundError(RadioAPIError):
    """Requested station id is not in the config."""

    message = "Invalid station"
    status_code = status.HTTP_404_NOT_FOUND


class ScanError(RadioAPIError):
    """Walking a station's music directories failed."""

    message = "Could not get songs for station"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class NoSongsError(RadioAPIError):
    """Station directories contain no playable files."""

    message = "No songs found for station"
    status_code = status.HTTP_404_NOT_FOUND


class MetadataReadError(RadioAPIError):
    """Audio file could not be opened or its tags could not be parsed."""

    message = "Could not read song metadata"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
