"""Pydantic models for songs, stations and API responses."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Song(BaseModel):
    """A song as announced by a station.

    Wire names match the JSON clients already send and expect
    (``albumartist``, ``filetype``). Every field defaults to an empty
    string, so an empty Song means nothing is playing.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: str = Field("", description="Absolute path of the audio file")
    title: str = Field("", description="Song title")
    artist: str = Field("", description="Artist name")
    album: str = Field("", description="Album name")
    album_artist: str = Field("", alias="albumartist", description="Album artist")
    file_type: str = Field("", alias="filetype", description="Container format (FLAC, MP3, M4A)")

    def is_empty(self) -> bool:
        """Check whether this is the empty "nothing playing" song."""
        return self == Song()


class Station(BaseModel):
    """A named radio station mapped to directories under the music root."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="Id")
    name: str = Field("", alias="Name")
    paths: List[str] = Field(default_factory=list, alias="Paths")

    @field_validator("id")
    @classmethod
    def id_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("station id cannot be empty")
        return value


class StationConfig(BaseModel):
    """Contents of the station config file."""

    model_config = ConfigDict(populate_by_name=True)

    music_root: str = Field(..., alias="MusicRoot")
    stations: List[Station] = Field(default_factory=list, alias="Stations")


class ErrorResponse(BaseModel):
    """Error body returned to clients."""

    err: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    stations: int
    playing: int
