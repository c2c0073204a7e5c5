"""Now-playing operations composed from config, scanner, tag reader and store."""

import logging
import random
from pathlib import Path
from typing import Optional

from .exceptions import NoSongsError, StationNotFoundError
from .metadata import read_metadata
from .models import Song, Station, StationConfig
from .now_playing import NowPlayingStore
from .scanner import scan_directories
from .stations import load_config, resolve_station

logger = logging.getLogger(__name__)


class StationService:
    """Handles the get, set and random now-playing operations.

    The station config is loaded fresh for every operation.
    """

    def __init__(
        self,
        store: NowPlayingStore,
        config_path: Optional[Path] = None,
        strict_station_writes: bool = False,
    ):
        """Initialize the station service.

        Args:
            store: Shared now-playing store.
            config_path: Station config file; None uses the default location.
            strict_station_writes: Reject writes for unknown stations.
        """
        self.store = store
        self.config_path = config_path
        self.strict_station_writes = strict_station_writes

    def load_config(self) -> StationConfig:
        """Read the station config from disk."""
        return load_config(self.config_path)

    def get_station(self, station_id: str, config: Optional[StationConfig] = None) -> Station:
        """Resolve a station id against the current config.

        Raises:
            StationNotFoundError: If no station has this id.
        """
        config = config or self.load_config()
        station = resolve_station(config, station_id)
        if station is None:
            logger.warning(f"Unknown station requested: {station_id}")
            raise StationNotFoundError(station_id)
        return station

    def get_now_playing(self, station_id: str) -> Song:
        """Return the song playing on a station.

        Returns an empty Song when nothing has been played yet.

        Raises:
            StationNotFoundError: If the station is not configured.
        """
        station = self.get_station(station_id)
        return self.store.get(station.id) or Song()

    def set_now_playing(self, station_id: str, song: Song) -> None:
        """Store a client-supplied song for a station as-is.

        Raises:
            StationNotFoundError: If strict writes are enabled and the station
                is not configured.
        """
        if self.strict_station_writes:
            station_id = self.get_station(station_id).id

        logger.info(f"Now playing on {station_id}: {song!r}")
        self.store.set(station_id, song)

    def pick_random_song(self, station_id: str) -> Song:
        """Choose a random song from a station's directories and mark it playing.

        Blocking: walks the filesystem and reads tags.

        Raises:
            StationNotFoundError: If the station is not configured.
            ScanError: If the station's directories cannot be walked.
            NoSongsError: If the directories hold no playable files.
            MetadataReadError: If the chosen file's tags cannot be read.
        """
        config = self.load_config()
        station = self.get_station(station_id, config)

        song_paths = scan_directories(config.music_root, station.paths)
        if not song_paths:
            logger.warning(f"No songs found for station {station.id} in {station.paths}")
            raise NoSongsError(station.id)

        chosen_path = random.choice(song_paths)
        song = read_metadata(chosen_path)

        self.store.set(station.id, song)
        logger.info(f"Random song for {station.id}: {chosen_path}")
        return song
