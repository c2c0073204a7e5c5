"""In-memory now-playing registry shared by all request handlers."""

from threading import Lock
from typing import Dict, Optional

from .models import Song


class NowPlayingStore:
    """Thread-safe mapping from station id to the song it is playing.

    Writes replace the previous song outright; the last completed write
    wins. Nothing is persisted.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._lock = Lock()
        self._playing: Dict[str, Song] = {}

    def get(self, station_id: str) -> Optional[Song]:
        """Return the song playing on a station, or None if nothing was set."""
        with self._lock:
            return self._playing.get(station_id)

    def set(self, station_id: str, song: Song) -> None:
        """Record the song now playing on a station."""
        with self._lock:
            self._playing[station_id] = song

    def snapshot(self) -> Dict[str, Song]:
        """Return a copy of every station's current song."""
        with self._lock:
            return dict(self._playing)

    def clear(self) -> None:
        """Forget every station's song."""
        with self._lock:
            self._playing.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._playing)

    def __contains__(self, station_id: str) -> bool:
        with self._lock:
            return station_id in self._playing
