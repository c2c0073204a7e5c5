"""Radio API - "now playing" tracker for locally stored radio stations.

Tracks which song each configured station is currently playing and picks
random songs from a station's music directories on request.

Main Components:
    - StationService: get/set now playing, pick a random song
    - NowPlayingStore: thread-safe station -> song mapping
    - load_config / resolve_station: station list from config.toml
    - scan_directories / read_metadata: media discovery and tag reading

Example:
    >>> from radio_api import NowPlayingStore, StationService
    >>> service = StationService(NowPlayingStore())
    >>> song = service.pick_random_song("jazz")
"""

from radio_api.models import Song, Station, StationConfig
from radio_api.now_playing import NowPlayingStore
from radio_api.service import StationService

__version__ = "1.0.0"
__all__ = ["Song", "Station", "StationConfig", "NowPlayingStore", "StationService"]
