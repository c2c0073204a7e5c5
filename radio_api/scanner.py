"""Recursive discovery of playable audio files."""

import logging
import os
from typing import List, Sequence

from .exceptions import ScanError

logger = logging.getLogger(__name__)

# Case-sensitive: "track.MP3" is not a song
SONG_EXTENSIONS = (".flac", ".mp3", ".m4a")


def is_song(path: str) -> bool:
    """Check whether a path names a playable audio file."""
    return path.endswith(SONG_EXTENSIONS)


def _raise_walk_error(error: OSError) -> None:
    raise error


def scan_directories(music_root: str, relative_dirs: Sequence[str]) -> List[str]:
    """Collect song paths under each of a station's directories.

    Files are returned in traversal order. Any I/O error aborts the whole
    scan; partial results are never returned.

    Args:
        music_root: Base directory for all stations.
        relative_dirs: Station directories relative to ``music_root``.

    Returns:
        List of song file paths.

    Raises:
        ScanError: If a directory is missing or cannot be read.
    """
    song_paths: List[str] = []

    for relative_dir in relative_dirs:
        # Station paths are always under the music root, even with a leading slash
        full_dir = os.path.join(music_root, relative_dir.lstrip("/"))
        try:
            if os.path.isfile(full_dir):
                if is_song(full_dir):
                    song_paths.append(full_dir)
                continue
            if not os.path.isdir(full_dir):
                raise FileNotFoundError(f"No such directory: {full_dir}")
            for dirpath, _dirnames, filenames in os.walk(full_dir, onerror=_raise_walk_error):
                for filename in filenames:
                    path = os.path.join(dirpath, filename)
                    if is_song(path):
                        song_paths.append(path)
        except OSError as e:
            logger.error(f"Scan of {full_dir} failed: {e}")
            raise ScanError(str(e)) from e

    logger.debug(f"Found {len(song_paths)} songs in {len(relative_dirs)} directories")
    return song_paths
