"""Audio tag extraction using mutagen."""

import logging

import mutagen
from mutagen.flac import FLAC
from mutagen.mp3 import MP3
from mutagen.mp4 import MP4

from .exceptions import MetadataReadError
from .models import Song

logger = logging.getLogger(__name__)


def _file_type(audio) -> str:
    """Name the container format the way clients expect it."""
    if isinstance(audio, FLAC):
        return "FLAC"
    if isinstance(audio, MP3):
        return "MP3"
    if isinstance(audio, MP4):
        codec = getattr(audio.info, "codec", "")
        return "ALAC" if codec == "alac" else "M4A"
    return type(audio).__name__.upper()


def _first_tag(audio, key: str) -> str:
    values = audio.get(key)
    if not values:
        return ""
    return str(values[0])


def read_metadata(path: str) -> Song:
    """Build a Song from the tags of an audio file.

    Missing tags become empty strings. Only files that cannot be opened or
    parsed are errors.

    Args:
        path: Audio file path.

    Returns:
        Song: Tags for the file, with ``path`` set to the given path.

    Raises:
        MetadataReadError: If the file cannot be opened or its tags parsed.
    """
    try:
        with open(path, "rb") as f:
            audio = mutagen.File(f, easy=True)
    except OSError as e:
        logger.error(f"Cannot open {path}: {e}")
        raise MetadataReadError(str(e)) from e
    except mutagen.MutagenError as e:
        logger.error(f"Cannot parse tags in {path}: {e}")
        raise MetadataReadError(str(e)) from e

    if audio is None:
        logger.error(f"Unrecognised audio format: {path}")
        raise MetadataReadError(f"Unrecognised audio format: {path}")

    return Song(
        path=path,
        title=_first_tag(audio, "title"),
        artist=_first_tag(audio, "artist"),
        album=_first_tag(audio, "album"),
        album_artist=_first_tag(audio, "albumartist"),
        file_type=_file_type(audio),
    )
