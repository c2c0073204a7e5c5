"""
Pytest configuration and shared fixtures for all tests
"""

import os
import struct
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.dirname(project_root))

from radio_api.config import Settings  # noqa: E402
from radio_api.models import Song  # noqa: E402


def write_station_config(path: Path, music_root: Path, stations: dict) -> Path:
    """Write a config.toml with the given {station_id: [paths]} mapping."""
    lines = [f'MusicRoot = "{music_root.as_posix()}"', ""]
    for station_id, paths in stations.items():
        quoted = ", ".join(f'"{p}"' for p in paths)
        lines += [
            "[[Stations]]",
            f'Id = "{station_id}"',
            f'Name = "{station_id.title()} FM"',
            f"Paths = [{quoted}]",
            "",
        ]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


@pytest.fixture
def music_root(tmp_path):
    """Music tree with a jazz station holding a FLAC and an MP3."""
    root = tmp_path / "music"
    (root / "jazz").mkdir(parents=True)
    (root / "jazz" / "a.flac").write_bytes(b"flac")
    (root / "jazz" / "b.mp3").write_bytes(b"mp3")
    (root / "empty").mkdir()
    return root


@pytest.fixture
def config_file(tmp_path, music_root):
    """Station config with jazz, empty and broken (missing directory) stations."""
    return write_station_config(
        tmp_path / "config" / "radio-api" / "config.toml",
        music_root,
        {"jazz": ["jazz"], "empty": ["empty"], "broken": ["does-not-exist"]},
    )


@pytest.fixture
def test_settings(config_file):
    """Settings pointing at the test config that never stop the process."""
    return Settings(config_path=str(config_file), exit_on_config_error=False)


@pytest.fixture
def sample_song():
    """Provide a sample song."""
    return Song(
        path="/music/jazz/a.flac",
        title="So What",
        artist="Miles Davis",
        album="Kind of Blue",
        album_artist="Miles Davis",
        file_type="FLAC",
    )


def _fake_read_metadata(path: str) -> Song:
    file_type = {".flac": "FLAC", ".mp3": "MP3", ".m4a": "M4A"}[os.path.splitext(path)[1]]
    return Song(path=path, title=os.path.basename(path), artist="Test Artist", file_type=file_type)


@pytest.fixture
def fake_metadata():
    """Tag reader stand-in deriving the file type from the extension."""
    return _fake_read_metadata


@pytest.fixture
def write_config():
    """Provide the station config writer."""
    return write_station_config


def build_flac(path: Path, **tags) -> Path:
    """Write a minimal FLAC file (STREAMINFO only) carrying vorbis comments."""
    from mutagen.flac import FLAC

    # 44.1 kHz, stereo, 16-bit, unknown sample count
    packed = (44100 << 44) | (1 << 41) | (15 << 36)
    streaminfo = struct.pack(">HH", 4096, 4096) + b"\x00" * 6 + struct.pack(">Q", packed)
    streaminfo += b"\x00" * 16
    header = bytes([0x80]) + len(streaminfo).to_bytes(3, "big")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"fLaC" + header + streaminfo)

    audio = FLAC(str(path))
    audio.add_tags()
    for key, value in tags.items():
        audio[key] = value
    audio.save()
    return path


def build_mp3(path: Path, **frames) -> Path:
    """Write a short silent MPEG-1 Layer III stream with ID3 text frames."""
    from mutagen import id3

    # 128 kbps, 44.1 kHz, no padding: 417-byte frames
    frame = b"\xff\xfb\x90\x00" + b"\x00" * 413
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(frame * 20)

    tags = id3.ID3()
    for frame_id, text in frames.items():
        tags.add(getattr(id3, frame_id)(encoding=3, text=text))
    tags.save(str(path))
    return path


@pytest.fixture
def make_flac():
    """Provide the tagged FLAC builder."""
    return build_flac


@pytest.fixture
def make_mp3():
    """Provide the ID3-tagged MP3 builder."""
    return build_mp3
