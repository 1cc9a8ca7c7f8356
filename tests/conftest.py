"""Pytest configuration and fixtures for speakeasy tests."""

import stat
import sys
from pathlib import Path
from typing import Any

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from speakeasy.providers.base import SpeechProvider

FAKE_PCM = b"\x01\x00\x02\x00" * 256

FAKE_FFMPEG = """#!/bin/sh
if [ "$1" = "-version" ]; then
    echo "ffmpeg version fake"
    exit 0
fi
prev=""
for arg in "$@"; do
    if [ "$prev" = "-i" ]; then
        input="$arg"
    fi
    prev="$arg"
    output="$arg"
done
printf 'ID3' > "$output"
cat "$input" >> "$output"
"""

FAILING_FFMPEG = """#!/bin/sh
if [ "$1" = "-version" ]; then
    exit 0
fi
echo "conversion exploded" >&2
exit 1
"""


class FakeProvider(SpeechProvider):
    """In-memory SpeechProvider recording every call."""

    def __init__(self, audio: bytes | None = FAKE_PCM) -> None:
        self.audio = audio
        self.error: Exception | None = None
        self.calls: list[tuple[Any, str]] = []
        self.remote_files: dict[str, Any] = {}
        self.uploads: list[tuple[str, str]] = []
        self.deleted: list[str] = []

    async def generate_audio(self, contents: Any, voice: str) -> bytes | None:
        self.calls.append((contents, voice))
        if self.error:
            raise self.error
        return self.audio

    async def upload_file(self, path: str, mime_type: str) -> Any:
        self.uploads.append((path, mime_type))
        name = f"files/upload-{len(self.uploads)}"
        remote = {
            "name": name,
            "uri": f"https://example.test/{name}",
            "mime_type": mime_type,
        }
        self.remote_files[name] = remote
        return remote

    async def list_files(self, page_size: int) -> list[Any]:
        return list(self.remote_files.values())

    async def get_file(self, name: str) -> Any:
        if name not in self.remote_files:
            raise KeyError(f"404 file not found: {name}")
        return self.remote_files[name]

    async def delete_file(self, name: str) -> None:
        self.remote_files.pop(name)
        self.deleted.append(name)


def _write_script(path: Path, body: str) -> Path:
    path.write_text(body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def fake_provider() -> FakeProvider:
    """Provider returning FAKE_PCM for every synthesis."""
    return FakeProvider()


@pytest.fixture
def fake_ffmpeg(tmp_path: Path) -> str:
    """ffmpeg stand-in that prefixes the raw input with an ID3 marker."""
    return str(_write_script(tmp_path / "fake-ffmpeg", FAKE_FFMPEG))


@pytest.fixture
def failing_ffmpeg(tmp_path: Path) -> str:
    """ffmpeg stand-in that is available but fails every conversion."""
    return str(_write_script(tmp_path / "failing-ffmpeg", FAILING_FFMPEG))


@pytest.fixture
def missing_ffmpeg(tmp_path: Path) -> str:
    """Path to an ffmpeg binary that does not exist."""
    return str(tmp_path / "no-such-ffmpeg")


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path: Path) -> None:
    """Keep tests independent of the developer's config and environment."""
    for var in (
        "GEMINI_API_KEY",
        "SPEAKEASY_VOICE",
        "SPEAKEASY_LANGUAGE",
        "SPEAKEASY_OUTPUT_DIR",
        "SPEAKEASY_CACHE_DIR",
        "SPEAKEASY_FFMPEG",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("speakeasy.config.CONFIG_PATH", tmp_path / "config.toml")
