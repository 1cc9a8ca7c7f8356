"""Data models for cache storage."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass
class CacheEntry:
    """Cached raw audio addressed by its key.

    Attributes:
        key: SHA-256 digest of (text, voice, language)
        audio_path: Path to the cached raw audio file
        size: Number of bytes stored
        timestamp: When this entry was written
    """

    key: str
    audio_path: Path
    size: int
    timestamp: datetime
