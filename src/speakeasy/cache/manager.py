"""Exact-match audio cache keyed by a digest of the synthesis inputs.

Entries are raw PCM files named <digest>.raw inside the cache directory.
Entries are never mutated or evicted here; identical inputs always map to
the same file, so concurrent writers for one key write identical bytes.
"""

import asyncio
import hashlib
import logging
import os
import uuid
from datetime import datetime
from pathlib import Path

from .models import CacheEntry

logger = logging.getLogger(__name__)

CACHE_SUFFIX = ".raw"


def compute_key(text: str, voice: str, language: str) -> str:
    """Compute the cache key for a text request.

    The fields are hashed in the fixed order text, voice, language.
    Changing the order or separator invalidates every existing entry.

    Args:
        text: Text to synthesize
        voice: Resolved voice name
        language: Resolved language code

    Returns:
        64-character SHA-256 hex digest

    Raises:
        ValueError: If any input is None
    """
    if text is None or voice is None or language is None:
        raise ValueError("All parameters (text, voice, language) must be non-None")

    input_string = f"{text}:{voice}:{language}"
    return hashlib.sha256(input_string.encode("utf-8")).hexdigest()


class AudioCache:
    """Filesystem store of raw audio addressed by compute_key().

    Example:
        cache = AudioCache(Path("data/tts/cache"))
        key = compute_key("Cache me", "Puck", "en-US")

        audio = await cache.get(key)
        if audio is None:
            audio = await provider.generate_audio(contents, "Puck")
            await cache.put(key, audio)
    """

    def __init__(self, cache_dir: Path) -> None:
        """Initialize the cache.

        The directory is created lazily on the first write.

        Args:
            cache_dir: Directory holding <digest>.raw files
        """
        self.cache_dir = Path(cache_dir)

    def path_for(self, key: str) -> Path:
        return self.cache_dir / f"{key}{CACHE_SUFFIX}"

    async def get(self, key: str) -> bytes | None:
        """Read cached audio for key.

        Absence, an empty file, or any read failure is a miss.

        Returns:
            Cached bytes, or None on a miss
        """
        path = self.path_for(key)
        try:
            audio = await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError:
            logger.debug(f"Cache miss: {path.name}")
            return None
        except OSError as e:
            logger.warning(f"Cache read failed for {path}: {e}. Treating as miss.")
            return None

        if not audio:
            logger.warning(f"Cache entry {path} is empty. Treating as miss.")
            return None

        logger.debug(f"Cache hit: {path.name} ({len(audio)} bytes)")
        return audio

    async def put(self, key: str, audio: bytes) -> CacheEntry:
        """Store audio under key.

        Args:
            key: Digest from compute_key()
            audio: Raw audio bytes

        Returns:
            CacheEntry describing the stored file

        Raises:
            ValueError: If audio is empty
            OSError: If the directory or file cannot be written
        """
        if not audio:
            raise ValueError("No audio data provided")

        path = self.path_for(key)
        tmp_path = path.with_name(f"{path.name}.{uuid.uuid4().hex}.tmp")

        def _write() -> None:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            # Readers only ever see complete entries
            try:
                tmp_path.write_bytes(audio)
                os.replace(tmp_path, path)
            finally:
                tmp_path.unlink(missing_ok=True)

        await asyncio.to_thread(_write)
        logger.debug(f"Cached {len(audio)} bytes as {path.name}")

        return CacheEntry(
            key=key, audio_path=path, size=len(audio), timestamp=datetime.now()
        )
