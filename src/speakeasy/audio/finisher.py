"""Raw PCM to mp3 finishing step using ffmpeg."""

import asyncio
import hashlib
import logging
import re
import time
from pathlib import Path

from ..tts.errors import FilenameError, MissingTranscoderError
from ..tts.hooks import EngineLogger, StdlibLogger

SAMPLE_FORMAT = "s16le"
SAMPLE_RATE = 24000
CHANNELS = 1

RAW_SUFFIX = ".raw"
MAX_BASE_LENGTH = 40
MAX_FILENAME_LENGTH = 120


def create_safe_filename(
    base: str,
    voice: str,
    audio: bytes,
    extension: str = "mp3",
    now: float | None = None,
) -> str:
    """Create a collision-resistant file name for an audio artifact.

    Format: <sanitized-base>-<voice>-<hash>-<timestamp>.<ext>

    Args:
        base: Requested name or leading text
        voice: Voice used for synthesis
        audio: Audio bytes (hashed for the name)
        extension: File extension without dot
        now: Epoch seconds override for the timestamp

    Returns:
        File name (no directory)

    Raises:
        FilenameError: If the name is empty or longer than MAX_FILENAME_LENGTH
    """
    sanitized = re.sub(r"[^a-z0-9]+", "-", (base or "").lower()).strip("-")
    sanitized = sanitized[:MAX_BASE_LENGTH].strip("-") or "output"
    safe_voice = re.sub(r"[^a-z0-9]+", "-", voice.lower()).strip("-")

    digest = hashlib.sha256(audio).hexdigest()[:8]
    timestamp = int((time.time() if now is None else now) * 1000)

    stem = "-".join(part for part in (sanitized, safe_voice, digest, str(timestamp)) if part)
    name = f"{stem}.{extension}"

    if not stem or len(name) > MAX_FILENAME_LENGTH:
        raise FilenameError(
            f"Generated file name is invalid: {name!r}",
            suggestion=f"Use an output name under {MAX_BASE_LENGTH} characters.",
        )
    return name


class AudioFinisher:
    """Converts raw PCM bytes into a finished audio file.

    Raw bytes go to a transient <name>.raw next to the target, ffmpeg
    converts it, and the transient file is always removed. If conversion
    fails the raw bytes are written at the target path instead.
    """

    def __init__(
        self,
        output_dir: Path,
        ffmpeg_path: str = "ffmpeg",
        logger: EngineLogger | None = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.ffmpeg_path = ffmpeg_path
        self.logger = logger or StdlibLogger(logging.getLogger(__name__))

    async def is_transcoder_available(self) -> bool:
        """Probe ffmpeg by running `ffmpeg -version`."""
        try:
            proc = await asyncio.create_subprocess_exec(
                self.ffmpeg_path,
                "-version",
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.DEVNULL,
            )
            await proc.wait()
        except OSError:
            return False
        return proc.returncode == 0

    async def convert(self, raw_path: Path, target_path: Path) -> None:
        """Convert a raw PCM file to the container implied by target_path.

        Raises:
            RuntimeError: If ffmpeg exits non-zero
        """
        proc = await asyncio.create_subprocess_exec(
            self.ffmpeg_path,
            "-y",
            "-f",
            SAMPLE_FORMAT,
            "-ar",
            str(SAMPLE_RATE),
            "-ac",
            str(CHANNELS),
            "-i",
            str(raw_path),
            str(target_path),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        _, stderr = await proc.communicate()

        if proc.returncode != 0:
            raise RuntimeError(
                f"ffmpeg failed with code {proc.returncode}: "
                f"{stderr.decode(errors='replace').strip()}"
            )

    async def finish(self, audio: bytes, voice: str, base_name: str) -> Path:
        """Persist audio as an mp3 in the output directory.

        Args:
            audio: Raw 16-bit PCM bytes (24kHz mono)
            voice: Voice used, embedded in the file name
            base_name: Requested output name or leading text

        Returns:
            Path of the final file

        Raises:
            FilenameError: If the generated name is invalid
            MissingTranscoderError: If ffmpeg is not available
            OSError: If the output directory or files cannot be written
        """
        file_name = create_safe_filename(base_name, voice, audio)
        target_path = self.output_dir / file_name
        raw_path = target_path.with_suffix(RAW_SUFFIX)

        try:
            await asyncio.to_thread(self.output_dir.mkdir, parents=True, exist_ok=True)
            await asyncio.to_thread(raw_path.write_bytes, audio)

            if not await self.is_transcoder_available():
                raise MissingTranscoderError(
                    "ffmpeg is required to convert audio. Please install ffmpeg.",
                    suggestion="Install ffmpeg and ensure it is in your PATH.",
                )

            try:
                await self.convert(raw_path, target_path)
            except (OSError, RuntimeError) as e:
                self.logger.error(
                    "[TTS] ffmpeg conversion failed, saving raw buffer instead: %s", e
                )
                await asyncio.to_thread(target_path.write_bytes, audio)
        finally:
            await asyncio.to_thread(raw_path.unlink, missing_ok=True)

        return target_path
