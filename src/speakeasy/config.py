"""Configuration management for speakeasy.

Loads optional configuration from ~/.config/speakeasy/config.toml.
Priority chain: CLI flags > env vars > config file > defaults.
"""

import os
import sys
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .tts.hooks import EngineLogger, SynthesisHooks

CONFIG_DIR = Path.home() / ".config" / "speakeasy"
CONFIG_PATH = CONFIG_DIR / "config.toml"

DEFAULT_MODEL = "gemini-2.5-pro-preview-tts"
DEFAULT_LANGUAGE = "en-US"
DEFAULT_OUTPUT_DIR = Path("data/tts")

DEFAULT_CONFIG = """\
# speakeasy configuration

[tts]
# Voice used when a request does not name one (omit for a random voice)
# voice = "Puck"

# Language code used when a request does not name one
language = "en-US"

# Gemini speech model
model = "gemini-2.5-pro-preview-tts"

[output]
# Directory for finished audio files
dir = "data/tts"

[cache]
# Reuse audio for identical text/voice/language requests
enabled = false

# Cache directory (defaults to <output dir>/cache)
# dir = "data/tts/cache"

[ffmpeg]
# ffmpeg binary used to convert raw PCM to mp3
path = "ffmpeg"

# The API key is read from the environment, not this file:
#   GEMINI_API_KEY
"""


@dataclass
class EngineConfig:
    """Options recognized by TTSEngine.

    Attributes:
        api_key: Gemini API key (falls back to GEMINI_API_KEY)
        default_voice: Voice used when a request omits one
        default_language: Language used when a request omits one
        output_dir: Directory for finished audio files
        cache_dir: Result cache directory (defaults to output_dir/cache)
        use_cache: Consult the result cache for text requests
        debug: Emit verbose diagnostics through logger.debug
        logger: EngineLogger adapter (defaults to stdlib logging)
        hooks: Lifecycle callbacks
        model: Gemini speech model identifier
        ffmpeg_path: ffmpeg executable
    """

    api_key: str | None = None
    default_voice: str | None = None
    default_language: str = DEFAULT_LANGUAGE
    output_dir: Path = DEFAULT_OUTPUT_DIR
    cache_dir: Path | None = None
    use_cache: bool = False
    debug: bool = False
    logger: EngineLogger | None = None
    hooks: SynthesisHooks = field(default_factory=SynthesisHooks)
    model: str = DEFAULT_MODEL
    ffmpeg_path: str = "ffmpeg"

    def __post_init__(self) -> None:
        """Normalize paths and check the logger adapter."""
        self.output_dir = Path(self.output_dir)
        if self.cache_dir is not None:
            self.cache_dir = Path(self.cache_dir)
        if self.logger is not None and not isinstance(self.logger, EngineLogger):
            raise TypeError(
                f"logger must be an EngineLogger, got {type(self.logger).__name__}"
            )

    @property
    def resolved_cache_dir(self) -> Path:
        return self.cache_dir or self.output_dir / "cache"


def generate_config(path: Path | None = None) -> Path:
    """Write the default config file and return its path."""
    path = path or CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DEFAULT_CONFIG)
    return path


def load_config(path: Path | None = None) -> EngineConfig:
    """Load configuration from the config file with env var overrides.

    The config file is optional; defaults apply when it does not exist.

    Returns:
        EngineConfig with file and environment values applied.

    Raises:
        SystemExit: If the config file exists but cannot be parsed.
    """
    path = path or CONFIG_PATH
    data: dict = {}
    if path.exists():
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            print(f"Invalid config file {path}: {e}", file=sys.stderr)
            print("Fix it or delete it to use defaults.", file=sys.stderr)
            raise SystemExit(1) from e

    tts = data.get("tts", {})
    output = data.get("output", {})
    cache = data.get("cache", {})
    ffmpeg = data.get("ffmpeg", {})

    output_dir = os.getenv("SPEAKEASY_OUTPUT_DIR", output.get("dir"))
    cache_dir = os.getenv("SPEAKEASY_CACHE_DIR", cache.get("dir"))

    return EngineConfig(
        api_key=os.getenv("GEMINI_API_KEY"),
        default_voice=os.getenv("SPEAKEASY_VOICE", tts.get("voice")),
        default_language=os.getenv(
            "SPEAKEASY_LANGUAGE", tts.get("language", DEFAULT_LANGUAGE)
        ),
        output_dir=Path(output_dir) if output_dir else DEFAULT_OUTPUT_DIR,
        cache_dir=Path(cache_dir) if cache_dir else None,
        use_cache=bool(cache.get("enabled", False)),
        model=tts.get("model", DEFAULT_MODEL),
        ffmpeg_path=os.getenv("SPEAKEASY_FFMPEG", ffmpeg.get("path", "ffmpeg")),
    )
