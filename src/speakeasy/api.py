"""High-level API for speakeasy library usage."""

from dataclasses import replace
from pathlib import Path

from .config import load_config
from .tts.engine import TTSEngine


async def speak(
    text: str,
    voice: str | None = None,
    language: str | None = None,
    output_dir: str | Path | None = None,
    file_name: str | None = None,
    use_cache: bool = False,
    api_key: str | None = None,
    debug: bool = False,
) -> Path:
    """Synthesize text and save it as an mp3.

    Settings not passed here come from load_config() (config file and
    environment).

    Args:
        text: Text to speak
        voice: Voice name (configured default or random if omitted)
        language: Language code (configured default or en-US if omitted)
        output_dir: Directory for the audio file
        file_name: Base name for the audio file
        use_cache: Reuse audio for identical requests
        api_key: Gemini API key (GEMINI_API_KEY if omitted)
        debug: Enable debug logging

    Returns:
        Path of the saved audio file

    Raises:
        TTSError: If synthesis or conversion fails
        OSError: If the file cannot be saved
    """
    config = load_config()
    overrides: dict = {"use_cache": use_cache or config.use_cache, "debug": debug}
    if api_key:
        overrides["api_key"] = api_key
    if output_dir:
        overrides["output_dir"] = Path(output_dir)

    engine = TTSEngine(replace(config, **overrides))
    result = await engine.synthesize_to_file(
        text=text, voice=voice, language=language, file_name=file_name
    )
    return result.file_path
