"""speakeasy - Gemini text-to-speech engine and CLI."""

__version__ = "0.1.0"
__all__ = ["EngineConfig", "TTSEngine", "TTSError", "speak"]


def __getattr__(name: str):  # type: ignore[no-untyped-def]
    if name == "speak":
        from .api import speak

        return speak
    if name == "TTSEngine":
        from .tts.engine import TTSEngine

        return TTSEngine
    if name == "EngineConfig":
        from .config import EngineConfig

        return EngineConfig
    if name == "TTSError":
        from .tts.errors import TTSError

        return TTSError
    raise AttributeError(f"module 'speakeasy' has no attribute {name!r}")
