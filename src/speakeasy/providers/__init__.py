"""Remote speech service providers."""

from .base import SpeechProvider
from .gemini import GeminiProvider, extract_audio

__all__ = ["GeminiProvider", "SpeechProvider", "extract_audio"]
