"""TTS (Text-to-Speech) package for speakeasy.

Request models, the voice/language catalog and the error taxonomy. The
orchestrating TTSEngine lives in speakeasy.tts.engine.
"""

from .errors import ErrorCode, TTSError
from .hooks import EngineLogger, StdlibLogger, SynthesisHooks
from .models import (
    FileMetadata,
    MediaRequest,
    SynthesisResult,
    TextRequest,
    build_request,
)

__all__ = [
    "EngineLogger",
    "ErrorCode",
    "FileMetadata",
    "MediaRequest",
    "StdlibLogger",
    "SynthesisHooks",
    "SynthesisResult",
    "TTSError",
    "TextRequest",
    "build_request",
]
