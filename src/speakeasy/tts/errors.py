"""Structured TTS exceptions."""

from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable failure kinds reported by the engine."""

    NO_API_KEY = "NO_API_KEY"
    FILE_METADATA_ERROR = "FILE_METADATA_ERROR"
    INVALID_VOICE = "INVALID_VOICE"
    INVALID_LANGUAGE = "INVALID_LANGUAGE"
    NO_TEXT = "NO_TEXT"
    NO_AUDIO = "NO_AUDIO"
    SYNTH_ERROR = "SYNTH_ERROR"
    SYNTH_FILE_ERROR = "SYNTH_FILE_ERROR"
    NO_FFMPEG = "NO_FFMPEG"
    FILENAME_ERROR = "FILENAME_ERROR"
    TTS_ERROR = "TTS_ERROR"


class TTSError(Exception):
    """Base exception for TTS-related errors.

    Every failure raised by the engine is a TTSError carrying a code,
    a human message, an optional suggestion, and the wrapped cause.
    """

    default_code = ErrorCode.TTS_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        suggestion: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.suggestion = suggestion
        self.original_error = original_error

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self.code.value!r}, "
            f"message={self.message!r}, suggestion={self.suggestion!r})"
        )


class TTSAuthError(TTSError):
    """Raised when no API key is configured for the speech service."""

    default_code = ErrorCode.NO_API_KEY


class FileMetadataError(TTSError):
    """Raised when a file descriptor lacks name, uri or mime type."""

    default_code = ErrorCode.FILE_METADATA_ERROR


class InvalidVoiceError(TTSError):
    default_code = ErrorCode.INVALID_VOICE


class InvalidLanguageError(TTSError):
    default_code = ErrorCode.INVALID_LANGUAGE


class NoTextError(TTSError):
    default_code = ErrorCode.NO_TEXT


class NoAudioError(TTSError):
    """Raised when the remote call succeeded but returned no audio.

    Distinct from SynthesisError: the transport worked, so callers may
    choose to retry with the same request.
    """

    default_code = ErrorCode.NO_AUDIO


class SynthesisError(TTSError):
    """Raised when the remote speech call itself fails.

    Code is SYNTH_ERROR for text requests and SYNTH_FILE_ERROR for
    file-based requests.
    """

    default_code = ErrorCode.SYNTH_ERROR


class MissingTranscoderError(TTSError):
    default_code = ErrorCode.NO_FFMPEG


class FilenameError(TTSError):
    default_code = ErrorCode.FILENAME_ERROR
