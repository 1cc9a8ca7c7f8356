"""Voice and language resolution shared by every synthesis path."""

from .catalog import (
    get_random_voice,
    is_valid_language,
    is_valid_voice,
    suggest_language,
    suggest_voice,
)
from .errors import InvalidLanguageError, InvalidVoiceError
from .models import SynthesisRequest

FALLBACK_LANGUAGE = "en-US"


def resolve_voice_and_language(
    request: SynthesisRequest,
    default_voice: str | None = None,
    default_language: str | None = FALLBACK_LANGUAGE,
) -> tuple[str, str]:
    """Resolve the concrete (voice, language) pair for a request.

    Precedence is request value, then configured default, then a random
    voice (for voice) or "en-US" (for language).

    Args:
        request: TextRequest or MediaRequest
        default_voice: Configured fallback voice
        default_language: Configured fallback language code

    Returns:
        Validated (voice, language) tuple

    Raises:
        InvalidVoiceError: If the voice is not in the catalog
        InvalidLanguageError: If the language code is not in the catalog
    """
    voice = request.voice or default_voice or get_random_voice()
    if not is_valid_voice(voice):
        suggestion = suggest_voice(voice)
        raise InvalidVoiceError(
            f"Voice '{voice}' is not supported.",
            suggestion=f"Did you mean '{suggestion}'?"
            if suggestion
            else "See speakeasy.tts.catalog.VOICES for options.",
        )

    language = request.language or default_language or FALLBACK_LANGUAGE
    if not is_valid_language(language):
        suggestion = suggest_language(language)
        raise InvalidLanguageError(
            f"Language '{language}' is not supported.",
            suggestion=f"Did you mean '{suggestion}'?"
            if suggestion
            else "See speakeasy.tts.catalog.LANGUAGES for options.",
        )

    return voice, language
