"""Reference catalog of Gemini prebuilt voices and supported languages."""

import random

from .models import LanguageDescriptor, VoiceDescriptor

VOICES: tuple[VoiceDescriptor, ...] = (
    VoiceDescriptor("Zephyr", "Bright"),
    VoiceDescriptor("Puck", "Upbeat"),
    VoiceDescriptor("Charon", "Informative"),
    VoiceDescriptor("Kore", "Firm"),
    VoiceDescriptor("Fenrir", "Excitable"),
    VoiceDescriptor("Leda", "Youthful"),
    VoiceDescriptor("Orus", "Firm"),
    VoiceDescriptor("Aoede", "Breezy"),
    VoiceDescriptor("Callirrhoe", "Easy-going"),
    VoiceDescriptor("Autonoe", "Bright"),
    VoiceDescriptor("Enceladus", "Breathy"),
    VoiceDescriptor("Iapetus", "Clear"),
    VoiceDescriptor("Umbriel", "Easy-going"),
    VoiceDescriptor("Algieba", "Smooth"),
    VoiceDescriptor("Despina", "Smooth"),
    VoiceDescriptor("Erinome", "Clear"),
    VoiceDescriptor("Algenib", "Gravelly"),
    VoiceDescriptor("Rasalgethi", "Informative"),
    VoiceDescriptor("Laomedeia", "Upbeat"),
    VoiceDescriptor("Achernar", "Soft"),
    VoiceDescriptor("Alnilam", "Firm"),
    VoiceDescriptor("Schedar", "Even"),
    VoiceDescriptor("Gacrux", "Mature"),
    VoiceDescriptor("Pulcherrima", "Forward"),
    VoiceDescriptor("Achird", "Friendly"),
    VoiceDescriptor("Zubenelgenubi", "Casual"),
    VoiceDescriptor("Vindemiatrix", "Gentle"),
    VoiceDescriptor("Sadachbia", "Lively"),
    VoiceDescriptor("Sadaltager", "Knowledgeable"),
    VoiceDescriptor("Sulafat", "Warm"),
)

LANGUAGES: tuple[LanguageDescriptor, ...] = (
    LanguageDescriptor("Arabic (Egyptian)", "ar-EG"),
    LanguageDescriptor("German (Germany)", "de-DE"),
    LanguageDescriptor("English (US)", "en-US"),
    LanguageDescriptor("Spanish (US)", "es-US"),
    LanguageDescriptor("French (France)", "fr-FR"),
    LanguageDescriptor("Hindi (India)", "hi-IN"),
    LanguageDescriptor("Indonesian (Indonesia)", "id-ID"),
    LanguageDescriptor("Italian (Italy)", "it-IT"),
    LanguageDescriptor("Japanese (Japan)", "ja-JP"),
    LanguageDescriptor("Korean (Korea)", "ko-KR"),
    LanguageDescriptor("Portuguese (Brazil)", "pt-BR"),
    LanguageDescriptor("Russian (Russia)", "ru-RU"),
    LanguageDescriptor("Dutch (Netherlands)", "nl-NL"),
    LanguageDescriptor("Polish (Poland)", "pl-PL"),
    LanguageDescriptor("Thai (Thailand)", "th-TH"),
    LanguageDescriptor("Turkish (Turkey)", "tr-TR"),
    LanguageDescriptor("Vietnamese (Vietnam)", "vi-VN"),
    LanguageDescriptor("Romanian (Romania)", "ro-RO"),
    LanguageDescriptor("Ukrainian (Ukraine)", "uk-UA"),
    LanguageDescriptor("Bengali (Bangladesh)", "bn-BD"),
    LanguageDescriptor("English (India)", "en-IN"),
    LanguageDescriptor("Marathi (India)", "mr-IN"),
    LanguageDescriptor("Tamil (India)", "ta-IN"),
    LanguageDescriptor("Telugu (India)", "te-IN"),
)

_VOICE_NAMES = frozenset(v.name for v in VOICES)
_LANGUAGE_CODES = frozenset(lang.code for lang in LANGUAGES)


def voice_names() -> list[str]:
    """Return voice names in catalog order."""
    return [v.name for v in VOICES]


def language_codes() -> list[str]:
    """Return language codes in catalog order."""
    return [lang.code for lang in LANGUAGES]


def is_valid_voice(name: str) -> bool:
    """Exact, case-sensitive voice membership test."""
    return name in _VOICE_NAMES


def is_valid_language(code: str) -> bool:
    """Exact, case-sensitive language code membership test."""
    return code in _LANGUAGE_CODES


def _suggest(value: str, candidates: list[str]) -> str | None:
    if not value:
        return None
    prefix = value.lower()
    for candidate in candidates:
        if candidate.lower().startswith(prefix):
            return candidate
    return None


def suggest_voice(value: str) -> str | None:
    """Suggest the first voice whose name starts with value (case-insensitive).

    Only used to enrich error messages, never to correct input.
    """
    return _suggest(value, voice_names())


def suggest_language(value: str) -> str | None:
    """Suggest the first language code starting with value (case-insensitive)."""
    return _suggest(value, language_codes())


def get_random_voice() -> str:
    """Pick a voice name uniformly at random."""
    return random.choice(VOICES).name
