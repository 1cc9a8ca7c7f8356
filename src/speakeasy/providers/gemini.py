"""Gemini speech generation provider implementation."""

import asyncio
import base64
import os
from typing import Any

from google import genai
from google.genai import types

from ..config import DEFAULT_MODEL
from ..tts.errors import TTSAuthError
from .base import SpeechProvider


def extract_audio(response: Any) -> bytes | None:
    """Pull inline audio out of a generate_content response.

    Only the first candidate's first content part is inspected. The SDK
    normally hands back decoded bytes; base64 text is decoded here.

    Returns:
        Raw audio bytes, or None if the response carries no audio
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None

    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    if not parts:
        return None

    inline_data = getattr(parts[0], "inline_data", None)
    data = getattr(inline_data, "data", None)
    if not data:
        return None
    if isinstance(data, str):
        return base64.b64decode(data)
    return bytes(data)


class GeminiProvider(SpeechProvider):
    """Gemini TTS provider implementation.

    Wraps the synchronous google-genai client; every SDK call runs in a
    worker thread so the event loop is never blocked.
    """

    def __init__(self, api_key: str | None = None, model: str = DEFAULT_MODEL) -> None:
        """Initialize Gemini provider.

        Args:
            api_key: Gemini API key. If not provided, reads from
                    GEMINI_API_KEY environment variable.
            model: Speech generation model identifier

        Raises:
            TTSAuthError: If API key is not provided or the client fails.
        """
        self._api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not self._api_key:
            raise TTSAuthError(
                "API key is required for TTS",
                suggestion="Set GEMINI_API_KEY in your environment or pass api_key.",
            )

        try:
            self._client = genai.Client(api_key=self._api_key)
        except Exception as e:
            raise TTSAuthError(
                f"Failed to initialize Gemini client: {e}", original_error=e
            ) from e

        self.model = model

    def _speech_config(self, voice: str) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            response_modalities=["AUDIO"],
            speech_config=types.SpeechConfig(
                voice_config=types.VoiceConfig(
                    prebuilt_voice_config=types.PrebuiltVoiceConfig(voice_name=voice)
                )
            ),
        )

    async def generate_audio(self, contents: Any, voice: str) -> bytes | None:
        """Run one speech generation call.

        Args:
            contents: Content turn built by the content assembler
            voice: Prebuilt voice name

        Returns:
            Raw PCM bytes, or None when the response has no audio
        """
        config = self._speech_config(voice)

        def _sync_generate() -> Any:
            return self._client.models.generate_content(
                model=self.model, contents=contents, config=config
            )

        response = await asyncio.to_thread(_sync_generate)
        return extract_audio(response)

    async def upload_file(self, path: str, mime_type: str) -> Any:
        return await asyncio.to_thread(
            self._client.files.upload, file=path, config={"mime_type": mime_type}
        )

    async def list_files(self, page_size: int) -> list[Any]:
        def _sync_list() -> list[Any]:
            # The pager fetches further pages on iteration
            pager = self._client.files.list(config={"page_size": page_size})
            return list(pager)

        return await asyncio.to_thread(_sync_list)

    async def get_file(self, name: str) -> Any:
        return await asyncio.to_thread(self._client.files.get, name=name)

    async def delete_file(self, name: str) -> None:
        await asyncio.to_thread(self._client.files.delete, name=name)
