"""TTS engine orchestrating resolution, caching, synthesis and finishing.

Coordinates the request resolver, content assembler, result cache,
speech provider and audio finisher behind one entry point per output
shape (buffer, stream, file).
"""

import io
import os
from typing import Any

from ..audio.finisher import AudioFinisher
from ..cache.manager import AudioCache, compute_key
from ..config import EngineConfig
from ..providers.base import SpeechProvider
from .content import assemble_media_contents, build_text_contents
from .errors import (
    ErrorCode,
    NoAudioError,
    NoTextError,
    SynthesisError,
    TTSAuthError,
    TTSError,
)
from .files import FileReferenceManager
from .hooks import StdlibLogger
from .models import (
    FileMetadata,
    FileResult,
    MediaRequest,
    StreamResult,
    SynthesisRequest,
    SynthesisResult,
    TextRequest,
    build_request,
)
from .resolver import resolve_voice_and_language

FILE_NAME_TEXT_LENGTH = 40


class TTSEngine:
    """Main entry point for text-to-speech synthesis with Gemini.

    Example:
        engine = TTSEngine(os.environ["GEMINI_API_KEY"])

        result = await engine.synthesize_to_file(text="Hello world!")
        # FileResult(file_path=Path("data/tts/hello-world-puck-1a2b3c4d-....mp3"), ...)

        result = await engine.synthesize_to_buffer(
            text="Cache me", voice="Puck", language="en-US"
        )
        # SynthesisResult(audio=b"...", voice="Puck", language="en-US")

        media = await engine.synthesize_from_file(
            file="notes.mp3", prompt="Summarize this recording"
        )

    Every public synthesis call fires before_synthesize once at the start
    and then exactly one of after_synthesize or on_error. after_synthesize
    fires only once the whole call has succeeded, so a file that cannot be
    finished reports on_error alone.
    """

    def __init__(
        self,
        config_or_api_key: EngineConfig | str | None = None,
        *,
        provider: SpeechProvider | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            config_or_api_key: EngineConfig, or a bare API key string
            provider: Speech provider override (defaults to GeminiProvider)

        Raises:
            TTSAuthError: If no API key is configured
        """
        if isinstance(config_or_api_key, str):
            config = EngineConfig(api_key=config_or_api_key)
        else:
            config = config_or_api_key or EngineConfig()

        self.config = config
        self.hooks = config.hooks
        self.debug = config.debug
        self.logger = config.logger or StdlibLogger()

        api_key = config.api_key or os.getenv("GEMINI_API_KEY")
        if not api_key:
            err = TTSAuthError(
                "API key is required for TTS",
                suggestion="Set GEMINI_API_KEY in your environment or pass it "
                "to the constructor.",
            )
            self._report("Engine initialization", err)
            raise err

        if provider is None:
            from ..providers.gemini import GeminiProvider

            try:
                provider = GeminiProvider(api_key=api_key, model=config.model)
            except TTSError as e:
                self._report("Engine initialization", e)
                raise

        self.provider = provider
        self.files = FileReferenceManager(
            provider, self.logger, on_error=self.hooks.on_error
        )
        self.cache = AudioCache(config.resolved_cache_dir)
        self.finisher = AudioFinisher(
            config.output_dir, ffmpeg_path=config.ffmpeg_path, logger=self.logger
        )

    # === FILE STORE ===

    async def upload_file(self, path: str, mime_type: str) -> FileMetadata:
        """Upload a local file for use in file-based synthesis."""
        return await self.files.upload(path, mime_type)

    async def list_files(self, page_size: int = 10) -> list[FileMetadata]:
        """List every uploaded file."""
        return await self.files.list(page_size)

    async def get_file(self, name: str) -> FileMetadata:
        """Get metadata for an uploaded file by name."""
        return await self.files.get(name)

    async def delete_file(self, name: str) -> None:
        """Delete an uploaded file by name."""
        await self.files.delete(name)

    # === SYNTHESIS ===

    async def synthesize_to_buffer(
        self, request: SynthesisRequest | None = None, **options: Any
    ) -> SynthesisResult:
        """Synthesize a text or file-based request into raw audio bytes.

        Args:
            request: TextRequest or MediaRequest
            **options: build_request() keywords, used when request is None

        Returns:
            SynthesisResult with raw PCM audio

        Raises:
            TTSError: With the code describing the failure
        """
        try:
            request = self._coerce_request(request, options)
            result = await self._synthesize(request)
            self._after(result)
        except Exception as e:
            self._report("Synthesize to buffer", e)
            raise
        return result

    async def synthesize_from_file(
        self, request: SynthesisRequest | None = None, **options: Any
    ) -> SynthesisResult:
        """Synthesize speech from file references plus an optional prompt.

        Raises:
            SynthesisError: With SYNTH_FILE_ERROR if no file was given
            TTSError: With the code describing any other failure
        """
        try:
            request = self._coerce_request(request, options)
            if not isinstance(request, MediaRequest):
                self._before(request)
                raise SynthesisError(
                    "No file provided for file-based synthesis",
                    code=ErrorCode.SYNTH_FILE_ERROR,
                    suggestion="Pass file= or files= with at least one entry.",
                )
            result = await self._synthesize(request)
            self._after(result)
        except Exception as e:
            self._report("Synthesize from file", e)
            raise
        return result

    async def synthesize_to_stream(
        self, request: SynthesisRequest | None = None, **options: Any
    ) -> StreamResult:
        """Synthesize and return the raw audio as a readable stream."""
        try:
            request = self._coerce_request(request, options)
            result = await self._synthesize(request)
            self._after(result)
        except Exception as e:
            self._report("Synthesize to stream", e)
            raise

        self.logger.log("[TTS] Synthesize to stream success")
        return StreamResult(
            stream=io.BytesIO(result.audio),
            voice=result.voice,
            language=result.language,
        )

    async def synthesize_to_file(
        self, request: SynthesisRequest | None = None, **options: Any
    ) -> FileResult:
        """Synthesize and save an mp3 under the output directory.

        If ffmpeg conversion fails the raw audio is saved at the same path.

        Returns:
            FileResult with the final path

        Raises:
            MissingTranscoderError: If ffmpeg is not installed
            TTSError: With the code describing any other failure
            OSError: If the output directory cannot be written
        """
        try:
            request = self._coerce_request(request, options)
            result = await self._synthesize(request)
            file_path = await self.finisher.finish(
                result.audio, result.voice, self._base_name(request)
            )
            self._after(result)
        except Exception as e:
            self._report("Synthesize to file", e)
            raise

        self.logger.log("[TTS] Synthesize to file success: %s", file_path)
        return FileResult(
            file_path=file_path, voice=result.voice, language=result.language
        )

    # === INTERNALS ===

    def _coerce_request(
        self, request: SynthesisRequest | None, options: dict[str, Any]
    ) -> SynthesisRequest:
        if request is None:
            return build_request(**options)
        if options:
            raise TypeError("Pass either a request object or keyword options, not both")
        return request

    def _base_name(self, request: SynthesisRequest) -> str:
        if request.file_name:
            return request.file_name
        if isinstance(request, TextRequest) and request.text:
            return request.text[:FILE_NAME_TEXT_LENGTH]
        return "output"

    def _before(self, request: SynthesisRequest) -> None:
        if self.hooks.before_synthesize:
            self.hooks.before_synthesize(request)

    def _after(self, result: SynthesisResult) -> None:
        if self.hooks.after_synthesize:
            self.hooks.after_synthesize(result)

    def _report(self, operation: str, error: Exception) -> None:
        self.logger.error("[TTS] %s error: %r", operation, error)
        if self.hooks.on_error:
            self.hooks.on_error(error)

    async def _synthesize(self, request: SynthesisRequest) -> SynthesisResult:
        self._before(request)
        if isinstance(request, MediaRequest):
            return await self._synthesize_media(request)
        return await self._synthesize_text(request)

    async def _synthesize_text(self, request: TextRequest) -> SynthesisResult:
        if not isinstance(request.text, str) or not request.text:
            raise NoTextError(
                "Text is required for TTS synthesis",
                suggestion="Pass non-empty text, or file= for file-based synthesis.",
            )

        voice, language = resolve_voice_and_language(
            request, self.config.default_voice, self.config.default_language
        )

        # === CACHE LOOKUP PHASE ===
        cache_key = None
        if self.config.use_cache:
            cache_key = compute_key(request.text, voice, language)
            cached = await self.cache.get(cache_key)
            if cached is not None:
                if self.debug:
                    self.logger.debug("[TTS] Cache hit for key %s", cache_key)
                return SynthesisResult(cached, voice, language, cached=True)
            if self.debug:
                self.logger.debug("[TTS] Cache miss for key %s", cache_key)

        # === SYNTHESIS PHASE ===
        if self.debug:
            self.logger.debug(
                "[TTS] Synthesizing with voice: %s, language: %s...", voice, language
            )
        audio = await self._invoke(
            build_text_contents(request.text),
            voice,
            ErrorCode.SYNTH_ERROR,
            "Failed to synthesize audio",
        )
        result = SynthesisResult(audio, voice, language)

        # Cache write failures never fail the synthesis
        if cache_key is not None:
            try:
                await self.cache.put(cache_key, audio)
                if self.debug:
                    self.logger.debug("[TTS] Cached audio as %s", cache_key)
            except Exception as e:
                self.logger.warn("[TTS] Failed to cache audio: %s", e)

        self.logger.log(
            "[TTS] Synthesize success: voice=%s language=%s", voice, language
        )
        return result

    async def _synthesize_media(self, request: MediaRequest) -> SynthesisResult:
        voice, language = resolve_voice_and_language(
            request, self.config.default_voice, self.config.default_language
        )

        try:
            contents = await assemble_media_contents(request, self.files)
        except TTSError:
            raise
        except Exception as e:
            raise SynthesisError(
                "Failed to resolve file references",
                code=ErrorCode.SYNTH_FILE_ERROR,
                original_error=e,
            ) from e

        if self.debug:
            self.logger.debug(
                "[TTS] synthesize_from_file parts: %d", len(contents.parts or [])
            )
        audio = await self._invoke(
            contents,
            voice,
            ErrorCode.SYNTH_FILE_ERROR,
            "Failed to synthesize audio from file",
        )
        result = SynthesisResult(audio, voice, language)

        self.logger.log(
            "[TTS] Synthesize from file success: voice=%s language=%s",
            voice,
            language,
        )
        return result

    async def _invoke(
        self, contents: Any, voice: str, code: ErrorCode, message: str
    ) -> bytes:
        """Call the provider, keeping transport failures apart from NO_AUDIO."""
        try:
            audio = await self.provider.generate_audio(contents, voice)
        except Exception as e:
            raise SynthesisError(message, code=code, original_error=e) from e

        if not audio:
            raise NoAudioError("No audio data returned from Gemini API")
        return audio
