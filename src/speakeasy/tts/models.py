"""TTS data models with validation."""

import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

FILE_EXTRA_ATTRIBUTES = (
    "display_name",
    "state",
    "sha256_hash",
    "expiration_time",
    "source",
)


@dataclass(frozen=True)
class VoiceDescriptor:
    """A prebuilt voice and its short style description."""

    name: str
    description: str


@dataclass(frozen=True)
class LanguageDescriptor:
    """A supported language label and its BCP-47 code."""

    language: str
    code: str


@dataclass
class FileMetadata:
    """Handle to a file held by the remote file store.

    Args:
        name: Remote resource name (e.g. "files/abc123")
        uri: URI the speech model uses to reference the file
        mime_type: MIME type of the stored file
        size_bytes: Optional size reported by the store
        create_time: Optional creation timestamp reported by the store
        attributes: Any further fields the store returned
    """

    name: str
    uri: str
    mime_type: str
    size_bytes: int | None = None
    create_time: str | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate the identity fields."""
        if not self.name:
            raise ValueError("name cannot be empty")
        if not self.uri:
            raise ValueError("uri cannot be empty")
        if not self.mime_type:
            raise ValueError("mime_type cannot be empty")

    @classmethod
    def from_remote(cls, remote: Any) -> "FileMetadata":
        """Build metadata from a remote file object or mapping."""
        if isinstance(remote, dict):
            get = remote.get
        else:

            def get(key: str, default: Any = None) -> Any:
                return getattr(remote, key, default)

        create_time = get("create_time")
        attributes = {}
        for key in FILE_EXTRA_ATTRIBUTES:
            value = get(key)
            if value is not None:
                attributes[key] = value

        return cls(
            name=get("name"),
            uri=get("uri"),
            mime_type=get("mime_type"),
            size_bytes=get("size_bytes"),
            create_time=str(create_time) if create_time is not None else None,
            attributes=attributes,
        )


FileReference = str | FileMetadata


@dataclass(frozen=True)
class TextRequest:
    """Synthesize speech for a plain text string."""

    text: str
    voice: str | None = None
    language: str | None = None
    file_name: str | None = None


@dataclass(frozen=True)
class MediaRequest:
    """Synthesize speech from one or more file references plus a prompt.

    Each file is either a string (local path or remote file name) or a
    FileMetadata handle obtained from the file store.
    """

    files: tuple[FileReference, ...]
    prompt: str | None = None
    voice: str | None = None
    language: str | None = None
    file_name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "files", tuple(f for f in self.files or () if f))
        if not self.files:
            raise ValueError("files cannot be empty")


SynthesisRequest = TextRequest | MediaRequest


def build_request(
    text: str | None = None,
    file: FileReference | None = None,
    files: list[FileReference] | tuple[FileReference, ...] | None = None,
    prompt: str | None = None,
    voice: str | None = None,
    language: str | None = None,
    file_name: str | None = None,
) -> SynthesisRequest:
    """Normalize loose synthesis options into a typed request.

    File inputs take priority: if any file reference survives flattening,
    the request is a MediaRequest even when text is also set.

    Returns:
        TextRequest or MediaRequest
    """
    flattened = tuple(f for f in [file, *(files or ())] if f)

    if flattened:
        return MediaRequest(
            files=flattened,
            prompt=prompt,
            voice=voice,
            language=language,
            file_name=file_name,
        )

    return TextRequest(
        text=text or "",
        voice=voice,
        language=language,
        file_name=file_name,
    )


@dataclass
class SynthesisResult:
    """Raw audio produced by a synthesis call.

    Attributes:
        audio: Raw 16-bit PCM bytes (24kHz mono)
        voice: Voice name that was used
        language: Language code that was used
        cached: True if the audio was served from the result cache
    """

    audio: bytes
    voice: str
    language: str
    cached: bool = False


@dataclass
class FileResult:
    """Location of a finished audio artifact."""

    file_path: Path
    voice: str
    language: str


@dataclass
class StreamResult:
    """Readable stream over synthesized audio."""

    stream: io.BytesIO
    voice: str
    language: str
