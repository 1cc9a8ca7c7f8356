"""Abstract base class for remote speech providers.

This module defines the interface the engine talks to, so tests and
alternative backends can be substituted without touching orchestration.
"""

from abc import ABC, abstractmethod
from typing import Any


class SpeechProvider(ABC):
    """Abstract base class for a generative speech service.

    Providers return raw remote objects for file operations; validation
    and conversion to FileMetadata happen in FileReferenceManager.
    """

    @abstractmethod
    async def generate_audio(self, contents: Any, voice: str) -> bytes | None:
        """Generate speech for the given content.

        Args:
            contents: Assembled request content (one user turn)
            voice: Prebuilt voice name

        Returns:
            Raw PCM audio bytes, or None if the response carried no audio

        Raises:
            Exception: If the remote call fails
        """
        pass

    @abstractmethod
    async def upload_file(self, path: str, mime_type: str) -> Any:
        """Upload a local file to the remote file store."""
        pass

    @abstractmethod
    async def list_files(self, page_size: int) -> list[Any]:
        """Return every file in the remote store, draining all pages."""
        pass

    @abstractmethod
    async def get_file(self, name: str) -> Any:
        """Fetch a remote file descriptor by name."""
        pass

    @abstractmethod
    async def delete_file(self, name: str) -> None:
        """Delete a remote file by name."""
        pass
