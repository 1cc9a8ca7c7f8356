"""Remote file store operations with descriptor validation."""

import builtins
from collections.abc import Callable
from typing import Any

from ..providers.base import SpeechProvider
from .errors import FileMetadataError
from .hooks import EngineLogger
from .models import FileMetadata

REQUIRED_FIELDS = ("name", "uri", "mime_type")


def _field(remote: Any, key: str) -> Any:
    if isinstance(remote, dict):
        return remote.get(key)
    return getattr(remote, key, None)


def validate_file(remote: Any, context: str = "File") -> FileMetadata:
    """Convert a remote descriptor to FileMetadata, rejecting incomplete ones.

    Args:
        remote: FileMetadata, SDK file object or mapping
        context: Prefix for the error message (e.g. "Uploaded file")

    Raises:
        FileMetadataError: If name, uri or mime_type is missing
    """
    if remote is None:
        raise FileMetadataError(f"{context} metadata is missing")

    missing = [key for key in REQUIRED_FIELDS if not _field(remote, key)]
    if missing:
        raise FileMetadataError(
            f"{context} is missing required metadata: {', '.join(missing)}"
        )
    if isinstance(remote, FileMetadata):
        return remote
    return FileMetadata.from_remote(remote)


class FileReferenceManager:
    """Upload, list, fetch and delete files in the remote file store.

    Every returned descriptor carries name, uri and mime_type. Each
    operation logs its outcome; failures are logged, reported to
    on_error once, and re-raised.
    """

    def __init__(
        self,
        provider: SpeechProvider,
        logger: EngineLogger,
        on_error: Callable[[Exception], None] | None = None,
    ) -> None:
        self.provider = provider
        self.logger = logger
        self.on_error = on_error

    def _report(self, action: str, error: Exception) -> None:
        self.logger.error("[TTS] %s error: %r", action, error)
        if self.on_error:
            self.on_error(error)

    async def upload(self, path: str, mime_type: str) -> FileMetadata:
        """Upload a local file.

        Args:
            path: Local file path
            mime_type: MIME type (e.g. "audio/mpeg", "image/png")
        """
        try:
            metadata = await self.upload_unreported(path, mime_type)
        except Exception as e:
            self._report("File upload", e)
            raise
        self.logger.log("[TTS] File uploaded: %s %s", metadata.name, metadata.mime_type)
        return metadata

    async def upload_unreported(self, path: str, mime_type: str) -> FileMetadata:
        """Upload without logging or invoking on_error (for enclosing calls)."""
        remote = await self.provider.upload_file(path, mime_type)
        return validate_file(remote, "Uploaded file")

    async def list(self, page_size: int = 10) -> builtins.list[FileMetadata]:
        """List every uploaded file.

        Args:
            page_size: Remote page size; all pages are drained before returning
        """
        try:
            remote_files = await self.provider.list_files(page_size)
            files = [validate_file(f, "Listed file") for f in remote_files]
        except Exception as e:
            self._report("List files", e)
            raise
        self.logger.log("[TTS] Listed files: %d", len(files))
        return files

    async def get(self, name: str) -> FileMetadata:
        """Fetch metadata for a file by name."""
        try:
            metadata = await self.get_unreported(name)
        except Exception as e:
            self._report("Get file", e)
            raise
        self.logger.log("[TTS] Got file: %s", metadata.name)
        return metadata

    async def get_unreported(self, name: str) -> FileMetadata:
        """Fetch without logging or invoking on_error (for enclosing calls)."""
        remote = await self.provider.get_file(name)
        return validate_file(remote, "Fetched file")

    async def delete(self, name: str) -> None:
        """Delete a file by name. Absence of an error means success."""
        try:
            await self.provider.delete_file(name)
        except Exception as e:
            self._report("Delete file", e)
            raise
        self.logger.log("[TTS] Deleted file: %s", name)
