"""Request content assembly for the speech service.

Content order matters: the service reads the parts as one ordered
conversation turn, so file parts come first in request order and the
instruction prompt is always last.
"""

import asyncio
import mimetypes
from pathlib import Path

from google.genai import types

from .files import FileReferenceManager, validate_file
from .models import FileMetadata, FileReference, MediaRequest

DEFAULT_FILE_PROMPT = "Describe this file"
DEFAULT_MIME_TYPE = "application/octet-stream"


def build_text_contents(text: str) -> types.Content:
    """Build a single user turn holding plain text."""
    return types.Content(role="user", parts=[types.Part.from_text(text=text)])


def guess_mime_type(path: str) -> str:
    mime_type, _ = mimetypes.guess_type(path)
    return mime_type or DEFAULT_MIME_TYPE


async def resolve_file(
    reference: FileReference, files: FileReferenceManager
) -> FileMetadata:
    """Resolve one file reference to validated metadata.

    Strings naming an existing local file are uploaded; any other string
    is treated as a remote file name and fetched.

    Raises:
        FileMetadataError: If the resolved descriptor is incomplete
    """
    if isinstance(reference, FileMetadata):
        return validate_file(reference)

    is_local = await asyncio.to_thread(Path(reference).is_file)
    if is_local:
        return await files.upload_unreported(reference, guess_mime_type(reference))
    return await files.get_unreported(reference)


async def assemble_media_contents(
    request: MediaRequest, files: FileReferenceManager
) -> types.Content:
    """Build the multimodal turn for a MediaRequest.

    Args:
        request: Media request with at least one file reference
        files: Manager used to resolve string references

    Returns:
        One user Content with a file part per reference followed by the
        prompt (or DEFAULT_FILE_PROMPT)
    """
    parts: list[types.Part] = []
    for reference in request.files:
        metadata = await resolve_file(reference, files)
        parts.append(
            types.Part.from_uri(file_uri=metadata.uri, mime_type=metadata.mime_type)
        )

    parts.append(types.Part.from_text(text=request.prompt or DEFAULT_FILE_PROMPT))
    return types.Content(role="user", parts=parts)
