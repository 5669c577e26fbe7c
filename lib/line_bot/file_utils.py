"""
File utilities for LINE Messaging API.

This module provides MIME type detection for binary uploads and the local
checks done before an upload request is sent.
"""

import logging
from pathlib import Path
from typing import Collection, Union

import aiofiles
import magic

from .constants import RICH_MENU_IMAGE_MIME_TYPES
from .exceptions import PreflightValidationError

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"


class UnsupportedFileTypeError(PreflightValidationError):
    """Exception raised when file type is not supported."""

    pass


def detectMimeTypeFromBuffer(data: bytes) -> str:
    """Detect MIME type from content.

    Uses python-magic library for MIME type detection based on the leading bytes.

    Args:
        data: Raw file content

    Returns:
        MIME type string (e.g., "image/jpeg"), "application/octet-stream" if unknown

    Example:
        >>> detectMimeTypeFromBuffer(open("menu.png", "rb").read())
        'image/png'
    """
    if not data:
        return DEFAULT_MIME_TYPE

    try:
        detectedType = magic.from_buffer(data, mime=True)
    except magic.MagicException as e:
        logger.warning(f"Failed to detect MIME type: {e}")
        return DEFAULT_MIME_TYPE

    return detectedType or DEFAULT_MIME_TYPE


def validateImageType(data: bytes, allowedTypes: Collection[str] = RICH_MENU_IMAGE_MIME_TYPES) -> str:
    """Check image content against allowed MIME types.

    Args:
        data: Raw image content
        allowedTypes: Accepted MIME types (default: JPEG and PNG)

    Returns:
        Detected MIME type

    Raises:
        UnsupportedFileTypeError: If detected type is not allowed
    """
    mimeType = detectMimeTypeFromBuffer(data)
    if mimeType not in allowedTypes:
        allowed = " or ".join(f"`{t}`" for t in sorted(allowedTypes))
        logger.warning(f"Rejected upload of {mimeType} content, allowed: {allowed}")
        raise UnsupportedFileTypeError(f"Image must be {allowed}, got `{mimeType}`")
    return mimeType


async def readFileAsync(filePath: Union[str, Path], chunkSize: int = 8192) -> bytes:
    """Read whole file asynchronously.

    Args:
        filePath: Path to the file
        chunkSize: Size of chunks to read (default: 8KB)

    Returns:
        File content as bytes
    """
    chunks = []
    async with aiofiles.open(str(filePath), "rb") as f:
        while True:
            chunk = await f.read(chunkSize)
            if not chunk:
                break
            chunks.append(chunk)
    return b"".join(chunks)
