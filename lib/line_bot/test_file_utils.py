"""
Tests for MIME detection, image preflight and async file reading.
"""

from unittest.mock import patch

import magic
import pytest

from .conftest import GIF_1X1, PNG_1X1
from .exceptions import PreflightValidationError
from .file_utils import (
    DEFAULT_MIME_TYPE,
    UnsupportedFileTypeError,
    detectMimeTypeFromBuffer,
    readFileAsync,
    validateImageType,
)

JPEG_HEADER = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00" + b"\x00" * 16 + b"\xff\xd9"


class TestDetectMimeType:
    def test_png(self):
        assert detectMimeTypeFromBuffer(PNG_1X1) == "image/png"

    def test_jpeg(self):
        assert detectMimeTypeFromBuffer(JPEG_HEADER) == "image/jpeg"

    def test_gif(self):
        assert detectMimeTypeFromBuffer(GIF_1X1) == "image/gif"

    def test_empty(self):
        assert detectMimeTypeFromBuffer(b"") == DEFAULT_MIME_TYPE

    def test_magic_failure(self):
        """Test detection failure falls back to octet-stream, dood!"""
        with patch("magic.from_buffer", side_effect=magic.MagicException("broken")):
            assert detectMimeTypeFromBuffer(PNG_1X1) == DEFAULT_MIME_TYPE


class TestValidateImageType:
    @pytest.mark.parametrize("data, expected", [(PNG_1X1, "image/png"), (JPEG_HEADER, "image/jpeg")])
    def test_accepted(self, data, expected):
        assert validateImageType(data) == expected

    def test_gif_rejected(self):
        with pytest.raises(UnsupportedFileTypeError) as excInfo:
            validateImageType(GIF_1X1)

        assert isinstance(excInfo.value, PreflightValidationError)
        assert str(excInfo.value) == "Image must be `image/jpeg` or `image/png`, got `image/gif`"

    def test_custom_allowed_types(self):
        assert validateImageType(GIF_1X1, allowedTypes={"image/gif"}) == "image/gif"


class TestReadFileAsync:
    async def test_read_in_chunks(self, tmp_path):
        path = tmp_path / "menu.png"
        path.write_bytes(PNG_1X1 * 3)

        assert await readFileAsync(path, chunkSize=7) == PNG_1X1 * 3

    async def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            await readFileAsync(tmp_path / "missing.png")
