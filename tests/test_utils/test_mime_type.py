"""Tests for MIME type detection."""

import base64
from genai_content.utilities.mime_type import get_mime_type

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR" + b"\x00" * 17


class TestGetMimeType:
    """Tests for get_mime_type."""

    def test_mime_type_from_bytes(self):
        """Test detection from raw bytes."""
        assert get_mime_type(PNG_BYTES) == "image/png"

    def test_mime_type_from_base64(self):
        """Test detection from a base64 string."""
        assert get_mime_type(base64.b64encode(PNG_BYTES).decode("ascii")) == "image/png"

    def test_unknown_mime_type(self):
        """Test that undetectable data returns None."""
        assert get_mime_type(b"plain text") is None
