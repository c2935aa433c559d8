"""
Unit tests for the file loader.
"""

import os
import tempfile

import pytest

from card_listing_format.core.loader import read_listing_file


class TestReadListingFile:
    """Test the read_listing_file function."""

    def create_test_file(self, content: bytes) -> str:
        """Create a temporary test file with given content."""
        with tempfile.NamedTemporaryFile(mode='wb', suffix='.txt', delete=False) as f:
            f.write(content)
            return f.name

    def test_reads_content_verbatim(self):
        """Test the whole content is returned unchanged."""
        path = self.create_test_file(b"4x Card A\r\n4x Card B\n")
        try:
            assert read_listing_file(path) == "4x Card A\r\n4x Card B\n"
        finally:
            os.unlink(path)

    def test_reads_utf8(self):
        """Test non-ASCII card names are decoded."""
        path = self.create_test_file("1 Æther Vial\n".encode('utf-8'))
        try:
            assert read_listing_file(path) == "1 Æther Vial\n"
        finally:
            os.unlink(path)

    def test_empty_file(self):
        """Test an empty file gives an empty string."""
        path = self.create_test_file(b"")
        try:
            assert read_listing_file(path) == ""
        finally:
            os.unlink(path)

    def test_missing_file_raises(self, tmp_path):
        """Test a missing file propagates the I/O error."""
        with pytest.raises(FileNotFoundError):
            read_listing_file(tmp_path / "missing.txt")

    def test_directory_raises(self, tmp_path):
        """Test reading a directory propagates an OSError."""
        with pytest.raises(OSError):
            read_listing_file(tmp_path)

    def test_invalid_utf8_raises(self):
        """Test undecodable content is an error, not a classification."""
        path = self.create_test_file(b"4x \xff\xfe Card\n")
        try:
            with pytest.raises(UnicodeDecodeError):
                read_listing_file(path)
        finally:
            os.unlink(path)
