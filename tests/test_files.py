"""Tests for gup.files."""

import base64
from pathlib import Path
from types import SimpleNamespace

import pytest

from gup.config import MAX_FILE_SIZE
from gup.errors import (
    FileTooLargeError,
    LocalFileNotFoundError,
    MetadataError,
    ReadError,
)
from gup.files import encode_content, load_local_file
from gup.models import Stage


def _forbid_open(monkeypatch):
    """Make any attempt to open a file for reading fail the test."""

    def fail(*args, **kwargs):
        raise AssertionError("file content was read")

    monkeypatch.setattr(Path, "open", fail)


class TestLoadLocalFile:
    """Tests for load_local_file() on readable files."""

    def test_returns_bytes_and_encoding(self, hello_file):
        """load_local_file should return the raw bytes and their base64 text."""
        local = load_local_file(hello_file)
        assert local.raw_bytes == b"hi"
        assert local.encoded_content == "aGk="
        assert local.size_bytes == 2
        assert local.filename == "hello.txt"

    def test_accepts_string_path(self, hello_file):
        """load_local_file should accept a plain string path."""
        local = load_local_file(str(hello_file))
        assert local.path == hello_file

    @pytest.mark.parametrize(
        "data",
        [b"", b"\x00", bytes(range(256))],
        ids=["empty", "single-byte", "all-byte-values"],
    )
    def test_encoding_round_trips(self, tmp_path, data):
        """Decoding the encoded content should give back the exact bytes."""
        path = tmp_path / "blob.bin"
        path.write_bytes(data)
        local = load_local_file(path)
        assert base64.b64decode(local.encoded_content) == data
        assert encode_content(data) == local.encoded_content


class TestLoadLocalFileErrors:
    """Tests for load_local_file() failure modes."""

    def test_missing_file(self, tmp_path):
        """A missing path should raise a load-stage FileNotFoundError."""
        with pytest.raises(LocalFileNotFoundError) as exc_info:
            load_local_file(tmp_path / "nope.txt")
        assert isinstance(exc_info.value, FileNotFoundError)
        assert exc_info.value.stage is Stage.LOAD

    def test_directory_is_not_a_file(self, tmp_path):
        """A directory should be treated as a missing file."""
        with pytest.raises(LocalFileNotFoundError):
            load_local_file(tmp_path)

    def test_metadata_failure(self, hello_file, monkeypatch):
        """A failing stat should raise MetadataError."""
        monkeypatch.setattr(Path, "is_file", lambda self: True)

        def broken_stat(self, *args, **kwargs):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(Path, "stat", broken_stat)
        with pytest.raises(MetadataError):
            load_local_file(hello_file)

    def test_read_failure(self, hello_file, monkeypatch):
        """A failing read after the size check should raise ReadError."""

        def broken_open(self, *args, **kwargs):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(Path, "open", broken_open)
        with pytest.raises(ReadError) as exc_info:
            load_local_file(hello_file)
        assert "Permission denied" in str(exc_info.value)


class TestSizeCeiling:
    """Tests for the file size ceiling."""

    def test_size_equal_to_ceiling_loads(self, tmp_path):
        """A file exactly at the ceiling should load."""
        path = tmp_path / "exact.bin"
        path.write_bytes(b"x" * 16)
        local = load_local_file(path, max_size=16)
        assert local.size_bytes == 16

    def test_one_byte_over_ceiling_fails_before_read(self, tmp_path, monkeypatch):
        """A file one byte over the ceiling should fail without being opened."""
        path = tmp_path / "over.bin"
        path.write_bytes(b"x" * 17)
        _forbid_open(monkeypatch)
        with pytest.raises(FileTooLargeError) as exc_info:
            load_local_file(path, max_size=16)
        assert exc_info.value.size_bytes == 17
        assert exc_info.value.max_size == 16

    def test_file_grown_after_stat_is_rejected(self, tmp_path, monkeypatch):
        """Content beyond the ceiling should be caught even if stat reported less."""
        path = tmp_path / "growing.bin"
        path.write_bytes(b"x" * 64)
        monkeypatch.setattr(Path, "is_file", lambda self: True)
        monkeypatch.setattr(Path, "stat", lambda self, *a, **kw: SimpleNamespace(st_size=8))
        with pytest.raises(FileTooLargeError) as exc_info:
            load_local_file(path, max_size=16)
        assert exc_info.value.size_bytes == 17

    def test_default_ceiling_is_100_mib(self):
        """The default ceiling should be 100 MiB."""
        assert MAX_FILE_SIZE == 104_857_600

    def test_default_ceiling_exact_size_loads(self, tmp_path):
        """A sparse file of exactly 100 MiB should be accepted."""
        path = tmp_path / "exact.bin"
        with open(path, "wb") as f:
            f.truncate(MAX_FILE_SIZE)
        local = load_local_file(path)
        assert local.size_bytes == MAX_FILE_SIZE

    def test_default_ceiling_plus_one_fails_before_read(self, tmp_path, monkeypatch):
        """A sparse file one byte over 100 MiB should fail without being read."""
        path = tmp_path / "big.bin"
        with open(path, "wb") as f:
            f.truncate(MAX_FILE_SIZE + 1)
        _forbid_open(monkeypatch)
        with pytest.raises(FileTooLargeError) as exc_info:
            load_local_file(path)
        assert "100.00 MB" in str(exc_info.value)
        assert "(100 MB)" in str(exc_info.value)
