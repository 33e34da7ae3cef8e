"""Loading and encoding of the local file to upload."""

import base64
from pathlib import Path

from gup.config import MAX_FILE_SIZE
from gup.errors import FileTooLargeError, LocalFileNotFoundError, MetadataError, ReadError
from gup.models import LocalFile


def encode_content(data: bytes) -> str:
    """Base64-encode bytes for the JSON payload of the Contents API."""
    return base64.b64encode(data).decode("ascii")


def load_local_file(file_path: Path | str, max_size: int = MAX_FILE_SIZE) -> LocalFile:
    """
    Validate, read and encode a local file.

    The size is checked against ``max_size`` before any content is read,
    so oversized files are never loaded into memory. A file of exactly
    ``max_size`` bytes is accepted.

    Args:
        file_path: Path to the local file
        max_size: Size ceiling in bytes

    Returns:
        LocalFile with raw bytes and their base64 encoding
    """
    path = Path(file_path)

    try:
        is_file = path.is_file()
        size = path.stat().st_size if is_file else 0
    except OSError as e:
        raise MetadataError(f"Cannot read metadata of {path}: {e.strerror or e}") from e

    if not is_file:
        raise LocalFileNotFoundError(f"File {path} does not exist")

    if size > max_size:
        raise FileTooLargeError(size, max_size)

    try:
        with path.open("rb") as f:
            raw = f.read(max_size + 1)
    except OSError as e:
        raise ReadError(f"Failed to read {path}: {e.strerror or e}") from e

    # file grew after stat
    if len(raw) > max_size:
        raise FileTooLargeError(len(raw), max_size)

    return LocalFile(
        path=path,
        size_bytes=len(raw),
        raw_bytes=raw,
        encoded_content=encode_content(raw),
    )
