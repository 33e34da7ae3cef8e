"""Error types raised by the upload pipeline."""

from gup.models import Stage


class GupError(Exception):
    """Base class for every failure the pipeline reports."""

    stage: Stage | None = None


class ConfigError(GupError):
    """Configuration file is missing, unreadable, or invalid."""


class MalformedInputError(GupError):
    """Input URL does not match the raw-content URL shape."""

    stage = Stage.PARSE


class LocalFileNotFoundError(GupError, FileNotFoundError):
    """Local path does not resolve to an existing regular file."""

    stage = Stage.LOAD


class MetadataError(GupError):
    """File size could not be determined."""

    stage = Stage.LOAD


class FileTooLargeError(GupError):
    """File exceeds the configured size ceiling."""

    stage = Stage.LOAD

    def __init__(self, size_bytes: int, max_size: int):
        self.size_bytes = size_bytes
        self.max_size = max_size
        super().__init__(
            f"File size ({size_bytes / 1024 / 1024:.2f} MB) exceeds limit "
            f"({max_size / 1024 / 1024:.0f} MB)"
        )


class ReadError(GupError):
    """File content could not be read after the size check passed."""

    stage = Stage.LOAD


class NetworkError(GupError):
    """Transport-level failure (DNS, connection, TLS, timeout)."""

    def __init__(self, message: str, stage: Stage | None = None):
        super().__init__(message)
        self.stage = stage


class ResponseParseError(GupError):
    """Successful response whose body lacks the expected fields."""

    stage = Stage.PROBE


class HTTPStatusError(GupError):
    """Provider answered with an unexpected HTTP status."""

    action = "request"

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"{self.action} failed with HTTP {status_code}")


class RemoteProbeError(HTTPStatusError):
    """Read of the remote path returned neither 2xx nor 404."""

    stage = Stage.PROBE
    action = "Checking remote file"


class UploadRejectedError(HTTPStatusError):
    """Write of the remote path returned a non-2xx status."""

    stage = Stage.WRITE
    action = "Uploading file"
