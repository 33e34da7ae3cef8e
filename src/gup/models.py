"""Value objects handed between pipeline stages."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Stage(str, Enum):
    """Pipeline stage, used to report where a run stopped."""

    PARSE = "parse"
    LOAD = "load"
    PROBE = "probe"
    WRITE = "write"


@dataclass(frozen=True)
class UploadTarget:
    """Repository coordinates parsed from a raw-content URL."""

    owner: str
    repo: str
    branch: str
    remote_path: str
    token: str = field(repr=False)

    @property
    def repo_name(self) -> str:
        return self.repo.split("/", 1)[1]


@dataclass
class LocalFile:
    """A local file loaded into memory, with its base64 form."""

    path: Path
    size_bytes: int
    raw_bytes: bytes = field(repr=False)
    encoded_content: str = field(repr=False)

    @property
    def filename(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class RemoteFileState:
    """Whether the remote path exists, and its blob SHA if so."""

    exists: bool
    content_hash: str | None = None

    @classmethod
    def absent(cls) -> "RemoteFileState":
        return cls(exists=False)

    @classmethod
    def present(cls, sha: str) -> "RemoteFileState":
        return cls(exists=True, content_hash=sha)


@dataclass
class UploadResult:
    """Outcome of one upload run."""

    succeeded: bool
    commit_hash: str | None = None
    error_detail: str | None = None
    error_category: str | None = None
    stage: Stage | None = None
    remote_existed: bool | None = None
    remote_changed: bool = False
