"""GitHub Contents API client: remote probe and create-or-update write."""

import json
from typing import Any, Protocol

import requests

from gup.config import GupConfig
from gup.errors import (
    NetworkError,
    RemoteProbeError,
    ResponseParseError,
    UploadRejectedError,
)
from gup.models import LocalFile, RemoteFileState, Stage, UploadResult, UploadTarget

GITHUB_ACCEPT = "application/vnd.github.v3+json"


class ContentsBackend(Protocol):
    """Storage provider able to probe and write a single file."""

    def probe(self, target: UploadTarget) -> RemoteFileState: ...

    def write(
        self,
        target: UploadTarget,
        local_file: LocalFile,
        remote_state: RemoteFileState,
        message: str | None = None,
    ) -> UploadResult: ...


def create_session() -> requests.Session:
    """Create the HTTP session used for one upload run."""
    return requests.Session()


def commit_message(filename: str, remote_exists: bool) -> str:
    """Default commit message for creating or updating ``filename``."""
    return f"{'update' if remote_exists else 'create'} {filename}"


def build_payload(
    target: UploadTarget,
    local_file: LocalFile,
    remote_state: RemoteFileState,
    message: str | None = None,
) -> dict[str, Any]:
    """
    Build the PUT body for the Contents API.

    ``sha`` is only present when the remote file exists; GitHub rejects
    an update without it, and a create must not carry it.
    """
    payload: dict[str, Any] = {
        "message": message or commit_message(local_file.filename, remote_state.exists),
        "content": local_file.encoded_content,
        "branch": target.branch,
    }
    if remote_state.exists:
        payload["sha"] = remote_state.content_hash
    return payload


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


class ContentsClient:
    """
    Contents API backend over a ``requests`` session.

    The session is owned by the caller, who is responsible for closing it.
    """

    def __init__(self, session: requests.Session, config: GupConfig | None = None):
        self.session = session
        self.config = config or GupConfig()

    def contents_url(self, target: UploadTarget) -> str:
        return f"{self.config.api_base}/repos/{target.repo}/contents/{target.remote_path}"

    def _request(
        self,
        method: str,
        target: UploadTarget,
        stage: Stage,
        payload: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> requests.Response:
        """Send an authenticated request to the contents endpoint of ``target``."""
        headers = {
            "Authorization": f"token {target.token}",
            "Accept": GITHUB_ACCEPT,
            "User-Agent": self.config.user_agent,
        }
        data = None
        if payload is not None:
            headers["Content-Type"] = "application/json"
            data = json.dumps(payload)

        try:
            return self.session.request(
                method,
                self.contents_url(target),
                headers=headers,
                params=params,
                data=data,
                timeout=self.config.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Request to GitHub failed: {type(e).__name__}", stage=stage) from e
        except UnicodeError as e:
            raise NetworkError("Request headers could not be encoded", stage=stage) from e

    def probe(self, target: UploadTarget) -> RemoteFileState:
        """
        Check whether the remote path exists on the target branch.

        Returns:
            RemoteFileState with the current blob SHA, or an absent state on 404
        """
        response = self._request("GET", target, Stage.PROBE, params={"ref": target.branch})

        if response.status_code == 404:
            return RemoteFileState.absent()

        if not _is_success(response.status_code):
            raise RemoteProbeError(response.status_code, response.text)

        try:
            body = response.json()
        except ValueError as e:
            raise ResponseParseError("Response to remote file check is not valid JSON") from e

        sha = body.get("sha") if isinstance(body, dict) else None
        if not isinstance(sha, str) or not sha:
            raise ResponseParseError("Response to remote file check has no 'sha' field")

        return RemoteFileState.present(sha)

    def write(
        self,
        target: UploadTarget,
        local_file: LocalFile,
        remote_state: RemoteFileState,
        message: str | None = None,
    ) -> UploadResult:
        """Create or update the remote file with the local content."""
        payload = build_payload(target, local_file, remote_state, message)
        response = self._request("PUT", target, Stage.WRITE, payload=payload)

        if not _is_success(response.status_code):
            raise UploadRejectedError(response.status_code, response.text)

        try:
            body = response.json()
        except ValueError:
            body = None

        commit_hash = None
        if isinstance(body, dict) and isinstance(body.get("commit"), dict):
            commit_hash = body["commit"].get("sha") or None

        return UploadResult(
            succeeded=True,
            commit_hash=commit_hash,
            remote_existed=remote_state.exists,
            remote_changed=True,
        )
