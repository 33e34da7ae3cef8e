"""Parsing of pre-authenticated raw.githubusercontent.com URLs."""

import re

from gup.errors import MalformedInputError
from gup.models import UploadTarget

URL_FORMAT = "https://raw.githubusercontent.com/<owner>/<repo>/refs/heads/<branch>/<path>?token=<token>"

_RAW_URL_RE = re.compile(
    r"https://raw\.githubusercontent\.com/([^/]+)/([^/]+)/refs/heads/([^/]+)/(.+)\?token=(.+)"
)


def parse_github_url(url: str) -> UploadTarget:
    """
    Split a raw-content URL into repository coordinates.

    The path may contain slashes and runs up to the last ``?token=``.
    Nothing is fetched; the URL is only matched against the expected shape.

    Raises:
        MalformedInputError: if the URL does not have the expected shape.
            The message never echoes the URL since it carries a token.
            Tokens that are not printable ASCII are rejected too.
    """
    match = _RAW_URL_RE.fullmatch(url or "")
    if match is None:
        raise MalformedInputError(f"GitHub URL is malformed. Expected format: {URL_FORMAT}")

    owner, repo_name, branch, remote_path, token = match.groups()
    # sent verbatim in the Authorization header
    if not (token.isascii() and token.isprintable()) or " " in token:
        raise MalformedInputError("GitHub URL token must be printable ASCII without spaces")
    return UploadTarget(
        owner=owner,
        repo=f"{owner}/{repo_name}",
        branch=branch,
        remote_path=remote_path,
        token=token,
    )
