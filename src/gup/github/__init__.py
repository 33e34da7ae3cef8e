"""GitHub URL parsing and Contents API access."""

from gup.github.client import ContentsBackend, ContentsClient, build_payload, create_session
from gup.github.url import URL_FORMAT, parse_github_url

__all__ = [
    "ContentsBackend",
    "ContentsClient",
    "URL_FORMAT",
    "build_payload",
    "create_session",
    "parse_github_url",
]
