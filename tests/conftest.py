"""Shared fixtures: a recording stand-in for requests.Session."""

import io
import json
from typing import Any

import pytest
from rich.console import Console

TOKEN = "ghp_secret123"
GITHUB_URL = f"https://raw.githubusercontent.com/octo/demo/refs/heads/main/docs/hello.txt?token={TOKEN}"
CONTENTS_URL = "https://api.github.com/repos/octo/demo/contents/docs/hello.txt"


class FakeResponse:
    """Minimal response with the attributes the client reads."""

    def __init__(self, status_code: int, body: Any = None):
        self.status_code = status_code
        if body is None:
            self.text = ""
        elif isinstance(body, str):
            self.text = body
        else:
            self.text = json.dumps(body)

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Replays queued responses (or raises queued exceptions) and records requests."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def request(self, method, url, headers=None, params=None, data=None, timeout=None):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": headers or {},
                "params": params,
                "data": data,
                "timeout": timeout,
            }
        )
        if not self.responses:
            raise AssertionError(f"Unexpected {method} {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def sent_json(self, index: int) -> dict[str, Any]:
        """Decode the serialized body of the request at ``index``."""
        return json.loads(self.calls[index]["data"])


@pytest.fixture
def console():
    """Console writing to an in-memory buffer, readable via ``console.file.getvalue()``."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def hello_file(tmp_path):
    path = tmp_path / "hello.txt"
    path.write_bytes(b"hi")
    return path
