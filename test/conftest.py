from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
import requests

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

BASE_URL = "http://api.test"


class FakeResponse:
    def __init__(self, url: str, status: int = 200, json_body=None, text: str | None = None):
        self.url = url
        self.status_code = status
        if text is None:
            text = "" if json_body is None else json.dumps(json_body)
        self.text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Records every call; answers from routes registered with ``on``."""

    def __init__(self):
        self.calls: list[tuple[str, str, dict]] = []
        self._routes: dict[tuple[str, str], list] = {}

    def on(self, method: str, path: str, status: int = 200, body=None, text=None, exc=None):
        url = BASE_URL + path
        self._routes.setdefault((method, url), []).append((status, body, text, exc))
        return self

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        queue = self._routes.get((method, url))
        if not queue:
            raise AssertionError(f"unexpected request {method} {url}")
        status, body, text, exc = queue.pop(0) if len(queue) > 1 else queue[0]
        if exc is not None:
            raise exc
        return FakeResponse(url, status, body, text)

    def count(self, method: str, path: str) -> int:
        return sum(1 for m, u, _ in self.calls if m == method and u == BASE_URL + path)

    def last(self) -> tuple[str, str, dict]:
        return self.calls[-1]


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def api(session):
    from sfm.api.rest_client import RestClient

    return RestClient(BASE_URL, session=session, timeout=5)


@pytest.fixture
def network_down():
    return requests.ConnectionError("network down")
