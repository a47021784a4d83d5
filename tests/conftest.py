from __future__ import annotations

from typing import Any

import pytest
import requests

from nexmo_rest.config import get_settings


def make_response(status_code: int = 200, body: str = "") -> requests.Response:
    """Build a requests.Response without touching the network."""
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = body.encode("utf-8")
    resp.encoding = "utf-8"
    return resp


class FakeSession:
    """Stand-in for requests.Session that records calls and replays responses."""

    def __init__(self, *responses: requests.Response | Exception) -> None:
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self.responses:
            raise AssertionError("unexpected HTTP call")
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch):
    for name in ("NEXMO_API_KEY", "NEXMO_API_SECRET", "NEXMO_TIMEOUT_S", "NEXMO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
