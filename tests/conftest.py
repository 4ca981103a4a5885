"""Shared fixtures: a fake REST backend patched over ``requests.request``."""

from typing import Any, Dict, List, Tuple

import pytest
import requests

from tests.factories import GUESTS, PARTIES, RSVPS
from utils import party_api
from utils.state import PlannerState


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, raw: str = None):
        self.status_code = status_code
        self._body = body
        self._raw = raw

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if self._raw is not None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body


class FakeApi:
    """Routes ``(method, path)`` to canned responses and records every call."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Any] = {}
        self.calls: List[Tuple[str, str, Any]] = []

    def add(self, method: str, path: str, body: Any = None, status: int = 200, raw: str = None):
        self.routes[(method, path)] = FakeResponse(status, body, raw)

    def fail(self, method: str, path: str, exc: Exception = None):
        self.routes[(method, path)] = exc or requests.ConnectionError("connection refused")

    def __call__(self, method, url, timeout=None, **kwargs):
        assert url.startswith(party_api.API), url
        path = url[len(party_api.API):]
        self.calls.append((method, path, kwargs.get("json")))
        route = self.routes.get((method, path))
        if route is None:
            return FakeResponse(404, {"error": "not found"})
        if isinstance(route, Exception):
            raise route
        return route


@pytest.fixture
def fake_api(monkeypatch):
    api = FakeApi()
    monkeypatch.setattr(requests, "request", api)
    return api


@pytest.fixture
def seeded_api(fake_api):
    fake_api.add("GET", "/events", {"data": PARTIES})
    fake_api.add("GET", "/rsvps", {"data": RSVPS})
    fake_api.add("GET", "/guests", {"data": GUESTS})
    for p in PARTIES:
        fake_api.add("GET", f"/events/{p['id']}", {"data": p})
    return fake_api


@pytest.fixture
def state():
    return PlannerState()


class RenderCounter:
    def __init__(self):
        self.count = 0

    def __call__(self):
        self.count += 1


@pytest.fixture
def render():
    return RenderCounter()
