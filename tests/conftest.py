# tests/conftest.py
import json
import sys
from pathlib import Path

import pytest
import requests

# add src/ to sys.path so tests run without installing the package
src_root = Path(__file__).resolve().parents[1] / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from geokit.core.config import settings  # noqa: E402


class FakeResponse:
    """Stands in for requests.Response."""

    def __init__(self, payload=None, status_code=200, text=None):
        self.payload = payload
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        return json.loads(self.text)


class FakeGet:
    """Replaces requests.get, recording calls and replaying one response."""

    def __init__(self):
        self.calls = []
        self.response = FakeResponse({})
        self.exc = None

    def __call__(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    monkeypatch.setattr(settings, "nominatim_delay", 0.0)
    monkeypatch.setattr(settings, "nominatim_url", "https://nominatim.test")
    monkeypatch.setattr(settings, "google_api_key", "")
    monkeypatch.setattr(settings, "ipstack_api_key", "")
    monkeypatch.setattr(settings, "rapidapi_key", "")
    monkeypatch.setattr(settings, "user_agent", "geokit-tests/1.0")
    yield settings


@pytest.fixture
def fake_get(monkeypatch):
    fg = FakeGet()
    monkeypatch.setattr(requests, "get", fg)
    return fg


@pytest.fixture
def make_response():
    return FakeResponse
