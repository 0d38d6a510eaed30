import json
import sys
from pathlib import Path
from urllib.parse import urlparse

import pytest


# Ensure tests can import project packages regardless of how pytest is invoked.
ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

from app.shared_edits import AnonymityQueryEngine, MetadataApiClient, SharedSavedEdits  # noqa: E402


class FakeResponse:
    def __init__(self, status_code=200, text="", payload=None):
        self.status_code = status_code
        if payload is not None:
            text = json.dumps(payload)
        self.text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Routes requests by (method, path) to queued responses or exceptions."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, method, path, *responses):
        self.routes.setdefault((method, path), []).extend(responses)

    def request(self, method, url, **kwargs):
        path = urlparse(url).path
        self.calls.append((method, path, kwargs))
        queue = self.routes.get((method, path))
        if not queue:
            raise AssertionError(f"unexpected request {method} {path}")
        item = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(item, Exception):
            raise item
        return item

    def paths(self, method=None, prefix=""):
        return [p for m, p, _ in self.calls if (method is None or m == method) and p.startswith(prefix)]

    def close(self):
        pass


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def api_client(fake_session):
    return MetadataApiClient(base_url="https://edits.example", timeout_seconds=1, session=fake_session)


@pytest.fixture
def engine(api_client):
    return AnonymityQueryEngine(api_client, max_attempts=2)


@pytest.fixture
def shared_store(api_client, engine):
    return SharedSavedEdits(api_client, engine, platform="youtube")
