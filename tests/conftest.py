"""
Shared fixtures: an ApiClient wired to an in-memory httpx transport.
"""

import json

import httpx
import pytest

from icndb.client import ApiClient, Scheme


def envelope(joke_id=1, joke="Chuck Norris counted to infinity. Twice.", categories=None):
    return json.dumps({
        "type": "success",
        "value": {
            "id": joke_id,
            "joke": joke,
            "categories": categories if categories is not None else [],
        },
    })


class Recorder:
    """Records requests and answers them with a fixed handler."""

    def __init__(self, handler):
        self.handler = handler
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def make_client():
    clients = []

    def _make(handler, scheme=Scheme.PLAIN):
        recorder = Recorder(handler)
        http_client = httpx.Client(transport=httpx.MockTransport(recorder))
        client = ApiClient(scheme=scheme, http_client=http_client)
        clients.append(http_client)
        return client, recorder

    yield _make

    for c in clients:
        c.close()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("ICNDB_SCHEME", "ICNDB_HOST", "ICNDB_LOG_LEVEL", "ICNDB_CONFIG"):
        monkeypatch.delenv(key, raising=False)
