"""Shared fixtures: a fake HTTP session so nothing leaves the process."""

from __future__ import annotations

import json

import pytest
import requests

from suburb_explorer import Config


class FakeResponse:
    def __init__(self, body="", status=200, content_type="application/json"):
        self.text = body if isinstance(body, str) else json.dumps(body)
        self.content = self.text.encode()
        self.status_code = status
        self.headers = {"Content-Type": content_type}


class FakeSession:
    """Records every GET and answers with a canned response or exception."""

    def __init__(self, reply):
        self.reply = reply
        self.calls: list[tuple[str, dict]] = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply


@pytest.fixture
def config() -> Config:
    return Config(proxy_base="https://proxy.test/", path_prefix="suburb", use_proxy=True)


@pytest.fixture
def fake_session():
    def make(reply) -> FakeSession:
        return FakeSession(reply)

    return make


@pytest.fixture
def client(config):
    """Flask test client bound to the test config."""

    import app as app_module

    app_module.app.config["EXPLORER"] = config
    app_module.app.config["TESTING"] = True
    return app_module.app.test_client()


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")
