#!/usr/bin/env python3
"""
Test configuration loading.
"""

import json

import pytest

from icndb.client import Scheme
from icndb.config import Config


def test_defaults():
    config = Config.load()
    assert config.scheme == "http"
    assert config.host == "api.icndb.com"
    assert config.transport_scheme() is Scheme.PLAIN


def test_json_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"scheme": "https", "unknown": 1}))

    config = Config.load(str(path))

    assert config.transport_scheme() is Scheme.ENCRYPTED
    assert not hasattr(config, "unknown")


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"host": "file.example"}))
    monkeypatch.setenv("ICNDB_CONFIG", str(path))
    monkeypatch.setenv("ICNDB_HOST", "env.example")

    assert Config.load().host == "env.example"


def test_missing_file_ignored(tmp_path):
    assert Config.load(str(tmp_path / "nope.json")).scheme == "http"


def test_unknown_scheme(monkeypatch):
    monkeypatch.setenv("ICNDB_SCHEME", "gopher")
    with pytest.raises(ValueError):
        Config.load()


def test_client_uses_config():
    config = Config(scheme="HTTPS", host="localhost:8080")
    with config.client() as client:
        assert client.scheme is Scheme.ENCRYPTED
        assert client.host == "localhost:8080"


@pytest.mark.parametrize("data", [
    {"scheme": 1},
    {"host": None},
    {"log_level": 10},
])
def test_non_string_values_rejected(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data))
    with pytest.raises(ValueError):
        Config.load(str(path))
