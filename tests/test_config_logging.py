import logging

import pytest

from yuque_client.config import DEFAULT_TIMEOUT, load_settings
from yuque_client.errors import ConfigError
from yuque_client.logging_config import setup_logging


def test_load_settings(monkeypatch):
    monkeypatch.setenv("YUQUE_TOKEN", "abc123")
    monkeypatch.delenv("YUQUE_SPACE", raising=False)
    monkeypatch.delenv("YUQUE_TIMEOUT", raising=False)
    s = load_settings()
    assert s.token == "abc123"
    assert s.space is None
    assert s.timeout == DEFAULT_TIMEOUT

    # empty token environment
    monkeypatch.setenv("YUQUE_TOKEN", "")
    s2 = load_settings()
    assert s2.token == ""


def test_load_settings_space_and_timeout(monkeypatch):
    monkeypatch.setenv("YUQUE_TOKEN", "abc123")
    monkeypatch.setenv("YUQUE_SPACE", " acme ")
    monkeypatch.setenv("YUQUE_TIMEOUT", "2.5")
    s = load_settings()
    assert s.space == "acme"
    assert s.timeout == 2.5


def test_setup_logging_idempotent():
    logger1 = setup_logging(logging.DEBUG)
    logger2 = setup_logging(logging.DEBUG)
    assert logger1 is logger2
    assert logger1.name == "yuque_client"
    assert logger1.handlers  # at least one handler installed
    assert logging.getLogger("httpx").level == logging.WARNING


@pytest.mark.parametrize("raw", ["ten", "0", "-3"])
def test_load_settings_bad_timeout(monkeypatch, raw):
    monkeypatch.setenv("YUQUE_TIMEOUT", raw)
    with pytest.raises(ConfigError):
        load_settings()
