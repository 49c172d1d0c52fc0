from __future__ import annotations

import logging

import pytest

from helperkit.config import DEFAULT_ENCODING, load_config

_ENV_KEYS = ("HELPERKIT_LOG_LEVEL", "HELPERKIT_ENCODING", "HELPERKIT_MASK_CHAR", "HELPERKIT_NO_COLOR")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    cfg = load_config()
    assert cfg.log_level == logging.WARNING
    assert cfg.encoding == "utf-8"
    assert cfg.mask_char == "X"
    assert cfg.no_color is False


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HELPERKIT_LOG_LEVEL", "debug")
    monkeypatch.setenv("HELPERKIT_ENCODING", "latin1")
    monkeypatch.setenv("HELPERKIT_MASK_CHAR", "*")
    monkeypatch.setenv("HELPERKIT_NO_COLOR", "yes")
    cfg = load_config()
    assert cfg.log_level == logging.DEBUG
    assert cfg.encoding == "iso8859-1"
    assert cfg.mask_char == "*"
    assert cfg.no_color is True


def test_invalid_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HELPERKIT_ENCODING", "no-such-codec")
    monkeypatch.setenv("HELPERKIT_MASK_CHAR", "**")
    monkeypatch.setenv("HELPERKIT_NO_COLOR", "maybe")
    cfg = load_config()
    assert cfg.encoding == DEFAULT_ENCODING
    assert cfg.mask_char == "X"
    assert cfg.no_color is False


def test_unknown_log_level_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HELPERKIT_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        load_config()
