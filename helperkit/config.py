"""Runtime configuration loaded from environment variables."""
from __future__ import annotations

from dataclasses import dataclass
import codecs
import logging
import os

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_ENCODING = "utf-8"
DEFAULT_MASK_CHAR = "X"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"", "0", "false", "no", "off"}


@dataclass(frozen=True)
class HelperkitConfig:
    log_level: int
    encoding: str
    mask_char: str
    no_color: bool


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    token = raw.strip().lower()
    if token in _TRUTHY:
        return True
    if token in _FALSY:
        return False
    return default


def _log_level(raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"HELPERKIT_LOG_LEVEL must be a logging level name, got: {raw!r}")
    return level


def _encoding(raw: str) -> str:
    try:
        return codecs.lookup(raw.strip()).name
    except LookupError:
        return DEFAULT_ENCODING


def load_config() -> HelperkitConfig:
    """Load config from environment with safe defaults."""
    mask_char = os.getenv("HELPERKIT_MASK_CHAR", DEFAULT_MASK_CHAR)
    if len(mask_char) != 1:
        mask_char = DEFAULT_MASK_CHAR
    return HelperkitConfig(
        log_level=_log_level(os.getenv("HELPERKIT_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
        encoding=_encoding(os.getenv("HELPERKIT_ENCODING", DEFAULT_ENCODING)),
        mask_char=mask_char,
        no_color=_env_flag("HELPERKIT_NO_COLOR", False),
    )
