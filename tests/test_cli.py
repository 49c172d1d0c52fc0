from __future__ import annotations

import io

import pytest
from rich.console import Console

from helperkit.cli import main, parse_date


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("HELPERKIT_LOG_LEVEL", "HELPERKIT_ENCODING", "HELPERKIT_MASK_CHAR", "HELPERKIT_NO_COLOR"):
        monkeypatch.delenv(key, raising=False)


def _run(*argv: str) -> tuple[int, str]:
    buf = io.StringIO()
    console = Console(file=buf, no_color=True, width=200, highlight=False)
    code = main(list(argv), console=console)
    return code, buf.getvalue()


def test_words_command() -> None:
    assert _run("words", "999") == (0, "nine hundred and ninety-nine\n")
    assert _run("words", "-1234") == (0, "minus one thousand two hundred and thirty-four\n")


def test_ordinal_command() -> None:
    assert _run("ordinal", "22") == (0, "22nd\n")


def test_workdays_command() -> None:
    assert _run("workdays", "2016-08-13", "0") == (0, "2016-08-15 (Mon)\n")
    assert _run("workdays", "2016-08-01", "-3") == (0, "2016-07-27 (Wed)\n")


def test_workdays_bad_date_exits_with_error() -> None:
    code, out = _run("workdays", "2016-13-01", "1")
    assert code == 2
    assert "YYYY-MM-DD" in out


def test_text_commands(monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run("seo", "Fish & Chips") == (0, "fish-and-chips\n")
    assert _run("hex", "hello") == (0, "68656C6C6F\n")
    monkeypatch.setenv("HELPERKIT_MASK_CHAR", "*")
    assert _run("mask", "1234567890") == (0, "******7890\n")


def test_parse_date() -> None:
    assert str(parse_date(" 2016-08-01 ")) == "2016-08-01"
    with pytest.raises(ValueError):
        parse_date("2016/08/01")


def test_unknown_log_level_exits_with_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HELPERKIT_LOG_LEVEL", "chatty")
    code, out = _run("words", "5")
    assert code == 2
    assert "HELPERKIT_LOG_LEVEL" in out
