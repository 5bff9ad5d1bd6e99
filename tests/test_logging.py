"""Logging and configuration helpers."""
import logging
import os
from pathlib import Path

import pytest

from pricesurvey.core.logging import configure_logging, resolve_level
from pricesurvey.core.utils import get_bool_config, get_config_value, load_env_file, parse_env_line


def test_configure_logging_reads_level_from_environment(monkeypatch: pytest.MonkeyPatch):
    calls = {}
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    configure_logging()

    assert calls["level"] == "DEBUG"
    assert "%(name)s" in calls["format"]


def test_configure_logging_prefers_explicit_level(monkeypatch: pytest.MonkeyPatch):
    calls = {}
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    configure_logging("warning")

    assert calls["level"] == "WARNING"


def test_configure_logging_falls_back_on_unknown_level(monkeypatch: pytest.MonkeyPatch):
    calls = {}
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    configure_logging()

    assert calls["level"] == "INFO"


@pytest.mark.parametrize("raw, expected", [("warning", "WARNING"), (" Error ", "ERROR"), ("loud", "INFO"), (None, "INFO")])
def test_resolve_level(raw, expected):
    assert resolve_level(raw) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        ("LOG_LEVEL=DEBUG", ("LOG_LEVEL", "DEBUG")),
        (' PRICESURVEY_OUTPUT = "out.csv" ', ("PRICESURVEY_OUTPUT", "out.csv")),
        ("# LOG_LEVEL=DEBUG", None),
        ("", None),
        ("=value", None),
        ("no separator", None),
    ],
)
def test_parse_env_line(line, expected):
    assert parse_env_line(line) == expected


def test_load_env_file_does_not_override_existing(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    env_file = tmp_path / "settings.env"
    env_file.write_text(
        "# comment\nPRICESURVEY_OUTPUT='out/prices.csv'\nLOG_LEVEL=DEBUG\nnot a setting\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    load_env_file(env_file)

    assert os.environ["PRICESURVEY_OUTPUT"] == "out/prices.csv"
    assert os.environ["LOG_LEVEL"] == "ERROR"


def test_load_env_file_uses_configured_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    env_file = tmp_path / "custom.env"
    env_file.write_text("PRICESURVEY_DEDUPLICATE=yes\n", encoding="utf-8")
    monkeypatch.setenv("PRICESURVEY_ENV_FILE", str(env_file))

    load_env_file()

    assert get_bool_config("PRICESURVEY_DEDUPLICATE") is True


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("TRUE", True), ("on", True), ("0", False), ("no", False), ("", False)],
)
def test_get_bool_config(raw, expected, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("PRICESURVEY_DEDUPLICATE", raw)

    assert get_bool_config("PRICESURVEY_DEDUPLICATE") is expected


def test_get_config_value_falls_back_to_default(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("PRICESURVEY_OUTPUT", raising=False)

    assert get_config_value("PRICESURVEY_OUTPUT", "fallback.csv") == "fallback.csv"
