"""Tests for settings loading and the per-user .env writer."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError
from rich.logging import RichHandler

from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.logger import get_logger


def test_defaults_without_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AQUAMONITOR_API_BASE_URL", raising=False)

    settings = AppSettings(_env_file=None)

    assert settings.api_base_url == "http://localhost:3000"
    assert settings.http_timeout_seconds == 20.0
    assert settings.log_level == "INFO"


def test_env_prefix_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AQUAMONITOR_API_BASE_URL", "https://aqua.example.com")
    monkeypatch.setenv("aquamonitor_http_timeout_seconds", "5")

    settings = AppSettings(_env_file=None)

    assert settings.api_base_url == "https://aqua.example.com"
    assert settings.http_timeout_seconds == 5.0


def test_env_file_is_read(tmp_path: Path) -> None:
    env = tmp_path / ".env"
    env.write_text("AQUAMONITOR_LOG_LEVEL=debug\n", encoding="utf-8")

    settings = AppSettings(_env_file=env)

    assert settings.log_level == "debug"


@pytest.mark.parametrize(
    "field, value",
    [("http_timeout_seconds", 0), ("log_level", "VERBOSE"), ("api_base_url", "x")],
)
def test_invalid_values_fail_fast(field: str, value: object) -> None:
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, **{field: value})


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="XDG layout")
def test_write_user_env_vars_merges(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    write_user_env_vars({"AQUAMONITOR_API_BASE_URL": "http://a.test"})
    path = write_user_env_vars({"AQUAMONITOR_LOG_LEVEL": "WARNING"})

    assert path == get_user_env_file() == tmp_path / "aquamonitor" / ".env"
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == [
        "# AquaMonitor user config (.env)",
        "AQUAMONITOR_API_BASE_URL=http://a.test",
        "AQUAMONITOR_LOG_LEVEL=WARNING",
    ]


def test_logger_is_configured_once() -> None:
    first = get_logger("loader", level="debug")
    second = get_logger("seed")

    root = logging.getLogger("aquamonitor")
    assert first.name == "aquamonitor.loader"
    assert second.parent is root
    assert root.level == logging.DEBUG
    assert sum(isinstance(h, RichHandler) for h in root.handlers) == 1
