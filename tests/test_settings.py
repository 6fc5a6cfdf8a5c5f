from __future__ import annotations

import logging

import pytest

from config.settings import get_settings
from utils.logging_setup import EXTRA_FIELDS, SafeExtraFormatter, _format_string


def test_defaults(monkeypatch):
    monkeypatch.delenv("UPLOAD_MAX_BYTES", raising=False)
    monkeypatch.delenv("OWNER_USER_ID", raising=False)
    get_settings.cache_clear()
    settings = get_settings()
    assert settings.upload_max_bytes == 5 * 1024 * 1024
    assert settings.owner_user_id == 1
    assert settings.demo is False
    assert settings.run_env == "test"


def test_demo_flag_parsing(monkeypatch):
    monkeypatch.setenv("DEMO", "yes")
    get_settings.cache_clear()
    assert get_settings().demo is True


def test_non_positive_upload_limit_rejected(monkeypatch):
    monkeypatch.setenv("UPLOAD_MAX_BYTES", "0")
    get_settings.cache_clear()
    with pytest.raises(RuntimeError):
        get_settings()


def test_formatter_fills_missing_extras():
    formatter = SafeExtraFormatter(fmt="%(message)s step=%(step)s duration_ms=%(duration_ms)s")
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "hello", None, None)
    assert formatter.format(record) == "hello step=- duration_ms=-"

    record = logging.LogRecord("t", logging.INFO, __file__, 1, "hello", None, None)
    record.step = "ExtractProfile"
    assert formatter.format(record) == "hello step=ExtractProfile duration_ms=-"


def test_log_format_renders_every_extra_field():
    formatter = SafeExtraFormatter(fmt=_format_string())
    record = logging.LogRecord("pipeline", logging.INFO, __file__, 1, "step done", None, None)
    record.owner_id = 1
    line = formatter.format(record)
    for key in EXTRA_FIELDS:
        assert f" {key}=" in line
    assert "owner_id=1" in line
    assert "error=-" in line
