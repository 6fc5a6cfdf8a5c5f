from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'pipelines.steps.extract_profile'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch, tmp_path):
    # Each test gets its own DB and re-reads the environment
    from config.settings import get_settings

    monkeypatch.setenv("DB_PATH", str(tmp_path / "career.db"))
    monkeypatch.delenv("DEMO", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
