"""Shared fixtures for runway-core tests."""

import os

import pytest
import structlog


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep RUNWAY_* variables and any .env file out of every test."""
    for key in list(os.environ):
        if key.startswith("RUNWAY_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    structlog.reset_defaults()
