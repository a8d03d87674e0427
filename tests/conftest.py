"""Shared fixtures."""

import pytest

from g2o.config import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from G2O_* environment variables and cached settings."""
    for name in (
        "G2O_LOG_LEVEL",
        "G2O_CONFIG_PATH",
        "G2O_OLLAMA_BASE_URL",
        "G2O_OLLAMA_MODEL",
        "G2O_OLLAMA_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
