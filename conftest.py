"""Pytest configuration: ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep a developer's .env or shell settings out of the suite."""
    monkeypatch.delenv("AMOUNT_TRANSLATOR_LOG_LEVEL", raising=False)
    monkeypatch.delenv("AMOUNT_TRANSLATOR_MAX_BATCH", raising=False)
    monkeypatch.setattr("amount_translator.config.load_dotenv", lambda: False)
    yield
