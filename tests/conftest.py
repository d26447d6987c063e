import pathlib
import sys

import pytest

p = str(pathlib.Path(__file__).resolve().parents[1])
sys.path.insert(0, p) if p not in sys.path else None

from taxplanner.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    # Keep API tests from writing log files into the working tree.
    monkeypatch.setenv("LOG_TELEMETRY", "false")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
