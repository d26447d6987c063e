from decimal import Decimal

import pytest
from pydantic import ValidationError

from taxplanner.config import Settings, get_settings
from taxplanner.core.solver import DEFAULT_SOLVER_OPTIONS


def test_solver_defaults_match_engine_defaults():
    assert Settings().solver_options() == DEFAULT_SOLVER_OPTIONS


def test_solver_settings_from_env(monkeypatch):
    monkeypatch.setenv("SOLVER_TOLERANCE", "0.5")
    monkeypatch.setenv("SOLVER_MAX_ITERATIONS", "0")
    monkeypatch.setenv("SOLVER_INITIAL_HIGH", "1000000")
    get_settings.cache_clear()
    options = get_settings().solver_options()
    assert options.tolerance == Decimal("0.5")
    assert options.max_iterations == 1
    assert options.initial_high == Decimal("1000000")


def test_invalid_tolerance_is_rejected(monkeypatch):
    monkeypatch.setenv("SOLVER_TOLERANCE", "0")
    with pytest.raises(ValidationError):
        Settings()


def test_telemetry_flag_parsing(monkeypatch):
    monkeypatch.setenv("LOG_TELEMETRY", "no")
    assert Settings().log_telemetry is False
    monkeypatch.setenv("LOG_TELEMETRY", "on")
    assert Settings().log_telemetry is True
