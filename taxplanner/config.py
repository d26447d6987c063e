from __future__ import annotations

import os
from decimal import Decimal
from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic import ConfigDict, field_validator

from taxplanner.core.solver import SolverOptions

ENV_BOOL_TRUE = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ENV_BOOL_TRUE


class Settings(BaseModel):
    solver_tolerance: Decimal = Field(default_factory=lambda: Decimal(os.getenv("SOLVER_TOLERANCE", "0.01")))
    solver_max_iterations: int = Field(default_factory=lambda: int(os.getenv("SOLVER_MAX_ITERATIONS", "100")))
    solver_max_expansions: int = Field(default_factory=lambda: int(os.getenv("SOLVER_MAX_EXPANSIONS", "20")))
    solver_initial_high: Decimal = Field(
        default_factory=lambda: Decimal(os.getenv("SOLVER_INITIAL_HIGH", "500000"))
    )
    log_dir: str = Field(default_factory=lambda: os.getenv("LOG_DIR", "logs"))
    log_telemetry: bool = Field(default_factory=lambda: _env_bool("LOG_TELEMETRY", True))
    build_version: str = Field(default_factory=lambda: os.getenv("BUILD_VERSION", "dev"))
    build_sha: str = Field(default_factory=lambda: os.getenv("BUILD_SHA", "local"))

    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator("solver_tolerance")
    @classmethod
    def _validate_tolerance(cls, value: Decimal) -> Decimal:
        if value <= 0:
            raise ValueError("SOLVER_TOLERANCE must be positive")
        return value

    @field_validator("solver_max_iterations")
    @classmethod
    def _validate_iterations(cls, value: int) -> int:
        return max(1, value)

    @field_validator("solver_max_expansions")
    @classmethod
    def _validate_expansions(cls, value: int) -> int:
        return max(0, value)

    @field_validator("solver_initial_high")
    @classmethod
    def _validate_initial_high(cls, value: Decimal) -> Decimal:
        if value <= 0:
            raise ValueError("SOLVER_INITIAL_HIGH must be positive")
        return value

    def solver_options(self) -> SolverOptions:
        return SolverOptions(
            tolerance=self.solver_tolerance,
            max_iterations=self.solver_max_iterations,
            max_expansions=self.solver_max_expansions,
            initial_high=self.solver_initial_high,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
