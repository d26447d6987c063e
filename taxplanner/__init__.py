"""BC 2025 incorporation planner: compare self-employment, salary and dividends."""
from __future__ import annotations

__version__ = "0.1.0"
