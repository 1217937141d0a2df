"""Pydantic schema definitions for candidate input and app configuration."""

from __future__ import annotations

from .candidate import Candidate, WorkExperience
from .config import AppConfig, WeightsConfig, load_config

__all__ = [
    "AppConfig",
    "Candidate",
    "WeightsConfig",
    "WorkExperience",
    "load_config",
]
