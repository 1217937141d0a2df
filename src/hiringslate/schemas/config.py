"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator


class WeightsConfig(BaseModel):
    experience: float = Field(default=0.45, ge=0.0)
    skills: float = Field(default=0.35, ge=0.0)
    salary: float = Field(default=0.20, ge=0.0)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _not_all_zero(self) -> "WeightsConfig":
        if self.experience + self.skills + self.salary <= 0.0:
            raise ValueError("weights must not all be zero")
        return self


class AppConfig(BaseModel):
    weights: WeightsConfig = Field(default_factory=WeightsConfig)
    diversity: bool = True

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        return {
            "weights": self.weights.model_dump(),
            "diversity": self.diversity,
        }


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
