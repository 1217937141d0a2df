"""Candidate records as submitted through the intake form export."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_text(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return None
    return str(value)


class WorkExperience(BaseModel):
    """Single entry of a candidate's work history."""

    role_name: str | None = Field(default=None, alias="roleName")

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("role_name", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str | None:
        return _coerce_text(value)


class Candidate(BaseModel):
    """Open-ended candidate record.

    Only the fields used for scoring are declared. Anything else the intake
    form produced is kept in ``model_extra`` and otherwise ignored. Values of
    the wrong shape are coerced to an empty/neutral value instead of failing
    validation, so one odd record never rejects the whole upload.
    """

    name: str | None = None
    email: str | None = None
    location: str | None = None
    annual_salary_expectation: dict[str, Any] | None = None
    skills: list[str | None] = Field(default_factory=list)
    work_experiences: list[WorkExperience] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow", frozen=True)

    @field_validator("name", "email", "location", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str | None:
        return _coerce_text(value)

    @field_validator("annual_salary_expectation", mode="before")
    @classmethod
    def _salary_block(cls, value: Any) -> dict[str, Any] | None:
        return value if isinstance(value, dict) else None

    @field_validator("skills", mode="before")
    @classmethod
    def _skills(cls, value: Any) -> list[str | None]:
        if not isinstance(value, list):
            return []
        return [_coerce_text(item) for item in value]

    @field_validator("work_experiences", mode="before")
    @classmethod
    def _experiences(cls, value: Any) -> list[Any]:
        if not isinstance(value, list):
            return []
        return [item if isinstance(item, (dict, WorkExperience)) else {} for item in value]

    @property
    def extra_fields(self) -> dict[str, Any]:
        """Fields present on the record that scoring does not use."""
        return dict(self.model_extra or {})
