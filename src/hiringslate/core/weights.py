"""Scoring weight configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class WeightConfig:
    """Relative importance of experience, skills and salary.

    Any non-negative magnitudes are accepted; call :meth:`normalized` to get
    weights that sum to one.
    """

    experience: float = 0.45
    skills: float = 0.35
    salary: float = 0.20

    def __post_init__(self) -> None:
        for name in ("experience", "skills", "salary"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} weight must be non-negative, got {value!r}")

    @property
    def total(self) -> float:
        return self.experience + self.skills + self.salary

    def normalized(self) -> "WeightConfig":
        total = self.total
        if total <= 0:
            raise ValueError("weights must not all be zero")
        return WeightConfig(
            experience=self.experience / total,
            skills=self.skills / total,
            salary=self.salary / total,
        )

    def as_dict(self) -> dict[str, float]:
        return {
            "experience": self.experience,
            "skills": self.skills,
            "salary": self.salary,
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "WeightConfig":
        if not data:
            return cls()
        defaults = cls()
        return cls(
            experience=float(data.get("experience", defaults.experience)),
            skills=float(data.get("skills", defaults.skills)),
            salary=float(data.get("salary", defaults.salary)),
        )


DEFAULT_WEIGHTS = WeightConfig()
