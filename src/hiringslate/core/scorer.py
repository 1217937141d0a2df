"""Per-category candidate scoring and ranking."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Mapping, Sequence

import structlog

from ..schemas import Candidate
from .categories import CATEGORY_PROFILES, Category, CategoryProfile
from .matcher import CategoryMatcher
from .salary import parse_salary
from .weights import WeightConfig

NO_SALARY_SCORE = 0.5


@dataclass(frozen=True, slots=True)
class EvaluationRow:
    """One candidate scored against one category."""

    index: int
    category: Category
    name: str
    email: str
    location: str
    salary: int | None
    experience_hits: int
    skill_hits: int
    score: float
    raw: Candidate


@dataclass(frozen=True, slots=True)
class ScoreBounds:
    """Normalisation bounds observed across one category's survivors."""

    max_experience_hits: int
    max_skill_hits: int
    min_salary: int
    max_salary: int

    @property
    def salary_range(self) -> int:
        return max(1, self.max_salary - self.min_salary)

    @classmethod
    def from_rows(cls, rows: Sequence[EvaluationRow]) -> "ScoreBounds":
        salaries = [row.salary for row in rows if row.salary is not None]
        return cls(
            max_experience_hits=max([1, *(row.experience_hits for row in rows)]),
            max_skill_hits=max([1, *(row.skill_hits for row in rows)]),
            min_salary=min(salaries) if salaries else 0,
            max_salary=max(salaries) if salaries else 1,
        )

    def salary_score(self, salary: int | None) -> float:
        if salary is None:
            return NO_SALARY_SCORE
        return 1 - (salary - self.min_salary) / self.salary_range


def resolve_display_name(candidate: Candidate, index: int) -> str:
    """Name, else the local part of the email, else a positional placeholder."""
    if candidate.name:
        return candidate.name
    local_part = (candidate.email or "").split("@")[0]
    if local_part:
        return local_part
    return f"Candidate_{index + 1}"


def ranking_key(row: EvaluationRow) -> tuple[float, float, int]:
    """Score descending, then cheaper salary (missing last), then more skills."""
    salary = math.inf if row.salary is None else row.salary
    return (-row.score, salary, -row.skill_hits)


class CategoryScorer:
    """Rank every candidate with relevant experience for a single category."""

    def __init__(
        self,
        *,
        matcher: CategoryMatcher | None = None,
        profiles: Mapping[Category, CategoryProfile] | None = None,
    ) -> None:
        self._matcher = matcher or CategoryMatcher()
        self._profiles = dict(profiles or CATEGORY_PROFILES)
        self._logger = structlog.get_logger(__name__)

    def score(
        self,
        candidates: Sequence[Candidate],
        category: Category,
        weights: WeightConfig,
    ) -> list[EvaluationRow]:
        profile = self._profiles[category]
        normalized = weights.normalized()

        rows: list[EvaluationRow] = []
        for index, candidate in enumerate(candidates):
            try:
                row = self._evaluate(candidate, index, category, profile)
            except Exception as exc:  # noqa: BLE001
                self._logger.warning(
                    "scoring.candidate_skipped",
                    category=category,
                    index=index,
                    error=str(exc),
                )
                continue
            if row is not None:
                rows.append(row)

        if not rows:
            self._logger.debug("scoring.category_empty", category=category)
            return []

        bounds = ScoreBounds.from_rows(rows)
        scored = [
            replace(row, score=self._weighted_score(row, bounds, normalized))
            for row in rows
        ]
        scored.sort(key=ranking_key)

        self._logger.debug(
            "scoring.category_ranked",
            category=category,
            ranked=len(scored),
            top_score=scored[0].score,
        )
        return scored

    def _evaluate(
        self,
        candidate: Candidate,
        index: int,
        category: Category,
        profile: CategoryProfile,
    ) -> EvaluationRow | None:
        experience_hits = self._matcher.experience_hits(candidate, profile.role_keywords)
        if experience_hits == 0:
            return None

        return EvaluationRow(
            index=index,
            category=category,
            name=resolve_display_name(candidate, index),
            email=candidate.email or "",
            location=candidate.location or "",
            salary=parse_salary(candidate),
            experience_hits=experience_hits,
            skill_hits=self._matcher.skill_hits(candidate, profile.skill_keywords),
            score=0.0,
            raw=candidate,
        )

    @staticmethod
    def _weighted_score(
        row: EvaluationRow,
        bounds: ScoreBounds,
        weights: WeightConfig,
    ) -> float:
        experience_score = row.experience_hits / bounds.max_experience_hits
        skills_score = row.skill_hits / bounds.max_skill_hits
        salary_score = bounds.salary_score(row.salary)
        return (
            weights.experience * experience_score
            + weights.skills * skills_score
            + weights.salary * salary_score
        )
