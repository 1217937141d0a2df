"""Greedy one-pick-per-category slate selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

import structlog

from ..schemas import Candidate
from .categories import TARGET_CATEGORIES, Category
from .scorer import CategoryScorer, EvaluationRow
from .weights import WeightConfig

# A nudged pick must score at least this fraction of the top candidate.
DIVERSITY_SCORE_RATIO = 0.98


@dataclass(frozen=True, slots=True)
class SelectionStep:
    """Outcome of picking for one category."""

    pick: EvaluationRow | None
    location_counts: Mapping[str, int]
    nudged: bool = False


@dataclass(frozen=True, slots=True)
class TeamSelectionResult:
    """Selected slate plus the full ranking for every category."""

    selected: tuple[EvaluationRow, ...]
    by_category: Mapping[Category, tuple[EvaluationRow, ...]]
    nudged_categories: tuple[Category, ...] = ()

    @property
    def open_categories(self) -> tuple[Category, ...]:
        filled = {row.category for row in self.selected}
        return tuple(category for category in self.by_category if category not in filled)


def select_for_category(
    ranking: Sequence[EvaluationRow],
    location_counts: Mapping[str, int],
    diversity: bool,
) -> SelectionStep:
    """Pick a row from ``ranking`` given the locations chosen so far.

    ``location_counts`` is not modified; the returned step carries the updated
    counts for the next category.
    """
    if not ranking:
        return SelectionStep(pick=None, location_counts=dict(location_counts))

    pick = ranking[0]
    nudged = False

    if diversity and len(ranking) > 1:
        current_count = location_counts.get(pick.location, 0)
        for row in ranking:
            if (
                row.score >= pick.score * DIVERSITY_SCORE_RATIO
                and row.location != pick.location
                and location_counts.get(row.location, 0) <= current_count
            ):
                pick = row
                nudged = True
                break

    counts = dict(location_counts)
    counts[pick.location] = counts.get(pick.location, 0) + 1
    return SelectionStep(pick=pick, location_counts=counts, nudged=nudged)


class TeamSelector:
    """Score each category independently, then walk categories picking greedily."""

    def __init__(
        self,
        *,
        scorer: CategoryScorer | None = None,
        categories: Sequence[Category] = TARGET_CATEGORIES,
    ) -> None:
        self._scorer = scorer or CategoryScorer()
        self._categories = tuple(categories)
        self._logger = structlog.get_logger(__name__)

    def select(
        self,
        candidates: Sequence[Candidate],
        weights: WeightConfig,
        diversity: bool = True,
    ) -> TeamSelectionResult:
        normalized = weights.normalized()
        by_category: dict[Category, tuple[EvaluationRow, ...]] = {
            category: tuple(self._scorer.score(candidates, category, normalized))
            for category in self._categories
        }

        selected: list[EvaluationRow] = []
        nudged_categories: list[Category] = []
        location_counts: Mapping[str, int] = {}

        for category in self._categories:
            step = select_for_category(by_category[category], location_counts, diversity)
            location_counts = step.location_counts
            if step.pick is None:
                continue
            selected.append(step.pick)
            if step.nudged:
                nudged_categories.append(category)
                self._logger.info(
                    "selection.diversity_nudge",
                    category=category,
                    top_candidate=by_category[category][0].name,
                    picked=step.pick.name,
                    location=step.pick.location,
                )
            self._logger.debug(
                "selection.pick",
                category=category,
                name=step.pick.name,
                score=step.pick.score,
            )

        return TeamSelectionResult(
            selected=tuple(selected),
            by_category=by_category,
            nudged_categories=tuple(nudged_categories),
        )
