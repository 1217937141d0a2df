"""Core scoring and selection engine."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .categories import CATEGORY_PROFILES, TARGET_CATEGORIES, Category, CategoryProfile
from .matcher import CategoryMatcher
from .normalize import normalize_text
from .salary import parse_salary
from .scorer import CategoryScorer, EvaluationRow, ScoreBounds
from .selector import SelectionStep, TeamSelectionResult, TeamSelector, select_for_category
from .weights import DEFAULT_WEIGHTS, WeightConfig

__all__ = [
    "CATEGORY_PROFILES",
    "DEFAULT_WEIGHTS",
    "TARGET_CATEGORIES",
    "Category",
    "CategoryMatcher",
    "CategoryProfile",
    "CategoryScorer",
    "EvaluationRow",
    "ScoreBounds",
    "SelectionStep",
    "TeamSelectionResult",
    "TeamSelector",
    "WeightConfig",
    "normalize_text",
    "parse_salary",
    "select_for_category",
]
