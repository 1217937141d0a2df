"""Tabular and JSON renderings of a selection result."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Sequence

from .core import EvaluationRow, TeamSelectionResult

# Top candidates per role shown alongside the slate.
SHORTLIST_SIZE = 3

CSV_HEADERS: tuple[str, ...] = (
    "Category",
    "Name",
    "Email",
    "Location",
    "SalaryUSD",
    "ExperienceHits",
    "SkillHits",
    "Score",
)


def _escape(value: str) -> str:
    if "," in value or '"' in value or "\n" in value:
        return '"' + value.replace('"', '""') + '"'
    return value


def format_score(score: float) -> str:
    """Three decimals, rounding exact ties up."""
    return str(Decimal(score).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP))


def _csv_cells(row: EvaluationRow) -> list[str]:
    return [
        row.category,
        row.name,
        row.email,
        row.location,
        "" if row.salary is None else str(row.salary),
        str(row.experience_hits),
        str(row.skill_hits),
        format_score(row.score),
    ]


def to_csv(rows: Iterable[EvaluationRow]) -> str:
    """Render rows in slate order; lines are joined by ``\\n`` with no trailer."""
    lines = [",".join(_escape(header) for header in CSV_HEADERS)]
    lines.extend(",".join(_escape(cell) for cell in _csv_cells(row)) for row in rows)
    return "\n".join(lines)


def format_currency(amount: int | float | None) -> str:
    """Whole-dollar USD display, ``N/A`` when there is no amount."""
    if amount is None:
        return "N/A"
    rounded = round(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,}"


def total_cost(rows: Sequence[EvaluationRow]) -> int:
    """Sum of selected salaries; rows without salary data add nothing."""
    return sum(row.salary or 0 for row in rows)


def serialize_row(row: EvaluationRow) -> dict[str, Any]:
    return {
        "index": row.index,
        "category": row.category,
        "name": row.name,
        "email": row.email,
        "location": row.location,
        "salary": row.salary,
        "experience_hits": row.experience_hits,
        "skill_hits": row.skill_hits,
        "score": row.score,
    }


def summarize(result: TeamSelectionResult) -> dict[str, Any]:
    cost = total_cost(result.selected)
    return {
        "total_cost": cost,
        "total_cost_display": format_currency(cost),
        "filled": [row.category for row in result.selected],
        "open": list(result.open_categories),
        "nudged": list(result.nudged_categories),
        "shortlist": {
            category: [row.name for row in rows[:SHORTLIST_SIZE]]
            for category, rows in result.by_category.items()
        },
    }


def serialize_result(result: TeamSelectionResult) -> dict[str, Any]:
    return {
        "selected": [serialize_row(row) for row in result.selected],
        "by_category": {
            category: [serialize_row(row) for row in rows]
            for category, rows in result.by_category.items()
        },
        "summary": summarize(result),
    }
