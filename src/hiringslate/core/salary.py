"""Salary expectation parsing."""

from __future__ import annotations

import math
import re
from typing import Any

from ..schemas import Candidate

FULL_TIME_KEY = "full-time"

_DISALLOWED = re.compile(r"[^\d.-]")
# Leading numeric prefix, the way a lenient float parser reads "100000-120000".
_LEADING_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def parse_salary(candidate: Candidate) -> int | None:
    """Return the full-time salary expectation in whole currency units.

    ``None`` means the candidate has no usable salary data: the entry is
    missing, its text holds no number, or the block could not be read.
    """
    try:
        block = candidate.annual_salary_expectation
        raw: Any = block.get(FULL_TIME_KEY) if block else None
    except (AttributeError, TypeError):
        return None
    if raw is None:
        return None
    return parse_amount(raw)


def parse_amount(raw: Any) -> int | None:
    """Parse a loosely formatted amount such as ``"$85,000"`` or ``92000.5``."""
    stripped = _DISALLOWED.sub("", str(raw))
    match = _LEADING_NUMBER.match(stripped)
    if match is None:
        return None
    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return math.floor(value + 0.5)
