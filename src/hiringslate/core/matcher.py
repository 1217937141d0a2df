"""Keyword matching of candidates against a role profile."""

from __future__ import annotations

from typing import Iterable

from ..schemas import Candidate
from .normalize import normalize_text


class CategoryMatcher:
    """Count keyword hits in a candidate's work history and skills.

    The two counts deliberately differ: experience hits count matching
    *entries*, skill hits count matched *keywords*.
    """

    def experience_hits(self, candidate: Candidate, keywords: Iterable[str]) -> int:
        needles = [normalize_text(keyword) for keyword in keywords]
        hits = 0
        for entry in candidate.work_experiences:
            title = normalize_text(entry.role_name)
            if not title:
                continue
            if any(needle in title for needle in needles):
                hits += 1
        return hits

    def skill_hits(self, candidate: Candidate, keywords: Iterable[str]) -> int:
        skills = [normalize_text(skill) for skill in candidate.skills]
        skills = [skill for skill in skills if skill]
        hits = 0
        for keyword in keywords:
            needle = normalize_text(keyword)
            if any(skill == needle or needle in skill for skill in skills):
                hits += 1
        return hits
