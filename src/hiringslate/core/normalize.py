"""Text canonicalisation shared by every keyword comparison."""

from __future__ import annotations


def normalize_text(value: str | None) -> str:
    """Return ``value`` trimmed and lowercased; ``None`` becomes ``""``."""
    return (value or "").strip().lower()
