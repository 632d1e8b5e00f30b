"""Utility helpers for string normalization and field fallback."""

from __future__ import annotations

import re
from typing import Iterable

from unidecode import unidecode

SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


def slugify(value: str, fallback: str = "") -> str:
    """Generate a filesystem-friendly slug using ASCII characters only.

    Non-Latin scripts are transliterated first, so ``"Война и мир"`` still
    yields a usable slug.
    """
    normalized = unidecode(value)
    normalized = normalized.lower()
    normalized = SLUG_PATTERN.sub("-", normalized).strip("-")
    return normalized or fallback


def first_non_empty(candidates: Iterable[str]) -> str:
    """Return the first non-empty candidate, in priority order."""
    for candidate in candidates:
        if candidate:
            return candidate
    return ""
