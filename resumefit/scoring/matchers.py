"""Keyword matching helpers shared by scoring, rewriting and reporting.

Matching is deliberately plain: lower-cased substring containment, no
stemming or fuzzy matching.
"""

from __future__ import annotations

import math
from collections.abc import Iterable


def normalize_keyword(keyword: str) -> str:
    """Lower-case and trim a keyword for comparison."""
    return keyword.strip().lower()


def contains_keyword(text: str, keyword: str) -> bool:
    """True if ``keyword`` occurs in ``text`` ignoring case. Blank keywords never match."""
    needle = normalize_keyword(keyword)
    return bool(needle) and needle in text.lower()


def count_found(text: str, keywords: Iterable[str]) -> int:
    """Number of distinct non-blank keywords present in ``text``."""
    haystack = text.lower()
    needles = {normalize_keyword(keyword) for keyword in keywords}
    needles.discard("")
    return sum(1 for needle in needles if needle in haystack)


def keywords_in(text: str, keywords: Iterable[str]) -> list[str]:
    """Keywords found in ``text``, in input order, without case-insensitive repeats."""
    haystack = text.lower()
    seen: set[str] = set()
    found: list[str] = []
    for keyword in keywords:
        needle = normalize_keyword(keyword)
        if needle and needle not in seen and needle in haystack:
            seen.add(needle)
            found.append(keyword)
    return found


def unique_ci(values: Iterable[str]) -> list[str]:
    """Lower-cased, de-duplicated, order-preserving copy of ``values``."""
    seen: dict[str, None] = {}
    for value in values:
        token = normalize_keyword(value)
        if token:
            seen.setdefault(token, None)
    return list(seen)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (``round`` uses banker's rounding)."""
    return int(math.floor(value + 0.5))
