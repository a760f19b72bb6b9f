"""Ranking and selection of scored profile entries."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol, TypeVar


class _HasId(Protocol):
    id: str


E = TypeVar("E", bound=_HasId)


def rank(entries: Sequence[E], scores: Mapping[str, float]) -> list[E]:
    """Return a new list sorted by descending score.

    Entries without a score count as 0. The sort is stable, so equal scores
    keep their input order.
    """
    return sorted(entries, key=lambda entry: -scores.get(entry.id, 0.0))


def select_top(
    entries: Sequence[E], max_count: int, scores: Mapping[str, float]
) -> list[E]:
    """The ``max_count`` highest-ranked entries; a count of zero or less selects none."""
    if max_count <= 0:
        return []
    return rank(entries, scores)[:max_count]
