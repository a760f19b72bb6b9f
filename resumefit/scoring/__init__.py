"""Relevance scoring and ranking.

Public API:
    - RelevanceScorer: scores experiences, projects and skills against a job
    - RelevanceMap: the resulting per-entry scores and overall match
    - rank / select_top: stable descending ordering by score
"""

from resumefit.scoring.models import RelevanceMap
from resumefit.scoring.ranking import rank, select_top
from resumefit.scoring.service import RelevanceScorer

__all__ = ["RelevanceMap", "RelevanceScorer", "rank", "select_top"]
