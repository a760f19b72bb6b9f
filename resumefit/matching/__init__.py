"""Job match reporting."""

from resumefit.matching.models import (
    KeywordCoverage,
    MatchReport,
    RelevanceSummary,
    RoleMatch,
    SkillsMatch,
)
from resumefit.matching.reporter import MatchReporter

__all__ = [
    "KeywordCoverage",
    "MatchReport",
    "MatchReporter",
    "RelevanceSummary",
    "RoleMatch",
    "SkillsMatch",
]
