"""Job description analysis: requirement model, LLM analysis, regex fallbacks."""

from resumefit.analysis.models import (
    Domain,
    ImpactTheme,
    JobRequirementModel,
    RoleClassification,
    RoleType,
    SeniorityLevel,
    SkillCluster,
    YearsExperience,
)

__all__ = [
    "Domain",
    "ImpactTheme",
    "JobRequirementModel",
    "RoleClassification",
    "RoleType",
    "SeniorityLevel",
    "SkillCluster",
    "YearsExperience",
]
