"""Job match report models."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from resumefit.analysis.models import RoleClassification

KeywordLocation = Literal["summary", "skills"]


class RoleMatch(BaseModel):
    inferred: RoleClassification
    alignment_score: Annotated[int, Field(ge=0, le=100)]


class KeywordCoverage(BaseModel):
    """Whether one job keyword made it into the resume, and where."""

    keyword: str
    found: bool
    locations: list[KeywordLocation] = Field(default_factory=list)
    importance: Literal["required", "preferred"]


class SkillsMatch(BaseModel):
    """Lower-cased skill overlap between profile and job."""

    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    extra: list[str] = Field(default_factory=list)


class RelevanceSummary(BaseModel):
    total: Annotated[int, Field(ge=0)] = 0
    included: Annotated[int, Field(ge=0)] = 0
    average_relevance: Annotated[int, Field(ge=0, le=100)] = 0


class MatchReport(BaseModel):
    """How well a generated resume covers the job's keywords and skills."""

    role_match: RoleMatch
    keyword_coverage: list[KeywordCoverage] = Field(default_factory=list)
    coverage_score: Annotated[int, Field(ge=0, le=100)] = 0
    skills_match: SkillsMatch = Field(default_factory=SkillsMatch)
    experience_relevance: RelevanceSummary = Field(default_factory=RelevanceSummary)
    project_relevance: RelevanceSummary = Field(default_factory=RelevanceSummary)
    suggestions: list[str] = Field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MatchReport:
        """Deserialize from dictionary."""
        return cls.model_validate(data)
