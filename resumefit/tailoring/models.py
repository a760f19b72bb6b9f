"""Data models for the tailoring pipeline.

Contains Pydantic models for:
- BulletRewrite: one rewritten bullet and what it now contains
- GeneratedExperience / GeneratedProject: a profile entry plus its tailoring
- GeneratedResume: the assembled result handed to renderers
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, Field, field_validator

from resumefit.compliance.models import ComplianceReport
from resumefit.layout.models import LayoutPlan
from resumefit.matching.models import MatchReport
from resumefit.profile.models import (
    Certification,
    ContactInfo,
    Education,
    Experience,
    Project,
    SkillCategory,
    flatten_skills,
)


class BulletRewrite(BaseModel):
    """A bullet before and after rewriting."""

    original: str = Field(..., description="Bullet as written in the profile")
    rewritten: str = Field(..., min_length=1, description="Bullet to render")
    keywords_included: list[str] = Field(
        default_factory=list, description="Job keywords present in the rewrite"
    )
    has_metric: bool = Field(default=False, description="Rewrite contains a number")

    @field_validator("rewritten", mode="before")
    @classmethod
    def strip_rewritten(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v


class GeneratedExperience(Experience):
    """An experience entry with its relevance and rewritten bullets."""

    relevance_score: Annotated[float, Field(ge=0.0, le=100.0)] = 0.0
    rewritten_bullets: list[BulletRewrite] = Field(default_factory=list)
    included_in_resume: bool = False


class GeneratedProject(Project):
    """A project entry with its relevance and rewritten bullets."""

    relevance_score: Annotated[float, Field(ge=0.0, le=100.0)] = 0.0
    rewritten_bullets: list[BulletRewrite] = Field(default_factory=list)
    included_in_resume: bool = False


class GeneratedResume(BaseModel):
    """Complete tailored resume ready for checking and rendering."""

    contact: ContactInfo = Field(default_factory=ContactInfo)
    summary: str | None = Field(default=None, description="Tailored summary")
    experiences: list[GeneratedExperience] = Field(default_factory=list)
    projects: list[GeneratedProject] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[SkillCategory] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)
    layout_plan: LayoutPlan | None = None
    compliance_report: ComplianceReport | None = None
    match_report: MatchReport | None = None

    def included_experiences(self) -> list[GeneratedExperience]:
        return [exp for exp in self.experiences if exp.included_in_resume]

    def included_projects(self) -> list[GeneratedProject]:
        return [proj for proj in self.projects if proj.included_in_resume]

    def included_bullets(self) -> list[BulletRewrite]:
        """Rewritten bullets of included experiences, then included projects."""
        return [
            *(b for exp in self.included_experiences() for b in exp.rewritten_bullets),
            *(b for proj in self.included_projects() for b in proj.rewritten_bullets),
        ]

    def skill_tokens(self) -> list[str]:
        return flatten_skills(self.skills)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GeneratedResume:
        """Deserialize from dictionary."""
        return cls.model_validate(data)
