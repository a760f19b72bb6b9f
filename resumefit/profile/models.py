"""Data models for a candidate's structured resume content."""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator, model_validator


def _new_id() -> str:
    return uuid4().hex


def _empty_if_none(value: Any) -> Any:
    return [] if value is None else value


def _as_label(value: Any) -> Any:
    # YAML turns 2023 into an int and 2023-05-01 into a date.
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _non_blank(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, list):
        return [item for item in value if not (isinstance(item, str) and not item.strip())]
    return value


class ContactInfo(BaseModel):
    """Contact block shown in the resume header."""

    full_name: str = Field(default="", description="Candidate full name")
    email: str = Field(default="", description="Contact email")
    phone: str | None = Field(default=None, description="Contact phone")
    location: str | None = Field(default=None, description="City / region")
    linkedin: str | None = Field(default=None, description="LinkedIn profile URL")
    portfolio: str | None = Field(default=None, description="Portfolio URL")
    github: str | None = Field(default=None, description="GitHub profile URL")


class Experience(BaseModel):
    """A work experience entry."""

    id: str = Field(default_factory=_new_id, description="Stable entry id")
    title: str = Field(default="", description="Job title")
    company: str = Field(default="", description="Employer")
    location: str | None = Field(default=None, description="Location")
    start_date: str = Field(default="", description="Start date label, e.g. 'May 2021'")
    end_date: str = Field(default="", description="End date label or 'Present'")
    bullets: list[str] = Field(default_factory=list, description="Achievement bullets")
    skills: list[str] = Field(default_factory=list, description="Skills used in the role")

    drop_blank_bullets = field_validator("bullets", mode="before")(_non_blank)
    coerce_none_lists = field_validator("skills", mode="before")(_empty_if_none)
    coerce_dates = field_validator("start_date", "end_date", mode="before")(_as_label)


class Project(BaseModel):
    """A project entry."""

    id: str = Field(default_factory=_new_id, description="Stable entry id")
    title: str = Field(default="", description="Project name")
    description: str | None = Field(default=None, description="One-line description")
    tech_stack: list[str] = Field(default_factory=list, description="Technologies used")
    link: str | None = Field(default=None, description="Public link")
    bullets: list[str] = Field(default_factory=list, description="Achievement bullets")

    drop_blank_bullets = field_validator("bullets", mode="before")(_non_blank)
    coerce_none_lists = field_validator("tech_stack", mode="before")(_empty_if_none)


class Education(BaseModel):
    """An education entry."""

    id: str = Field(default_factory=_new_id, description="Stable entry id")
    degree: str = Field(default="", description="Degree")
    institution: str = Field(default="", description="School")
    location: str | None = Field(default=None, description="Location")
    graduation_date: str = Field(default="", description="Graduation date label")
    gpa: str | None = Field(default=None, description="GPA")
    concentration: str | None = Field(default=None, description="Concentration / minor")
    awards: list[str] = Field(default_factory=list)
    relevant_coursework: list[str] = Field(default_factory=list)
    honors: list[str] = Field(default_factory=list)

    coerce_none_lists = field_validator(
        "awards", "relevant_coursework", "honors", mode="before"
    )(_empty_if_none)
    coerce_dates = field_validator("graduation_date", mode="before")(_as_label)


class SkillCategory(BaseModel):
    """A named group of skills, e.g. 'Languages'."""

    category: str = Field(default="General", description="Category label")
    skills: list[str] = Field(default_factory=list, description="Skill tokens")

    coerce_none_lists = field_validator("skills", mode="before")(_empty_if_none)


class Certification(BaseModel):
    """A certification entry."""

    id: str = Field(default_factory=_new_id, description="Stable entry id")
    name: str = Field(default="", description="Certification name")
    issuer: str = Field(default="", description="Issuing organization")
    date: str | None = Field(default=None, description="Date awarded")
    link: str | None = Field(default=None, description="Verification URL")

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date_label(cls, value: Any) -> Any:
        return value if value is None or isinstance(value, str) else str(value)


class ResumeProfile(BaseModel):
    """Everything the candidate has, before any tailoring.

    Missing collections load as empty lists so a sparse profile just yields a
    shorter resume.
    """

    contact: ContactInfo = Field(default_factory=ContactInfo)
    summary: str | None = Field(default=None, description="Existing summary")
    experiences: list[Experience] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[SkillCategory] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)
    awards: list[str] = Field(default_factory=list)
    raw_text: str | None = Field(default=None, description="Source text, if extracted")

    coerce_none_lists = field_validator(
        "experiences",
        "projects",
        "education",
        "skills",
        "certifications",
        "awards",
        mode="before",
    )(_empty_if_none)

    @field_validator("contact", mode="before")
    @classmethod
    def default_contact(cls, value: Any) -> Any:
        return {} if value is None else value

    @model_validator(mode="after")
    def check_unique_ids(self) -> ResumeProfile:
        """Entry ids key relevance scores and layout items, so they must not repeat."""
        seen: set[str] = set()
        for entry in [*self.experiences, *self.projects, *self.education, *self.certifications]:
            if entry.id in seen:
                raise ValueError(f"Duplicate entry id: {entry.id}")
            seen.add(entry.id)
        return self

    def skill_tokens(self) -> list[str]:
        """Flatten skill categories, dropping blanks and case-insensitive repeats."""
        return flatten_skills(self.skills)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResumeProfile:
        """Deserialize from dictionary."""
        return cls.model_validate(data)


def flatten_skills(categories: list[SkillCategory]) -> list[str]:
    seen: set[str] = set()
    tokens: list[str] = []
    for category in categories:
        for skill in category.skills:
            token = skill.strip()
            if token and token.lower() not in seen:
                seen.add(token.lower())
                tokens.append(token)
    return tokens
