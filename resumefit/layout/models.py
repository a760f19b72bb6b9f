"""Layout plan models: what goes on the page and how many lines it takes."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, model_validator

SummaryLength = Literal["short", "medium", "long"]


class SectionType(str, Enum):
    HEADER = "header"
    SUMMARY = "summary"
    SKILLS = "skills"
    EXPERIENCE = "experience"
    PROJECTS = "projects"
    EDUCATION = "education"


class CompressionLevel(str, Enum):
    """How hard a renderer has to squeeze to fit the plan on the page budget."""

    NONE = "none"
    LIGHT = "light"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


class IncludeSections(BaseModel):
    summary: bool = False
    skills: bool = True
    experience: bool = True
    projects: bool = True
    education: bool = True
    certifications: bool = True
    publications: bool = False
    awards: bool = False


class ResumeConfig(BaseModel):
    """What the caller wants on the page."""

    page_count: Literal[1, 2] = Field(default=1, description="Page budget")
    include_sections: IncludeSections = Field(default_factory=IncludeSections)
    max_bullets_per_experience: Annotated[int, Field(ge=0)] = Field(default=4)
    max_projects: Annotated[int, Field(ge=0)] = Field(default=3)
    summary_length: SummaryLength = Field(default="short")


class LayoutItem(BaseModel):
    """An admitted entry and how many of its bullets to render."""

    id: str
    bullet_count: Annotated[int, Field(ge=0)]


class LayoutSection(BaseModel):
    type: SectionType
    allocated_lines: Annotated[int, Field(ge=0)]
    items: list[LayoutItem] | None = None


class LayoutPlan(BaseModel):
    """Ordered sections with their line allocations.

    ``total_lines`` is what the plan actually uses, which can exceed the page
    budget; ``compression_level`` says by how much.
    """

    page_count: Literal[1, 2]
    sections: list[LayoutSection] = Field(default_factory=list)
    total_lines: Annotated[int, Field(ge=0)] = 0
    compression_level: CompressionLevel = CompressionLevel.NONE

    @model_validator(mode="after")
    def check_unique_items(self) -> LayoutPlan:
        seen: set[str] = set()
        for section in self.sections:
            for item in section.items or []:
                if item.id in seen:
                    raise ValueError(f"Entry {item.id} appears more than once in the layout")
                seen.add(item.id)
        return self

    def section(self, section_type: SectionType) -> LayoutSection | None:
        return next((s for s in self.sections if s.type == section_type), None)

    def items_for(self, section_type: SectionType) -> dict[str, LayoutItem]:
        """Admitted items of a section keyed by id; empty if the section is absent."""
        section = self.section(section_type)
        if section is None or not section.items:
            return {}
        return {item.id: item for item in section.items}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LayoutPlan:
        """Deserialize from dictionary."""
        return cls.model_validate(data)
