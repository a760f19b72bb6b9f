"""Models shared by the resume exporters."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class SectionKind(str, Enum):
    """Renderable resume sections."""

    SUMMARY = "summary"
    EDUCATION = "education"
    EXPERIENCE = "experience"
    PROJECTS = "projects"
    SKILLS = "skills"
    CERTIFICATIONS = "certifications"


DEFAULT_SECTION_ORDER: tuple[SectionKind, ...] = (
    SectionKind.SUMMARY,
    SectionKind.EDUCATION,
    SectionKind.EXPERIENCE,
    SectionKind.PROJECTS,
    SectionKind.SKILLS,
    SectionKind.CERTIFICATIONS,
)


class ExportFormat(str, Enum):
    """Output formats a caller may request.

    Only ``txt`` and ``json`` are produced here; typeset formats belong to an
    external renderer.
    """

    PDF = "pdf"
    DOCX = "docx"
    LATEX = "latex"
    TXT = "txt"
    JSON = "json"


class ExportResult(BaseModel):
    """A rendered document and where it was written, if anywhere."""

    format: ExportFormat = Field(..., description="Format that was produced")
    file_name: str = Field(..., description="Suggested file name")
    mime_type: str = Field(..., description="MIME type of the content")
    content: str = Field(..., description="Rendered document text")
    path: Path | None = Field(default=None, description="Written file, if saved")
