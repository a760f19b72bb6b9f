"""Resume exporters.

Renders a GeneratedResume as plain text (Jinja2 template) or JSON. Typeset
formats (PDF, DOCX, LaTeX) belong to an external renderer and are rejected.
"""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader, select_autoescape

from resumefit.rendering.models import (
    DEFAULT_SECTION_ORDER,
    ExportFormat,
    ExportResult,
    SectionKind,
)

if TYPE_CHECKING:
    from resumefit.profile.models import Certification
    from resumefit.tailoring.models import GeneratedResume

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEXT_TEMPLATE = "resume.txt.j2"

_EXTENSIONS = {ExportFormat.TXT: ".txt", ExportFormat.JSON: ".json"}
_MIME_TYPES = {ExportFormat.TXT: "text/plain", ExportFormat.JSON: "application/json"}


class UnsupportedExportFormatError(ValueError):
    """Raised when a caller asks for a format this exporter cannot produce."""

    def __init__(self, format_name: str):
        super().__init__(f"Unsupported format: {format_name}")
        self.format_name = format_name


class ResumeExporter:
    """Exports generated resumes to text or JSON."""

    def __init__(self, template_dir: Path | None = None):
        self.jinja_env = Environment(
            loader=FileSystemLoader(str(template_dir or TEMPLATE_DIR)),
            autoescape=select_autoescape(["html", "xml"], default_for_string=False),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.jinja_env.filters["cert_label"] = _cert_label

    def render_text(
        self,
        resume: GeneratedResume,
        section_order: Sequence[SectionKind | str] = DEFAULT_SECTION_ORDER,
    ) -> str:
        """Plain-text resume with sections in ``section_order``.

        Sections with nothing to show are skipped; unknown names are ignored.
        """
        order = _section_values(section_order)
        template = self.jinja_env.get_template(TEXT_TEMPLATE)
        text = template.render(
            resume=resume,
            experiences=resume.included_experiences(),
            projects=resume.included_projects(),
            section_order=order,
        )
        return text.rstrip() + "\n"

    def render_json(self, resume: GeneratedResume) -> str:
        return json.dumps(resume.to_dict(), indent=2)

    def export(
        self,
        resume: GeneratedResume,
        format: ExportFormat | str,
        file_name: str | None = None,
        section_order: Sequence[SectionKind | str] | None = None,
    ) -> ExportResult:
        """Render ``resume`` in ``format``.

        Raises:
            UnsupportedExportFormatError: ``format`` is unknown or is a typeset
                format produced elsewhere.
        """
        try:
            export_format = ExportFormat(format)
        except ValueError as e:
            raise UnsupportedExportFormatError(str(format)) from e

        if export_format == ExportFormat.TXT:
            content = self.render_text(resume, section_order or DEFAULT_SECTION_ORDER)
        elif export_format == ExportFormat.JSON:
            content = self.render_json(resume)
        else:
            raise UnsupportedExportFormatError(export_format.value)

        base_name = file_name or f"resume-{int(time.time() * 1000)}"
        return ExportResult(
            format=export_format,
            file_name=f"{base_name}{_EXTENSIONS[export_format]}",
            mime_type=_MIME_TYPES[export_format],
            content=content,
        )

    def save(self, result: ExportResult, output_dir: Path) -> ExportResult:
        """Write an export to ``output_dir`` and return it with ``path`` set."""
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / result.file_name
        path.write_text(result.content, encoding="utf-8")
        logger.info(f"Wrote {result.format.value} resume to {path}")
        return result.model_copy(update={"path": path})


def _cert_label(cert: Certification) -> str:
    return f"{cert.name} ({cert.date})" if cert.date else cert.name


def _section_values(section_order: Sequence[SectionKind | str]) -> list[str]:
    values: list[str] = []
    for kind in section_order:
        try:
            values.append(SectionKind(kind).value)
        except ValueError:
            logger.debug(f"Ignoring unknown section: {kind!r}")
    return values
