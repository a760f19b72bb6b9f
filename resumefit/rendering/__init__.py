"""Resume rendering: plain-text and JSON exporters."""

from resumefit.rendering.models import (
    DEFAULT_SECTION_ORDER,
    ExportFormat,
    ExportResult,
    SectionKind,
)
from resumefit.rendering.renderer import ResumeExporter, UnsupportedExportFormatError

__all__ = [
    "DEFAULT_SECTION_ORDER",
    "ExportFormat",
    "ExportResult",
    "ResumeExporter",
    "SectionKind",
    "UnsupportedExportFormatError",
]
