"""Page-budget layout allocation."""

from resumefit.layout.allocator import LayoutAllocator
from resumefit.layout.models import (
    CompressionLevel,
    IncludeSections,
    LayoutItem,
    LayoutPlan,
    LayoutSection,
    ResumeConfig,
    SectionType,
)

__all__ = [
    "CompressionLevel",
    "IncludeSections",
    "LayoutAllocator",
    "LayoutItem",
    "LayoutPlan",
    "LayoutSection",
    "ResumeConfig",
    "SectionType",
]
