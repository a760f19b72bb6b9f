"""Greedy line-budget allocation for a fixed-page resume.

A page holds about 55 lines. Fixed sections (header, summary, skills,
education) are charged first; experiences then fill up to 70% of what is
left, and projects take a small capped slice. The allocation never
backtracks: once an experience overflows, nothing ranked below it is tried.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resumefit.layout.models import (
    CompressionLevel,
    LayoutItem,
    LayoutPlan,
    LayoutSection,
    ResumeConfig,
    SectionType,
)
from resumefit.scoring.ranking import rank, select_top

if TYPE_CHECKING:
    from resumefit.profile.models import ResumeProfile
    from resumefit.scoring.models import RelevanceMap

logger = logging.getLogger(__name__)

LINES_PER_PAGE = 55
HEADER_LINES = 6
SUMMARY_LINES = {"short": 2, "medium": 3, "long": 4}
SKILLS_LINES_BASE = 3
SKILLS_LINES_MAX = 6
EXPERIENCE_HEADER_LINES = 2
BULLET_LINES = 2
PROJECT_HEADER_LINES = 1
PROJECT_MAX_BULLETS = 2
PROJECT_LINES_PER_SLOT = 4
EDUCATION_LINES = 3
SAFETY_PADDING = 2
EXPERIENCE_SHARE = 0.7


def compression_for(used: int, budget: int) -> CompressionLevel:
    """Map page utilisation to a compression hint."""
    utilization = used / budget if budget else 0.0
    if utilization > 1.10:
        return CompressionLevel.AGGRESSIVE
    if utilization > 1.00:
        return CompressionLevel.MODERATE
    if utilization > 0.95:
        return CompressionLevel.LIGHT
    return CompressionLevel.NONE


class LayoutAllocator:
    """Decides which ranked entries fit the page budget."""

    def allocate(
        self,
        profile: ResumeProfile,
        config: ResumeConfig,
        relevance: RelevanceMap,
    ) -> LayoutPlan:
        include = config.include_sections
        total_budget = config.page_count * LINES_PER_PAGE
        sections: list[LayoutSection] = [
            LayoutSection(type=SectionType.HEADER, allocated_lines=HEADER_LINES)
        ]
        used = HEADER_LINES

        if include.summary:
            summary_lines = SUMMARY_LINES[config.summary_length]
            sections.append(
                LayoutSection(type=SectionType.SUMMARY, allocated_lines=summary_lines)
            )
            used += summary_lines

        if include.skills:
            skill_lines = min(SKILLS_LINES_BASE + len(profile.skills) // 2, SKILLS_LINES_MAX)
            sections.append(
                LayoutSection(type=SectionType.SKILLS, allocated_lines=skill_lines)
            )
            used += skill_lines

        education_lines = len(profile.education) * EDUCATION_LINES if include.education else 0
        remaining = total_budget - used - education_lines - SAFETY_PADDING

        if include.experience:
            items, lines = self._allocate_experiences(profile, config, relevance, remaining)
            if items:
                sections.append(
                    LayoutSection(
                        type=SectionType.EXPERIENCE, allocated_lines=lines, items=items
                    )
                )
                used += lines

        if include.projects:
            items, lines = self._allocate_projects(
                profile, config, relevance, remaining, used
            )
            if items:
                sections.append(
                    LayoutSection(
                        type=SectionType.PROJECTS, allocated_lines=lines, items=items
                    )
                )
                used += lines

        if include.education:
            sections.append(
                LayoutSection(type=SectionType.EDUCATION, allocated_lines=education_lines)
            )
            used += education_lines

        compression = compression_for(used, total_budget)
        logger.debug(
            f"Layout: {used}/{total_budget} lines across {len(sections)} sections "
            f"(compression={compression.value})"
        )
        return LayoutPlan(
            page_count=config.page_count,
            sections=sections,
            total_lines=used,
            compression_level=compression,
        )

    def _allocate_experiences(
        self,
        profile: ResumeProfile,
        config: ResumeConfig,
        relevance: RelevanceMap,
        remaining: int,
    ) -> tuple[list[LayoutItem], int]:
        target = int(remaining * EXPERIENCE_SHARE) if remaining > 0 else 0
        items: list[LayoutItem] = []
        lines = 0

        for experience in rank(profile.experiences, relevance.experiences):
            bullet_count = min(config.max_bullets_per_experience, len(experience.bullets))
            cost = EXPERIENCE_HEADER_LINES + bullet_count * BULLET_LINES
            if lines + cost > target:
                break
            items.append(LayoutItem(id=experience.id, bullet_count=bullet_count))
            lines += cost

        return items, lines

    def _allocate_projects(
        self,
        profile: ResumeProfile,
        config: ResumeConfig,
        relevance: RelevanceMap,
        remaining: int,
        used: int,
    ) -> tuple[list[LayoutItem], int]:
        target = min(remaining - (used - HEADER_LINES), config.max_projects * PROJECT_LINES_PER_SLOT)
        items: list[LayoutItem] = []
        lines = 0

        # Unlike experiences, a project that does not fit is skipped and the walk goes on.
        for project in select_top(profile.projects, config.max_projects, relevance.projects):
            bullet_count = min(PROJECT_MAX_BULLETS, len(project.bullets))
            cost = PROJECT_HEADER_LINES + bullet_count * BULLET_LINES
            if lines + cost <= target:
                items.append(LayoutItem(id=project.id, bullet_count=bullet_count))
                lines += cost

        return items, lines
