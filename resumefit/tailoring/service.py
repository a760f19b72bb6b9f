"""Main tailoring service.

Orchestrates the pipeline from a profile and an analyzed job to a
GeneratedResume with its layout plan, compliance report and match report.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from resumefit.compliance.checker import ComplianceChecker
from resumefit.layout.allocator import LayoutAllocator
from resumefit.layout.models import ResumeConfig, SectionType
from resumefit.matching.reporter import MatchReporter
from resumefit.scoring.service import RelevanceScorer
from resumefit.tailoring.config import TailoringConfig, get_tailoring_config
from resumefit.tailoring.llm import TailoringLLM
from resumefit.tailoring.models import (
    BulletRewrite,
    GeneratedExperience,
    GeneratedProject,
    GeneratedResume,
)
from resumefit.tailoring.rewriter import BulletRewriter
from resumefit.tailoring.summary import SummaryGenerator

if TYPE_CHECKING:
    from resumefit.analysis.models import JobRequirementModel
    from resumefit.layout.models import LayoutPlan
    from resumefit.profile.models import ResumeProfile
    from resumefit.scoring.models import RelevanceMap

logger = logging.getLogger(__name__)


@dataclass
class TailoringResult:
    """Result of a complete tailoring run."""

    success: bool
    error: str | None = None

    resume: GeneratedResume | None = None
    relevance: RelevanceMap | None = None

    processing_time: float = 0.0
    completed_at: datetime = field(default_factory=datetime.now)


class TailoringService:
    """Main service for resume tailoring.

    Orchestrates the pipeline:
    1. Score every profile entry against the job
    2. Allocate the page budget to the ranked entries
    3. Rewrite the admitted bullets and (optionally) the summary, concurrently
    4. Check ATS compliance
    5. Build the job match report
    """

    def __init__(
        self,
        config: TailoringConfig | None = None,
        llm: TailoringLLM | None = None,
    ):
        """Initialize the tailoring service.

        Args:
            config: Optional TailoringConfig. Uses global config if not provided.
            llm: Optional LLM client shared by the rewriter and summary generator.
        """
        self.config = config or get_tailoring_config()
        llm = llm or TailoringLLM(self.config)

        self.scorer = RelevanceScorer()
        self.allocator = LayoutAllocator()
        self.rewriter = BulletRewriter(config=self.config, llm=llm)
        self.summary_generator = SummaryGenerator(config=self.config, llm=llm)
        self.checker = ComplianceChecker()
        self.reporter = MatchReporter()

    async def generate(
        self,
        profile: ResumeProfile,
        job: JobRequirementModel,
        resume_config: ResumeConfig | None = None,
    ) -> tuple[GeneratedResume, RelevanceMap]:
        """Run the pipeline and return the resume with the relevance map behind it.

        LLM failures never surface here; rewrites and the summary fall back
        to the profile's own text.
        """
        resume_config = resume_config or ResumeConfig()
        include = resume_config.include_sections

        relevance = self.scorer.map_job_to_profile(job, profile)
        plan = self.allocator.allocate(profile, resume_config, relevance)

        experience_items = plan.items_for(SectionType.EXPERIENCE)
        project_items = plan.items_for(SectionType.PROJECTS)

        # One flat batch so every bullet request is in flight together.
        batches: list[list[str]] = [
            exp.bullets[: experience_items[exp.id].bullet_count]
            if exp.id in experience_items
            else []
            for exp in profile.experiences
        ] + [
            proj.bullets[: project_items[proj.id].bullet_count]
            if proj.id in project_items
            else []
            for proj in profile.projects
        ]
        flat = [bullet for batch in batches for bullet in batch]
        logger.info(
            f"Rewriting {len(flat)} bullets across {len(experience_items)} experiences "
            f"and {len(project_items)} projects"
        )

        summary_task = (
            self.summary_generator.generate(profile, job, resume_config.summary_length)
            if include.summary
            else _none()
        )
        rewrites, summary = await asyncio.gather(
            self.rewriter.rewrite_many(flat, job), summary_task
        )

        per_entry = _split(rewrites, batches)
        n_exp = len(profile.experiences)

        experiences = [
            GeneratedExperience(
                **exp.model_dump(),
                relevance_score=relevance.experience_score(exp.id),
                rewritten_bullets=per_entry[i],
                included_in_resume=exp.id in experience_items,
            )
            for i, exp in enumerate(profile.experiences)
        ]
        projects = [
            GeneratedProject(
                **proj.model_dump(),
                relevance_score=relevance.project_score(proj.id),
                rewritten_bullets=per_entry[n_exp + i],
                included_in_resume=proj.id in project_items,
            )
            for i, proj in enumerate(profile.projects)
        ]

        resume = self._assemble(profile, resume_config, plan, summary, experiences, projects)
        resume = resume.model_copy(update={"compliance_report": self.checker.check(resume)})
        resume = resume.model_copy(
            update={"match_report": self.reporter.build_report(job, resume, relevance)}
        )
        return resume, relevance

    async def tailor(
        self,
        profile: ResumeProfile,
        job: JobRequirementModel,
        resume_config: ResumeConfig | None = None,
    ) -> TailoringResult:
        """Run the complete tailoring pipeline.

        Returns:
            TailoringResult with the generated resume, or the error message if
            anything unexpected went wrong.
        """
        logger.info(f"Starting tailoring pipeline for {job.company or 'unknown'} - {job.job_title}")
        started = time.perf_counter()

        try:
            resume, relevance = await self.generate(profile, job, resume_config)
        except Exception as e:
            logger.error(f"Tailoring pipeline failed: {e}")
            return TailoringResult(
                success=False,
                error=str(e),
                processing_time=time.perf_counter() - started,
            )

        elapsed = time.perf_counter() - started
        logger.info(
            f"Tailoring complete in {elapsed:.2f}s: "
            f"compliance={resume.compliance_report.score if resume.compliance_report else '-'} "
            f"match={relevance.overall_match}"
        )
        return TailoringResult(
            success=True,
            resume=resume,
            relevance=relevance,
            processing_time=elapsed,
        )

    @staticmethod
    def _assemble(
        profile: ResumeProfile,
        resume_config: ResumeConfig,
        plan: LayoutPlan,
        summary: str | None,
        experiences: list[GeneratedExperience],
        projects: list[GeneratedProject],
    ) -> GeneratedResume:
        include = resume_config.include_sections
        return GeneratedResume(
            contact=profile.contact.model_copy(deep=True),
            summary=summary if include.summary else None,
            experiences=experiences,
            projects=projects,
            education=[e.model_copy(deep=True) for e in profile.education]
            if include.education
            else [],
            skills=[s.model_copy(deep=True) for s in profile.skills] if include.skills else [],
            certifications=[c.model_copy(deep=True) for c in profile.certifications]
            if include.certifications
            else [],
            layout_plan=plan,
        )


async def _none() -> None:
    return None


def _split(items: list[BulletRewrite], batches: list[list[str]]) -> list[list[BulletRewrite]]:
    result: list[list[BulletRewrite]] = []
    offset = 0
    for batch in batches:
        result.append(items[offset : offset + len(batch)])
        offset += len(batch)
    return result
