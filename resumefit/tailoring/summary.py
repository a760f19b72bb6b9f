"""Professional summary generation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resumefit.tailoring.config import TailoringConfig, get_tailoring_config
from resumefit.tailoring.llm import LLMError, TailoringLLM

if TYPE_CHECKING:
    from resumefit.analysis.models import JobRequirementModel
    from resumefit.layout.models import SummaryLength
    from resumefit.profile.models import ResumeProfile

logger = logging.getLogger(__name__)

SENTENCES_BY_LENGTH = {"short": 2, "medium": 3, "long": 4}

SUMMARY_SYSTEM_PROMPT = (
    "You are an expert resume writer. Write concise, impactful professional summaries."
)

SUMMARY_PROMPT = """Write a professional resume summary for this candidate applying to {job_title} at {company}.

Candidate Background:
- Most Recent Role: {recent_title} at {recent_company}
- Key Skills: {skills}
- Experience Count: {experience_count} roles

Job Requirements:
- Role: {role_type}, {seniority}
- Key Skills Needed: {job_skills}
- Domain: {domain}

Requirements:
1. Write exactly {sentences} sentences
2. Mention core strengths and domain expertise
3. Include 2-3 relevant skills that match the job requirements
4. Be specific and quantifiable where the background supports it
5. Do NOT use first person ("I")

Return ONLY the summary, nothing else."""


class SummaryGenerator:
    """Writes a job-targeted summary; keeps the profile's own summary on failure."""

    def __init__(
        self,
        config: TailoringConfig | None = None,
        llm: TailoringLLM | None = None,
    ) -> None:
        self.config = config or get_tailoring_config()
        self._llm = llm

    @property
    def llm(self) -> TailoringLLM:
        if self._llm is None:
            self._llm = TailoringLLM(self.config)
        return self._llm

    async def generate(
        self,
        profile: ResumeProfile,
        job: JobRequirementModel,
        length: SummaryLength = "short",
    ) -> str | None:
        if not self.config.llm_enabled:
            return profile.summary

        try:
            summary = await self.llm.generate_text(
                self._build_prompt(profile, job, length),
                system_prompt=SUMMARY_SYSTEM_PROMPT,
            )
        except LLMError as e:
            logger.warning(f"Summary generation failed, keeping profile summary: {e}")
            return profile.summary

        return summary.strip() or profile.summary

    @staticmethod
    def _build_prompt(
        profile: ResumeProfile, job: JobRequirementModel, length: SummaryLength
    ) -> str:
        recent = profile.experiences[0] if profile.experiences else None
        job_skills = [skill for cluster in job.skill_clusters for skill in cluster.skills]
        return SUMMARY_PROMPT.format(
            job_title=job.job_title,
            company=job.company or "the company",
            recent_title=recent.title if recent else "N/A",
            recent_company=recent.company if recent else "N/A",
            skills=", ".join(profile.skill_tokens()[:10]) or "N/A",
            experience_count=len(profile.experiences),
            role_type=job.role_type.value,
            seniority=job.seniority_level.value,
            job_skills=", ".join(job_skills[:8]) or "N/A",
            domain=job.domain.value,
            sentences=SENTENCES_BY_LENGTH[length],
        )
