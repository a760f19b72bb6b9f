"""Bullet rewriting against a target job.

Each bullet is rewritten independently in WHAT -> IMPACT -> HOW form. A failed
or empty LLM answer keeps the original bullet, so a rewrite always has text.
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import TYPE_CHECKING

from resumefit.scoring.matchers import keywords_in
from resumefit.tailoring.config import TailoringConfig, get_tailoring_config
from resumefit.tailoring.llm import LLMError, TailoringLLM
from resumefit.tailoring.models import BulletRewrite

if TYPE_CHECKING:
    from resumefit.analysis.models import JobRequirementModel

logger = logging.getLogger(__name__)

_METRIC = re.compile(r"\d+%?|\$[\d,]+|\d+x|\d+\+")
_LEADING_MARKER = re.compile(r"^(?:[-*•]\s+|\d+[.)]\s+)")

REWRITE_SYSTEM_PROMPT = (
    "You are an expert resume writer. Rewrite bullet points to be impactful "
    "and ATS-friendly. Be concise. Never invent employers, tools or numbers "
    "that the original does not support."
)

REWRITE_PROMPT = """Rewrite this resume bullet point using the WHAT -> IMPACT -> HOW format for the following job:

Job Title: {job_title}
Role Type: {role_type}
Key Skills: {key_skills}

Original bullet: "{bullet}"

WHAT -> IMPACT -> HOW FORMAT:
- WHAT: start with the action or deliverable (what was built, launched, led, created)
- IMPACT: include the quantified result (%, $, time saved, users affected)
- HOW: end with the methods, tools or approach used
- Example: "Built recommendation engine that drove $2M revenue increase through collaborative filtering and A/B testing"

Requirements:
1. Start with a strong action verb (Built, Launched, Led, Developed, Created, Designed)
2. Keep any metric the original has; do not make up new ones
3. Naturally incorporate relevant job keywords where they apply
4. Keep it to one or two lines
5. Do NOT keyword stuff

Return ONLY the rewritten bullet point, nothing else."""


def has_metric(text: str) -> bool:
    return bool(_METRIC.search(text))


def _clean(text: str) -> str:
    cleaned = text.strip().strip('"').strip()
    return _LEADING_MARKER.sub("", cleaned).strip()


class BulletRewriter:
    """Rewrites bullets for a job, falling back to the original text on any LLM failure."""

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

    async def rewrite(self, bullet: str, job: JobRequirementModel) -> BulletRewrite:
        """Rewrite one bullet.

        Raises:
            ValueError: ``bullet`` is blank.
        """
        if not bullet.strip():
            raise ValueError("Cannot rewrite an empty bullet")

        rewritten = bullet.strip()
        if self.config.llm_enabled:
            try:
                answer = _clean(
                    await self.llm.generate_text(
                        self._build_prompt(bullet, job),
                        system_prompt=REWRITE_SYSTEM_PROMPT,
                    )
                )
            except LLMError as e:
                logger.warning(f"Bullet rewrite failed, keeping original: {e}")
            else:
                rewritten = answer or rewritten

        return BulletRewrite(
            original=bullet,
            rewritten=rewritten,
            keywords_included=keywords_in(rewritten, self._job_terms(job)),
            has_metric=has_metric(rewritten),
        )

    async def rewrite_many(
        self, bullets: list[str], job: JobRequirementModel
    ) -> list[BulletRewrite]:
        """Rewrite bullets concurrently, preserving order."""
        if not bullets:
            return []

        semaphore = asyncio.Semaphore(self.config.rewrite_concurrency)

        async def bounded(bullet: str) -> BulletRewrite:
            async with semaphore:
                return await self.rewrite(bullet, job)

        return list(await asyncio.gather(*(bounded(b) for b in bullets)))

    @staticmethod
    def _job_terms(job: JobRequirementModel) -> list[str]:
        return [
            *job.all_keywords(),
            *(skill for cluster in job.skill_clusters for skill in cluster.skills),
        ]

    @staticmethod
    def _build_prompt(bullet: str, job: JobRequirementModel) -> str:
        skills = [skill for cluster in job.skill_clusters for skill in cluster.skills]
        return REWRITE_PROMPT.format(
            job_title=job.job_title,
            role_type=job.role_type.value,
            key_skills=", ".join(skills[:10]) or "n/a",
            bullet=bullet.strip(),
        )
