"""Resume tailoring pipeline.

This module provides:
- Bullet rewriting and summary generation through an LLM, with fallbacks
- The TailoringService orchestrator that scores, allocates, rewrites, checks
  and reports

Main Entry Point:
    TailoringService - runs the complete pipeline

Example:
    from resumefit.tailoring import TailoringService

    service = TailoringService()
    result = await service.tailor(profile, job)

    if result.success:
        print(result.resume.compliance_report.score)
"""

from resumefit.tailoring.config import (
    TailoringConfig,
    get_tailoring_config,
    reset_tailoring_config,
)
from resumefit.tailoring.llm import LLMError, TailoringLLM
from resumefit.tailoring.models import (
    BulletRewrite,
    GeneratedExperience,
    GeneratedProject,
    GeneratedResume,
)
from resumefit.tailoring.rewriter import BulletRewriter
from resumefit.tailoring.service import TailoringResult, TailoringService
from resumefit.tailoring.summary import SummaryGenerator

__all__ = [
    "BulletRewrite",
    "BulletRewriter",
    "GeneratedExperience",
    "GeneratedProject",
    "GeneratedResume",
    "LLMError",
    "SummaryGenerator",
    "TailoringConfig",
    "TailoringLLM",
    "TailoringResult",
    "TailoringService",
    "get_tailoring_config",
    "reset_tailoring_config",
]
