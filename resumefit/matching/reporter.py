"""Job match reporting: keyword coverage, skill overlap and suggestions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resumefit.analysis.models import RoleClassification
from resumefit.matching.models import (
    KeywordCoverage,
    KeywordLocation,
    MatchReport,
    RelevanceSummary,
    RoleMatch,
    SkillsMatch,
)
from resumefit.scoring.matchers import normalize_keyword, round_half_up, unique_ci

if TYPE_CHECKING:
    from resumefit.analysis.models import JobRequirementModel
    from resumefit.scoring.models import RelevanceMap
    from resumefit.tailoring.models import GeneratedResume

logger = logging.getLogger(__name__)

ROLE_MATCH_CONFIDENCE = 0.85
SKILL_LIST_CAP = 10
LOW_COVERAGE = 50
MISSING_SKILLS_THRESHOLD = 5
LOW_RELEVANCE = 50


def _haystack(resume: GeneratedResume) -> str:
    parts = [
        resume.summary or "",
        *(bullet.rewritten for bullet in resume.included_bullets()),
        *(skill for category in resume.skills for skill in category.skills),
    ]
    return " ".join(parts).lower()


def _average(scores: list[float]) -> float:
    return sum(scores) / len(scores) if scores else 0.0


class MatchReporter:
    """Builds a MatchReport for a generated resume against its job."""

    def build_report(
        self,
        job: JobRequirementModel,
        resume: GeneratedResume,
        relevance: RelevanceMap,
    ) -> MatchReport:
        haystack = _haystack(resume)
        summary_text = (resume.summary or "").lower()
        skills_text = " ".join(
            skill for category in resume.skills for skill in category.skills
        ).lower()
        primary = {normalize_keyword(k) for k in job.primary_keywords}

        coverage: list[KeywordCoverage] = []
        for keyword in job.all_keywords():
            needle = normalize_keyword(keyword)
            locations: list[KeywordLocation] = []
            if needle in summary_text:
                locations.append("summary")
            if needle in skills_text:
                locations.append("skills")
            coverage.append(
                KeywordCoverage(
                    keyword=keyword,
                    found=needle in haystack,
                    locations=locations,
                    importance="required" if needle in primary else "preferred",
                )
            )

        found = sum(1 for entry in coverage if entry.found)
        coverage_score = round_half_up(found / max(len(coverage), 1) * 100)

        skills_match = self._skills_match(job, resume)

        included_experiences = resume.included_experiences()
        included_projects = resume.included_projects()
        experience_average = _average([e.relevance_score for e in included_experiences])
        project_average = _average([p.relevance_score for p in included_projects])

        suggestions: list[str] = []
        if coverage_score < LOW_COVERAGE:
            suggestions.append("Consider adding more JD keywords to your experience bullets")
        if len(skills_match.missing) > MISSING_SKILLS_THRESHOLD:
            suggestions.append(
                f"Missing key skills: {', '.join(skills_match.missing[:5])}. Add if applicable."
            )
        if experience_average < LOW_RELEVANCE:
            suggestions.append("Consider emphasizing experiences more relevant to this role")

        report = MatchReport(
            role_match=RoleMatch(
                inferred=RoleClassification(
                    role_type=job.role_type,
                    seniority_level=job.seniority_level,
                    domain=job.domain,
                    confidence=ROLE_MATCH_CONFIDENCE,
                ),
                alignment_score=relevance.overall_match,
            ),
            keyword_coverage=coverage,
            coverage_score=coverage_score,
            skills_match=skills_match,
            experience_relevance=RelevanceSummary(
                total=len(resume.experiences),
                included=len(included_experiences),
                average_relevance=round_half_up(experience_average),
            ),
            project_relevance=RelevanceSummary(
                total=len(resume.projects),
                included=len(included_projects),
                average_relevance=round_half_up(project_average),
            ),
            suggestions=suggestions,
        )
        logger.info(
            f"Match report: coverage={coverage_score}% "
            f"matched_skills={len(skills_match.matched)} suggestions={len(suggestions)}"
        )
        return report

    def _skills_match(self, job: JobRequirementModel, resume: GeneratedResume) -> SkillsMatch:
        """Case-insensitive overlap; ``missing`` and ``extra`` keep at most ten entries."""
        resume_skills = unique_ci(s for c in resume.skills for s in c.skills)
        job_skills = unique_ci(s for c in job.skill_clusters for s in c.skills)
        resume_set, job_set = set(resume_skills), set(job_skills)

        missing = [s for s in job_skills if s not in resume_set]
        return SkillsMatch(
            matched=[s for s in resume_skills if s in job_set],
            missing=missing[:SKILL_LIST_CAP],
            extra=[s for s in resume_skills if s not in job_set][:SKILL_LIST_CAP],
        )
