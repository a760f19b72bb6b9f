"""Relevance scoring of profile entries against a job requirement model."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resumefit.scoring.matchers import count_found, normalize_keyword, round_half_up
from resumefit.scoring.models import RelevanceMap

if TYPE_CHECKING:
    from resumefit.analysis.models import JobRequirementModel
    from resumefit.profile.models import Experience, Project, ResumeProfile

logger = logging.getLogger(__name__)

MAX_SCORE = 100.0

TITLE_MATCH_POINTS = 20.0
EXPERIENCE_KEYWORD_CAP = 40.0
EXPERIENCE_KEYWORD_FACTOR = 60.0
THEME_POINTS = 5.0

PROJECT_TECH_CAP = 50.0
PROJECT_TECH_FACTOR = 70.0
PROJECT_KEYWORD_CAP = 30.0
PROJECT_KEYWORD_FACTOR = 40.0
PROJECT_LINK_POINTS = 10.0

EXPERIENCE_WEIGHT = 0.5
PROJECT_WEIGHT = 0.2
SKILL_WEIGHT = 0.3


def _average(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


class RelevanceScorer:
    """Scores experiences, projects and skills against one job.

    Pure and deterministic: the same inputs always give the same scores.
    """

    def score_experience(self, experience: Experience, job: JobRequirementModel) -> float:
        """Score a work experience in [0, 100].

        Title overlap with the role type earns a flat bonus, keyword density in
        the bullets up to 40 points, and each impact-theme keyword found adds
        ``5 * weight``.
        """
        score = 0.0

        title = normalize_keyword(experience.title)
        role = job.role_type.value.lower()
        if title and (title in role or role in title):
            score += TITLE_MATCH_POINTS

        bullet_text = " ".join(experience.bullets).lower()
        keywords = job.all_keywords()
        matches = count_found(bullet_text, [*keywords, *job.skill_tokens()])
        score += min(
            EXPERIENCE_KEYWORD_CAP,
            matches / max(len(keywords), 1) * EXPERIENCE_KEYWORD_FACTOR,
        )

        for theme in job.impact_themes:
            for keyword in theme.keywords:
                needle = normalize_keyword(keyword)
                if needle and needle in bullet_text:
                    score += THEME_POINTS * theme.weight

        return min(score, MAX_SCORE)

    def score_project(self, project: Project, job: JobRequirementModel) -> float:
        """Score a project in [0, 100] from tech-stack overlap, bullet keywords and a link."""
        keywords = job.all_keywords()
        known = job.skill_tokens() | {normalize_keyword(k) for k in keywords}

        tech_matches = sum(
            1 for tech in project.tech_stack if normalize_keyword(tech) in known
        )
        score = min(
            PROJECT_TECH_CAP,
            tech_matches / max(len(project.tech_stack), 1) * PROJECT_TECH_FACTOR,
        )

        bullet_text = " ".join(project.bullets).lower()
        matches = count_found(bullet_text, [*keywords, *job.skill_tokens()])
        score += min(
            PROJECT_KEYWORD_CAP,
            matches / max(len(keywords), 1) * PROJECT_KEYWORD_FACTOR,
        )

        if project.link and project.link.strip():
            score += PROJECT_LINK_POINTS

        return min(score, MAX_SCORE)

    def score_skill(self, skill: str, job: JobRequirementModel) -> float:
        """100 if the job lists the skill (case-insensitive), else 0."""
        return MAX_SCORE if normalize_keyword(skill) in job.skill_tokens() else 0.0

    def map_job_to_profile(
        self, job: JobRequirementModel, profile: ResumeProfile
    ) -> RelevanceMap:
        """Score every profile entry and compute the overall match percentage.

        ``overall_match`` weighs the average experience score by 0.5, the
        average project score by 0.2 and the share of profile skills the job
        asks for by 0.3. Empty collections contribute 0.
        """
        experiences = {
            exp.id: self.score_experience(exp, job) for exp in profile.experiences
        }
        projects = {proj.id: self.score_project(proj, job) for proj in profile.projects}

        skill_tokens = profile.skill_tokens()
        skills = {skill: self.score_skill(skill, job) for skill in skill_tokens}
        matched = sum(1 for skill in skill_tokens if skills[skill] > 0)
        skill_match_rate = matched / len(skill_tokens) * 100 if skill_tokens else 0.0

        overall = round_half_up(
            _average(list(experiences.values())) * EXPERIENCE_WEIGHT
            + _average(list(projects.values())) * PROJECT_WEIGHT
            + skill_match_rate * SKILL_WEIGHT
        )

        logger.debug(
            f"Relevance for '{job.job_title}': overall={overall} "
            f"experiences={len(experiences)} projects={len(projects)} "
            f"skills={matched}/{len(skill_tokens)}"
        )
        return RelevanceMap(
            experiences=experiences,
            projects=projects,
            skills=skills,
            overall_match=min(overall, 100),
        )
