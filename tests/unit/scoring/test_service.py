"""Tests for relevance scoring."""

import pytest

from resumefit.analysis.models import ImpactTheme, JobRequirementModel, RoleType
from resumefit.profile.models import Experience, Project, ResumeProfile
from resumefit.scoring.service import RelevanceScorer


@pytest.fixture
def scorer() -> RelevanceScorer:
    return RelevanceScorer()


class TestScoreExperience:
    def test_title_bonus_plus_keyword_density(self, scorer):
        job = JobRequirementModel(
            role_type=RoleType.SOFTWARE_ENGINEER,
            primary_keywords=["Python", "AWS"],
        )
        experience = Experience(
            title="Software Engineer",
            bullets=["Wrote Python tooling", "Deployed on AWS"],
        )

        score = scorer.score_experience(experience, job)

        # 20 for the title, keyword density capped at 40.
        assert score == pytest.approx(60.0)

    def test_keyword_density_without_title_match(self, scorer):
        job = JobRequirementModel(
            role_type=RoleType.DATA_SCIENTIST,
            primary_keywords=["Python", "AWS", "Spark"],
        )
        experience = Experience(title="Analyst", bullets=["Wrote Python tooling"])

        assert scorer.score_experience(experience, job) == pytest.approx(20.0)

    def test_blank_title_gets_no_bonus(self, scorer):
        job = JobRequirementModel(role_type=RoleType.OTHER)
        assert scorer.score_experience(Experience(title=""), job) == 0.0

    def test_impact_themes_are_weighted(self, scorer):
        job = JobRequirementModel(
            impact_themes=[
                ImpactTheme(theme="scale", keywords=["scale", "millions"], weight=0.5),
            ]
        )
        experience = Experience(title="Cook", bullets=["Served millions at scale"])

        assert scorer.score_experience(experience, job) == pytest.approx(5.0)

    def test_score_is_clamped(self, scorer):
        job = JobRequirementModel(
            role_type=RoleType.SOFTWARE_ENGINEER,
            primary_keywords=["Python"],
            impact_themes=[
                ImpactTheme(keywords=[f"word{i}" for i in range(20)], weight=1.0)
            ],
        )
        experience = Experience(
            title="Software Engineer",
            bullets=["Python " + " ".join(f"word{i}" for i in range(20))],
        )

        assert scorer.score_experience(experience, job) == 100.0

    def test_empty_experience(self, scorer, sample_job):
        assert scorer.score_experience(Experience(title="Chef"), sample_job) == 0.0

    def test_scenario_from_fixtures(self, scorer, sample_profile, sample_job):
        score = scorer.score_experience(sample_profile.experiences[0], sample_job)
        # 20 title + 40 keywords + 5 for "latency".
        assert score == pytest.approx(65.0)


class TestScoreProject:
    def test_tech_overlap_and_link(self, scorer, sample_profile, sample_job):
        project = sample_profile.projects[0]
        # tech overlap capped at 50, plus 10 for the link.
        assert scorer.score_project(project, sample_job) == pytest.approx(60.0)

    def test_partial_tech_overlap(self, scorer, sample_job):
        project = Project(title="X", tech_stack=["Python", "Lua"])
        assert scorer.score_project(project, sample_job) == pytest.approx(35.0)

    def test_unrelated_project(self, scorer, sample_profile, sample_job):
        assert scorer.score_project(sample_profile.projects[1], sample_job) == 0.0

    def test_blank_link_earns_nothing(self, scorer, sample_job):
        assert scorer.score_project(Project(title="X", link="  "), sample_job) == 0.0


class TestScoreSkill:
    def test_case_insensitive(self, scorer, sample_job):
        assert scorer.score_skill("python", sample_job) == 100.0
        assert scorer.score_skill("Lua", sample_job) == 0.0


class TestMapJobToProfile:
    def test_overall_match(self, scorer, sample_profile, sample_job):
        relevance = scorer.map_job_to_profile(sample_job, sample_profile)

        assert relevance.experience_score("exp-acme") == pytest.approx(65.0)
        assert relevance.experience_score("exp-shop") == 0.0
        assert relevance.project_score("proj-cli") == pytest.approx(60.0)
        assert relevance.skills == {"Python": 100.0, "SQL": 0.0, "AWS": 100.0, "Docker": 0.0}
        # 32.5 * 0.5 + 30 * 0.2 + 50 * 0.3 = 37.25
        assert relevance.overall_match == 37

    def test_empty_profile(self, scorer, sample_job):
        relevance = scorer.map_job_to_profile(sample_job, ResumeProfile())

        assert relevance.experiences == {}
        assert relevance.overall_match == 0

    def test_every_score_in_bounds(self, scorer, sample_profile, sample_job):
        relevance = scorer.map_job_to_profile(sample_job, sample_profile)
        scores = [
            *relevance.experiences.values(),
            *relevance.projects.values(),
            *relevance.skills.values(),
        ]
        assert all(0.0 <= s <= 100.0 for s in scores)
        assert 0 <= relevance.overall_match <= 100

    def test_is_deterministic(self, scorer, sample_profile, sample_job):
        first = scorer.map_job_to_profile(sample_job, sample_profile)
        second = scorer.map_job_to_profile(sample_job, sample_profile)
        assert first.to_dict() == second.to_dict()

    def test_unknown_id_scores_zero(self, scorer, sample_profile, sample_job):
        relevance = scorer.map_job_to_profile(sample_job, sample_profile)
        assert relevance.experience_score("missing") == 0.0
        assert relevance.project_score("missing") == 0.0
