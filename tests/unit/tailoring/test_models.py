"""Tests for tailoring data models."""

import pytest
from pydantic import ValidationError

from resumefit.profile.models import SkillCategory
from resumefit.tailoring.models import (
    BulletRewrite,
    GeneratedExperience,
    GeneratedProject,
    GeneratedResume,
)


def _bullet(text: str) -> BulletRewrite:
    return BulletRewrite(original=text, rewritten=text)


class TestBulletRewrite:
    def test_rewritten_is_stripped(self):
        assert BulletRewrite(original="x", rewritten="  Built it ").rewritten == "Built it"

    def test_blank_rewrite_rejected(self):
        with pytest.raises(ValidationError):
            BulletRewrite(original="x", rewritten="   ")


class TestGeneratedResume:
    @pytest.fixture
    def resume(self) -> GeneratedResume:
        return GeneratedResume(
            experiences=[
                GeneratedExperience(
                    id="e1", rewritten_bullets=[_bullet("e1a")], included_in_resume=True
                ),
                GeneratedExperience(
                    id="e2", rewritten_bullets=[_bullet("e2a")], included_in_resume=False
                ),
            ],
            projects=[
                GeneratedProject(
                    id="p1", rewritten_bullets=[_bullet("p1a")], included_in_resume=True
                )
            ],
            skills=[
                SkillCategory(category="A", skills=["Go", "go"]),
                SkillCategory(category="B", skills=["SQL"]),
            ],
        )

    def test_included_entries(self, resume):
        assert [e.id for e in resume.included_experiences()] == ["e1"]
        assert [p.id for p in resume.included_projects()] == ["p1"]

    def test_included_bullets_experiences_then_projects(self, resume):
        assert [b.rewritten for b in resume.included_bullets()] == ["e1a", "p1a"]

    def test_skill_tokens(self, resume):
        assert resume.skill_tokens() == ["Go", "SQL"]

    def test_round_trip(self, resume):
        assert GeneratedResume.from_dict(resume.to_dict()) == resume

    def test_relevance_bounds(self):
        with pytest.raises(ValidationError):
            GeneratedExperience(relevance_score=101)
