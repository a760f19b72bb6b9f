"""Tests for the greedy layout allocator."""

import pytest

from resumefit.layout.allocator import LayoutAllocator, compression_for
from resumefit.layout.models import (
    CompressionLevel,
    IncludeSections,
    LayoutPlan,
    ResumeConfig,
    SectionType,
)
from resumefit.profile.models import Education, Experience, Project, ResumeProfile
from resumefit.scoring.models import RelevanceMap


def _experiences(count: int, bullets: int) -> list[Experience]:
    return [
        Experience(
            id=f"exp-{i}",
            title=f"Role {i}",
            bullets=[f"Did thing {n}" for n in range(bullets)],
        )
        for i in range(count)
    ]


def _projects(count: int, bullets: int = 2) -> list[Project]:
    return [
        Project(id=f"proj-{i}", title=f"P{i}", bullets=[f"b{n}" for n in range(bullets)])
        for i in range(count)
    ]


EXPERIENCE_ONLY = IncludeSections(
    summary=False, skills=False, projects=False, education=False
)


@pytest.fixture
def allocator() -> LayoutAllocator:
    return LayoutAllocator()


class TestExperienceAllocation:
    def test_ten_equal_experiences_stop_at_budget(self, allocator):
        profile = ResumeProfile(experiences=_experiences(10, bullets=5))
        relevance = RelevanceMap(experiences={f"exp-{i}": 80.0 for i in range(10)})
        config = ResumeConfig(page_count=1, include_sections=EXPERIENCE_ONLY)

        plan = allocator.allocate(profile, config, relevance)

        # 55 - 6 header - 2 padding = 47 left; 70% is 32 lines; each entry costs 10.
        experience = plan.section(SectionType.EXPERIENCE)
        assert [item.id for item in experience.items] == ["exp-0", "exp-1", "exp-2"]
        assert all(item.bullet_count == 4 for item in experience.items)
        assert experience.allocated_lines == 30
        assert plan.total_lines == 36

    def test_follows_ranking(self, allocator):
        profile = ResumeProfile(experiences=_experiences(3, bullets=2))
        relevance = RelevanceMap(experiences={"exp-0": 10.0, "exp-1": 90.0, "exp-2": 50.0})
        config = ResumeConfig(include_sections=EXPERIENCE_ONLY)

        plan = allocator.allocate(profile, config, relevance)

        items = plan.items_for(SectionType.EXPERIENCE)
        assert list(items) == ["exp-1", "exp-2", "exp-0"]

    def test_no_backtracking_after_overflow(self, allocator):
        config = ResumeConfig(include_sections=EXPERIENCE_ONLY, max_bullets_per_experience=5)
        profile = ResumeProfile(
            experiences=[*_experiences(3, bullets=5), Experience(id="tiny", title="T")]
        )
        relevance = RelevanceMap(
            experiences={"exp-0": 90.0, "exp-1": 80.0, "exp-2": 70.0, "tiny": 10.0}
        )

        plan = allocator.allocate(profile, config, relevance)

        # Two entries of 12 lines use 24 of 32; the third overflows and the walk
        # stops, even though "tiny" (2 lines) would still fit.
        assert list(plan.items_for(SectionType.EXPERIENCE)) == ["exp-0", "exp-1"]

    def test_bullet_cap(self, allocator):
        profile = ResumeProfile(experiences=_experiences(1, bullets=6))
        config = ResumeConfig(include_sections=EXPERIENCE_ONLY, max_bullets_per_experience=2)

        plan = allocator.allocate(profile, config, RelevanceMap())

        item = plan.section(SectionType.EXPERIENCE).items[0]
        assert item.bullet_count == 2

    def test_experience_lines_within_share(self, allocator, sample_profile):
        profile = sample_profile.model_copy(update={"experiences": _experiences(8, bullets=4)})
        plan = allocator.allocate(profile, ResumeConfig(), RelevanceMap())

        # 55 - 6 header - 4 skills - 3 education - 2 padding = 40 left.
        assert plan.section(SectionType.EXPERIENCE).allocated_lines <= int(40 * 0.7)

    def test_two_pages_admit_more(self, allocator):
        profile = ResumeProfile(experiences=_experiences(10, bullets=5))
        one = allocator.allocate(
            profile, ResumeConfig(page_count=1, include_sections=EXPERIENCE_ONLY), RelevanceMap()
        )
        two = allocator.allocate(
            profile, ResumeConfig(page_count=2, include_sections=EXPERIENCE_ONLY), RelevanceMap()
        )

        assert len(two.items_for(SectionType.EXPERIENCE)) > len(
            one.items_for(SectionType.EXPERIENCE)
        )

    def test_no_experiences_omits_section(self, allocator):
        plan = allocator.allocate(ResumeProfile(), ResumeConfig(), RelevanceMap())
        assert plan.section(SectionType.EXPERIENCE) is None


class TestProjectAllocation:
    def test_respects_max_projects(self, allocator):
        profile = ResumeProfile(projects=_projects(5, bullets=1))
        config = ResumeConfig(include_sections=IncludeSections(skills=False, education=False))

        plan = allocator.allocate(profile, config, RelevanceMap())

        items = plan.section(SectionType.PROJECTS).items
        assert len(items) == 3
        assert all(item.bullet_count == 1 for item in items)

    def test_project_bullets_capped_at_two(self, allocator):
        profile = ResumeProfile(projects=_projects(1, bullets=5))
        config = ResumeConfig(include_sections=IncludeSections(skills=False, education=False))

        plan = allocator.allocate(profile, config, RelevanceMap())

        assert plan.section(SectionType.PROJECTS).items[0].bullet_count == 2

    def test_skips_misfit_and_keeps_going(self, allocator):
        # 13 education entries take 39 lines, leaving 55 - 6 - 39 - 2 = 8 for projects.
        profile = ResumeProfile(
            projects=[
                Project(id="a", title="A", bullets=["x", "y"]),
                Project(id="b", title="B", bullets=["x", "y"]),
                Project(id="c", title="C"),
            ],
            education=[Education(id=f"edu-{i}", degree="BS") for i in range(13)],
        )
        relevance = RelevanceMap(projects={"a": 90.0, "b": 80.0, "c": 10.0})
        config = ResumeConfig(include_sections=IncludeSections(skills=False))

        plan = allocator.allocate(profile, config, relevance)

        # "a" costs 5, "b" would make 10 and is skipped, "c" (1 line) still fits.
        assert list(plan.items_for(SectionType.PROJECTS)) == ["a", "c"]
        assert plan.section(SectionType.PROJECTS).allocated_lines == 6

    def test_projects_disabled(self, allocator, sample_profile):
        config = ResumeConfig(include_sections=IncludeSections(projects=False))
        plan = allocator.allocate(sample_profile, config, RelevanceMap())
        assert plan.section(SectionType.PROJECTS) is None

    def test_zero_max_projects(self, allocator, sample_profile):
        plan = allocator.allocate(sample_profile, ResumeConfig(max_projects=0), RelevanceMap())
        assert plan.section(SectionType.PROJECTS) is None


class TestFixedSections:
    def test_sample_profile_plan(self, allocator, sample_profile, sample_job):
        from resumefit.scoring.service import RelevanceScorer

        relevance = RelevanceScorer().map_job_to_profile(sample_job, sample_profile)
        plan = allocator.allocate(sample_profile, ResumeConfig(), relevance)

        assert [s.type for s in plan.sections] == [
            SectionType.HEADER,
            SectionType.SKILLS,
            SectionType.EXPERIENCE,
            SectionType.PROJECTS,
            SectionType.EDUCATION,
        ]
        assert plan.section(SectionType.SKILLS).allocated_lines == 4
        assert list(plan.items_for(SectionType.EXPERIENCE)) == ["exp-acme", "exp-shop"]
        assert list(plan.items_for(SectionType.PROJECTS)) == ["proj-cli", "proj-game"]
        assert plan.section(SectionType.EDUCATION).allocated_lines == 3
        assert plan.total_lines == 33
        assert plan.compression_level is CompressionLevel.NONE

    def test_summary_length_lines(self, allocator):
        config = ResumeConfig(
            include_sections=IncludeSections(summary=True, skills=False, education=False),
            summary_length="long",
        )
        plan = allocator.allocate(ResumeProfile(), config, RelevanceMap())
        assert plan.section(SectionType.SUMMARY).allocated_lines == 4

    def test_skills_lines_capped(self, allocator, sample_profile):
        from resumefit.profile.models import SkillCategory

        profile = sample_profile.model_copy(
            update={"skills": [SkillCategory(category=str(i), skills=["x"]) for i in range(10)]}
        )
        plan = allocator.allocate(profile, ResumeConfig(), RelevanceMap())
        assert plan.section(SectionType.SKILLS).allocated_lines == 6

    def test_education_can_overflow_budget(self, allocator):
        profile = ResumeProfile(
            education=[Education(id=f"edu-{i}", degree="BS") for i in range(20)]
        )
        plan = allocator.allocate(profile, ResumeConfig(), RelevanceMap())

        assert plan.total_lines > 55
        assert plan.compression_level is CompressionLevel.AGGRESSIVE


class TestDeterminism:
    def test_identical_inputs_identical_plans(self, allocator, sample_profile):
        relevance = RelevanceMap(experiences={"exp-acme": 50.0, "exp-shop": 50.0})
        first = allocator.allocate(sample_profile, ResumeConfig(), relevance)
        second = allocator.allocate(sample_profile, ResumeConfig(), relevance)
        assert first.model_dump_json() == second.model_dump_json()

    def test_no_entry_appears_twice(self, allocator, sample_profile):
        plan = allocator.allocate(sample_profile, ResumeConfig(), RelevanceMap())
        ids = [item.id for s in plan.sections for item in s.items or []]
        assert len(ids) == len(set(ids))


class TestCompression:
    @pytest.mark.parametrize(
        ("used", "expected"),
        [
            (40, CompressionLevel.NONE),
            (53, CompressionLevel.LIGHT),
            (56, CompressionLevel.MODERATE),
            (61, CompressionLevel.AGGRESSIVE),
        ],
    )
    def test_levels(self, used, expected):
        assert compression_for(used, 55) is expected


class TestLayoutPlanModel:
    def test_duplicate_items_rejected(self):
        with pytest.raises(ValueError, match="more than once"):
            LayoutPlan.from_dict(
                {
                    "page_count": 1,
                    "sections": [
                        {
                            "type": "experience",
                            "allocated_lines": 4,
                            "items": [{"id": "a", "bullet_count": 1}],
                        },
                        {
                            "type": "projects",
                            "allocated_lines": 3,
                            "items": [{"id": "a", "bullet_count": 1}],
                        },
                    ],
                }
            )

    def test_items_for_missing_section(self):
        plan = LayoutPlan(page_count=1)
        assert plan.items_for(SectionType.PROJECTS) == {}
