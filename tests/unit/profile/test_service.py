"""Tests for profile loading and validation."""

import json

import pytest

from resumefit.profile.models import ResumeProfile, SkillCategory
from resumefit.profile.service import ProfileService

PROFILE_YAML = """
contact:
  full_name: Jordan Lee
  email: jordan@example.com
  phone: 555-0100
experiences:
  - id: exp-1
    title: Software Engineer
    company: Acme
    start_date: 2021
    end_date: Present
    bullets:
      - Built things
      - "   "
      - Shipped things
skills:
  - category: Languages
    skills: [Python, python, " ", SQL]
education:
  - degree: B.S. Computer Science
    institution: UT
    graduation_date: 2021-05-01
projects:
"""


class TestLoadProfile:
    def test_loads_yaml(self, tmp_path):
        path = tmp_path / "profile.yaml"
        path.write_text(PROFILE_YAML, encoding="utf-8")

        profile = ProfileService().load_profile(path)

        assert profile.contact.full_name == "Jordan Lee"
        assert profile.experiences[0].id == "exp-1"
        assert profile.experiences[0].bullets == ["Built things", "Shipped things"]
        assert profile.experiences[0].start_date == "2021"
        assert profile.education[0].graduation_date == "2021-05-01"
        assert profile.projects == []

    def test_loads_json(self, tmp_path, sample_profile):
        path = tmp_path / "profile.json"
        path.write_text(json.dumps(sample_profile.to_dict()), encoding="utf-8")

        profile = ProfileService().load_profile(path)

        assert profile == sample_profile

    def test_sniffs_unknown_suffix(self, tmp_path):
        json_path = tmp_path / "profile.txt"
        json_path.write_text('{"contact": {"full_name": "A B"}}', encoding="utf-8")
        yaml_path = tmp_path / "profile.conf"
        yaml_path.write_text("contact:\n  full_name: C D\n", encoding="utf-8")

        service = ProfileService()

        assert service.load_profile(json_path).contact.full_name == "A B"
        assert service.load_profile(yaml_path).contact.full_name == "C D"

    def test_empty_file_is_an_empty_profile(self, tmp_path):
        path = tmp_path / "profile.yaml"
        path.write_text("", encoding="utf-8")

        profile = ProfileService().load_profile(path)

        assert profile.experiences == []
        assert profile.contact.email == ""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ProfileService().load_profile(tmp_path / "nope.yaml")

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "profile.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping"):
            ProfileService().load_profile(path)

    def test_invalid_json_rejected(self, tmp_path):
        path = tmp_path / "profile.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            ProfileService().load_profile(path)

    def test_invalid_shape_raises_value_error(self, tmp_path):
        path = tmp_path / "profile.json"
        path.write_text('{"experiences": "not a list"}', encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid profile"):
            ProfileService().load_profile(path)

    def test_repeated_entry_id_across_sections_rejected(self, tmp_path):
        path = tmp_path / "profile.yaml"
        path.write_text(
            "experiences:\n"
            "  - id: '1'\n"
            "    title: Engineer\n"
            "projects:\n"
            "  - id: '1'\n"
            "    title: CLI\n",
            encoding="utf-8",
        )

        with pytest.raises(ValueError, match="Duplicate entry id: 1"):
            ProfileService().load_profile(path)


class TestValidateProfile:
    def test_complete_profile_has_no_warnings(self, sample_profile):
        assert ProfileService().validate_profile(sample_profile) == []

    def test_empty_profile_warnings(self):
        warnings = ProfileService().validate_profile(ResumeProfile())

        assert warnings == [
            "Missing full name",
            "Missing email address",
            "Missing phone number",
            "No work experience entries",
            "Skills list is empty",
        ]


class TestProfileModels:
    def test_generated_ids_are_unique(self):
        profile = ResumeProfile.from_dict(
            {"experiences": [{"title": "A"}, {"title": "B"}]}
        )
        first, second = profile.experiences
        assert first.id and second.id
        assert first.id != second.id

    def test_repeated_experience_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate entry id: exp-1"):
            ResumeProfile.from_dict(
                {"experiences": [{"id": "exp-1"}, {"id": "exp-1", "title": "B"}]}
            )

    def test_ids_checked_across_education_and_certifications(self):
        with pytest.raises(ValueError, match="Duplicate entry id: x"):
            ResumeProfile.from_dict(
                {"education": [{"id": "x"}], "certifications": [{"id": "x"}]}
            )

    def test_none_collections_default_empty(self):
        profile = ResumeProfile.from_dict({"contact": None, "skills": None, "awards": None})
        assert profile.skills == []
        assert profile.awards == []
        assert profile.contact.full_name == ""

    def test_skill_tokens_dedupe_case_insensitively(self):
        profile = ResumeProfile(
            skills=[
                SkillCategory(category="A", skills=["Python", " ", "SQL"]),
                SkillCategory(category="B", skills=["python", "AWS"]),
            ]
        )
        assert profile.skill_tokens() == ["Python", "SQL", "AWS"]
