"""Tests for application settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from resumefit.config.settings import Settings, get_settings, reset_settings
from resumefit.rendering.models import DEFAULT_SECTION_ORDER, SectionKind

ENV_KEYS = ["OUTPUT_DIR", "DEFAULT_PAGE_COUNT", "SECTION_ORDER", "LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


class TestSettingsDefaults:
    def test_default_values(self):
        settings = Settings(_env_file=None)

        assert settings.output_dir == Path("./artifacts")
        assert settings.default_page_count == 1
        assert settings.section_order == list(DEFAULT_SECTION_ORDER)
        assert settings.log_level == "INFO"

    def test_singleton_is_cached_until_reset(self):
        first = get_settings()
        assert get_settings() is first

        reset_settings()
        assert get_settings() is not first


class TestSettingsFromEnvironment:
    def test_comma_separated_section_order(self, monkeypatch):
        monkeypatch.setenv("SECTION_ORDER", "Experience, skills,education,skills")

        settings = Settings(_env_file=None)

        assert settings.section_order == [
            SectionKind.EXPERIENCE,
            SectionKind.SKILLS,
            SectionKind.EDUCATION,
        ]

    def test_json_section_order(self, monkeypatch):
        monkeypatch.setenv("SECTION_ORDER", '["projects", "summary"]')

        settings = Settings(_env_file=None)

        assert settings.section_order == [SectionKind.PROJECTS, SectionKind.SUMMARY]

    def test_invalid_json_section_order(self, monkeypatch):
        monkeypatch.setenv("SECTION_ORDER", '["projects",')

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_unknown_section_rejected(self, monkeypatch):
        monkeypatch.setenv("SECTION_ORDER", "experience,hobbies")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_log_level_is_uppercased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_page_count_bounds(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_PAGE_COUNT", "3")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_output_dir_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("OUTPUT_DIR", str(tmp_path))
        assert Settings(_env_file=None).output_dir == tmp_path
