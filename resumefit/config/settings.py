"""Configuration settings for resumefit."""

import json
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from resumefit.rendering.models import DEFAULT_SECTION_ORDER, SectionKind


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field has a default and can be overridden via the environment or a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        enable_decoding=False,
        extra="ignore",
    )

    output_dir: Path = Field(
        default=Path("./artifacts"),
        description="Directory where generated resumes are written",
    )
    default_page_count: Annotated[int, Field(ge=1, le=2)] = Field(
        default=1,
        description="Page budget used when the CLI is not given --pages",
    )
    section_order: list[SectionKind] = Field(
        default_factory=lambda: list(DEFAULT_SECTION_ORDER),
        description="Order in which the text renderer emits sections",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR",
    )

    @field_validator("section_order", mode="before")
    @classmethod
    def parse_section_order(cls, v: object) -> list[str]:
        """Parse SECTION_ORDER from a JSON list or a comma-separated string.

        Duplicates are dropped, keeping the first occurrence.
        """
        if v is None:
            return [kind.value for kind in DEFAULT_SECTION_ORDER]

        if isinstance(v, str):
            raw = v.strip()
            if not raw:
                return [kind.value for kind in DEFAULT_SECTION_ORDER]
            items: list[object]
            if raw.startswith("["):
                try:
                    parsed = json.loads(raw)
                except json.JSONDecodeError as e:
                    raise ValueError(f"Invalid section_order JSON: {e}") from e
                if not isinstance(parsed, list):
                    raise ValueError("section_order JSON must be a list")
                items = parsed
            else:
                items = raw.split(",")
        elif isinstance(v, list | tuple):
            items = list(v)
        else:
            raise ValueError(f"Invalid section_order type: {type(v)}")

        seen: set[str] = set()
        result: list[str] = []
        for item in items:
            value = item.value if isinstance(item, SectionKind) else str(item)
            value = value.strip().lower()
            if value and value not in seen:
                seen.add(value)
                result.append(value)
        return result

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the application settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (useful for testing)."""
    global _settings
    _settings = None
