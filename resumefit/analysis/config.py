"""Configuration for job-description analysis.

The ``ANALYSIS_LLM_*`` settings double as the shared LLM defaults: the
tailoring module falls back to them when its own ``TAILORING_LLM_*`` values are
not set.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnalysisConfig(BaseSettings):
    """Settings for turning job-description text into a JobRequirementModel.

    Example: ANALYSIS_LLM_MODEL=gpt-4o-mini
    """

    model_config = SettingsConfigDict(
        env_prefix="ANALYSIS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    llm_enabled: bool = Field(
        default=True,
        description="Use the LLM; when False only the regex heuristics run",
    )
    llm_provider: str = Field(
        default="openai",
        description="LLM provider (openai, anthropic, azure, etc.)",
    )
    llm_model: str = Field(default="gpt-4o", description="LLM model name")
    llm_api_key: str | None = Field(default=None, description="API key")
    llm_base_url: str | None = Field(
        default=None,
        description="Base URL for OpenAI-compatible endpoints",
    )
    llm_max_retries: Annotated[int, Field(ge=0)] = Field(default=1)
    llm_timeout: Annotated[float, Field(gt=0)] = Field(default=60.0)
    llm_reasoning_effort: str | None = Field(
        default=None,
        description="Reasoning effort for supported models (e.g. 'low', 'medium')",
    )

    max_jd_chars: Annotated[int, Field(gt=0)] = Field(
        default=12000,
        description="Job description text beyond this length is not sent to the LLM",
    )
    classify_chars: Annotated[int, Field(gt=0)] = Field(
        default=1000,
        description="Characters of job text sent for quick role classification",
    )


_analysis_config: AnalysisConfig | None = None


def get_analysis_config() -> AnalysisConfig:
    """Get the analysis configuration singleton."""
    global _analysis_config
    if _analysis_config is None:
        _analysis_config = AnalysisConfig()
    return _analysis_config


def reset_analysis_config() -> None:
    """Reset the configuration singleton (useful for testing)."""
    global _analysis_config
    _analysis_config = None
