"""Configuration settings for the tailoring module.

Covers the LLM used for bullet rewrites and summaries. Falls back to the
ANALYSIS_LLM_* settings when TAILORING_LLM_* settings are not set.
"""

from __future__ import annotations

import os
from typing import Annotated

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_PROVIDER = "openai"
_DEFAULT_MODEL = "gpt-4o"


class TailoringConfig(BaseSettings):
    """Configuration for bullet rewriting and summary generation.

    Settings can be overridden via environment variables prefixed with TAILORING_.

    Example: TAILORING_LLM_PROVIDER=anthropic
    Or reuse the analysis settings: ANALYSIS_LLM_PROVIDER=openai
    """

    model_config = SettingsConfigDict(
        env_prefix="TAILORING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    llm_enabled: bool = Field(
        default=True,
        description="Call the LLM; when False original bullets and summary are kept",
    )
    llm_provider: str = Field(
        default=_DEFAULT_PROVIDER,
        description="LLM provider (openai, anthropic, azure, etc.)",
    )
    llm_model: str = Field(default=_DEFAULT_MODEL, description="LLM model name")
    llm_api_key: str | None = Field(
        default=None,
        description="API key for LLM provider",
    )
    llm_base_url: str | None = Field(
        default=None,
        description="Base URL for OpenAI-compatible endpoints",
    )
    llm_max_retries: Annotated[int, Field(ge=0)] = Field(
        default=1,
        description="Maximum retry attempts for LLM calls",
    )
    llm_timeout: Annotated[float, Field(gt=0)] = Field(
        default=60.0,
        description="Timeout in seconds for LLM calls",
    )
    llm_reasoning_effort: str | None = Field(
        default=None,
        description="Reasoning effort for supported models (e.g. 'low', 'medium')",
    )

    rewrite_concurrency: Annotated[int, Field(gt=0)] = Field(
        default=8,
        description="Maximum bullet rewrite requests in flight at once",
    )

    @model_validator(mode="after")
    def apply_analysis_fallbacks(self) -> TailoringConfig:
        """Fall back to ANALYSIS_LLM_* when the TAILORING_* value is unset.

        A value passed to the constructor (anything other than the default)
        always wins.
        """
        if (
            not os.getenv("TAILORING_LLM_PROVIDER")
            and self.llm_provider == _DEFAULT_PROVIDER
        ):
            self.llm_provider = os.getenv("ANALYSIS_LLM_PROVIDER") or self.llm_provider

        if not os.getenv("TAILORING_LLM_MODEL") and self.llm_model == _DEFAULT_MODEL:
            self.llm_model = os.getenv("ANALYSIS_LLM_MODEL") or self.llm_model

        if not os.getenv("TAILORING_LLM_API_KEY") and self.llm_api_key is None:
            self.llm_api_key = os.getenv("ANALYSIS_LLM_API_KEY")

        if not os.getenv("TAILORING_LLM_BASE_URL") and self.llm_base_url is None:
            self.llm_base_url = os.getenv("ANALYSIS_LLM_BASE_URL")

        return self


_tailoring_config: TailoringConfig | None = None


def get_tailoring_config() -> TailoringConfig:
    """Get the tailoring configuration singleton."""
    global _tailoring_config
    if _tailoring_config is None:
        _tailoring_config = TailoringConfig()
    return _tailoring_config


def reset_tailoring_config() -> None:
    """Reset the configuration singleton (useful for testing)."""
    global _tailoring_config
    _tailoring_config = None
