"""LiteLLM client shared by job analysis, bullet rewriting and summaries.

Wraps ``litellm.acompletion`` with retries, linear backoff and tolerant JSON
extraction. Every failure surfaces as LLMError so callers can fall back to
deterministic output.
"""

from __future__ import annotations

import asyncio
import logging
import warnings
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeVar

from litellm import Timeout, acompletion
from pydantic import BaseModel, ValidationError

from resumefit.tailoring.config import TailoringConfig, get_tailoring_config

if TYPE_CHECKING:
    from resumefit.analysis.config import AnalysisConfig

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)
R = TypeVar("R")

warnings.filterwarnings(
    "ignore",
    message=r"(?s)^Pydantic serializer warnings:.*",
    category=UserWarning,
)


class LLMError(Exception):
    """Raised when an LLM call fails or its answer cannot be parsed."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error


class TailoringLLM:
    """Async LLM client with structured (pydantic) and plain-text output.

    Accepts either a TailoringConfig or an AnalysisConfig; both expose the
    same ``llm_*`` fields.
    """

    def __init__(self, config: TailoringConfig | AnalysisConfig | None = None):
        self.config = config or get_tailoring_config()

    def _get_model_name(self) -> str:
        """Model name with the provider prefix LiteLLM routes on."""
        model = self.config.llm_model
        if "/" in model:
            return model

        # Custom endpoints (proxies, local servers) speak the OpenAI protocol.
        if self.config.llm_base_url and self.config.llm_provider != "anthropic":
            return f"openai/{model}"

        if self.config.llm_provider == "openai":
            return model

        return f"{self.config.llm_provider}/{model}"

    async def generate_structured(
        self,
        prompt: str,
        output_model: type[T],
        system_prompt: str | None = None,
    ) -> T:
        """Generate output validated against ``output_model``.

        Parse and validation errors are not retried.

        Raises:
            LLMError: The call failed after retries, timed out, or the answer
                did not validate.
        """
        messages = self._build_messages(prompt, system_prompt)

        async def call() -> T:
            response = await self._call_completion(messages, response_format=output_model)
            return self._parse_response(response, output_model)

        return await self._with_retries(call)

    async def generate_text(self, prompt: str, system_prompt: str | None = None) -> str:
        """Generate a plain-text answer.

        Raises:
            LLMError: The call failed after retries, timed out, or returned
                no text.
        """
        messages = self._build_messages(prompt, system_prompt)

        async def call() -> str:
            response = await self._call_completion(messages)
            content = response.choices[0].message.content
            if not content or not content.strip():
                raise LLMError("LLM returned an empty response.")
            return content.strip()

        return await self._with_retries(call)

    @staticmethod
    def _build_messages(prompt: str, system_prompt: str | None) -> list[dict]:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})
        return messages

    async def _with_retries(self, call: Callable[[], Awaitable[R]]) -> R:
        max_retries = self.config.llm_max_retries
        for attempt in range(max_retries + 1):
            try:
                return await call()

            except LLMError:
                raise

            except Timeout as e:
                raise LLMError(
                    f"LLM request timed out (timeout={self.config.llm_timeout}s). "
                    "Increase the LLM timeout setting or use a faster model.",
                    e,
                ) from e

            except Exception as e:
                if attempt >= max_retries:
                    raise LLMError(f"LLM call failed after retries: {e}", e) from e

                is_rate_limit = "rate_limit" in str(e).lower() or "429" in str(e)
                wait_time = (8 if is_rate_limit else 2) * (attempt + 1)
                logger.warning(
                    f"LLM call failed (attempt {attempt + 1}), retrying in {wait_time}s: {e}"
                )
                await asyncio.sleep(wait_time)

        raise LLMError("LLM call failed: no attempts were made")

    async def _call_completion(
        self,
        messages: list[dict],
        response_format: type[BaseModel] | None = None,
    ) -> Any:
        kwargs: dict[str, Any] = {
            "model": self._get_model_name(),
            "messages": messages,
            "timeout": self.config.llm_timeout,
        }

        reasoning_effort = _normalize_reasoning_effort(self.config.llm_reasoning_effort)
        if reasoning_effort is not None:
            kwargs["reasoning_effort"] = reasoning_effort
        if self.config.llm_api_key:
            kwargs["api_key"] = self.config.llm_api_key
        if self.config.llm_base_url:
            kwargs["base_url"] = self.config.llm_base_url
        if response_format is not None:
            kwargs["response_format"] = response_format

        return await acompletion(**kwargs)

    def _parse_response(self, response: Any, output_model: type[T]) -> T:
        message = response.choices[0].message
        content = getattr(message, "content", None)

        # Some providers put structured output in tool call arguments instead.
        if content is None:
            tool_calls = getattr(message, "tool_calls", None) or []
            if tool_calls:
                arguments = getattr(getattr(tool_calls[0], "function", None), "arguments", None)
                if isinstance(arguments, str) and arguments.strip():
                    content = arguments

        if content is None:
            raise LLMError("LLM returned no content to parse.")

        try:
            return output_model.model_validate_json(extract_json(content))
        except ValidationError as e:
            raise LLMError(f"Failed to parse LLM response - validation error: {e}", e) from e


def extract_json(content: str) -> str:
    """Pull a JSON document out of a model answer.

    Handles fenced blocks (```json ... ```) and prose before or after the
    first balanced object or array. Returns the input stripped when nothing
    JSON-like is found.
    """
    content = content.strip()

    if content.startswith("```"):
        first_newline = content.find("\n")
        if first_newline != -1:
            content = content[first_newline + 1 :]
        if content.endswith("```"):
            content = content[:-3]
        content = content.strip()

    if content.startswith(("{", "[")):
        return content

    for open_char, close_char in (("{", "}"), ("[", "]")):
        extracted = _extract_balanced(content, open_char, close_char)
        if extracted is not None:
            return extracted

    return content


def _extract_balanced(text: str, open_char: str, close_char: str) -> str | None:
    start = text.find(open_char)
    if start == -1:
        return None

    depth = 0
    for idx in range(start, len(text)):
        ch = text[idx]
        if ch == open_char:
            depth += 1
        elif ch == close_char:
            depth -= 1
            if depth == 0:
                return text[start : idx + 1].strip()
    return None


def _normalize_reasoning_effort(value: str | None) -> str | None:
    if value is None:
        return None
    normalized = str(value).strip().lower()
    if not normalized:
        return None
    if normalized in {"off", "disabled", "0", "false"}:
        return "disable"
    return normalized
