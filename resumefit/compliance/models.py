"""ATS compliance report models."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Rule(BaseModel):
    """One entry of the compliance rule catalogue."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    severity: Severity


class Violation(BaseModel):
    """A rule the resume broke, where, and what to do about it."""

    rule: Rule
    location: str | None = None
    suggestion: str | None = None


class ComplianceReport(BaseModel):
    """Result of running the rule catalogue over a generated resume.

    ``violations`` hold error-severity findings and ``warnings`` the rest.
    ``passed`` is true exactly when no finding has error severity.
    """

    passed: bool
    score: Annotated[int, Field(ge=0, le=100)]
    violations: list[Violation] = Field(default_factory=list)
    warnings: list[Violation] = Field(default_factory=list)
    checked_rules: list[Rule] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_passed(self) -> ComplianceReport:
        has_error = any(
            v.rule.severity == Severity.ERROR for v in [*self.violations, *self.warnings]
        )
        if self.passed == has_error:
            raise ValueError("passed must be True exactly when there are no error findings")
        return self

    @property
    def error_count(self) -> int:
        return sum(1 for v in self.violations if v.rule.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for v in self.warnings if v.rule.severity == Severity.WARNING)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ComplianceReport:
        """Deserialize from dictionary."""
        return cls.model_validate(data)


class QuickCheckResult(BaseModel):
    """Lightweight score for live feedback while editing."""

    score: Annotated[int, Field(ge=0, le=100)]
    issues: list[str] = Field(default_factory=list)
