"""ATS compliance rule engine."""

from resumefit.compliance.checker import ComplianceChecker
from resumefit.compliance.models import (
    ComplianceReport,
    QuickCheckResult,
    Rule,
    Severity,
    Violation,
)
from resumefit.compliance.rules import ATS_RULES

__all__ = [
    "ATS_RULES",
    "ComplianceChecker",
    "ComplianceReport",
    "QuickCheckResult",
    "Rule",
    "Severity",
    "Violation",
]
