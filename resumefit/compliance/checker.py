"""ATS compliance checking for a generated resume."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resumefit.compliance.models import (
    ComplianceReport,
    QuickCheckResult,
    Rule,
    Severity,
    Violation,
)
from resumefit.compliance.rules import (
    ATS_RULES,
    has_keyword_stuffing,
    has_metric,
    has_problematic_chars,
    is_standard_date,
    starts_with_action_verb,
)
from resumefit.scoring.matchers import round_half_up

if TYPE_CHECKING:
    from resumefit.tailoring.models import GeneratedResume

logger = logging.getLogger(__name__)

ERROR_PENALTY = 20
WARNING_PENALTY = 5
MIN_BULLETS = 2
MAX_BULLETS = 5
MIN_METRIC_RATE = 0.4
MIN_ACTION_VERB_RATE = 0.8


def resume_text(resume: GeneratedResume) -> str:
    """Summary, included rewritten bullets and skills joined by spaces."""
    parts = [
        resume.summary or "",
        *(bullet.rewritten for bullet in resume.included_bullets()),
        *(skill for category in resume.skills for skill in category.skills),
    ]
    return " ".join(part for part in parts if part)


class ComplianceChecker:
    """Runs the fixed rule catalogue over a GeneratedResume."""

    def __init__(self, rules: tuple[Rule, ...] = ATS_RULES) -> None:
        self.rules = rules
        self._by_id = {rule.id: rule for rule in rules}

    def check(self, resume: GeneratedResume) -> ComplianceReport:
        """Check a resume and score it.

        Each error costs 20 points and each warning 5, starting from 100 and
        clamped to [0, 100]. Info findings are never recorded.
        """
        findings: list[Violation] = []

        def flag(rule_id: str, suggestion: str, location: str | None = None) -> None:
            rule = self._by_id.get(rule_id)
            if rule is not None and rule.severity != Severity.INFO:
                findings.append(Violation(rule=rule, suggestion=suggestion, location=location))

        contact = resume.contact
        if not contact.email.strip():
            flag("contact-email", "Add a professional email address")
        if not (contact.phone or "").strip():
            flag("contact-phone", "Consider adding a phone number")
        if len(contact.full_name.strip()) < 2:
            flag("contact-name", "Include your full name")

        included = resume.included_experiences()
        if not included:
            flag("has-experience", "Add work experience section")
        if not resume.skill_tokens():
            flag("has-skills", "Add skills section with relevant keywords")

        for exp in included:
            count = len(exp.rewritten_bullets)
            if count < MIN_BULLETS:
                flag(
                    "bullet-count",
                    f'Add more bullet points to "{exp.title}" role',
                    f"experience.{exp.id}",
                )
            elif count > MAX_BULLETS:
                flag(
                    "bullet-count",
                    f'Consider reducing bullets for "{exp.title}" role',
                    f"experience.{exp.id}",
                )

        bullets = [bullet.rewritten for bullet in resume.included_bullets()]
        denominator = max(len(bullets), 1)

        metric_rate = sum(1 for b in bullets if has_metric(b)) / denominator
        if metric_rate < MIN_METRIC_RATE:
            flag(
                "bullet-metrics",
                f"Only {round_half_up(metric_rate * 100)}% of bullets have metrics. "
                "Add more quantified achievements.",
            )

        verb_rate = sum(1 for b in bullets if starts_with_action_verb(b)) / denominator
        if verb_rate < MIN_ACTION_VERB_RATE:
            flag("bullet-action-verbs", "Start more bullet points with strong action verbs")

        dates = [
            *(d for exp in included for d in (exp.start_date, exp.end_date)),
            *(edu.graduation_date for edu in resume.education),
        ]
        bad_dates = [d for d in dates if d and d.strip() and not is_standard_date(d)]
        if bad_dates:
            flag(
                "date-format",
                f'Use standard date format (e.g., "May 2023"). Found: {bad_dates[0]}',
            )

        text = resume_text(resume)
        if has_problematic_chars(text):
            flag("no-special-chars", "Remove special characters that may confuse ATS parsers")
        if has_keyword_stuffing(text):
            flag(
                "no-keyword-stuffing",
                "Reduce repetition of keywords. Use synonyms or rephrase.",
            )

        violations = [f for f in findings if f.rule.severity == Severity.ERROR]
        warnings = [f for f in findings if f.rule.severity == Severity.WARNING]
        score = 100 - ERROR_PENALTY * len(violations) - WARNING_PENALTY * len(warnings)

        report = ComplianceReport(
            passed=not violations,
            score=max(0, min(100, score)),
            violations=violations,
            warnings=warnings,
            checked_rules=list(self.rules),
        )
        logger.info(
            f"Compliance: score={report.score} errors={len(violations)} "
            f"warnings={len(warnings)}"
        )
        return report

    def quick_check(self, resume: GeneratedResume) -> QuickCheckResult:
        """Cheap score for live feedback; only looks at contact, experience and skills."""
        issues: list[str] = []
        score = 100

        if not resume.contact.email.strip():
            issues.append("Missing email address")
            score -= 20
        if not (resume.contact.phone or "").strip():
            issues.append("Missing phone number")
            score -= 5
        if not resume.included_experiences():
            issues.append("No work experience included")
            score -= 15
        if not resume.skill_tokens():
            issues.append("No skills listed")
            score -= 10

        return QuickCheckResult(score=max(0, score), issues=issues)
