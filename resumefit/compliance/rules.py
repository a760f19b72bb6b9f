"""ATS rule catalogue and the text predicates the checks rely on."""

from __future__ import annotations

import re
from collections import Counter

from resumefit.compliance.models import Rule, Severity


def _rule(rule_id: str, name: str, description: str, severity: Severity) -> Rule:
    return Rule(id=rule_id, name=name, description=description, severity=severity)


ATS_RULES: tuple[Rule, ...] = (
    # Contact
    _rule("contact-email", "Email Required", "Resume must include a valid email address", Severity.ERROR),
    _rule("contact-phone", "Phone Recommended", "Including a phone number improves ATS compatibility", Severity.WARNING),
    _rule("contact-name", "Full Name Required", "Resume must include full name at the top", Severity.ERROR),
    # Sections
    _rule("has-experience", "Work Experience", "Resume should have work experience section", Severity.WARNING),
    _rule("has-skills", "Skills Section", "Resume should have skills section for ATS keyword matching", Severity.WARNING),
    _rule("has-education", "Education Section", "Include education section if relevant", Severity.INFO),
    # Content quality
    _rule("bullet-count", "Bullet Count", "Each experience should have 2-4 bullet points", Severity.WARNING),
    _rule("bullet-metrics", "Quantified Achievements", "Bullet points should include metrics (numbers, percentages)", Severity.WARNING),
    _rule("bullet-action-verbs", "Action Verbs", "Bullets should start with strong action verbs", Severity.WARNING),
    _rule("summary-optional", "Summary Section", "Summary is optional - strong experience sections can stand alone", Severity.INFO),
    # Format
    _rule("date-format", "Standard Date Format", "Dates should use Month Year format (e.g., May 2023)", Severity.WARNING),
    _rule("consistent-dates", "Consistent Dates", "All dates should use the same format", Severity.INFO),
    _rule("no-special-chars", "No Special Characters", "Avoid special characters that may confuse ATS parsers", Severity.WARNING),
    # Layout guarantees of the text renderer
    _rule("no-images", "No Images", "Resume should not contain images, icons, or graphics", Severity.ERROR),
    _rule("single-column", "Single Column Layout", "Resume uses single column layout for ATS compatibility", Severity.ERROR),
    _rule("text-based", "Text-Based Content", "All content must be actual text, not embedded as graphics", Severity.ERROR),
    _rule("standard-fonts", "Standard Fonts", "Using ATS-safe fonts (Times New Roman, Arial, Helvetica)", Severity.INFO),
    _rule("standard-sections", "Standard Section Headings", "Using standard section names (Experience, Education, Skills)", Severity.INFO),
    # Keywords
    _rule("keywords-in-experience", "Keywords in Experience", "JD keywords should appear in experience bullets", Severity.WARNING),
    _rule("keywords-in-skills", "Keywords in Skills", "JD keywords should appear in skills section", Severity.WARNING),
    _rule("no-keyword-stuffing", "No Keyword Stuffing", "Keywords should appear naturally, not repeated excessively", Severity.WARNING),
    # Links
    _rule("links-text-based", "Text-Based Links", "URLs should be written in full, not hidden behind hyperlinks", Severity.INFO),
    _rule("valid-linkedin", "Valid LinkedIn URL", "LinkedIn URL should be in standard format", Severity.INFO),
)

RULES_BY_ID: dict[str, Rule] = {rule.id: rule for rule in ATS_RULES}

_PROBLEMATIC_CHARS = re.compile(r"[│║┃┊┋┆┇▪▫►◄•·∙]")

_STANDARD_DATE = re.compile(
    r"^(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|Jul(?:y)?"
    r"|Aug(?:ust)?|Sep(?:tember)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)[,\s]*\d{4}$"
    r"|^Present$|^Current$|^\d{4}$",
    re.IGNORECASE,
)

_METRIC = re.compile(r"\d+%|\$[\d,]+|\d+x|\d+\+|\d{1,3}(?:,\d{3})*|\d+")

ACTION_VERBS: frozenset[str] = frozenset(
    """
    achieved accelerated accomplished acquired administered advanced analyzed
    applied architected assessed automated balanced built calculated captured
    championed coached collaborated communicated completed conducted configured
    consolidated constructed consulted contributed controlled converted
    coordinated created cultivated customized decreased defined delivered
    demonstrated deployed designed developed devised diagnosed directed
    discovered documented drove earned edited educated eliminated enabled
    engineered enhanced ensured established evaluated exceeded executed
    expanded expedited facilitated finalized formulated founded generated grew
    guided handled headed identified illustrated implemented improved increased
    influenced initiated innovated inspected installed instituted integrated
    introduced invented investigated launched led leveraged maintained managed
    maximized measured mentored migrated minimized modeled modernized modified
    monitored negotiated operated optimized orchestrated organized originated
    overhauled oversaw partnered performed piloted pioneered planned positioned
    prepared presented prioritized processed produced programmed projected
    promoted proposed provided published purchased raised reached realized
    received recommended reconciled recorded recruited redesigned reduced
    refined refactored reformed regulated remodeled reorganized repaired
    replaced reported represented researched resolved restored restructured
    reviewed revised revitalized saved scheduled secured selected served shaped
    simplified solved sourced spearheaded specialized specified standardized
    started streamlined strengthened structured succeeded supervised supported
    surpassed surveyed sustained synchronized systematized targeted taught
    tested tracked trained transferred transformed translated trimmed
    troubleshot unified upgraded utilized validated verified won wrote
    """.split()
)

STUFFING_MIN_WORD_LENGTH = 4
STUFFING_MIN_COUNT = 6
STUFFING_MAX_SHARE = 0.05


def has_problematic_chars(text: str) -> bool:
    """True if ``text`` contains box-drawing or bullet glyphs that trip ATS parsers."""
    return bool(_PROBLEMATIC_CHARS.search(text))


def is_standard_date(value: str) -> bool:
    """Accepts "May 2023", "May, 2023", "September 2021", "2023", "Present", "Current"."""
    return bool(_STANDARD_DATE.match(value.strip()))


def has_metric(text: str) -> bool:
    return bool(_METRIC.search(text))


def starts_with_action_verb(bullet: str) -> bool:
    words = bullet.split()
    return bool(words) and words[0].lower() in ACTION_VERBS


def has_keyword_stuffing(text: str) -> bool:
    """True if some word of 4+ letters appears more than 5 times and in over 5% of words."""
    words = text.lower().split()
    if not words:
        return False
    counts = Counter(word for word in words if len(word) >= STUFFING_MIN_WORD_LENGTH)
    return any(
        count >= STUFFING_MIN_COUNT and count / len(words) > STUFFING_MAX_SHARE
        for count in counts.values()
    )
