"""Regex fallbacks for job-description analysis.

Each function is pure and independent. Ordered pattern tables are checked
top to bottom and the first hit wins.
"""

from __future__ import annotations

import re
from collections import Counter

from resumefit.analysis.models import (
    Domain,
    JobRequirementModel,
    RoleClassification,
    RoleType,
    SeniorityLevel,
    SkillCluster,
    YearsExperience,
)

UNKNOWN_TITLE = "Unknown Position"

_TITLE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(?:job\s+title|position|role):\s*(.+?)(?:\n|$)", re.IGNORECASE),
    re.compile(
        r"^(.+?(?:Engineer|Developer|Manager|Designer|Scientist|Analyst|Architect))",
        re.IGNORECASE | re.MULTILINE,
    ),
)

TECH_KEYWORDS: tuple[str, ...] = (
    "Python", "JavaScript", "TypeScript", "Java", "C++", "Go", "Rust", "Ruby",
    "PHP", "Swift", "Kotlin", "React", "Angular", "Vue", "Node.js", "Django",
    "Flask", "Spring", "AWS", "Azure", "GCP", "Docker", "Kubernetes", "SQL",
    "NoSQL", "MongoDB", "PostgreSQL", "Redis", "GraphQL", "REST", "API",
    "CI/CD", "Agile", "Scrum", "Machine Learning", "AI", "Deep Learning",
    "TensorFlow", "PyTorch", "Spark", "Hadoop", "Kafka", "Terraform", "Git",
    "Linux", "Jenkins", "Figma", "Jira",
)

_CANONICAL = {keyword.lower(): keyword for keyword in TECH_KEYWORDS}
_TECH_PATTERN = re.compile(
    r"(?<!\w)(" + "|".join(re.escape(k) for k in TECH_KEYWORDS) + r")(?!\w)",
    re.IGNORECASE,
)

_SENIORITY_PATTERNS: tuple[tuple[re.Pattern[str], SeniorityLevel], ...] = (
    (re.compile(r"\bintern\b"), SeniorityLevel.INTERN),
    (re.compile(r"\bentry.?level\b|\bjunior\b|\bnew\s+grad\b"), SeniorityLevel.ENTRY_LEVEL),
    (re.compile(r"\bsenior\b|\bsr\."), SeniorityLevel.SENIOR),
    (re.compile(r"\bstaff\b"), SeniorityLevel.STAFF),
    (re.compile(r"\bprincipal\b"), SeniorityLevel.PRINCIPAL),
    (re.compile(r"\bdirector\b"), SeniorityLevel.DIRECTOR),
    (re.compile(r"\bvp\b|\bvice\s+president\b"), SeniorityLevel.VP),
    (re.compile(r"\b(?:5|6|7|8|9|10)\+?\s*(?:years?|yrs?)\b"), SeniorityLevel.SENIOR),
    (re.compile(r"\b(?:3|4)\+?\s*(?:years?|yrs?)\b"), SeniorityLevel.MID_LEVEL),
)

_ROLE_PATTERNS: tuple[tuple[re.Pattern[str], RoleType], ...] = (
    (re.compile(r"product\s+manag"), RoleType.PRODUCT_MANAGER),
    (re.compile(r"data\s+scien"), RoleType.DATA_SCIENTIST),
    (re.compile(r"machine\s+learning|ml\s+engineer"), RoleType.ML_ENGINEER),
    (re.compile(r"data\s+engineer"), RoleType.DATA_ENGINEER),
    (re.compile(r"full\s*stack"), RoleType.FULL_STACK_DEVELOPER),
    (re.compile(r"front\s*end"), RoleType.FRONTEND_DEVELOPER),
    (re.compile(r"back\s*end"), RoleType.BACKEND_DEVELOPER),
    (re.compile(r"devops|\bsre\b|site\s+reliability"), RoleType.DEVOPS_ENGINEER),
    (re.compile(r"mobile|\bios\b|android"), RoleType.MOBILE_DEVELOPER),
    (re.compile(r"\bux\b|user\s+experience|product\s+design"), RoleType.UX_DESIGNER),
    (re.compile(r"\bqa\b|quality\s+assurance|\btest(?:ing)?\s+engineer"), RoleType.QA_ENGINEER),
    (re.compile(r"security|cybersecurity"), RoleType.SECURITY_ENGINEER),
    (re.compile(r"architect"), RoleType.SOLUTIONS_ARCHITECT),
    (re.compile(r"engineering\s+manag"), RoleType.ENGINEERING_MANAGER),
    (re.compile(r"technical\s+program|\btpm\b"), RoleType.TECHNICAL_PROGRAM_MANAGER),
    (re.compile(r"software|engineer|developer"), RoleType.SOFTWARE_ENGINEER),
)

_YEARS_PATTERN = re.compile(r"(\d+)\+?\s*(?:-\s*(\d+))?\s*years?", re.IGNORECASE)


def extract_job_title(text: str) -> str:
    """Best-effort job title: labelled line, then a title-like prefix, then line one."""
    for pattern in _TITLE_PATTERNS:
        match = pattern.search(text)
        if match and match.group(1).strip():
            return match.group(1).strip()

    first_line = text.split("\n", 1)[0].strip()[:100]
    return first_line or UNKNOWN_TITLE


def extract_keywords(text: str) -> list[str]:
    """Known technology names mentioned in ``text``, canonical spelling, first-seen order."""
    seen: dict[str, None] = {}
    for match in _TECH_PATTERN.finditer(text):
        seen.setdefault(_CANONICAL[match.group(1).lower()], None)
    return list(seen)


def infer_seniority_level(text: str) -> SeniorityLevel:
    lower = text.lower()
    for pattern, level in _SENIORITY_PATTERNS:
        if pattern.search(lower):
            return level
    return SeniorityLevel.MID_LEVEL


def infer_role_type(text: str) -> RoleType:
    lower = text.lower()
    for pattern, role in _ROLE_PATTERNS:
        if pattern.search(lower):
            return role
    return RoleType.OTHER


def infer_years_experience(text: str) -> YearsExperience | None:
    """First "N years" / "N-M years" / "N+ years" mention, if any."""
    match = _YEARS_PATTERN.search(text)
    if not match:
        return None
    upper = int(match.group(2)) if match.group(2) else None
    return YearsExperience(min=int(match.group(1)), max=upper)


def extract_all_keywords(text: str) -> tuple[list[str], list[str]]:
    """Split known keywords into (primary, secondary) by mention frequency.

    The ten most frequent are primary, the next fifteen secondary. Ties keep
    first-mention order.
    """
    keywords = extract_keywords(text)
    lower = text.lower()
    counts = Counter(
        {
            keyword: len(re.findall(re.escape(keyword.lower()), lower))
            for keyword in keywords
        }
    )
    ordered = sorted(keywords, key=lambda keyword: -counts[keyword])
    return ordered[:10], ordered[10:25]


def classify_role(text: str) -> RoleClassification:
    """Heuristic classification, reported with low confidence."""
    return RoleClassification(
        role_type=infer_role_type(text),
        seniority_level=infer_seniority_level(text),
        domain=Domain.OTHER,
        confidence=0.5,
    )


def fallback_analysis(text: str) -> JobRequirementModel:
    """Build a JobRequirementModel from regex heuristics alone."""
    keywords = extract_keywords(text)
    return JobRequirementModel(
        job_title=extract_job_title(text),
        role_type=infer_role_type(text),
        seniority_level=infer_seniority_level(text),
        domain=Domain.OTHER,
        years_experience=infer_years_experience(text),
        skill_clusters=[
            SkillCluster(
                category="Technical Skills",
                skills=keywords,
                importance="required",
            )
        ]
        if keywords
        else [],
        primary_keywords=keywords[:10],
        secondary_keywords=keywords[10:],
        raw_text=text,
    )
