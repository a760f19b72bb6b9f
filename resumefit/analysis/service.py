"""Job description analysis.

Turns free-form job-description text into a JobRequirementModel. The LLM
answer is treated as untrusted JSON: enum labels outside the closed sets fall
back to defaults, and any LLM failure falls back to the regex heuristics.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from resumefit.analysis import heuristics
from resumefit.analysis.config import AnalysisConfig, get_analysis_config
from resumefit.analysis.models import (
    Domain,
    ImpactTheme,
    JobRequirementModel,
    RoleClassification,
    RoleType,
    SeniorityLevel,
    SkillCluster,
    YearsExperience,
)
from resumefit.tailoring.llm import LLMError, TailoringLLM

logger = logging.getLogger(__name__)

_IMPORTANCE_VALUES = {"required", "preferred", "nice-to-have"}


def _options(enum_cls: type) -> str:
    return ", ".join(member.value for member in enum_cls)


ANALYSIS_SYSTEM_PROMPT = """You are an expert job description analyzer. You extract structured information from job descriptions so resumes can be tailored for applicant tracking systems (ATS).

You MUST return ONLY valid JSON matching the requested structure. No markdown, no code fences, no commentary.

Focus on:
- classifying the role type and seniority level accurately
- extracting ALL relevant keywords, explicit and implied
- identifying the domain / industry
- grouping skills by importance (required vs preferred)
- detecting the impact themes the employer values"""

ANALYSIS_USER_PROMPT = """Analyze this job description and return a JSON object with this structure:

{{
  "job_title": "exact job title from the posting",
  "company": "company name if mentioned, else null",
  "role_type": "one of: {role_types}",
  "seniority_level": "one of: {seniority_levels}",
  "domain": "one of: {domains}",
  "years_experience": {{"min": number or null, "max": number or null}},
  "skill_clusters": [
    {{"category": "e.g. Programming Languages, Cloud, Tools", "skills": ["..."], "importance": "required | preferred | nice-to-have"}}
  ],
  "primary_keywords": ["exact phrases from the posting that are critical"],
  "secondary_keywords": ["related terms and synonyms"],
  "impact_themes": [
    {{"theme": "e.g. growth, efficiency, reliability, scale", "keywords": ["..."], "weight": 0.0-1.0}}
  ],
  "responsibilities": ["key responsibilities"],
  "requirements": ["must-have requirements"],
  "preferred_qualifications": ["nice-to-have qualifications"]
}}

Job Description:
{jd_text}"""

CLASSIFY_SYSTEM_PROMPT = (
    "You are a job role classifier. Return ONLY JSON with keys role_type, "
    "seniority_level, domain and confidence (0-1).\n"
    f"role_type is one of: {_options(RoleType)}.\n"
    f"seniority_level is one of: {_options(SeniorityLevel)}.\n"
    f"domain is one of: {_options(Domain)}."
)


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


class JobAnalysisLLMResponse(BaseModel):
    """Raw analysis as returned by the model; every field optional."""

    model_config = ConfigDict(extra="ignore")

    job_title: str | None = None
    company: str | None = None
    role_type: str | None = None
    seniority_level: str | None = None
    domain: str | None = None
    years_experience: dict[str, Any] | None = None
    skill_clusters: list[Any] = Field(default_factory=list)
    primary_keywords: list[str] = Field(default_factory=list)
    secondary_keywords: list[str] = Field(default_factory=list)
    impact_themes: list[Any] = Field(default_factory=list)
    responsibilities: list[str] = Field(default_factory=list)
    requirements: list[str] = Field(default_factory=list)
    preferred_qualifications: list[str] = Field(default_factory=list)

    @field_validator("skill_clusters", "impact_themes", mode="before")
    @classmethod
    def coerce_object_list(cls, v: object) -> list[Any]:
        return v if isinstance(v, list) else []

    @field_validator(
        "primary_keywords",
        "secondary_keywords",
        "responsibilities",
        "requirements",
        "preferred_qualifications",
        mode="before",
    )
    @classmethod
    def coerce_string_list(cls, v: object) -> list[str]:
        return _string_list(v)

    @field_validator("years_experience", mode="before")
    @classmethod
    def coerce_years(cls, v: object) -> dict[str, Any] | None:
        return v if isinstance(v, dict) else None


class RoleClassificationLLMResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role_type: str | None = None
    seniority_level: str | None = None
    domain: str | None = None
    confidence: float | None = None


def _years(raw: dict[str, Any] | None) -> YearsExperience | None:
    if not raw:
        return None

    def bound(value: Any) -> int | None:
        if isinstance(value, bool) or not isinstance(value, int | float):
            return None
        return int(value) if value >= 0 else None

    low, high = bound(raw.get("min")), bound(raw.get("max"))
    if low is None and high is None:
        return None
    return YearsExperience(min=low, max=high)


def _skill_clusters(raw: list[Any]) -> list[SkillCluster]:
    clusters: list[SkillCluster] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        category = item.get("category")
        importance = item.get("importance")
        clusters.append(
            SkillCluster(
                category=category.strip()
                if isinstance(category, str) and category.strip()
                else "General",
                skills=_string_list(item.get("skills")),
                importance=importance if importance in _IMPORTANCE_VALUES else "preferred",
            )
        )
    return clusters


def _impact_themes(raw: list[Any]) -> list[ImpactTheme]:
    themes: list[ImpactTheme] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        theme = item.get("theme")
        weight = item.get("weight")
        if isinstance(weight, bool) or not isinstance(weight, int | float):
            weight = 0.5
        themes.append(
            ImpactTheme(
                theme=theme.strip() if isinstance(theme, str) and theme.strip() else "general",
                keywords=_string_list(item.get("keywords")),
                weight=min(max(float(weight), 0.0), 1.0),
            )
        )
    return themes


def normalize_analysis(raw: JobAnalysisLLMResponse, jd_text: str) -> JobRequirementModel:
    """Map an untrusted LLM answer onto a valid JobRequirementModel."""
    title = (raw.job_title or "").strip() or heuristics.extract_job_title(jd_text)
    return JobRequirementModel(
        job_title=title,
        company=(raw.company or "").strip() or None,
        role_type=RoleType.coerce(raw.role_type),
        seniority_level=SeniorityLevel.coerce(raw.seniority_level),
        domain=Domain.coerce(raw.domain),
        years_experience=_years(raw.years_experience),
        skill_clusters=_skill_clusters(raw.skill_clusters),
        primary_keywords=raw.primary_keywords,
        secondary_keywords=raw.secondary_keywords,
        impact_themes=_impact_themes(raw.impact_themes),
        responsibilities=raw.responsibilities,
        requirements=raw.requirements,
        preferred_qualifications=raw.preferred_qualifications,
        raw_text=jd_text,
    )


class JobAnalysisService:
    """Analyze job descriptions with an LLM, falling back to regex heuristics."""

    def __init__(
        self,
        config: AnalysisConfig | None = None,
        llm: TailoringLLM | None = None,
    ) -> None:
        self.config = config or get_analysis_config()
        self._llm = llm

    @property
    def llm(self) -> TailoringLLM:
        if self._llm is None:
            self._llm = TailoringLLM(self.config)
        return self._llm

    async def analyze(self, jd_text: str) -> JobRequirementModel:
        """Analyze job-description text.

        Never raises for LLM problems; the heuristic analysis is returned
        instead.
        """
        if not jd_text.strip():
            logger.warning("Empty job description; returning heuristic analysis")
            return heuristics.fallback_analysis(jd_text)

        if not self.config.llm_enabled:
            return heuristics.fallback_analysis(jd_text)

        prompt = ANALYSIS_USER_PROMPT.format(
            role_types=_options(RoleType),
            seniority_levels=_options(SeniorityLevel),
            domains=_options(Domain),
            jd_text=jd_text[: self.config.max_jd_chars],
        )
        try:
            raw = await self.llm.generate_structured(
                prompt=prompt,
                output_model=JobAnalysisLLMResponse,
                system_prompt=ANALYSIS_SYSTEM_PROMPT,
            )
        except LLMError as e:
            logger.warning(f"Job analysis LLM call failed, using heuristics: {e}")
            return heuristics.fallback_analysis(jd_text)

        job = normalize_analysis(raw, jd_text)
        logger.info(
            f"Analyzed job '{job.job_title}' as {job.role_type.value} / "
            f"{job.seniority_level.value} ({len(job.primary_keywords)} primary keywords)"
        )
        return job

    async def classify_role(self, jd_text: str) -> RoleClassification:
        """Quick role / seniority / domain classification."""
        if not self.config.llm_enabled or not jd_text.strip():
            return heuristics.classify_role(jd_text)

        try:
            raw = await self.llm.generate_structured(
                prompt=f"Classify this job: {jd_text[: self.config.classify_chars]}",
                output_model=RoleClassificationLLMResponse,
                system_prompt=CLASSIFY_SYSTEM_PROMPT,
            )
        except LLMError as e:
            logger.warning(f"Role classification failed, using heuristics: {e}")
            return heuristics.classify_role(jd_text)

        confidence = raw.confidence if raw.confidence else 0.7
        return RoleClassification(
            role_type=RoleType.coerce(raw.role_type),
            seniority_level=SeniorityLevel.coerce(raw.seniority_level),
            domain=Domain.coerce(raw.domain),
            confidence=min(max(confidence, 0.0), 1.0),
        )

    def infer_level(self, jd_text: str) -> tuple[SeniorityLevel, YearsExperience | None]:
        """Seniority plus any years-of-experience range stated in the text."""
        return (
            heuristics.infer_seniority_level(jd_text),
            heuristics.infer_years_experience(jd_text),
        )

    def extract_all_keywords(self, jd_text: str) -> tuple[list[str], list[str]]:
        return heuristics.extract_all_keywords(jd_text)
