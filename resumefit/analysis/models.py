"""Job requirement model produced by job-description analysis."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class _ClosedEnum(str, Enum):
    """String enum with a designated fallback member for unknown labels."""

    @classmethod
    def fallback(cls) -> _ClosedEnum:
        """Member used for unknown labels. Every subclass must override this."""
        raise NotImplementedError(f"{cls.__name__} does not define a fallback member")

    @classmethod
    def coerce(cls, value: object) -> _ClosedEnum:
        """Return the member whose value equals ``value``, else the fallback."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value.strip():
                    return member
        return cls.fallback()


class RoleType(_ClosedEnum):
    PRODUCT_MANAGER = "Product Manager"
    SOFTWARE_ENGINEER = "Software Engineer"
    DATA_SCIENTIST = "Data Scientist"
    DATA_ENGINEER = "Data Engineer"
    ML_ENGINEER = "Machine Learning Engineer"
    TECHNICAL_PROGRAM_MANAGER = "Technical Program Manager"
    UX_DESIGNER = "UX Designer"
    DEVOPS_ENGINEER = "DevOps Engineer"
    FULL_STACK_DEVELOPER = "Full Stack Developer"
    FRONTEND_DEVELOPER = "Frontend Developer"
    BACKEND_DEVELOPER = "Backend Developer"
    MOBILE_DEVELOPER = "Mobile Developer"
    QA_ENGINEER = "QA Engineer"
    SECURITY_ENGINEER = "Security Engineer"
    SOLUTIONS_ARCHITECT = "Solutions Architect"
    ENGINEERING_MANAGER = "Engineering Manager"
    OTHER = "Other"

    @classmethod
    def fallback(cls) -> RoleType:
        return cls.OTHER


class SeniorityLevel(_ClosedEnum):
    INTERN = "Intern"
    ENTRY_LEVEL = "Entry Level"
    ASSOCIATE = "Associate"
    MID_LEVEL = "Mid-Level"
    SENIOR = "Senior"
    STAFF = "Staff"
    PRINCIPAL = "Principal"
    DIRECTOR = "Director"
    VP = "VP"
    EXECUTIVE = "Executive"

    @classmethod
    def fallback(cls) -> SeniorityLevel:
        return cls.MID_LEVEL


class Domain(_ClosedEnum):
    FINANCE = "Finance"
    HEALTHCARE = "Healthcare"
    ECOMMERCE = "E-commerce"
    ENTERPRISE = "Enterprise"
    CONSUMER = "Consumer"
    AI_ML = "AI/ML"
    GAMING = "Gaming"
    MEDIA = "Media"
    EDUCATION = "Education"
    GOVERNMENT = "Government"
    STARTUP = "Startup"
    AGENCY = "Agency"
    OTHER = "Other"

    @classmethod
    def fallback(cls) -> Domain:
        return cls.OTHER


_LABEL_ENUMS: dict[str, type[_ClosedEnum]] = {
    "role_type": RoleType,
    "seniority_level": SeniorityLevel,
    "domain": Domain,
}


def _coerce_label(value: Any, info: ValidationInfo) -> Any:
    # Hand-edited or LLM-produced labels outside the closed set fall back.
    return _LABEL_ENUMS[info.field_name].coerce(value)


Importance = Literal["required", "preferred", "nice-to-have"]


class YearsExperience(BaseModel):
    """Requested years of experience; either bound may be absent."""

    model_config = ConfigDict(frozen=True)

    min: int | None = Field(default=None, ge=0)
    max: int | None = Field(default=None, ge=0)


class SkillCluster(BaseModel):
    """A group of job skills sharing a category and importance."""

    model_config = ConfigDict(frozen=True)

    category: str = Field(default="General")
    skills: list[str] = Field(default_factory=list)
    importance: Importance = Field(default="preferred")


class ImpactTheme(BaseModel):
    """Something the employer values (growth, reliability, ...) and its weight."""

    model_config = ConfigDict(frozen=True)

    theme: str = Field(default="general")
    keywords: list[str] = Field(default_factory=list)
    weight: Annotated[float, Field(ge=0.0, le=1.0)] = 0.5


def dedupe_keywords(values: list[Any] | None) -> list[str]:
    """Strip blanks and case-insensitive repeats, keeping first spelling and order."""
    seen: set[str] = set()
    result: list[str] = []
    for value in values or []:
        if not isinstance(value, str):
            continue
        keyword = value.strip()
        if keyword and keyword.lower() not in seen:
            seen.add(keyword.lower())
            result.append(keyword)
    return result


class JobRequirementModel(BaseModel):
    """Structured view of a job description.

    Immutable once built; every downstream component reads the same instance.
    """

    model_config = ConfigDict(frozen=True)

    job_title: str = Field(default="Unknown Position", description="Job title")
    company: str | None = Field(default=None, description="Hiring company")
    role_type: RoleType = Field(default=RoleType.OTHER)
    seniority_level: SeniorityLevel = Field(default=SeniorityLevel.MID_LEVEL)
    domain: Domain = Field(default=Domain.OTHER)
    years_experience: YearsExperience | None = Field(default=None)
    skill_clusters: list[SkillCluster] = Field(default_factory=list)
    primary_keywords: list[str] = Field(default_factory=list)
    secondary_keywords: list[str] = Field(default_factory=list)
    impact_themes: list[ImpactTheme] = Field(default_factory=list)
    responsibilities: list[str] = Field(default_factory=list)
    requirements: list[str] = Field(default_factory=list)
    preferred_qualifications: list[str] = Field(default_factory=list)
    raw_text: str = Field(default="", description="Original job description text")

    coerce_labels = field_validator(
        "role_type", "seniority_level", "domain", mode="before"
    )(_coerce_label)

    @field_validator("primary_keywords", "secondary_keywords", mode="before")
    @classmethod
    def dedupe_keyword_lists(cls, value: Any) -> list[str]:
        return dedupe_keywords(value)

    @field_validator("secondary_keywords")
    @classmethod
    def drop_primary_repeats(cls, value: list[str], info: ValidationInfo) -> list[str]:
        primary = {keyword.lower() for keyword in info.data.get("primary_keywords", [])}
        return [keyword for keyword in value if keyword.lower() not in primary]

    def all_keywords(self) -> list[str]:
        """Primary keywords followed by secondary keywords."""
        return [*self.primary_keywords, *self.secondary_keywords]

    def skill_tokens(self) -> set[str]:
        """Lower-cased skills across every cluster."""
        return {
            skill.strip().lower()
            for cluster in self.skill_clusters
            for skill in cluster.skills
            if skill.strip()
        }

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> JobRequirementModel:
        """Deserialize from dictionary."""
        return cls.model_validate(data)


class RoleClassification(BaseModel):
    """Role/seniority/domain guess with a confidence in [0, 1]."""

    role_type: RoleType
    seniority_level: SeniorityLevel
    domain: Domain
    confidence: Annotated[float, Field(ge=0.0, le=1.0)] = 0.85

    coerce_labels = field_validator(
        "role_type", "seniority_level", "domain", mode="before"
    )(_coerce_label)
