"""Candidate profile models and loading."""

from resumefit.profile.models import (
    Certification,
    ContactInfo,
    Education,
    Experience,
    Project,
    ResumeProfile,
    SkillCategory,
)
from resumefit.profile.service import ProfileService

__all__ = [
    "Certification",
    "ContactInfo",
    "Education",
    "Experience",
    "Project",
    "ProfileService",
    "ResumeProfile",
    "SkillCategory",
]
