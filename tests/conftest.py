"""Pytest configuration and shared fixtures."""

import pytest

from resumefit.analysis.models import (
    Domain,
    ImpactTheme,
    JobRequirementModel,
    RoleType,
    SeniorityLevel,
    SkillCluster,
)
from resumefit.profile.models import (
    Certification,
    ContactInfo,
    Education,
    Experience,
    Project,
    ResumeProfile,
    SkillCategory,
)
from resumefit.tailoring.config import TailoringConfig


@pytest.fixture
def sample_profile() -> ResumeProfile:
    """A small but complete profile with stable ids."""
    return ResumeProfile(
        contact=ContactInfo(
            full_name="Jordan Lee",
            email="jordan@example.com",
            phone="555-0100",
            location="Austin, TX",
            linkedin="linkedin.com/in/jordanlee",
        ),
        summary="Backend engineer focused on reliable data services.",
        experiences=[
            Experience(
                id="exp-acme",
                title="Software Engineer",
                company="Acme",
                location="Austin, TX",
                start_date="May 2021",
                end_date="Present",
                bullets=[
                    "Built Python services handling 2M requests per day",
                    "Deployed on AWS with Terraform and Docker",
                    "Reduced p99 latency by 35% through caching",
                ],
            ),
            Experience(
                id="exp-shop",
                title="Barista",
                company="Corner Cafe",
                start_date="Jan 2019",
                end_date="Apr 2021",
                bullets=[
                    "Trained new staff on espresso equipment",
                    "Managed morning inventory",
                ],
            ),
        ],
        projects=[
            Project(
                id="proj-cli",
                title="Deploy CLI",
                tech_stack=["Python", "AWS"],
                link="https://github.com/jordan/deploy-cli",
                bullets=["Automated blue/green deploys for 12 services"],
            ),
            Project(
                id="proj-game",
                title="Pixel Game",
                tech_stack=["Lua"],
                bullets=["Designed 20 levels"],
            ),
        ],
        education=[
            Education(
                id="edu-ut",
                degree="B.S. Computer Science",
                institution="University of Texas",
                graduation_date="May 2021",
                gpa="3.8",
            )
        ],
        skills=[
            SkillCategory(category="Languages", skills=["Python", "SQL"]),
            SkillCategory(category="Cloud", skills=["AWS", "Docker"]),
        ],
        certifications=[
            Certification(id="cert-aws", name="AWS Solutions Architect", date="2022")
        ],
    )


@pytest.fixture
def sample_job() -> JobRequirementModel:
    """A backend job that asks for Python and AWS."""
    return JobRequirementModel(
        job_title="Senior Software Engineer",
        company="Globex",
        role_type=RoleType.SOFTWARE_ENGINEER,
        seniority_level=SeniorityLevel.SENIOR,
        domain=Domain.ENTERPRISE,
        skill_clusters=[
            SkillCluster(category="Languages", skills=["Python", "Go"], importance="required"),
            SkillCluster(category="Cloud", skills=["AWS", "Kubernetes"], importance="preferred"),
        ],
        primary_keywords=["Python", "AWS"],
        secondary_keywords=["Kubernetes"],
        impact_themes=[ImpactTheme(theme="performance", keywords=["latency"], weight=1.0)],
        raw_text="Senior Software Engineer. Python, AWS, Kubernetes.",
    )


@pytest.fixture
def offline_config() -> TailoringConfig:
    """Tailoring config that never calls an LLM."""
    return TailoringConfig(_env_file=None, llm_enabled=False)
