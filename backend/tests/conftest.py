"""Shared test configuration, pytest markers and fixtures."""

import pytest

from config import Settings
from models.schemas.candidate import Candidate
from models.schemas.profile import (
    CareerStage,
    Education,
    NetworkingIntent,
    ProfileRecord,
    WorkExperience,
)
from services.collaborators import (
    InMemoryBadgeService,
    InMemoryProfileStore,
    StaticRecommendationService,
)
from services.gazetteers import Gazetteer
from services.pipeline.registry import clear as clear_signals

REFERENCE_YEAR = 2025


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end ranking scenarios over the sample pool"
    )


@pytest.fixture(autouse=True)
def _reset_signal_registry():
    clear_signals()
    yield
    clear_signals()


@pytest.fixture
def gazetteer() -> Gazetteer:
    return Gazetteer()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(reference_year=REFERENCE_YEAR, min_pool_size=20, validation_batch_size=2)


@pytest.fixture
def google_pm() -> ProfileRecord:
    return ProfileRecord(
        name="Alice Chen",
        bio="Product person who loves developer tools",
        location="San Francisco",
        current_company="Google",
        job_title="Product Manager",
        industry="Technology",
        years_of_experience=3.2,
        career_stage=CareerStage.MID_LEVEL,
        skills=["Product Strategy", "SQL"],
        work_experiences=[
            WorkExperience(company_name="Google", position="Product Manager", start_year=2022),
            WorkExperience(company_name="Stripe", position="Associate PM", start_year=2020, end_year=2022),
        ],
        educations=[Education(school_name="Stanford University", degree="Bachelor's")],
    )


@pytest.fixture
def founder() -> ProfileRecord:
    return ProfileRecord(
        name="Bob Martinez",
        bio="Two-time founder, now building in climate",
        current_company="Greenloop",
        job_title="Founder & CEO",
        years_of_experience=12,
        career_stage=CareerStage.FOUNDER,
        skills=["Fundraising", "Leadership"],
        educations=[Education(school_name="Harvard Business School", degree="MBA")],
        networking_intents=[NetworkingIntent.SHARE_KNOWLEDGE],
    )


@pytest.fixture
def engineer() -> ProfileRecord:
    return ProfileRecord(
        name="Carol Singh",
        bio="Backend engineer",
        current_company="Meta",
        job_title="Software Engineer",
        years_of_experience=5,
        career_stage=CareerStage.MID_LEVEL,
        skills=["Python", "Go"],
        work_experiences=[
            WorkExperience(company_name="Meta", position="Software Engineer", start_year=2021),
        ],
        educations=[Education(school_name="Carnegie Mellon University", degree="Master's")],
    )


@pytest.fixture
def mentor() -> ProfileRecord:
    return ProfileRecord(
        name="Dana Okafor",
        bio="Engineering leader, happy to mentor",
        current_company="Microsoft",
        job_title="Engineering Manager",
        years_of_experience=15,
        career_stage=CareerStage.MANAGER,
        skills=["Leadership"],
        educations=[Education(school_name="Stanford University", degree="Master's")],
        networking_intents=[NetworkingIntent.SHARE_KNOWLEDGE],
    )


@pytest.fixture
def candidates(google_pm, founder, engineer, mentor) -> list[Candidate]:
    return [
        Candidate(id="u-founder", score=0.9, profile=founder),
        Candidate(id="u-engineer", score=0.7, profile=engineer),
        Candidate(id="u-pm", score=0.5, profile=google_pm),
        Candidate(id="u-mentor", score=0.3, profile=mentor),
    ]


@pytest.fixture
def recommendations(candidates) -> StaticRecommendationService:
    return StaticRecommendationService(candidates)


@pytest.fixture
def profile_store(candidates) -> InMemoryProfileStore:
    return InMemoryProfileStore({c.id: c.profile for c in candidates})


@pytest.fixture
def badges() -> InMemoryBadgeService:
    return InMemoryBadgeService(pro_ids=["u-pm"], verified_ids=["u-pm", "u-mentor"])
