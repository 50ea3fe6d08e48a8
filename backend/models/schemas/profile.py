"""Candidate profile as read from the profile store.

The store owns the shape; the ranking engine only reads these fields.
"""

from enum import Enum

from pydantic import BaseModel


class CareerStage(str, Enum):
    EARLY_CAREER = "Early-career"
    MID_LEVEL = "Mid-level"
    MANAGER = "Manager"
    EXECUTIVE = "Executive"
    FOUNDER = "Founder"


class NetworkingIntent(str, Enum):
    FIND_MENTOR = "Find a mentor"
    EXPLORE_INDUSTRIES = "Explore new industries"
    MAKE_FRIENDS = "Make friends"
    FIND_COLLABORATORS = "Find collaborators"
    RECRUIT_TALENT = "Recruit talent"
    FIND_JOB = "Find job opportunities"
    SHARE_KNOWLEDGE = "Share knowledge"
    BUILD_NETWORK = "Build professional network"


class Education(BaseModel):
    """A single education entry."""
    school_name: str
    degree: str = ""  # display name, e.g. "Bachelor's", "MBA"
    field_of_study: str | None = None
    start_year: int | None = None
    end_year: int | None = None


class WorkExperience(BaseModel):
    """A single work experience entry, most recent first in the profile list."""
    company_name: str
    position: str | None = None
    start_year: int | None = None
    end_year: int | None = None  # None while the job is current
    responsibilities: str | None = None
    highlighted_skills: list[str] = []


class ProfileRecord(BaseModel):
    # Identity
    name: str = ""
    bio: str | None = None
    location: str | None = None

    # Professional background
    current_company: str | None = None
    job_title: str | None = None
    industry: str | None = None
    education: str | None = None  # free-text summary
    years_of_experience: float | None = None
    career_stage: CareerStage | None = None
    skills: list[str] = []
    certifications: list[str] = []
    languages_spoken: list[str] = []
    work_experiences: list[WorkExperience] = []
    educations: list[Education] = []

    # Personality / intent
    hobbies: list[str] = []
    values_tags: list[str] = []
    self_introduction: str | None = None
    networking_intents: list[NetworkingIntent] = []
