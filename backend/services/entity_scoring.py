"""Entity scoring: precise credit for structured-field matches.

An extracted company equal to the profile's current company is stronger
evidence than the same word turning up somewhere in the free text, so entity
hits earn fixed bonuses on top of field-aware scoring.
"""

import logging
from collections.abc import Iterable

from models.schemas.profile import ProfileRecord
from models.schemas.query import QueryEntities
from services.gazetteers import Gazetteer
from services.soft_matching import fuzzy_similarity, time_decay

logger = logging.getLogger(__name__)

CURRENT_COMPANY_BONUS = 5.0
PAST_COMPANY_BONUS = 2.0  # scaled by time decay
CURRENT_ROLE_BONUS = 4.0
SCHOOL_BONUS = 3.0  # per matching education
SKILL_BONUS = 1.0
SKILL_BONUS_CAP = 5.0

PAST_COMPANY_LOOKBACK = 5
ROLE_FUZZY_THRESHOLD = 0.7
SCHOOL_FUZZY_THRESHOLD = 0.85


def _contains_either(a: str, b: str) -> bool:
    return bool(a) and bool(b) and (a in b or b in a)


def _matches_any(value: str, forms: Iterable[str]) -> bool:
    return any(_contains_either(value, form) for form in forms)


def score_entities(
    profile: ProfileRecord,
    entities: QueryEntities,
    gazetteer: Gazetteer,
    reference_year: int,
    half_life: float = 3.0,
) -> float:
    """Fixed bonuses for company, role, school and skill matches.

    ``reference_year`` anchors the past-company time decay so that identical
    inputs always score identically.
    """
    score = 0.0
    companies = [gazetteer.surface_forms(c) for c in sorted(entities.companies)]

    current_company = (profile.current_company or "").lower()
    if current_company and any(_matches_any(current_company, forms) for forms in companies):
        score += CURRENT_COMPANY_BONUS
        logger.debug("Current company match: %s (+%.1f)", current_company, CURRENT_COMPANY_BONUS)

    for exp in profile.work_experiences[:PAST_COMPANY_LOOKBACK]:
        past_company = exp.company_name.lower()
        if any(_matches_any(past_company, forms) for forms in companies):
            end_year = exp.end_year if exp.end_year is not None else reference_year
            weighted = PAST_COMPANY_BONUS * time_decay(reference_year - end_year, half_life)
            score += weighted
            logger.debug("Past company match: %s (+%.2f)", past_company, weighted)

    job_title = (profile.job_title or "").lower()
    if job_title:
        for role in sorted(entities.roles):
            forms = gazetteer.surface_forms(role)
            if _matches_any(job_title, forms) or fuzzy_similarity(job_title, role) > ROLE_FUZZY_THRESHOLD:
                score += CURRENT_ROLE_BONUS
                logger.debug("Role match: %s (+%.1f)", role, CURRENT_ROLE_BONUS)
                break

    for edu in profile.educations:
        school_name = edu.school_name.lower()
        for school in sorted(entities.schools):
            forms = gazetteer.surface_forms(school)
            if _matches_any(school_name, forms) or fuzzy_similarity(school, school_name) > SCHOOL_FUZZY_THRESHOLD:
                score += SCHOOL_BONUS
                logger.debug("School match: %s -> %s (+%.1f)", school, edu.school_name, SCHOOL_BONUS)
                break

    matched_skills = [
        skill for skill in profile.skills
        if any(_contains_either(skill.lower(), wanted) for wanted in entities.skills)
    ]
    if matched_skills:
        score += min(len(matched_skills) * SKILL_BONUS, SKILL_BONUS_CAP)

    return score
