"""Profile-side concept tags ("faang", "ivy league", ...) and their overlap score."""

import logging
from collections.abc import Iterable, Mapping, Sequence

from models.schemas.profile import CareerStage, Education, ProfileRecord

logger = logging.getLogger(__name__)

CONCEPT_BONUS = 3.0

# Categories matched against schools; every other category is matched
# against the current company.
SCHOOL_CONCEPTS = frozenset({"ivy league", "ivy", "top mba", "stanford"})
TOP_MBA = "top mba"
STARTUP = "startup"
UNICORN = "unicorn"

STARTUP_STAGES = frozenset({CareerStage.FOUNDER, CareerStage.EARLY_CAREER})


def _matches_member(value: str, members: Sequence[str]) -> bool:
    return any(m in value or value in m for m in members)


def _is_business_degree(edu: Education) -> bool:
    degree = edu.degree.lower()
    field = (edu.field_of_study or "").lower()
    return "mba" in degree or "business" in degree or "business" in field


def profile_concept_tags(
    profile: ProfileRecord,
    concepts: Mapping[str, Sequence[str]],
) -> frozenset[str]:
    """Categories the profile belongs to.

    Company categories look at the current company only, school categories at
    every education. A top-MBA school only counts for an MBA or a business
    field of study. Founders, early-career members and unicorn employees are
    tagged "startup" as well.
    """
    company = (profile.current_company or "").lower()
    educations = [edu for edu in profile.educations if edu.school_name]

    tags: set[str] = set()
    for concept, members in concepts.items():
        if concept == TOP_MBA:
            hit = any(
                _matches_member(edu.school_name.lower(), members) and _is_business_degree(edu)
                for edu in educations
            )
        elif concept in SCHOOL_CONCEPTS:
            hit = any(_matches_member(edu.school_name.lower(), members) for edu in educations)
        else:
            hit = bool(company) and _matches_member(company, members)
        if hit:
            tags.add(concept)

    if STARTUP in concepts and (profile.career_stage in STARTUP_STAGES or UNICORN in tags):
        tags.add(STARTUP)
    return frozenset(tags)


def score_concepts(
    profile: ProfileRecord,
    query_tags: Iterable[str],
    concepts: Mapping[str, Sequence[str]],
) -> float:
    """+3 per distinct query category the profile belongs to.

    Categories with identical member lists ("ivy" / "ivy league") are one
    category and count once.
    """
    profile_tags = profile_concept_tags(profile, concepts)
    seen: set[tuple[str, ...]] = set()
    score = 0.0
    for tag in sorted(query_tags):
        if tag not in profile_tags:
            continue
        members = tuple(sorted(concepts[tag]))
        if members in seen:
            continue
        seen.add(members)
        score += CONCEPT_BONUS
    if score:
        logger.debug("Concept overlap for %s: +%.1f", profile.name, score)
    return score
