"""Rule-based bonuses and penalties: networking intent, alumni ties, negation."""

import logging
from collections.abc import Iterable

from models.schemas.profile import CareerStage, NetworkingIntent, ProfileRecord
from models.schemas.query import ParsedQuery
from services.field_scoring import build_zoned_text
from services.gazetteers import STOP_WORDS, Gazetteer
from services.soft_matching import fuzzy_similarity
from services.tokenizer import tokenize

logger = logging.getLogger(__name__)

MENTOR_TERMS = frozenset({"mentor", "mentoring", "mentorship", "coach", "advisor"})
FOUNDER_TERMS = frozenset({"founder", "cofounder", "entrepreneur", "startup"})
ALUMNI_TERMS = frozenset({"alumni", "alum", "alumnus", "alumna", "classmate"})

SENIOR_STAGES = frozenset({CareerStage.MANAGER, CareerStage.EXECUTIVE, CareerStage.FOUNDER})

MENTOR_SHARING_BONUS = 3.0
MENTOR_SENIORITY_BONUS = 1.5
FOUNDER_STAGE_BONUS = 4.0
FOUNDER_TITLE_BONUS = 2.0

SAME_SCHOOL_BONUS = 10.0
SIMILAR_SCHOOL_BONUS = 6.0
QUERY_SCHOOL_BONUS = 2.0

NEGATION_PENALTY = 10.0


def active_terms(
    parsed: ParsedQuery,
    vocabulary: Iterable[str],
    stop_words: frozenset[str] = STOP_WORDS,
) -> set[str]:
    """Words from ``vocabulary`` the user actually typed and did not negate.

    Synonym expansions are ignored here, otherwise "not founder" would still
    trigger founder intent through its "cofounder" expansion.
    """
    typed = set(tokenize(parsed.raw_text, stop_words)) - set(parsed.modifiers.negations)
    return typed.intersection(vocabulary)


def intent_bonus(
    profile: ProfileRecord,
    parsed: ParsedQuery,
    stop_words: frozenset[str] = STOP_WORDS,
) -> float:
    score = 0.0

    if active_terms(parsed, MENTOR_TERMS, stop_words):
        if NetworkingIntent.SHARE_KNOWLEDGE in profile.networking_intents:
            score += MENTOR_SHARING_BONUS
        if profile.career_stage in SENIOR_STAGES:
            score += MENTOR_SENIORITY_BONUS

    if active_terms(parsed, FOUNDER_TERMS, stop_words):
        if profile.career_stage == CareerStage.FOUNDER:
            score += FOUNDER_STAGE_BONUS
        elif "founder" in (profile.job_title or "").lower():
            score += FOUNDER_TITLE_BONUS

    return score


def _school_names(profile: ProfileRecord | None) -> list[str]:
    if profile is None:
        return []
    return [e.school_name.lower() for e in profile.educations if e.school_name]


def alumni_score(
    candidate: ProfileRecord,
    parsed: ParsedQuery,
    gazetteer: Gazetteer,
    searcher: ProfileRecord | None = None,
    fuzzy_threshold: float = 0.8,
) -> float:
    """Shared-school bonus for alumni queries, plus credit for a named school.

    The searcher comparison only applies when the query asks for alumni and the
    searcher's own profile is known.
    """
    candidate_schools = _school_names(candidate)
    if not candidate_schools:
        return 0.0

    score = 0.0
    searcher_schools = _school_names(searcher)
    if searcher_schools and active_terms(parsed, ALUMNI_TERMS, gazetteer.stop_words):
        if set(searcher_schools) & set(candidate_schools):
            score += SAME_SCHOOL_BONUS
        elif any(
            fuzzy_similarity(mine, theirs) > fuzzy_threshold
            for mine in searcher_schools
            for theirs in candidate_schools
        ):
            score += SIMILAR_SCHOOL_BONUS

    for school in sorted(parsed.entities.schools):
        forms = gazetteer.surface_forms(school)
        if any(f in name or name in f for f in forms for name in candidate_schools):
            score += QUERY_SCHOOL_BONUS
            break

    return score


def negation_penalty(profile: ProfileRecord, parsed: ParsedQuery) -> float:
    """10 points per negated operand that appears in the profile's searchable text."""
    if not parsed.modifiers.negations:
        return 0.0
    text = build_zoned_text(profile).full
    hits = [op for op in parsed.modifiers.negations if op in text]
    if hits:
        logger.debug("Negated terms present for %s: %s", profile.name, hits)
    return NEGATION_PENALTY * len(hits)
