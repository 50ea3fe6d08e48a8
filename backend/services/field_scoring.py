"""Field-aware scoring: token containment weighted by profile zone.

A profile's searchable text is split into disjoint zones. A professional-zone
hit ("google" in the current company) is stronger evidence than an incidental
hobby hit, so zones carry different weights. A token that appears in several
zones scores in each of them.
"""

import logging
from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel

from models.schemas.profile import ProfileRecord
from services.modifiers import EMPHASIS_TRIGGERS, FUZZY_TRIGGERS, NEGATION_TRIGGERS

logger = logging.getLogger(__name__)

TRIGGER_WORDS = NEGATION_TRIGGERS | EMPHASIS_TRIGGERS | FUZZY_TRIGGERS


class FieldZone(str, Enum):
    IDENTITY = "identity"
    PROFESSIONAL = "professional"
    SKILLS = "skills"


DEFAULT_ZONE_WEIGHTS: dict[FieldZone, float] = {
    FieldZone.IDENTITY: 1.0,
    FieldZone.PROFESSIONAL: 3.0,
    FieldZone.SKILLS: 1.5,
}


class ZonedText(BaseModel):
    """Lower-cased, space-joined text per zone."""
    identity: str = ""
    professional: str = ""
    skills: str = ""

    def zone(self, zone: FieldZone) -> str:
        return getattr(self, zone.value)

    @property
    def full(self) -> str:
        return " ".join((self.identity, self.professional, self.skills))


def _join(parts: Iterable[str | None]) -> str:
    return " ".join(p for p in parts if p).lower()


def build_zoned_text(profile: ProfileRecord) -> ZonedText:
    """Partition a profile into identity / professional / skills-and-values text."""
    identity = [profile.name, profile.bio, profile.location]

    professional = [
        profile.current_company,
        profile.job_title,
        profile.industry,
        profile.education,
    ]
    for edu in profile.educations:
        professional.extend([edu.school_name, edu.degree, edu.field_of_study])
    for exp in profile.work_experiences:
        professional.extend([exp.company_name, exp.position])

    skills = [
        *profile.skills,
        *profile.certifications,
        *profile.languages_spoken,
        *profile.hobbies,
        *profile.values_tags,
        profile.self_introduction,
    ]
    for exp in profile.work_experiences:
        skills.append(exp.responsibilities)
        skills.extend(exp.highlighted_skills)

    return ZonedText(
        identity=_join(identity),
        professional=_join(professional),
        skills=_join(skills),
    )


def score_fields(
    profile: ProfileRecord,
    tokens: Iterable[str],
    weights: dict[FieldZone, float] | None = None,
) -> float:
    """Sum of zone weights over every (token, zone) containment hit.

    Words of a multi-word token ("manager" next to "product manager") and
    modifier trigger words ("not", "must", ...) earn no credit of their own.
    """
    weights = weights or DEFAULT_ZONE_WEIGHTS
    zoned = build_zoned_text(profile)
    tokens = set(tokens)
    phrase_words = {word for token in tokens if " " in token for word in token.split()}
    score = 0.0
    hits: list[tuple[str, str]] = []

    for token in sorted(tokens):
        if len(token) < 2 or token in phrase_words or token in TRIGGER_WORDS:
            continue
        for zone in FieldZone:
            if token in zoned.zone(zone):
                score += weights[zone]
                hits.append((token, zone.value))

    if hits:
        logger.debug("Field hits: %s%s", hits[:5], " ..." if len(hits) > 5 else "")
    return score
