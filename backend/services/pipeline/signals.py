"""Per-candidate ranking signals.

Each signal wraps one scoring rule from ``services`` so the orchestrator can
sum them uniformly and report a per-signal breakdown.
"""

from dataclasses import dataclass, field

from config import Settings
from models.schemas.profile import ProfileRecord
from models.schemas.query import ParsedQuery
from services.concept_scoring import score_concepts
from services.entity_scoring import score_entities
from services.field_scoring import FieldZone, score_fields
from services.gazetteers import Gazetteer
from services.intent_scoring import alumni_score, intent_bonus, negation_penalty
from services.pipeline.base import BaseSignal
from services.soft_matching import soft_experience_match


@dataclass(frozen=True)
class ScoringContext:
    """Everything a signal may read for one (query, candidate) pair."""
    parsed: ParsedQuery
    profile: ProfileRecord
    gazetteer: Gazetteer
    settings: Settings
    reference_year: int
    searcher: ProfileRecord | None = None
    zone_weights: dict[FieldZone, float] = field(default_factory=dict)


class FieldSignal(BaseSignal):
    name = "field"

    def score(self, context: ScoringContext) -> float:
        return score_fields(context.profile, context.parsed.tokens, context.zone_weights or None)


class EntitySignal(BaseSignal):
    name = "entity"

    def score(self, context: ScoringContext) -> float:
        return score_entities(
            context.profile,
            context.parsed.entities,
            context.gazetteer,
            reference_year=context.reference_year,
            half_life=context.settings.time_decay_half_life,
        )


class ConceptSignal(BaseSignal):
    name = "concept"

    def score(self, context: ScoringContext) -> float:
        return score_concepts(
            context.profile, context.parsed.concept_tags, context.gazetteer.concepts
        )


class ExperienceSignal(BaseSignal):
    name = "experience"

    def score(self, context: ScoringContext) -> float:
        return soft_experience_match(
            context.profile.years_of_experience,
            context.parsed.entities.numbers,
            sigma=context.settings.experience_sigma,
        )


class IntentSignal(BaseSignal):
    name = "intent"

    def score(self, context: ScoringContext) -> float:
        return intent_bonus(context.profile, context.parsed, context.gazetteer.stop_words)


class AlumniSignal(BaseSignal):
    name = "alumni"

    def score(self, context: ScoringContext) -> float:
        return alumni_score(
            context.profile,
            context.parsed,
            context.gazetteer,
            searcher=context.searcher,
            fuzzy_threshold=context.settings.alumni_fuzzy_threshold,
        )


class NegationSignal(BaseSignal):
    name = "negation"
    sign = -1

    def score(self, context: ScoringContext) -> float:
        return negation_penalty(context.profile, context.parsed)
