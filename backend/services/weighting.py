"""Context-aware blend weights between recommendation score and text match.

Short, vague queries ("founder") lean on the recommendation service; long,
entity-dense queries lean on text evidence.
"""

import logging

from models.schemas.query import ParsedQuery, Weights

logger = logging.getLogger(__name__)

SPECIFIC_TERMS = frozenset({"alumni", "alum", "founder", "mentor", "mentoring", "startup"})

DEFAULT_WEIGHTS = (0.3, 0.7)
SHORT_QUERY_WEIGHTS = (0.5, 0.5)  # <= 2 tokens
LONG_QUERY_WEIGHTS = (0.2, 0.8)  # >= 6 tokens

ENTITY_SHIFT = 0.1
NUMBER_SHIFT = 0.1
SPECIFIC_TERM_SHIFT = 0.05
CONCEPT_SHIFT = 0.05

MIN_RECOMMENDATION_WEIGHT = 0.1
MAX_RECOMMENDATION_WEIGHT = 0.9


def adjust_weights(raw_text: str, parsed: ParsedQuery) -> Weights:
    """Pure function of the parsed query. An empty query is all recommendation."""
    tokens = parsed.tokens
    if not tokens:
        logger.debug("No tokens in %r: recommendation-only weights", raw_text)
        return Weights(recommendation=1.0, text_match=0.0)

    if len(tokens) <= 2:
        rec, text = SHORT_QUERY_WEIGHTS
    elif len(tokens) >= 6:
        rec, text = LONG_QUERY_WEIGHTS
    else:
        rec, text = DEFAULT_WEIGHTS

    shifts = []
    if parsed.entity_count >= 3:
        shifts.append(("entities", ENTITY_SHIFT))
    if parsed.entities.numbers:
        shifts.append(("numbers", NUMBER_SHIFT))
    if tokens & SPECIFIC_TERMS:
        shifts.append(("specific terms", SPECIFIC_TERM_SHIFT))
    if parsed.concept_tags:
        shifts.append(("concept tags", CONCEPT_SHIFT))

    for _, amount in shifts:
        text += amount
        rec -= amount

    total = rec + text
    rec /= total
    rec = max(MIN_RECOMMENDATION_WEIGHT, min(MAX_RECOMMENDATION_WEIGHT, rec))
    weights = Weights(recommendation=rec, text_match=1.0 - rec)

    logger.debug(
        "Weights for %r: rec=%.2f text=%.2f (shifts: %s)",
        raw_text,
        weights.recommendation,
        weights.text_match,
        [name for name, _ in shifts] or "none",
    )
    return weights


def query_complexity(parsed: ParsedQuery) -> float:
    """Rough 0-10 complexity estimate, for diagnostics only."""
    entities = parsed.entities
    complexity = len(parsed.tokens) * 0.1
    complexity += (len(entities.companies) + len(entities.roles) + len(entities.schools)) * 0.3
    complexity += len(entities.skills) * 0.2
    if entities.numbers:
        complexity += 0.5
    complexity += len(parsed.modifiers.negations) * 0.2
    complexity += len(parsed.modifiers.emphasis) * 0.2
    return min(complexity, 10.0)
