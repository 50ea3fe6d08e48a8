"""Soft matching utilities: Gaussian proximity, edit-distance similarity, time decay."""

import logging
from collections.abc import Sequence

import numpy as np
from rapidfuzz.distance import Levenshtein

logger = logging.getLogger(__name__)

# Best experience match is worth this many points
EXPERIENCE_MAX_SCORE = 2.0


def levenshtein(a: str, b: str) -> int:
    """Edit distance (insertions, deletions, substitutions) between two strings."""
    return Levenshtein.distance(a, b)


def fuzzy_similarity(a: str, b: str) -> float:
    """Normalized, case-insensitive edit similarity in [0, 1].

    similarity = (max_len - distance) / max_len; two empty strings score 0.0.
    """
    a, b = a.lower(), b.lower()
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 0.0
    return (max_len - levenshtein(a, b)) / max_len


def gaussian_decay(actual: float, target: float, sigma: float = 2.0) -> float:
    """exp(-(actual - target)^2 / (2 sigma^2)): 1.0 on target, smooth falloff."""
    return float(np.exp(-((actual - target) ** 2) / (2 * sigma**2)))


def soft_experience_match(
    years: float | None,
    targets: Sequence[float],
    sigma: float = 2.0,
) -> float:
    """Best Gaussian proximity between a profile's years and any target, in [0, 2]."""
    if years is None or not targets:
        return 0.0
    best = max(gaussian_decay(years, target, sigma) for target in targets)
    if best > 0.8:
        logger.debug("Experience match: %.1f years ~ %s (%.2f)", years, list(targets), best)
    return best * EXPERIENCE_MAX_SCORE


def time_decay(years_ago: float, half_life: float = 3.0) -> float:
    """Exponential decay weight 0.5 ** (years_ago / half_life)."""
    return 0.5 ** (max(0.0, years_ago) / half_life)
