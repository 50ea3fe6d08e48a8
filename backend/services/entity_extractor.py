"""Gazetteer-based entity extraction with fuzzy phrase fallback.

Phrase-first: multi-word dictionary entries are matched against the whole
query (exact substring, then fuzzy over same-length word windows), and the
words they consume are excluded from single-token matching in the same
dictionary. This keeps "university of pennsylvania" from degrading into a bare
"university" hit while still catching single-word mentions like "stanford".
"""

import logging
import re
from collections.abc import Sequence

from models.schemas.query import QueryEntities
from services.gazetteers import Gazetteer
from services.soft_matching import fuzzy_similarity
from services.tokenizer import words

logger = logging.getLogger(__name__)

# Whole-phrase similarity a misspelled window must exceed
# ("stanfrod university" ~ "stanford university" is 0.89)
FUZZY_PHRASE_THRESHOLD = 0.85


def _best_window(
    phrase: str,
    text_words: Sequence[str],
    consumed: set[str],
    threshold: float,
) -> list[str] | None:
    """Most similar run of query words with the phrase's word count, if above threshold.

    Windows touching an already-consumed word are skipped, so an exact match on
    "ui designer" cannot also fuzzily count as "ux designer".
    """
    size = len(phrase.split())
    best: list[str] | None = None
    best_score = threshold
    for start in range(len(text_words) - size + 1):
        window = list(text_words[start:start + size])
        if consumed.intersection(window):
            continue
        score = fuzzy_similarity(" ".join(window), phrase)
        if score > best_score:
            best, best_score = window, score
    return best


def match_phrases(
    text: str,
    dictionary: frozenset[str],
    threshold: float = FUZZY_PHRASE_THRESHOLD,
) -> tuple[set[str], set[str]]:
    """Match multi-word dictionary entries against normalized text.

    Returns (matched phrases, consumed words). Consumed words include both the
    phrase's own words and the query words that fuzzily stood in for them.
    Exact matches are resolved before any fuzzy match is attempted.
    """
    phrases = sorted(p for p in dictionary if " " in p)
    matches: set[str] = set()
    consumed: set[str] = set()

    for phrase in phrases:
        if phrase in text:
            matches.add(phrase)
            consumed.update(phrase.split())

    text_words = words(text)
    for phrase in phrases:
        if phrase in matches:
            continue
        window = _best_window(phrase, text_words, consumed, threshold)
        if window is not None:
            logger.debug("Fuzzy phrase match: %r ~ %s", " ".join(window), phrase)
            matches.add(phrase)
            consumed.update(phrase.split())
            consumed.update(window)

    return matches, consumed


def extract_numbers(text: str) -> tuple[float, ...]:
    """Every digit run in ``text`` as a float, in order of appearance.

    "3.5" yields (3.0, 5.0): the dot is a separator like any other non-digit.
    """
    return tuple(float(run) for run in re.split(r"[^0-9]+", text) if run)


def extract_entities(
    normalized_text: str,
    tokens: Sequence[str],
    gazetteer: Gazetteer,
    threshold: float = FUZZY_PHRASE_THRESHOLD,
) -> QueryEntities:
    """Extract companies, roles, schools, skills and numbers from a query.

    Never raises; a query without dictionary terms yields empty sets.
    """
    found: dict[str, frozenset[str]] = {}
    for field, dictionary in gazetteer.dictionaries().items():
        phrases, consumed = match_phrases(normalized_text, dictionary, threshold)
        singles = {t for t in tokens if t not in consumed and t in dictionary}
        found[field] = frozenset(gazetteer.canonical(m) for m in phrases | singles)

    return QueryEntities(
        companies=found["companies"],
        roles=found["roles"],
        schools=found["schools"],
        skills=found["skills"],
        numbers=extract_numbers(normalized_text),
    )
