"""Query normalization and tokenization."""

import re
from collections.abc import Iterable

from services.gazetteers import STOP_WORDS

_ALNUM_RUN = r"[a-z0-9]+"


def normalize(text: str) -> str:
    """Lower-case and trim a raw query. Idempotent."""
    return text.lower().strip()


def _token_pattern(keep: frozenset[str]) -> re.Pattern:
    symbols = sorted(s for s in keep if not re.fullmatch(_ALNUM_RUN, s))
    alternatives = [_ALNUM_RUN] + [re.escape(s) for s in symbols]
    return re.compile("|".join(alternatives))


def tokenize(
    text: str,
    stop_words: frozenset[str] = STOP_WORDS,
    keep: Iterable[str] = (),
) -> list[str]:
    """Split text into lower-case alphanumeric tokens.

    Anything outside [a-z0-9] separates tokens (including non-ASCII letters).
    Tokens of length 1 and stop-words are dropped. Symbols listed in ``keep``
    are emitted as their own tokens and bypass both filters.
    """
    keep = frozenset(keep)
    pattern = _token_pattern(keep) if keep else re.compile(_ALNUM_RUN)
    tokens = []
    for token in pattern.findall(text.lower()):
        if token in keep:
            tokens.append(token)
        elif len(token) > 1 and token not in stop_words:
            tokens.append(token)
    return tokens


def words(text: str) -> list[str]:
    """Every alphanumeric run in ``text``, unfiltered (used for phrase matching)."""
    return re.findall(_ALNUM_RUN, text.lower())
