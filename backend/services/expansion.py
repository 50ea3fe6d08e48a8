"""Token-set expansion through the synonym graph and the concept-tag graph.

Both expansions are monotonic: the output always contains the input tokens.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence

from services.gazetteers import Gazetteer

logger = logging.getLogger(__name__)

# Reverse-direction expansion adds at most this many sibling terms per entry
SYNONYM_FANOUT_CAP = 3


class SynonymExpander:
    """Bidirectional synonym expansion over an abbreviation -> variants table.

    Forward: a key adds all of its variants ("pm" -> "product manager", ...).
    Reverse: a variant adds its key plus up to ``fanout_cap`` of the key's other
    variants. The reverse index is built once here, not per token.
    """

    def __init__(
        self,
        synonyms: Mapping[str, Sequence[str]],
        fanout_cap: int = SYNONYM_FANOUT_CAP,
    ) -> None:
        self._forward: dict[str, tuple[str, ...]] = {k: tuple(v) for k, v in synonyms.items()}
        self._reverse: dict[str, list[str]] = {}
        for key, values in self._forward.items():
            for value in values:
                siblings = [v for v in values if v != value][:fanout_cap]
                self._reverse.setdefault(value, []).extend([key, *siblings])

    def expand(self, tokens: Iterable[str]) -> set[str]:
        tokens = set(tokens)
        expanded = set(tokens)
        for token in tokens:
            expanded.update(self._forward.get(token, ()))
            expanded.update(self._reverse.get(token, ()))
        added = expanded - tokens
        if added:
            logger.debug("Synonyms added: %s", sorted(added))
        return expanded


def expand_synonyms(
    tokens: Iterable[str],
    gazetteer: Gazetteer,
    fanout_cap: int = SYNONYM_FANOUT_CAP,
) -> set[str]:
    """Functional wrapper; prefer a long-lived SynonymExpander on hot paths."""
    return SynonymExpander(gazetteer.synonyms, fanout_cap).expand(tokens)


def expand_concepts(
    tokens: Iterable[str],
    raw_text: str,
    concepts: Mapping[str, Sequence[str]],
    aliases: Mapping[str, str] | None = None,
) -> tuple[set[str], frozenset[str]]:
    """Inject category members for every category key found in the raw query.

    "faang" silently adds google, meta, apple, amazon, netflix, ... and records
    "faang" as a concept tag. An alias ("wall street") fires its category.
    """
    aliases = aliases or {}
    expanded = set(tokens)
    tags: set[str] = set()
    for concept, members in concepts.items():
        spellings = [concept, *(a for a, target in aliases.items() if target == concept)]
        if any(s in raw_text for s in spellings):
            expanded.update(members)
            tags.add(concept)
    if tags:
        logger.debug("Concept tags: %s", sorted(tags))
    return expanded, frozenset(tags)
