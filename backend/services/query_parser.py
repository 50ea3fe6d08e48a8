"""Free-text query -> ParsedQuery.

Pipeline:
    raw text
      ├─ normalize()              → raw_text (lower-cased)
      ├─ tokenize()               → basic tokens
      ├─ extract_entities()       → companies / roles / schools / skills / numbers
      ├─ extract_modifiers()      → negations / emphasis / fuzzy
      ├─ SynonymExpander.expand() → tokens + entity phrases + synonyms
      └─ expand_concepts()        → + category members, concept tags
"""

import logging

from config import Settings, settings as default_settings
from models.schemas.query import ParsedQuery
from services.entity_extractor import extract_entities
from services.expansion import SynonymExpander, expand_concepts
from services.gazetteers import Gazetteer, default_gazetteer
from services.modifiers import MODIFIER_SYMBOLS, extract_modifiers
from services.tokenizer import normalize, tokenize

logger = logging.getLogger(__name__)


class QueryParser:
    """Stateless after construction; safe to share across concurrent searches."""

    def __init__(
        self,
        gazetteer: Gazetteer | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.gazetteer = gazetteer or default_gazetteer()
        self.settings = settings or default_settings
        self._synonyms = SynonymExpander(
            self.gazetteer.synonyms, self.settings.synonym_fanout_cap
        )

    def parse(self, query: str) -> ParsedQuery:
        """Parse a query. Never raises: empty or odd input gives an empty result."""
        normalized = normalize(query)
        stop_words = self.gazetteer.stop_words

        tokens = tokenize(normalized, stop_words)
        entities = extract_entities(
            normalized, tokens, self.gazetteer, self.settings.fuzzy_phrase_threshold
        )
        modifiers = extract_modifiers(tokenize(normalized, stop_words, keep=MODIFIER_SYMBOLS))

        searchable = set(tokens)
        searchable.update(entities.companies, entities.roles, entities.schools, entities.skills)
        searchable = self._synonyms.expand(searchable)
        searchable, concept_tags = expand_concepts(
            searchable, normalized, self.gazetteer.concepts, self.gazetteer.concept_aliases
        )

        parsed = ParsedQuery(
            raw_text=normalized,
            tokens=frozenset(searchable),
            entities=entities,
            modifiers=modifiers,
            concept_tags=concept_tags,
        )
        logger.debug(
            "Parsed query %r: %s (%d tokens, negations=%s)",
            normalized,
            parsed.summary,
            len(parsed.tokens),
            list(modifiers.negations),
        )
        return parsed


def parse_query(query: str, gazetteer: Gazetteer | None = None) -> ParsedQuery:
    """Convenience wrapper around a throwaway QueryParser."""
    return QueryParser(gazetteer).parse(query)
