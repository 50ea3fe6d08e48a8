"""Structured intent extracted from a free-text people-search query."""

from enum import Enum

from pydantic import BaseModel


class QueryDifficulty(str, Enum):
    SIMPLE = "simple"  # 1-2 tokens or no entities: lean on recommendations
    MODERATE = "moderate"
    COMPLEX = "complex"  # long, entity-dense: lean on text matching


class QueryEntities(BaseModel):
    """Dictionary matches, mapped to canonical form.

    A word consumed by a multi-word phrase match is never also counted as a
    single-word match in the same dictionary.
    """
    companies: frozenset[str] = frozenset()
    roles: frozenset[str] = frozenset()
    schools: frozenset[str] = frozenset()
    skills: frozenset[str] = frozenset()
    numbers: tuple[float, ...] = ()  # order of appearance, duplicates kept

    model_config = {"frozen": True}

    @property
    def count(self) -> int:
        return len(self.companies) + len(self.roles) + len(self.schools) + len(self.skills)


class QueryModifiers(BaseModel):
    """Operand tokens captured right after a trigger word."""
    negations: tuple[str, ...] = ()
    emphasis: tuple[str, ...] = ()
    fuzzy: tuple[str, ...] = ()

    model_config = {"frozen": True}


class ParsedQuery(BaseModel):
    raw_text: str = ""
    tokens: frozenset[str] = frozenset()
    entities: QueryEntities = QueryEntities()
    modifiers: QueryModifiers = QueryModifiers()
    concept_tags: frozenset[str] = frozenset()

    model_config = {"frozen": True}

    @property
    def entity_count(self) -> int:
        return self.entities.count

    @property
    def difficulty(self) -> QueryDifficulty:
        entity_count = (
            len(self.entities.companies)
            + len(self.entities.roles)
            + len(self.entities.schools)
        )
        if len(self.tokens) <= 2 or entity_count == 0:
            return QueryDifficulty.SIMPLE
        if len(self.tokens) <= 5 and entity_count <= 2:
            return QueryDifficulty.MODERATE
        return QueryDifficulty.COMPLEX

    @property
    def summary(self) -> str:
        parts: list[str] = []
        if self.entities.companies:
            parts.append("Company: " + ", ".join(sorted(self.entities.companies)))
        if self.entities.roles:
            parts.append("Role: " + ", ".join(sorted(self.entities.roles)))
        if self.entities.schools:
            parts.append("School: " + ", ".join(sorted(self.entities.schools)))
        if self.entities.numbers:
            parts.append("Years: " + ", ".join(str(int(n)) for n in self.entities.numbers))
        return " | ".join(parts) if parts else "General query"


class Weights(BaseModel):
    """Blend weights for recommendation score vs. text-match score."""
    recommendation: float = 1.0
    text_match: float = 0.0

    model_config = {"frozen": True}
