from pydantic import BaseModel

from models.schemas.query import ParsedQuery, QueryDifficulty, Weights


class EntitiesOut(BaseModel):
    companies: list[str] = []
    roles: list[str] = []
    schools: list[str] = []
    skills: list[str] = []
    numbers: list[float] = []


class ModifiersOut(BaseModel):
    negations: list[str] = []
    emphasis: list[str] = []
    fuzzy: list[str] = []


class ParseResponse(BaseModel):
    raw_text: str = ""
    tokens: list[str] = []
    entities: EntitiesOut = EntitiesOut()
    modifiers: ModifiersOut = ModifiersOut()
    concept_tags: list[str] = []
    difficulty: QueryDifficulty = QueryDifficulty.SIMPLE
    summary: str = ""
    complexity: float = 0.0
    weights: Weights = Weights()

    @classmethod
    def from_parsed(cls, parsed: ParsedQuery, weights: Weights, complexity: float) -> "ParseResponse":
        entities = parsed.entities
        return cls(
            raw_text=parsed.raw_text,
            tokens=sorted(parsed.tokens),
            entities=EntitiesOut(
                companies=sorted(entities.companies),
                roles=sorted(entities.roles),
                schools=sorted(entities.schools),
                skills=sorted(entities.skills),
                numbers=list(entities.numbers),
            ),
            modifiers=ModifiersOut(
                negations=list(parsed.modifiers.negations),
                emphasis=list(parsed.modifiers.emphasis),
                fuzzy=list(parsed.modifiers.fuzzy),
            ),
            concept_tags=sorted(parsed.concept_tags),
            difficulty=parsed.difficulty,
            summary=parsed.summary,
            complexity=round(complexity, 2),
            weights=weights,
        )


class RankedProfile(BaseModel):
    id: str
    name: str = ""
    recommendation_score: float = 0.0
    match_score: float = 0.0
    blended_score: float = 0.0
    signals: dict[str, float] = {}
    is_pro: bool | None = None
    is_verified: bool | None = None


class RankResponse(BaseModel):
    status: str = "ok"
    message: str = ""
    summary: str = ""
    weights: Weights = Weights()
    results: list[RankedProfile] = []
