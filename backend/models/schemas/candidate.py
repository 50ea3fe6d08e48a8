"""Ranking inputs and outputs: pooled candidates, scored candidates, results."""

from enum import Enum

from pydantic import BaseModel

from models.schemas.profile import ProfileRecord
from models.schemas.query import ParsedQuery, Weights

NO_MATCHES_MESSAGE = (
    "No matches found. Try rephrasing with concrete details "
    "such as a company, school or seniority."
)


class Candidate(BaseModel):
    """A profile plus its baseline affinity from the recommendation service."""
    id: str
    score: float = 0.0
    profile: ProfileRecord


class ScoredCandidate(BaseModel):
    candidate: Candidate
    match_score: float = 0.0  # >= 0, text evidence after penalties
    blended_score: float = 0.0
    signals: dict[str, float] = {}  # per-signal breakdown for explainability
    is_pro: bool | None = None  # None when the badge lookup failed
    is_verified: bool | None = None


class SearchStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"


class SearchResult(BaseModel):
    query: ParsedQuery
    weights: Weights
    status: SearchStatus = SearchStatus.OK
    results: list[ScoredCandidate] = []
    message: str = ""

    @property
    def ids(self) -> list[str]:
        return [r.candidate.id for r in self.results]
