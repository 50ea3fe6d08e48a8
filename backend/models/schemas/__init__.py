"""Pydantic contracts shared by the query parser and the ranking pipeline."""

from models.schemas.candidate import Candidate, ScoredCandidate, SearchResult, SearchStatus
from models.schemas.profile import (
    CareerStage,
    Education,
    NetworkingIntent,
    ProfileRecord,
    WorkExperience,
)
from models.schemas.query import (
    ParsedQuery,
    QueryDifficulty,
    QueryEntities,
    QueryModifiers,
    Weights,
)

__all__ = [
    "Candidate",
    "CareerStage",
    "Education",
    "NetworkingIntent",
    "ParsedQuery",
    "ProfileRecord",
    "QueryDifficulty",
    "QueryEntities",
    "QueryModifiers",
    "ScoredCandidate",
    "SearchResult",
    "SearchStatus",
    "Weights",
    "WorkExperience",
]
