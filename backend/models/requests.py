from pydantic import BaseModel, Field

from models.schemas.candidate import Candidate
from models.schemas.profile import ProfileRecord


class ParseRequest(BaseModel):
    query: str = Field(..., max_length=1000, description="Free-text people-search query")


class RankRequest(BaseModel):
    query: str = Field(..., max_length=1000, description="Free-text people-search query")
    candidates: list[Candidate] = Field(
        ..., max_length=1000, description="Candidate pool with recommendation scores"
    )
    k: int = Field(5, ge=1, le=50, description="Number of results to return")
    user_id: str = "anonymous"
    searcher: ProfileRecord | None = Field(None, description="Searcher profile, for alumni matching")
    pro_ids: list[str] = []
    verified_ids: list[str] = []
