"""Boundary of the ranking engine: recommendation, profile and badge services.

The engine only depends on these protocols. The in-memory implementations
back the ``/rank`` endpoint, where the caller supplies the candidate pool, and
the test suite.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Protocol

from models.schemas.candidate import Candidate
from models.schemas.profile import ProfileRecord

logger = logging.getLogger(__name__)


class RecommendationService(Protocol):
    async def get_recommendations(
        self, user_id: str, limit: int, force_refresh: bool = False
    ) -> list[Candidate]: ...


class ProfileStore(Protocol):
    async def get_profiles_batch(self, ids: list[str]) -> dict[str, ProfileRecord]:
        """Profiles that still exist, keyed by id. Absent ids were deleted."""
        ...


class BadgeService(Protocol):
    async def get_pro_user_ids(self, ids: list[str]) -> set[str]: ...

    async def get_verified_user_ids(self, ids: list[str]) -> set[str]: ...


class StaticRecommendationService:
    """Serves a fixed candidate list, highest recommendation score first."""

    def __init__(self, candidates: Iterable[Candidate]) -> None:
        self._candidates = sorted(candidates, key=lambda c: c.score, reverse=True)

    async def get_recommendations(
        self, user_id: str, limit: int, force_refresh: bool = False
    ) -> list[Candidate]:
        pool = [c for c in self._candidates if c.id != user_id][:limit]
        logger.debug("Serving %d static recommendations for %s", len(pool), user_id)
        return pool


class InMemoryProfileStore:
    def __init__(self, profiles: Mapping[str, ProfileRecord] | None = None) -> None:
        self._profiles: dict[str, ProfileRecord] = dict(profiles or {})

    def delete(self, user_id: str) -> None:
        self._profiles.pop(user_id, None)

    async def get_profiles_batch(self, ids: list[str]) -> dict[str, ProfileRecord]:
        return {i: self._profiles[i] for i in ids if i in self._profiles}


class InMemoryBadgeService:
    def __init__(
        self,
        pro_ids: Iterable[str] = (),
        verified_ids: Iterable[str] = (),
    ) -> None:
        self.pro_ids = set(pro_ids)
        self.verified_ids = set(verified_ids)

    async def get_pro_user_ids(self, ids: list[str]) -> set[str]:
        return self.pro_ids.intersection(ids)

    async def get_verified_user_ids(self, ids: list[str]) -> set[str]:
        return self.verified_ids.intersection(ids)
