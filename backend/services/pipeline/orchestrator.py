"""Ranking pipeline: wires parsing, validation, scoring and blending together.

Flow:
    user_id + query + k
      ├─ QueryParser.parse(query)                 → ParsedQuery
      ├─ adjust_weights(raw_text, parsed)         → Weights
      ├─ RecommendationService (pool of N ≥ k)    → list[Candidate]
      │       ↓
      ├─ ProfileStore.get_profiles_batch (chunked) ┐ concurrent
      ├─ BadgeService pro / verified lookups       ┘
      │       ↓
      ├─ signals (field, entity, concept, ...)    → match_score ≥ 0
      ├─ blend rec * w_rec + match * w_text       → blended_score
      ├─ stable sort by rec, then by blended
      └─ top-k → second existence check           → SearchResult
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import date

from config import Settings, settings as default_settings
from models.schemas.candidate import (
    NO_MATCHES_MESSAGE,
    Candidate,
    ScoredCandidate,
    SearchResult,
    SearchStatus,
)
from models.schemas.profile import ProfileRecord
from models.schemas.query import ParsedQuery, Weights
from services.collaborators import BadgeService, ProfileStore, RecommendationService
from services.errors import CollaboratorUnavailable, DegradedLookup
from services.field_scoring import FieldZone
from services.gazetteers import Gazetteer, default_gazetteer
from services.pipeline.base import BaseSignal
from services.pipeline.registry import get_signals
from services.pipeline.signals import ScoringContext
from services.query_parser import QueryParser
from services.weighting import adjust_weights

logger = logging.getLogger(__name__)


class RankingPipeline:
    """One instance can serve many searches; no per-search state is kept on it."""

    def __init__(
        self,
        recommendations: RecommendationService,
        profiles: ProfileStore,
        badges: BadgeService | None = None,
        gazetteer: Gazetteer | None = None,
        settings: Settings | None = None,
        signals: list[BaseSignal] | None = None,
    ) -> None:
        self.recommendations = recommendations
        self.profiles = profiles
        self.badges = badges
        self.settings = settings or default_settings
        self.gazetteer = gazetteer or default_gazetteer()
        self.parser = QueryParser(self.gazetteer, self.settings)
        self.signals = signals if signals is not None else get_signals()
        self.reference_year = self.settings.reference_year or date.today().year
        self.zone_weights = {
            FieldZone.IDENTITY: self.settings.zone_weight_identity,
            FieldZone.PROFESSIONAL: self.settings.zone_weight_professional,
            FieldZone.SKILLS: self.settings.zone_weight_skills,
        }

    def pool_size(self, k: int) -> int:
        return max(k * self.settings.pool_multiplier, self.settings.min_pool_size)

    async def search(
        self,
        user_id: str,
        query: str,
        k: int | None = None,
        searcher: ProfileRecord | None = None,
        force_refresh: bool = False,
    ) -> SearchResult:
        """Rank the user's recommendation pool against a free-text query.

        Raises CollaboratorUnavailable when the recommendation service or the
        profile store fails. An empty pool is not an error: the result has
        status ``empty`` and a rephrasing hint.
        """
        k = k if k is not None else self.settings.default_top_k
        if k < 1:
            raise ValueError(f"k must be positive, got {k}")

        # --- Stage 1: Understand the query ---
        parsed = self.parser.parse(query)
        weights = adjust_weights(parsed.raw_text, parsed)

        # --- Stage 2: Fetch the candidate pool ---
        pool = await self._fetch_pool(user_id, self.pool_size(k), force_refresh)
        if not pool:
            return self._empty(parsed, weights)

        # --- Stage 3: Existence check + badges, concurrently ---
        ids = [c.id for c in pool]
        existing, (pro_ids, verified_ids) = await asyncio.gather(
            self._validate(ids),
            self._badge_status(ids),
        )
        dropped = [i for i in ids if i not in existing]
        if dropped:
            logger.warning("Dropped %d deleted candidates from pool: %s", len(dropped), dropped[:10])
        pool = [
            c.model_copy(update={"profile": existing[c.id]}) for c in pool if c.id in existing
        ]
        if not pool:
            return self._empty(parsed, weights)

        # --- Stage 4: Score, blend, order ---
        scored = [
            self._score(c, parsed, weights, searcher, pro_ids, verified_ids) for c in pool
        ]
        ranked = sorted(scored, key=lambda s: s.candidate.score, reverse=True)
        ranked = sorted(ranked, key=lambda s: s.blended_score, reverse=True)

        # --- Stage 5: Truncate and re-validate ---
        top = ranked[:k]
        still_there = await self._validate([s.candidate.id for s in top])
        results = [s for s in top if s.candidate.id in still_there]
        if len(results) < len(top):
            logger.warning(
                "%d top-%d candidates disappeared before delivery", len(top) - len(results), k
            )

        logger.info(
            "Search for %s: pool=%d scored=%d returned=%d (rec=%.2f text=%.2f)",
            user_id,
            len(ids),
            len(scored),
            len(results),
            weights.recommendation,
            weights.text_match,
        )
        if not results:
            return self._empty(parsed, weights)
        return SearchResult(query=parsed, weights=weights, results=results)

    def _score(
        self,
        candidate: Candidate,
        parsed: ParsedQuery,
        weights: Weights,
        searcher: ProfileRecord | None,
        pro_ids: set[str] | None,
        verified_ids: set[str] | None,
    ) -> ScoredCandidate:
        context = ScoringContext(
            parsed=parsed,
            profile=candidate.profile,
            gazetteer=self.gazetteer,
            settings=self.settings,
            reference_year=self.reference_year,
            searcher=searcher,
            zone_weights=self.zone_weights,
        )
        signals = {s.name: s.contribution(context) for s in self.signals}
        match_score = max(0.0, sum(signals.values()))
        blended = candidate.score * weights.recommendation + match_score * weights.text_match

        return ScoredCandidate(
            candidate=candidate,
            match_score=match_score,
            blended_score=blended,
            signals=signals,
            is_pro=None if pro_ids is None else candidate.id in pro_ids,
            is_verified=None if verified_ids is None else candidate.id in verified_ids,
        )

    async def _fetch_pool(self, user_id: str, limit: int, force_refresh: bool) -> list[Candidate]:
        try:
            return await self.recommendations.get_recommendations(
                user_id, limit, force_refresh=force_refresh
            )
        except Exception as exc:
            logger.error("Recommendation fetch failed for %s: %s", user_id, exc)
            raise CollaboratorUnavailable("recommendation service", str(exc)) from exc

    async def _validate(self, ids: list[str]) -> dict[str, ProfileRecord]:
        """Fetch still-existing profiles in concurrent chunks."""
        if not ids:
            return {}
        size = max(1, self.settings.validation_batch_size)
        chunks = [ids[i:i + size] for i in range(0, len(ids), size)]
        try:
            batches = await asyncio.gather(
                *(self.profiles.get_profiles_batch(chunk) for chunk in chunks)
            )
        except Exception as exc:
            logger.error("Profile validation failed for %d ids: %s", len(ids), exc)
            raise CollaboratorUnavailable("profile store", str(exc)) from exc

        existing: dict[str, ProfileRecord] = {}
        for batch in batches:
            existing.update(batch)
        return existing

    async def _badge_status(self, ids: list[str]) -> tuple[set[str] | None, set[str] | None]:
        """Pro and verified id sets; None for a lookup that is unavailable."""
        if self.badges is None:
            return None, None
        pro, verified = await asyncio.gather(
            self._safe_lookup("pro", self.badges.get_pro_user_ids, ids),
            self._safe_lookup("verified", self.badges.get_verified_user_ids, ids),
        )
        return pro, verified

    async def _safe_lookup(
        self,
        kind: str,
        fetch: Callable[[list[str]], Awaitable[set[str]]],
        ids: list[str],
    ) -> set[str] | None:
        try:
            return await _lookup(kind, fetch, ids)
        except DegradedLookup as exc:
            logger.warning("%s; badge status unknown for %d candidates", exc, len(ids))
            return None

    @staticmethod
    def _empty(parsed: ParsedQuery, weights: Weights) -> SearchResult:
        logger.info("No candidates for query %r", parsed.raw_text)
        return SearchResult(
            query=parsed,
            weights=weights,
            status=SearchStatus.EMPTY,
            message=NO_MATCHES_MESSAGE,
        )


async def _lookup(
    kind: str,
    fetch: Callable[[list[str]], Awaitable[set[str]]],
    ids: list[str],
) -> set[str]:
    try:
        return set(await fetch(ids))
    except Exception as exc:
        raise DegradedLookup(f"{kind} badge lookup failed: {exc}") from exc
