import logging

from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import ParseRequest, RankRequest
from models.responses import ParseResponse, RankedProfile, RankResponse
from services.collaborators import (
    InMemoryBadgeService,
    InMemoryProfileStore,
    StaticRecommendationService,
)
from services.errors import CollaboratorUnavailable
from services.pipeline.orchestrator import RankingPipeline
from services.query_parser import QueryParser
from services.weighting import adjust_weights, query_complexity

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gazetteer": settings.gazetteer_path or "embedded",
    }


@router.post("/parse", response_model=ParseResponse)
@limiter.limit(settings.rate_limit)
async def parse(request: Request, body: ParseRequest):
    parsed = QueryParser().parse(body.query)
    weights = adjust_weights(parsed.raw_text, parsed)
    return ParseResponse.from_parsed(parsed, weights, query_complexity(parsed))


@router.post("/rank", response_model=RankResponse)
@limiter.limit(settings.rate_limit)
async def rank(request: Request, body: RankRequest):
    pipeline = RankingPipeline(
        recommendations=StaticRecommendationService(body.candidates),
        profiles=InMemoryProfileStore({c.id: c.profile for c in body.candidates}),
        badges=InMemoryBadgeService(body.pro_ids, body.verified_ids),
    )
    try:
        result = await pipeline.search(body.user_id, body.query, k=body.k, searcher=body.searcher)
    except CollaboratorUnavailable as exc:
        logger.error("Ranking failed: %s", exc)
        raise HTTPException(status_code=503, detail="Search is temporarily unavailable, please try again")

    return RankResponse(
        status=result.status.value,
        message=result.message,
        summary=result.query.summary,
        weights=result.weights,
        results=[
            RankedProfile(
                id=s.candidate.id,
                name=s.candidate.profile.name,
                recommendation_score=s.candidate.score,
                match_score=round(s.match_score, 4),
                blended_score=round(s.blended_score, 4),
                signals={k: round(v, 4) for k, v in s.signals.items()},
                is_pro=s.is_pro,
                is_verified=s.is_verified,
            )
            for s in result.results
        ],
    )
