# app/api/v1/routers/recommend.py
from typing import Any, Callable, Dict, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from app.adapters.recommendation_log import LogEntry, RecommendationLog
from app.api.v1.deps import get_recommend, get_recommendation_log
from app.api.v1.schemas import ErrorResponse, RecommendRequest, RecommendResponse
from app.cache import cache_get, cache_set, recommendation_key
from app.config import settings
from app.core.logging import get_logger
from app.core.observability import record_recommendation
from app.domain.types import AlgorithmHint

log = get_logger("api.recommend")

router = APIRouter(prefix="/recommend", tags=["recommend"])


@router.post(
    "",
    response_model=RecommendResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def recommend_api(
    req: RecommendRequest,
    algorithm: Optional[str] = Query(default=None, description="default | ml"),
    recommend: Callable[..., Dict[str, Any]] = Depends(get_recommend),
    sink: RecommendationLog = Depends(get_recommendation_log),
):
    """
    POST /recommend?algorithm=default|ml
    - Generates candidate businesses from the user's skills.
    - Scores, filters and keeps the top matches.
    - Attaches resources, mentors, case studies and guidance to each.
    """
    hint = AlgorithmHint.parse(algorithm or settings.default_algorithm)
    user_input = req.model_dump(by_alias=True)

    # only the pure pipeline output is cached; metrics and the audit log run on every call
    key = recommendation_key(hint.value, user_input)
    payload = cache_get(key)
    if payload is not None:
        log.info("recommend cache hit algorithm=%s", hint.value)
    else:
        try:
            payload = recommend(
                req.to_profile(),
                hint,
                top_n=settings.top_n,
                min_skill_score=settings.min_skill_score,
            )
        except Exception:
            log.exception("recommend failed algorithm=%s", hint.value)
            return JSONResponse(
                status_code=500,
                content={"success": False, "error": "Failed to generate recommendations"},
            )
        cache_set(key, payload, ttl_seconds=settings.cache_ttl_seconds)

    results = payload["recommendations"]
    record_recommendation(hint.value, len(results))
    log.info("recommend algorithm=%s skills=%d results=%d", hint.value, len(req.skills), len(results))

    try:
        sink.append(LogEntry(user_input=user_input, algorithm=hint.value, results=results))
    except Exception:
        # audit trail is best-effort; the user still gets their answer
        log.exception("recommendation log append failed")

    return {"success": True, **payload}
