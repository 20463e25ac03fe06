# app/api/v1/deps.py
from functools import lru_cache

from app.adapters.recommendation_log import (
    InMemoryRecommendationLog,
    RecommendationLog,
    SqlRecommendationLog,
)
from app.config import settings
from app.db.core import get_engine
from app.domain.services.recommendation import recommend as _recommend


def get_recommend():
    """
    Dependency injection wrapper for the recommend() service.
    Tests override this to swap in a stub.
    """
    return _recommend


@lru_cache(maxsize=1)
def get_recommendation_log() -> RecommendationLog:
    """
    One sink per process: SQL when DATABASE_URL is set, in-memory otherwise.
    """
    engine = get_engine()
    if engine is not None:
        return SqlRecommendationLog(engine)
    return InMemoryRecommendationLog(capacity=settings.memory_log_capacity)
