# app/cache.py
import hashlib
import json
from typing import Any, Dict, Optional
import redis

from app.config import settings
from app.core.logging import get_logger

log = get_logger("cache")

_redis: Optional[redis.Redis] = None


def get_redis() -> Optional[redis.Redis]:
    global _redis
    if _redis is not None:
        return _redis
    if not settings.redis_url:
        return None
    try:
        _redis = redis.from_url(settings.redis_url, decode_responses=True)
        # quick ping so misconfig fails fast
        _redis.ping()
        return _redis
    except redis.RedisError as e:
        # no Redis → app still works, just without cache
        log.warning("redis unavailable, cache disabled: %s", e)
        _redis = None
        return None


def recommendation_key(algorithm: str, user_input: Dict[str, Any]) -> str:
    """
    recommend:<algorithm>:<sha256 of the canonical request JSON>
    """
    canon = json.dumps(user_input, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    digest = hashlib.sha256(canon.encode("utf-8")).hexdigest()
    return f"recommend:{algorithm}:{digest}"


def cache_get(key: str) -> Optional[Any]:
    r = get_redis()
    if not r:
        return None
    try:
        val = r.get(key)
    except redis.RedisError:
        return None
    if val is None:
        return None
    try:
        return json.loads(val)
    except ValueError:
        return None


def cache_set(key: str, value: Any, ttl_seconds: int = 60) -> None:
    r = get_redis()
    if not r:
        return
    try:
        r.setex(key, ttl_seconds, json.dumps(value))
    except (redis.RedisError, TypeError):
        # fail open: cache errors never block the main path
        pass

