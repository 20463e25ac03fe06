import os
from typing import List, Optional
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()


def _csv(value: str) -> List[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


class Settings(BaseModel):
    app_env: str = os.getenv("APP_ENV", "dev")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS: comma-separated list; falls back to the Vite dev server
    cors_origins: List[str] = _csv(os.getenv("CORS_ORIGINS", "")) or ["http://localhost:5173"]

    # Recommendation pipeline
    default_algorithm: str = os.getenv("DEFAULT_ALGORITHM", "default")
    top_n: int = int(os.getenv("TOP_N", "3"))
    min_skill_score: float = float(os.getenv("MIN_SKILL_SCORE", "0.25"))

    # Recommendation log: SQL when configured, in-memory otherwise
    database_url: Optional[str] = os.getenv("DATABASE_URL") or os.getenv("DB_URL") or None
    db_pool_size: int = int(os.getenv("DB_POOL_SIZE", "5"))
    db_max_overflow: int = int(os.getenv("DB_MAX_OVERFLOW", "10"))
    memory_log_capacity: int = int(os.getenv("MEMORY_LOG_CAPACITY", "1000"))

    # Response cache (disabled unless REDIS_URL is set)
    redis_url: Optional[str] = os.getenv("REDIS_URL") or None
    cache_ttl_seconds: int = int(os.getenv("CACHE_TTL_SECONDS", "300"))

settings = Settings()
