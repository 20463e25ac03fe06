# app/db/core.py

from functools import lru_cache
from typing import Optional
from urllib.parse import urlparse, parse_qsl, urlencode, urlunparse

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

from app.config import settings
from app.core.logging import get_logger

log = get_logger("db")


# ---------------------------------------------------------
# Resolve DATABASE_URL
# ---------------------------------------------------------
def normalize_url(raw: str) -> str:
    """
    - postgres:// -> postgresql+psycopg2://
    - sslmode=require for non-local Postgres hosts
    """
    url = raw.replace("postgres://", "postgresql://", 1)
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+psycopg2://", 1)
    if url.startswith("sqlite"):
        return url

    parsed = urlparse(url)
    host = (parsed.hostname or "").lower()
    is_local = host in ("localhost", "127.0.0.1", "::1")

    query = dict(parse_qsl(parsed.query, keep_blank_values=True))
    if not is_local and "sslmode" not in query:
        query["sslmode"] = "require"
    return urlunparse(parsed._replace(query=urlencode(query)))


def make_engine(raw_url: str) -> Engine:
    url = normalize_url(raw_url)
    if url.startswith("sqlite"):
        # SQLite: no pool sizing, allow use from the threadpool
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )


@lru_cache(maxsize=1)
def get_engine() -> Optional[Engine]:
    """
    Engine for DATABASE_URL, or None when no database is configured.
    """
    if not settings.database_url:
        return None
    engine = make_engine(settings.database_url)
    log.info("database engine ready dialect=%s", engine.dialect.name)
    return engine


# ---------------------------------------------------------
# DB Init
# ---------------------------------------------------------

def init_db(engine: Optional[Engine] = None) -> None:
    """
    Ensure tables exist. Called at startup in app/main.py.
    """
    engine = engine or get_engine()
    if engine is None:
        return
    from app.db import models  # noqa: F401  ensures SQLModel metadata is loaded
    SQLModel.metadata.create_all(engine)

