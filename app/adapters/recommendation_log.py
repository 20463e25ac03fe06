# app/adapters/recommendation_log.py
"""
Append-only sinks for recommendation audit records.

The scoring pipeline never reads these; the HTTP layer writes one record per
successful call through the dependency in app.api.v1.deps.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from threading import Lock
from typing import Any, Deque, Dict, List, Optional, Protocol

from sqlalchemy.engine import Engine
from sqlmodel import Session

from app.db.models import RecommendationRecord


@dataclass(frozen=True)
class LogEntry:
    user_input: Dict[str, Any]
    algorithm: str
    results: List[Dict[str, Any]]
    user_id: Optional[str] = None  # no auth yet; requests are anonymous
    created_at: datetime = field(default_factory=datetime.utcnow)


class RecommendationLog(Protocol):
    def append(self, entry: LogEntry) -> None: ...


class InMemoryRecommendationLog:
    """Bounded, process-local log. Oldest entries drop first."""

    def __init__(self, capacity: int = 1000):
        self._entries: Deque[LogEntry] = deque(maxlen=capacity)
        self._lock = Lock()

    def append(self, entry: LogEntry) -> None:
        with self._lock:
            self._entries.append(entry)

    def __len__(self) -> int:
        return len(self._entries)

    def snapshot(self) -> List[LogEntry]:
        with self._lock:
            return list(self._entries)


class SqlRecommendationLog:
    def __init__(self, engine: Engine):
        self.engine = engine

    def append(self, entry: LogEntry) -> None:
        row = RecommendationRecord(
            user_id=entry.user_id,
            algorithm=entry.algorithm,
            user_input=entry.user_input,
            results=entry.results,
            created_at=entry.created_at,
        )
        with Session(self.engine) as db:
            db.add(row)
            db.commit()
