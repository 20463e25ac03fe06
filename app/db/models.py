from __future__ import annotations

from datetime import datetime
from typing import Optional, Any, Dict, List

from sqlalchemy import Index
from sqlmodel import SQLModel, Field, Column, JSON


class RecommendationRecord(SQLModel, table=True):
    """Append-only audit row: one per successful /recommend call."""
    id: Optional[int] = Field(default=None, primary_key=True)
    # anonymous for now; set once requests carry an authenticated user
    user_id: Optional[str] = None
    algorithm: str = "default"
    user_input: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON))
    results: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))
    created_at: datetime = Field(default_factory=datetime.utcnow)

    __table_args__ = (
        Index("ix_recommendation_algorithm_created", "algorithm", "created_at"),
    )
