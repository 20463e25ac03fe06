# app/domain/services/ranking.py
from typing import List, Sequence

from app.domain.types import ScoredCandidate

MIN_SKILL_SCORE = 0.25
TOP_N = 3


def rank(
    candidates: Sequence[ScoredCandidate],
    top_n: int = TOP_N,
    min_skill_score: float = MIN_SKILL_SCORE,
) -> List[ScoredCandidate]:
    """
    Keep candidates with enough skill relevance, order by raw score desc and
    truncate. sorted() is stable, so equal scores keep generation order.
    """
    relevant = [c for c in candidates if c.skill_score >= min_skill_score]
    return sorted(relevant, key=lambda c: c.raw_score, reverse=True)[:top_n]
