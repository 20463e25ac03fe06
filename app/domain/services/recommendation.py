# app/domain/services/recommendation.py
from typing import Any, Dict, List, Union

from app.core.logging import get_logger
from app.domain.services.enrichment import algorithm_info, enrich
from app.domain.services.generator import generate
from app.domain.services.ranking import MIN_SKILL_SCORE, TOP_N, rank
from app.domain.services.scoring import score
from app.domain.types import AlgorithmHint, ScoredCandidate, UserProfile

log = get_logger("recommendation")

Algorithm = Union[AlgorithmHint, str, None]


def _hint(algorithm: Algorithm) -> AlgorithmHint:
    if isinstance(algorithm, AlgorithmHint):
        return algorithm
    return AlgorithmHint.parse(algorithm)


def rank_candidates(
    profile: UserProfile,
    algorithm: Algorithm = AlgorithmHint.DEFAULT,
    top_n: int = TOP_N,
    min_skill_score: float = MIN_SKILL_SCORE,
) -> List[ScoredCandidate]:
    """
    The pure core: profile -> generated templates -> scored -> filtered top-N.
    No I/O and no shared state; identical inputs give identical output.
    """
    hint = _hint(algorithm)
    templates = generate(profile.skills, profile.business_type)
    scored = [score(t, profile, hint) for t in templates]
    selected = rank(scored, top_n=top_n, min_skill_score=min_skill_score)
    log.debug(
        "rank_candidates algorithm=%s templates=%d selected=%d",
        hint.value, len(templates), len(selected),
    )
    return selected


def recommend(
    profile: UserProfile,
    algorithm: Algorithm = AlgorithmHint.DEFAULT,
    top_n: int = TOP_N,
    min_skill_score: float = MIN_SKILL_SCORE,
) -> Dict[str, Any]:
    """
    Ranked candidates plus static enrichment, shaped as the API payload.
    """
    hint = _hint(algorithm)
    selected = rank_candidates(profile, hint, top_n=top_n, min_skill_score=min_skill_score)
    return {
        "recommendations": [enrich(c, hint) for c in selected],
        "algorithm": algorithm_info(hint),
    }
