# app/domain/services/scoring.py
"""
Scorer: weighted composite score plus a clamped, user-facing confidence.

    rawScore = 0.60 * skillScore
             + 0.25 | 0.15 | 0   business type fit
             + 0.10 * experience weight
             + 0.05 * location weight

With the "ml" hint the composite is multiplied by ML_BOOST after confidence
has been derived, so the hint only moves ranking, never confidence.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Sequence, Tuple

from app.domain.similarity import semantic_similarity
from app.domain.types import (
    AlgorithmHint,
    BusinessTemplate,
    BusinessType,
    Experience,
    Location,
    ScoredCandidate,
    UserProfile,
)

SKILL_WEIGHT = 0.6
TYPE_EXACT_WEIGHT = 0.25
TYPE_PARTIAL_WEIGHT = 0.15
EXPERIENCE_WEIGHT = 0.1
LOCATION_WEIGHT = 0.05

CONTAINS_MATCH = 0.9
SEMANTIC_CREDIT_THRESHOLD = 0.8
SEMANTIC_COUNT_THRESHOLD = 0.85

EXPERIENCE_SCORES: Mapping[str, float] = {
    Experience.NONE.value: 0.6,
    Experience.BEGINNER.value: 0.75,
    Experience.INTERMEDIATE.value: 0.9,
    Experience.EXPERT.value: 1.0,
}
DEFAULT_EXPERIENCE_SCORE = 0.75

LOCATION_SCORES: Mapping[str, float] = {
    Location.URBAN.value: 1.0,
    Location.SEMI_URBAN.value: 0.9,
    Location.RURAL.value: 0.8,
}
DEFAULT_LOCATION_SCORE = 0.9

CONFIDENCE_MIN = 65
CONFIDENCE_MAX = 98
ML_BOOST = 1.1


@dataclass
class SkillMatch:
    score: float = 0.0
    exact: int = 0
    semantic: int = 0


def match_skills(user_skills: Sequence[str], keywords: Sequence[str]) -> SkillMatch:
    """
    Best credit per user skill against the candidate keywords, averaged over
    user skills and capped at 1.0. Exact and semantic hits are counted over
    every (skill, keyword) pair, not just the best one.
    """
    m = SkillMatch()
    total = 0.0
    for user_skill in user_skills:
        u = user_skill.strip().lower()
        best = 0.0
        for keyword in keywords:
            k = keyword.strip().lower()
            if u == k:
                best = max(best, 1.0)
                m.exact += 1
            elif u in k or k in u:
                best = max(best, CONTAINS_MATCH)
            else:
                sim = semantic_similarity(u, k)
                if sim > SEMANTIC_CREDIT_THRESHOLD:
                    best = max(best, sim)
                    if sim > SEMANTIC_COUNT_THRESHOLD:
                        m.semantic += 1
        total += best
    # empty skills is a caller bug; avoid dividing by zero anyway
    m.score = min(1.0, total / max(len(user_skills), 1))
    return m


def type_fit(requested: BusinessType, offered: BusinessType) -> float:
    if offered is requested:
        return TYPE_EXACT_WEIGHT
    if requested is BusinessType.BOTH or offered is BusinessType.BOTH:
        return TYPE_PARTIAL_WEIGHT
    return 0.0


def experience_score(experience: str) -> float:
    return EXPERIENCE_SCORES.get((experience or "").strip().lower(), DEFAULT_EXPERIENCE_SCORE)


def location_score(location: str) -> float:
    return LOCATION_SCORES.get((location or "").strip().lower(), DEFAULT_LOCATION_SCORE)


def confidence(raw: float, exact: int, semantic: int) -> int:
    # half-up, not banker's rounding
    value = int(math.floor(raw * 100 + 0.5))
    if exact >= 2:
        value += 15
    elif exact >= 1:
        value += 10
    if semantic >= 2:
        value += 8
    return int(min(CONFIDENCE_MAX, max(CONFIDENCE_MIN, value)))


def composite(candidate: BusinessTemplate, profile: UserProfile) -> Tuple[float, SkillMatch]:
    m = match_skills(profile.skills, candidate.skill_keywords)
    raw = m.score * SKILL_WEIGHT
    raw += type_fit(profile.business_type, candidate.type)
    raw += experience_score(profile.experience) * EXPERIENCE_WEIGHT
    raw += location_score(profile.location) * LOCATION_WEIGHT
    return raw, m


def score(
    candidate: BusinessTemplate,
    profile: UserProfile,
    algorithm: AlgorithmHint = AlgorithmHint.DEFAULT,
) -> ScoredCandidate:
    raw, m = composite(candidate, profile)
    boost = ML_BOOST if algorithm is AlgorithmHint.ML else 1.0
    return ScoredCandidate(
        id=candidate.id,
        name=candidate.name,
        type=candidate.type,
        skill_keywords=candidate.skill_keywords,
        description=candidate.description,
        raw_score=raw * boost,
        skill_score=m.score,
        exact_match_count=m.exact,
        semantic_match_count=m.semantic,
        confidence_score=confidence(raw, m.exact, m.semantic),
    )
