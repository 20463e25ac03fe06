# app/domain/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class BusinessType(str, Enum):
    GOODS = "goods"
    SERVICE = "service"
    BOTH = "both"

    @classmethod
    def parse(cls, value: Optional[str]) -> "BusinessType":
        """Empty or unknown preference means the user is open to either."""
        v = (value or "").strip().lower()
        for member in cls:
            if member.value == v:
                return member
        return cls.BOTH

    def accepts(self, offered: "BusinessType") -> bool:
        """
        True when a template of type `offered` satisfies this requested type:
        the request is open (both), the types agree, or the template is both.
        """
        if self is BusinessType.BOTH:
            return True
        if offered is BusinessType.BOTH:
            return True
        return offered is self


class Experience(str, Enum):
    NONE = "none"
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"


class Location(str, Enum):
    URBAN = "urban"
    SEMI_URBAN = "semi-urban"
    RURAL = "rural"


class AlgorithmHint(str, Enum):
    DEFAULT = "default"
    ML = "ml"

    @classmethod
    def parse(cls, value: Optional[str]) -> "AlgorithmHint":
        return cls.ML if (value or "").strip().lower() == cls.ML.value else cls.DEFAULT


def normalize_skill(skill: str) -> str:
    return skill.strip().lower()


@dataclass(frozen=True)
class UserProfile:
    # experience/location stay raw strings: unrecognized values get default weights
    skills: Tuple[str, ...]
    experience: str
    location: str
    business_type: BusinessType = BusinessType.BOTH

    @classmethod
    def build(
        cls,
        skills,
        experience: str = "",
        location: str = "",
        business_type: Optional[str] = None,
    ) -> "UserProfile":
        return cls(
            skills=tuple(normalize_skill(s) for s in skills),
            experience=(experience or "").strip().lower(),
            location=(location or "").strip().lower(),
            business_type=BusinessType.parse(business_type),
        )


@dataclass(frozen=True)
class BusinessTemplate:
    id: str
    name: str
    type: BusinessType
    skill_keywords: Tuple[str, ...]
    description: str


@dataclass(frozen=True)
class ScoredCandidate(BusinessTemplate):
    raw_score: float
    skill_score: float
    exact_match_count: int
    semantic_match_count: int
    confidence_score: int

    @property
    def ml_score(self) -> float:
        # rawScore is stored after the algorithm-hint multiplier
        return self.raw_score
