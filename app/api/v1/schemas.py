# app/api/v1/schemas.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Dict, Any, Literal, Optional

from app.domain.types import UserProfile

# --- Recommend ---
class RecommendRequest(BaseModel):
    """
    Form payload. Empty businessType means "open to either".
    workEnvironment and education are collected for display/logging only.
    """
    model_config = ConfigDict(populate_by_name=True)

    skills: List[str] = Field(min_length=1)
    experience: str = Field(min_length=1)
    location: str = Field(min_length=1)
    education: Optional[str] = ""
    business_type: Literal["goods", "service", ""] = Field(default="", alias="businessType")
    work_environment: Literal["solo", "team", ""] = Field(default="", alias="workEnvironment")

    @field_validator("skills")
    @classmethod
    def _skills_not_blank(cls, v: List[str]) -> List[str]:
        cleaned = [s.strip() for s in v]
        if any(not s for s in cleaned):
            raise ValueError("skills must not contain blank entries")
        return cleaned

    def to_profile(self) -> UserProfile:
        return UserProfile.build(
            skills=self.skills,
            experience=self.experience,
            location=self.location,
            business_type=self.business_type,
        )


class AlgorithmInfo(BaseModel):
    model: str
    features: List[str]
    trainingData: str
    accuracy: str


class RecommendResponse(BaseModel):
    success: bool = True
    recommendations: List[Dict[str, Any]]
    algorithm: AlgorithmInfo


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    details: Optional[List[Dict[str, Any]]] = None
