from pydantic import BaseModel, Field
from typing import Any, Dict, List, Literal, Optional


class LearningPreferences(BaseModel):
    pace: Optional[Literal["slow", "moderate", "fast"]] = None
    format: Optional[Literal["visual", "text", "hands-on", "mixed"]] = None
    time_of_day: Optional[Literal["morning", "afternoon", "evening", "flexible"]] = None
    duration: Optional[Literal["short", "medium", "long"]] = None


class CareerPreferences(BaseModel):
    industry: List[str] = Field(default_factory=list)
    company_size: Literal["startup", "medium", "large", "enterprise", "any"] = "any"
    work_environment: Literal["remote", "hybrid", "office", "any"] = "any"
    salary_expectations: Optional[str] = None
    work_life_balance: Literal["high", "medium", "low"] = "medium"


class UserProfile(BaseModel):
    """Snapshot of a user's profile, owned by an external profile store"""
    id: str
    age: str = ""
    interests: List[str] = Field(default_factory=list)
    goals: List[str] = Field(default_factory=list)
    experience_level: str = ""
    skills: List[str] = Field(default_factory=list)
    learning_preferences: Optional[LearningPreferences] = None
    career_preferences: Optional[CareerPreferences] = None

    def is_empty(self) -> bool:
        """True when the profile carries nothing the engines can personalize on"""
        return not (
            self.interests
            or self.goals
            or self.skills
            or self.learning_preferences
            or self.career_preferences
        )


def merge_profile(profile: Optional[UserProfile], updates: Dict[str, Any]) -> UserProfile:
    """Shallow-overwrite merge: top-level keys in ``updates`` replace the old values"""
    if profile is None:
        return UserProfile.model_validate(updates)
    merged = profile.model_dump()
    merged.update(updates)
    return UserProfile.model_validate(merged)
