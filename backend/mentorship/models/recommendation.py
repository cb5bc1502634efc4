from pydantic import BaseModel, Field
from typing import List, Optional
from enum import Enum


class RecommendationType(str, Enum):
    SKILL = "skill"
    COURSE = "course"
    PROJECT = "project"
    CAREER = "career"
    NETWORKING = "networking"
    MENTORSHIP = "mentorship"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class RecommendationResource(BaseModel):
    title: str
    type: str = Field(..., description="course, article, video, book, tool or community")
    url: Optional[str] = None
    description: str = ""


class PersonalizedRecommendation(BaseModel):
    id: str
    type: RecommendationType
    title: str
    description: str
    priority: Priority
    estimated_time: str
    difficulty: Difficulty
    relevance_score: int = Field(..., ge=0, le=100)
    personalization_factors: List[str] = Field(default_factory=list)
    action_items: List[str] = Field(default_factory=list)
    resources: List[RecommendationResource] = Field(default_factory=list)


class Milestone(BaseModel):
    title: str
    description: str
    duration: str
    skills: List[str] = Field(default_factory=list)
    projects: List[str] = Field(default_factory=list)


class LearningPath(BaseModel):
    id: str
    title: str
    description: str
    total_duration: str
    difficulty: Difficulty
    skills: List[str] = Field(default_factory=list)
    milestones: List[Milestone] = Field(default_factory=list)
    personalized_for: List[str] = Field(default_factory=list)


class InsightType(str, Enum):
    OPPORTUNITY = "opportunity"
    WARNING = "warning"
    ACHIEVEMENT = "achievement"
    SUGGESTION = "suggestion"


class CareerInsight(BaseModel):
    type: InsightType
    title: str
    description: str
    impact: str = Field(..., description="low, medium or high")
    timeframe: str = Field(..., description="immediate, short-term, medium-term or long-term")
    action_required: bool
    related_skills: List[str] = Field(default_factory=list)
    market_trends: Optional[List[str]] = None
