from pydantic import BaseModel, Field
from typing import List
from datetime import datetime
from enum import Enum

from .base import utcnow


class ParticipationLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class ConnectionQuality(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class SessionAnalyticsSummary(BaseModel):
    """Headline figures attached to a session once it completes"""
    engagement_score: int = 0
    participation_level: ParticipationLevel = ParticipationLevel.MEDIUM
    key_topics: List[str] = Field(default_factory=list)
    sentiment: Sentiment = Sentiment.NEUTRAL
    follow_up_required: bool = False


class EngagementMetrics(BaseModel):
    mentee_participation: int = Field(50, ge=0, le=100)
    mentor_participation: int = Field(50, ge=0, le=100)
    interaction_count: int = 0
    question_count: int = 0


class ContentMetrics(BaseModel):
    topics_covered: List[str] = Field(default_factory=list)
    key_insights: List[str] = Field(default_factory=list)
    action_items_created: int = 0
    resources_shared: int = 0


class OutcomeMetrics(BaseModel):
    goals_achieved: List[str] = Field(default_factory=list)
    next_steps: List[str] = Field(default_factory=list)
    follow_up_scheduled: bool = False
    satisfaction_score: float = 0.0


class TechnicalMetrics(BaseModel):
    connection_quality: ConnectionQuality = ConnectionQuality.EXCELLENT
    platform_used: str = ""
    issues_encountered: List[str] = Field(default_factory=list)


class SessionAnalytics(BaseModel):
    """Detailed analytics record produced once per completed session"""
    session_id: str
    duration: int
    engagement: EngagementMetrics = Field(default_factory=EngagementMetrics)
    content: ContentMetrics = Field(default_factory=ContentMetrics)
    outcomes: OutcomeMetrics = Field(default_factory=OutcomeMetrics)
    technical: TechnicalMetrics = Field(default_factory=TechnicalMetrics)
    generated_at: datetime = Field(default_factory=utcnow)


class UserAnalytics(BaseModel):
    total_sessions: int = 0
    completed_sessions: int = 0
    average_rating: float = 0.0
    total_duration: int = 0
    average_engagement: float = 0.0
    top_topics: List[str] = Field(default_factory=list)
    satisfaction_trend: List[float] = Field(default_factory=list)
