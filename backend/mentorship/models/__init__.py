from .base import Clock, TimestampedModel, utcnow
from .analytics import (
    ConnectionQuality,
    ContentMetrics,
    EngagementMetrics,
    OutcomeMetrics,
    ParticipationLevel,
    Sentiment,
    SessionAnalytics,
    SessionAnalyticsSummary,
    TechnicalMetrics,
    UserAnalytics,
)
from .session import (
    ActionItem,
    Assignee,
    ChatMessage,
    MenteeFeedback,
    MentorFeedback,
    ParticipantRole,
    Participants,
    RecordingFormat,
    RecordingQuality,
    ResourceType,
    Session,
    SessionData,
    SessionFeedback,
    SessionRecording,
    SessionResource,
    SessionStatus,
    TechnicalDetails,
    TERMINAL_STATUSES,
    Whiteboard,
)
from .template import (
    Preparation,
    SessionTemplate,
    SessionTemplateCreate,
    TemplateCategory,
    TemplateDifficulty,
    TemplateResource,
)
from .profile import CareerPreferences, LearningPreferences, UserProfile, merge_profile
from .recommendation import (
    CareerInsight,
    Difficulty,
    InsightType,
    LearningPath,
    Milestone,
    PersonalizedRecommendation,
    Priority,
    RecommendationResource,
    RecommendationType,
)
