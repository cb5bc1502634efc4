from pydantic import BaseModel, Field, computed_field
from typing import List, Optional
from datetime import datetime
from enum import Enum
import uuid

from .base import TimestampedModel, utcnow
from .analytics import SessionAnalyticsSummary
from ..core.numbers import round_half_up


class SessionStatus(str, Enum):
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"


TERMINAL_STATUSES = frozenset(
    {SessionStatus.COMPLETED, SessionStatus.CANCELLED, SessionStatus.NO_SHOW}
)


class ParticipantRole(str, Enum):
    MENTOR = "mentor"
    MENTEE = "mentee"


class Assignee(str, Enum):
    MENTOR = "mentor"
    MENTEE = "mentee"
    BOTH = "both"


class ResourceType(str, Enum):
    LINK = "link"
    DOCUMENT = "document"
    VIDEO = "video"
    ARTICLE = "article"


class Participants(BaseModel):
    mentor_id: str
    mentee_id: str

    def id_for(self, role: ParticipantRole) -> str:
        return self.mentor_id if role == ParticipantRole.MENTOR else self.mentee_id


class ActionItem(BaseModel):
    id: str
    description: str
    assigned_to: Assignee
    due_date: Optional[str] = None
    completed: bool = False


class SessionResource(BaseModel):
    id: str
    title: str
    url: str
    type: ResourceType


class Whiteboard(BaseModel):
    content: str
    last_modified: datetime = Field(default_factory=utcnow)


class SessionData(BaseModel):
    agenda: List[str] = Field(default_factory=list)
    notes: List[str] = Field(default_factory=list)
    action_items: List[ActionItem] = Field(default_factory=list)
    resources: List[SessionResource] = Field(default_factory=list)
    whiteboard: Optional[Whiteboard] = None


class ChatMessage(BaseModel):
    timestamp: datetime = Field(default_factory=utcnow)
    sender: str
    message: str


class TechnicalDetails(BaseModel):
    meeting_platform: str = ""
    meeting_id: Optional[str] = None
    recording_url: Optional[str] = None
    chat_log: List[ChatMessage] = Field(default_factory=list)


class MentorFeedback(BaseModel):
    rating: Optional[float] = None
    review: Optional[str] = None
    mentee_progress: Optional[str] = None
    recommendations: Optional[List[str]] = None


class MenteeFeedback(BaseModel):
    rating: Optional[float] = None
    review: Optional[str] = None
    session_value: Optional[str] = None
    suggestions: Optional[List[str]] = None


class SessionFeedback(BaseModel):
    mentor: MentorFeedback = Field(default_factory=MentorFeedback)
    mentee: MenteeFeedback = Field(default_factory=MenteeFeedback)


class Session(TimestampedModel):
    """One scheduled mentor-mentee interaction.

    ``duration`` is derived: the actual minutes between start and end once both
    are known, otherwise the planned length supplied by the scheduler.
    """
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    status: SessionStatus = SessionStatus.SCHEDULED
    session_type: str = "general"
    planned_duration: int = Field(default=60, ge=0, description="Planned length in minutes")
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    participants: Participants
    session_data: SessionData = Field(default_factory=SessionData)
    technical_details: TechnicalDetails = Field(default_factory=TechnicalDetails)
    feedback: SessionFeedback = Field(default_factory=SessionFeedback)
    analytics: Optional[SessionAnalyticsSummary] = None

    @computed_field
    @property
    def duration(self) -> int:
        if self.start_time and self.end_time:
            elapsed = (self.end_time - self.start_time).total_seconds()
            return round_half_up(elapsed / 60)
        return self.planned_duration

    def touch(self, now: datetime) -> None:
        self.updated_at = now


class RecordingFormat(str, Enum):
    MP4 = "mp4"
    WEBM = "webm"
    AUDIO = "audio"


class RecordingQuality(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RecordingChapter(BaseModel):
    title: str
    start_time: int
    end_time: int


class SessionRecording(BaseModel):
    id: str = Field(default_factory=lambda: f"recording-{uuid.uuid4().hex}")
    session_id: str
    url: str
    duration: int = 0
    size: int = Field(default=0, description="Size in bytes")
    format: RecordingFormat = RecordingFormat.MP4
    quality: RecordingQuality = RecordingQuality.MEDIUM
    transcript: Optional[str] = None
    chapters: List[RecordingChapter] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
