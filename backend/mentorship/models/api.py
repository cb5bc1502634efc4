from pydantic import BaseModel, Field
from typing import Any, Dict, Optional

from .profile import UserProfile
from .session import Assignee, RecordingFormat, RecordingQuality, ResourceType


# Sessions
class SessionCreate(BaseModel):
    """Scheduling payload; the new session always starts in the scheduled state"""
    id: Optional[str] = None
    mentor_id: str
    mentee_id: str
    session_type: str = "general"
    planned_duration: int = Field(60, ge=0)
    meeting_platform: str = ""
    meeting_id: Optional[str] = None


class ActorRequest(BaseModel):
    actor_id: str


class CancelRequest(ActorRequest):
    reason: Optional[str] = None


# Session content
class AgendaItemRequest(BaseModel):
    item: str


class NoteRequest(BaseModel):
    text: str
    author: str


class ActionItemRequest(BaseModel):
    description: str
    assigned_to: Assignee
    due_date: Optional[str] = None


class ResourceRequest(BaseModel):
    title: str
    url: str
    type: ResourceType = ResourceType.LINK


class WhiteboardRequest(BaseModel):
    content: str


class ChatRequest(BaseModel):
    sender: str
    message: str


class FeedbackRequest(BaseModel):
    fields: Dict[str, Any] = Field(default_factory=dict)


class RecordingCreate(BaseModel):
    url: str
    duration: int = 0
    size: int = 0
    format: RecordingFormat = RecordingFormat.MP4
    quality: RecordingQuality = RecordingQuality.MEDIUM
    transcript: Optional[str] = None


class OutcomeResponse(BaseModel):
    success: bool = True
    id: Optional[str] = None
    detail: str = ""


# Templates
class ApplyTemplateRequest(BaseModel):
    session_id: str


# Personalization
class LearningPathRequest(BaseModel):
    goal: str
    profile: Optional[UserProfile] = None


class ProfileMergeRequest(BaseModel):
    profile: Optional[UserProfile] = None
    updates: Dict[str, Any] = Field(default_factory=dict)
