"""Session lifecycle, content and analytics endpoints"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import ValidationError

from ....core.deps import get_content_tracker, get_lifecycle, unwrap
from ....database import get_store
from ....models.analytics import SessionAnalytics
from ....models.api import (
    ActionItemRequest,
    ActorRequest,
    AgendaItemRequest,
    CancelRequest,
    ChatRequest,
    FeedbackRequest,
    NoteRequest,
    OutcomeResponse,
    RecordingCreate,
    ResourceRequest,
    SessionCreate,
    WhiteboardRequest,
)
from ....models.session import (
    ParticipantRole,
    Participants,
    Session,
    SessionRecording,
    TechnicalDetails,
)
from ....repositories import SessionStore
from ....services.content import SessionContentTracker
from ....services.lifecycle import SessionLifecycle

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=Session, status_code=status.HTTP_201_CREATED)
def create_session(request: SessionCreate, store: SessionStore = Depends(get_store)):
    """Register a newly scheduled session"""
    now = store.now()
    fields = dict(
        session_type=request.session_type,
        planned_duration=request.planned_duration,
        participants=Participants(mentor_id=request.mentor_id, mentee_id=request.mentee_id),
        technical_details=TechnicalDetails(
            meeting_platform=request.meeting_platform,
            meeting_id=request.meeting_id,
        ),
        created_at=now,
        updated_at=now,
    )
    if request.id:
        fields["id"] = request.id
    session_id = unwrap(store.register_session(Session(**fields)))
    return store.get_session(session_id)


@router.get("", response_model=List[Session])
def list_sessions(store: SessionStore = Depends(get_store)):
    return store.list_sessions()


@router.get("/{session_id}", response_model=Session)
def get_session(session_id: str, store: SessionStore = Depends(get_store)):
    session = store.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return session


# State transitions

@router.post("/{session_id}/confirm", response_model=Session)
def confirm_session(
    session_id: str,
    request: ActorRequest,
    lifecycle: SessionLifecycle = Depends(get_lifecycle),
):
    return unwrap(lifecycle.confirm(session_id, request.actor_id))


@router.post("/{session_id}/start", response_model=Session)
def start_session(
    session_id: str,
    request: ActorRequest,
    lifecycle: SessionLifecycle = Depends(get_lifecycle),
):
    return unwrap(lifecycle.start(session_id, request.actor_id))


@router.post("/{session_id}/end", response_model=Session)
def end_session(
    session_id: str,
    request: ActorRequest,
    lifecycle: SessionLifecycle = Depends(get_lifecycle),
):
    return unwrap(lifecycle.end(session_id, request.actor_id))


@router.post("/{session_id}/cancel", response_model=Session)
def cancel_session(
    session_id: str,
    request: CancelRequest,
    lifecycle: SessionLifecycle = Depends(get_lifecycle),
):
    return unwrap(lifecycle.cancel(session_id, request.actor_id, request.reason))


@router.post("/{session_id}/no-show", response_model=Session)
def mark_no_show(
    session_id: str,
    request: ActorRequest,
    lifecycle: SessionLifecycle = Depends(get_lifecycle),
):
    return unwrap(lifecycle.mark_no_show(session_id, request.actor_id))


# Content

@router.post("/{session_id}/agenda", response_model=OutcomeResponse)
def add_agenda_item(
    session_id: str,
    request: AgendaItemRequest,
    tracker: SessionContentTracker = Depends(get_content_tracker),
):
    unwrap(tracker.add_agenda_item(session_id, request.item))
    return OutcomeResponse()


@router.post("/{session_id}/notes", response_model=OutcomeResponse)
def add_note(
    session_id: str,
    request: NoteRequest,
    tracker: SessionContentTracker = Depends(get_content_tracker),
):
    note = unwrap(tracker.add_note(session_id, request.text, request.author))
    return OutcomeResponse(detail=note)


@router.post("/{session_id}/action-items", response_model=OutcomeResponse)
def add_action_item(
    session_id: str,
    request: ActionItemRequest,
    tracker: SessionContentTracker = Depends(get_content_tracker),
):
    item_id = unwrap(tracker.add_action_item(
        session_id, request.description, request.assigned_to, request.due_date
    ))
    return OutcomeResponse(id=item_id)


@router.post("/{session_id}/action-items/{item_id}/complete", response_model=OutcomeResponse)
def complete_action_item(
    session_id: str,
    item_id: str,
    tracker: SessionContentTracker = Depends(get_content_tracker),
):
    outcome = tracker.complete_action_item(session_id, item_id)
    return OutcomeResponse(id=unwrap(outcome), detail=outcome.detail)


@router.post("/{session_id}/resources", response_model=OutcomeResponse)
def add_resource(
    session_id: str,
    request: ResourceRequest,
    tracker: SessionContentTracker = Depends(get_content_tracker),
):
    resource_id = unwrap(tracker.add_resource(session_id, request.title, request.url, request.type))
    return OutcomeResponse(id=resource_id)


@router.put("/{session_id}/whiteboard", response_model=OutcomeResponse)
def update_whiteboard(
    session_id: str,
    request: WhiteboardRequest,
    tracker: SessionContentTracker = Depends(get_content_tracker),
):
    unwrap(tracker.update_whiteboard(session_id, request.content))
    return OutcomeResponse()


@router.post("/{session_id}/chat", response_model=OutcomeResponse)
def add_chat_message(
    session_id: str,
    request: ChatRequest,
    tracker: SessionContentTracker = Depends(get_content_tracker),
):
    unwrap(tracker.add_chat_message(session_id, request.sender, request.message))
    return OutcomeResponse()


@router.post("/{session_id}/feedback/{role}", response_model=OutcomeResponse)
def submit_feedback(
    session_id: str,
    role: ParticipantRole,
    request: FeedbackRequest,
    tracker: SessionContentTracker = Depends(get_content_tracker),
):
    try:
        outcome = tracker.submit_feedback(session_id, role, request.fields)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.errors())
    unwrap(outcome)
    return OutcomeResponse()


# Analytics and recordings

@router.get("/{session_id}/analytics", response_model=SessionAnalytics)
def get_session_analytics(session_id: str, store: SessionStore = Depends(get_store)):
    analytics = store.get_session_analytics(session_id)
    if analytics is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No analytics recorded for session {session_id}",
        )
    return analytics


@router.post(
    "/{session_id}/recordings",
    response_model=SessionRecording,
    status_code=status.HTTP_201_CREATED,
)
def add_recording(
    session_id: str,
    request: RecordingCreate,
    store: SessionStore = Depends(get_store),
):
    recording = SessionRecording(
        session_id=session_id,
        created_at=store.now(),
        **request.model_dump(),
    )
    unwrap(store.add_recording(recording))
    logger.info(f"Recording {recording.id} added to session {session_id}")
    return recording


@router.get("/{session_id}/recordings", response_model=List[SessionRecording])
def get_recordings(session_id: str, store: SessionStore = Depends(get_store)):
    return store.get_recordings(session_id)
