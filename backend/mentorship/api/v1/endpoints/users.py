"""Per-user session queries and analytics"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ....core.deps import get_analytics_generator
from ....database import get_store
from ....models.analytics import UserAnalytics
from ....models.session import ParticipantRole, Session
from ....repositories import SessionStore
from ....services.analytics import AnalyticsGenerator

router = APIRouter()


@router.get("/{user_id}/sessions", response_model=List[Session])
def get_user_sessions(
    user_id: str,
    role: ParticipantRole = Query(..., description="Role the user plays in the session"),
    store: SessionStore = Depends(get_store),
):
    """All of the user's sessions in one role, newest first"""
    return store.get_sessions_for_user(user_id, role)


@router.get("/{user_id}/sessions/upcoming", response_model=List[Session])
def get_upcoming_sessions(
    user_id: str,
    role: ParticipantRole = Query(...),
    store: SessionStore = Depends(get_store),
):
    return store.get_upcoming_sessions(user_id, role)


@router.get("/{user_id}/sessions/history", response_model=List[Session])
def get_session_history(
    user_id: str,
    role: ParticipantRole = Query(...),
    limit: Optional[int] = Query(None, ge=1),
    store: SessionStore = Depends(get_store),
):
    return store.get_session_history(user_id, role, limit)


@router.get("/{user_id}/analytics", response_model=UserAnalytics)
def get_user_analytics(
    user_id: str,
    role: ParticipantRole = Query(...),
    store: SessionStore = Depends(get_store),
    generator: AnalyticsGenerator = Depends(get_analytics_generator),
):
    return generator.user_analytics(store, user_id, role)
