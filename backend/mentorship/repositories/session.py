import logging
import threading
from contextlib import contextmanager
from datetime import datetime
from typing import Dict, Iterator, List, Optional

from ..core.outcome import Outcome
from ..models.analytics import SessionAnalytics
from ..models.base import Clock, utcnow
from ..models.session import (
    ParticipantRole,
    Session,
    SessionRecording,
    SessionStatus,
    TERMINAL_STATUSES,
)
from ..models.template import SessionTemplate
from .base import InMemoryPersistence, PersistenceError, PersistencePort, StoreSnapshot

logger = logging.getLogger(__name__)

UPCOMING_STATUSES = (SessionStatus.SCHEDULED, SessionStatus.CONFIRMED)


class SessionStore:
    """Keyed registries for sessions, templates, recordings and analytics.

    The store is passed by reference to every engine that reads or writes
    session data. It loads once from its persistence port and saves the whole
    snapshot after each successful mutation.

    Per-session locks serialize state transitions; see ``lock_for``.
    """

    def __init__(self, persistence: Optional[PersistencePort] = None, clock: Clock = utcnow):
        self.persistence = persistence if persistence is not None else InMemoryPersistence()
        self.clock = clock
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.RLock()

        try:
            snapshot = self.persistence.load()
        except PersistenceError as e:
            logger.error(f"Store load failed, starting with an empty store: {e}")
            snapshot = StoreSnapshot()

        self.sessions: Dict[str, Session] = snapshot.sessions
        self.templates: Dict[str, SessionTemplate] = snapshot.templates
        self.recordings: Dict[str, SessionRecording] = snapshot.recordings
        self.analytics: Dict[str, SessionAnalytics] = snapshot.analytics

    def now(self) -> datetime:
        return self.clock()

    def lock_for(self, session_id: str) -> threading.Lock:
        """Return the lock guarding one session, creating it on first use"""
        with self._registry_lock:
            lock = self._locks.get(session_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[session_id] = lock
            return lock

    def snapshot(self) -> StoreSnapshot:
        with self._registry_lock:
            return StoreSnapshot(
                sessions=self.sessions,
                templates=self.templates,
                recordings=self.recordings,
                analytics=self.analytics,
            ).model_copy(deep=True)

    def persist(self) -> None:
        self.persistence.save(self.snapshot())

    @contextmanager
    def staged(self) -> Iterator[None]:
        """Save once the block finishes; if the block or the save fails, put
        every registry back the way it was and re-raise.

        The block must swap in new records rather than edit live ones, so that
        restoring the registries restores the records too.
        """
        with self._registry_lock:
            registries = (self.sessions, self.templates, self.recordings, self.analytics)
            saved = [dict(registry) for registry in registries]
            try:
                yield
                self.persist()
            except Exception:
                for registry, contents in zip(registries, saved):
                    registry.clear()
                    registry.update(contents)
                raise

    # Sessions

    def register_session(self, session: Session) -> Outcome:
        """Take ownership of a session created by the scheduling surface"""
        if session.status != SessionStatus.SCHEDULED:
            return Outcome.invalid_state(
                f"New sessions must be scheduled, got {session.status.value}"
            )
        with self._registry_lock:
            if session.id in self.sessions:
                return Outcome.invalid_state(f"Session {session.id} already exists")
            with self.staged():
                self.sessions[session.id] = session.model_copy(deep=True)
        logger.info(f"Registered session {session.id}")
        return Outcome.success(session.id)

    def find_session(self, session_id: str) -> Optional[Session]:
        """Live record for in-core mutation; callers outside the core use get_session"""
        return self.sessions.get(session_id)

    def get_session(self, session_id: str) -> Optional[Session]:
        session = self.sessions.get(session_id)
        return session.model_copy(deep=True) if session else None

    def list_sessions(self) -> List[Session]:
        return [s.model_copy(deep=True) for s in self.sessions.values()]

    def get_sessions_for_user(self, user_id: str, role: ParticipantRole) -> List[Session]:
        """Sessions where the user plays the given role, newest first"""
        sessions = [
            s for s in self.sessions.values()
            if s.participants.id_for(role) == user_id
        ]
        sessions.sort(key=lambda s: s.created_at, reverse=True)
        return [s.model_copy(deep=True) for s in sessions]

    def get_upcoming_sessions(
        self,
        user_id: str,
        role: ParticipantRole,
        now: Optional[datetime] = None,
    ) -> List[Session]:
        now = now or self.now()
        return [
            s for s in self.get_sessions_for_user(user_id, role)
            if s.status in UPCOMING_STATUSES and (s.start_time or s.created_at) > now
        ]

    def get_session_history(
        self,
        user_id: str,
        role: ParticipantRole,
        limit: Optional[int] = None,
    ) -> List[Session]:
        history = [
            s for s in self.get_sessions_for_user(user_id, role)
            if s.status in TERMINAL_STATUSES
        ]
        return history[:limit] if limit else history

    # Templates

    def add_template(self, template: SessionTemplate) -> None:
        with self.staged():
            self.templates[template.id] = template

    def find_template(self, template_id: str) -> Optional[SessionTemplate]:
        return self.templates.get(template_id)

    # Recordings

    def add_recording(self, recording: SessionRecording) -> Outcome:
        if recording.session_id not in self.sessions:
            return Outcome.not_found(f"Session {recording.session_id} not found")
        with self.staged():
            self.recordings[recording.id] = recording.model_copy(deep=True)
        return Outcome.success(recording.id)

    def get_recordings(self, session_id: str) -> List[SessionRecording]:
        return [
            r.model_copy(deep=True) for r in self.recordings.values()
            if r.session_id == session_id
        ]

    # Analytics

    def get_session_analytics(self, session_id: str) -> Optional[SessionAnalytics]:
        analytics = self.analytics.get(session_id)
        return analytics.model_copy(deep=True) if analytics else None

    def clear(self) -> None:
        with self.staged():
            self.sessions.clear()
            self.templates.clear()
            self.recordings.clear()
            self.analytics.clear()
        with self._registry_lock:
            self._locks.clear()
        logger.info("Cleared all session data")
