"""
Session state machine.

    scheduled --confirm--> confirmed
    scheduled|confirmed --start--> in_progress --end--> completed
    scheduled|confirmed --mark_no_show--> no_show
    any non-terminal --cancel--> cancelled

Each transition checks and sets the status while holding the session's lock,
so two racing callers cannot both move the same session along one edge.
"""

import logging
from typing import Callable, FrozenSet, Optional

from ..core.outcome import Outcome
from ..models.session import Session, SessionStatus, TERMINAL_STATUSES
from ..repositories.session import SessionStore
from .analytics import AnalyticsGenerator

logger = logging.getLogger(__name__)

STARTABLE = frozenset({SessionStatus.SCHEDULED, SessionStatus.CONFIRMED})
NON_TERMINAL = frozenset(set(SessionStatus) - TERMINAL_STATUSES)


class SessionLifecycle:
    def __init__(self, store: SessionStore, analytics_generator: Optional[AnalyticsGenerator] = None):
        self.store = store
        self.analytics_generator = analytics_generator or AnalyticsGenerator()

    def confirm(self, session_id: str, actor_id: str) -> Outcome:
        """Either participant may confirm a scheduled session"""
        return self._transition(
            session_id,
            actor_id,
            allowed_from=frozenset({SessionStatus.SCHEDULED}),
            target=SessionStatus.CONFIRMED,
            authorize=lambda s: actor_id in (s.participants.mentor_id, s.participants.mentee_id),
        )

    def start(self, session_id: str, actor_id: str) -> Outcome:
        def begin(session: Session) -> None:
            session.start_time = self.store.now()

        return self._transition(
            session_id,
            actor_id,
            allowed_from=STARTABLE,
            target=SessionStatus.IN_PROGRESS,
            authorize=self._is_mentor(actor_id),
            apply=begin,
        )

    def end(self, session_id: str, actor_id: str) -> Outcome:
        return self._transition(
            session_id,
            actor_id,
            allowed_from=frozenset({SessionStatus.IN_PROGRESS}),
            target=SessionStatus.COMPLETED,
            authorize=self._is_mentor(actor_id),
            apply=self._finish,
        )

    def cancel(self, session_id: str, actor_id: str, reason: Optional[str] = None) -> Outcome:
        def record_cancellation(session: Session) -> None:
            session.session_data.notes.append(
                f"cancelled by {actor_id}: {reason or 'no reason given'}"
            )

        return self._transition(
            session_id,
            actor_id,
            allowed_from=NON_TERMINAL,
            target=SessionStatus.CANCELLED,
            apply=record_cancellation,
        )

    def mark_no_show(self, session_id: str, actor_id: str) -> Outcome:
        return self._transition(
            session_id,
            actor_id,
            allowed_from=STARTABLE,
            target=SessionStatus.NO_SHOW,
            authorize=self._is_mentor(actor_id),
        )

    @staticmethod
    def _is_mentor(actor_id: str) -> Callable[[Session], bool]:
        return lambda s: s.participants.mentor_id == actor_id

    def _finish(self, session: Session) -> None:
        session.end_time = self.store.now()
        if session.id in self.store.analytics:
            logger.warning(f"Analytics already recorded for session {session.id}, keeping them")
            return
        analytics = self.analytics_generator.generate(session)
        self.store.analytics[session.id] = analytics
        session.analytics = self.analytics_generator.summarize(analytics)

    def _transition(
        self,
        session_id: str,
        actor_id: str,
        allowed_from: FrozenSet[SessionStatus],
        target: SessionStatus,
        authorize: Optional[Callable[[Session], bool]] = None,
        apply: Optional[Callable[[Session], None]] = None,
    ) -> Outcome:
        with self.store.lock_for(session_id):
            session = self.store.find_session(session_id)
            if session is None:
                logger.info(f"Rejected {target.value} for unknown session {session_id}")
                return Outcome.not_found(f"Session {session_id} not found")

            if authorize is not None and not authorize(session):
                logger.info(f"Rejected {target.value} on {session_id}: actor {actor_id} not allowed")
                return Outcome.actor_mismatch(
                    f"{actor_id} may not move session {session_id} to {target.value}"
                )

            if session.status not in allowed_from:
                logger.info(
                    f"Rejected {target.value} on {session_id}: status is {session.status.value}"
                )
                return Outcome.invalid_state(
                    f"Cannot move session from {session.status.value} to {target.value}"
                )

            previous = session.status
            updated = session.model_copy(deep=True)
            with self.store.staged():
                updated.status = target
                if apply is not None:
                    apply(updated)
                updated.touch(self.store.now())
                self.store.sessions[session_id] = updated

        logger.info(f"Session {session_id}: {previous.value} -> {target.value} by {actor_id}")
        return Outcome.success(updated.model_copy(deep=True))
