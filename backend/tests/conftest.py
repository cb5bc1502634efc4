"""Shared fixtures: a controllable clock and a store wired to in-memory persistence"""
from datetime import datetime, timedelta, timezone

import pytest

from mentorship.models.session import Participants, Session
from mentorship.repositories import InMemoryPersistence, SessionStore
from mentorship.services.content import SessionContentTracker
from mentorship.services.lifecycle import SessionLifecycle
from mentorship.templates.catalog import TemplateCatalog

MENTOR_ID = "mentor-1"
MENTEE_ID = "mentee-1"


class FakeClock:
    """Callable clock that only moves when told to"""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> datetime:
        self.current = self.current + timedelta(**kwargs)
        return self.current


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def persistence():
    return InMemoryPersistence()


@pytest.fixture
def store(persistence, clock):
    return SessionStore(persistence, clock=clock)


@pytest.fixture
def lifecycle(store):
    return SessionLifecycle(store)


@pytest.fixture
def tracker(store):
    return SessionContentTracker(store)


@pytest.fixture
def catalog(store):
    return TemplateCatalog(store)


@pytest.fixture
def make_session(clock):
    """Factory for unregistered sessions stamped with the fake clock"""
    def _make(session_id="session-1", mentor_id=MENTOR_ID, mentee_id=MENTEE_ID, **fields):
        now = clock()
        return Session(
            id=session_id,
            participants=Participants(mentor_id=mentor_id, mentee_id=mentee_id),
            created_at=now,
            updated_at=now,
            **fields,
        )
    return _make


@pytest.fixture
def session_id(store, make_session):
    """A registered session in the scheduled state"""
    session = make_session()
    assert store.register_session(session)
    return session.id
