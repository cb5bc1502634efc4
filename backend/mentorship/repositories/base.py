from typing import Dict, Optional, Protocol
from pydantic import BaseModel, Field

from ..models.analytics import SessionAnalytics
from ..models.session import Session, SessionRecording
from ..models.template import SessionTemplate


class PersistenceError(Exception):
    """Raised when a persistence adapter cannot read or write its backing storage"""


class StoreSnapshot(BaseModel):
    """Every registry of the store, serialized together"""
    version: str = "1.0"
    sessions: Dict[str, Session] = Field(default_factory=dict)
    templates: Dict[str, SessionTemplate] = Field(default_factory=dict)
    recordings: Dict[str, SessionRecording] = Field(default_factory=dict)
    analytics: Dict[str, SessionAnalytics] = Field(default_factory=dict)


class PersistencePort(Protocol):
    def load(self) -> StoreSnapshot:
        ...

    def save(self, snapshot: StoreSnapshot) -> None:
        ...


class InMemoryPersistence:
    """Keeps the most recent snapshot in process memory"""

    def __init__(self, initial: Optional[StoreSnapshot] = None):
        self._snapshot = initial.model_copy(deep=True) if initial else StoreSnapshot()
        self.save_count = 0

    def load(self) -> StoreSnapshot:
        return self._snapshot.model_copy(deep=True)

    def save(self, snapshot: StoreSnapshot) -> None:
        self._snapshot = snapshot.model_copy(deep=True)
        self.save_count += 1
