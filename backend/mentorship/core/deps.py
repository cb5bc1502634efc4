from typing import Any

from fastapi import Depends, HTTPException, status

from mentorship.core.outcome import FailureReason, Outcome
from mentorship.database import get_store
from mentorship.repositories import SessionStore
from mentorship.services.analytics import AnalyticsGenerator
from mentorship.services.content import SessionContentTracker
from mentorship.services.lifecycle import SessionLifecycle
from mentorship.templates.catalog import TemplateCatalog

FAILURE_STATUS = {
    FailureReason.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureReason.ACTOR_MISMATCH: status.HTTP_403_FORBIDDEN,
    FailureReason.INVALID_STATE: status.HTTP_409_CONFLICT,
}


def unwrap(outcome: Outcome) -> Any:
    """Return the outcome's value or raise the matching HTTP error"""
    if outcome:
        return outcome.value
    raise HTTPException(
        status_code=FAILURE_STATUS.get(outcome.reason, status.HTTP_400_BAD_REQUEST),
        detail=outcome.detail,
    )


def get_lifecycle(store: SessionStore = Depends(get_store)) -> SessionLifecycle:
    return SessionLifecycle(store)


def get_content_tracker(store: SessionStore = Depends(get_store)) -> SessionContentTracker:
    return SessionContentTracker(store)


def get_catalog(store: SessionStore = Depends(get_store)) -> TemplateCatalog:
    return TemplateCatalog(store)


def get_analytics_generator() -> AnalyticsGenerator:
    return AnalyticsGenerator()
