"""
Tagged results returned by every mutating operation.

Ordinary precondition failures (wrong actor, wrong state, missing entity) are
reported as a failed Outcome carrying a reason code instead of raising.
"""

from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class FailureReason(str, Enum):
    NOT_FOUND = "not_found"
    ACTOR_MISMATCH = "actor_mismatch"
    INVALID_STATE = "invalid_state"


class Outcome(BaseModel, Generic[T]):
    """Result of a mutation: truthy when it succeeded"""
    ok: bool
    reason: Optional[FailureReason] = None
    detail: str = ""
    value: Optional[T] = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, value: Any = None, detail: str = "") -> "Outcome":
        return cls(ok=True, value=value, detail=detail)

    @classmethod
    def failure(cls, reason: FailureReason, detail: str = "") -> "Outcome":
        return cls(ok=False, reason=reason, detail=detail)

    @classmethod
    def not_found(cls, detail: str) -> "Outcome":
        return cls.failure(FailureReason.NOT_FOUND, detail)

    @classmethod
    def actor_mismatch(cls, detail: str) -> "Outcome":
        return cls.failure(FailureReason.ACTOR_MISMATCH, detail)

    @classmethod
    def invalid_state(cls, detail: str) -> "Outcome":
        return cls.failure(FailureReason.INVALID_STATE, detail)
