from datetime import datetime, timezone
from typing import Callable

from pydantic import BaseModel, Field

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampedModel(BaseModel):
    """Base model with creation and modification timestamps."""
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
