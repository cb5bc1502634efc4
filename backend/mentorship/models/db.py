from sqlalchemy import Column, DateTime, Integer, String, Text, ForeignKey, Index, func
from sqlalchemy import TypeDecorator
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.dialects.sqlite import JSON
from sqlalchemy.orm import declarative_base
import json

from .base import utcnow

Base = declarative_base()


class JSONField(TypeDecorator):
    """Cross-database JSON field that uses JSONB for PostgreSQL and JSON for SQLite"""
    impl = Text
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            return dialect.type_descriptor(JSONB())
        else:
            return dialect.type_descriptor(JSON())

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if dialect.name == 'postgresql':
            return value
        else:
            return json.dumps(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if dialect.name == 'postgresql':
            return value
        else:
            return json.loads(value) if isinstance(value, str) else value


class TimestampedRow(Base):
    __abstract__ = True

    id = Column(String(64), primary_key=True)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now()
    )

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        server_default=func.now()
    )


class SessionRow(TimestampedRow):
    __tablename__ = "sessions"

    status = Column(String(20), nullable=False)
    mentor_id = Column(String(64), nullable=False)
    mentee_id = Column(String(64), nullable=False)
    body = Column(JSONField, nullable=False)

    __table_args__ = (
        Index("idx_sessions_mentor_status", "mentor_id", "status"),
        Index("idx_sessions_mentee_status", "mentee_id", "status"),
    )


class SessionTemplateRow(TimestampedRow):
    __tablename__ = "session_templates"

    name = Column(String(255), nullable=False)
    category = Column(String(50), nullable=False)
    usage_count = Column(Integer, nullable=False, default=0)
    body = Column(JSONField, nullable=False)

    __table_args__ = (
        Index("idx_session_templates_category", "category"),
    )


class SessionRecordingRow(TimestampedRow):
    __tablename__ = "session_recordings"

    session_id = Column(String(64), ForeignKey("sessions.id"), nullable=False)
    body = Column(JSONField, nullable=False)


class SessionAnalyticsRow(TimestampedRow):
    __tablename__ = "session_analytics"

    session_id = Column(String(64), ForeignKey("sessions.id"), nullable=False, unique=True)
    body = Column(JSONField, nullable=False)
