import logging
from typing import Dict, Type, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy import delete, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session as DBSession, sessionmaker

from ..models.analytics import SessionAnalytics
from ..models.db import (
    Base,
    SessionAnalyticsRow,
    SessionRecordingRow,
    SessionRow,
    SessionTemplateRow,
    TimestampedRow,
)
from ..models.session import Session, SessionRecording
from ..models.template import SessionTemplate
from .base import PersistenceError, StoreSnapshot

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class SqlPersistence:
    """Per-entity storage: one row per session, template, recording and analytics record."""

    def __init__(self, engine: Engine, create_tables: bool = True):
        self.engine = engine
        self.session_maker = sessionmaker(engine, expire_on_commit=False)
        if create_tables:
            Base.metadata.create_all(engine)

    def load(self) -> StoreSnapshot:
        try:
            with self.session_maker() as db:
                return StoreSnapshot(
                    sessions=self._load_rows(db, SessionRow, Session),
                    templates=self._load_rows(db, SessionTemplateRow, SessionTemplate),
                    recordings=self._load_rows(db, SessionRecordingRow, SessionRecording),
                    analytics={
                        row.session_id: SessionAnalytics.model_validate(row.body)
                        for row in db.execute(select(SessionAnalyticsRow)).scalars()
                    },
                )
        except (SQLAlchemyError, ValidationError) as e:
            logger.error(f"Error loading store from database: {e}")
            raise PersistenceError("Cannot load store from database") from e

    def save(self, snapshot: StoreSnapshot) -> None:
        try:
            with self.session_maker() as db:
                for session in snapshot.sessions.values():
                    db.merge(SessionRow(
                        id=session.id,
                        status=session.status.value,
                        mentor_id=session.participants.mentor_id,
                        mentee_id=session.participants.mentee_id,
                        body=session.model_dump(mode="json"),
                        created_at=session.created_at,
                        updated_at=session.updated_at,
                    ))
                for template in snapshot.templates.values():
                    db.merge(SessionTemplateRow(
                        id=template.id,
                        name=template.name,
                        category=template.category.value,
                        usage_count=template.usage_count,
                        body=template.model_dump(mode="json"),
                        created_at=template.created_at,
                        updated_at=template.updated_at,
                    ))
                for recording in snapshot.recordings.values():
                    db.merge(SessionRecordingRow(
                        id=recording.id,
                        session_id=recording.session_id,
                        body=recording.model_dump(mode="json"),
                        created_at=recording.created_at,
                    ))
                for session_id, analytics in snapshot.analytics.items():
                    db.merge(SessionAnalyticsRow(
                        id=session_id,
                        session_id=session_id,
                        body=analytics.model_dump(mode="json"),
                        created_at=analytics.generated_at,
                    ))

                # Registries only shrink through clear(); mirror that here
                self._delete_missing(db, SessionAnalyticsRow, snapshot.analytics)
                self._delete_missing(db, SessionRecordingRow, snapshot.recordings)
                self._delete_missing(db, SessionTemplateRow, snapshot.templates)
                self._delete_missing(db, SessionRow, snapshot.sessions)
                db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error saving store to database: {e}")
            raise PersistenceError("Cannot save store to database") from e

    @staticmethod
    def _load_rows(db: DBSession, row_class: Type[TimestampedRow], model_class: Type[M]) -> Dict[str, M]:
        rows = db.execute(select(row_class)).scalars()
        return {row.id: model_class.model_validate(row.body) for row in rows}

    @staticmethod
    def _delete_missing(db: DBSession, row_class: Type[TimestampedRow], keep: Dict[str, object]) -> None:
        if keep:
            db.execute(delete(row_class).where(row_class.id.not_in(list(keep))))
        else:
            db.execute(delete(row_class))
