import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from mentorship.core.config import settings
from mentorship.repositories import (
    InMemoryPersistence,
    JsonDocumentPersistence,
    PersistencePort,
    SessionStore,
    SqlPersistence,
)
from mentorship.templates.catalog import TemplateCatalog

logger = logging.getLogger(__name__)

engine: Optional[Engine] = None
store: Optional[SessionStore] = None


def create_persistence() -> PersistencePort:
    """Build the persistence adapter selected by STORAGE_BACKEND"""
    global engine

    if settings.STORAGE_BACKEND == "json":
        return JsonDocumentPersistence(settings.DATA_FILE)

    if settings.STORAGE_BACKEND == "sql":
        if settings.DATABASE_URL.startswith("sqlite"):
            engine = create_engine(
                settings.DATABASE_URL,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
                echo=settings.DEBUG,
            )
        else:
            engine = create_engine(
                settings.DATABASE_URL,
                pool_pre_ping=True,
                pool_recycle=300,
                echo=settings.DEBUG,
            )
        return SqlPersistence(engine)

    return InMemoryPersistence()


def init_store() -> SessionStore:
    """Create the process-wide store and seed the built-in templates"""
    global store

    store = SessionStore(create_persistence())
    logger.info(
        f"Store initialized with {settings.STORAGE_BACKEND} backend: "
        f"{len(store.sessions)} sessions, {len(store.templates)} templates"
    )
    if settings.SEED_DEFAULT_TEMPLATES:
        seeded = TemplateCatalog(store).seed_defaults()
        if seeded:
            logger.info(f"Seeded {len(seeded)} default templates")
    return store


def close_store():
    global engine, store
    if engine is not None:
        engine.dispose()
        engine = None
    store = None


def get_store() -> SessionStore:
    """Dependency returning the shared store, initializing it on first use"""
    if store is None:
        return init_store()
    return store
