from .base import InMemoryPersistence, PersistenceError, PersistencePort, StoreSnapshot
from .json_repository import JsonDocumentPersistence
from .session import SessionStore
from .sql_repository import SqlPersistence
