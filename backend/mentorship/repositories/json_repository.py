import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from .base import PersistenceError, StoreSnapshot

logger = logging.getLogger(__name__)


class JsonDocumentPersistence:
    """Stores every registry as one JSON document, rewritten after each mutation."""

    def __init__(self, filepath: Path):
        self.filepath = Path(filepath)
        if not self.filepath.parent.exists():
            logger.warning(f"Data directory {self.filepath.parent} not found. Creating it.")
            self.filepath.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> StoreSnapshot:
        """Load the snapshot, or an empty one when the document does not exist yet."""
        if not self.filepath.exists():
            logger.info(f"No store document at {self.filepath}, starting empty")
            return StoreSnapshot()
        try:
            with open(self.filepath, "r", encoding="utf-8") as f:
                json_data = f.read()
            snapshot = StoreSnapshot.model_validate_json(json_data)
            logger.info(
                f"Loaded store from {self.filepath} "
                f"({len(snapshot.sessions)} sessions, {len(snapshot.templates)} templates)"
            )
            return snapshot
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Error decoding store document {self.filepath}: {e}")
            raise PersistenceError(f"Corrupt store document {self.filepath}") from e
        except OSError as e:
            logger.error(f"Error reading store document {self.filepath}: {e}")
            raise PersistenceError(f"Cannot read {self.filepath}") from e

    def save(self, snapshot: StoreSnapshot) -> None:
        """Write to a temp file beside the target and rename it into place."""
        json_data = snapshot.model_dump_json(indent=2)
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.filepath.name}.", dir=str(self.filepath.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(json_data)
            os.replace(tmp_path, self.filepath)
            logger.debug(f"Saved store to {self.filepath}")
        except OSError as e:
            logger.error(f"Error saving store to {self.filepath}: {e}")
            raise PersistenceError(f"Cannot write {self.filepath}") from e
