"""
Durable key-value storage.

A single-row-per-key slot table in SQLite. Every write replaces the
whole value for its key inside one transaction.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from thoughtdiary.core.config import Config
from thoughtdiary.core.db import init_db, session_scope
from thoughtdiary.core.models import StorageSlot

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Durable storage could not be used."""

    def __init__(self, key: str, message: str):
        super().__init__(f"[{key}] {message}")
        self.key = key
        self.message = message


class PersistenceReadFailure(PersistenceError):
    """Stored value is missing, unreadable or not decodable."""


class PersistenceWriteFailure(PersistenceError):
    """Stored value could not be written."""


class SlotStorage:
    """
    Key-value slots backed by the StorageSlot table.

    Mirrors the get/set/remove shape of browser local storage.
    """

    def __init__(self, config: Config):
        self.config = config
        self._initialized = False

    def _ensure_schema(self) -> None:
        if not self._initialized:
            init_db(self.config)
            self._initialized = True

    def get_item(self, key: str) -> Optional[str]:
        """
        Read the value stored under key.

        Returns None when the slot has never been written.
        """
        try:
            self._ensure_schema()
            with session_scope(self.config) as session:
                slot = session.get(StorageSlot, key)
                return slot.value if slot is not None else None
        except (SQLAlchemyError, OSError) as e:
            raise PersistenceReadFailure(key, f"read failed: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        """Replace the value stored under key."""
        try:
            self._ensure_schema()
            with session_scope(self.config) as session:
                session.merge(StorageSlot(key=key, value=value))
        except (SQLAlchemyError, OSError) as e:
            raise PersistenceWriteFailure(key, f"write failed: {e}") from e

        logger.debug(f"Wrote slot {key} ({len(value)} chars)")

    def remove_item(self, key: str) -> None:
        """Delete the slot for key, if any."""
        try:
            self._ensure_schema()
            with session_scope(self.config) as session:
                slot = session.get(StorageSlot, key)
                if slot is not None:
                    session.delete(slot)
        except (SQLAlchemyError, OSError) as e:
            raise PersistenceWriteFailure(key, f"remove failed: {e}") from e
