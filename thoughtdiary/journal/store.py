"""
Journal entry store.

Holds the ordered entry list (newest first) and writes the whole list
back to its durable slot after every mutation. Storage problems are
logged and remembered, never raised to the caller.
"""

import json
import logging
from typing import Iterable, Optional, Tuple

from thoughtdiary.core.config import DEFAULT_STORAGE_KEY
from thoughtdiary.core.models import JournalEntry
from thoughtdiary.core.storage import (
    PersistenceError,
    PersistenceReadFailure,
    PersistenceWriteFailure,
)

logger = logging.getLogger(__name__)

Snapshot = Tuple[JournalEntry, ...]


def encode_entries(entries: Iterable[JournalEntry]) -> str:
    """Serialize entries, in list order, as one JSON document."""
    return json.dumps([entry.to_dict() for entry in entries], ensure_ascii=False)


def decode_entries(raw: Optional[str]) -> Snapshot:
    """
    Parse a persisted JSON document into entries.

    None (slot never written) decodes to an empty list. Anything else
    that is not a list of valid, uniquely identified entries raises
    ValueError.
    """
    if raw is None:
        return ()

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        raise ValueError(f"Document is not valid JSON: {e}") from e
    except RecursionError as e:
        raise ValueError("Document is nested too deeply") from e

    if not isinstance(data, list):
        raise ValueError(f"Document must be a list, got {type(data).__name__}")

    entries = tuple(JournalEntry.from_dict(item) for item in data)

    seen = set()
    for entry in entries:
        if entry.id in seen:
            raise ValueError(f"Duplicate entry id: {entry.id}")
        seen.add(entry.id)

    return entries


class EntryStore:
    """
    Ordered journal entries bound to one durable slot.

    Construct once per session and pass it to whatever needs entries.
    """

    def __init__(self, storage, key: str = DEFAULT_STORAGE_KEY):
        """
        Args:
            storage: Object with get_item(key) / set_item(key, value)
            key: Namespace key of the slot holding the document
        """
        self.storage = storage
        self.key = key
        self._entries: Snapshot = ()
        self.last_error: Optional[PersistenceError] = None

    def load(self) -> Snapshot:
        """
        Replace in-memory state with the persisted list.

        An absent, unreadable or malformed document yields an empty list.
        """
        try:
            raw = self.storage.get_item(self.key)
            entries = decode_entries(raw)
        except PersistenceReadFailure as e:
            self._record(e)
            entries = ()
        except (ValueError, TypeError) as e:
            self._record(PersistenceReadFailure(self.key, f"malformed document: {e}"))
            entries = ()
        else:
            self.last_error = None
            logger.info(f"Loaded {len(entries)} journal entries from {self.key}")

        self._entries = entries
        return self._entries

    def append(self, candidate: JournalEntry) -> Snapshot:
        """
        Prepend an entry and persist the full list.

        The in-memory append stands even when the write fails.
        """
        if not isinstance(candidate, JournalEntry):
            raise TypeError(f"Expected JournalEntry, got {type(candidate).__name__}")
        if any(entry.id == candidate.id for entry in self._entries):
            raise ValueError(f"Entry id already stored: {candidate.id}")

        self._entries = (candidate,) + self._entries
        logger.info(f"Appended entry {candidate.id} ({len(self._entries)} total)")

        self._persist()
        return self._entries

    def clear(self) -> Snapshot:
        """
        Drop every entry and persist the empty list.

        Asking the user for confirmation is the caller's job.
        """
        previous = len(self._entries)
        self._entries = ()
        logger.info(f"Cleared {previous} journal entries")

        self._persist()
        return self._entries

    def snapshot(self) -> Snapshot:
        """Current entries, newest first."""
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def _persist(self) -> None:
        try:
            self.storage.set_item(self.key, encode_entries(self._entries))
        except PersistenceWriteFailure as e:
            self._record(e)
        else:
            self.last_error = None

    def _record(self, error: PersistenceError) -> None:
        self.last_error = error
        logger.warning(f"Journal storage problem: {error}")
