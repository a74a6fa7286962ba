"""
Journal session wiring.

Builds the one entry store of a process, loads it from durable storage
and hands the same instance to the form and the presentation layer.
"""

import logging
from dataclasses import dataclass

from thoughtdiary.core.config import Config
from thoughtdiary.core.storage import SlotStorage
from thoughtdiary.journal.form import FormController
from thoughtdiary.journal.store import EntryStore

logger = logging.getLogger(__name__)


@dataclass
class JournalSession:
    """Store and form sharing one entry list."""
    config: Config
    store: EntryStore
    form: FormController


def open_session(config: Config, storage=None) -> JournalSession:
    """
    Create and load the journal for this process.

    Never fails on storage problems; a broken slot loads as empty.
    """
    storage = storage or SlotStorage(config)
    store = EntryStore(storage, key=config.storage_key)
    store.load()

    form = FormController(store, default_intensity=config.default_intensity)

    logger.debug(f"Opened journal session on {config.database_path} [{config.storage_key}]")
    return JournalSession(config=config, store=store, form=form)
