"""
Journal core for ThoughtDiary.

Entry store, aggregates and the form controller.
"""

from thoughtdiary.journal.store import EntryStore, encode_entries, decode_entries
from thoughtdiary.journal.aggregator import (
    ThoughtTypeCounts,
    emotion_histogram,
    thought_type_counts,
    distortion_histogram,
)
from thoughtdiary.journal.form import FormController, ValidationFailure, EntryIdFactory
from thoughtdiary.journal.session import JournalSession, open_session

__all__ = [
    "EntryStore",
    "encode_entries",
    "decode_entries",
    "ThoughtTypeCounts",
    "emotion_histogram",
    "thought_type_counts",
    "distortion_histogram",
    "FormController",
    "ValidationFailure",
    "EntryIdFactory",
    "JournalSession",
    "open_session",
]
