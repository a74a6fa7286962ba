"""
Journal form controller.

Holds the draft fields of the next entry, validates the two required
fields on submit, builds the entry and hands it to the store.
"""

import logging
import time
from typing import Callable, Iterable, List, Optional, Union

from thoughtdiary.core.config import DEFAULT_INTENSITY
from thoughtdiary.core.models import (
    MAX_INTENSITY,
    MIN_INTENSITY,
    Distortion,
    JournalEntry,
    ThoughtType,
)
from thoughtdiary.core.utils import from_millis
from thoughtdiary.journal.store import EntryStore

logger = logging.getLogger(__name__)


class ValidationFailure:
    """A refused submission."""

    def __init__(self, fields: List[str]):
        self.fields = fields
        self.message = "Required field(s) empty: " + ", ".join(fields)

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"[VALIDATION] {self.message}"


class EntryIdFactory:
    """
    Issues entry ids from the creation time in epoch milliseconds.

    An id that would not be strictly greater than every id seen so far
    is bumped, so two entries created in the same millisecond never
    share an id.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0

    def next_id(self, taken: Iterable[object] = ()) -> int:
        """Return a fresh id above the last issued one and above every int in taken."""
        floor = self._last
        for existing in taken:
            if isinstance(existing, int) and not isinstance(existing, bool):
                floor = max(floor, existing)

        candidate = int(self._clock() * 1000)
        if candidate <= floor:
            logger.debug(f"Id {candidate} already used, bumping to {floor + 1}")
            candidate = floor + 1

        self._last = candidate
        return candidate

    def now_millis(self) -> int:
        return int(self._clock() * 1000)


def clamp_intensity(value: object) -> int:
    """Coerce a draft intensity into an int within [0, 100]."""
    try:
        number = int(round(float(value)))
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Unusable intensity {value!r}, using {DEFAULT_INTENSITY}")
        return DEFAULT_INTENSITY
    return max(MIN_INTENSITY, min(MAX_INTENSITY, number))


class FormController:
    """
    Draft state of the journal form.

    Fields are plain attributes and may be set at any time; nothing is
    checked until submit().
    """

    def __init__(
        self,
        store: EntryStore,
        default_intensity: int = DEFAULT_INTENSITY,
        id_factory: Optional[EntryIdFactory] = None,
    ):
        self.store = store
        self.default_intensity = clamp_intensity(default_intensity)
        self.id_factory = id_factory or EntryIdFactory()
        self.reset()

    def reset(self) -> None:
        """Return every draft field to its initial value."""
        self.situation: str = ""
        self.emotion: str = ""
        self.intensity: Union[int, float, str] = self.default_intensity
        self.thought: str = ""
        self.thought_type: Union[ThoughtType, str] = ""
        self.distortion: Union[Distortion, str] = ""

    @property
    def missing_fields(self) -> List[str]:
        missing = []
        if not (self.emotion or "").strip():
            missing.append("emotion")
        if not (self.thought or "").strip():
            missing.append("thought")
        return missing

    @property
    def can_submit(self) -> bool:
        """Whether the submit action should be enabled."""
        return not self.missing_fields

    def submit(self) -> Union[JournalEntry, ValidationFailure]:
        """
        Turn the draft into a stored entry.

        Returns the new entry and resets the draft, or returns a
        ValidationFailure and leaves the draft untouched.
        """
        missing = self.missing_fields
        if missing:
            failure = ValidationFailure(missing)
            logger.info(f"Submission refused: {failure.message}")
            return failure

        created_millis = self.id_factory.now_millis()
        entry_id = self.id_factory.next_id(e.id for e in self.store.snapshot())

        entry = JournalEntry(
            id=entry_id,
            created_at=from_millis(created_millis),
            situation=(self.situation or "").strip(),
            emotion=self.emotion.strip(),
            intensity=clamp_intensity(self.intensity),
            thought=self.thought.strip(),
            thought_type=self._classification(ThoughtType, self.thought_type),
            distortion=self._classification(Distortion, self.distortion),
        )

        self.store.append(entry)
        self.reset()

        return entry

    @staticmethod
    def _classification(kind, value):
        """Parse an optional classification, falling back to its unclassified variant."""
        try:
            return kind.parse(value)
        except ValueError:
            logger.warning(f"Unknown {kind.__name__} {value!r}, storing as unclassified")
            return kind.UNCLASSIFIED
