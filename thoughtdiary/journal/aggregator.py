"""
Journal aggregates.

Pure functions over an entry snapshot, recomputed after every store
mutation. Nothing is cached; journals stay small enough that a full
scan is always fine.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple

from thoughtdiary.core.models import Distortion, ThoughtType

RATIONAL_LABEL = "Gânduri raționale"
IRRATIONAL_LABEL = "Gânduri iraționale"


@dataclass(frozen=True)
class ThoughtTypeCounts:
    """Rational vs irrational thought counts. Unclassified thoughts are in neither."""
    rational_count: int = 0
    irrational_count: int = 0

    @property
    def classified_total(self) -> int:
        return self.rational_count + self.irrational_count

    def chart_rows(self) -> List[Tuple[str, int]]:
        """Rows for the ratio chart, rational first."""
        return [
            (RATIONAL_LABEL, self.rational_count),
            (IRRATIONAL_LABEL, self.irrational_count),
        ]


def _field(entry: Any, name: str) -> Optional[Any]:
    """Read a field from an entry object or a raw mapping."""
    if isinstance(entry, dict):
        return entry.get(name)
    return getattr(entry, name, None)


def emotion_histogram(entries: Iterable[Any]) -> List[Tuple[str, int]]:
    """
    Count entries per emotion.

    Order is first appearance while scanning entries in list order.
    Entries without an emotion are skipped.
    """
    counts: Counter = Counter()
    for entry in entries or ():
        emotion = _field(entry, "emotion")
        if not emotion or not isinstance(emotion, str):
            continue
        counts[emotion] += 1

    return list(counts.items())


def thought_type_counts(entries: Iterable[Any]) -> ThoughtTypeCounts:
    """Count rational and irrational thoughts."""
    rational = 0
    irrational = 0

    for entry in entries or ():
        thought_type = _field(entry, "thought_type")
        if thought_type is None:
            thought_type = _field(entry, "thoughtType")

        if thought_type == ThoughtType.RATIONAL:
            rational += 1
        elif thought_type == ThoughtType.IRRATIONAL:
            irrational += 1

    return ThoughtTypeCounts(rational_count=rational, irrational_count=irrational)


def distortion_histogram(entries: Iterable[Any]) -> List[Tuple[str, int]]:
    """
    Count entries per recognised distortion, in first-seen order.

    Unclassified distortions are not counted.
    """
    counts: Counter = Counter()
    for entry in entries or ():
        distortion = _field(entry, "distortion")
        try:
            parsed = Distortion.parse(distortion)
        except ValueError:
            continue
        if parsed is Distortion.UNCLASSIFIED:
            continue
        counts[parsed.label] += 1

    return list(counts.items())
