"""
Unit tests for journal aggregates.

Tests emotion frequency, rational vs irrational counts and
distortion frequency over entry snapshots.
"""

import pytest
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from thoughtdiary.core.models import Distortion, JournalEntry, ThoughtType
from thoughtdiary.journal.aggregator import (
    ThoughtTypeCounts,
    distortion_histogram,
    emotion_histogram,
    thought_type_counts,
)


def make_entries(*rows):
    """Build entries from (emotion, thought_type, distortion) tuples, first = newest."""
    entries = []
    for i, (emotion, thought_type, distortion) in enumerate(rows):
        entries.append(JournalEntry(
            id=len(rows) - i,
            created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
            emotion=emotion,
            thought="Gând",
            thought_type=thought_type,
            distortion=distortion,
        ))
    return tuple(entries)


U = ThoughtType.UNCLASSIFIED
N = Distortion.UNCLASSIFIED


class TestEmotionHistogram:
    """Test emotion frequency counting."""

    def test_first_seen_order(self):
        """Counts follow the order emotions first appear."""
        entries = make_entries(("Furie", U, N), ("Frică", U, N), ("Furie", U, N))
        assert emotion_histogram(entries) == [("Furie", 2), ("Frică", 1)]

    def test_empty(self):
        """No entries, no bars."""
        assert emotion_histogram(()) == []
        assert emotion_histogram(None) == []

    def test_single_emotion(self):
        """One emotion many times is one row."""
        entries = make_entries(*[("Tristețe", U, N)] * 4)
        assert emotion_histogram(entries) == [("Tristețe", 4)]

    def test_missing_emotion_skipped(self):
        """Raw records without an emotion are ignored rather than crashing."""
        raw = [{"emotion": "Furie"}, {"emotion": ""}, {}, {"emotion": None}, {"emotion": "Furie"}]
        assert emotion_histogram(raw) == [("Furie", 2)]

    def test_odd_objects_tolerated(self):
        """Objects without the field are skipped."""
        assert emotion_histogram([object(), 42, "text"]) == []


class TestThoughtTypeCounts:
    """Test rational vs irrational counting."""

    def test_mixed(self):
        """Unclassified thoughts count toward neither side."""
        entries = make_entries(
            ("Furie", ThoughtType.RATIONAL, N),
            ("Furie", ThoughtType.IRRATIONAL, N),
            ("Furie", U, N),
            ("Furie", ThoughtType.RATIONAL, N),
        )
        counts = thought_type_counts(entries)
        assert counts == ThoughtTypeCounts(rational_count=2, irrational_count=1)
        assert counts.classified_total == 3

    def test_empty(self):
        """Empty input gives zero counts."""
        assert thought_type_counts([]) == ThoughtTypeCounts(0, 0)

    def test_raw_documents(self):
        """Persisted dicts with thoughtType keys are understood."""
        raw = [
            {"thoughtType": "rational"},
            {"thoughtType": "irrational"},
            {"thoughtType": "necunoscut"},
            {"thoughtType": None},
        ]
        assert thought_type_counts(raw) == ThoughtTypeCounts(1, 1)

    def test_chart_rows(self):
        """Chart rows list rational first with display labels."""
        rows = ThoughtTypeCounts(3, 1).chart_rows()
        assert rows == [("Gânduri raționale", 3), ("Gânduri iraționale", 1)]


class TestDistortionHistogram:
    """Test distortion frequency counting."""

    def test_unclassified_excluded(self):
        """Only recognised distortions are counted."""
        entries = make_entries(
            ("Furie", U, Distortion.PERSONALIZATION),
            ("Frică", U, N),
            ("Frică", U, Distortion.CATASTROPHIZING),
            ("Furie", U, Distortion.PERSONALIZATION),
        )
        assert distortion_histogram(entries) == [("Personalizare", 2), ("Catastrofare", 1)]

    def test_raw_legacy_labels(self):
        """Raw legacy sentinels and unknown labels are skipped."""
        raw = [{"distortion": "Neîncadrat"}, {"distortion": "Catastrofare"}, {"distortion": "???"}]
        assert distortion_histogram(raw) == [("Catastrofare", 1)]

    def test_empty(self):
        """Empty input gives no rows."""
        assert distortion_histogram([]) == []


class TestRecomputation:
    """Test that aggregates always reflect the snapshot they are given."""

    def test_fresh_result_per_snapshot(self):
        """Aggregates over a longer snapshot include the new entry."""
        before = make_entries(("Furie", ThoughtType.RATIONAL, N))
        after = make_entries(("Bucurie", ThoughtType.IRRATIONAL, N)) + before

        assert emotion_histogram(before) == [("Furie", 1)]
        assert emotion_histogram(after) == [("Bucurie", 1), ("Furie", 1)]
        assert thought_type_counts(after) == ThoughtTypeCounts(1, 1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
