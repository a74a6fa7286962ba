"""
CSV export of journal entries.
"""

import csv
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence

from thoughtdiary.core.config import Config
from thoughtdiary.core.models import JournalEntry, format_iso_timestamp

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "id",
    "date",
    "situation",
    "emotion",
    "intensity",
    "thought",
    "thought_type",
    "distortion",
]


def default_export_path(config: Config) -> str:
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    return str(Path(config.export_dir) / f"entries_export_{stamp}.csv")


def export_entries_csv(entries: Sequence[JournalEntry], filepath: str) -> int:
    """
    Write entries, in the given order, to a CSV file.

    Returns the number of rows written.
    """
    Path(filepath).parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_COLUMNS)

        for entry in entries:
            writer.writerow([
                entry.id,
                format_iso_timestamp(entry.created_at),
                entry.situation,
                entry.emotion,
                entry.intensity,
                entry.thought,
                entry.thought_type.value,
                entry.distortion.label,
            ])

    logger.info(f"Exported {len(entries)} entries to {filepath}")
    return len(entries)


def export_session_csv(entries: Sequence[JournalEntry], config: Config, output: Optional[str] = None) -> str:
    """Export to output, or to a timestamped file in the export dir."""
    filepath = output or default_export_path(config)
    export_entries_csv(entries, filepath)
    return filepath
