"""
Utility functions for ThoughtDiary.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging for scripts.

    Library modules only create loggers; scripts call this once.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


def from_millis(millis: int) -> datetime:
    """Aware UTC datetime for an epoch-millisecond value."""
    return EPOCH + timedelta(milliseconds=millis)


def format_entry_date(moment: datetime, tz_name: Optional[str] = None) -> str:
    """
    Format an entry timestamp for display.

    Examples:
        2024-03-05T18:30:00Z, "Europe/Bucharest" -> "05.03.2024, 20:30"

    Args:
        moment: Aware timestamp (naive values are treated as UTC)
        tz_name: IANA timezone name; unknown names fall back to UTC

    Returns:
        Local date and time as "DD.MM.YYYY, HH:MM"
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)

    tz = timezone.utc
    if tz_name:
        try:
            tz = ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(f"Unknown timezone {tz_name!r}, using UTC")

    return moment.astimezone(tz).strftime("%d.%m.%Y, %H:%M")


def format_bar(count: int, max_count: int, width: int = 24) -> str:
    """
    Render a horizontal bar proportional to count.

    Non-zero counts always get at least one block.
    """
    if count <= 0 or max_count <= 0:
        return ""

    blocks = max(1, round(count / max_count * width))
    return "█" * min(blocks, width)


def format_percentage(part: int, total: int) -> str:
    """Share of total as a whole percentage, "0%" for an empty total."""
    if total <= 0:
        return "0%"
    return f"{part / total * 100:.0f}%"
