"""
Data models for ThoughtDiary.

Models: JournalEntry (value object), StorageSlot (durable key-value row).
Closed option sets: EMOTIONS, ThoughtType, Distortion.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Union

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


EMOTIONS = (
    "Bucurie",
    "Liniște",
    "Tristețe",
    "Furie",
    "Frică",
    "Rușine",
    "Vinovăție",
    "Gelozie",
    "Invidie",
    "Mândrie",
    "Dezgust",
)

MIN_INTENSITY = 0
MAX_INTENSITY = 100

EntryId = Union[int, str]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ThoughtType(str, Enum):
    """Classification of an automatic thought."""
    RATIONAL = "rational"
    IRRATIONAL = "irrational"
    UNCLASSIFIED = "unclassified"

    @classmethod
    def parse(cls, value: Optional[str]) -> "ThoughtType":
        """
        Map a raw value to a thought type.

        Empty values and the legacy "necunoscut" sentinel become UNCLASSIFIED.
        """
        if isinstance(value, cls):
            return value
        if value is None or not str(value).strip():
            return cls.UNCLASSIFIED

        normalized = str(value).strip().lower()
        if normalized == "necunoscut":
            return cls.UNCLASSIFIED
        return cls(normalized)

    @property
    def label(self) -> str:
        return _THOUGHT_TYPE_LABELS[self]


_THOUGHT_TYPE_LABELS = {
    ThoughtType.RATIONAL: "Gând rațional (sprijină emoții sănătoase)",
    ThoughtType.IRRATIONAL: "Gând irațional (poate genera emoții nesănătoase)",
    ThoughtType.UNCLASSIFIED: "Neîncadrat",
}


class Distortion(str, Enum):
    """Cognitive distortion attached to a thought, in display order."""
    CATASTROPHIZING = "Catastrofare"
    ALL_OR_NOTHING = "Gândire alb-negru"
    MIND_READING = "Citirea gândurilor"
    FORTUNE_TELLING = "Prezicerea viitorului"
    OVERGENERALIZATION = "Generalizare excesivă"
    PERSONALIZATION = "Personalizare"
    GLOBAL_LABELING = "Etichetare globală"
    RIGID_MUSTS = "„Trebuie” rigide"
    OTHER = "Alt tip de distorsiune"
    UNCLASSIFIED = "unclassified"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Distortion":
        """
        Map a raw value to a distortion.

        Empty values and the legacy "Neîncadrat" label become UNCLASSIFIED.
        """
        if isinstance(value, cls):
            return value
        if value is None or not str(value).strip():
            return cls.UNCLASSIFIED

        normalized = str(value).strip()
        if normalized == UNCLASSIFIED_DISTORTION_LABEL:
            return cls.UNCLASSIFIED
        return cls(normalized)

    @classmethod
    def choices(cls) -> tuple:
        """Selectable distortions, without the sentinel."""
        return tuple(d for d in cls if d is not cls.UNCLASSIFIED)

    @property
    def label(self) -> str:
        if self is Distortion.UNCLASSIFIED:
            return UNCLASSIFIED_DISTORTION_LABEL
        return self.value


UNCLASSIFIED_DISTORTION_LABEL = "Neîncadrat"


def format_iso_timestamp(moment: datetime) -> str:
    """Format as UTC ISO-8601 with millisecond precision and a Z suffix."""
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def parse_iso_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, assuming UTC when no offset is given."""
    if not isinstance(value, str) or not value:
        raise ValueError(f"Invalid timestamp: {value!r}")

    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class JournalEntry:
    """
    A single automatic-thought record.

    Immutable once created. Constructed by the form controller or
    decoded from the persisted document.
    """

    id: EntryId
    created_at: datetime
    emotion: str
    thought: str
    situation: str = ""
    intensity: int = 50
    thought_type: ThoughtType = ThoughtType.UNCLASSIFIED
    distortion: Distortion = Distortion.UNCLASSIFIED

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, (int, str)):
            raise ValueError(f"Invalid entry id: {self.id!r}")
        if isinstance(self.id, str) and not self.id.strip():
            raise ValueError("Entry id must not be empty")

        if not isinstance(self.emotion, str) or not self.emotion.strip():
            raise ValueError("Emotion is required")
        if not isinstance(self.thought, str) or not self.thought.strip():
            raise ValueError("Thought is required")
        if not isinstance(self.situation, str):
            raise ValueError("Situation must be text")

        if isinstance(self.intensity, bool) or not isinstance(self.intensity, int):
            raise ValueError(f"Intensity must be an integer: {self.intensity!r}")
        if not MIN_INTENSITY <= self.intensity <= MAX_INTENSITY:
            raise ValueError(f"Intensity out of range: {self.intensity}")

        if not isinstance(self.created_at, datetime):
            raise ValueError(f"Invalid creation time: {self.created_at!r}")

        # Normalise to aware UTC at millisecond precision
        created_at = self.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        try:
            created_at = created_at.astimezone(timezone.utc)
        except OverflowError as e:
            raise ValueError(f"Creation time out of range: {self.created_at!r}") from e
        created_at = created_at.replace(microsecond=created_at.microsecond // 1000 * 1000)
        object.__setattr__(self, "created_at", created_at)

        object.__setattr__(self, "thought_type", ThoughtType.parse(self.thought_type))
        object.__setattr__(self, "distortion", Distortion.parse(self.distortion))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted document shape."""
        return {
            "id": self.id,
            "date": format_iso_timestamp(self.created_at),
            "situation": self.situation,
            "emotion": self.emotion,
            "intensity": self.intensity,
            "thought": self.thought,
            "thoughtType": self.thought_type.value,
            "distortion": self.distortion.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JournalEntry":
        """
        Create from a persisted document item.

        Raises ValueError on anything that does not describe a valid entry.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Entry must be an object, got {type(data).__name__}")

        missing = [k for k in ("id", "date", "emotion", "thought") if k not in data]
        if missing:
            raise ValueError(f"Entry missing fields: {', '.join(missing)}")

        entry_id = data["id"]
        if isinstance(entry_id, float) and entry_id.is_integer():
            entry_id = int(entry_id)

        intensity = data.get("intensity", 50)
        if isinstance(intensity, float) and intensity.is_integer():
            intensity = int(intensity)

        return cls(
            id=entry_id,
            created_at=parse_iso_timestamp(data["date"]),
            situation=data.get("situation") or "",
            emotion=data["emotion"],
            intensity=intensity,
            thought=data["thought"],
            thought_type=ThoughtType.parse(data.get("thoughtType")),
            distortion=Distortion.parse(data.get("distortion")),
        )

    def __repr__(self) -> str:
        return f"<JournalEntry {self.id}: {self.emotion} ({self.intensity}%) {self.thought_type.value}>"


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class StorageSlot(Base):
    """
    Durable key-value slot.

    One row per namespace key; the value is a whole serialized document.
    """

    __tablename__ = "storage_slots"

    key: Mapped[str] = mapped_column(String(200), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )

    def __repr__(self) -> str:
        return f"<StorageSlot {self.key}: {len(self.value or '')} chars>"
