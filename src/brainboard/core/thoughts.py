"""Pure thought record model - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime, timezone

MODALITIES = ("text", "image", "voice", "link", "other")


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """
    Parse an ISO-8601 timestamp into an aware UTC datetime.

    Accepts a trailing "Z" and bare dates. Naive values are read as UTC.
    Returns None for missing or unparseable input.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, datetime.min.time())
    else:
        text = str(value).strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError:
        return None


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Thought:
    """A captured thought, as filed by the store. Treated as read-only."""

    id: str
    created_at: datetime
    title: str | None = None
    content: str | None = None
    modality: str = "text"
    source_url: str | None = None
    image_ref: str | None = None
    folder: str = ""
    updated_at: datetime | None = None
    completed: bool | None = None
    status: str | None = None
    due_at: str | None = None

    @property
    def effective_updated_at(self) -> datetime:
        """Last update time, falling back to creation time."""
        return self.updated_at or self.created_at

    @property
    def text(self) -> str:
        """Title and content combined, title first."""
        return f"{self.title or ''} {self.content or ''}"

    @property
    def has_image(self) -> bool:
        return bool(self.image_ref) or self.modality == "image"

    @classmethod
    def from_api(cls, data: dict, folder: str = "") -> "Thought":
        """
        Create Thought from a backend API item.

        Raises KeyError/ValueError when the id or creation time is unusable.
        """
        created_at = parse_timestamp(data["created_at"])
        if created_at is None:
            raise ValueError(f"Invalid created_at: {data['created_at']!r}")

        modality = data.get("modality") or "text"
        if modality not in MODALITIES:
            modality = "other"

        tags = data.get("tags") or []
        item_folder = data.get("folder") or (tags[0] if tags else "") or folder

        completed = data.get("completed")
        due_at = data.get("due_at")
        return cls(
            id=str(data["id"]),
            created_at=created_at,
            title=data.get("title"),
            content=data.get("content"),
            modality=modality,
            source_url=data.get("source_url"),
            image_ref=data.get("image_data_url"),
            folder=item_folder,
            updated_at=parse_timestamp(data.get("updated_at")),
            completed=completed if isinstance(completed, bool) else None,
            status=data.get("status"),
            due_at=str(due_at) if due_at is not None else None,
        )


def age_in_days(moment: datetime, now: datetime) -> float:
    """Fractional days between moment and now, clamped at zero."""
    return max(0.0, (now - moment).total_seconds() / 86400)
