"""Due date inference from free-form thought text - no I/O dependencies."""

import re
from datetime import date, datetime, timedelta, timezone

from .thoughts import Thought, parse_timestamp, utc_now

DUE_ON_PATTERN = re.compile(r"\bdue\s*:?\s*(\d{4}-\d{2}-\d{2})", re.IGNORECASE)
DUE_IN_PATTERN = re.compile(r"\bdue\s+in\s+(\d+)\s*(?:days?|d)\b", re.IGNORECASE)


def _match_due_on(text: str) -> datetime | None:
    match = DUE_ON_PATTERN.search(text)
    if not match:
        return None
    try:
        day = date.fromisoformat(match.group(1))
    except ValueError:
        return None
    return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)


def _match_due_in(text: str, now: datetime) -> datetime | None:
    match = DUE_IN_PATTERN.search(text)
    if not match:
        return None
    try:
        return now + timedelta(days=int(match.group(1)))
    except (ValueError, OverflowError):
        return None


def parse_due_text(text: str, now: datetime | None = None) -> datetime | None:
    """
    Find a due date hint in text.

    "due:YYYY-MM-DD" is tried first; an impossible calendar date falls
    through to "due in N days", which counts from now.
    """
    now = now or utc_now()
    return _match_due_on(text) or _match_due_in(text, now)


def parse_due_field(value: str | None) -> datetime | None:
    """Parse the store's structured due value. Invalid values give None."""
    return parse_timestamp(value)


def extract_due_date(thought: Thought, now: datetime | None = None) -> datetime | None:
    """
    Infer a thought's due date.

    Text hints in title+content override the structured due_at field, so
    editing the text is enough to move a deadline.
    """
    return parse_due_text(thought.text, now) or parse_due_field(thought.due_at)
