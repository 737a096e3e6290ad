"""Due-soon and recently-updated ranking - no I/O dependencies."""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Sequence

from .due_dates import extract_due_date
from .stats import round_half_up
from .thoughts import Thought, age_in_days, utc_now

DUE_SOON_LIMIT = 6
RECENT_LIMIT = 6
DUE_SOON_HORIZON_DAYS = 7


@dataclass(frozen=True)
class RankedThought:
    """A thought annotated for summary display."""

    thought: Thought
    due_at: datetime | None
    days_until_due: int | None
    days_since_update: float

    @property
    def is_overdue(self) -> bool:
        return self.days_until_due is not None and self.days_until_due < 0


@dataclass(frozen=True)
class Rankings:
    """The two summary slices of a snapshot."""

    due_soon: list[RankedThought] = field(default_factory=list)
    recently_updated: list[RankedThought] = field(default_factory=list)


def days_until(due_at: datetime, now: datetime) -> int:
    """Whole days until due, rounded up. Negative means overdue."""
    return math.ceil((due_at - now).total_seconds() / 86400)


def annotate(thought: Thought, now: datetime) -> RankedThought:
    due_at = extract_due_date(thought, now)
    return RankedThought(
        thought=thought,
        due_at=due_at,
        days_until_due=days_until(due_at, now) if due_at else None,
        days_since_update=round_half_up(age_in_days(thought.effective_updated_at, now), 1),
    )


def due_soon(thoughts: Sequence[Thought], now: datetime | None = None) -> list[RankedThought]:
    """
    Thoughts due within the horizon, earliest (most overdue) first.

    Thoughts without a due date are left out.
    """
    now = now or utc_now()
    ranked = [annotate(t, now) for t in thoughts]
    upcoming = [
        r
        for r in ranked
        if r.days_until_due is not None and r.days_until_due <= DUE_SOON_HORIZON_DAYS
    ]
    upcoming.sort(key=lambda r: r.due_at)
    return upcoming[:DUE_SOON_LIMIT]


def recently_updated(
    thoughts: Sequence[Thought], now: datetime | None = None
) -> list[RankedThought]:
    """Most recently updated thoughts first. Ties keep input order."""
    now = now or utc_now()
    latest = sorted(thoughts, key=lambda t: t.effective_updated_at, reverse=True)
    return [annotate(t, now) for t in latest[:RECENT_LIMIT]]


def rank_thoughts(thoughts: Sequence[Thought], now: datetime | None = None) -> Rankings:
    """
    Build both summary slices against a single evaluation time.

    Pure function - no I/O.
    """
    now = now or utc_now()
    return Rankings(
        due_soon=due_soon(thoughts, now),
        recently_updated=recently_updated(thoughts, now),
    )
