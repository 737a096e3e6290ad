"""Pure folder statistics - no I/O dependencies."""

import math
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Sequence

from .completion import is_completed
from .thoughts import Thought, age_in_days, utc_now


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a display would: 0.5 always goes up."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


@dataclass(frozen=True)
class FolderStats:
    """Summary metrics for a collection of thoughts."""

    total: int = 0
    text: int = 0
    images: int = 0
    avg_age_days: float = 0
    completed: int = 0
    completion_rate: int = 0
    latest_age_days: float = 0

    @property
    def other(self) -> int:
        """Thoughts that are neither text nor image; never negative."""
        return max(0, self.total - self.text - self.images)

    def to_dict(self) -> dict:
        return asdict(self)


def compute_stats(thoughts: Sequence[Thought], now: datetime | None = None) -> FolderStats:
    """
    Compute statistics over a snapshot of thoughts.

    Pure function - no I/O. An empty snapshot gives all zeros.
    """
    if not thoughts:
        return FolderStats()

    now = now or utc_now()
    ages = [age_in_days(t.effective_updated_at, now) for t in thoughts]
    completed = sum(1 for t in thoughts if is_completed(t))

    return FolderStats(
        total=len(thoughts),
        text=sum(1 for t in thoughts if t.modality == "text"),
        images=sum(1 for t in thoughts if t.has_image),
        avg_age_days=round_half_up(sum(ages) / len(ages), 1),
        completed=completed,
        completion_rate=int(round_half_up(completed * 100 / len(thoughts))),
        latest_age_days=round_half_up(min(ages), 1),
    )
