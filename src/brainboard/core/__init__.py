"""Functional core - pure business logic with no I/O."""

from .thoughts import Thought, parse_timestamp
from .due_dates import extract_due_date
from .completion import is_completed
from .stats import FolderStats, compute_stats
from .ranking import RankedThought, Rankings, rank_thoughts
from .capture import CaptureDraft, build_draft

__all__ = [
    # Thoughts
    "Thought",
    "parse_timestamp",
    # Heuristics
    "extract_due_date",
    "is_completed",
    # Statistics
    "FolderStats",
    "compute_stats",
    # Ranking
    "RankedThought",
    "Rankings",
    "rank_thoughts",
    # Capture
    "CaptureDraft",
    "build_draft",
]
