"""Plain-text formatting of statistics and ranking slices - no I/O."""

from .ranking import RankedThought
from .stats import FolderStats
from .thoughts import Thought


def thought_label(thought: Thought) -> str:
    """Title, else first content line, else source URL."""
    label = thought.title or (thought.content or "").split("\n")[0] or thought.source_url
    return label or f"({thought.modality})"


def format_due(days: int | None) -> str:
    """Human-readable due delta."""
    if days is None:
        return ""
    if days < 0:
        return f"overdue by {-days}d"
    if days == 0:
        return "due today"
    return f"due in {days}d"


def format_due_line(item: RankedThought) -> str:
    folder = f" [{item.thought.folder}]" if item.thought.folder else ""
    return f"- {thought_label(item.thought)} ({format_due(item.days_until_due)}){folder}"


def format_recent_line(item: RankedThought) -> str:
    folder = f" [{item.thought.folder}]" if item.thought.folder else ""
    return f"- {thought_label(item.thought)} (updated {item.days_since_update}d ago){folder}"


def format_stats(stats: FolderStats) -> list[str]:
    return [
        f"Total: {stats.total} (text {stats.text}, images {stats.images}, other {stats.other})",
        f"Completed: {stats.completed} ({stats.completion_rate}%)",
        f"Average age: {stats.avg_age_days}d, freshest: {stats.latest_age_days}d",
    ]


def format_section(title: str, lines: list[str], empty_msg: str = "None") -> str:
    return f"### {title}\n" + ("\n".join(lines) or empty_msg)
