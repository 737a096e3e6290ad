"""Heuristic completion detection - no I/O dependencies."""

import re

from .thoughts import Thought

DONE_WORDS = re.compile(r"\b(done|completed|finished)\b", re.IGNORECASE)
CHECKED_BOX = re.compile(r"\[[xX]\]")


def is_completed(thought: Thought) -> bool:
    """
    True if the store flags the thought as done, or its text says so.

    Text matching is whole-word ("undone" does not count) plus checked
    checklist markers in the content.
    """
    return (
        thought.completed is True
        or thought.status == "done"
        or DONE_WORDS.search(thought.text) is not None
        or CHECKED_BOX.search(thought.content or "") is not None
    )
