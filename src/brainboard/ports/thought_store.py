"""Thought store interface."""

from dataclasses import dataclass
from typing import Protocol

from brainboard.core.capture import CaptureDraft
from brainboard.core.thoughts import Thought


@dataclass(frozen=True)
class Folder:
    """A smart folder offered by the store."""

    key: str
    name: str


class ThoughtStore(Protocol):
    """Interface for the remote service that files and lists thoughts."""

    def list_by_folder(self, folder: str) -> list[Thought]:
        """All thoughts tagged with a folder, in no particular order."""
        ...

    def list_folders(self) -> list[Folder]:
        """Folders the store routes thoughts into."""
        ...

    def ingest(self, draft: CaptureDraft) -> dict:
        """Submit a captured thought for filing. Returns the stored item."""
        ...
