"""Ports - interfaces/protocols for external dependencies."""

from .thought_store import Folder, ThoughtStore
from .capture_source import CaptureSource

__all__ = [
    "Folder",
    "ThoughtStore",
    "CaptureSource",
]
