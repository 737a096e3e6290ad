"""Capture input provider interface."""

from typing import Protocol

from brainboard.core.capture import CaptureDraft


class CaptureSource(Protocol):
    """Interface for anything that produces captured input (text, image, voice)."""

    def read(self) -> CaptureDraft | None:
        """Read one capture. Returns None if the source produced nothing."""
        ...
