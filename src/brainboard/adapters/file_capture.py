"""Capture sources backed by text, streams and image files."""

import base64
import mimetypes
from pathlib import Path
from typing import TextIO

from brainboard.core.capture import CaptureDraft, build_draft


class TextCaptureSource:
    """
    Text capture from a string or a stream (e.g. stdin).

    Implements CaptureSource protocol.
    """

    def __init__(
        self,
        text: str | TextIO,
        folder: str | None = None,
        source_url: str | None = None,
    ):
        self.text = text
        self.folder = folder
        self.source_url = source_url

    def read(self) -> CaptureDraft | None:
        text = self.text if isinstance(self.text, str) else self.text.read()
        if not text.strip():
            return None
        return build_draft(text, folder=self.folder, source_url=self.source_url)


class ImageCaptureSource:
    """
    Image capture from a file, sent inline as a data URL.

    Implements CaptureSource protocol.
    """

    def __init__(
        self,
        path: Path | str,
        caption: str | None = None,
        folder: str | None = None,
        source_url: str | None = None,
    ):
        self.path = Path(path).expanduser()
        self.caption = caption
        self.folder = folder
        self.source_url = source_url

    def data_url(self) -> str:
        mime, _ = mimetypes.guess_type(self.path.name)
        encoded = base64.b64encode(self.path.read_bytes()).decode("ascii")
        return f"data:{mime or 'application/octet-stream'};base64,{encoded}"

    def read(self) -> CaptureDraft | None:
        if not self.path.exists():
            raise FileNotFoundError(f"Image not found: {self.path}")
        return build_draft(
            self.caption,
            modality="image",
            folder=self.folder,
            source_url=self.source_url,
            image_data_url=self.data_url(),
        )
