"""Adapters - I/O implementations of ports."""

from .http_store import HttpThoughtStore, StoreError
from .file_capture import ImageCaptureSource, TextCaptureSource

__all__ = [
    "HttpThoughtStore",
    "StoreError",
    "ImageCaptureSource",
    "TextCaptureSource",
]
