"""Capture drafts for the write-only ingest path - no I/O dependencies."""

from dataclasses import dataclass, field

TITLE_MAX_LENGTH = 80


@dataclass
class CaptureDraft:
    """A thought about to be sent to the store for filing."""

    content: str | None = None
    title: str | None = None
    modality: str = "text"
    source_url: str | None = None
    image_data_url: str | None = None
    tags: list[str] = field(default_factory=list)

    def to_payload(self) -> dict:
        """Ingest request body. Unset optional fields are omitted."""
        payload: dict = {"modality": self.modality, "tags": list(self.tags)}
        for key in ("title", "content", "source_url", "image_data_url"):
            value = getattr(self, key)
            if value:
                payload[key] = value
        return payload


def derive_title(text: str) -> str:
    """First line of the text, trimmed to the title length."""
    return text.split("\n")[0][:TITLE_MAX_LENGTH]


def build_draft(
    text: str | None = None,
    modality: str = "text",
    folder: str | None = None,
    source_url: str | None = None,
    image_data_url: str | None = None,
) -> CaptureDraft:
    """
    Build a draft from raw captured input.

    Raises ValueError when there is nothing to capture.
    """
    has_text = bool(text and text.strip())
    if not has_text and not image_data_url:
        raise ValueError("Nothing to capture")

    if image_data_url and modality == "text" and not has_text:
        modality = "image"
    elif source_url and modality == "text":
        modality = "link"

    return CaptureDraft(
        content=text if has_text else None,
        title=derive_title(text) if has_text else None,
        modality=modality,
        source_url=source_url or None,
        image_data_url=image_data_url or None,
        tags=[folder] if folder else [],
    )
