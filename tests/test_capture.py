"""Tests for capture drafts and capture sources."""

import base64
import io

import pytest

from brainboard.adapters.file_capture import ImageCaptureSource, TextCaptureSource
from brainboard.core.capture import TITLE_MAX_LENGTH, build_draft, derive_title


class TestBuildDraft:
    def test_title_is_first_line(self):
        draft = build_draft("Groceries\nmilk, eggs", folder="inbox")
        assert draft.title == "Groceries"
        assert draft.content == "Groceries\nmilk, eggs"
        assert draft.tags == ["inbox"]
        assert draft.modality == "text"

    def test_title_truncated(self):
        assert len(derive_title("x" * 200)) == TITLE_MAX_LENGTH

    def test_blank_text_rejected(self):
        with pytest.raises(ValueError):
            build_draft("   \n ")

    def test_link_modality(self):
        draft = build_draft("Read later", source_url="https://example.com/post")
        assert draft.modality == "link"
        assert draft.to_payload()["source_url"] == "https://example.com/post"

    def test_image_without_text(self):
        draft = build_draft(None, image_data_url="data:image/png;base64,AA")
        assert draft.modality == "image"
        assert draft.title is None
        assert "content" not in draft.to_payload()

    def test_no_folder_lets_backend_route(self):
        assert build_draft("idea").to_payload()["tags"] == []


class TestTextCaptureSource:
    def test_from_string(self):
        draft = TextCaptureSource("ship it", folder="tasks").read()
        assert draft.content == "ship it"
        assert draft.tags == ["tasks"]

    def test_from_stream(self):
        draft = TextCaptureSource(io.StringIO("line one\nline two")).read()
        assert draft.title == "line one"

    def test_empty_stream(self):
        assert TextCaptureSource(io.StringIO("")).read() is None


class TestImageCaptureSource:
    def test_encodes_data_url(self, tmp_path):
        path = tmp_path / "sketch.png"
        path.write_bytes(b"\x89PNG")

        draft = ImageCaptureSource(path, caption="whiteboard", folder="ideas").read()

        assert draft.modality == "image"
        assert draft.title == "whiteboard"
        assert draft.tags == ["ideas"]
        expected = base64.b64encode(b"\x89PNG").decode("ascii")
        assert draft.image_data_url == f"data:image/png;base64,{expected}"

    def test_keeps_source_url(self, tmp_path):
        path = tmp_path / "shot.jpg"
        path.write_bytes(b"\xff\xd8")

        draft = ImageCaptureSource(path, source_url="https://example.com/a").read()

        assert draft.modality == "image"
        assert draft.to_payload()["source_url"] == "https://example.com/a"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ImageCaptureSource(tmp_path / "nope.png").read()
