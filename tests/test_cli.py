"""Tests for the command line interface."""

import json
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from brainboard.adapters.http_store import StoreError
from brainboard.cli import main
from brainboard.config import Config
from brainboard.core.thoughts import Thought
from brainboard.ports.thought_store import Folder


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def store():
    now = datetime.now(timezone.utc)
    mock = MagicMock()
    folders = {
        "tasks": [
            Thought(
                id="t1",
                created_at=now - timedelta(days=1),
                title="Pay rent",
                content="due in 2 days",
                folder="tasks",
            )
        ],
        "notes": [
            Thought(
                id="n1",
                created_at=now - timedelta(days=3),
                title="Recipe",
                content="done",
                folder="notes",
            )
        ],
        "inbox": [],
    }
    mock.list_by_folder.side_effect = lambda folder: folders.get(folder, [])
    mock.list_folders.return_value = [Folder("inbox", "Inbox"), Folder("tasks", "Tasks")]
    return mock


@pytest.fixture(autouse=True)
def patched(store):
    with patch("brainboard.cli.HttpThoughtStore", return_value=store), patch(
        "brainboard.cli.load_config", return_value=Config()
    ):
        yield


class TestReadCommands:
    def test_folders(self, runner):
        result = runner.invoke(main, ["folders"])
        assert result.exit_code == 0
        assert "Inbox" in result.output

    def test_list_default_folder(self, runner, store):
        result = runner.invoke(main, ["list"])
        assert result.exit_code == 0
        assert "inbox is empty." in result.output
        store.list_by_folder.assert_called_once_with("inbox")

    def test_list_json(self, runner):
        result = runner.invoke(main, ["list", "tasks", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)[0]["id"] == "t1"

    def test_stats_json(self, runner):
        result = runner.invoke(main, ["stats", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["total"] == 2
        assert data["completed"] == 1
        assert data["completion_rate"] == 50

    def test_overview_text(self, runner):
        result = runner.invoke(main, ["overview"])
        assert result.exit_code == 0
        assert "### Due Soon" in result.output
        assert "- Pay rent (due in 2d) [tasks]" in result.output
        assert "### Recently Updated" in result.output

    def test_overview_json(self, runner):
        result = runner.invoke(main, ["overview", "--json"])
        data = json.loads(result.output)
        assert [item["id"] for item in data["due_soon"]] == ["t1"]
        assert [item["id"] for item in data["recently_updated"]] == ["t1", "n1"]

    def test_store_failure(self, runner, store):
        store.list_by_folder.side_effect = StoreError("backend down")
        result = runner.invoke(main, ["overview"])
        assert result.exit_code == 1
        assert "Error:" in result.output


class TestCapture:
    def test_capture_text(self, runner, store):
        result = runner.invoke(main, ["capture", "Buy stamps", "--folder", "tasks"])
        assert result.exit_code == 0
        draft = store.ingest.call_args.args[0]
        assert draft.content == "Buy stamps"
        assert draft.tags == ["tasks"]

    def test_capture_stdin(self, runner, store):
        result = runner.invoke(main, ["capture", "-"], input="from a pipe\n")
        assert result.exit_code == 0
        assert store.ingest.call_args.args[0].title == "from a pipe"

    def test_overview_capture_goes_to_inbox(self, runner, store):
        runner.invoke(main, ["capture", "idea", "--folder", "overview"])
        assert store.ingest.call_args.args[0].tags == ["inbox"]

    def test_capture_image_with_url(self, runner, store, tmp_path):
        path = tmp_path / "page.png"
        path.write_bytes(b"\x89PNG")
        result = runner.invoke(
            main, ["capture", "--image", str(path), "--url", "https://example.com/page"]
        )
        assert result.exit_code == 0
        draft = store.ingest.call_args.args[0]
        assert draft.modality == "image"
        assert draft.source_url == "https://example.com/page"

    def test_nothing_to_capture(self, runner, store):
        result = runner.invoke(main, ["capture", "-"], input="  \n")
        assert result.exit_code == 1
        store.ingest.assert_not_called()
