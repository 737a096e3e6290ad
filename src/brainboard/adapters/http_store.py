"""Backend REST adapter - HTTP client for listing and ingesting thoughts."""

import logging

import requests

from brainboard.config import Config, load_config
from brainboard.core.capture import CaptureDraft
from brainboard.core.thoughts import Thought
from brainboard.ports.thought_store import Folder

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when the thought store cannot be reached or rejects a request."""

    pass


class HttpThoughtStore:
    """
    Backend API adapter.

    Implements ThoughtStore protocol. Talks to /api/thoughts, /api/folders
    and /api/ingest. No business logic - just I/O.
    """

    def __init__(self, config: Config | None = None, session: requests.Session | None = None):
        self.config = config or load_config()
        self.base_url = self.config.backend_url.rstrip("/")
        self._session = session or requests.Session()

    def _request(self, method: str, endpoint: str, **kwargs) -> dict | list:
        """Make an API request and decode the JSON body."""
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"{method} {url} {kwargs.get('params') or ''}")
        try:
            resp = self._session.request(
                method, url, timeout=self.config.request_timeout, **kwargs
            )
        except requests.RequestException as e:
            raise StoreError(f"Could not reach {url}: {e}") from e

        if not resp.ok:
            raise StoreError(f"{method} {endpoint} failed ({resp.status_code}): {_detail(resp)}")

        try:
            return resp.json()
        except ValueError as e:
            raise StoreError(f"{method} {endpoint} returned invalid JSON") from e

    def list_by_folder(self, folder: str) -> list[Thought]:
        """Fetch all thoughts filed under a folder."""
        data = self._request("GET", "/api/thoughts", params={"folder": folder})
        items = data.get("items", []) if isinstance(data, dict) else data

        thoughts = []
        for item in items or []:
            try:
                thoughts.append(Thought.from_api(item, folder))
            except (KeyError, TypeError, ValueError, OverflowError) as e:
                logger.warning(f"Skipping malformed thought in {folder!r}: {e}")
        logger.debug(f"Fetched {len(thoughts)} thoughts from {folder!r}")
        return thoughts

    def list_folders(self) -> list[Folder]:
        """Fetch the folder catalogue."""
        data = self._request("GET", "/api/folders")
        if isinstance(data, dict):
            data = data.get("items", [])
        folders = []
        for item in data or []:
            try:
                folders.append(Folder(key=item["key"], name=item.get("name") or item["key"]))
            except (KeyError, TypeError, AttributeError) as e:
                logger.warning(f"Skipping malformed folder {item!r}: {e}")
        return folders

    def ingest(self, draft: CaptureDraft) -> dict:
        """Send a capture for filing."""
        data = self._request("POST", "/api/ingest", json=draft.to_payload())
        logger.info(f"Captured {draft.modality} thought into {draft.tags or 'auto-routing'}")
        return data if isinstance(data, dict) else {}


def _detail(resp: requests.Response) -> str:
    """Backend error message, falling back to the raw body."""
    try:
        data = resp.json()
    except ValueError:
        return resp.text or resp.reason or "Failed"
    if isinstance(data, dict) and data.get("detail"):
        return str(data["detail"])
    return resp.text or "Failed"
