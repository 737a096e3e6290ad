"""Folder merging and overview assembly.

Fetches snapshots from the thought store and hands them to the pure
statistics and ranking core. Overview mode merges several folders; any
other folder key is forwarded as-is.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from .adapters.http_store import StoreError
from .core.ranking import Rankings, rank_thoughts
from .core.stats import FolderStats, compute_stats
from .core.thoughts import Thought, utc_now
from .ports.thought_store import ThoughtStore

logger = logging.getLogger(__name__)

OVERVIEW_KEY = "overview"
OVERVIEW_FOLDERS = ("tasks", "notes", "inbox")


class FolderFetchError(StoreError):
    """Raised when one folder of a merge could not be listed."""

    def __init__(self, folder: str, cause: Exception):
        self.folder = folder
        self.cause = cause
        super().__init__(f"Failed to load folder {folder!r}: {cause}")


@dataclass(frozen=True)
class Overview:
    """Statistics and rankings computed from one snapshot."""

    folder: str
    thoughts: list[Thought]
    stats: FolderStats
    rankings: Rankings


def is_overview(folder: str | None) -> bool:
    return folder is None or folder == OVERVIEW_KEY


def merge_folders(
    store: ThoughtStore, folders: Sequence[str] = OVERVIEW_FOLDERS
) -> list[Thought]:
    """
    List several folders concurrently and merge them, newest first.

    All listings must succeed. The first failure raises FolderFetchError
    at once, without waiting on the other listings; no partial merge is
    returned.
    """
    if not folders:
        return []

    results: dict[str, list[Thought]] = {}
    executor = ThreadPoolExecutor(max_workers=len(folders))
    futures = {executor.submit(store.list_by_folder, f): f for f in folders}
    try:
        for future in as_completed(futures):
            folder = futures[future]
            try:
                results[folder] = future.result()
            except Exception as e:
                logger.error(f"Overview merge aborted, {folder!r} failed: {e}")
                raise FolderFetchError(folder, e) from e
    finally:
        # Fetches still in flight are abandoned, not awaited
        executor.shutdown(wait=False, cancel_futures=True)

    merged = [t for f in folders for t in results[f]]
    merged.sort(key=lambda t: t.created_at, reverse=True)
    logger.debug(f"Merged {len(merged)} thoughts from {', '.join(folders)}")
    return merged


def load_thoughts(store: ThoughtStore, folder: str | None = None) -> list[Thought]:
    """Snapshot for a folder, or the merged overview folders."""
    if is_overview(folder):
        return merge_folders(store)
    return store.list_by_folder(folder)


def build_overview(
    store: ThoughtStore,
    folder: str | None = None,
    now: datetime | None = None,
) -> Overview:
    """Fetch one snapshot, then derive statistics and rankings from it."""
    now = now or utc_now()
    thoughts = load_thoughts(store, folder)
    return Overview(
        folder=OVERVIEW_KEY if is_overview(folder) else folder,
        thoughts=thoughts,
        stats=compute_stats(thoughts, now),
        rankings=rank_thoughts(thoughts, now),
    )
