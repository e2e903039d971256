"""Deterministic vault paths for feed folders, item notes and index notes."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from rss_notes.models import VaultPath

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Folder name used for a feed whose title cannot name a folder.
UNTITLED_FEED = "Untitled"


def escape_for_path(text: Optional[str]) -> str:
    """Make a title usable as a single path segment."""
    if text is None:
        return ""
    return text.replace(":", " -").replace("/", "-").replace("\\", "-")


def _usable_segment(segment: Optional[str]) -> bool:
    return bool(segment) and segment.strip() not in ("", ".", "..")


def feed_segment(feed_title: Optional[str], fallback: Optional[str] = None) -> str:
    """
    Folder name of a feed: the escaped title, or the fallback when the title is
    empty or would resolve to the current or parent folder.
    """
    escaped = escape_for_path(feed_title)
    if _usable_segment(escaped):
        return escaped
    fallback = escape_for_path(fallback)
    return fallback if _usable_segment(fallback) else UNTITLED_FEED


def epoch_millis(timestamp: datetime) -> int:
    """Milliseconds since the Unix epoch. Naive timestamps are taken as UTC."""
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return (timestamp - _EPOCH) // timedelta(milliseconds=1)


def feed_folder_path(root_folder: str, feed_title: Optional[str], fallback: Optional[str] = None) -> VaultPath:
    return f"{root_folder}/{feed_segment(feed_title, fallback)}"


def index_note_path(root_folder: str, feed_title: Optional[str], fallback: Optional[str] = None) -> VaultPath:
    return f"{feed_folder_path(root_folder, feed_title, fallback)}.md"


def item_note_path(
    root_folder: str,
    feed_title: Optional[str],
    item_title: Optional[str],
    published: Optional[datetime],
    fallback: Optional[str] = None,
) -> VaultPath:
    """
    Path of the note for a feed item.

    The path only depends on the feed title, the item title and the publish
    timestamp, so items sharing all three map onto the same note.
    """
    suffix = str(epoch_millis(published)) if published is not None else ""
    folder = feed_folder_path(root_folder, feed_title, fallback)
    return f"{folder}/{escape_for_path(item_title)}_{suffix}.md"
