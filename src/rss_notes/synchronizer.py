"""Synchronization of registered feeds into vault notes."""

import logging
import posixpath
from datetime import datetime, timezone
from typing import Callable, List, Optional
from urllib.parse import urlparse

from rss_notes.feed_registry import get_all_feeds
from rss_notes.generate_notes import create_environment, render_index_note, render_item_note
from rss_notes.models import FeedRegistration, FeedSyncResult, ParsedFeed, VaultPath
from rss_notes.protocols import DocumentStore, FeedFetcher
from rss_notes.utils.front_matter import frontmatter_value
from rss_notes.utils.paths import feed_folder_path, feed_segment, index_note_path, item_note_path


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def registration_name(registration: FeedRegistration) -> str:
    """File name of the registration's index note without the extension."""
    return posixpath.splitext(posixpath.basename(registration.index_note_path))[0]


class FeedSynchronizer:
    """Keeps item notes and index notes in the vault in sync with their feeds."""

    def __init__(
        self,
        vault: DocumentStore,
        fetcher: FeedFetcher,
        root_folder: str = "RSS",
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the synchronizer.

        Args:
            vault: Document store holding the notes
            fetcher: Fetcher returning parsed feeds for URLs
            root_folder: Vault folder holding index notes and feed folders
            clock: Returns the current time, written as `lastChecked`
        """
        self.vault = vault
        self.fetcher = fetcher
        self.root_folder = root_folder
        self.clock = clock
        self.env = create_environment()

    def get_all_feeds(self) -> List[FeedRegistration]:
        return get_all_feeds(self.vault, self.root_folder)

    def materialize_items(self, feed: ParsedFeed, fallback: Optional[str] = None) -> List[VaultPath]:
        """Create a note for every item that does not have one yet.

        Existing notes are never touched, so running this again over the same
        feed creates nothing. `fallback` names the feed folder when the feed's
        title cannot.

        Returns:
            List[VaultPath]: Paths of the notes created.
        """
        feed_folder = feed_folder_path(self.root_folder, feed.title, fallback)
        if not self.vault.folder_exists(feed_folder):
            self.vault.create_folder(feed_folder)

        created = []
        for item in feed.items:
            path = item_note_path(self.root_folder, feed.title, item.title, item.published, fallback)
            if self.vault.file_exists(path):
                logging.debug(f"Note \"{path}\" already exists. Skipping.")
                continue

            self.vault.create(path, render_item_note(item, feed, env=self.env))
            logging.info(f"Created note \"{path}\"")
            created.append(path)
        return created

    def write_index_note(self, feed: ParsedFeed, registration: FeedRegistration) -> VaultPath:
        """Rewrite the feed's index note and move it next to the feed folder.

        Returns:
            VaultPath: Path of the index note after the rename.
        """
        fallback = registration_name(registration)
        target_path = index_note_path(self.root_folder, feed.title, fallback)
        text = render_index_note(
            feed=feed,
            url=feed.self_url or registration.url,
            feed_folder=feed_folder_path(self.root_folder, feed.title, fallback),
            last_checked=self.clock(),
            env=self.env,
        )

        if self.vault.file_exists(registration.index_note_path):
            self.vault.modify(registration.index_note_path, text)
            self.vault.rename(registration.index_note_path, target_path)
        elif self.vault.file_exists(target_path):
            self.vault.modify(target_path, text)
        else:
            logging.info(f"Index note \"{registration.index_note_path}\" is missing. Creating \"{target_path}\".")
            self.vault.create(target_path, text)
        return target_path

    def sync_feed(self, registration: FeedRegistration) -> FeedSyncResult:
        """Fetch one feed, create notes for its new items and refresh its index note."""
        logging.info(f"Processing feed: {registration.url}")
        feed = self.fetcher.fetch(registration.url)
        created = self.materialize_items(feed, fallback=registration_name(registration))
        path = self.write_index_note(feed, registration)
        logging.info(f"Feed successfully processed: {feed.title}. {len(created)} new notes.")
        return FeedSyncResult(
            url=registration.url,
            index_note_path=path,
            created_notes=created,
        )

    def reload_feeds(self) -> List[FeedSyncResult]:
        """Synchronize every registered feed, one after another.

        A feed that fails is logged and reported in its result; the remaining
        feeds are still processed.
        """
        registrations = self.get_all_feeds()
        logging.info(f"Starting processing for {len(registrations)} feed(s)...")

        results = []
        for registration in registrations:
            try:
                results.append(self.sync_feed(registration))
            except Exception as e:
                logging.exception(f"Failed to process feed {registration.url}")
                results.append(FeedSyncResult(
                    url=registration.url,
                    index_note_path=registration.index_note_path,
                    error=f"{e.__class__.__name__}: {e}",
                ))

        total_created = sum(len(result.created_notes) for result in results)
        failed = [result.url for result in results if not result.succeeded]
        logging.info(f"Finished processing all feeds. New notes: {total_created}, failed feeds: {len(failed)}")
        return results

    def subscribe(self, url: str) -> Optional[FeedSyncResult]:
        """Register a feed by writing a stub index note for it, then synchronize it.

        Returns:
            FeedSyncResult: Result of the first synchronization.
            None: If the URL is already registered.
        """
        if any(registration.url == url for registration in self.get_all_feeds()):
            logging.warning(f"Feed \"{url}\" is already registered. Skipping.")
            return None

        parts = urlparse(url)
        stub_path = f"{self.root_folder}/{feed_segment((parts.netloc + parts.path).strip('/'))}.md"
        if not self.vault.folder_exists(self.root_folder):
            self.vault.create_folder(self.root_folder)
        self.vault.create(stub_path, f"---\nurl: {frontmatter_value(url)}\n---\n")
        logging.info(f"Registered feed \"{url}\" in \"{stub_path}\"")

        return self.sync_feed(FeedRegistration(url=url, index_note_path=stub_path))
