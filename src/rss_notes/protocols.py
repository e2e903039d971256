"""Defines protocols for the collaborators injected into the synchronizer."""

from typing import List, Protocol

from rss_notes.models import ParsedFeed, VaultPath


class VaultFile(Protocol):
    """A markdown document in the vault."""

    path: VaultPath


class DocumentStore(Protocol):
    """Protocol defining the vault operations the synchronizer relies on."""

    def get_markdown_files(self) -> List[VaultFile]:
        """List every markdown document in the vault."""
        ...

    def folder_exists(self, path: VaultPath) -> bool:
        ...

    def create_folder(self, path: VaultPath) -> None:
        ...

    def file_exists(self, path: VaultPath) -> bool:
        ...

    def create(self, path: VaultPath, text: str) -> None:
        """Create a new document, failing if one already exists at the path."""
        ...

    def read(self, path: VaultPath) -> str:
        ...

    def modify(self, path: VaultPath, text: str) -> None:
        """Overwrite the full contents of an existing document."""
        ...

    def rename(self, path: VaultPath, new_path: VaultPath) -> None:
        ...


class FeedFetcher(Protocol):
    """
    Feed fetcher.
    """

    def fetch(self, url: str) -> ParsedFeed:
        """
        Fetch and parse the feed at the URL.
        """
        ...
