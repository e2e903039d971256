import logging
import posixpath
from typing import List

from rss_notes.models import FeedRegistration
from rss_notes.protocols import DocumentStore
from rss_notes.utils.front_matter import read_front_matter


def get_all_feeds(vault: DocumentStore, root_folder: str) -> List[FeedRegistration]:
    """
    Discover the feeds to synchronize from the index notes in the root folder.

    Every note directly inside the root folder (not in the feed subfolders)
    whose front matter carries a non-empty `url` registers that URL. Other
    notes are skipped.
    """
    registrations = []
    for file in vault.get_markdown_files():
        if posixpath.dirname(file.path) != root_folder:
            continue

        front_matter = read_front_matter(vault.read(file.path))
        url = front_matter.get("url")
        if not isinstance(url, str) or not url.strip():
            logging.debug(f"No feed URL in \"{file.path}\", skipping.")
            continue

        registrations.append(FeedRegistration(url=url.strip(), index_note_path=file.path))

    logging.info(f"Found {len(registrations)} registered feeds in \"{root_folder}\".")
    return registrations
