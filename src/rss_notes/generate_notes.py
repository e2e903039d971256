import json
import os
from datetime import datetime
from typing import Optional

from jinja2 import Environment, FileSystemLoader

from rss_notes.models import ParsedFeed, ParsedItem
from rss_notes.utils.front_matter import format_timestamp, frontmatter_value
from rss_notes.utils.markdown import html_to_markdown

TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")

ITEM_NOTE_TEMPLATE = "item_note.md.j2"
INDEX_NOTE_TEMPLATE = "index_note.md.j2"


def create_environment(template_dir: str = TEMPLATE_DIR) -> Environment:
    """
    Jinja environment for note templates with the front matter filters registered.
    """
    env = Environment(
        loader=FileSystemLoader(template_dir),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["frontmatter_value"] = frontmatter_value
    env.filters["timestamp"] = format_timestamp
    env.filters["quoted"] = lambda value: json.dumps(value, ensure_ascii=False)
    return env


def select_cover(item: ParsedItem, feed: ParsedFeed) -> Optional[str]:
    """
    Cover image of an item note: the item's own image, then its first media
    image, then the feed's image.
    """
    if item.image is not None:
        return item.image.url
    if item.media_images:
        return item.media_images[0].url
    if feed.image is not None:
        return feed.image.url
    return None


def description_for_front_matter(html: Optional[str]) -> Optional[str]:
    """
    Flatten an HTML description into a single line for the quoted `desciption` field.
    """
    if html is None:
        return None
    return html_to_markdown(html).replace("\n", "<br>").replace('"', "'")


def render_item_note(
    item: ParsedItem,
    feed: ParsedFeed,
    env: Optional[Environment] = None,
) -> str:
    """
    Render the note for a feed item: front matter followed by the content as markdown.
    """
    env = env or create_environment()
    template = env.get_template(ITEM_NOTE_TEMPLATE)
    return template.render(
        title=item.title.replace(":", " -") if item.title is not None else None,
        authors=[author.name for author in item.authors if author.name],
        categories=[category.display_label for category in item.categories if category.display_label],
        description=description_for_front_matter(item.description),
        published=item.published,
        updated=item.updated,
        id=item.id,
        cover=select_cover(item, feed),
        body=html_to_markdown(item.content) if item.content is not None else "",
    )


def render_index_note(
    feed: ParsedFeed,
    url: str,
    feed_folder: str,
    last_checked: datetime,
    env: Optional[Environment] = None,
) -> str:
    """
    Render the index note of a feed.

    Args:
        feed: The parsed feed.
        url: The feed URL written to the `url` field, read back by the registry.
        feed_folder: The vault folder holding the feed's item notes.
        last_checked: The time of the current synchronization pass.
    """
    env = env or create_environment()
    template = env.get_template(INDEX_NOTE_TEMPLATE)
    return template.render(
        description=feed.description,
        url=url,
        updated=feed.updated,
        last_checked=last_checked,
        feed_folder=feed_folder,
    )
