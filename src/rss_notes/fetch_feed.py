import logging
from typing import Any, List, Mapping, Optional, Union

import feedparser
import requests

from rss_notes.models import AuthorRef, CategoryRef, ImageRef, ParsedFeed, ParsedItem
from rss_notes.utils.date_parser import parse_feed_date


class FeedFetchError(ValueError):
    """The feed URL did not answer with the feed."""


class FeedParseError(ValueError):
    """The response body is not a feed."""


def _is_image(media: Mapping[str, Any]) -> bool:
    return media.get("medium") == "image" or (media.get("type") or "").startswith("image/")


def _image(source: Mapping[str, Any]) -> Optional[ImageRef]:
    image = source.get("image") or {}
    url = image.get("href") or image.get("url")
    if not url:
        return None
    return ImageRef(url=url, title=image.get("title"))


def _media_images(entry: Mapping[str, Any]) -> List[ImageRef]:
    images = []
    for thumbnail in entry.get("media_thumbnail", []):
        if thumbnail.get("url"):
            images.append(ImageRef(url=thumbnail["url"]))
    for media in entry.get("media_content", []):
        if media.get("url") and _is_image(media):
            images.append(ImageRef(url=media["url"]))
    for enclosure in entry.get("enclosures", []):
        if enclosure.get("href") and _is_image(enclosure):
            images.append(ImageRef(url=enclosure["href"]))
    return images


def _self_url(feed: Mapping[str, Any]) -> Optional[str]:
    for link in feed.get("links", []):
        if link.get("rel") == "self" and link.get("href"):
            return link["href"]
    return None


def _parse_item(entry: Mapping[str, Any]) -> ParsedItem:
    content = entry.get("content") or []
    return ParsedItem(
        title=entry.get("title"),
        id=entry.get("id") or entry.get("link"),
        link=entry.get("link"),
        authors=[
            AuthorRef(name=author.get("name"), email=author.get("email"))
            for author in entry.get("authors", [])
        ],
        categories=[
            CategoryRef(term=tag.get("term"), label=tag.get("label"))
            for tag in entry.get("tags", [])
        ],
        description=entry.get("summary"),
        content=content[0].get("value") if content else None,
        published=parse_feed_date(entry, "published"),
        updated=parse_feed_date(entry, "updated"),
        image=_image(entry),
        media_images=_media_images(entry),
    )


def parse_feed(raw: Union[str, bytes]) -> ParsedFeed:
    """
    Parse an RSS or Atom document.

    Raises:
        FeedParseError: If the document is not recognized as a feed.
    """
    parsed_feed = feedparser.parse(raw)
    if not parsed_feed.get("version"):
        raise FeedParseError(f"Not a feed: {parsed_feed.get('bozo_exception', 'unknown format')}")
    if parsed_feed.bozo:
        bozo_type = parsed_feed.bozo_exception.__class__.__name__
        logging.warning(f"Feed is not well-formed ({bozo_type}). Processing may be incomplete.")

    feed = parsed_feed.feed
    return ParsedFeed(
        title=feed.get("title"),
        description=feed.get("subtitle"),
        self_url=_self_url(feed),
        updated=parse_feed_date(feed, "updated") or parse_feed_date(feed, "published"),
        items=[_parse_item(entry) for entry in parsed_feed.entries],
        image=_image(feed),
    )


class RequestsFeedFetcher:
    """Fetches feeds over HTTP with requests and parses them with feedparser."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def fetch(self, url: str) -> ParsedFeed:
        logging.info(f"Fetching RSS feed from {url}.")
        response = requests.get(url, timeout=self.timeout)

        if response.status_code != 200:
            raise FeedFetchError(f"Failed to fetch the RSS feed from {url}. Code: {response.status_code}")

        feed = parse_feed(response.content)
        logging.info(f"Successfully fetched RSS feed from {url}: \"{feed.title}\" with {len(feed.items)} items.")
        return feed
