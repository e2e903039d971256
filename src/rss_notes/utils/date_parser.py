"""Parsing of the date strings feeds publish."""

import datetime
import logging
import re
from datetime import timezone
from typing import Any, Mapping, Optional, Protocol

from dateutil import parser

# Abbreviations seen in feeds that dateutil cannot resolve by itself, in seconds east of UTC.
FEED_TIMEZONES = {
    "PDT": -7 * 3600,
    "PST": -8 * 3600,
    "EDT": -4 * 3600,
    "EST": -5 * 3600,
    "CEST": 2 * 3600,
    "CET": 1 * 3600,
    "AEST": 10 * 3600,
    "AEDT": 11 * 3600,
    "GMT": 0,
    "UTC": 0,
}

_TIMESTAMP_PATTERN = re.compile(r"(\d{4}-\d{2}-\d{2})[ T](\d{2}:\d{2}:\d{2})")


class DateParserProtocol(Protocol):
    def parse_date(self, date_str: Optional[str]) -> Optional[datetime.datetime]:
        """Parse a date string into an aware UTC datetime, or None."""
        ...


class RobustDateParser(DateParserProtocol):
    """Lenient parser for RSS and Atom dates. Results are always in UTC."""

    def _attempts(self, date_str: str):
        yield date_str, {"tzinfos": FEED_TIMEZONES}
        yield date_str, {"tzinfos": FEED_TIMEZONES, "fuzzy": True}
        match = _TIMESTAMP_PATTERN.search(date_str)
        if match:
            yield " ".join(match.groups()), {}

    def parse_date(self, date_str: Optional[str]) -> Optional[datetime.datetime]:
        if not date_str:
            return None

        for candidate, options in self._attempts(date_str):
            try:
                parsed = parser.parse(candidate, **options)
            except (ValueError, OverflowError):
                continue
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
            return parsed.astimezone(timezone.utc)

        logging.warning(f"Could not parse date: \"{date_str}\"")
        return None


def parse_feed_date(
    source: Mapping[str, Any],
    key: str,
    date_parser: Optional[DateParserProtocol] = None,
) -> Optional[datetime.datetime]:
    """
    Read a date field from a feedparser dictionary.

    Uses feedparser's normalized `<key>_parsed` time tuple (always UTC) and
    falls back to parsing the raw string when feedparser could not.
    """
    # Membership checks keep feedparser from substituting `published` for a
    # missing `updated`.
    parsed = source[f"{key}_parsed"] if f"{key}_parsed" in source else None
    if parsed:
        return datetime.datetime(*parsed[:6], tzinfo=timezone.utc)
    raw = source[key] if key in source else None
    return (date_parser or RobustDateParser()).parse_date(raw)
