"""Reading and writing the YAML front matter at the top of a note."""

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import yaml

_FRONT_MATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*$", re.DOTALL | re.MULTILINE)


def split_front_matter(text: str) -> Optional[str]:
    """Return the raw YAML between the leading `---` lines, or None if there is none."""
    match = _FRONT_MATTER_PATTERN.match(text)
    if match is None:
        return None
    return match.group(1)


def read_front_matter(text: str) -> Dict[str, Any]:
    """
    Parse the front matter of a note.

    Returns an empty dictionary when the note has no front matter or when the
    front matter is not a YAML mapping.
    """
    raw = split_front_matter(text)
    if raw is None:
        return {}
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        logging.warning(f"Ignoring malformed front matter: {e}")
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def frontmatter_value(value: Any) -> str:
    """
    Format a scalar for a `key: value` front matter line.

    The value is written as is when YAML reads it back unchanged and as a
    double-quoted string otherwise.
    """
    if value is None:
        return ""
    text = str(value)
    try:
        loaded = yaml.safe_load(f"value: {text}")
    except yaml.YAMLError:
        loaded = None
    if loaded == {"value": text}:
        return text
    return json.dumps(text, ensure_ascii=False)


def format_timestamp(value: Optional[datetime]) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2024-01-01T12:00:00.000Z."""
    if value is None:
        return ""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
