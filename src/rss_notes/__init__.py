"""RSS Notes: keep a vault of markdown notes in sync with RSS/Atom feeds."""

__version__ = "0.1.0"
