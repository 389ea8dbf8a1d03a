"""Stable identifiers for event names."""

from __future__ import annotations

import hashlib


def event_id(name: str) -> int:
    """Hash an event name to a 32-bit unsigned identifier.

    Case-sensitive and stable across processes (unlike ``hash()``). These
    identifiers differ from the case-insensitive SDBM string hash some engines
    use for event names, so "Footstep" and "footstep" get different ids.

    Example:
        >>> event_id("Footstep") == event_id("Footstep")
        True
    """
    digest = hashlib.sha256(name.encode("utf-8")).digest()
    return int.from_bytes(digest[:4], "little")
