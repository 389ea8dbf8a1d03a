"""Ordered insertion shared by keyframe and event tracks."""

from __future__ import annotations

from bisect import bisect_right
from typing import Protocol, TypeVar


class Timed(Protocol):
    @property
    def time(self) -> float: ...


T = TypeVar("T", bound=Timed)


def insertion_index(entries: list[T], time: float) -> int:
    """Index at which an entry stamped ``time`` belongs.

    Equal-time entries keep insertion order: the new entry goes after every
    existing entry with the same time and before the first later one. For
    times [0.0, 1.0, 1.0, 2.0] a new entry at 1.0 lands at index 3.
    """
    if not entries or time >= entries[-1].time:
        return len(entries)
    return bisect_right(entries, time, key=lambda e: e.time)


def insert_ordered(entries: list[T], entry: T) -> int:
    """Insert ``entry`` keeping ``entries`` sorted by time; returns its index."""
    index = insertion_index(entries, entry.time)
    entries.insert(index, entry)
    return index
