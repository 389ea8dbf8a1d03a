"""Timed event markers.

Event frames live on the same timeline as keyframes but carry an identifier
and a keyed payload instead of an interpolated value.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, field_validator

from tweenr.core.animation.timeline import insert_ordered
from tweenr.core.animation.values import Value

# Payload entries must be persistable by the curve formats.
PayloadValue = InstanceOf[Value] | bool | int | float | str


class EventFrame(BaseModel):
    """An event fired when playback crosses ``time``.

    Attributes:
        time: Event time on the curve timeline.
        event_id: 32-bit event identifier (see ``hashing.event_id``).
        payload: Event data keyed by name; entries are Values, bools, ints,
            floats or strings.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    time: float
    event_id: int = Field(..., ge=0, lt=2**32)
    payload: dict[str, PayloadValue] = Field(default_factory=dict)

    @field_validator("payload")
    @classmethod
    def _reject_empty_values(cls, payload: dict[str, PayloadValue]) -> dict[str, PayloadValue]:
        for name, value in payload.items():
            if isinstance(value, Value) and value.is_empty:
                raise ValueError(f"Payload entry {name!r} is an empty value")
        return payload


class EventTrack:
    """Event frames sorted ascending by time (ties keep insertion order)."""

    def __init__(self) -> None:
        self._frames: list[EventFrame] = []

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[EventFrame]:
        return iter(self._frames)

    def __getitem__(self, index: int) -> EventFrame:
        return self._frames[index]

    def insert(
        self, time: float, event_id: int, payload: Mapping[str, Any] | None = None
    ) -> EventFrame:
        frame = EventFrame(time=time, event_id=event_id, payload=dict(payload or {}))
        insert_ordered(self._frames, frame)
        return frame

    def query_range(self, begin: float, end: float) -> list[EventFrame]:
        """Events with ``begin <= time < end`` in time order."""
        result: list[EventFrame] = []
        for frame in self._frames:
            if frame.time >= end:
                break
            if frame.time >= begin:
                result.append(frame)
        return result

    def clear(self) -> None:
        self._frames.clear()
