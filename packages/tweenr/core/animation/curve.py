"""Attribute curve: keyframes, events and sampling behind one facade.

A ``Curve`` starts empty with an unset kind. The first accepted keyframe
fixes the kind; ``set_kind`` with a different kind clears the keyframes.
Integer kinds (IntRect, IntVector2) always sample linearly.

Not thread-safe: sampling may rebuild the spline tangent cache in place, so
edits and samples on the same curve must not interleave across threads.

Example:
    >>> curve = Curve()
    >>> curve.insert_keyframe(0.0, Value.of_float(0.0))
    True
    >>> curve.insert_keyframe(1.0, Value.of_float(10.0))
    True
    >>> curve.sample(0.5).as_float()
    5.0
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from tweenr.core.animation import interpolation
from tweenr.core.animation.events import EventFrame, EventTrack
from tweenr.core.animation.hashing import event_id as hash_event_name
from tweenr.core.animation.keyframes import Keyframe, KeyframeTrack
from tweenr.core.animation.tangents import TangentCache
from tweenr.core.animation.values import (
    INTEGER_KINDS,
    InterpolationMethod,
    Value,
    ValueKind,
    supports,
)
from tweenr.core.utils.logging import get_logger

if TYPE_CHECKING:
    from tweenr.core.config.models import AnimationConfig

logger = get_logger(__name__)

DEFAULT_TENSION = 0.5


class Curve:
    """Time-varying value plus timed events for one animated attribute."""

    def __init__(
        self,
        method: InterpolationMethod = InterpolationMethod.LINEAR,
        tension: float = DEFAULT_TENSION,
    ) -> None:
        self._method = method
        self._tension = tension
        self._keyframes = KeyframeTrack()
        self._events = EventTrack()
        self._tangents = TangentCache()

    @classmethod
    def from_config(cls, config: AnimationConfig) -> Curve:
        """Empty curve using the configured default method and tension."""
        return cls(method=config.default_method, tension=config.default_tension)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def kind(self) -> ValueKind:
        return self._keyframes.kind

    @property
    def method(self) -> InterpolationMethod:
        return self._method

    @property
    def tension(self) -> float:
        return self._tension

    @property
    def keyframes(self) -> tuple[Keyframe, ...]:
        return tuple(self._keyframes)

    @property
    def events(self) -> tuple[EventFrame, ...]:
        return tuple(self._events)

    @property
    def begin_time(self) -> float:
        return self._keyframes.begin_time

    @property
    def end_time(self) -> float:
        return self._keyframes.end_time

    @property
    def is_interpolatable(self) -> bool:
        return supports(self.kind, InterpolationMethod.LINEAR)

    @property
    def tangents(self) -> TangentCache:
        return self._tangents

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def set_kind(self, kind: ValueKind) -> None:
        """Change the value kind, dropping all keyframes if it differs."""
        if kind is self.kind:
            return
        if kind in INTEGER_KINDS:
            self._method = InterpolationMethod.LINEAR
        self._keyframes.clear(kind)
        self._tangents.discard()

    def set_method(self, method: InterpolationMethod) -> None:
        """Set the interpolation method; integer kinds stay linear."""
        if method is self._method:
            return
        if self.kind in INTEGER_KINDS:
            method = InterpolationMethod.LINEAR
        self._method = method
        self._tangents.invalidate()

    def set_tension(self, tension: float) -> None:
        """Set spline tension; tangents are rebuilt on the next spline sample."""
        self._tension = tension
        self._tangents.invalidate()

    def insert_keyframe(self, time: float, value: Value) -> bool:
        """Insert a keyframe.

        Returns:
            False if ``value`` does not match the curve's kind (nothing changes).
        """
        if self.kind is ValueKind.UNSET and not value.is_empty:
            self.set_kind(value.kind)
        if not self._keyframes.insert(time, value):
            return False
        self._tangents.invalidate()
        return True

    def insert_event(
        self,
        time: float,
        event: int | str,
        payload: Mapping[str, Any] | None = None,
    ) -> EventFrame:
        """Add an event frame.

        Args:
            time: Event time.
            event: Event identifier, or an event name to hash.
            payload: Event data (Values, bools, ints, floats or strings).

        Raises:
            ValidationError: If a payload entry has any other type.
        """
        identifier = hash_event_name(event) if isinstance(event, str) else event
        return self._events.insert(time, identifier, payload)

    def clear_keyframes(self) -> None:
        self._keyframes.clear()
        self._tangents.discard()

    def clear_events(self) -> None:
        self._events.clear()

    def replace_with(self, other: Curve) -> None:
        """Take over every piece of state from ``other`` in one step.

        Used to commit a fully parsed curve into a live one.
        """
        self._method = other._method
        self._tension = other._tension
        self._keyframes = other._keyframes
        self._events = other._events
        self._tangents = other._tangents

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_valid(self) -> bool:
        """Enough keyframes for the current method (2 linear, 3 spline)."""
        return self._keyframes.is_valid(self._method)

    def sample(self, t: float) -> Value:
        """Value at scaled time ``t``; ``Value.EMPTY`` means skip the update."""
        return interpolation.sample(self._keyframes, self._method, self._tangents, self._tension, t)

    def query_events(self, begin: float, end: float) -> list[EventFrame]:
        """Events with ``begin <= time < end``."""
        return self._events.query_range(begin, end)

    def __repr__(self) -> str:
        return (
            f"Curve(kind={self.kind.value}, method={self._method.value}, "
            f"keyframes={len(self._keyframes)}, events={len(self._events)})"
        )
