"""Keyframe storage.

A ``KeyframeTrack`` holds (time, Value) samples sorted ascending by time and
homogeneous in kind. The first accepted value fixes the kind of an unset
track; later values of another kind are rejected without touching the track.
"""

from __future__ import annotations

import math
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict

from tweenr.core.animation.timeline import insert_ordered
from tweenr.core.animation.values import InterpolationMethod, Value, ValueKind
from tweenr.core.utils.logging import get_logger

logger = get_logger(__name__)

# Spline tangents need interior keyframes, hence three.
MIN_KEYFRAMES = {InterpolationMethod.LINEAR: 2, InterpolationMethod.SPLINE: 3}


class Keyframe(BaseModel):
    """A value anchored at a point in time."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    time: float
    value: Value


class KeyframeTrack:
    """Time-ordered keyframes of a single value kind.

    ``begin_time``/``end_time`` track the smallest and largest keyframe time
    and sit at +inf/-inf while the track is empty.
    """

    def __init__(self, kind: ValueKind = ValueKind.UNSET) -> None:
        self._kind = kind
        self._keyframes: list[Keyframe] = []
        self._begin_time = math.inf
        self._end_time = -math.inf

    @property
    def kind(self) -> ValueKind:
        return self._kind

    @property
    def begin_time(self) -> float:
        return self._begin_time

    @property
    def end_time(self) -> float:
        return self._end_time

    @property
    def times(self) -> list[float]:
        return [kf.time for kf in self._keyframes]

    def __len__(self) -> int:
        return len(self._keyframes)

    def __iter__(self) -> Iterator[Keyframe]:
        return iter(self._keyframes)

    def __getitem__(self, index: int) -> Keyframe:
        return self._keyframes[index]

    def insert(self, time: float, value: Value) -> bool:
        """Insert a keyframe, keeping time order.

        Args:
            time: Keyframe time.
            value: Keyframe value. Fixes the track kind if it is still unset.

        Returns:
            True on success, False when the value kind does not match the
            track kind (the track is left unchanged).
        """
        if value.is_empty:
            logger.warning("Rejected keyframe at t=%s: value has no kind", time)
            return False
        if self._kind is ValueKind.UNSET:
            self._kind = value.kind
        elif value.kind is not self._kind:
            logger.warning(
                "Rejected keyframe at t=%s: kind %s does not match track kind %s",
                time,
                value.kind.value,
                self._kind.value,
            )
            return False

        insert_ordered(self._keyframes, Keyframe(time=time, value=value))
        self._begin_time = min(time, self._begin_time)
        self._end_time = max(time, self._end_time)
        return True

    def clear(self, kind: ValueKind | None = None) -> None:
        """Drop every keyframe and reset the time bounds.

        Args:
            kind: New kind for the track; keeps the current kind when None.
        """
        self._keyframes.clear()
        self._begin_time = math.inf
        self._end_time = -math.inf
        if kind is not None:
            self._kind = kind

    def is_valid(self, method: InterpolationMethod) -> bool:
        """Whether the track has enough keyframes for ``method``."""
        return len(self._keyframes) >= MIN_KEYFRAMES[method]
