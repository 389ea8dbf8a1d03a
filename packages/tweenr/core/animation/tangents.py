"""Lazily rebuilt spline tangents.

The cache is either ``Dirty`` (no tangents) or ``Clean`` holding one tangent
per keyframe. Any structural edit of the owning curve marks it dirty; the
next spline sample rebuilds it.

Tangents use a tension-scaled central difference for interior keyframes:

    tangent[i] = (value[i + 1] - value[i - 1]) * tension

Both end tangents are exactly zero, whatever the tension.
"""

from __future__ import annotations

from tweenr.core.animation.keyframes import KeyframeTrack
from tweenr.core.animation.values import InterpolationMethod, Value, supports
from tweenr.core.utils.logging import get_logger

logger = get_logger(__name__)


class TangentCache:
    """Per-keyframe tangent estimates, valid only while clean."""

    def __init__(self) -> None:
        self._tangents: tuple[Value, ...] = ()
        self._dirty = True

    @property
    def dirty(self) -> bool:
        return self._dirty

    def __len__(self) -> int:
        return len(self._tangents)

    def __getitem__(self, index: int) -> Value:
        return self._tangents[index]

    def invalidate(self) -> None:
        """Mark dirty; the stored tangents are kept until the next rebuild."""
        self._dirty = True

    def discard(self) -> None:
        """Drop every tangent (kind change or clear)."""
        self._tangents = ()
        self._dirty = True

    def ensure(self, track: KeyframeTrack, tension: float) -> bool:
        """Rebuild if dirty.

        Returns:
            True when clean tangents are available for ``track``.
        """
        if self._dirty:
            self.rebuild(track, tension)
        return not self._dirty

    def rebuild(self, track: KeyframeTrack, tension: float) -> None:
        """Recompute every tangent from ``track``.

        Leaves the cache dirty and empty when the track is too short for a
        spline or its kind has no additive arithmetic.
        """
        self._tangents = ()
        if not track.is_valid(InterpolationMethod.SPLINE) or not supports(
            track.kind, InterpolationMethod.SPLINE
        ):
            self._dirty = True
            return

        size = len(track)
        tangents = [Value.EMPTY] * size
        for i in range(1, size - 1):
            tangents[i] = (track[i + 1].value - track[i - 1].value) * tension

        first = track[0].value
        tangents[0] = tangents[size - 1] = (first - first) * tension

        self._tangents = tuple(tangents)
        self._dirty = False
        logger.debug("Rebuilt %d spline tangents (tension=%s)", size, tension)
