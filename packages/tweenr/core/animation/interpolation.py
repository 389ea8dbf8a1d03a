"""Curve sampling.

Stateless functions that turn a keyframe track (plus, for splines, its
tangent cache) into a value at an arbitrary time.

Sampling rules:
- Before the first keyframe or at/after the last one, the boundary
  keyframe's value is returned unchanged (no extrapolation).
- Otherwise the bracket [left, right] with left.time <= t < right.time is
  blended at u = (t - left.time) / (right.time - left.time).
- A kind/method combination without arithmetic is logged and yields
  ``Value.EMPTY``, which callers must treat as "no update".
"""

from __future__ import annotations

from bisect import bisect_right

from tweenr.core.animation.errors import InterpolationError
from tweenr.core.animation.keyframes import KeyframeTrack
from tweenr.core.animation.tangents import TangentCache
from tweenr.core.animation.values import InterpolationMethod, Value, supports
from tweenr.core.utils.logging import get_logger
from tweenr.core.utils.math import hermite_basis

logger = get_logger(__name__)


def find_bracket(track: KeyframeTrack, t: float) -> int:
    """Index of the first keyframe after the first one whose time exceeds ``t``.

    Returns ``len(track)`` when no keyframe past the first is later than
    ``t``. Same result as scanning forward from index 1 on a sorted track.
    """
    return bisect_right(track, t, lo=1, key=lambda kf: kf.time)


def interpolate_linear(track: KeyframeTrack, left: int, right: int, t: float) -> Value:
    """Blend two keyframes with the kind's linear-method blend."""
    k1, k2 = track[left], track[right]
    u = (t - k1.time) / (k2.time - k1.time)
    return k1.value.lerp(k2.value, u)


def interpolate_spline(
    track: KeyframeTrack, tangents: TangentCache, left: int, right: int, t: float
) -> Value:
    """Cubic Hermite blend of two keyframes and their cached tangents.

    ``tangents`` must already be clean for ``track``.
    """
    k1, k2 = track[left], track[right]
    u = (t - k1.time) / (k2.time - k1.time)
    h1, h2, h3, h4 = hermite_basis(u)
    return k1.value * h1 + k2.value * h2 + tangents[left] * h3 + tangents[right] * h4


def _interpolation_error(track: KeyframeTrack, operation: str) -> Value:
    error = InterpolationError(track.kind.value, operation)
    logger.error("Interpolation error: %s", error)
    return Value.EMPTY


def sample(
    track: KeyframeTrack,
    method: InterpolationMethod,
    tangents: TangentCache,
    tension: float,
    t: float,
) -> Value:
    """Evaluate ``track`` at time ``t``.

    Args:
        track: Keyframes to sample.
        method: Interpolation method.
        tangents: Tangent cache for ``track``; rebuilt here if dirty and
            ``method`` is spline.
        tension: Spline tension used for a rebuild.
        t: Query time in the curve's own time domain.

    Returns:
        The sampled value, or ``Value.EMPTY`` for an empty track or an
        unsupported kind/method combination.
    """
    size = len(track)
    if size == 0:
        logger.warning("Sampled an empty keyframe track at t=%s", t)
        return Value.EMPTY

    if t < track[0].time:
        return track[0].value

    index = find_bracket(track, t)
    if index >= size or not supports(track.kind, InterpolationMethod.LINEAR):
        return track[index - 1].value

    if method is InterpolationMethod.LINEAR:
        return interpolate_linear(track, index - 1, index, t)

    if not supports(track.kind, InterpolationMethod.SPLINE):
        return _interpolation_error(track, "spline")
    if not tangents.ensure(track, tension):
        return _interpolation_error(track, f"spline ({size} keyframes)")
    return interpolate_spline(track, tangents, index - 1, index, t)
