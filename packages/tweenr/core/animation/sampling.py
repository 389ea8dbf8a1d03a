"""Uniform sampling of a curve over its keyframe range."""

from __future__ import annotations

import numpy as np

from tweenr.core.animation.curve import Curve
from tweenr.core.animation.values import Value


def sample_uniform(curve: Curve, n: int) -> list[tuple[float, Value]]:
    """Sample ``curve`` at ``n`` evenly spaced times over [begin_time, end_time].

    Both range ends are included.

    Args:
        curve: Curve with at least one keyframe.
        n: Number of samples. Must be >= 2.

    Returns:
        (time, value) pairs in ascending time order.

    Raises:
        ValueError: If n < 2 or the curve has no keyframes.

    Example:
        >>> [t for t, _ in sample_uniform(curve, 3)]  # keyframes at 0 and 1
        [0.0, 0.5, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    if not curve.keyframes:
        raise ValueError("curve has no keyframes")

    times = np.linspace(curve.begin_time, curve.end_time, n)
    return [(float(t), curve.sample(float(t))) for t in times]
