"""Math utilities shared by the value arithmetic."""

from __future__ import annotations

import numpy as np


def lerp(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    """Component-wise linear blend ``a * (1 - t) + b * t``.

    Args:
        a: Start components
        b: End components
        t: Blend factor, normally in [0, 1]

    Returns:
        Blended components as a float array
    """
    return a * (1.0 - t) + b * t


def hermite_basis(u: float) -> tuple[float, float, float, float]:
    """Cubic Hermite basis weights at local parameter u.

    Returns:
        (h1, h2, h3, h4) weighting start value, end value, start tangent
        and end tangent respectively.

    Example:
        >>> hermite_basis(0.0)
        (1.0, 0.0, 0.0, 0.0)
    """
    uu = u * u
    uuu = uu * u
    h1 = 2.0 * uuu - 3.0 * uu + 1.0
    h2 = -2.0 * uuu + 3.0 * uu
    h3 = uuu - 2.0 * uu + u
    h4 = uuu - uu
    return h1, h2, h3, h4
