"""Tests for math utility functions."""

from __future__ import annotations

import numpy as np
import pytest

from tweenr.core.utils.math import hermite_basis, lerp


def test_lerp_basic():
    """Test basic linear interpolation."""
    a = np.array([0.0, -10.0])
    b = np.array([10.0, 10.0])
    assert lerp(a, b, 0.0) == pytest.approx([0.0, -10.0])
    assert lerp(a, b, 0.5) == pytest.approx([5.0, 0.0])
    assert lerp(a, b, 1.0) == pytest.approx([10.0, 10.0])


def test_lerp_extrapolation():
    """Test lerp with t outside [0, 1] range."""
    a = np.array([0.0])
    b = np.array([10.0])
    assert lerp(a, b, -0.5) == pytest.approx([-5.0])
    assert lerp(a, b, 1.5) == pytest.approx([15.0])


def test_hermite_basis_endpoints():
    """Basis selects the start value at 0 and the end value at 1."""
    assert hermite_basis(0.0) == (1.0, 0.0, 0.0, 0.0)
    assert hermite_basis(1.0) == (0.0, 1.0, 0.0, 0.0)


def test_hermite_basis_midpoint():
    """Test basis weights at u = 0.5."""
    assert hermite_basis(0.5) == pytest.approx((0.5, 0.5, 0.125, -0.125))


@pytest.mark.parametrize("u", [0.0, 0.1, 0.25, 0.5, 0.8, 1.0])
def test_hermite_value_weights_sum_to_one(u):
    """h1 + h2 == 1 everywhere."""
    h1, h2, _, _ = hermite_basis(u)
    assert h1 + h2 == pytest.approx(1.0)
