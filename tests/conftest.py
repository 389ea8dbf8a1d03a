"""Shared pytest fixtures for tweenr tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tweenr.core.animation.curve import Curve
from tweenr.core.animation.values import InterpolationMethod, Value


@pytest.fixture
def fixtures_dir() -> Path:
    """Get test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def curves_dir(fixtures_dir: Path) -> Path:
    """Directory of sample curve files."""
    return fixtures_dir / "curves"


@pytest.fixture
def vector_curve() -> Curve:
    """Spline Vector3 curve with two events carrying mixed payloads."""
    curve = Curve(method=InterpolationMethod.SPLINE, tension=0.25)
    curve.insert_keyframe(0.0, Value.vector3(0.0, 0.0, 0.0))
    curve.insert_keyframe(0.5, Value.vector3(1.5, -2.0, 0.1))
    curve.insert_keyframe(1.25, Value.vector3(3.0, 4.0, 5.0))
    curve.insert_event(0.5, "Footstep", {"volume": 0.8, "foot": "left", "count": 2})
    curve.insert_event(
        1.0,
        7,
        {"loud": True, "offset": Value.vector2(1.0, 2.0), "spin": Value.rotation(1.0, 0.0, 0.0, 0.0)},
    )
    return curve


@pytest.fixture
def rect_curve() -> Curve:
    """Linear IntRect curve."""
    curve = Curve()
    curve.insert_keyframe(0.0, Value.int_rect(0, 0, 64, 64))
    curve.insert_keyframe(1.0, Value.int_rect(16, -8, 128, 96))
    return curve


@pytest.fixture
def rotation_curve() -> Curve:
    """Linear rotation curve."""
    curve = Curve()
    curve.insert_keyframe(0.0, Value.rotation(1.0, 0.0, 0.0, 0.0))
    curve.insert_keyframe(1.0, Value.rotation_from_axis_angle((0.0, 1.0, 0.0), 90.0))
    return curve


@pytest.fixture
def float_curve() -> Curve:
    """Linear Float curve whose events carry both Float values and plain floats."""
    curve = Curve()
    curve.insert_keyframe(0.0, Value.of_float(-1.5))
    curve.insert_keyframe(0.75, Value.of_float(0.1))
    curve.insert_keyframe(2.0, Value.of_float(3.0))
    curve.insert_event(0.5, "Gain", {"gain": Value.of_float(0.8), "level": 0.8})
    curve.insert_event(1.5, 3, {"count": 4, "label": "end"})
    return curve
