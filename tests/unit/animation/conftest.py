"""Shared pytest fixtures for animation tests."""

from __future__ import annotations

import pytest

from tweenr.core.animation.curve import Curve
from tweenr.core.animation.values import InterpolationMethod, Value


@pytest.fixture
def ramp_curve() -> Curve:
    """Linear Float curve from 0 at t=0 to 10 at t=1."""
    curve = Curve()
    curve.insert_keyframe(0.0, Value.of_float(0.0))
    curve.insert_keyframe(1.0, Value.of_float(10.0))
    return curve


@pytest.fixture
def peak_spline_curve() -> Curve:
    """Spline Float curve 0 -> 1 -> 0 over t = 0, 1, 2 with tension 0.5."""
    curve = Curve(method=InterpolationMethod.SPLINE, tension=0.5)
    curve.insert_keyframe(0.0, Value.of_float(0.0))
    curve.insert_keyframe(1.0, Value.of_float(1.0))
    curve.insert_keyframe(2.0, Value.of_float(0.0))
    return curve


@pytest.fixture
def event_times() -> list[float]:
    """Event times used by range query tests."""
    return [0.5, 1.0, 2.0, 3.0, 4.0]


@pytest.fixture
def event_curve(event_times: list[float]) -> Curve:
    """Curve with one event at each of ``event_times`` (inserted out of order)."""
    curve = Curve()
    for time in reversed(event_times):
        curve.insert_event(time, int(time * 10), {"at": time})
    return curve
