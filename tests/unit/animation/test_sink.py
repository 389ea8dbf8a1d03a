"""Tests for applying samples to attribute sinks."""

from __future__ import annotations

from tweenr.core.animation.curve import Curve
from tweenr.core.animation.sink import AttributeSink, apply_sample
from tweenr.core.animation.values import InterpolationMethod, Value


class RecordingSink:
    """Sink that records every applied value."""

    def __init__(self) -> None:
        self.applied: list[tuple[str, Value]] = []

    def set_attribute(self, attribute: str, value: Value) -> None:
        self.applied.append((attribute, value))


class TestApplySample:
    """Tests for apply_sample."""

    def test_protocol(self) -> None:
        """Any object with set_attribute is a sink."""
        assert isinstance(RecordingSink(), AttributeSink)

    def test_forwards_value(self, ramp_curve: Curve) -> None:
        """A non-empty sample reaches the sink."""
        sink = RecordingSink()
        assert apply_sample(ramp_curve, 0.5, sink, "opacity")
        assert sink.applied == [("opacity", Value.of_float(5.0))]

    def test_skips_empty_curve(self) -> None:
        """Empty curves never call the sink."""
        sink = RecordingSink()
        assert not apply_sample(Curve(), 0.5, sink, "opacity")
        assert sink.applied == []

    def test_skips_failed_interpolation(self) -> None:
        """A spline rotation sample is skipped, not applied."""
        curve = Curve()
        for i in range(3):
            curve.insert_keyframe(float(i), Value.rotation_from_axis_angle((1.0, 0.0, 0.0), 45.0 * i))
        curve.set_method(InterpolationMethod.SPLINE)

        sink = RecordingSink()
        assert not apply_sample(curve, 1.5, sink, "orientation")
        assert sink.applied == []
