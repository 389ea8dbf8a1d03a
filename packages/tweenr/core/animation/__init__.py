"""Keyframed attribute curves and timed events."""

from tweenr.core.animation.curve import Curve
from tweenr.core.animation.errors import InterpolationError, MalformedCurveDataError
from tweenr.core.animation.events import EventFrame, EventTrack
from tweenr.core.animation.hashing import event_id
from tweenr.core.animation.keyframes import Keyframe, KeyframeTrack
from tweenr.core.animation.registry import CurveKey, CurveRegistry
from tweenr.core.animation.sampling import sample_uniform
from tweenr.core.animation.sink import AttributeSink, apply_sample
from tweenr.core.animation.tangents import TangentCache
from tweenr.core.animation.values import InterpolationMethod, Value, ValueKind

__all__ = [
    "AttributeSink",
    "Curve",
    "CurveKey",
    "CurveRegistry",
    "EventFrame",
    "EventTrack",
    "InterpolationError",
    "InterpolationMethod",
    "Keyframe",
    "KeyframeTrack",
    "MalformedCurveDataError",
    "TangentCache",
    "Value",
    "ValueKind",
    "apply_sample",
    "event_id",
    "sample_uniform",
]
