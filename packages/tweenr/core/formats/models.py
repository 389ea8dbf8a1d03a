"""Persisted curve document schema.

Format-neutral pydantic models shared by the JSON and XML adapters. Values
are stored as a type name plus a space-separated component string, e.g.
``{"type": "Vector3", "value": "1.0 2.0 3.0"}``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tweenr.core.animation.values import InterpolationMethod


class KeyframeRecord(BaseModel):
    """One persisted keyframe."""

    model_config = ConfigDict(extra="forbid")

    time: float
    type: str = Field(..., min_length=1)
    value: str


class PayloadRecord(BaseModel):
    """One typed event payload entry.

    Besides value kind names, ``type`` may be ``Int``, ``Double``, ``Bool`` or ``String``.
    """

    model_config = ConfigDict(extra="forbid")

    type: str = Field(..., min_length=1)
    value: str


class EventFrameRecord(BaseModel):
    """One persisted event frame."""

    model_config = ConfigDict(extra="forbid")

    time: float
    eventtype: int = Field(..., ge=0, lt=2**32)
    eventdata: dict[str, PayloadRecord] = Field(default_factory=dict)


class CurveDocument(BaseModel):
    """A whole curve: keyframes and event frames in saved (sorted) order.

    ``interpolation`` and ``tension`` are optional; when absent, loading keeps
    the target curve's current settings.
    """

    model_config = ConfigDict(extra="forbid")

    interpolation: InterpolationMethod | None = None
    tension: float | None = None
    keyframes: list[KeyframeRecord] = Field(default_factory=list)
    eventframes: list[EventFrameRecord] = Field(default_factory=list)
