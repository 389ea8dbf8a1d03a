"""Conversion between live curves and persisted documents.

Loading never mutates a live curve halfway: documents are first built into a
fresh staging curve, and only a fully built curve is swapped in.
"""

from __future__ import annotations

from typing import Any

from tweenr.core.animation.curve import Curve
from tweenr.core.animation.errors import MalformedCurveDataError
from tweenr.core.animation.values import Value, ValueKind
from tweenr.core.formats.models import (
    CurveDocument,
    EventFrameRecord,
    KeyframeRecord,
    PayloadRecord,
)
from tweenr.core.utils.logging import get_logger

logger = get_logger(__name__)

# Payload-only scalar types (value kinds use their own names).
INT_TYPE = "Int"
BOOL_TYPE = "Bool"
STRING_TYPE = "String"
DOUBLE_TYPE = "Double"


def encode_value(value: Value) -> tuple[str, str]:
    """Type name and component string for a value.

    Example:
        >>> encode_value(Value.vector2(1.0, 2.5))
        ('Vector2', '1.0 2.5')
    """
    if value.is_empty:
        raise ValueError("Cannot encode an empty value")
    return value.kind.value, " ".join(repr(c) for c in value.components)


def decode_value(type_name: str, text: str) -> Value:
    """Parse a typed value encoding.

    Raises:
        MalformedCurveDataError: Unknown type name or bad components.
    """
    try:
        kind = ValueKind(type_name)
    except ValueError as e:
        raise MalformedCurveDataError(f"Unknown value type: {type_name!r}") from e
    if kind is ValueKind.UNSET:
        raise MalformedCurveDataError("Value type 'None' cannot be loaded")

    try:
        components = [float(part) for part in text.split()]
        return Value(kind=kind, components=tuple(components))
    except ValueError as e:
        raise MalformedCurveDataError(f"Invalid {type_name} value {text!r}: {e}") from e


def encode_payload_value(value: Any) -> PayloadRecord:
    """Encode one event payload entry.

    Supports ``Value``, ``bool``, ``int``, ``float`` and ``str``. Plain floats
    are stored as ``Double``; ``Float`` is reserved for ``Value`` payloads.
    """
    if isinstance(value, Value):
        type_name, text = encode_value(value)
    elif isinstance(value, bool):
        type_name, text = BOOL_TYPE, "true" if value else "false"
    elif isinstance(value, int):
        type_name, text = INT_TYPE, str(value)
    elif isinstance(value, float):
        type_name, text = DOUBLE_TYPE, repr(value)
    elif isinstance(value, str):
        type_name, text = STRING_TYPE, value
    else:
        raise TypeError(f"Unsupported event payload type: {type(value).__name__}")
    return PayloadRecord(type=type_name, value=text)


def decode_payload_value(record: PayloadRecord) -> Any:
    """Inverse of ``encode_payload_value``."""
    if record.type == STRING_TYPE:
        return record.value
    if record.type == BOOL_TYPE:
        if record.value not in ("true", "false"):
            raise MalformedCurveDataError(f"Invalid Bool value {record.value!r}")
        return record.value == "true"
    if record.type == INT_TYPE:
        try:
            return int(record.value)
        except ValueError as e:
            raise MalformedCurveDataError(f"Invalid Int value {record.value!r}") from e
    if record.type == DOUBLE_TYPE:
        try:
            return float(record.value)
        except ValueError as e:
            raise MalformedCurveDataError(f"Invalid Double value {record.value!r}") from e

    return decode_value(record.type, record.value)


def document_from_curve(curve: Curve) -> CurveDocument:
    """Snapshot a curve in its current (sorted) order."""
    keyframes = []
    for keyframe in curve.keyframes:
        type_name, text = encode_value(keyframe.value)
        keyframes.append(KeyframeRecord(time=keyframe.time, type=type_name, value=text))

    eventframes = [
        EventFrameRecord(
            time=frame.time,
            eventtype=frame.event_id,
            eventdata={key: encode_payload_value(v) for key, v in frame.payload.items()},
        )
        for frame in curve.events
    ]

    return CurveDocument(
        interpolation=curve.method,
        tension=curve.tension,
        keyframes=keyframes,
        eventframes=eventframes,
    )


def curve_from_document(document: CurveDocument, base: Curve | None = None) -> Curve:
    """Build a new curve from a document.

    Args:
        document: Parsed document.
        base: Curve whose method/tension apply when the document omits them.

    Raises:
        MalformedCurveDataError: A value cannot be decoded or keyframes mix kinds.
    """
    base = base or Curve()
    method = document.interpolation or base.method
    tension = base.tension if document.tension is None else document.tension
    staged = Curve(method=method, tension=tension)

    for record in document.keyframes:
        value = decode_value(record.type, record.value)
        if not staged.insert_keyframe(record.time, value):
            raise MalformedCurveDataError(
                f"Keyframe at t={record.time} has type {record.type}, "
                f"expected {staged.kind.value}"
            )

    for record in document.eventframes:
        payload = {key: decode_payload_value(v) for key, v in record.eventdata.items()}
        staged.insert_event(record.time, record.eventtype, payload)

    logger.debug(
        "Built curve from document: %d keyframes, %d events",
        len(document.keyframes),
        len(document.eventframes),
    )
    return staged


def load_into(curve: Curve, document: CurveDocument) -> Curve:
    """Replace ``curve``'s contents with ``document``, all or nothing."""
    staged = curve_from_document(document, base=curve)
    curve.replace_with(staged)
    return curve
