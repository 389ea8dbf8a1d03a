"""Error types for curve evaluation and persistence."""

from __future__ import annotations


class InterpolationError(Exception):
    """An arithmetic operation is undefined for a value kind.

    Raised by ``Value`` arithmetic when called directly. The sampling engine
    detects the same condition up front, logs it and returns ``Value.EMPTY``
    instead of raising.
    """

    def __init__(self, kind: str, operation: str) -> None:
        self.kind = kind
        self.operation = operation
        super().__init__(f"No {operation} arithmetic defined for value kind {kind}")


class MalformedCurveDataError(ValueError):
    """A persisted curve document is missing fields or holds invalid data."""
