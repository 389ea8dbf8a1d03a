"""Interface for applying sampled values to a target.

The core never mutates animated objects. A playback driver samples a curve
and hands the result to an ``AttributeSink``, skipping empty samples.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tweenr.core.animation.curve import Curve
    from tweenr.core.animation.values import Value


@runtime_checkable
class AttributeSink(Protocol):
    """Receives sampled values for named attributes of some target.

    Example:
        >>> class Recorder:
        ...     def __init__(self):
        ...         self.applied = []
        ...     def set_attribute(self, attribute, value):
        ...         self.applied.append((attribute, value))
    """

    def set_attribute(self, attribute: str, value: Value) -> None:
        """Apply ``value`` to ``attribute`` of the target.

        Args:
            attribute: Attribute descriptor (name) on the target
            value: Non-empty sampled value
        """
        ...


def apply_sample(curve: Curve, t: float, sink: AttributeSink, attribute: str) -> bool:
    """Sample ``curve`` once and forward the result to ``sink``.

    Returns:
        True if the sink was called, False when the sample was empty.
    """
    value = curve.sample(t)
    if value.is_empty:
        return False
    sink.set_attribute(attribute, value)
    return True
