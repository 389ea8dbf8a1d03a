"""Animated value kinds and their arithmetic.

A ``Value`` is a tagged union: a ``ValueKind`` discriminant plus a fixed-size
tuple of components. What each kind supports is declared once in
``KIND_ARITHMETIC`` so callers can check capabilities structurally instead of
inspecting payload types at runtime:

- Float, Vector2/3/4, Color: component-wise lerp plus add/subtract/scale
- Rotation (quaternion w, x, y, z): spherical blend only
- IntRect, IntVector2: real-valued blend truncated back to integers
- Unset: nothing (the empty sentinel)
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

import numpy as np
from pydantic import BaseModel, ConfigDict, model_validator

from tweenr.core.animation.errors import InterpolationError
from tweenr.core.utils.math import lerp


class ValueKind(str, Enum):
    """Discriminant of the value union.

    Member values double as the type names used by the persisted formats.
    """

    FLOAT = "Float"
    VECTOR2 = "Vector2"
    VECTOR3 = "Vector3"
    VECTOR4 = "Vector4"
    ROTATION = "Quaternion"
    COLOR = "Color"
    INT_RECT = "IntRect"
    INT_VECTOR2 = "IntVector2"
    UNSET = "None"


def slerp(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    """Spherical blend between two quaternions along the shortest arc."""
    cos_angle = float(np.dot(a, b))
    sign = 1.0
    if cos_angle < 0.0:
        cos_angle = -cos_angle
        sign = -1.0

    if cos_angle < 1.0 - 1e-6:
        angle = math.acos(cos_angle)
        inv_sin = 1.0 / math.sin(angle)
        ratio_a = math.sin((1.0 - t) * angle) * inv_sin
        ratio_b = math.sin(t * angle) * inv_sin
    else:
        # Nearly parallel: sin(angle) -> 0, fall back to a plain blend.
        ratio_a = 1.0 - t
        ratio_b = t

    return a * ratio_a + b * (ratio_b * sign)


BlendFn = Callable[[np.ndarray, np.ndarray, float], np.ndarray]


@dataclass(frozen=True)
class KindArithmetic:
    """Capabilities of one value kind.

    Attributes:
        components: Number of components in the payload.
        blend: Two-point blend used by linear interpolation, or None.
        additive: Supports add/subtract/scale (needed by spline evaluation).
        integral: Components are integers; blends are truncated toward zero.
    """

    components: int
    blend: BlendFn | None = None
    additive: bool = False
    integral: bool = False


KIND_ARITHMETIC: dict[ValueKind, KindArithmetic] = {
    ValueKind.FLOAT: KindArithmetic(1, lerp, additive=True),
    ValueKind.VECTOR2: KindArithmetic(2, lerp, additive=True),
    ValueKind.VECTOR3: KindArithmetic(3, lerp, additive=True),
    ValueKind.VECTOR4: KindArithmetic(4, lerp, additive=True),
    ValueKind.ROTATION: KindArithmetic(4, slerp),
    ValueKind.COLOR: KindArithmetic(4, lerp, additive=True),
    ValueKind.INT_RECT: KindArithmetic(4, lerp, integral=True),
    ValueKind.INT_VECTOR2: KindArithmetic(2, lerp, integral=True),
    ValueKind.UNSET: KindArithmetic(0),
}

INTEGER_KINDS = frozenset(k for k, a in KIND_ARITHMETIC.items() if a.integral)


class InterpolationMethod(str, Enum):
    """How values between two keyframes are produced."""

    LINEAR = "linear"
    SPLINE = "spline"


def arithmetic_for(kind: ValueKind) -> KindArithmetic:
    """Return the capability entry for a kind."""
    return KIND_ARITHMETIC[kind]


def supports(kind: ValueKind, method: InterpolationMethod) -> bool:
    """Whether ``kind`` has the arithmetic ``method`` needs.

    Linear needs a blend; spline needs add/subtract/scale.
    """
    arithmetic = KIND_ARITHMETIC[kind]
    if method is InterpolationMethod.LINEAR:
        return arithmetic.blend is not None
    return arithmetic.additive


class Value(BaseModel):
    """An immutable animated value.

    Example:
        >>> Value.vector3(1.0, 2.0, 3.0).lerp(Value.vector3(3.0, 2.0, 1.0), 0.5)
        Value(kind=<ValueKind.VECTOR3: 'Vector3'>, components=(2.0, 2.0, 2.0))
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ValueKind = ValueKind.UNSET
    components: tuple[int | float, ...] = ()

    EMPTY: ClassVar[Value]

    @model_validator(mode="before")
    @classmethod
    def _coerce_components(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        unknown = set(data) - {"kind", "components"}
        if unknown:
            raise ValueError(f"Unknown Value fields: {sorted(unknown)}")
        kind = ValueKind(data.get("kind", ValueKind.UNSET))
        raw = tuple(data.get("components", ()))
        arithmetic = KIND_ARITHMETIC[kind]
        if len(raw) != arithmetic.components:
            raise ValueError(
                f"{kind.value} takes {arithmetic.components} components, got {len(raw)}"
            )
        if arithmetic.integral:
            for c in raw:
                if not float(c).is_integer():
                    raise ValueError(f"{kind.value} components must be integers, got {c!r}")
            coerced: tuple[int | float, ...] = tuple(int(c) for c in raw)
        else:
            coerced = tuple(float(c) for c in raw)
        return {"kind": kind, "components": coerced}

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def of_float(cls, value: float) -> Value:
        return cls(kind=ValueKind.FLOAT, components=(value,))

    @classmethod
    def vector2(cls, x: float, y: float) -> Value:
        return cls(kind=ValueKind.VECTOR2, components=(x, y))

    @classmethod
    def vector3(cls, x: float, y: float, z: float) -> Value:
        return cls(kind=ValueKind.VECTOR3, components=(x, y, z))

    @classmethod
    def vector4(cls, x: float, y: float, z: float, w: float) -> Value:
        return cls(kind=ValueKind.VECTOR4, components=(x, y, z, w))

    @classmethod
    def rotation(cls, w: float, x: float, y: float, z: float) -> Value:
        """Quaternion rotation, scalar part first."""
        return cls(kind=ValueKind.ROTATION, components=(w, x, y, z))

    @classmethod
    def rotation_from_axis_angle(cls, axis: Iterable[float], degrees: float) -> Value:
        """Quaternion rotating ``degrees`` around ``axis`` (normalized here)."""
        vec = np.asarray(tuple(axis), dtype=np.float64)
        norm = float(np.linalg.norm(vec))
        if norm == 0.0:
            raise ValueError("rotation axis must be non-zero")
        half = math.radians(degrees) * 0.5
        x, y, z = vec / norm * math.sin(half)
        return cls.rotation(math.cos(half), x, y, z)

    @classmethod
    def color(cls, r: float, g: float, b: float, a: float = 1.0) -> Value:
        return cls(kind=ValueKind.COLOR, components=(r, g, b, a))

    @classmethod
    def int_rect(cls, left: int, top: int, right: int, bottom: int) -> Value:
        return cls(kind=ValueKind.INT_RECT, components=(left, top, right, bottom))

    @classmethod
    def int_vector2(cls, x: int, y: int) -> Value:
        return cls(kind=ValueKind.INT_VECTOR2, components=(x, y))

    @classmethod
    def zero(cls, kind: ValueKind) -> Value:
        """All-zero value of a kind (the empty value for UNSET)."""
        return cls(kind=kind, components=(0,) * KIND_ARITHMETIC[kind].components)

    @classmethod
    def _from_array(cls, kind: ValueKind, arr: np.ndarray) -> Value:
        # Internal results skip validation; integer kinds truncate toward zero.
        if KIND_ARITHMETIC[kind].integral:
            components: tuple[int | float, ...] = tuple(int(c) for c in arr)
        else:
            components = tuple(float(c) for c in arr)
        return cls.model_construct(kind=kind, components=components)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return self.kind is ValueKind.UNSET

    def as_float(self) -> float:
        if self.kind is not ValueKind.FLOAT:
            raise ValueError(f"Value of kind {self.kind.value} is not a Float")
        return float(self.components[0])

    def as_tuple(self) -> tuple[int | float, ...]:
        return self.components

    def to_array(self) -> np.ndarray:
        return np.asarray(self.components, dtype=np.float64)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _require_additive(self, other: Value | None, operation: str) -> None:
        if other is not None and other.kind is not self.kind:
            raise TypeError(f"Cannot {operation} {other.kind.value} and {self.kind.value}")
        if not KIND_ARITHMETIC[self.kind].additive:
            raise InterpolationError(self.kind.value, operation)

    def __add__(self, other: Value) -> Value:
        if not isinstance(other, Value):
            return NotImplemented
        self._require_additive(other, "add")
        return Value._from_array(self.kind, self.to_array() + other.to_array())

    def __sub__(self, other: Value) -> Value:
        if not isinstance(other, Value):
            return NotImplemented
        self._require_additive(other, "subtract")
        return Value._from_array(self.kind, self.to_array() - other.to_array())

    def __mul__(self, scale: float) -> Value:
        if not isinstance(scale, int | float):
            return NotImplemented
        self._require_additive(None, "scale")
        return Value._from_array(self.kind, self.to_array() * scale)

    __rmul__ = __mul__

    def lerp(self, other: Value, t: float) -> Value:
        """Blend toward ``other`` using the kind's linear-method blend."""
        if other.kind is not self.kind:
            raise TypeError(f"Cannot blend {self.kind.value} with {other.kind.value}")
        blend = KIND_ARITHMETIC[self.kind].blend
        if blend is None:
            raise InterpolationError(self.kind.value, "linear blend")
        return Value._from_array(self.kind, blend(self.to_array(), other.to_array(), t))


Value.EMPTY = Value()
