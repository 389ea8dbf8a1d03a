"""Identifier-keyed curve lookup.

Animation clips refer to their curves through a ``CurveRegistry`` keyed by
``(clip_id, attribute)`` instead of holding the curves themselves, and a curve
never points back at its clip. Dropping a clip's entries does not affect
curves still referenced elsewhere.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from tweenr.core.animation.curve import Curve


@dataclass(frozen=True)
class CurveKey:
    """Registry key: owning clip plus animated attribute name."""

    clip_id: str
    attribute: str


class CurveRegistry:
    """Registry of curves addressed by clip and attribute."""

    def __init__(self) -> None:
        self._registry: dict[CurveKey, Curve] = {}

    def register(self, clip_id: str, attribute: str, curve: Curve) -> CurveKey:
        key = CurveKey(clip_id, attribute)
        if key in self._registry:
            raise ValueError(f"Curve for '{attribute}' already registered in clip '{clip_id}'")
        self._registry[key] = curve
        return key

    def get(self, clip_id: str, attribute: str) -> Curve:
        try:
            return self._registry[CurveKey(clip_id, attribute)]
        except KeyError as exc:
            raise ValueError(
                f"No curve for '{attribute}' registered in clip '{clip_id}'"
            ) from exc

    def find(self, clip_id: str, attribute: str) -> Curve | None:
        return self._registry.get(CurveKey(clip_id, attribute))

    def unregister(self, clip_id: str, attribute: str) -> Curve | None:
        return self._registry.pop(CurveKey(clip_id, attribute), None)

    def curves_for(self, clip_id: str) -> dict[str, Curve]:
        """Every curve of one clip, keyed by attribute."""
        return {
            key.attribute: curve for key, curve in self._registry.items() if key.clip_id == clip_id
        }

    def remove_clip(self, clip_id: str) -> int:
        """Drop every entry of a clip; returns how many were removed."""
        keys = [key for key in self._registry if key.clip_id == clip_id]
        for key in keys:
            del self._registry[key]
        return len(keys)

    def ids(self) -> list[CurveKey]:
        return list(self._registry)

    def __contains__(self, key: object) -> bool:
        return key in self._registry

    def __iter__(self) -> Iterator[CurveKey]:
        return iter(self._registry)

    def __len__(self) -> int:
        return len(self._registry)
