"""Shared types and errors for tick-fade."""
from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any, Protocol

Color = tuple[float, float, float, float]


class FadeConfigError(ValueError):
    """Raised when a fade configuration is invalid (bad ease, duration, kind)."""


class FadeDirection(Enum):
    IN = "in"
    OUT = "out"

    def flipped(self) -> FadeDirection:
        return FadeDirection.OUT if self is FadeDirection.IN else FadeDirection.IN


class PropertyKind(Enum):
    FLOAT = "float"
    COLOR = "color"


class MaterialHost(Protocol):
    """Material API of the host engine. Renderers and materials are opaque."""

    def renderers(self, owner: Any) -> Iterable[Any]: ...

    def materials(self, renderer: Any) -> Iterable[Any]: ...

    def has_property(self, material: Any, name: str) -> bool: ...

    def get_color(self, material: Any, name: str) -> Color: ...

    def set_float(self, material: Any, name: str, value: float) -> None: ...

    def set_color(self, material: Any, name: str, color: Color) -> None: ...

    def refresh(self, renderer: Any) -> None: ...
