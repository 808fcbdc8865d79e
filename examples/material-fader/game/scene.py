"""Minimal material host: panels made of colored materials."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from tick_fade import Color


@dataclass
class Material:
    name: str
    properties: dict[str, Any] = field(default_factory=dict)


@dataclass
class Panel:
    """A renderer."""

    name: str
    materials: list[Material] = field(default_factory=list)


@dataclass
class Scene:
    panels: list[Panel] = field(default_factory=list)


class SceneHost:
    """MaterialHost over Scene objects."""

    def renderers(self, owner: Scene) -> list[Panel]:
        return owner.panels

    def materials(self, renderer: Panel) -> list[Material]:
        return renderer.materials

    def has_property(self, material: Material, name: str) -> bool:
        return name in material.properties

    def get_color(self, material: Material, name: str) -> Color:
        return material.properties[name]

    def set_float(self, material: Material, name: str, value: float) -> None:
        material.properties[name] = value

    def set_color(self, material: Material, name: str, color: Color) -> None:
        material.properties[name] = color

    def refresh(self, renderer: Panel) -> None:
        # Panels are redrawn from their materials every frame.
        pass


def build_scene() -> Scene:
    """Three panels; the middle one has no emission and is never faded."""
    return Scene(
        panels=[
            Panel(
                "lamp",
                [
                    Material("glass", {"_EmissionColor": (1.0, 0.8, 0.3, 1.0), "_Glow": 0.0}),
                    Material("frame", {"_Metallic": 1.0}),
                ],
            ),
            Panel("wall", [Material("paint", {"_Metallic": 0.0})]),
            Panel(
                "sign",
                [Material("neon", {"_EmissionColor": (0.2, 0.9, 1.0, 1.0), "_Glow": 0.0})],
            ),
        ]
    )
