"""Shared in-memory material host for tick-fade tests."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest


@dataclass
class Material:
    name: str
    properties: dict[str, Any] = field(default_factory=dict)


@dataclass
class Renderer:
    name: str
    materials: list[Material] = field(default_factory=list)


@dataclass
class SceneObject:
    renderers: list[Renderer] = field(default_factory=list)


@dataclass
class FakeHost:
    """Records every write and refresh in call order."""

    calls: list[tuple] = field(default_factory=list)
    color_reads: int = 0

    def renderers(self, owner):
        return owner.renderers

    def materials(self, renderer):
        return renderer.materials

    def has_property(self, material, name):
        return name in material.properties

    def get_color(self, material, name):
        self.color_reads += 1
        return material.properties[name]

    def set_float(self, material, name, value):
        material.properties[name] = value
        self.calls.append(("float", material.name, value))

    def set_color(self, material, name, color):
        material.properties[name] = color
        self.calls.append(("color", material.name, color))

    def refresh(self, renderer):
        self.calls.append(("refresh", renderer.name))


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def scene():
    """Two renderers with _Glow, one renderer without it."""
    return SceneObject(
        renderers=[
            Renderer(
                "lamp",
                [
                    Material("bulb", {"_Glow": 0.0, "_Tint": (1.0, 0.5, 0.0, 1.0)}),
                    Material("base", {"_Metallic": 1.0}),
                ],
            ),
            Renderer("sign", [Material("letters", {"_Glow": 0.0})]),
            Renderer("floor", [Material("tiles", {"_Metallic": 0.2})]),
        ]
    )
