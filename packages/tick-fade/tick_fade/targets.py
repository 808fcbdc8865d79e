"""Property targets: registration against a host and per-tick fan-out."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from tick_fade.types import Color, MaterialHost, PropertyKind


@dataclass
class PropertyTarget:
    """One writable float or color slot on one material.

    ``base_color`` is the color read at registration; color writes scale it.
    """

    kind: PropertyKind
    material: Any
    property_name: str
    base_color: Color | None = None


@dataclass
class RendererTargets:
    renderer: Any
    targets: list[PropertyTarget] = field(default_factory=list)


def scale_color(color: Color, value: float) -> Color:
    """Scale every channel by value, alpha included."""
    r, g, b, a = color
    return (r * value, g * value, b * value, a * value)


def _write_float(host: MaterialHost, target: PropertyTarget, value: float) -> None:
    host.set_float(target.material, target.property_name, value)


def _write_color(host: MaterialHost, target: PropertyTarget, value: float) -> None:
    assert target.base_color is not None
    host.set_color(
        target.material, target.property_name, scale_color(target.base_color, value)
    )


_WRITERS: dict[PropertyKind, Callable[[MaterialHost, PropertyTarget, float], None]] = {
    PropertyKind.FLOAT: _write_float,
    PropertyKind.COLOR: _write_color,
}


def register_targets(
    host: MaterialHost, owner: Any, kind: PropertyKind, property_name: str
) -> list[RendererTargets]:
    """Collect targets for every renderer under owner.

    Materials without the property are skipped, and renderers left with no
    targets are dropped. Nothing is re-checked after this call.
    """
    groups: list[RendererTargets] = []
    for renderer in host.renderers(owner):
        group = RendererTargets(renderer=renderer)
        for material in host.materials(renderer):
            if not host.has_property(material, property_name):
                continue
            base_color: Color | None = None
            if kind is PropertyKind.COLOR:
                r, g, b, a = host.get_color(material, property_name)
                base_color = (r, g, b, a)
            group.targets.append(
                PropertyTarget(
                    kind=kind,
                    material=material,
                    property_name=property_name,
                    base_color=base_color,
                )
            )
        if group.targets:
            groups.append(group)
    return groups


def apply_value(
    host: MaterialHost, groups: list[RendererTargets], value: float
) -> None:
    """Write value to every target, refreshing each renderer after its writes."""
    for group in groups:
        for target in group.targets:
            _WRITERS[target.kind](host, target, value)
        host.refresh(group.renderer)
