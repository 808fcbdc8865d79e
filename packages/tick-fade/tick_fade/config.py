"""Fader settings: the configuration surface of one fade behavior."""
from __future__ import annotations

import dataclasses
from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from typing import Any

from tick_fade.components import FadeConfig
from tick_fade.easing import Ease, resolve_ease
from tick_fade.types import FadeConfigError, PropertyKind


@dataclass(frozen=True)
class FaderSettings:
    """Immutable settings for a MaterialFader.

    Attributes:
        property_name: Material property to fade, e.g. ``"_EmissionColor"``.
        property_kind: FLOAT writes the value, COLOR scales the base color.
        minimum_value: Lower fade value (color scale factor for COLOR).
        maximum_value: Upper fade value (color scale factor for COLOR).
        duration: Fade length in seconds.
        ease: Easing curve.
        trigger: Host input identifier. None disables the input.
    """

    property_name: str
    property_kind: PropertyKind = PropertyKind.FLOAT
    minimum_value: float = 0.0
    maximum_value: float = 1.0
    duration: float = 1.0
    ease: Ease = Ease.LINEAR
    trigger: Hashable | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.property_name, str) or not self.property_name:
            raise FadeConfigError("property_name must be a non-empty string")
        if not isinstance(self.property_kind, PropertyKind):
            try:
                kind = PropertyKind(self.property_kind)
            except ValueError:
                raise FadeConfigError(
                    f"Unsupported property kind {self.property_kind!r}"
                ) from None
            object.__setattr__(self, "property_kind", kind)
        object.__setattr__(self, "ease", resolve_ease(self.ease))
        # Validates endpoints and duration up front.
        self.fade_config()

    def fade_config(self) -> FadeConfig:
        return FadeConfig(
            minimum_value=self.minimum_value,
            maximum_value=self.maximum_value,
            duration=self.duration,
            ease=self.ease,
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> FaderSettings:
        """Build settings from a plain dict. Unknown keys are rejected."""
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise FadeConfigError(f"Unknown settings: {', '.join(unknown)}")
        if "property_name" not in data:
            raise FadeConfigError("property_name is required")
        return cls(**data)
