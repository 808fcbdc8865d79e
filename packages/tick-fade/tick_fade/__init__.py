"""tick-fade - Eased, direction-toggling material property fades."""
from __future__ import annotations

from tick_fade.components import FadeConfig, FadeSession, FadeState
from tick_fade.config import FaderSettings
from tick_fade.easing import EASINGS, Ease, ease, resolve_ease
from tick_fade.fader import MaterialFader
from tick_fade.sequencer import advance, trigger
from tick_fade.targets import (
    PropertyTarget,
    RendererTargets,
    apply_value,
    register_targets,
    scale_color,
)
from tick_fade.trigger import TriggerEdge
from tick_fade.types import (
    Color,
    FadeConfigError,
    FadeDirection,
    MaterialHost,
    PropertyKind,
)

__all__ = [
    "Color",
    "EASINGS",
    "Ease",
    "FadeConfig",
    "FadeConfigError",
    "FadeDirection",
    "FadeSession",
    "FadeState",
    "FaderSettings",
    "MaterialFader",
    "MaterialHost",
    "PropertyKind",
    "PropertyTarget",
    "RendererTargets",
    "TriggerEdge",
    "advance",
    "apply_value",
    "ease",
    "register_targets",
    "resolve_ease",
    "scale_color",
    "trigger",
]
