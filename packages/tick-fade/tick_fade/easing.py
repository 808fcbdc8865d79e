"""Easing functions for fade interpolation.

Each function maps (start, end, t) to a value. ``t`` is normally in
[0.0, 1.0] but is not clamped; values past 1.0 extrapolate along the curve.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable

from tick_fade.types import FadeConfigError


class Ease(Enum):
    LINEAR = "linear"
    EASE_IN_QUAD = "ease_in_quad"
    EASE_OUT_QUAD = "ease_out_quad"


def linear(start: float, end: float, t: float) -> float:
    return start + (end - start) * t


def ease_in_quad(start: float, end: float, t: float) -> float:
    d = end - start
    return d * t * t + start


def ease_out_quad(start: float, end: float, t: float) -> float:
    d = end - start
    return -d * t * (t - 2) + start


EASINGS: dict[Ease, Callable[[float, float, float], float]] = {
    Ease.LINEAR: linear,
    Ease.EASE_IN_QUAD: ease_in_quad,
    Ease.EASE_OUT_QUAD: ease_out_quad,
}


def resolve_ease(value: Ease | str) -> Ease:
    """Coerce an Ease or its string value. Raises FadeConfigError otherwise."""
    if isinstance(value, Ease):
        return value
    try:
        return Ease(value)
    except ValueError:
        raise FadeConfigError(f"Unsupported ease {value!r}") from None


def ease(kind: Ease, start: float, end: float, t: float) -> float:
    fn = EASINGS.get(kind)
    if fn is None:
        raise FadeConfigError(f"Unsupported ease {kind!r}")
    return fn(start, end, t)
