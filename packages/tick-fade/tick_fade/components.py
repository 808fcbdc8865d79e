"""Fade configuration and runtime state."""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from tick_fade.easing import Ease, resolve_ease
from tick_fade.types import FadeConfigError, FadeDirection


@dataclass(frozen=True)
class FadeConfig:
    """Immutable fade parameters.

    Attributes:
        minimum_value: Value at the "in" start / "out" end.
        maximum_value: Value at the "in" end / "out" start.
        duration: Fade length in seconds. Must be positive and finite.
        ease: Easing curve. Strings are coerced to ``Ease``.
    """

    minimum_value: float = 0.0
    maximum_value: float = 1.0
    duration: float = 1.0
    ease: Ease = Ease.LINEAR

    def __post_init__(self) -> None:
        for name in ("minimum_value", "maximum_value", "duration"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise FadeConfigError(f"{name} must be a number, got {value!r}")
            object.__setattr__(self, name, float(value))
        if not math.isfinite(self.duration) or self.duration <= 0:
            raise FadeConfigError("duration must be positive and finite")
        object.__setattr__(self, "ease", resolve_ease(self.ease))

    def endpoints(self, direction: FadeDirection) -> tuple[float, float]:
        """Return (begin, end) for a fade in the given direction."""
        if direction is FadeDirection.IN:
            return self.minimum_value, self.maximum_value
        return self.maximum_value, self.minimum_value


@dataclass
class FadeSession:
    """One in-progress interpolation run."""

    begin_value: float
    end_value: float
    elapsed: float = 0.0


@dataclass
class FadeState:
    """Direction for the next trigger plus the active session, if any."""

    direction: FadeDirection = FadeDirection.IN
    session: FadeSession | None = field(default=None)

    @property
    def running(self) -> bool:
        return self.session is not None
