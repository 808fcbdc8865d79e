"""MaterialFader - fades one material property on trigger, toggling direction."""
from __future__ import annotations

import logging
from typing import Any, Callable

from tick_fade import sequencer
from tick_fade.components import FadeState
from tick_fade.config import FaderSettings
from tick_fade.targets import RendererTargets, apply_value, register_targets
from tick_fade.trigger import TriggerEdge
from tick_fade.types import FadeDirection, MaterialHost

logger = logging.getLogger(__name__)


class MaterialFader:
    """Behavior driven by host callbacks: ``start``, ``poll``/``trigger``, ``tick``.

    Targets are resolved once in ``start``. Each trigger restarts the fade in
    the current direction and flips it; ``tick`` applies one eased value per
    frame until the exact end value is written.
    """

    def __init__(
        self,
        settings: FaderSettings,
        host: MaterialHost,
        owner: Any,
        on_complete: Callable[[float], None] | None = None,
    ) -> None:
        self._settings = settings
        self._config = settings.fade_config()
        self._host = host
        self._owner = owner
        self._on_complete = on_complete
        self._state = FadeState()
        self._edge = TriggerEdge(settings.trigger)
        self._groups: list[RendererTargets] = []
        self._started = False

    @property
    def settings(self) -> FaderSettings:
        return self._settings

    @property
    def state(self) -> FadeState:
        return self._state

    @property
    def direction(self) -> FadeDirection:
        return self._state.direction

    @property
    def running(self) -> bool:
        return self._state.running

    @property
    def targets(self) -> list[RendererTargets]:
        return list(self._groups)

    def start(self) -> None:
        """Resolve targets. Only the first call registers; later calls are no-ops."""
        if self._started:
            return
        self._started = True
        self._groups = register_targets(
            self._host,
            self._owner,
            self._settings.property_kind,
            self._settings.property_name,
        )
        logger.info(
            "registered %d renderer(s), %d target(s) for %r",
            len(self._groups),
            sum(len(g.targets) for g in self._groups),
            self._settings.property_name,
        )

    def trigger(self) -> None:
        sequencer.trigger(self._state, self._config)

    def poll(self, pressed: bool) -> bool:
        """Feed the trigger input state for this frame. Returns True if fired."""
        if self._edge.update(pressed):
            self.trigger()
            return True
        return False

    def tick(self, dt: float) -> None:
        if dt < 0:
            raise ValueError("dt must not be negative")
        value = sequencer.advance(self._state, self._config, dt)
        if value is None:
            return
        apply_value(self._host, self._groups, value)
        if not self._state.running and self._on_complete is not None:
            self._on_complete(value)
