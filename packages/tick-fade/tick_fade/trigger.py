"""Rising-edge detection for the fade trigger input."""
from __future__ import annotations

from collections.abc import Hashable


class TriggerEdge:
    """Turns a per-frame "is the input held" signal into single triggers.

    Only the frame where the designated input goes from released to pressed
    fires. With ``key=None`` the edge never fires.
    """

    def __init__(self, key: Hashable | None = None) -> None:
        self._key = key
        self._held = False

    @property
    def key(self) -> Hashable | None:
        return self._key

    def update(self, pressed: bool) -> bool:
        """Feed this frame's state. Returns True on a rising edge."""
        if self._key is None:
            return False
        rising = pressed and not self._held
        self._held = pressed
        return rising
