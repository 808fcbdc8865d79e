"""Trigger and per-tick advance of a fade session."""
from __future__ import annotations

import logging

from tick_fade.components import FadeConfig, FadeSession, FadeState
from tick_fade.easing import ease

logger = logging.getLogger(__name__)


def trigger(state: FadeState, config: FadeConfig) -> FadeSession:
    """Start a fade in the current direction, then flip the direction.

    A session already in flight is dropped without reaching its end value.
    """
    if state.session is not None:
        logger.debug("cancelling fade at elapsed=%.4f", state.session.elapsed)
    begin, end = config.endpoints(state.direction)
    session = FadeSession(begin_value=begin, end_value=end)
    state.session = session
    state.direction = state.direction.flipped()
    logger.debug("fade started: %s -> %s", begin, end)
    return session


def advance(state: FadeState, config: FadeConfig, dt: float) -> float | None:
    """Advance the active session by one tick and return the value to apply.

    Returns None when idle. Once elapsed reaches the duration the exact end
    value is returned and the state goes back to idle.
    """
    session = state.session
    if session is None:
        return None

    if session.elapsed < config.duration:
        t = session.elapsed / config.duration
        value = ease(config.ease, session.begin_value, session.end_value, t)
        session.elapsed += dt
        return value

    state.session = None
    logger.debug("fade complete at %s", session.end_value)
    return session.end_value
