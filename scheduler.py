"""Tick scheduling: the passage of time while the game is playing.

:func:`advance_tick` computes one step of the simulation.  :class:`TickScheduler`
calls back on a repeating timer provided by a cooperative event loop.  Any
object with Tk's ``after(ms, func)`` / ``after_cancel(handle)`` pair can host
it, including a ``tkinter.Tk`` root.

Both the timer period and the in-game hours per tick scale with the game
speed, so in-game time per wall-clock second grows with the square of the
speed.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable
from typing import Any, Callable

from models import SpecialSituation
from situations import SITUATIONS
from state import GameState, Need

logger = logging.getLogger(__name__)

BASE_INTERVAL_MS = 1000
TICK_HOURS = 0.5
DECAY_CHANCE = 0.3
PASSIVE_DECAY: dict[Need, float] = {
    Need.ENERGY: -1,
    Need.HUNGER: 1,
    Need.THIRST: 1,
    Need.CLEANLINESS: -0.5,
    Need.SLEEPINESS: 1,
}


def tick_interval_ms(speed: float) -> int:
    """Timer period in milliseconds for the given game speed."""
    return max(1, round(BASE_INTERVAL_MS / speed))


def advance_tick(
    state: GameState,
    rng: random.Random,
    situations: Iterable[SpecialSituation] = SITUATIONS,
) -> GameState:
    """Return the state after one tick; *state* is left untouched."""
    new_state = state.copy()
    new_state.advance_clock(TICK_HOURS * new_state.game_speed)

    if rng.random() < DECAY_CHANCE:
        new_state.apply_effects(PASSIVE_DECAY)

    for situation in situations:
        if situation.condition(new_state) and rng.random() < situation.chance:
            new_state.apply_effects(situation.effects)
            new_state.record_event(situation.message)
            logger.info("Special situation fired: %s", situation.id)

    return new_state


class TickScheduler:
    """Repeating timer that is either idle or running."""

    def __init__(self, host: Any, callback: Callable[[], None]) -> None:
        self.host = host
        self.callback = callback
        self.interval_ms: int | None = None
        self._handle: Any = None

    @property
    def running(self) -> bool:
        return self.interval_ms is not None

    def start(self, speed: float) -> None:
        """Start ticking every ``1000 / speed`` milliseconds."""
        if self.running:
            self.stop()
        self.interval_ms = tick_interval_ms(speed)
        logger.debug("Tick timer started, period %d ms", self.interval_ms)
        self._schedule()

    def stop(self) -> None:
        """Cancel the pending tick.  Safe to call when idle."""
        if self._handle is not None:
            self.host.after_cancel(self._handle)
            self._handle = None
        if self.running:
            logger.debug("Tick timer stopped")
        self.interval_ms = None

    def restart(self, speed: float) -> None:
        """Restart at a new speed, discarding the time left in the current period."""
        self.stop()
        self.start(speed)

    def _schedule(self) -> None:
        self._handle = self.host.after(self.interval_ms, self._fire)

    def _fire(self) -> None:
        self._handle = None
        if not self.running:
            return
        self.callback()
        # The callback may have stopped or restarted the timer.
        if self.running and self._handle is None:
            self._schedule()
