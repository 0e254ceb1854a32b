"""The game session: owner of the current state and entry point for intents."""

from __future__ import annotations

import logging
import random
from typing import Any, Callable

from actions import apply_interaction
from catalog import get_object, list_for_room
from config import AppConfig
from models import InteractableObject
from scheduler import TickScheduler, advance_tick
from services.audio import Soundtrack
from state import GameState, Room

logger = logging.getLogger(__name__)

Listener = Callable[[GameState], None]


class GameSession:
    """Holds the current :class:`GameState` and applies player intents.

    Every change produces a new state which replaces the current one as a
    whole; listeners are then called with it.  All work happens on the thread
    running *host*'s event loop.
    """

    def __init__(
        self,
        host: Any,
        rng: random.Random | None = None,
        config: AppConfig | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.soundtrack = Soundtrack(volume=self.config.volume, muted=self.config.muted)
        self.scheduler = TickScheduler(host, self.on_tick)
        self._state = GameState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> GameState:
        return self._state

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def objects_here(self) -> list[InteractableObject]:
        return list_for_room(self._state.current_room)

    # Intents -------------------------------------------------------------
    def interact(self, object_id: str) -> None:
        obj = get_object(object_id)
        if obj is None:
            logger.debug("Ignoring unknown object %r", object_id)
            return
        self._install(apply_interaction(self._state, obj))

    def set_room(self, room: Room | str) -> None:
        try:
            room = Room(room)
        except ValueError:
            logger.debug("Ignoring unknown room %r", room)
            return
        new_state = self._state.copy()
        new_state.current_room = room
        self._install(new_state)

    def toggle_playing(self) -> None:
        new_state = self._state.copy()
        new_state.is_playing = not new_state.is_playing
        if new_state.is_playing:
            self.scheduler.start(new_state.game_speed)
        else:
            self.scheduler.stop()
        self._install(new_state)

    def reset(self) -> None:
        self.scheduler.stop()
        self._install(GameState())

    def set_speed(self, value: float) -> None:
        """Change the game speed; the caller keeps it within [0.5, 3.0]."""
        new_state = self._state.copy()
        new_state.game_speed = value
        if self.scheduler.running:
            self.scheduler.restart(value)
        self._install(new_state)

    def set_volume(self, value: float) -> None:
        self.soundtrack.set_volume(value)

    def toggle_mute(self) -> None:
        self.soundtrack.toggle_mute()

    # Timer ---------------------------------------------------------------
    def on_tick(self) -> None:
        if not self._state.is_playing:
            return
        self._install(advance_tick(self._state, self.rng))

    def _install(self, new_state: GameState) -> None:
        if new_state is self._state:
            return
        self._state = new_state
        for listener in self._listeners:
            listener(new_state)
