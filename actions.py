"""Applying player interactions to the game state."""

from __future__ import annotations

import logging

from catalog import is_usable
from models import InteractableObject
from state import GameState

logger = logging.getLogger(__name__)


def apply_interaction(state: GameState, obj: InteractableObject) -> GameState:
    """Return the state that results from using *obj*.

    Unusable fixtures are ignored and *state* is returned as is.  Otherwise a
    copy is updated: effects are applied with clamping, the clock advances by
    the fixture's time cost, the action is added to the history and the
    post-advance time is recorded as the fixture's last use.  *state* itself is
    never modified.
    """
    if not is_usable(obj, state):
        logger.debug("Ignoring %s on day %d at %.2fh: not usable", obj.id, state.day, state.time)
        return state

    new_state = state.copy()
    new_state.apply_effects(obj.effects)
    new_state.advance_clock(obj.time_cost)
    new_state.record_action(obj.label)
    new_state.last_used[obj.id] = new_state.absolute_hours
    logger.debug("Used %s, clock now day %d %.2fh", obj.id, new_state.day, new_state.time)
    return new_state
