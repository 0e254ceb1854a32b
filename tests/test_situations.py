import sys
import pathlib

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

import pytest

from situations import SITUATION_CHANCE, SITUATIONS
from state import GameState, Room

BY_ID = {s.id: s for s in SITUATIONS}


def _state(room=Room.BEDROOM, time=12.0, **needs):
    state = GameState(current_room=room, time=time)
    for name, value in needs.items():
        setattr(state, name, value)
    return state


def test_registry_contents():
    assert [s.id for s in SITUATIONS] == [
        "perfect_morning",
        "workout_motivation",
        "cooking_inspiration",
        "relaxing_bath",
        "gaming_flow",
        "power_nap",
        "hydration_boost",
        "social_energy",
        "midnight_snack",
        "morning_stretch",
    ]
    assert all(s.chance == SITUATION_CHANCE == 0.3 for s in SITUATIONS)


def test_message_format():
    assert BY_ID["power_nap"].message == (
        "😴 Cochilo Perfeito: Um cochilo rápido que te deixou completamente renovado!"
    )


@pytest.mark.parametrize(
    "situation_id, state, expected",
    [
        ("perfect_morning", _state(time=7, energy=75, sleepiness=10), True),
        ("perfect_morning", _state(time=10, energy=75, sleepiness=10), False),
        ("workout_motivation", _state(Room.GYM, energy=60, health=70), True),
        ("workout_motivation", _state(Room.LIVING, energy=60, health=70), False),
        ("cooking_inspiration", _state(Room.KITCHEN, hunger=50, happiness=60), True),
        ("relaxing_bath", _state(Room.BATHROOM, cleanliness=50, energy=40), True),
        ("relaxing_bath", _state(Room.BATHROOM, cleanliness=70, energy=40), False),
        ("gaming_flow", _state(Room.LIVING, happiness=70, energy=50), True),
        ("power_nap", _state(time=14, sleepiness=40), True),
        ("power_nap", _state(time=17, sleepiness=40), False),
        ("hydration_boost", _state(Room.GYM, thirst=20, health=80), True),
        ("social_energy", _state(happiness=40, energy=50), True),
        ("social_energy", _state(happiness=60, energy=50), False),
        ("midnight_snack", _state(Room.KITCHEN, time=23, hunger=60), True),
        ("midnight_snack", _state(Room.KITCHEN, time=1, hunger=60), True),
        ("midnight_snack", _state(Room.BEDROOM, time=23, hunger=60), False),
        ("midnight_snack", _state(Room.KITCHEN, time=23, hunger=40), False),
        ("midnight_snack", _state(Room.KITCHEN, time=12, hunger=60), False),
        ("morning_stretch", _state(Room.GYM, time=7, energy=50), True),
        ("morning_stretch", _state(Room.GYM, time=7, energy=70), False),
    ],
)
def test_conditions(situation_id, state, expected):
    assert BY_ID[situation_id].condition(state) is expected


def test_default_state_triggers_nothing_in_bedroom_at_eight():
    state = GameState(time=8.5)
    assert [s.id for s in SITUATIONS if s.condition(state)] == []
