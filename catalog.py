"""Catalog of the room fixtures the character can interact with.

The catalog itself is immutable.  When a fixture was last used is recorded on
the :class:`~state.GameState` (``last_used``), measured in absolute in-game
hours so that cooldowns keep counting across midnight.
"""

from __future__ import annotations

from models import ActionKind, InteractableObject, always
from state import GameState, Need, Room

E, HA, HE, HU, TH, CL, SL = (
    Need.ENERGY,
    Need.HAPPINESS,
    Need.HEALTH,
    Need.HUNGER,
    Need.THIRST,
    Need.CLEANLINESS,
    Need.SLEEPINESS,
)


def _fixture(fixture_id: str, name: str, room: Room, kind: ActionKind, effects: dict[Need, float],
             hours: float, cooldown: float, available=always) -> InteractableObject:
    return InteractableObject(
        id=fixture_id,
        display_name=name,
        room=room,
        action_kind=kind,
        effects=effects,
        time_cost=hours,
        availability=available,
        cooldown_hours=cooldown,
    )


OBJECTS: tuple[InteractableObject, ...] = (
    # Bedroom
    _fixture("bed", "Cama", Room.BEDROOM, ActionKind.SLEEP,
             {E: 40, SL: -60, HE: 10}, 8, 12,
             lambda s: s.sleepiness > 40 or s.time >= 22 or s.time <= 6),
    _fixture("computer", "Computador", Room.BEDROOM, ActionKind.RELAX,
             {HA: 20, E: -10, SL: 5}, 2, 1,
             lambda s: s.energy > 20),
    _fixture("wardrobe", "Guarda-roupa", Room.BEDROOM, ActionKind.RELAX,
             {HA: 10, CL: 5}, 1, 2),
    # Living room
    _fixture("sofa", "Sofá", Room.LIVING, ActionKind.RELAX,
             {HA: 15, E: 5, SL: 10}, 2, 1),
    _fixture("tv", "TV", Room.LIVING, ActionKind.RELAX,
             {HA: 25, E: -5, SL: 15}, 3, 1),
    _fixture("bookshelf", "Estante", Room.LIVING, ActionKind.RELAX,
             {HA: 20, HE: 5, SL: 20}, 2, 1),
    _fixture("videogame", "Videogame", Room.LIVING, ActionKind.RELAX,
             {HA: 30, E: -15, SL: -5}, 3, 2,
             lambda s: s.energy > 25),
    # Kitchen
    _fixture("table", "Mesa", Room.KITCHEN, ActionKind.EAT,
             {HU: -50, HA: 15, E: 20}, 1, 3,
             lambda s: s.hunger > 30),
    _fixture("fridge", "Geladeira", Room.KITCHEN, ActionKind.EAT,
             {HU: -30, TH: -20, HA: 10}, 1, 2,
             lambda s: s.hunger > 20 or s.thirst > 30),
    _fixture("stove", "Fogão", Room.KITCHEN, ActionKind.EAT,
             {HU: -60, HA: 25, E: 15}, 2, 4,
             lambda s: s.hunger > 40),
    _fixture("microwave", "Microondas", Room.KITCHEN, ActionKind.EAT,
             {HU: -40, HA: 10, E: 10}, 1, 2,
             lambda s: s.hunger > 25),
    _fixture("water", "Água", Room.KITCHEN, ActionKind.DRINK_WATER,
             {TH: -40, HE: 10, E: 5}, 1, 1,
             lambda s: s.thirst > 20),
    # Gym
    _fixture("exercise", "Equipamento", Room.GYM, ActionKind.EXERCISE,
             {HE: 25, E: -20, HA: 20, SL: -10}, 2, 3,
             lambda s: s.energy > 30),
    _fixture("treadmill", "Esteira", Room.GYM, ActionKind.EXERCISE,
             {HE: 30, E: -25, HA: 15, SL: -15}, 3, 4,
             lambda s: s.energy > 35),
    _fixture("dumbbells", "Halteres", Room.GYM, ActionKind.EXERCISE,
             {HE: 20, E: -15, HA: 10, SL: -5}, 1, 2,
             lambda s: s.energy > 25),
    _fixture("yoga-mat", "Tapete de Yoga", Room.GYM, ActionKind.EXERCISE,
             {HE: 15, E: 5, HA: 25, SL: 10}, 2, 2),
    # Bathroom
    _fixture("shower", "Chuveiro", Room.BATHROOM, ActionKind.SHOWER,
             {CL: 60, HA: 20, E: 10, SL: -10}, 1, 2,
             lambda s: s.cleanliness < 80),
    _fixture("bathroom-sink", "Pia", Room.BATHROOM, ActionKind.SHOWER,
             {CL: 20, HA: 5, TH: -10}, 1, 1,
             lambda s: s.cleanliness < 90),
    _fixture("toilet", "Vaso Sanitário", Room.BATHROOM, ActionKind.SHOWER,
             {HA: 10, HE: 5}, 1, 2),
    _fixture("skincare", "Produtos de Beleza", Room.BATHROOM, ActionKind.SHOWER,
             {CL: 30, HA: 25, HE: 10}, 2, 3),
)

_BY_ID: dict[str, InteractableObject] = {obj.id: obj for obj in OBJECTS}


def list_for_room(room: Room) -> list[InteractableObject]:
    """Return the fixtures in *room*, in catalog order."""
    return [obj for obj in OBJECTS if obj.room == room]


def get_object(object_id: str) -> InteractableObject | None:
    return _BY_ID.get(object_id)


def hours_since_use(obj: InteractableObject, state: GameState) -> float | None:
    """Absolute in-game hours since *obj* was last used, ``None`` if never."""
    last = state.last_used.get(obj.id)
    if last is None:
        return None
    return state.absolute_hours - last


def cooldown_remaining(obj: InteractableObject, state: GameState) -> float:
    """Hours left before *obj* comes off cooldown; ``0.0`` when ready."""
    elapsed = hours_since_use(obj, state)
    if elapsed is None:
        return 0.0
    return max(0.0, obj.cooldown_hours - elapsed)


def is_usable(obj: InteractableObject, state: GameState) -> bool:
    """Whether *obj* is available in *state* and off cooldown."""
    if not obj.availability(state):
        return False
    elapsed = hours_since_use(obj, state)
    return elapsed is None or elapsed >= obj.cooldown_hours
