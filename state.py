from __future__ import annotations

"""Game state dataclasses."""

from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum

NEED_MIN = 0.0
NEED_MAX = 100.0
HOURS_PER_DAY = 24
HISTORY_LIMIT = 5


class Need(IntEnum):
    """The character's needs, in the order they are stored on the state."""

    ENERGY = 0
    HAPPINESS = 1
    HEALTH = 2
    HUNGER = 3
    THIRST = 4
    CLEANLINESS = 5
    SLEEPINESS = 6


class Room(str, Enum):
    """Rooms of the character's home."""

    BEDROOM = "bedroom"
    LIVING = "living"
    KITCHEN = "kitchen"
    GYM = "gym"
    BATHROOM = "bathroom"


DEFAULT_NEEDS: dict[Need, float] = {
    Need.ENERGY: 80.0,
    Need.HAPPINESS: 70.0,
    Need.HEALTH: 85.0,
    Need.HUNGER: 60.0,
    Need.THIRST: 70.0,
    Need.CLEANLINESS: 80.0,
    Need.SLEEPINESS: 30.0,
}


def clamp(value: float, low: float = NEED_MIN, high: float = NEED_MAX) -> float:
    """Return *value* limited to the ``[low, high]`` range."""
    return max(low, min(high, value))


def default_needs() -> list[float]:
    return [DEFAULT_NEEDS[need] for need in Need]


def _need_property(need: Need) -> property:
    def getter(self: GameState) -> float:
        return self.needs[need]

    def setter(self: GameState, value: float) -> None:
        self.needs[need] = clamp(value)

    return property(getter, setter, doc=f"Current {need.name.lower()} level.")


@dataclass
class GameState:
    """Snapshot of the character, the clock and the recent history.

    Needs are kept in a fixed-size list indexed by :class:`Need` and are also
    exposed as named properties.  Every write goes through :func:`clamp`.

    ``last_used`` maps an object id to the absolute in-game hour of its last
    use, so cooldowns belong to the session rather than to the catalog.
    """

    needs: list[float] = field(default_factory=default_needs)
    time: float = 8.0
    day: int = 1
    current_room: Room = Room.BEDROOM
    is_playing: bool = False
    game_speed: float = 1.0
    last_actions: list[str] = field(default_factory=list)
    special_events: list[str] = field(default_factory=list)
    # Reserved; nothing unlocks achievements yet.
    achievements: set[str] = field(default_factory=set)
    last_used: dict[str, float] = field(default_factory=dict)

    energy = _need_property(Need.ENERGY)
    happiness = _need_property(Need.HAPPINESS)
    health = _need_property(Need.HEALTH)
    hunger = _need_property(Need.HUNGER)
    thirst = _need_property(Need.THIRST)
    cleanliness = _need_property(Need.CLEANLINESS)
    sleepiness = _need_property(Need.SLEEPINESS)

    @property
    def absolute_hours(self) -> float:
        """Hours elapsed since midnight of day 1."""
        return (self.day - 1) * HOURS_PER_DAY + self.time

    def copy(self) -> GameState:
        """Return an independent copy, including the mutable containers."""
        return replace(
            self,
            needs=list(self.needs),
            last_actions=list(self.last_actions),
            special_events=list(self.special_events),
            achievements=set(self.achievements),
            last_used=dict(self.last_used),
        )

    def adjust(self, need: Need, delta: float) -> None:
        self.needs[need] = clamp(self.needs[need] + delta)

    def apply_effects(self, effects: dict[Need, float]) -> None:
        """Add each delta in *effects* to its need, clamping the result."""
        for need, delta in effects.items():
            self.adjust(need, delta)

    def advance_clock(self, hours: float) -> None:
        """Move the clock forward, rolling over into the next day at 24h."""
        days, self.time = divmod(self.time + hours, HOURS_PER_DAY)
        self.day += int(days)

    def record_action(self, label: str) -> None:
        self.last_actions = [label, *self.last_actions][:HISTORY_LIMIT]

    def record_event(self, label: str) -> None:
        self.special_events = [label, *self.special_events][:HISTORY_LIMIT]
