"""Data models for the room fixtures and special situations."""

from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from state import GameState, Need, Room

Predicate = Callable[[GameState], bool]


def always(state: GameState) -> bool:
    """Availability predicate for fixtures that can be used at any time."""
    return True


class ActionKind(str, Enum):
    """What the character does when using a fixture."""

    SLEEP = "sleep"
    EAT = "eat"
    EXERCISE = "exercise"
    RELAX = "relax"
    SHOWER = "shower"
    DRINK_WATER = "drinkWater"


class InteractableObject(BaseModel):
    """A room fixture offering one timed, cooldown-gated action."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    display_name: str
    room: Room
    action_kind: ActionKind
    effects: dict[Need, float]
    time_cost: float = Field(gt=0)
    availability: Predicate = always
    cooldown_hours: float = Field(default=0.0, ge=0)

    @property
    def label(self) -> str:
        """History entry written when the fixture is used."""
        return f"{self.display_name} ({self.action_kind.value})"


class SpecialSituation(BaseModel):
    """A conditional event that may fire on any tick while its condition holds."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    display_name: str
    description: str
    condition: Predicate
    effects: dict[Need, float]
    chance: float = Field(ge=0, le=1)

    @property
    def message(self) -> str:
        return f"{self.display_name}: {self.description}"
