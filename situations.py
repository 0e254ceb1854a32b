"""Special situations evaluated on every tick.

Each situation fires independently with :data:`SITUATION_CHANCE` whenever its
condition holds.  Registry order matters: situations that fire earlier in a
tick change the state the later ones are checked against.
"""

from __future__ import annotations

from models import SpecialSituation
from state import GameState, Need, Room

SITUATION_CHANCE = 0.3


def _perfect_morning(s: GameState) -> bool:
    return 6 <= s.time <= 8 and s.energy > 70 and s.sleepiness < 20


def _workout_motivation(s: GameState) -> bool:
    return s.current_room == Room.GYM and s.energy > 50 and s.health > 60


def _cooking_inspiration(s: GameState) -> bool:
    return s.current_room == Room.KITCHEN and s.hunger > 40 and s.happiness > 50


def _relaxing_bath(s: GameState) -> bool:
    return s.current_room == Room.BATHROOM and s.cleanliness < 60 and s.energy < 50


def _gaming_flow(s: GameState) -> bool:
    return s.current_room == Room.LIVING and s.happiness > 60 and s.energy > 40


def _power_nap(s: GameState) -> bool:
    return s.current_room == Room.BEDROOM and s.sleepiness > 30 and 13 <= s.time <= 16


def _hydration_boost(s: GameState) -> bool:
    return s.thirst < 30 and s.health > 70


def _social_energy(s: GameState) -> bool:
    return s.current_room == Room.BEDROOM and s.happiness < 50 and s.energy > 30


def _midnight_snack(s: GameState) -> bool:
    # The late window, hunger and the kitchen must all hold, not just the hour.
    late = s.time >= 22 or s.time <= 2
    return late and s.hunger > 50 and s.current_room == Room.KITCHEN


def _morning_stretch(s: GameState) -> bool:
    return 6 <= s.time <= 9 and s.current_room == Room.GYM and s.energy < 60


SITUATIONS: tuple[SpecialSituation, ...] = (
    SpecialSituation(
        id="perfect_morning",
        display_name="🌅 Manhã Perfeita",
        description="Você acordou naturalmente e se sente revigorado!",
        condition=_perfect_morning,
        effects={Need.HAPPINESS: 30, Need.ENERGY: 20, Need.HEALTH: 15},
        chance=SITUATION_CHANCE,
    ),
    SpecialSituation(
        id="workout_motivation",
        display_name="💪 Motivação Total",
        description="Você está se sentindo super motivado para se exercitar!",
        condition=_workout_motivation,
        effects={Need.HAPPINESS: 25, Need.ENERGY: 15, Need.HEALTH: 20},
        chance=SITUATION_CHANCE,
    ),
    SpecialSituation(
        id="cooking_inspiration",
        display_name="👨‍🍳 Inspiração Culinária",
        description="Você teve uma ideia incrível para uma receita deliciosa!",
        condition=_cooking_inspiration,
        effects={Need.HAPPINESS: 35, Need.HUNGER: -30, Need.ENERGY: 10},
        chance=SITUATION_CHANCE,
    ),
    SpecialSituation(
        id="relaxing_bath",
        display_name="🛁 Banho Relaxante",
        description="Este banho está sendo extremamente relaxante e revigorante!",
        condition=_relaxing_bath,
        effects={Need.CLEANLINESS: 40, Need.HAPPINESS: 30, Need.ENERGY: 25},
        chance=SITUATION_CHANCE,
    ),
    SpecialSituation(
        id="gaming_flow",
        display_name="🎮 Estado de Flow",
        description="Você entrou em um estado de flow incrível jogando!",
        condition=_gaming_flow,
        effects={Need.HAPPINESS: 40, Need.ENERGY: -5, Need.SLEEPINESS: -10},
        chance=SITUATION_CHANCE,
    ),
    SpecialSituation(
        id="power_nap",
        display_name="😴 Cochilo Perfeito",
        description="Um cochilo rápido que te deixou completamente renovado!",
        condition=_power_nap,
        effects={Need.ENERGY: 30, Need.SLEEPINESS: -25, Need.HAPPINESS: 15},
        chance=SITUATION_CHANCE,
    ),
    SpecialSituation(
        id="hydration_boost",
        display_name="💧 Hidratação Perfeita",
        description="Você se sente perfeitamente hidratado e energizado!",
        condition=_hydration_boost,
        effects={Need.THIRST: -40, Need.ENERGY: 20, Need.HEALTH: 15},
        chance=SITUATION_CHANCE,
    ),
    SpecialSituation(
        id="social_energy",
        display_name="📱 Energia Social",
        description="Uma conversa online te deixou super animado!",
        condition=_social_energy,
        effects={Need.HAPPINESS: 35, Need.ENERGY: 10, Need.SLEEPINESS: -5},
        chance=SITUATION_CHANCE,
    ),
    SpecialSituation(
        id="midnight_snack",
        display_name="🌙 Lanche da Madrugada",
        description="Um lanche noturno que satisfez perfeitamente sua fome!",
        condition=_midnight_snack,
        effects={Need.HUNGER: -40, Need.HAPPINESS: 25, Need.SLEEPINESS: 15},
        chance=SITUATION_CHANCE,
    ),
    SpecialSituation(
        id="morning_stretch",
        display_name="🧘‍♂️ Alongamento Matinal",
        description="Um alongamento matinal que despertou todo seu corpo!",
        condition=_morning_stretch,
        effects={Need.ENERGY: 25, Need.HEALTH: 20, Need.HAPPINESS: 20, Need.SLEEPINESS: -15},
        chance=SITUATION_CHANCE,
    ),
)
