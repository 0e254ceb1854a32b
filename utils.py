"""Display helpers for the Dream Story front end."""

from state import Need

# For these needs a high value is bad.
LOWER_IS_BETTER = frozenset({Need.HUNGER, Need.THIRST, Need.SLEEPINESS})


def format_time(time: float) -> str:
    """Format an hour-of-day value such as ``13.5`` as ``"13:30"``."""
    hours = int(time)
    minutes = int((time % 1) * 60)
    return f"{hours:02d}:{minutes:02d}"


def need_level(need: Need, value: float) -> str:
    """Classify *value* as ``"good"``, ``"fair"`` or ``"poor"`` for *need*."""
    if need in LOWER_IS_BETTER:
        if value <= 30:
            return "good"
        if value <= 60:
            return "fair"
        return "poor"
    if value >= 70:
        return "good"
    if value >= 40:
        return "fair"
    return "poor"
