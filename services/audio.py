"""Background music settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Soundtrack:
    """Volume and mute state for the soundtrack.

    The simulation only stores these values; playing the music is up to the
    front end.
    """

    volume: float = 0.3
    muted: bool = False

    def set_volume(self, value: float) -> None:
        self.volume = value

    def toggle_mute(self) -> None:
        self.muted = not self.muted

    @property
    def effective_volume(self) -> float:
        return 0.0 if self.muted else self.volume
