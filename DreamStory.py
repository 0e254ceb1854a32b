from __future__ import annotations

"""Thin Tk based UI for the Dream Story mini-game."""

import logging
import tkinter as tk
from pathlib import Path

from catalog import cooldown_remaining, is_usable
from config import AppConfig, load_config, save_config
from game import GameSession
from state import GameState, Need, Room
from utils import format_time, need_level

CONFIG_PATH = Path.home() / ".dreamstory.json"
MIN_SPEED = 0.5
MAX_SPEED = 3.0
LEVEL_COLOURS = {"good": "#059669", "fair": "#ca8a04", "poor": "#dc2626"}

logger = logging.getLogger(__name__)


class DreamStoryApp:
    """Main application window.  Renders state and forwards intents."""

    def __init__(self, root: tk.Tk, config: AppConfig | None = None) -> None:
        self.root = root
        self.config = config or AppConfig()
        self.session = GameSession(root, config=self.config)

        self.clock = tk.Label(root, font=("TkDefaultFont", 14, "bold"))
        self.clock.pack(pady=4)

        stats = tk.Frame(root)
        stats.pack(fill=tk.X, padx=8)
        self.need_labels: dict[Need, tk.Label] = {}
        for need in Need:
            label = tk.Label(stats, anchor="w")
            label.pack(fill=tk.X)
            self.need_labels[need] = label

        rooms = tk.Frame(root)
        rooms.pack(pady=4)
        for room in Room:
            tk.Button(
                rooms, text=room.value.title(),
                command=lambda r=room: self.session.set_room(r),
            ).pack(side=tk.LEFT)

        self.objects = tk.Frame(root)
        self.objects.pack(fill=tk.X, padx=8)

        controls = tk.Frame(root)
        controls.pack(pady=4)
        self.play_button = tk.Button(controls, command=self.session.toggle_playing)
        self.play_button.pack(side=tk.LEFT)
        tk.Button(controls, text="Reset", command=self.session.reset).pack(side=tk.LEFT)
        self.speed = tk.Scale(
            controls, from_=MIN_SPEED, to=MAX_SPEED, resolution=0.5,
            orient=tk.HORIZONTAL, label="Speed", command=self.on_speed,
        )
        self.speed.set(self.session.state.game_speed)
        self.speed.pack(side=tk.LEFT)
        self.mute_button = tk.Button(controls, command=self.on_mute)
        self.mute_button.pack(side=tk.LEFT)
        self.volume = tk.Scale(
            controls, from_=0.0, to=1.0, resolution=0.05,
            orient=tk.HORIZONTAL, label="Volume", command=self.on_volume,
        )
        self.volume.set(self.session.soundtrack.volume)
        self.volume.pack(side=tk.LEFT)

        self.history = tk.Text(root, height=12, width=60, state=tk.DISABLED)
        self.history.pack(padx=8, pady=4)

        self.session.subscribe(self.render)
        self.render(self.session.state)

    # UI callbacks ---------------------------------------------------------
    def on_speed(self, value: str) -> None:
        speed = min(MAX_SPEED, max(MIN_SPEED, float(value)))
        if speed != self.session.state.game_speed:
            self.session.set_speed(speed)

    def on_volume(self, value: str) -> None:
        self.session.set_volume(float(value))

    def on_mute(self) -> None:
        self.session.toggle_mute()
        self._render_mute()

    # Rendering -----------------------------------------------------------
    def render(self, state: GameState) -> None:
        self.clock.config(text=f"Day {state.day}  {format_time(state.time)}")
        for need, label in self.need_labels.items():
            value = state.needs[need]
            label.config(
                text=f"{need.name.title():<12} {value:5.1f}",
                fg=LEVEL_COLOURS[need_level(need, value)],
            )

        for child in self.objects.winfo_children():
            child.destroy()
        for obj in self.session.objects_here():
            text = obj.display_name
            wait = cooldown_remaining(obj, state)
            if wait > 0:
                text += f" ({wait:.1f}h)"
            tk.Button(
                self.objects, text=text,
                state=tk.NORMAL if is_usable(obj, state) else tk.DISABLED,
                command=lambda oid=obj.id: self.session.interact(oid),
            ).pack(side=tk.LEFT)

        self.play_button.config(text="Pause" if state.is_playing else "Play")
        if float(self.speed.get()) != state.game_speed:
            self.speed.set(state.game_speed)
        self._render_mute()

        self.history.config(state=tk.NORMAL)
        self.history.delete("1.0", tk.END)
        self.history.insert(tk.END, "Recent actions:\n")
        for entry in state.last_actions:
            self.history.insert(tk.END, f"  {entry}\n")
        self.history.insert(tk.END, "\nSpecial events:\n")
        for entry in state.special_events:
            self.history.insert(tk.END, f"  {entry}\n")
        self.history.config(state=tk.DISABLED)

    def _render_mute(self) -> None:
        self.mute_button.config(text="Unmute" if self.session.soundtrack.muted else "Mute")

    # Shutdown ------------------------------------------------------------
    def close(self, path: str | Path = CONFIG_PATH) -> None:
        self.session.scheduler.stop()
        self.config.volume = self.session.soundtrack.volume
        self.config.muted = self.session.soundtrack.muted
        try:
            save_config(self.config, path)
        except OSError as exc:
            logger.error("Failed to save settings to %s: %s", path, exc)
        finally:
            self.root.destroy()


def main() -> None:
    config = load_config(CONFIG_PATH)
    logging.basicConfig(level=config.log_level)
    root = tk.Tk()
    root.title("Dream Story")
    app = DreamStoryApp(root, config)
    root.protocol("WM_DELETE_WINDOW", app.close)
    root.mainloop()


if __name__ == "__main__":
    main()
