from __future__ import annotations

"""User preferences for the Dream Story front end."""

from dataclasses import dataclass, asdict
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class AppConfig:
    """Settings that outlive a session.  Game progress is never stored here."""

    volume: float = 0.3
    muted: bool = False
    seed: int | None = None
    log_level: str = "INFO"


def _is_log_level(level) -> bool:
    if isinstance(level, int):
        return True
    return isinstance(level, str) and isinstance(logging.getLevelName(level), int)


def load_config(path: str | Path) -> AppConfig:
    """Load configuration from *path*.

    Returns a default :class:`AppConfig` if the file is missing or unreadable.
    """

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        cfg = AppConfig(**data)
    except FileNotFoundError:
        return AppConfig()
    except (OSError, ValueError, TypeError) as exc:
        logger.warning("Ignoring invalid config file %s: %s", path, exc)
        return AppConfig()

    if not _is_log_level(cfg.log_level):
        logger.warning("Unknown log level %r in %s, using INFO", cfg.log_level, path)
        cfg.log_level = "INFO"
    return cfg


def save_config(cfg: AppConfig, path: str | Path) -> None:
    """Persist *cfg* to *path* as JSON."""

    with open(path, "w", encoding="utf-8") as f:
        json.dump(asdict(cfg), f, indent=2)
