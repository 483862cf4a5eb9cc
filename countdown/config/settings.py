"""YAML backed configuration for the countdown window."""
from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "countdown" / "config.yaml"

THEMES = ("light", "dark")


def config_path() -> Path:
    """Resolve the config file, honouring ``COUNTDOWN_CONFIG``."""

    override = (os.environ.get("COUNTDOWN_CONFIG") or "").strip()
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def _coerce_int(value: Any, default: int, *, low: int, high: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return max(low, min(high, number))


@dataclass
class UISettings:
    """Window and presentation parameters."""

    theme: str = "light"
    width: int = 360
    height: int = 640
    fullscreen: bool = False
    toast_ms: int = 3500
    animation_ms: int = 200

    def __post_init__(self) -> None:
        theme = str(self.theme or "light").strip().lower()
        self.theme = theme if theme in THEMES else "light"
        self.width = _coerce_int(self.width, 360, low=240, high=3840)
        self.height = _coerce_int(self.height, 640, low=320, high=2160)
        if isinstance(self.fullscreen, str):
            self.fullscreen = self.fullscreen.strip().lower() in {"1", "true", "yes", "on"}
        else:
            self.fullscreen = bool(self.fullscreen)
        self.toast_ms = _coerce_int(self.toast_ms, 3500, low=500, high=30000)
        self.animation_ms = _coerce_int(self.animation_ms, 200, low=0, high=2000)


@dataclass
class Settings:
    """Top level application settings."""

    ui: UISettings = field(default_factory=UISettings)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    # ------------------------------------------------------------------
    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Settings":
        data = payload.get("ui") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            data = {}
        names = {f for f in UISettings.__dataclass_fields__}
        filtered = {k: v for k, v in data.items() if k in names}
        return cls(ui=UISettings(**filtered))

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        """Read settings from *path*; any problem yields the defaults."""

        path = path or config_path()
        try:
            with path.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        except FileNotFoundError:
            log.info("No config at %s; writing defaults", path)
            settings = cls()
            try:
                settings.save(path)
            except OSError:
                log.warning("Could not write default config to %s", path, exc_info=True)
            return settings
        except (OSError, yaml.YAMLError):
            log.warning("Could not read %s; using defaults", path, exc_info=True)
            return cls()
        if not isinstance(data, dict):
            log.warning("Config %s is not a mapping; using defaults", path)
            return cls()
        settings = cls.from_dict(data)
        log.info("Loaded settings from %s (theme=%s)", path, settings.ui.theme)
        return settings

    def save(self, path: Optional[Path] = None) -> None:
        path = path or config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(".tmp")
        with tmp_path.open("w", encoding="utf-8") as handle:
            yaml.safe_dump(self.to_dict(), handle, sort_keys=False, allow_unicode=True)
        tmp_path.replace(path)
        log.info("Settings saved to %s", path)
