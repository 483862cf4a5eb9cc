"""Light and dark palettes for the countdown screen."""
from __future__ import annotations

from copy import deepcopy
import tkinter as tk

_THEMES: dict[str, dict[str, str]] = {
    "light": {
        "COL_BG": "#FFFFFF",
        "COL_CARD": "#F4F1FA",
        "COL_BORDER": "#000000",
        "COL_TEXT": "#1C1B1F",
        "COL_MUTED": "#6B6876",
        "COL_ACCENT": "#6200EE",
        "COL_ACCENT_TEXT": "#FFFFFF",
    },
    "dark": {
        "COL_BG": "#121212",
        "COL_CARD": "#1E1E1E",
        "COL_BORDER": "#000000",
        "COL_TEXT": "#E6E1E5",
        "COL_MUTED": "#9A96A3",
        "COL_ACCENT": "#BB86FC",
        "COL_ACCENT_TEXT": "#000000",
    },
}

_current_theme = "light"


def list_themes() -> list[str]:
    """Return the available theme identifiers."""

    return sorted(_THEMES)


def get_current_colors() -> dict[str, str]:
    """Return a copy of the currently active palette."""

    return deepcopy(_THEMES[_current_theme])


def set_theme(name: str) -> str:
    """Select *name* as current theme, returning the resolved value."""

    global _current_theme
    if name not in _THEMES:
        name = "light"
    _current_theme = name
    return name


def apply_theme(root: tk.Misc, name: str = "light") -> dict[str, str]:
    """Select *name* and paint the root background with it."""

    set_theme(name)
    palette = get_current_colors()
    try:
        root.configure(bg=palette["COL_BG"])
    except tk.TclError:
        pass
    return palette
