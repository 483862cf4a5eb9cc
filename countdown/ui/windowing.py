"""Window helpers: phone sized by default, optional fullscreen."""
from __future__ import annotations

import logging
import sys
import tkinter as tk

from ..config.settings import UISettings

log = logging.getLogger(__name__)


def _set_attribute(window: tk.Misc, name: str, value: object) -> bool:
    try:
        window.attributes(name, value)
        return True
    except (tk.TclError, AttributeError) as exc:  # pragma: no cover - depends on WM
        log.debug("Attribute %s not supported: %s", name, exc)
        return False


def _maybe_zoom(window: tk.Misc) -> bool:
    try:
        window.state("zoomed")
        return True
    except (tk.TclError, AttributeError) as exc:
        log.debug("Window manager does not support zoomed state: %s", exc)
        return False


def leave_fullscreen(root: tk.Misc) -> str:
    """Drop the fullscreen attribute so the window manager can be reached."""

    log.info("Leaving fullscreen")
    _set_attribute(root, "-fullscreen", False)
    return "break"


def apply_window_prefs(root: tk.Tk, settings: UISettings) -> None:
    """Size and position *root* according to *settings*."""

    log.info(
        "Applying window prefs platform=%s size=%sx%s fullscreen=%s",
        sys.platform,
        settings.width,
        settings.height,
        settings.fullscreen,
    )

    if settings.fullscreen:
        width = root.winfo_screenwidth()
        height = root.winfo_screenheight()
        root.geometry(f"{width}x{height}+0+0")
        _set_attribute(root, "-fullscreen", True)
        if sys.platform.startswith("win"):
            _maybe_zoom(root)
        root.bind("<Escape>", lambda event: leave_fullscreen(root))
        return

    width = min(settings.width, root.winfo_screenwidth())
    height = min(settings.height, root.winfo_screenheight())
    x = max(0, (root.winfo_screenwidth() - width) // 2)
    y = max(0, (root.winfo_screenheight() - height) // 2)
    root.geometry(f"{width}x{height}+{x}+{y}")
    root.minsize(240, 320)
