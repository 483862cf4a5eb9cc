"""Main Tk application controller for the countdown timer."""
from __future__ import annotations

import logging
import tkinter as tk
from typing import Optional

from ..config.settings import Settings
from ..config.theme import apply_theme
from .timer_screen import TimerScreen
from .windowing import apply_window_prefs

log = logging.getLogger(__name__)


class CountdownApp:
    """Creates the root window and hosts the single timer screen."""

    def __init__(self, root: Optional[tk.Tk] = None, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings.load()
        self.root = root or tk.Tk()
        self.root.title("Countdown")
        palette = apply_theme(self.root, self.settings.ui.theme)
        apply_window_prefs(self.root, self.settings.ui)

        outer = tk.Frame(
            self.root,
            bg=palette["COL_BG"],
            highlightbackground=palette["COL_BORDER"],
            highlightthickness=2,
        )
        outer.pack(fill="both", expand=True, padx=16, pady=16)
        self.screen: Optional[TimerScreen] = TimerScreen(outer, self.settings.ui)
        self.screen.pack(fill="both", expand=True)

        self.root.protocol("WM_DELETE_WINDOW", self.close)
        log.info("Countdown window ready (theme=%s)", self.settings.ui.theme)

    def close(self) -> None:
        if self.screen is not None:
            self.screen.destroy()
            self.screen = None
        try:
            self.root.destroy()
        except tk.TclError:
            log.debug("Root already destroyed", exc_info=True)

    def run(self) -> None:
        self.root.mainloop()
