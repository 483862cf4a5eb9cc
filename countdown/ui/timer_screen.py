"""The single countdown screen: time display, Begin/End and best scores."""
from __future__ import annotations

import logging
from typing import Optional

import tkinter as tk

from ..config.settings import UISettings
from ..config.theme import get_current_colors
from ..core.timer import CountdownTimer, TimerEvent, format_seconds
from ..domain.scores import HighScoreSet, ScoreResult
from .widgets import FONT_TEXT, FONT_TIMER, FadeButton, Toast

log = logging.getLogger(__name__)

BEST_ROWS = 3


def best_rows(scores: HighScoreSet, limit: int = BEST_ROWS) -> list[str]:
    ranked = scores.ranked(limit)
    if not ranked:
        return ["No scores yet"]
    return [f"{index}. {format_seconds(value)}" for index, value in enumerate(ranked, start=1)]


class TimerScreen(tk.Frame):
    """Owns the countdown and the score set for as long as it lives."""

    def __init__(self, parent: tk.Misc, settings: Optional[UISettings] = None) -> None:
        self.settings = settings or UISettings()
        palette = get_current_colors()
        super().__init__(
            parent,
            bg=palette["COL_CARD"],
            highlightbackground=palette["COL_BORDER"],
            highlightthickness=2,
            padx=16,
            pady=16,
        )
        self.timer = CountdownTimer(self)
        self.scores = HighScoreSet()

        body = tk.Frame(self, bg=palette["COL_CARD"])
        body.place(relx=0.5, rely=0.5, anchor="center")

        self.time_var = tk.StringVar(master=self, value=format_seconds(self.timer.remaining))
        self.time_label = tk.Label(
            body,
            textvariable=self.time_var,
            bg=palette["COL_CARD"],
            fg=palette["COL_TEXT"],
            font=FONT_TIMER,
        )
        self.time_label.pack(pady=(0, 16))

        controls = tk.Frame(body, bg=palette["COL_CARD"])
        controls.pack()
        self.begin_button = FadeButton(
            controls,
            text="Begin",
            command=self.on_begin,
            animation_ms=self.settings.animation_ms,
            takefocus=0,
        )
        self.end_button = FadeButton(
            controls,
            text="End",
            command=self.on_end,
            animation_ms=self.settings.animation_ms,
            takefocus=0,
        )

        self.best_var = tk.StringVar(master=self, value="")
        tk.Label(
            body,
            textvariable=self.best_var,
            bg=palette["COL_CARD"],
            fg=palette["COL_MUTED"],
            font=FONT_TEXT,
            justify="center",
        ).pack(pady=(24, 0))

        self.toast = Toast(self, duration_ms=self.settings.toast_ms)

        self.timer.add_listener(self._on_timer_event)
        self._refresh_best()
        self.bind_all("<space>", self._on_space, add="+")

    # ------------------------------------------------------------------
    def on_begin(self) -> None:
        if not self.timer.can_begin():
            log.debug("Begin ignored while running")
            return
        self.timer.begin()

    def on_end(self) -> None:
        if not self.timer.can_end():
            log.debug("End ignored while idle")
            return
        score = self.timer.end()
        result = self.scores.check(score)
        self._announce(result)
        self._refresh_best()

    def destroy(self) -> None:
        log.info("Tearing down timer screen (%d scores discarded)", len(self.scores))
        self.timer.destroy()
        try:
            self.unbind_all("<space>")
        except tk.TclError:
            pass
        super().destroy()

    # ------------------------------------------------------------------
    def _on_space(self, event: tk.Event) -> Optional[str]:
        # A focused button already invokes itself on Space.
        if isinstance(event.widget, tk.Button):
            return None
        if self.timer.is_running():
            self.on_end()
        else:
            self.on_begin()
        return "break"

    def _on_timer_event(self, event: TimerEvent) -> None:
        self.time_var.set(format_seconds(event.remaining))
        running = self.timer.is_running()
        if running and self.begin_button.visible:
            self.begin_button.vanish()
            self.end_button.appear()
        elif not running and not self.begin_button.visible:
            self.end_button.vanish()
            self.begin_button.appear()

    def _announce(self, result: ScoreResult) -> None:
        if result.message:
            self.toast.show(result.message)

    def _refresh_best(self) -> None:
        self.best_var.set("\n".join(best_rows(self.scores)))
