"""Small Tk widgets used by the countdown screen."""
from __future__ import annotations

import logging
from typing import Callable, Optional

import tkinter as tk

from ..config.theme import get_current_colors

LOGGER = logging.getLogger(__name__)

FONT_TIMER = ("DejaVu Sans", 48, "bold")
FONT_BUTTON = ("DejaVu Sans", 28, "bold")
FONT_TEXT = ("DejaVu Sans", 14)
FONT_SM = ("DejaVu Sans", 12)

_FADE_STEPS = 8


def _hex_to_rgb(value: str) -> tuple[int, int, int]:
    value = value.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def blend(start: str, end: str, progress: float) -> str:
    """Linear mix of two ``#RRGGBB`` colours."""

    progress = max(0.0, min(1.0, progress))
    a = _hex_to_rgb(start)
    b = _hex_to_rgb(end)
    mixed = (round(x + (y - x) * progress) for x, y in zip(a, b))
    return "#" + "".join(f"{c:02X}" for c in mixed)


class Toast:
    """Minimal transient notification label."""

    def __init__(self, parent: tk.Misc, *, duration_ms: int = 3500) -> None:
        self.parent = parent
        self.duration_ms = duration_ms
        palette = get_current_colors()
        self._label = tk.Label(
            parent,
            text="",
            bg=palette["COL_TEXT"],
            fg=palette["COL_BG"],
            font=FONT_SM,
            bd=0,
            relief="flat",
            padx=16,
            pady=8,
        )
        self._after_id: Optional[str] = None

    @property
    def text(self) -> str:
        return str(self._label.cget("text"))

    def is_visible(self) -> bool:
        return bool(self._label.winfo_manager())

    def show(self, text: str, duration_ms: Optional[int] = None) -> None:
        LOGGER.debug("toast: %s", text)
        self._label.configure(text=str(text))
        self._label.place(relx=0.5, rely=0.95, anchor="s")
        self._label.lift()

        if self._after_id:
            try:
                self.parent.after_cancel(self._after_id)
            except tk.TclError:
                pass
        self._after_id = self.parent.after(duration_ms or self.duration_ms, self.hide)

    def hide(self) -> None:
        try:
            self._label.place_forget()
        except tk.TclError:
            pass
        self._after_id = None


class FadeButton(tk.Button):
    """Button that fades its colours in when shown and out when hidden.

    Buttons sharing a parent occupy the same grid cell, so showing one while
    hiding the other cross-fades them in place. Hidden buttons are disabled
    straight away; the fade is cosmetic only.
    """

    def __init__(
        self,
        parent: tk.Misc,
        *,
        text: str,
        command: Callable[[], None],
        animation_ms: int = 200,
        **kwargs,
    ) -> None:
        palette = get_current_colors()
        self._bg_on = palette["COL_ACCENT"]
        self._fg_on = palette["COL_ACCENT_TEXT"]
        self._bg_off = palette["COL_CARD"]
        super().__init__(
            parent,
            text=text,
            command=command,
            bg=self._bg_on,
            fg=self._fg_on,
            activebackground=self._bg_on,
            activeforeground=self._fg_on,
            disabledforeground=self._bg_off,
            font=FONT_BUTTON,
            relief="flat",
            bd=0,
            padx=24,
            pady=8,
            cursor="hand2",
            **kwargs,
        )
        self.animation_ms = max(0, int(animation_ms))
        self._fade_job: Optional[str] = None
        self.visible = False

    def appear(self) -> None:
        self.visible = True
        self.configure(state="normal")
        self.grid(row=0, column=0)
        self.lift()
        self._fade(showing=True)

    def vanish(self) -> None:
        self.visible = False
        self.configure(state="disabled")
        self._fade(showing=False)

    def destroy(self) -> None:
        self._cancel_fade()
        super().destroy()

    # ------------------------------------------------------------------
    def _cancel_fade(self) -> None:
        if self._fade_job is None:
            return
        try:
            self.after_cancel(self._fade_job)
        except tk.TclError:
            pass
        self._fade_job = None

    def _fade(self, *, showing: bool) -> None:
        self._cancel_fade()
        if self.animation_ms <= 0:
            self._apply_step(1.0 if showing else 0.0)
            if not showing:
                self.grid_remove()
            return

        delay = max(1, self.animation_ms // _FADE_STEPS)

        def step(index: int) -> None:
            self._fade_job = None
            progress = index / _FADE_STEPS
            self._apply_step(progress if showing else 1.0 - progress)
            if index < _FADE_STEPS:
                self._fade_job = self.after(delay, lambda: step(index + 1))
            elif not showing:
                self.grid_remove()

        step(0)

    def _apply_step(self, level: float) -> None:
        try:
            self.configure(
                bg=blend(self._bg_off, self._bg_on, level),
                fg=blend(self._bg_off, self._fg_on, level),
            )
        except tk.TclError:
            LOGGER.debug("Fade step failed", exc_info=True)
