"""Sixty second countdown driven by the Tk ``after`` scheduler."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol

__all__ = [
    "START_SECONDS",
    "TICK_MS",
    "CountdownTimer",
    "TimerEvent",
    "TimerState",
    "TimerStateError",
    "format_seconds",
]

log = logging.getLogger(__name__)

START_SECONDS = 60.0
TICK_MS = 100

# Remaining time is kept in tenths so every tick removes exactly 0.1 s.
_START_TENTHS = int(round(START_SECONDS * 10))
_TICK_TENTHS = 1


class Scheduler(Protocol):
    """The subset of :class:`tkinter.Misc` used to drive the countdown."""

    def after(self, ms: int, func: Callable[[], None]) -> str: ...

    def after_cancel(self, id: str) -> None: ...


class TimerStateError(RuntimeError):
    """Raised when Begin/End is requested in the wrong state."""


class TimerState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"


@dataclass(slots=True)
class TimerEvent:
    state: TimerState
    remaining: float
    reason: str


def format_seconds(seconds: float) -> str:
    """Render the remaining time the way the screen shows it."""

    return f"{max(0.0, float(seconds)):.2f}"


class CountdownTimer:
    """Begin/End countdown that resets itself when it runs out.

    Only one periodic job is ever scheduled. ``end`` cancels it before the
    remaining value is read, and a tick that still fires with an outdated
    job id is ignored.
    """

    def __init__(self, root: Scheduler) -> None:
        self._root = root
        self._state = TimerState.IDLE
        self._tenths = _START_TENTHS
        self._tick_job: Optional[str] = None
        self._listeners: list[Callable[[TimerEvent], None]] = []

    # ------------------------------------------------------------------
    def add_listener(self, callback: Callable[[TimerEvent], None], *, fire: bool = True) -> None:
        if callback in self._listeners:
            return
        self._listeners.append(callback)
        if fire:
            self._deliver(callback, TimerEvent(self._state, self.remaining, "reset"))

    def remove_listener(self, callback: Callable[[TimerEvent], None]) -> None:
        try:
            self._listeners.remove(callback)
        except ValueError:
            pass

    # ------------------------------------------------------------------
    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def remaining(self) -> float:
        return self._tenths / 10

    def is_running(self) -> bool:
        return self._state == TimerState.RUNNING

    def can_begin(self) -> bool:
        return self._state == TimerState.IDLE

    def can_end(self) -> bool:
        return self._state == TimerState.RUNNING

    # ------------------------------------------------------------------
    def begin(self) -> None:
        if not self.can_begin():
            raise TimerStateError("countdown already running")
        self._tenths = _START_TENTHS
        self._state = TimerState.RUNNING
        log.info("Countdown started at %s", format_seconds(self.remaining))
        self._notify("begin")
        self._schedule_tick()

    def end(self) -> float:
        """Stop the countdown and return the remaining time as the score."""

        if not self.can_end():
            raise TimerStateError("countdown is not running")
        self._cancel_tick()
        score = self.remaining
        log.info("Countdown stopped with %s remaining", format_seconds(score))
        self._reset()
        self._notify("end")
        return score

    def destroy(self) -> None:
        self._cancel_tick()
        self._listeners.clear()
        self._reset()

    # ------------------------------------------------------------------
    def _reset(self) -> None:
        self._state = TimerState.IDLE
        self._tenths = _START_TENTHS

    def _schedule_tick(self) -> None:
        self._cancel_tick()
        job: Optional[str] = None

        def fire() -> None:
            self._tick(job)

        job = self._root.after(TICK_MS, fire)
        self._tick_job = job

    def _cancel_tick(self) -> None:
        if self._tick_job is None:
            return
        job, self._tick_job = self._tick_job, None
        try:
            self._root.after_cancel(job)
        except Exception:
            log.debug("after_cancel failed for %s", job, exc_info=True)

    def _tick(self, job: Optional[str]) -> None:
        if job is None or job != self._tick_job or self._state != TimerState.RUNNING:
            log.debug("Ignoring stale tick %s", job)
            return
        self._tick_job = None
        if self._tenths <= 0:
            log.info("Countdown ran out, resetting")
            self._reset()
            self._notify("expired")
            return
        self._tenths = max(0, self._tenths - _TICK_TENTHS)
        log.debug("tick remaining=%s", format_seconds(self.remaining))
        self._notify("tick")
        self._schedule_tick()

    def _notify(self, reason: str) -> None:
        event = TimerEvent(state=self._state, remaining=self.remaining, reason=reason)
        for callback in list(self._listeners):
            self._deliver(callback, event)

    def _deliver(self, callback: Callable[[TimerEvent], None], event: TimerEvent) -> None:
        try:
            callback(event)
        except Exception:
            log.exception("Timer listener %r failed", callback)
