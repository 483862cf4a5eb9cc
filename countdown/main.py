#!/usr/bin/env python3
"""Entry point for the countdown Tk interface."""
from __future__ import annotations

import sys
import tkinter as tk

from countdown.services.logging import setup_logging


def main() -> int:
    logger = setup_logging()
    try:
        from countdown.ui.app import CountdownApp

        app = CountdownApp()
    except tk.TclError:
        logger.exception("Tk is not available (no display?)")
        return 1
    logger.info("Starting countdown UI")
    app.run()
    logger.info("Countdown UI closed")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
