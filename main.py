"""Legacy entry point for running the countdown Tk application from a checkout."""

import sys

from countdown.main import main


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
