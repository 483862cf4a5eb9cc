"""Top level package for the countdown high-score timer."""

from importlib import metadata as _metadata

try:  # pragma: no cover - metadata only available when installed
    __version__ = _metadata.version("countdown-timer")
except _metadata.PackageNotFoundError:  # pragma: no cover - editable installs
    __version__ = "0.0.0"
