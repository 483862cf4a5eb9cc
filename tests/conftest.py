import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class FakeRoot:
    """Stand-in for ``tk.Misc`` scheduling with a manual millisecond clock."""

    def __init__(self):
        self.now = 0
        self._jobs = {}
        self._counter = 0
        self.cancelled = []

    def after(self, delay, func):
        self._counter += 1
        job = f"after#{self._counter}"
        self._jobs[job] = (self.now + int(delay), func)
        return job

    def after_cancel(self, job):
        self.cancelled.append(job)
        self._jobs.pop(job, None)

    def pending(self):
        return len(self._jobs)

    def advance(self, ms):
        """Run every job due within the next *ms* milliseconds, in order."""
        deadline = self.now + ms
        while True:
            due = [(when, job) for job, (when, _) in self._jobs.items() if when <= deadline]
            if not due:
                break
            when, job = min(due)
            _, func = self._jobs.pop(job)
            self.now = when
            func()
        self.now = deadline

    def callbacks(self):
        return [func for _, func in self._jobs.values()]


@pytest.fixture
def fake_root():
    return FakeRoot()
