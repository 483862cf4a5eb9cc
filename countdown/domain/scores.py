"""In-memory record of the time left each time the countdown was stopped."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

log = logging.getLogger(__name__)

BASELINE_MESSAGE = "New baseline established!"
HIGH_SCORE_MESSAGE = "Wow, new high score!"


class ScoreKind(str, Enum):
    BASELINE = "baseline"
    HIGH_SCORE = "high_score"
    NONE = "none"


@dataclass(frozen=True)
class ScoreResult:
    kind: ScoreKind
    score: float
    message: Optional[str] = None

    @property
    def recorded(self) -> bool:
        return self.kind != ScoreKind.NONE


class HighScoreSet:
    """Scores recorded for the lifetime of one screen.

    Values are only ever added, never removed. A score is added when it is
    the first one (the baseline) or when it is strictly greater than the
    best recorded so far.
    """

    def __init__(self) -> None:
        self._scores: set[float] = set()

    def __len__(self) -> int:
        return len(self._scores)

    def __iter__(self) -> Iterator[float]:
        return iter(self._scores)

    def __contains__(self, value: object) -> bool:
        return value in self._scores

    def best(self) -> Optional[float]:
        return max(self._scores) if self._scores else None

    def ranked(self, limit: int = 3) -> list[float]:
        return sorted(self._scores, reverse=True)[: max(0, int(limit))]

    def check(self, score: float) -> ScoreResult:
        score = float(score)
        if not self._scores:
            self._scores.add(score)
            log.info("Baseline score %.2f", score)
            return ScoreResult(ScoreKind.BASELINE, score, BASELINE_MESSAGE)

        best = max(self._scores)
        if score > best:
            self._scores.add(score)
            log.info("New high score %.2f (previous %.2f)", score, best)
            return ScoreResult(ScoreKind.HIGH_SCORE, score, HIGH_SCORE_MESSAGE)

        log.debug("Score %.2f does not beat %.2f", score, best)
        return ScoreResult(ScoreKind.NONE, score)
