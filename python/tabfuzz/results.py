"""Result records returned by the scoring and batch APIs."""

from dataclasses import dataclass
from typing import Optional, Union

from tabfuzz.enums import RowStatus

Score = Union[float, int]

# Values written into a failed row
SENTINEL_SCORE = -1
SENTINEL_MATCH = ""
SENTINEL_INDEX = -1


@dataclass(frozen=True)
class ScoreResult:
    """Outcome of scoring one row-aligned pair.

    Attributes:
        score: Similarity (0-100) or distance, or ``SENTINEL_SCORE`` on failure.
        status: ``RowStatus.OK`` or the reason the row failed.
        message: Error description for failed rows.
    """

    score: Score
    status: RowStatus = RowStatus.OK
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is RowStatus.OK

    @classmethod
    def failed(cls, status: RowStatus, message: str) -> "ScoreResult":
        return cls(SENTINEL_SCORE, status, message)


@dataclass(frozen=True)
class MatchResult:
    """Best reference entry found for one master string.

    Attributes:
        text: The best matching reference string (``""`` on failure).
        score: Its score under the chosen method (``-1`` on failure).
        id: 0-based position of the match in the reference list (``-1`` on failure).
        status: ``RowStatus.OK`` or the reason the row failed.
        message: Error description for failed rows.
    """

    text: str
    score: Score
    id: int
    status: RowStatus = RowStatus.OK
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is RowStatus.OK

    @classmethod
    def failed(cls, status: RowStatus, message: str) -> "MatchResult":
        return cls(SENTINEL_MATCH, SENTINEL_SCORE, SENTINEL_INDEX, status, message)


__all__ = [
    "MatchResult",
    "SENTINEL_INDEX",
    "SENTINEL_MATCH",
    "SENTINEL_SCORE",
    "Score",
    "ScoreResult",
]
