"""Command/result protocol between a tabular host and the scoring engine.

A host describes a call with a short argument list, the same convention the
engine has always used for host commands::

    ["pairwise", "<method>", "nocase", "pw=0.15"]
    ["best_match", "<method>"]        # "match" is accepted as well

and supplies its string columns alongside. Argument problems are reported
before any row is touched; row problems come back as per-row statuses.

Example:
    >>> from tabfuzz.protocol import call
    >>> response = call(["pairwise", "levenshtein"], left=["kitten"], right=["sitting"])
    >>> response.scores
    [3]
    >>> response = call(["match", "token_set"], master=["Gogle"], reference=["Google LLC", "Google Inc"])
    >>> response.results[0].text
    'Google LLC'
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Union

import polars as pl

from tabfuzz import batch
from tabfuzz._utils import normalize_method, normalize_mode
from tabfuzz.enums import Method, Mode
from tabfuzz.errors import ValidationError
from tabfuzz.polars_api import score_series
from tabfuzz.results import MatchResult, Score, ScoreResult
from tabfuzz.scoring import ScoringOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Invocation:
    """A parsed host command: what to run and how."""

    mode: Mode
    method: Method
    options: ScoringOptions = field(default_factory=ScoringOptions)


@dataclass
class PairwiseResponse:
    """Result of a pairwise invocation, one entry per input row."""

    method: Method
    results: List[ScoreResult]

    @property
    def scores(self) -> List[Score]:
        return [r.score for r in self.results]

    @property
    def n_failed(self) -> int:
        return sum(1 for r in self.results if not r.ok)

    def to_frame(self) -> pl.DataFrame:
        """Return the results as a DataFrame with ``score`` and ``status`` columns."""
        return pl.DataFrame(
            {
                "score": score_series("score", self.scores, self.method),
                "status": pl.Series("status", [r.status.value for r in self.results], dtype=pl.Utf8),
            }
        )


@dataclass
class MatchResponse:
    """Result of a best-match invocation, one entry per master row."""

    method: Method
    master: List[Any]
    results: List[MatchResult]

    @property
    def n_failed(self) -> int:
        return sum(1 for r in self.results if not r.ok)

    def to_frame(self) -> pl.DataFrame:
        """Return ``master, best_match, best_index, score, status`` columns."""
        return pl.DataFrame(
            {
                "master": pl.Series(
                    "master", [_display(m) for m in self.master], dtype=pl.Utf8
                ),
                "best_match": pl.Series(
                    "best_match", [r.text for r in self.results], dtype=pl.Utf8
                ),
                "best_index": pl.Series(
                    "best_index", [r.id for r in self.results], dtype=pl.Int64
                ),
                "score": score_series("score", [r.score for r in self.results], self.method),
                "status": pl.Series(
                    "status", [r.status.value for r in self.results], dtype=pl.Utf8
                ),
            }
        )


def _display(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def parse_invocation(args: Sequence[str]) -> Invocation:
    """Parse ``[mode, method, *options]`` into an Invocation.

    Options are ``nocase`` (case-insensitive comparison) and ``pw=<float>``
    (Jaro-Winkler prefix weight).

    Raises:
        ValidationError: If the mode is missing or unknown, an argument is not a
            string, or an option is malformed.
        UnsupportedMethodError: If the method is unknown.

    Example:
        >>> parse_invocation(["pairwise", "jaro_winkler", "nocase", "pw=0.2"])
        Invocation(mode=<Mode.PAIRWISE: 'pairwise'>, method=<Method.JARO_WINKLER: 'jaro_winkler'>, options=ScoringOptions(nocase=True, prefix_weight=0.2))
    """
    if not args:
        raise ValidationError("requires mode (pairwise or best_match)")
    for position, arg in enumerate(args):
        if not isinstance(arg, str):
            raise ValidationError(
                f"argument {position} must be a string, got {type(arg).__name__}"
            )
    mode = normalize_mode(args[0])
    if len(args) < 2:
        raise ValidationError(f"{mode.value}: requires method argument")
    method = normalize_method(args[1])

    nocase = False
    prefix_weight = ScoringOptions().prefix_weight
    for arg in args[2:]:
        token = arg.strip().lower()
        if token == "nocase":
            nocase = True
        elif token.startswith("pw="):
            try:
                prefix_weight = float(token[3:])
            except ValueError:
                raise ValidationError(f"pw must be a number, got {arg!r}") from None
        else:
            raise ValidationError(f"{mode.value}: unknown option {arg!r}")

    return Invocation(mode, method, ScoringOptions(nocase=nocase, prefix_weight=prefix_weight))


def execute(
    invocation: Invocation,
    left: Optional[Sequence[Any]] = None,
    right: Optional[Sequence[Any]] = None,
    master: Optional[Sequence[Any]] = None,
    reference: Optional[Sequence[Any]] = None,
    workers: Optional[int] = None,
) -> Union[PairwiseResponse, MatchResponse]:
    """Run an invocation over host columns.

    Pairwise mode needs ``left`` and ``right``; best-match mode needs
    ``master`` and ``reference``.

    Raises:
        ValidationError: If the columns required by the mode are missing.
    """
    options = invocation.options
    if invocation.mode is Mode.PAIRWISE:
        if left is None or right is None:
            raise ValidationError("pairwise: requires left and right columns")
        results = batch.pairwise(
            left,
            right,
            invocation.method,
            nocase=options.nocase,
            prefix_weight=options.prefix_weight,
            workers=workers,
        )
        return PairwiseResponse(invocation.method, results)

    if master is None or reference is None:
        raise ValidationError("best_match: requires master and reference columns")
    master_rows = list(master)
    results = batch.best_matches(
        master_rows,
        reference,
        invocation.method,
        nocase=options.nocase,
        prefix_weight=options.prefix_weight,
        workers=workers,
    )
    return MatchResponse(invocation.method, master_rows, results)


def call(args: Sequence[str], **columns: Any) -> Union[PairwiseResponse, MatchResponse]:
    """Parse ``args`` and execute the invocation over ``columns``."""
    invocation = parse_invocation(args)
    logger.debug("invocation %s", invocation)
    return execute(invocation, **columns)


__all__ = [
    "Invocation",
    "MatchResponse",
    "PairwiseResponse",
    "call",
    "execute",
    "parse_invocation",
]
