"""Batch operations API for tabfuzz.

This module evaluates whole host columns: row-aligned pairwise scoring and
one-to-many best-match search. Rows are independent, so they are split into
contiguous chunks and evaluated by a fixed-size worker pool; results always
come back in input order, whatever the number of workers.

Row-level problems (Hamming on unequal lengths, an empty reference list, a
cell that is not valid text) never abort a batch. The affected row carries a
sentinel value and a non-OK ``status`` instead. Invocation-level problems (an
unknown method, bad options, columns of different lengths) raise before any
row is processed.

Example usage:
    >>> import tabfuzz.batch as batch

    # Pairwise similarity between aligned lists
    >>> results = batch.pairwise(["kitten", "abc"], ["sitting", "ab"], method="hamming")
    >>> [(r.score, r.status.value) for r in results]
    [(-1, 'length_mismatch'), (-1, 'length_mismatch')]

    # Best reference entry for every master entry
    >>> matches = batch.best_matches(["Gogle", "Amazn"], ["Google LLC", "Amazon.com Inc"])
    >>> [(m.text, m.id) for m in matches]
    [('Google LLC', 0), ('Amazon.com Inc', 1)]
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence

from tabfuzz._core import preprocess
from tabfuzz._utils import coerce_text, normalize_method
from tabfuzz.config import EngineConfig, get_config
from tabfuzz.enums import Method, RowStatus
from tabfuzz.errors import (
    EmptyReferenceListError,
    EncodingError,
    LengthMismatchError,
    ValidationError,
)
from tabfuzz.results import MatchResult, Score, ScoreResult
from tabfuzz.scoring import DEFAULT_PREFIX_WEIGHT, ScoringOptions, get_scorer
from tabfuzz.search import search_best

if TYPE_CHECKING:
    from tabfuzz.config import Backend

__all__ = [
    "pairwise",
    "scores",
    "best_matches",
]

logger = logging.getLogger(__name__)

# Chunks per worker when no chunk size is configured
_CHUNKS_PER_WORKER = 4
# Sequential runs are cut into this many chunks to report progress
_PROGRESS_STEPS = 10


def pairwise(
    left: Sequence[Any],
    right: Sequence[Any],
    method: str | Method = "ratio",
    nocase: bool = False,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
    workers: Optional[int] = None,
    chunk_size: Optional[int] = None,
    backend: Optional[Backend] = None,
) -> list[ScoreResult]:
    """Score each row-aligned pair (left[i], right[i]).

    Args:
        left: First column of strings.
        right: Second column of strings (must be same length as left).
        method: Scoring method (string or Method enum, default "ratio").
        nocase: Compare case-insensitively.
        prefix_weight: Jaro-Winkler prefix weight (default 0.1).
        workers: Worker pool size; defaults to the active EngineConfig.
        chunk_size: Rows per work unit; defaults to the active EngineConfig.
        backend: "process" or "thread"; defaults to the active EngineConfig.

    Returns:
        One ScoreResult per row, in input order. Failed rows hold score -1
        and a non-OK status.

    Raises:
        UnsupportedMethodError: If the method is unknown.
        ValidationError: If the columns differ in length or options are invalid.

    Example:
        >>> [r.score for r in pairwise(["kitten"], ["sitting"], method="levenshtein")]
        [3]
    """
    resolved = normalize_method(method)
    options = ScoringOptions(nocase=nocase, prefix_weight=prefix_weight)
    if len(left) != len(right):
        raise ValidationError(
            f"columns must have equal length, got {len(left)} and {len(right)}"
        )
    config = get_config().override(workers=workers, chunk_size=chunk_size, backend=backend)

    left_rows = list(left)
    right_rows = list(right)
    n = len(left_rows)
    tasks = [
        (resolved, options, left_rows[start:stop], right_rows[start:stop])
        for start, stop in _plan_chunks(n, config)
    ]
    results = _run_chunks(_score_chunk, tasks, config, n, "scored")

    n_failed = sum(1 for r in results if not r.ok)
    logger.info("pairwise %s: %d rows, %d failed", resolved.value, n, n_failed)
    return results


def scores(
    left: Sequence[Any],
    right: Sequence[Any],
    method: str | Method = "ratio",
    nocase: bool = False,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
    workers: Optional[int] = None,
    chunk_size: Optional[int] = None,
    backend: Optional[Backend] = None,
) -> list[Score]:
    """Like :func:`pairwise` but return bare scores (-1 for failed rows).

    Example:
        >>> scores(["abc", "abc"], ["abd", "ab"], method="hamming")
        [1, -1]
    """
    return [
        r.score
        for r in pairwise(
            left,
            right,
            method,
            nocase=nocase,
            prefix_weight=prefix_weight,
            workers=workers,
            chunk_size=chunk_size,
            backend=backend,
        )
    ]


def best_matches(
    master: Sequence[Any],
    reference: Sequence[Any],
    method: str | Method = "ratio",
    nocase: bool = False,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
    workers: Optional[int] = None,
    chunk_size: Optional[int] = None,
    backend: Optional[Backend] = None,
    prune: Optional[bool] = None,
) -> list[MatchResult]:
    """Find the best reference entry for every master entry.

    Similarity methods pick the highest score, distance methods the lowest.
    Ties go to the earliest reference entry.

    Args:
        master: Strings to look up.
        reference: Strings to search in.
        method: Scoring method (string or Method enum, default "ratio").
        nocase: Compare case-insensitively.
        prefix_weight: Jaro-Winkler prefix weight (default 0.1).
        workers: Worker pool size; defaults to the active EngineConfig.
        chunk_size: Master rows per work unit; defaults to the active EngineConfig.
        backend: "process" or "thread"; defaults to the active EngineConfig.
        prune: Length-bound pruning; defaults to the active EngineConfig.
            Pruning never changes the result.

    Returns:
        One MatchResult per master row, in master order. ``id`` is the
        position of the match in ``reference``. Failed rows hold text "",
        score -1, id -1 and a non-OK status.

    Raises:
        UnsupportedMethodError: If the method is unknown.
        ValidationError: If options are invalid.

    Example:
        >>> [m.text for m in best_matches(["Jane Doe"], ["Janet Doe", "Jane M. Doe"])]
        ['Janet Doe']
    """
    resolved = normalize_method(method)
    options = ScoringOptions(nocase=nocase, prefix_weight=prefix_weight)
    config = get_config().override(
        workers=workers, chunk_size=chunk_size, backend=backend, prune=prune
    )

    originals: list[str] = []
    positions: list[int] = []
    for position, cell in enumerate(reference):
        try:
            originals.append(coerce_text(cell))
        except EncodingError as exc:
            logger.warning("skipping reference entry %d: %s", position, exc)
            continue
        positions.append(position)
    processed = [preprocess(text, options.nocase) for text in originals]

    master_rows = list(master)
    n = len(master_rows)
    tasks = [
        (resolved, options, config.prune, master_rows[start:stop], processed, originals, positions)
        for start, stop in _plan_chunks(n, config)
    ]
    results = _run_chunks(_match_chunk, tasks, config, n, "matched")

    n_failed = sum(1 for r in results if not r.ok)
    logger.info(
        "best_match %s: %d master rows against %d reference entries, %d failed",
        resolved.value,
        n,
        len(originals),
        n_failed,
    )
    return results


def _score_chunk(
    method: Method,
    options: ScoringOptions,
    lefts: list[Any],
    rights: list[Any],
) -> list[ScoreResult]:
    scorer = get_scorer(method, options.prefix_weight)
    out = []
    for a, b in zip(lefts, rights):
        try:
            text_a = preprocess(coerce_text(a), options.nocase)
            text_b = preprocess(coerce_text(b), options.nocase)
            out.append(ScoreResult(scorer(text_a, text_b)))
        except LengthMismatchError as exc:
            logger.debug("pair %r, %r failed: %s", a, b, exc)
            out.append(ScoreResult.failed(RowStatus.LENGTH_MISMATCH, str(exc)))
        except EncodingError as exc:
            logger.debug("pair %r, %r failed: %s", a, b, exc)
            out.append(ScoreResult.failed(RowStatus.ENCODING_ERROR, str(exc)))
    return out


def _match_chunk(
    method: Method,
    options: ScoringOptions,
    prune: bool,
    queries: list[Any],
    processed: list[str],
    originals: list[str],
    positions: list[int],
) -> list[MatchResult]:
    scorer = get_scorer(method, options.prefix_weight)
    out = []
    for query in queries:
        try:
            text = preprocess(coerce_text(query), options.nocase)
            found = search_best(text, processed, method, scorer, prune=prune, originals=originals)
            out.append(MatchResult(found.text, found.score, positions[found.id]))
        except LengthMismatchError as exc:
            logger.debug("no comparable reference entry for %r: %s", query, exc)
            out.append(MatchResult.failed(RowStatus.LENGTH_MISMATCH, str(exc)))
        except EmptyReferenceListError as exc:
            out.append(MatchResult.failed(RowStatus.EMPTY_REFERENCE_LIST, str(exc)))
        except EncodingError as exc:
            logger.debug("master cell %r failed: %s", query, exc)
            out.append(MatchResult.failed(RowStatus.ENCODING_ERROR, str(exc)))
    return out


def _plan_chunks(n: int, config: EngineConfig) -> list[tuple[int, int]]:
    """Split ``range(n)`` into contiguous, ordered ``(start, stop)`` chunks."""
    if n == 0:
        return []
    if config.chunk_size is not None:
        size = config.chunk_size
    elif config.workers == 1:
        size = math.ceil(n / _PROGRESS_STEPS)
    else:
        size = math.ceil(n / (config.workers * _CHUNKS_PER_WORKER))
    return [(start, min(start + size, n)) for start in range(0, n, size)]


def _make_executor(config: EngineConfig) -> Executor:
    if config.backend == "thread":
        return ThreadPoolExecutor(max_workers=config.workers)
    return ProcessPoolExecutor(max_workers=config.workers)


def _run_chunks(
    func: Callable[..., list],
    tasks: list[tuple],
    config: EngineConfig,
    total: int,
    verb: str,
) -> list:
    """Evaluate every chunk and concatenate the results in chunk order."""
    results: list = []
    if config.workers == 1 or len(tasks) <= 1:
        for task in tasks:
            results.extend(func(*task))
            logger.debug("%s %d of %d", verb, len(results), total)
        return results

    with _make_executor(config) as executor:
        futures = [executor.submit(func, *task) for task in tasks]
        # Each future owns a disjoint slice of the output; collect in submission order
        for future in futures:
            results.extend(future.result())
            logger.debug("%s %d of %d", verb, len(results), total)
    return results
