"""Regression fixture tables.

The fixture tables pin the expected output of the engine for a fixed set of
inputs so that any host integration can be checked against them:

- ``test_pairwise.csv``: ``str1, str2`` followed by one column per method
- ``test_match_master.csv`` / ``test_match_reference.csv``: best-match inputs
- ``test_match_expected_<method>.csv``: ``master, best_match, score``

Values are rounded to 4 decimals. Cells that cannot be computed (Hamming on
strings of different length) hold the sentinel ``-1``.

By default the tables are produced with tabfuzz's own scorers. Passing
``scorers`` plugs in another implementation (for example rapidfuzz, see
``examples/reference_fixtures.py``) to produce a trusted reference table, and
:func:`compare_pairwise_fixture` checks tabfuzz against such a table.

Example:
    >>> import polars as pl
    >>> from tabfuzz.fixtures import write_fixtures, compare_pairwise_fixture
    >>> paths = write_fixtures("fixtures/")
    >>> expected = pl.read_csv("fixtures/test_pairwise.csv")
    >>> compare_pairwise_fixture(expected)
    []
"""

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import polars as pl

from tabfuzz import batch
from tabfuzz._utils import coerce_text, normalize_method
from tabfuzz.enums import Method
from tabfuzz.errors import LengthMismatchError
from tabfuzz.polars_api import score_series
from tabfuzz.results import SENTINEL_SCORE, Score
from tabfuzz.scoring import get_scorer

logger = logging.getLogger(__name__)

ReferenceScorer = Callable[[str, str], Score]

DEFAULT_PAIRS: List[Tuple[str, str]] = [
    # Basic cases
    ("hello", "hello"),
    ("hello", "world"),
    ("", ""),
    ("abc", ""),
    ("", "xyz"),
    # Typos and edits
    ("kitten", "sitting"),
    ("Saturday", "Sunday"),
    ("Robert", "Rupert"),
    # Names
    ("John Smith", "John Smyth"),
    ("John Smith", "Smith John"),
    ("JOHN SMITH", "john smith"),
    ("John A. Smith", "John Smith"),
    ("John Smith Jr.", "John Smith"),
    ("McDonald's", "McDonalds"),
    ("St. Louis", "Saint Louis"),
    # Companies
    ("Apple Inc.", "Apple Incorporated"),
    ("IBM", "International Business Machines"),
    ("AT&T", "AT&T Inc."),
    ("Walmart", "Wal-Mart"),
    ("JP Morgan Chase", "JPMorgan Chase & Co"),
    # Short strings and permutations
    ("a", "b"),
    ("a", "a"),
    ("ab", "ba"),
    ("abc", "cab"),
    ("abcdef", "fedcba"),
    # Accents
    ("cafe", "café"),
    ("naive", "naïve"),
    # Long strings
    (
        "The quick brown fox jumps over the lazy dog",
        "The quick brown fox jumped over the lazy dogs",
    ),
    ("University of Hawaii at Manoa", "Univ. of Hawaii, Manoa"),
]

DEFAULT_MASTER: List[str] = [
    "John Smith",
    "Jane Doe",
    "Robert Johnson",
    "Maria Garcia",
    "Apple Inc",
    "Microsft",
    "Gogle",
    "Amazn",
]

DEFAULT_REFERENCE: List[str] = [
    "John A. Smith",
    "Jonathan Smith",
    "Jane M. Doe",
    "Janet Doe",
    "Robert B. Johnson",
    "Bob Johnson",
    "Maria L. Garcia",
    "Mary Garcia",
    "Apple Incorporated",
    "Apple Computer",
    "Microsoft Corporation",
    "Microsoft Corp",
    "Google LLC",
    "Google Inc",
    "Amazon.com Inc",
    "Amazon Web Services",
]

PAIRWISE_FIXTURE_METHODS: Tuple[Method, ...] = (
    Method.RATIO,
    Method.PARTIAL_RATIO,
    Method.TOKEN_SORT,
    Method.TOKEN_SET,
    Method.LEVENSHTEIN,
    Method.NORMALIZED_LEVENSHTEIN,
    Method.JARO,
    Method.JARO_WINKLER,
    Method.HAMMING,
    Method.OSA,
)

MATCH_FIXTURE_METHODS: Tuple[Method, ...] = (
    Method.RATIO,
    Method.JARO_WINKLER,
    Method.TOKEN_SET,
)

_DECIMALS = 4


@dataclass(frozen=True)
class FixtureMismatch:
    """One pairwise fixture cell that tabfuzz does not reproduce."""

    row: int
    method: Method
    str1: str
    str2: str
    expected: Score
    actual: Score


def _round(value: Score) -> Score:
    return value if isinstance(value, int) else round(value, _DECIMALS)


def _resolve_scorers(
    methods: Sequence[Union[str, Method]],
    scorers: Optional[Mapping[Union[str, Method], ReferenceScorer]],
) -> Dict[Method, ReferenceScorer]:
    supplied = {normalize_method(k): v for k, v in (scorers or {}).items()}
    resolved = {}
    for method in methods:
        m = normalize_method(method)
        resolved[m] = supplied.get(m) or get_scorer(m)
    return resolved


def _safe_score(scorer: ReferenceScorer, a: str, b: str) -> Score:
    try:
        return _round(scorer(a, b))
    except LengthMismatchError:
        return SENTINEL_SCORE


def pairwise_fixture(
    pairs: Sequence[Tuple[str, str]] = DEFAULT_PAIRS,
    methods: Sequence[Union[str, Method]] = PAIRWISE_FIXTURE_METHODS,
    scorers: Optional[Mapping[Union[str, Method], ReferenceScorer]] = None,
) -> pl.DataFrame:
    """Build the pairwise fixture table.

    Args:
        pairs: ``(str1, str2)`` inputs.
        methods: Methods to score, one output column each (named by method).
        scorers: Optional replacement scorer per method. A replacement must
            raise LengthMismatchError, or return -1 itself, where a pair is
            not comparable.

    Returns:
        DataFrame ``str1, str2, <method>...``.
    """
    table = _resolve_scorers(methods, scorers)
    columns = [
        pl.Series("str1", [a for a, _ in pairs], dtype=pl.Utf8),
        pl.Series("str2", [b for _, b in pairs], dtype=pl.Utf8),
    ]
    for method, scorer in table.items():
        values = [_safe_score(scorer, a, b) for a, b in pairs]
        columns.append(score_series(method.value, values, method))
    return pl.DataFrame(columns)


def match_fixture(
    master: Sequence[str] = DEFAULT_MASTER,
    reference: Sequence[str] = DEFAULT_REFERENCE,
    method: Union[str, Method] = "ratio",
    scorer: Optional[ReferenceScorer] = None,
) -> pl.DataFrame:
    """Build the expected best-match table for one method.

    Without ``scorer`` the batch engine is used. With ``scorer`` a plain
    first-wins scan is run, so a third-party implementation can serve as
    the reference.

    Returns:
        DataFrame ``master, best_match, score``.
    """
    resolved = normalize_method(method)
    if scorer is None:
        found = batch.best_matches(master, reference, resolved, workers=1)
        best = [(r.text, _round(r.score)) for r in found]
    else:
        best = [_scan(m, reference, resolved, scorer) for m in master]
    return pl.DataFrame(
        [
            pl.Series("master", list(master), dtype=pl.Utf8),
            pl.Series("best_match", [text for text, _ in best], dtype=pl.Utf8),
            score_series("score", [value for _, value in best], resolved),
        ]
    )


def _scan(
    query: str, reference: Sequence[str], method: Method, scorer: ReferenceScorer
) -> Tuple[str, Score]:
    higher = method.higher_is_better
    best_text, best_score = "", None
    for candidate in reference:
        try:
            value = scorer(query, candidate)
        except LengthMismatchError:
            continue
        if value == SENTINEL_SCORE:
            continue
        if best_score is None or (value > best_score if higher else value < best_score):
            best_text, best_score = candidate, value
    return best_text, SENTINEL_SCORE if best_score is None else _round(best_score)


def write_fixtures(
    directory: Union[str, Path],
    pairs: Sequence[Tuple[str, str]] = DEFAULT_PAIRS,
    master: Sequence[str] = DEFAULT_MASTER,
    reference: Sequence[str] = DEFAULT_REFERENCE,
    pairwise_methods: Sequence[Union[str, Method]] = PAIRWISE_FIXTURE_METHODS,
    match_methods: Sequence[Union[str, Method]] = MATCH_FIXTURE_METHODS,
    scorers: Optional[Mapping[Union[str, Method], ReferenceScorer]] = None,
) -> List[Path]:
    """Write the fixture CSV files into ``directory`` and return their paths."""
    out = Path(directory)
    out.mkdir(parents=True, exist_ok=True)
    supplied = {normalize_method(k): v for k, v in (scorers or {}).items()}
    written = []

    path = out / "test_pairwise.csv"
    pairwise_fixture(pairs, pairwise_methods, supplied).write_csv(path)
    written.append(path)

    path = out / "test_match_master.csv"
    pl.DataFrame({"name": pl.Series(list(master), dtype=pl.Utf8)}).write_csv(path)
    written.append(path)

    path = out / "test_match_reference.csv"
    pl.DataFrame({"ref_name": pl.Series(list(reference), dtype=pl.Utf8)}).write_csv(path)
    written.append(path)

    for method in match_methods:
        resolved = normalize_method(method)
        path = out / f"test_match_expected_{resolved.value}.csv"
        match_fixture(master, reference, resolved, supplied.get(resolved)).write_csv(path)
        written.append(path)

    logger.info("wrote %d fixture files to %s", len(written), out)
    return written


def compare_pairwise_fixture(
    expected: pl.DataFrame,
    tolerance: float = 1e-4,
) -> List[FixtureMismatch]:
    """Recompute every cell of a pairwise fixture table.

    Columns other than ``str1`` and ``str2`` must name methods (aliases such
    as ``norm_lev`` are accepted). Missing cells, and empty strings read back
    from CSV as nulls, are handled: a null string is the empty string and a
    null expected value is not checked.

    Returns:
        The cells whose recomputed value differs from the table by more than
        ``tolerance``, in row order.
    """
    method_columns = [c for c in expected.columns if c not in ("str1", "str2")]
    left = [coerce_text(v) for v in expected["str1"].to_list()]
    right = [coerce_text(v) for v in expected["str2"].to_list()]

    mismatches = []
    for column in method_columns:
        method = normalize_method(column)
        scorer = get_scorer(method)
        for row, (a, b, want) in enumerate(zip(left, right, expected[column].to_list())):
            if want is None or (isinstance(want, float) and math.isnan(want)):
                continue
            got = _safe_score(scorer, a, b)
            if abs(got - want) > tolerance:
                mismatches.append(FixtureMismatch(row, method, a, b, want, got))

    if mismatches:
        logger.warning("%d of the fixture cells differ", len(mismatches))
    return mismatches


__all__ = [
    "DEFAULT_MASTER",
    "DEFAULT_PAIRS",
    "DEFAULT_REFERENCE",
    "FixtureMismatch",
    "MATCH_FIXTURE_METHODS",
    "PAIRWISE_FIXTURE_METHODS",
    "compare_pairwise_fixture",
    "match_fixture",
    "pairwise_fixture",
    "write_fixtures",
]
