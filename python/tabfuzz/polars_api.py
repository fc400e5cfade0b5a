"""Polars API for batch fuzzy scoring on host columns.

This module is the tabular face of the batch evaluator: it accepts Polars
Series and DataFrames, runs the pairwise or best-match engine, and returns
Polars objects with one output row per input row, in input order.

Functions in This Module
------------------------
- ``batch_score()``: Score two aligned Series, returning ``score`` and ``status``
- ``batch_best_match()``: Best reference entry for each master value
- ``score_frame()``: Add one score column per method to a DataFrame

Output Columns
--------------
Similarity methods produce ``Float64`` scores in [0, 100]; distance methods
produce ``Int64`` edit counts. Rows that failed (for example Hamming on
strings of different length) hold the sentinel ``-1`` and a non-``"ok"``
status, so they can be filtered without losing the rest::

    >>> result = batch_score(df["a"], df["b"], method="hamming")
    >>> good = result.filter(pl.col("status") == "ok")

Example Usage
-------------
>>> import polars as pl
>>> import tabfuzz as tfz
>>>
>>> df = pl.DataFrame({"a": ["kitten", "Saturday"], "b": ["sitting", "Sunday"]})
>>> df = df.with_columns(tfz.batch_score(df["a"], df["b"], method="levenshtein")["score"])
>>>
>>> master = pl.Series(["Gogle", "Amazn"])
>>> tfz.batch_best_match(master, ["Google LLC", "Amazon.com Inc"], method="token_set")

Method Selection Guide
----------------------
+---------------------+----------------+------------------------+
| Method              | Returns        | Best For               |
+=====================+================+========================+
| jaro_winkler        | similarity     | Names, short text      |
+---------------------+----------------+------------------------+
| ratio               | similarity     | Typos, OCR errors      |
+---------------------+----------------+------------------------+
| token_set           | similarity     | Extra/missing words    |
+---------------------+----------------+------------------------+
| levenshtein / osa   | distance       | Raw edit counts        |
+---------------------+----------------+------------------------+
"""

from typing import Iterable, Optional, Sequence, Union

import polars as pl

from tabfuzz import batch
from tabfuzz._utils import normalize_method
from tabfuzz.enums import Method, MethodKind
from tabfuzz.results import Score
from tabfuzz.scoring import DEFAULT_PREFIX_WEIGHT


def score_series(name: str, values: Iterable[Score], method: Union[str, Method]) -> "pl.Series":
    """Build a score column with the dtype the method's kind calls for."""
    if normalize_method(method).kind is MethodKind.DISTANCE:
        return pl.Series(name, [int(v) for v in values], dtype=pl.Int64)
    return pl.Series(name, [float(v) for v in values], dtype=pl.Float64)


def batch_score(
    left: Union["pl.Series", Sequence[str]],
    right: Union["pl.Series", Sequence[str]],
    method: Union[str, Method] = "ratio",
    nocase: bool = False,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
    workers: Optional[int] = None,
) -> "pl.DataFrame":
    """
    Score two aligned Series in a single batch call.

    Args:
        left: First string Series
        right: Second string Series (must be same length as left)
        method: Scoring method (string or Method enum, default "ratio")
        nocase: Compare case-insensitively
        prefix_weight: Jaro-Winkler prefix weight (default 0.1)
        workers: Worker pool size (defaults to the active EngineConfig)

    Returns:
        DataFrame with columns ``score`` and ``status``, one row per input row.
        Null cells are scored as empty strings.

    Raises:
        ValidationError: If the Series differ in length.
        UnsupportedMethodError: If the method is unknown.

    Example:
        >>> left = pl.Series(["kitten", "abc"])
        >>> right = pl.Series(["sitting", "ab"])
        >>> batch_score(left, right, method="hamming")["status"].to_list()
        ['length_mismatch', 'length_mismatch']

    See Also:
        batch_best_match: Find the best reference entry for each master value
        score_frame: Score the same two columns under several methods
    """
    resolved = normalize_method(method)
    results = batch.pairwise(
        list(left),
        list(right),
        resolved,
        nocase=nocase,
        prefix_weight=prefix_weight,
        workers=workers,
    )
    return pl.DataFrame(
        [
            score_series("score", (r.score for r in results), resolved),
            pl.Series("status", [r.status.value for r in results], dtype=pl.Utf8),
        ]
    )


def batch_best_match(
    master: Union["pl.Series", Sequence[str]],
    reference: Union["pl.Series", Sequence[str]],
    method: Union[str, Method] = "ratio",
    nocase: bool = False,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
    workers: Optional[int] = None,
    prune: Optional[bool] = None,
) -> "pl.DataFrame":
    """
    Find the best reference entry for every master value.

    Args:
        master: Series of strings to look up
        reference: Series or list of strings to search in
        method: Scoring method (string or Method enum, default "ratio")
        nocase: Compare case-insensitively
        prefix_weight: Jaro-Winkler prefix weight (default 0.1)
        workers: Worker pool size (defaults to the active EngineConfig)
        prune: Length-bound pruning (defaults to the active EngineConfig)

    Returns:
        DataFrame with columns ``master``, ``best_match``, ``best_index``,
        ``score`` and ``status``, one row per master value, in master order.

    Example:
        >>> master = pl.Series(["Gogle", "Microsft"])
        >>> reference = ["Microsoft Corp", "Google LLC", "Google Inc"]
        >>> batch_best_match(master, reference, method="token_set")["best_match"].to_list()
        ['Google LLC', 'Microsoft Corp']

    See Also:
        batch_score: Score row-aligned pairs
        extract_one: Best match for a single query
    """
    resolved = normalize_method(method)
    master_rows = list(master)
    results = batch.best_matches(
        master_rows,
        list(reference),
        resolved,
        nocase=nocase,
        prefix_weight=prefix_weight,
        workers=workers,
        prune=prune,
    )
    return pl.DataFrame(
        [
            pl.Series(
                "master",
                [m if m is None or isinstance(m, str) else str(m) for m in master_rows],
                dtype=pl.Utf8,
            ),
            pl.Series("best_match", [r.text for r in results], dtype=pl.Utf8),
            pl.Series("best_index", [r.id for r in results], dtype=pl.Int64),
            score_series("score", (r.score for r in results), resolved),
            pl.Series("status", [r.status.value for r in results], dtype=pl.Utf8),
        ]
    )


def score_frame(
    df: "pl.DataFrame",
    left_on: str,
    right_on: str,
    methods: Sequence[Union[str, Method]] = ("ratio",),
    nocase: bool = False,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
    workers: Optional[int] = None,
) -> "pl.DataFrame":
    """
    Add one score column per method, named after the method.

    This is the layout of the pairwise regression table: the two string
    columns followed by one numeric column per method.

    Args:
        df: DataFrame holding the two string columns
        left_on: Name of the first string column
        right_on: Name of the second string column
        methods: Methods to score, in output column order
        nocase: Compare case-insensitively
        prefix_weight: Jaro-Winkler prefix weight (default 0.1)
        workers: Worker pool size (defaults to the active EngineConfig)

    Returns:
        ``df`` with the score columns appended.

    Example:
        >>> df = pl.DataFrame({"str1": ["kitten"], "str2": ["sitting"]})
        >>> score_frame(df, "str1", "str2", methods=["levenshtein", "osa"])
    """
    left = df[left_on].to_list()
    right = df[right_on].to_list()
    columns = []
    for method in methods:
        resolved = normalize_method(method)
        results = batch.pairwise(
            left,
            right,
            resolved,
            nocase=nocase,
            prefix_weight=prefix_weight,
            workers=workers,
        )
        columns.append(score_series(resolved.value, (r.score for r in results), resolved))
    return df.with_columns(columns)


__all__ = ["batch_best_match", "batch_score", "score_frame", "score_series"]
