"""Polars expression namespace for fuzzy scoring.

This module registers a `.fuzzy` namespace on Polars expressions, enabling
scoring and best-match lookups directly in Polars expression contexts.

Null cells are scored as empty strings. Rows that fail (Hamming on strings of
different length) produce the sentinel ``-1`` score or an empty best match,
the same values the batch API writes.

Warning:
    Expressions are evaluated row by row through ``map_elements``. For large
    columns use the batch API instead, which can spread rows over a worker
    pool:
    - tabfuzz.batch_score() for row-aligned scoring
    - tabfuzz.batch_best_match() for best-match search

Example:
    >>> import polars as pl
    >>> import tabfuzz  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["Jon Smith", "Jane Doe"], "other": ["John Smith", "Jane M. Doe"]})
    >>> df.with_columns(
    ...     score=pl.col("name").fuzzy.score(pl.col("other"), method="jaro_winkler")
    ... )
"""

from typing import List, Union

import polars as pl

from tabfuzz._core import preprocess
from tabfuzz._utils import normalize_method
from tabfuzz.enums import Method, MethodKind
from tabfuzz.errors import EmptyReferenceListError, LengthMismatchError
from tabfuzz.results import SENTINEL_MATCH, SENTINEL_SCORE
from tabfuzz.scoring import DEFAULT_PREFIX_WEIGHT, get_scorer
from tabfuzz.search import search_best


@pl.api.register_expr_namespace("fuzzy")
class FuzzyExprNamespace:
    """
    Fuzzy scoring namespace for Polars expressions.

    Access via `.fuzzy` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def score(
        self,
        other: Union[str, pl.Expr],
        method: Union[str, Method] = "ratio",
        nocase: bool = False,
        prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
    ) -> pl.Expr:
        """
        Score this column against a string literal or another column.

        Args:
            other: String literal or column expression to compare against
            method: Scoring method (string or Method enum, default "ratio")
            nocase: Compare case-insensitively
            prefix_weight: Jaro-Winkler prefix weight (default 0.1)

        Returns:
            Float64 expression for similarity methods, Int64 for distances

        Example:
            >>> df.with_columns(
            ...     score=pl.col("name").fuzzy.score("John Smith")
            ... )
            >>> df.with_columns(
            ...     dist=pl.col("name1").fuzzy.score(pl.col("name2"), method="levenshtein")
            ... )
        """
        resolved = normalize_method(method)
        scorer = get_scorer(resolved, prefix_weight)
        dtype = pl.Int64 if resolved.kind is MethodKind.DISTANCE else pl.Float64

        def pair_score(a, b):
            try:
                return scorer(
                    preprocess(a if a is not None else "", nocase),
                    preprocess(b if b is not None else "", nocase),
                )
            except LengthMismatchError:
                return SENTINEL_SCORE

        if isinstance(other, str):
            # Compare against a literal string
            return self._expr.map_elements(
                lambda s: pair_score(s, other),
                return_dtype=dtype,
                skip_nulls=False,
            )

        # Compare against another column
        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: pair_score(row["_left"], row["_right"]),
            return_dtype=dtype,
        )

    def best_match(
        self,
        choices: List[str],
        method: Union[str, Method] = "ratio",
        nocase: bool = False,
        prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
    ) -> pl.Expr:
        """
        Find the best matching string from a list of choices.

        Args:
            choices: Reference strings to match against
            method: Scoring method (string or Method enum, default "ratio")
            nocase: Compare case-insensitively
            prefix_weight: Jaro-Winkler prefix weight (default 0.1)

        Returns:
            String expression with the best match ("" when no choice is
            comparable or the list is empty)

        Example:
            >>> categories = ["Electronics", "Clothing", "Food"]
            >>> df.with_columns(
            ...     category=pl.col("raw_category").fuzzy.best_match(categories)
            ... )
        """
        resolved = normalize_method(method)
        scorer = get_scorer(resolved, prefix_weight)
        processed = [preprocess(choice, nocase) for choice in choices]

        def find_best(value):
            try:
                found = search_best(
                    preprocess(value if value is not None else "", nocase),
                    processed,
                    resolved,
                    scorer,
                    originals=choices,
                )
            except (LengthMismatchError, EmptyReferenceListError):
                return SENTINEL_MATCH
            return found.text

        return self._expr.map_elements(find_best, return_dtype=pl.Utf8, skip_nulls=False)


__all__ = ["FuzzyExprNamespace"]
