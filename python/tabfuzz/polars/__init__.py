"""
Polars integration for tabfuzz.

Two levels of functionality:

Levels:
    1. **Expression Namespace** (`.fuzzy`) - Per-row operations
       Example: `df.with_columns(score=pl.col("name").fuzzy.score("John"))`

    2. **Batch API** - Whole columns through the worker pool
       Example: `batch_best_match(df["name"], reference, method="token_set")`

Examples:
    >>> import polars as pl
    >>> import tabfuzz.polars as tfp  # or: from tabfuzz import polars as tfp

    >>> df = pl.DataFrame({"str1": ["kitten"], "str2": ["sitting"]})
    >>> tfp.score_frame(df, "str1", "str2", methods=["ratio", "levenshtein"])
"""

# Expression namespace is registered on import
import tabfuzz.expr as _expr  # noqa: F401
from tabfuzz.polars_api import (
    batch_best_match,
    batch_score,
    score_frame,
    score_series,
)

__all__ = [
    "batch_score",
    "batch_best_match",
    "score_frame",
    "score_series",
]
