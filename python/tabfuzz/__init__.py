"""
tabfuzz - Fuzzy string scoring for tabular data

A pure-Python engine for pairwise scoring and best-match search over string
columns, with rapidfuzz-style methods and a Polars front end.

Example usage:
    >>> import tabfuzz as tfz

    # Score one pair
    >>> tfz.score("kitten", "sitting", method="levenshtein")
    3
    >>> round(tfz.jaro_winkler("MARTHA", "MARHTA"), 2)
    96.11

    # Best match for one query (returns a MatchResult)
    >>> result = tfz.extract_one("Gogle", ["Google LLC", "Google Inc"], method="token_set")
    >>> (result.text, result.id)
    ('Google LLC', 0)

    # Whole columns, in input order, optionally over a worker pool
    >>> [r.score for r in tfz.pairwise(["abc", "abc"], ["abd", "ab"], method="hamming")]
    [1, -1]
"""

from importlib.metadata import version as _get_version

# Register the .fuzzy expression namespace
import tabfuzz.expr  # noqa: F401

# Import polars subpackage for `from tabfuzz import polars` style
from tabfuzz import polars
from tabfuzz._core import (
    hamming_distance,
    indel_distance,
    jaro,
    jaro_winkler,
    lcs_seq_distance,
    # Distance functions
    levenshtein,
    norm_hamming,
    norm_indel,
    norm_lcsseq,
    norm_osa,
    normalized_levenshtein,
    osa_distance,
    # Ratio family
    partial_ratio,
    partial_token_ratio,
    partial_token_set_ratio,
    partial_token_sort_ratio,
    qratio,
    ratio,
    # Tokenizer
    tokenize,
    token_ratio,
    token_set_ratio,
    token_sort_ratio,
    wratio,
)
from tabfuzz.batch import best_matches, pairwise, scores
from tabfuzz.config import EngineConfig, get_config, set_config
from tabfuzz.enums import Method, MethodKind, Mode, RowStatus
from tabfuzz.errors import (
    EmptyReferenceListError,
    EncodingError,
    LengthMismatchError,
    TabFuzzError,
    UnsupportedMethodError,
    ValidationError,
)
from tabfuzz.polars_api import batch_best_match, batch_score, score_frame
from tabfuzz.protocol import call, parse_invocation
from tabfuzz.results import MatchResult, ScoreResult
from tabfuzz.scoring import ScoringOptions, get_scorer, registered_methods, score
from tabfuzz.search import extract_one

__version__ = _get_version("tabfuzz")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "TabFuzzError",
    "ValidationError",
    "UnsupportedMethodError",
    "LengthMismatchError",
    "EmptyReferenceListError",
    "EncodingError",
    # Result types
    "ScoreResult",
    "MatchResult",
    # Enums
    "Method",
    "MethodKind",
    "Mode",
    "RowStatus",
    # Scoring dispatcher
    "score",
    "get_scorer",
    "registered_methods",
    "ScoringOptions",
    # Distance functions
    "levenshtein",
    "osa_distance",
    "hamming_distance",
    "indel_distance",
    "lcs_seq_distance",
    "normalized_levenshtein",
    "norm_osa",
    "norm_hamming",
    "norm_indel",
    "norm_lcsseq",
    # Jaro family
    "jaro",
    "jaro_winkler",
    # Ratio family
    "ratio",
    "partial_ratio",
    "token_sort_ratio",
    "token_set_ratio",
    "partial_token_sort_ratio",
    "partial_token_set_ratio",
    "token_ratio",
    "partial_token_ratio",
    "qratio",
    "wratio",
    "tokenize",
    # Aliases
    "edit_distance",
    "similarity",
    # Best-match search
    "extract_one",
    # Batch evaluation
    "pairwise",
    "scores",
    "best_matches",
    "EngineConfig",
    "get_config",
    "set_config",
    # Host protocol
    "call",
    "parse_invocation",
    # Polars Integration - Batch API (polars_api)
    "batch_score",
    "batch_best_match",
    "score_frame",
    # Polars subpackage
    "polars",
]


# Convenience aliases
edit_distance = levenshtein
similarity = ratio
