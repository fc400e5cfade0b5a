"""Pure-Python similarity and distance algorithms.

Everything here is a pure function of its string arguments: no I/O, no
shared state, safe to call from any thread or process.
"""

from tabfuzz._core.distance import (
    hamming_distance,
    indel_distance,
    lcs_seq_distance,
    lcs_seq_length,
    levenshtein,
    norm_hamming,
    norm_indel,
    norm_lcsseq,
    norm_osa,
    normalized_levenshtein,
    normalized_similarity,
    osa_distance,
)
from tabfuzz._core.fuzz import (
    partial_ratio,
    partial_token_ratio,
    partial_token_set_ratio,
    partial_token_sort_ratio,
    qratio,
    ratio,
    token_ratio,
    token_set_ratio,
    token_sort_ratio,
    wratio,
)
from tabfuzz._core.jaro import jaro, jaro_winkler
from tabfuzz._core.tokens import (
    nfc,
    preprocess,
    sorted_join,
    tokenize,
    unique_difference,
    unique_intersection,
    unique_union,
)

__all__ = [
    # Tokenizer/normalizer
    "tokenize",
    "sorted_join",
    "unique_intersection",
    "unique_difference",
    "unique_union",
    "preprocess",
    "nfc",
    # Edit distances
    "levenshtein",
    "osa_distance",
    "hamming_distance",
    "indel_distance",
    "lcs_seq_length",
    "lcs_seq_distance",
    "normalized_similarity",
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
]
