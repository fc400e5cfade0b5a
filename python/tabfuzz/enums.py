"""Enums for tabfuzz API."""

from enum import Enum


class MethodKind(str, Enum):
    """Whether a method returns a similarity or a distance."""

    SIMILARITY = "similarity"
    """Score in [0, 100], higher means more similar"""

    DISTANCE = "distance"
    """Non-negative integer edit count, lower means more similar"""


class Method(str, Enum):
    """Available scoring methods.

    This is the closed set of method identifiers accepted by the scoring
    dispatcher. String values are the identifiers used by the host protocol.

    Example:
        >>> from tabfuzz import Method, score
        >>> score("kitten", "sitting", method=Method.LEVENSHTEIN)
        3
    """

    RATIO = "ratio"
    """Normalized Levenshtein similarity of the whole strings"""

    PARTIAL_RATIO = "partial_ratio"
    """Best ratio of the shorter string against same-length windows of the longer"""

    TOKEN_SORT = "token_sort"
    """Ratio after lower-casing, tokenizing and sorting the tokens"""

    TOKEN_SET = "token_set"
    """Ratio built from the shared and unshared token sets"""

    LEVENSHTEIN = "levenshtein"
    """Levenshtein edit distance (raw count)"""

    NORMALIZED_LEVENSHTEIN = "normalized_levenshtein"
    """Levenshtein distance normalized to a 0-100 similarity"""

    JARO = "jaro"
    """Jaro similarity, good for short strings"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro-Winkler similarity with prefix weighting, excellent for names"""

    HAMMING = "hamming"
    """Hamming distance (equal-length strings only)"""

    OSA = "osa"
    """Optimal String Alignment distance (Levenshtein plus adjacent transpositions)"""

    PARTIAL_TOKEN_SORT = "partial_token_sort"
    """Partial ratio of the sorted token strings"""

    PARTIAL_TOKEN_SET = "partial_token_set"
    """Partial ratio variant of the token set construction"""

    TOKEN_RATIO = "token_ratio"
    """Maximum of token_sort and token_set"""

    PARTIAL_TOKEN_RATIO = "partial_token_ratio"
    """Maximum of partial_token_sort and partial_token_set"""

    WRATIO = "wratio"
    """Weighted combination of the ratio family, chosen by length ratio"""

    QRATIO = "qratio"
    """Ratio over Unicode NFC-normalized text"""

    NORM_OSA = "norm_osa"
    """OSA distance normalized to a 0-100 similarity"""

    NORM_HAMMING = "norm_hamming"
    """Hamming distance normalized to a 0-100 similarity"""

    INDEL = "indel"
    """Insertion/deletion-only edit distance"""

    NORM_INDEL = "norm_indel"
    """Indel distance normalized over the combined length"""

    LCSSEQ = "lcsseq"
    """Longest common subsequence distance"""

    NORM_LCSSEQ = "norm_lcsseq"
    """Longest common subsequence distance normalized to a 0-100 similarity"""

    @property
    def kind(self) -> MethodKind:
        """Whether this method returns a similarity or a distance."""
        if self in _DISTANCE_METHODS:
            return MethodKind.DISTANCE
        return MethodKind.SIMILARITY

    @property
    def higher_is_better(self) -> bool:
        return self.kind is MethodKind.SIMILARITY


_DISTANCE_METHODS = frozenset({
    Method.LEVENSHTEIN,
    Method.HAMMING,
    Method.OSA,
    Method.INDEL,
    Method.LCSSEQ,
})


class Mode(str, Enum):
    """Batch invocation modes of the host protocol."""

    PAIRWISE = "pairwise"
    """Score row-aligned pairs from two equal-length columns"""

    BEST_MATCH = "best_match"
    """Find the best reference entry for every master entry"""


class RowStatus(str, Enum):
    """Per-row outcome of a batch evaluation.

    Rows that fail carry a sentinel value (score -1, best match "") and one of
    the non-OK statuses, so callers can filter failures without losing the
    successful rows.
    """

    OK = "ok"
    LENGTH_MISMATCH = "length_mismatch"
    EMPTY_REFERENCE_LIST = "empty_reference_list"
    ENCODING_ERROR = "encoding_error"


__all__ = ["Method", "MethodKind", "Mode", "RowStatus"]
