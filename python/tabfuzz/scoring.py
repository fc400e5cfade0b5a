"""Scoring dispatcher: method identifier -> ``(str, str) -> score`` function.

The table below is the single place where a Method is bound to its algorithm.
It is read-only after import, so lookups are safe from any thread.

Example usage:
    >>> from tabfuzz.scoring import get_scorer, score
    >>> get_scorer("levenshtein")("kitten", "sitting")
    3
    >>> score("John SMITH", "john smith", method="ratio", nocase=True)
    100.0
"""

from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, Union

from tabfuzz import _core
from tabfuzz._utils import normalize_method, validate_prefix_weight
from tabfuzz.enums import Method
from tabfuzz.results import Score

Scorer = Callable[[str, str], Score]

DEFAULT_PREFIX_WEIGHT = 0.1

_SCORERS: Dict[Method, Scorer] = {
    Method.RATIO: _core.ratio,
    Method.PARTIAL_RATIO: _core.partial_ratio,
    Method.TOKEN_SORT: _core.token_sort_ratio,
    Method.TOKEN_SET: _core.token_set_ratio,
    Method.LEVENSHTEIN: _core.levenshtein,
    Method.NORMALIZED_LEVENSHTEIN: _core.normalized_levenshtein,
    Method.JARO: _core.jaro,
    Method.JARO_WINKLER: _core.jaro_winkler,
    Method.HAMMING: _core.hamming_distance,
    Method.OSA: _core.osa_distance,
    Method.PARTIAL_TOKEN_SORT: _core.partial_token_sort_ratio,
    Method.PARTIAL_TOKEN_SET: _core.partial_token_set_ratio,
    Method.TOKEN_RATIO: _core.token_ratio,
    Method.PARTIAL_TOKEN_RATIO: _core.partial_token_ratio,
    Method.WRATIO: _core.wratio,
    Method.QRATIO: _core.qratio,
    Method.NORM_OSA: _core.norm_osa,
    Method.NORM_HAMMING: _core.norm_hamming,
    Method.INDEL: _core.indel_distance,
    Method.NORM_INDEL: _core.norm_indel,
    Method.LCSSEQ: _core.lcs_seq_distance,
    Method.NORM_LCSSEQ: _core.norm_lcsseq,
}


@dataclass(frozen=True)
class ScoringOptions:
    """Method options carried by an invocation.

    Attributes:
        nocase: Lower-case both strings before scoring.
        prefix_weight: Jaro-Winkler prefix weight, in [0.0, 0.25].
    """

    nocase: bool = False
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT

    def __post_init__(self) -> None:
        validate_prefix_weight(self.prefix_weight)


def get_scorer(
    method: Union[str, Method],
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
) -> Scorer:
    """Look up the scoring function for a method.

    Args:
        method: Method identifier (string or Method enum).
        prefix_weight: Prefix weight bound into the Jaro-Winkler scorer.

    Returns:
        A function ``(a, b) -> score``. Similarity methods return floats in
        [0, 100], distance methods return non-negative ints.

    Raises:
        UnsupportedMethodError: If the method is unknown.
        ValidationError: If prefix_weight is out of range.
    """
    resolved = normalize_method(method)
    if resolved is Method.JARO_WINKLER:
        weight = validate_prefix_weight(prefix_weight)
        if weight != DEFAULT_PREFIX_WEIGHT:
            return partial(_core.jaro_winkler, prefix_weight=weight)
    return _SCORERS[resolved]


def score(
    a: str,
    b: str,
    method: Union[str, Method] = "ratio",
    nocase: bool = False,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
) -> Score:
    """Score a single pair of strings.

    Args:
        a: First string
        b: Second string
        method: Scoring method (string or Method enum, default "ratio").
        nocase: Compare case-insensitively.
        prefix_weight: Jaro-Winkler prefix weight (default 0.1).

    Returns:
        Similarity in [0, 100] or a distance, depending on the method.

    Raises:
        UnsupportedMethodError: If the method is unknown.
        LengthMismatchError: For Hamming methods on unequal-length strings.

    Example:
        >>> score("kitten", "sitting", method="levenshtein")
        3
        >>> round(score("kitten", "sitting"), 4)
        57.1429
    """
    scorer = get_scorer(method, prefix_weight)
    return scorer(_core.preprocess(a, nocase), _core.preprocess(b, nocase))


def registered_methods() -> list:
    """Methods with a bound scoring function, in declaration order."""
    return [method for method in Method if method in _SCORERS]


__all__ = [
    "DEFAULT_PREFIX_WEIGHT",
    "Scorer",
    "ScoringOptions",
    "get_scorer",
    "registered_methods",
    "score",
]
