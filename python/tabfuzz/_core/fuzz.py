"""Ratio family: whole-string, partial and token-based ratios.

Every ratio is built on the normalized Levenshtein similarity and returns a
score between 0 and 100. Two empty inputs score 100 and exactly one empty
input scores 0; for the token ratios "empty" means "no tokens".
"""

from typing import Callable, Optional, Tuple

from tabfuzz._core.distance import levenshtein, normalized_similarity
from tabfuzz._core.tokens import (
    nfc,
    sorted_join,
    tokenize,
    unique_difference,
    unique_intersection,
)

_Ratio = Callable[[str, str], float]


def _empty_score(a: str, b: str) -> Optional[float]:
    if not a and not b:
        return 100.0
    if not a or not b:
        return 0.0
    return None


def ratio(a: str, b: str) -> float:
    """
    Compute basic similarity ratio (Levenshtein-based).

    Example:
        >>> ratio("hello", "hallo")
        80.0
    """
    return normalized_similarity(levenshtein(a, b), max(len(a), len(b)))


def partial_ratio(a: str, b: str) -> float:
    """
    Compute best partial match ratio between two strings.

    Slides the shorter string across the longer one and returns the best
    ratio against any window of the same length. Equal-length inputs reduce
    to :func:`ratio`.

    Example:
        >>> partial_ratio("test", "this is a test!")
        100.0
    """
    empty = _empty_score(a, b)
    if empty is not None:
        return empty
    if len(a) == len(b):
        return ratio(a, b)

    short, long_ = (a, b) if len(a) < len(b) else (b, a)
    width = len(short)
    best = 0.0
    for start in range(len(long_) - width + 1):
        score = ratio(short, long_[start:start + width])
        if score > best:
            best = score
            if best == 100.0:
                break
    return best


def token_sort_ratio(a: str, b: str) -> float:
    """
    Compute similarity after tokenizing and sorting both strings.

    Example:
        >>> token_sort_ratio("fuzzy wuzzy", "Wuzzy Fuzzy")
        100.0
    """
    return _token_sort(a, b, ratio)


def partial_token_sort_ratio(a: str, b: str) -> float:
    return _token_sort(a, b, partial_ratio)


def _token_sort(a: str, b: str, scorer: _Ratio) -> float:
    left = sorted_join(tokenize(a))
    right = sorted_join(tokenize(b))
    empty = _empty_score(left, right)
    if empty is not None:
        return empty
    return scorer(left, right)


def _token_set_candidates(a: str, b: str) -> Tuple[str, str, str]:
    tokens_a = tokenize(a)
    tokens_b = tokenize(b)
    intersection = " ".join(unique_intersection(tokens_a, tokens_b))
    diff_a = " ".join(unique_difference(tokens_a, tokens_b))
    diff_b = " ".join(unique_difference(tokens_b, tokens_a))
    combined_a = " ".join(part for part in (intersection, diff_a) if part)
    combined_b = " ".join(part for part in (intersection, diff_b) if part)
    return intersection, combined_a, combined_b


def _token_set(a: str, b: str, scorer: _Ratio) -> float:
    intersection, combined_a, combined_b = _token_set_candidates(a, b)
    empty = _empty_score(combined_a, combined_b)
    if empty is not None:
        return empty
    # Without shared tokens the intersection would only add 0 scores
    if not intersection:
        return scorer(combined_a, combined_b)
    return max(
        scorer(intersection, combined_a),
        scorer(intersection, combined_b),
        scorer(combined_a, combined_b),
    )


def token_set_ratio(a: str, b: str) -> float:
    """
    Compute set-based token similarity.

    Builds the sorted intersection of the two token sets and the two
    "intersection + own remaining tokens" strings, and returns the best
    pairwise ratio among them. Shared tokens dominate the score regardless of
    extra or missing tokens.

    Example:
        >>> token_set_ratio("fuzzy was a bear", "fuzzy fuzzy was a bear")
        100.0
    """
    return _token_set(a, b, ratio)


def partial_token_set_ratio(a: str, b: str) -> float:
    return _token_set(a, b, partial_ratio)


def token_ratio(a: str, b: str) -> float:
    """Best of :func:`token_sort_ratio` and :func:`token_set_ratio`."""
    return max(token_sort_ratio(a, b), token_set_ratio(a, b))


def partial_token_ratio(a: str, b: str) -> float:
    """Best of the partial token sort and partial token set ratios."""
    return max(partial_token_sort_ratio(a, b), partial_token_set_ratio(a, b))


def qratio(a: str, b: str) -> float:
    """
    Compute similarity ratio after Unicode NFC normalization.

    Equivalent Unicode representations (e.g. a precomposed accent versus a
    base letter plus combining accent) compare as identical.
    """
    return ratio(nfc(a), nfc(b))


def wratio(a: str, b: str) -> float:
    """
    Compute weighted ratio using the best method for the input.

    Strings of similar length (length ratio below 1.5) use the best of the
    full ratio and the token ratio scaled by 0.95. Otherwise partial ratios
    are used, scaled by 0.9, or by 0.6 when one string is at least eight
    times longer than the other.
    """
    empty = _empty_score(a, b)
    if empty is not None:
        return empty

    base = ratio(a, b)
    len_ratio = max(len(a), len(b)) / min(len(a), len(b))
    if len_ratio < 1.5:
        return max(base, token_ratio(a, b) * 0.95)

    partial_scale = 0.9 if len_ratio < 8.0 else 0.6
    return max(
        base,
        partial_ratio(a, b) * partial_scale,
        partial_token_ratio(a, b) * partial_scale * 0.95,
    )


__all__ = [
    "partial_ratio",
    "partial_token_ratio",
    "partial_token_set_ratio",
    "partial_token_sort_ratio",
    "qratio",
    "ratio",
    "token_ratio",
    "token_set_ratio",
    "token_sort_ratio",
    "wratio",
]
