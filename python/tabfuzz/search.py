"""Best-match search: one query against a reference list.

For similarity methods the highest score wins, for distance methods the
lowest. Ties always go to the entry that comes first in the reference list,
so permuting the reference list can only change the winner among entries
with equal scores.

Length-bound pruning skips candidates whose length difference alone proves
they cannot strictly beat the current best. It never changes the result.
"""

from typing import Callable, Dict, Optional, Sequence, Union

from tabfuzz._core import normalized_similarity, preprocess
from tabfuzz._utils import normalize_method
from tabfuzz.enums import Method
from tabfuzz.errors import EmptyReferenceListError, LengthMismatchError
from tabfuzz.results import MatchResult, Score
from tabfuzz.scoring import DEFAULT_PREFIX_WEIGHT, Scorer, get_scorer

_Bound = Callable[[int, int], Score]


def _max_len_bound(len_q: int, len_c: int) -> float:
    return normalized_similarity(abs(len_q - len_c), max(len_q, len_c))


def _sum_len_bound(len_q: int, len_c: int) -> float:
    return normalized_similarity(abs(len_q - len_c), len_q + len_c)


def _length_difference(len_q: int, len_c: int) -> int:
    return abs(len_q - len_c)


# Best score a candidate can reach given only the two lengths
_BOUNDS: Dict[Method, _Bound] = {
    Method.RATIO: _max_len_bound,
    Method.NORMALIZED_LEVENSHTEIN: _max_len_bound,
    Method.NORM_OSA: _max_len_bound,
    Method.NORM_LCSSEQ: _max_len_bound,
    Method.NORM_INDEL: _sum_len_bound,
    Method.LEVENSHTEIN: _length_difference,
    Method.OSA: _length_difference,
    Method.INDEL: _length_difference,
    Method.LCSSEQ: _length_difference,
}


def search_best(
    query: str,
    choices: Sequence[str],
    method: Method,
    scorer: Scorer,
    prune: bool = True,
    originals: Optional[Sequence[str]] = None,
) -> MatchResult:
    """Scan preprocessed choices for the best match of a preprocessed query.

    Args:
        query: Query text, already preprocessed.
        choices: Reference texts, already preprocessed.
        method: Method the scorer implements (decides arg-max vs arg-min).
        scorer: Function returned by :func:`tabfuzz.scoring.get_scorer`.
        prune: Skip candidates that cannot beat the current best by length.
        originals: Reference texts to report in the result (defaults to choices).

    Raises:
        EmptyReferenceListError: If choices is empty.
        LengthMismatchError: If every choice was rejected for its length (Hamming).
    """
    if not choices:
        raise EmptyReferenceListError("reference list is empty")

    higher = method.higher_is_better
    perfect = 100.0 if higher else 0
    bound = _BOUNDS.get(method) if prune else None
    len_q = len(query)

    best_index = -1
    best_score: Optional[Score] = None
    rejected: Optional[LengthMismatchError] = None

    for index, choice in enumerate(choices):
        if bound is not None and best_score is not None:
            limit = bound(len_q, len(choice))
            if (limit <= best_score) if higher else (limit >= best_score):
                continue
        try:
            value = scorer(query, choice)
        except LengthMismatchError as exc:
            rejected = exc
            continue
        if best_score is None or (value > best_score if higher else value < best_score):
            best_index, best_score = index, value
            if value == perfect:
                break

    if best_score is None:
        raise rejected or EmptyReferenceListError("no comparable reference entries")

    reported = originals if originals is not None else choices
    return MatchResult(text=reported[best_index], score=best_score, id=best_index)


def extract_one(
    query: str,
    choices: Sequence[str],
    method: Union[str, Method] = "ratio",
    nocase: bool = False,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
    prune: bool = True,
) -> MatchResult:
    """
    Find the single best match for a query in a list of choices.

    Args:
        query: Query string to match
        choices: Reference strings to search
        method: Scoring method (string or Method enum, default "ratio")
        nocase: Compare case-insensitively
        prefix_weight: Jaro-Winkler prefix weight (default 0.1)
        prune: Use length-bound pruning (does not change the result)

    Returns:
        MatchResult with the original reference text, its score and its
        0-based index in choices.

    Raises:
        UnsupportedMethodError: If the method is unknown.
        EmptyReferenceListError: If choices is empty.
        LengthMismatchError: For Hamming methods when no choice has the
            query's length.

    Example:
        >>> result = extract_one("Gogle", ["Google LLC", "Google Inc"], method="token_set")
        >>> result.text, result.id
        ('Google LLC', 0)
    """
    resolved = normalize_method(method)
    scorer = get_scorer(resolved, prefix_weight)
    processed = [preprocess(choice, nocase) for choice in choices]
    return search_best(
        preprocess(query, nocase),
        processed,
        resolved,
        scorer,
        prune=prune,
        originals=choices,
    )


__all__ = ["extract_one", "search_best"]
