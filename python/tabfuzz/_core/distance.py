"""Edit distances and their normalized similarities.

All distances operate on Unicode code points. Similarities are on the 0-100
scale; two empty strings are identical (similarity 100).
"""

from typing import List

from tabfuzz.errors import LengthMismatchError


def levenshtein(a: str, b: str) -> int:
    """
    Compute Levenshtein (edit) distance between two strings.

    The minimum number of single-character insertions, deletions and
    substitutions (unit cost each) needed to turn ``a`` into ``b``.

    Complexity:
        Time: O(m*n). Space: O(min(m, n)) using two rows of the DP table.

    Example:
        >>> levenshtein("kitten", "sitting")
        3
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i]
        for j, cb in enumerate(b, 1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (ca != cb),
                )
            )
        previous = current
    return previous[-1]


def osa_distance(a: str, b: str) -> int:
    """
    Compute Optimal String Alignment distance.

    Levenshtein plus transposition of two adjacent characters, where no
    substring is edited more than once. Unlike true Damerau-Levenshtein this
    is not a metric: ``osa("ca", "abc") == 3`` while the triangle inequality
    would allow 2.

    Example:
        >>> osa_distance("ab", "ba")
        1
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    two_back: List[int] = []
    previous = list(range(len(b) + 1))
    for i in range(1, len(a) + 1):
        current = [i] + [0] * len(b)
        for j in range(1, len(b) + 1):
            cost = a[i - 1] != b[j - 1]
            best = min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost)
            if i > 1 and j > 1 and a[i - 1] == b[j - 2] and a[i - 2] == b[j - 1]:
                best = min(best, two_back[j - 2] + 1)
            current[j] = best
        two_back, previous = previous, current
    return previous[-1]


def hamming_distance(a: str, b: str) -> int:
    """
    Count positions at which two equal-length strings differ.

    Raises:
        LengthMismatchError: If the strings have different lengths.

    Example:
        >>> hamming_distance("karolin", "kathrin")
        3
    """
    if len(a) != len(b):
        raise LengthMismatchError(len(a), len(b))
    return sum(ca != cb for ca, cb in zip(a, b))


def lcs_seq_length(a: str, b: str) -> int:
    """Length of the longest common subsequence."""
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return 0
    previous = [0] * (len(b) + 1)
    for ca in a:
        current = [0]
        for j, cb in enumerate(b, 1):
            if ca == cb:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def indel_distance(a: str, b: str) -> int:
    """Edit distance allowing only insertions and deletions."""
    return len(a) + len(b) - 2 * lcs_seq_length(a, b)


def lcs_seq_distance(a: str, b: str) -> int:
    """``max(len(a), len(b))`` minus the longest common subsequence length."""
    return max(len(a), len(b)) - lcs_seq_length(a, b)


def normalized_similarity(distance: int, max_len: int) -> float:
    """
    Convert an edit distance to a similarity score in [0, 100].

    ``100 * (1 - distance / max(max_len, 1))``, clamped. A zero distance over
    two empty strings gives 100.

    Example:
        >>> round(normalized_similarity(3, 7), 4)
        57.1429
    """
    score = 100.0 * (1.0 - distance / max(max_len, 1))
    return min(100.0, max(0.0, score))


def normalized_levenshtein(a: str, b: str) -> float:
    return normalized_similarity(levenshtein(a, b), max(len(a), len(b)))


def norm_osa(a: str, b: str) -> float:
    return normalized_similarity(osa_distance(a, b), max(len(a), len(b)))


def norm_hamming(a: str, b: str) -> float:
    """Normalized Hamming similarity; raises LengthMismatchError like hamming_distance."""
    return normalized_similarity(hamming_distance(a, b), len(a))


def norm_indel(a: str, b: str) -> float:
    return normalized_similarity(indel_distance(a, b), len(a) + len(b))


def norm_lcsseq(a: str, b: str) -> float:
    return normalized_similarity(lcs_seq_distance(a, b), max(len(a), len(b)))


__all__ = [
    "hamming_distance",
    "indel_distance",
    "lcs_seq_distance",
    "lcs_seq_length",
    "levenshtein",
    "norm_hamming",
    "norm_indel",
    "norm_lcsseq",
    "norm_osa",
    "normalized_levenshtein",
    "normalized_similarity",
    "osa_distance",
]
