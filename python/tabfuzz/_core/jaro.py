"""Jaro and Jaro-Winkler similarity on the 0-100 scale."""

WINKLER_THRESHOLD = 0.7
MAX_PREFIX_LENGTH = 4


def _jaro_fraction(a: str, b: str) -> float:
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0

    window = max(0, max(len(a), len(b)) // 2 - 1)
    a_matched = [False] * len(a)
    b_matched = [False] * len(b)

    matches = 0
    for i, ca in enumerate(a):
        lo = max(0, i - window)
        hi = min(len(b), i + window + 1)
        for j in range(lo, hi):
            if not b_matched[j] and b[j] == ca:
                a_matched[i] = b_matched[j] = True
                matches += 1
                break

    if matches == 0:
        return 0.0

    # Half the matched characters that appear in a different order
    out_of_order = 0
    j = 0
    for i, ca in enumerate(a):
        if not a_matched[i]:
            continue
        while not b_matched[j]:
            j += 1
        if ca != b[j]:
            out_of_order += 1
        j += 1
    transpositions = out_of_order // 2

    return (
        matches / len(a)
        + matches / len(b)
        + (matches - transpositions) / matches
    ) / 3.0


def jaro(a: str, b: str) -> float:
    """
    Compute Jaro similarity (0 to 100).

    Characters match when they are equal and no further apart than
    ``max(len(a), len(b)) // 2 - 1`` positions. Two empty strings score 100,
    exactly one empty string scores 0.

    Example:
        >>> round(jaro("MARTHA", "MARHTA"), 4)
        94.4444
    """
    return _jaro_fraction(a, b) * 100.0


def jaro_winkler(a: str, b: str, prefix_weight: float = 0.1) -> float:
    """
    Compute Jaro-Winkler similarity (0 to 100).

    Boosts the Jaro similarity by ``l * prefix_weight * (1 - jaro)`` where
    ``l`` is the common prefix length capped at 4. The boost only applies
    when the Jaro similarity exceeds 0.7.

    Args:
        a: First string
        b: Second string
        prefix_weight: Weight given to the common prefix (default 0.1).
            Callers validate the range; values above 0.25 could exceed 100.

    Example:
        >>> round(jaro_winkler("MARTHA", "MARHTA"), 4)
        96.1111
    """
    sim = _jaro_fraction(a, b)
    if sim > WINKLER_THRESHOLD:
        prefix = 0
        for ca, cb in zip(a[:MAX_PREFIX_LENGTH], b[:MAX_PREFIX_LENGTH]):
            if ca != cb:
                break
            prefix += 1
        sim += prefix * prefix_weight * (1.0 - sim)
    return min(sim, 1.0) * 100.0


__all__ = ["MAX_PREFIX_LENGTH", "WINKLER_THRESHOLD", "jaro", "jaro_winkler"]
