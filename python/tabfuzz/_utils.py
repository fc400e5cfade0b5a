"""Internal utilities for tabfuzz."""

import math
from typing import Any, Union

from tabfuzz.enums import Method, Mode
from tabfuzz.errors import EncodingError, UnsupportedMethodError, ValidationError

# Alternate spellings accepted by the host protocol
METHOD_ALIASES = {
    "norm_lev": Method.NORMALIZED_LEVENSHTEIN,
    "normalized_lev": Method.NORMALIZED_LEVENSHTEIN,
    "token_sort_ratio": Method.TOKEN_SORT,
    "token_set_ratio": Method.TOKEN_SET,
}

MODE_ALIASES = {
    "match": Mode.BEST_MATCH,
}

MAX_PREFIX_WEIGHT = 0.25


def normalize_method(method: Union[str, Method]) -> Method:
    """Convert a method name to its Method enum member.

    Args:
        method: Either a Method enum value or a string method name
            (case-insensitive; aliases such as ``"norm_lev"`` are accepted).

    Returns:
        The matching Method member.

    Raises:
        UnsupportedMethodError: If the method name is not recognized.
        TypeError: If method is not a string or Method enum.

    Example:
        >>> normalize_method(Method.JARO_WINKLER)
        <Method.JARO_WINKLER: 'jaro_winkler'>
        >>> normalize_method("norm_lev")
        <Method.NORMALIZED_LEVENSHTEIN: 'normalized_levenshtein'>
    """
    if isinstance(method, Method):
        return method

    if isinstance(method, str):
        name = method.strip().lower()
        if name in METHOD_ALIASES:
            return METHOD_ALIASES[name]
        try:
            return Method(name)
        except ValueError:
            valid = sorted({m.value for m in Method} | set(METHOD_ALIASES))
            raise UnsupportedMethodError(
                f"Unknown method: '{method}'. Valid options: {valid}"
            ) from None

    raise TypeError(f"method must be str or Method enum, got {type(method).__name__}")


def normalize_mode(mode: Union[str, Mode]) -> Mode:
    """Convert a mode name (``"pairwise"``, ``"best_match"`` or ``"match"``) to Mode."""
    if isinstance(mode, Mode):
        return mode
    if isinstance(mode, str):
        name = mode.strip().lower()
        if name in MODE_ALIASES:
            return MODE_ALIASES[name]
        try:
            return Mode(name)
        except ValueError:
            raise ValidationError(
                f"Unknown mode: '{mode}'. Valid options: pairwise, best_match"
            ) from None
    raise TypeError(f"mode must be str or Mode enum, got {type(mode).__name__}")


def validate_prefix_weight(prefix_weight: float) -> float:
    """Check that a Jaro-Winkler prefix weight keeps scores within [0, 100]."""
    if isinstance(prefix_weight, bool) or not isinstance(prefix_weight, (int, float)):
        raise ValidationError(
            f"prefix_weight must be a number, got {type(prefix_weight).__name__}"
        )
    if math.isnan(prefix_weight) or not 0.0 <= prefix_weight <= MAX_PREFIX_WEIGHT:
        raise ValidationError(
            f"prefix_weight must be in range [0.0, {MAX_PREFIX_WEIGHT}], got {prefix_weight}"
        )
    return float(prefix_weight)


def coerce_text(value: Any) -> str:
    """Convert a host cell to text.

    ``None`` becomes the empty string, ``bytes`` are decoded as UTF-8 and
    anything else goes through ``str()``.

    Raises:
        EncodingError: If bytes are not valid UTF-8 or the string holds
            unpaired surrogates.
    """
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EncodingError(f"cell is not valid UTF-8: {exc}") from exc
    text = value if isinstance(value, str) else str(value)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodingError(f"cell contains invalid code points: {exc}") from exc
    return text


__all__ = [
    "METHOD_ALIASES",
    "MAX_PREFIX_WEIGHT",
    "coerce_text",
    "normalize_method",
    "normalize_mode",
    "validate_prefix_weight",
]
