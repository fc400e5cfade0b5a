"""Exception hierarchy for tabfuzz.

Invocation-level errors (bad method name, malformed arguments) abort a call
before any row is processed. Row-level errors (``LengthMismatchError``,
``EmptyReferenceListError``, ``EncodingError``) are raised by the single-pair
and single-query functions; the batch layer converts them into per-row
statuses so a batch never aborts because of one row.
"""


class TabFuzzError(Exception):
    """Base exception for all tabfuzz errors."""


class ValidationError(TabFuzzError, ValueError):
    """Raised when input validation fails (invalid options, malformed protocol)."""


class UnsupportedMethodError(TabFuzzError, ValueError):
    """Raised when an unknown scoring method identifier is specified."""


class LengthMismatchError(TabFuzzError):
    """Raised when a method requires equal-length strings (Hamming)."""

    def __init__(self, len_a: int, len_b: int):
        self.len_a = len_a
        self.len_b = len_b
        super().__init__(
            f"strings must have equal length for hamming, got {len_a} and {len_b}"
        )


class EmptyReferenceListError(TabFuzzError):
    """Raised when a best-match search is given no reference entries."""


class EncodingError(TabFuzzError):
    """Raised when a text cell cannot be interpreted as valid Unicode text."""


__all__ = [
    "TabFuzzError",
    "ValidationError",
    "UnsupportedMethodError",
    "LengthMismatchError",
    "EmptyReferenceListError",
    "EncodingError",
]
