"""Tokenization and normalization helpers for the token-based ratios."""

import unicodedata
from typing import Iterable, List


def tokenize(text: str) -> List[str]:
    """Split text into lower-cased tokens on runs of whitespace.

    Empty tokens are discarded, so leading, trailing and repeated whitespace
    never produce tokens.

    Example:
        >>> tokenize("  John   SMITH ")
        ['john', 'smith']
    """
    return text.lower().split()


def sorted_join(tokens: Iterable[str]) -> str:
    """Join tokens in ascending codepoint order with single spaces."""
    return " ".join(sorted(tokens))


def unique_intersection(a: Iterable[str], b: Iterable[str]) -> List[str]:
    """Tokens present in both sequences, de-duplicated and sorted."""
    return sorted(set(a) & set(b))


def unique_difference(a: Iterable[str], b: Iterable[str]) -> List[str]:
    """Tokens of ``a`` that do not occur in ``b``, de-duplicated and sorted."""
    return sorted(set(a) - set(b))


def unique_union(a: Iterable[str], b: Iterable[str]) -> List[str]:
    """Tokens present in either sequence, de-duplicated and sorted."""
    return sorted(set(a) | set(b))


def preprocess(text: str, nocase: bool = False) -> str:
    """Apply the ``nocase`` option: lower-case the whole string before scoring."""
    return text.lower() if nocase else text


def nfc(text: str) -> str:
    """Unicode NFC normalization (composed form)."""
    return unicodedata.normalize("NFC", text)


__all__ = [
    "nfc",
    "preprocess",
    "sorted_join",
    "tokenize",
    "unique_difference",
    "unique_intersection",
    "unique_union",
]
