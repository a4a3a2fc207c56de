"""Keyword matching over food names."""

import unicodedata
from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def fold(text: str) -> str:
    """Lowercase text and strip combining accents."""
    decomposed = unicodedata.normalize("NFD", text.lower())
    return "".join(char for char in decomposed if unicodedata.category(char) != "Mn")


def contains_any(name: str, keywords: Iterable[str]) -> bool:
    """Return whether any keyword occurs in the name, ignoring case and accents."""
    folded = fold(name)
    return any(fold(keyword) in folded for keyword in keywords)


def first_match(name: str, table: Iterable[tuple[str, T]]) -> T | None:
    """Return the value of the first pattern found in the name, in table order."""
    folded = fold(name)
    for pattern, value in table:
        if fold(pattern) in folded:
            return value
    return None
