"""Text normalization utilities for accent- and case-insensitive term matching."""

import unicodedata
from typing import Any


def _strip_marks(text: str) -> str:
    """Decompose text and drop every combining mark code point."""
    decomposed = unicodedata.normalize('NFKD', text)
    return ''.join(ch for ch in decomposed if not unicodedata.category(ch).startswith('M'))


def normalize(text: Any) -> str:
    """
    Return the canonical form of a string.

    Applies NFKD decomposition, strips combining marks and case-folds the
    result. ``None`` is treated as the empty string and other values are
    coerced with ``str()``.

    Args:
        text: Input text to normalize

    Returns:
        Canonical form of the text
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)
    if not text:
        return ""

    normalized = _strip_marks(text).casefold()

    # casefold() can reintroduce combining marks (U+0130) and NFKD can
    # reintroduce capitals (U+210C), so repeat until the form is stable
    while True:
        again = _strip_marks(normalized).casefold()
        if again == normalized:
            return normalized
        normalized = again


def sort_key(text: Any) -> str:
    """Key used to order terms alphabetically by canonical form."""
    return normalize(text.strip() if isinstance(text, str) else text)


class TextNormalizer:
    """Handles text normalization for consistent term comparison."""

    def normalize(self, text: Any) -> str:
        """Return the canonical form of ``text``."""
        return normalize(text)

    def sort_key(self, text: Any) -> str:
        return sort_key(text)
