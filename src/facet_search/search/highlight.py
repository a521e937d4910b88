"""Highlighting of query words in result text.

All words are matched in one pass with a case-insensitive alternation of the
escaped words, longest first, so markup inserted for one word is never
matched again by another. The original casing of the matched text is kept
inside the markup.
"""

from __future__ import annotations

from collections.abc import Sequence
import re


DEFAULT_TAG = "mark"


def highlight_terms(text: str, words: Sequence[str], tag: str = DEFAULT_TAG) -> str:
    """Wrap every case-insensitive occurrence of the words in ``<tag>...</tag>``.

    Args:
        text: The text to highlight.
        words: Query words; regex metacharacters are escaped.
        tag: Markup element name used for the wrapper.

    Returns:
        The highlighted text, or ``text`` unchanged when nothing matched.
    """
    unique = sorted({word for word in words if word}, key=len, reverse=True)
    if not text or not unique:
        return text

    pattern = re.compile("|".join(map(re.escape, unique)), re.IGNORECASE)
    return pattern.sub(lambda match: f"<{tag}>{match.group(0)}</{tag}>", text)
