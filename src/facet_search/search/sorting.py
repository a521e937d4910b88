"""Multi-key sorting and pagination of search results."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import timezone
from typing import Any

from facet_search.domain.model import Document, SortField


DEFAULT_PAGE_SIZE = 10


def _timestamp_key(doc: Document) -> float:
    ts = doc.timestamp
    if ts is None:
        return float("-inf")
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.timestamp()


SORT_KEYS: dict[str, Callable[[Document], Any]] = {
    "score": lambda doc: doc.score,
    "timestamp": _timestamp_key,
    "title": lambda doc: doc.title,
}


def apply_sorting(docs: list[Document], sort_fields: Sequence[SortField]) -> list[Document]:
    """Stable sort by each key in order; earlier keys take precedence.

    Unknown fields are ignored so they fall through to the next key.
    """
    result = list(docs)
    # Least significant key first; later stable passes keep it as a tie-breaker.
    for sort_field in reversed(sort_fields):
        key = SORT_KEYS.get(sort_field.field)
        if key is None:
            continue
        result.sort(key=key, reverse=sort_field.descending)
    return result


def normalize_window(from_: int, size: int, default_size: int = DEFAULT_PAGE_SIZE) -> tuple[int, int]:
    """Clamp ``from_`` to >= 0 and default a non-positive ``size``."""
    return max(from_, 0), size if size > 0 else default_size


def paginate(
    docs: Sequence[Document],
    from_: int,
    size: int,
    default_size: int = DEFAULT_PAGE_SIZE,
) -> list[Document]:
    """Return the ``[from_, from_ + size)`` window, empty when past the end."""
    start, page_size = normalize_window(from_, size, default_size)
    if start >= len(docs):
        return []
    return list(docs[start : start + page_size])
