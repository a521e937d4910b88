"""Candidate filtering by document type and tags."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from facet_search.domain.model import Document


def has_any_tag(doc_tags: Iterable[str], query_tags: Iterable[str]) -> bool:
    """Return True when the two tag collections share at least one value."""
    tag_set = set(doc_tags)
    return any(tag in tag_set for tag in query_tags)


def filter_candidates(
    candidates: Iterable[Document],
    doc_type: str = "",
    tags: Sequence[str] = (),
) -> list[Document]:
    """Apply the exact ``type`` filter and the any-of ``tags`` filter.

    Empty filter values match everything.
    """
    filtered = []
    for doc in candidates:
        if doc_type and doc.type != doc_type:
            continue
        if tags and not has_any_tag(doc.tags, tags):
            continue
        filtered.append(doc)
    return filtered
