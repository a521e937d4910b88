"""Facet aggregation over a result set."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable, Sequence

from facet_search.domain.model import Document, FacetItem


def _type_values(doc: Document) -> Iterable[str]:
    return (doc.type,) if doc.type else ()


def _tag_values(doc: Document) -> Iterable[str]:
    return doc.tags


def _index_values(doc: Document) -> Iterable[str]:
    return (doc.index,)


FACET_EXTRACTORS: dict[str, Callable[[Document], Iterable[str]]] = {
    "type": _type_values,
    "tags": _tag_values,
    "index": _index_values,
}


def count_facet(docs: Iterable[Document], field: str) -> list[FacetItem]:
    """Count values of ``field`` across ``docs``, most frequent first.

    Equal counts keep the order in which values were first seen. Unknown
    fields produce an empty list.
    """
    extractor = FACET_EXTRACTORS.get(field)
    if extractor is None:
        return []

    counts: Counter[str] = Counter()
    for doc in docs:
        counts.update(extractor(doc))
    return [FacetItem(value=value, count=count) for value, count in counts.most_common()]


def calculate_facets(docs: Sequence[Document], fields: Sequence[str]) -> dict[str, list[FacetItem]]:
    """Compute every requested facet over the same result set."""
    return {field: count_facet(docs, field) for field in fields}
