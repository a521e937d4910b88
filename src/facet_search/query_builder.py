"""Fluent construction of search queries."""

from __future__ import annotations

from facet_search.domain.model import Query, SortField


class QueryBuilder:
    """Accumulates query options and produces a ``Query``.

    The builder does no validation; the engine normalizes pagination at
    execution time.

    Example:
        query = (
            QueryBuilder("go concurrency")
            .with_index("articles")
            .with_sort("timestamp", "desc")
            .with_facets("tags")
            .build()
        )
    """

    def __init__(self, text: str = ""):
        self._query = Query(text=text, size=10)

    def with_index(self, index: str) -> QueryBuilder:
        self._query.index = index
        return self

    def with_type(self, doc_type: str) -> QueryBuilder:
        self._query.type = doc_type
        return self

    def with_tags(self, *tags: str) -> QueryBuilder:
        """Replace the any-of tag filter."""
        self._query.tags = list(tags)
        return self

    def with_pagination(self, from_: int, size: int) -> QueryBuilder:
        self._query.from_ = from_
        self._query.size = size
        return self

    def with_sort(self, field: str, order: str = "asc") -> QueryBuilder:
        """Append a sort key; earlier keys take precedence."""
        self._query.sort.append(SortField(field=field, order=order))
        return self

    def with_highlight(self, enabled: bool = True) -> QueryBuilder:
        self._query.highlight = enabled
        return self

    def with_facets(self, *fields: str) -> QueryBuilder:
        """Replace the list of facet fields."""
        self._query.facets = list(fields)
        return self

    def build(self) -> Query:
        """Return an independent copy of the accumulated query."""
        return self._query.model_copy(deep=True)
