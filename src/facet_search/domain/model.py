"""Domain models for indexing and search.

Documents and queries are plain Pydantic models. Value objects that never
change after construction (sort keys, facet buckets) are frozen; documents
and queries stay mutable so the engine and the query builder can fill in
defaults.
"""

from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """A searchable document.

    ``score`` is only meaningful on documents returned from a search.
    """

    id: str = ""
    index: str = ""
    type: str = ""
    title: str = ""
    content: str = ""
    tags: list[str] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime | None = None
    score: float = 0.0


class SortField(BaseModel):
    """A single sort key. Any order other than ``desc`` sorts ascending."""

    model_config = ConfigDict(frozen=True)

    field: str
    order: str = "asc"

    @property
    def descending(self) -> bool:
        return self.order == "desc"


class Query(BaseModel):
    """A search request.

    An empty ``text`` disables ranking: every document passing the
    index/type/tag filters is returned unscored. ``filters`` is accepted for
    forward compatibility and ignored by the scoring path.
    """

    model_config = ConfigDict(populate_by_name=True)

    text: str = ""
    index: str = ""
    type: str = ""
    tags: list[str] = Field(default_factory=list)
    filters: dict[str, Any] = Field(default_factory=dict)
    from_: int = Field(default=0, alias="from")
    size: int = 10
    sort: list[SortField] = Field(default_factory=list)
    highlight: bool = False
    facets: list[str] = Field(default_factory=list)


class FacetItem(BaseModel):
    """One value and its document count within a facet."""

    model_config = ConfigDict(frozen=True)

    value: str
    count: int


class Results(BaseModel):
    """A page of search hits plus the facet counts for the whole result set."""

    total: int
    hits: list[Document] = Field(default_factory=list)
    facets: dict[str, list[FacetItem]] = Field(default_factory=dict)
    took: timedelta = timedelta(0)
    query: str = ""


class DocumentUpdate(BaseModel):
    """Partial update for a stored document.

    Fields left as ``None`` are not touched.
    """

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    content: str | None = None
    tags: list[str] | None = None
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_mapping(cls, updates: Mapping[str, Any]) -> "DocumentUpdate":
        """Build an update from a loosely typed mapping.

        Unknown keys and values of the wrong type are skipped so that the
        corresponding field is left unchanged.
        """
        fields: dict[str, Any] = {}
        for key in ("title", "content"):
            value = updates.get(key)
            if isinstance(value, str):
                fields[key] = value

        tags = updates.get("tags")
        if isinstance(tags, list | tuple) and all(isinstance(tag, str) for tag in tags):
            fields["tags"] = list(tags)

        metadata = updates.get("metadata")
        if isinstance(metadata, dict):
            fields["metadata"] = dict(metadata)

        return cls(**fields)

    def apply(self, document: Document) -> None:
        """Write the set fields onto ``document`` in place."""
        if self.title is not None:
            document.title = self.title
        if self.content is not None:
            document.content = self.content
        if self.tags is not None:
            document.tags = list(self.tags)
        if self.metadata is not None:
            document.metadata = dict(self.metadata)
