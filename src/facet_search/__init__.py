"""In-memory full-text search with facets, highlighting and multi-key sorting."""

from facet_search.config import Settings
from facet_search.domain import (
    Document,
    DocumentNotFoundError,
    DocumentUpdate,
    FacetItem,
    InvalidArgumentError,
    OperationCancelledError,
    Query,
    Results,
    SearchEngineError,
    SortField,
)
from facet_search.engine import AbstractSearchEngine, InMemorySearchEngine
from facet_search.query_builder import QueryBuilder


__all__ = [
    "AbstractSearchEngine",
    "Document",
    "DocumentNotFoundError",
    "DocumentUpdate",
    "FacetItem",
    "InMemorySearchEngine",
    "InvalidArgumentError",
    "OperationCancelledError",
    "Query",
    "QueryBuilder",
    "Results",
    "SearchEngineError",
    "Settings",
    "SortField",
]
