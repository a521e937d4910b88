"""Domain layer: documents, queries, results and errors."""

from facet_search.domain.exceptions import (
    DocumentNotFoundError,
    InvalidArgumentError,
    OperationCancelledError,
    SearchEngineError,
)
from facet_search.domain.model import Document, DocumentUpdate, FacetItem, Query, Results, SortField


__all__ = [
    "Document",
    "DocumentNotFoundError",
    "DocumentUpdate",
    "FacetItem",
    "InvalidArgumentError",
    "OperationCancelledError",
    "Query",
    "Results",
    "SearchEngineError",
    "SortField",
]
