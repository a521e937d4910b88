"""Errors raised by search engine operations."""


class SearchEngineError(Exception):
    """Base error for search engine operations."""


class DocumentNotFoundError(SearchEngineError, KeyError):
    """Raised when an operation targets a document id that is not stored."""

    def __init__(self, doc_id: str):
        self.doc_id = doc_id
        super().__init__(f"document not found: {doc_id}")

    def __str__(self) -> str:
        # KeyError.__str__ would quote the message
        return f"document not found: {self.doc_id}"


class InvalidArgumentError(SearchEngineError, ValueError):
    """Raised when a document or query is missing a required value."""


class OperationCancelledError(SearchEngineError):
    """Raised when the caller's cancel event is already set on entry."""
