"""Search engine abstraction and the in-memory implementation.

``AbstractSearchEngine`` is the stable operation set callers program
against; ``InMemorySearchEngine`` keeps every document in process memory.

The in-memory engine owns two maps kept consistent under one reader/writer
lock:

- the document store, ``id -> Document``
- the index buckets, ``index name -> id -> Document``

Mutations (index, delete, delete_index, update_document) hold the write lock
for their whole duration, reads (search, get_document, count, list_indices)
hold the read lock. Callers only ever receive copies of stored documents.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from contextlib import nullcontext
from datetime import datetime, timedelta, timezone
import logging
import threading
import time
from typing import Any

from facet_search.concurrency import ReadWriteLock
from facet_search.config import Settings
from facet_search.domain.exceptions import DocumentNotFoundError, InvalidArgumentError, OperationCancelledError
from facet_search.domain.model import Document, DocumentUpdate, Query, Results
from facet_search.observability.tracing import create_span
from facet_search.search.facets import calculate_facets
from facet_search.search.filters import filter_candidates
from facet_search.search.highlight import highlight_terms
from facet_search.search.scoring import rank_by_score, score_document, tokenize
from facet_search.search.sorting import apply_sorting, paginate


logger = logging.getLogger(__name__)


class AbstractSearchEngine(ABC):
    """Operations every search backend provides.

    Every method accepts an optional ``cancel`` event. Implementations check
    it on entry only; a long-running scan is not interrupted.
    """

    @abstractmethod
    def index(self, doc: Document, *, cancel: threading.Event | None = None) -> None:
        """Add or replace a document.

        Raises:
            InvalidArgumentError: ``doc.id`` is empty.
        """
        raise NotImplementedError

    @abstractmethod
    def search(self, query: Query, *, cancel: threading.Event | None = None) -> Results:
        """Execute a query and return one page of hits plus facet counts."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, doc_id: str, *, cancel: threading.Event | None = None) -> None:
        """Remove a document.

        Raises:
            DocumentNotFoundError: No document has this id.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_index(self, index: str, *, cancel: threading.Event | None = None) -> None:
        """Remove every document in ``index``. Unknown indices are ignored."""
        raise NotImplementedError

    @abstractmethod
    def get_document(self, doc_id: str, *, cancel: threading.Event | None = None) -> Document:
        """Fetch a document by id.

        Raises:
            DocumentNotFoundError: No document has this id.
        """
        raise NotImplementedError

    @abstractmethod
    def update_document(
        self,
        doc_id: str,
        updates: DocumentUpdate | Mapping[str, Any],
        *,
        cancel: threading.Event | None = None,
    ) -> None:
        """Patch title, content, tags or metadata and refresh the timestamp.

        Raises:
            DocumentNotFoundError: No document has this id.
        """
        raise NotImplementedError


def _check_cancelled(cancel: threading.Event | None) -> None:
    if cancel is not None and cancel.is_set():
        raise OperationCancelledError("operation cancelled before start")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemorySearchEngine(AbstractSearchEngine):
    """Search engine holding all documents in memory.

    Instances share nothing, so tests can create and drop engines freely.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()
        self._documents: dict[str, Document] = {}
        self._indices: dict[str, dict[str, Document]] = {}
        self._lock = ReadWriteLock()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def index(self, doc: Document, *, cancel: threading.Event | None = None) -> None:
        _check_cancelled(cancel)
        if not doc.id:
            raise InvalidArgumentError("document ID is required")

        stored = doc.model_copy(deep=True)
        if not stored.index:
            stored.index = self.settings.default_index
        if stored.timestamp is None:
            stored.timestamp = _utc_now()

        with self._lock.write_locked():
            previous = self._documents.get(stored.id)
            if previous is not None and previous.index != stored.index:
                if self.settings.migrate_index_on_reindex:
                    self._remove_from_bucket(previous.index, stored.id)
                else:
                    logger.warning(
                        "Document %s moved from index %s to %s; %s keeps a stale entry",
                        stored.id,
                        previous.index,
                        stored.index,
                        previous.index,
                        extra={"doc_id": stored.id, "search.index": previous.index},
                    )

            self._documents[stored.id] = stored
            self._indices.setdefault(stored.index, {})[stored.id] = stored

        logger.debug(
            "Indexed document %s in index %s",
            stored.id,
            stored.index,
            extra={"doc_id": stored.id, "search.index": stored.index},
        )

    def delete(self, doc_id: str, *, cancel: threading.Event | None = None) -> None:
        _check_cancelled(cancel)
        with self._lock.write_locked():
            doc = self._documents.get(doc_id)
            if doc is None:
                raise DocumentNotFoundError(doc_id)
            self._remove_from_bucket(doc.index, doc_id)
            del self._documents[doc_id]

        logger.debug("Deleted document %s", doc_id, extra={"doc_id": doc_id})

    def delete_index(self, index: str, *, cancel: threading.Event | None = None) -> None:
        _check_cancelled(cancel)
        with self._lock.write_locked():
            bucket = self._indices.pop(index, None)
            if bucket is None:
                return

            removed = 0
            for doc_id in bucket:
                current = self._documents.pop(doc_id, None)
                if current is None:
                    continue
                removed += 1
                if current.index != index:
                    # A stale entry removes the live copy; its new bucket keeps the entry
                    logger.warning(
                        "Deleting index %s removed document %s that had moved to index %s",
                        index,
                        doc_id,
                        current.index,
                        extra={"doc_id": doc_id, "search.index": index},
                    )

        logger.info("Deleted index %s (%d documents)", index, removed, extra={"search.index": index})

    def update_document(
        self,
        doc_id: str,
        updates: DocumentUpdate | Mapping[str, Any],
        *,
        cancel: threading.Event | None = None,
    ) -> None:
        _check_cancelled(cancel)
        patch = updates if isinstance(updates, DocumentUpdate) else DocumentUpdate.from_mapping(updates)

        with self._lock.write_locked():
            doc = self._documents.get(doc_id)
            if doc is None:
                raise DocumentNotFoundError(doc_id)
            # The store and the document's bucket share this object
            patch.apply(doc)
            doc.timestamp = _utc_now()

        logger.debug("Updated document %s", doc_id, extra={"doc_id": doc_id})

    def _remove_from_bucket(self, index: str, doc_id: str) -> None:
        bucket = self._indices.get(index)
        if bucket is None:
            return
        bucket.pop(doc_id, None)
        if not bucket:
            del self._indices[index]

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_document(self, doc_id: str, *, cancel: threading.Event | None = None) -> Document:
        _check_cancelled(cancel)
        with self._lock.read_locked():
            doc = self._documents.get(doc_id)
            if doc is None:
                raise DocumentNotFoundError(doc_id)
            return doc.model_copy(deep=True)

    def count(self, index: str | None = None, *, cancel: threading.Event | None = None) -> int:
        """Number of stored documents, or of entries in one index."""
        _check_cancelled(cancel)
        with self._lock.read_locked():
            if index is None:
                return len(self._documents)
            return len(self._indices.get(index, {}))

    def list_indices(self, *, cancel: threading.Event | None = None) -> list[str]:
        """Names of all non-empty indices, sorted."""
        _check_cancelled(cancel)
        with self._lock.read_locked():
            return sorted(self._indices)

    def search(self, query: Query, *, cancel: threading.Event | None = None) -> Results:
        _check_cancelled(cancel)

        span_cm = (
            create_span(
                "facet_search.search",
                attributes={
                    "search.index": query.index,
                    "search.has_text": bool(query.text),
                    "search.from": query.from_,
                    "search.size": query.size,
                    "search.facets": list(query.facets),
                },
            )
            if self.settings.tracing_enabled
            else nullcontext()
        )

        with span_cm as span:
            with self._lock.read_locked():
                results = self._execute(query)
            if span is not None:
                span.set_attribute("search.total", results.total)

        logger.debug(
            "Search %r matched %d documents (%d returned) in %.3fms",
            query.text,
            results.total,
            len(results.hits),
            results.took.total_seconds() * 1000,
            extra={"search.index": query.index, "search.total": results.total},
        )
        return results

    def _execute(self, query: Query) -> Results:
        """Run the query pipeline; the caller holds the read lock."""
        start = time.perf_counter()

        candidates = filter_candidates(self._resolve_candidates(query.index), query.type, query.tags)

        if query.text:
            # Whitespace-only text yields no words, so every candidate scores zero
            words = tokenize(query.text)
            matches = self._score_candidates(candidates, words, highlight=query.highlight)
            matches = rank_by_score(matches)
        else:
            matches = [doc.model_copy(update={"score": 0.0}) for doc in candidates]

        if query.sort:
            matches = apply_sorting(matches, query.sort)

        facets = calculate_facets(matches, query.facets) if query.facets else {}

        total = len(matches)
        page = paginate(matches, query.from_, query.size, self.settings.default_page_size)

        return Results(
            total=total,
            hits=[doc.model_copy(deep=True) for doc in page],
            facets=facets,
            took=timedelta(seconds=time.perf_counter() - start),
            query=query.text,
        )

    def _resolve_candidates(self, index: str) -> Iterable[Document]:
        if index:
            return self._indices.get(index, {}).values()
        return self._documents.values()

    def _score_candidates(self, candidates: Iterable[Document], words: list[str], *, highlight: bool) -> list[Document]:
        """Score candidates, dropping non-matches.

        Returned documents are shallow copies; the final page is deep-copied
        before it leaves the engine.
        """
        tag = self.settings.highlight_tag
        matches = []
        for doc in candidates:
            score = score_document(doc, words)
            if score <= 0:
                continue
            update: dict[str, Any] = {"score": score}
            if highlight:
                update["title"] = highlight_terms(doc.title, words, tag)
                update["content"] = highlight_terms(doc.content, words, tag)
            matches.append(doc.model_copy(update=update))
        return matches
