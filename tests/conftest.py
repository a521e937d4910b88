"""Shared test fixtures and configuration."""

from datetime import datetime, timezone
import os
from pathlib import Path
import sys

import pytest


SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


# Complete test environment that overrides every engine setting
TEST_ENV = {
    "FACET_SEARCH_DEFAULT_INDEX": "default",
    "FACET_SEARCH_DEFAULT_PAGE_SIZE": "10",
    "FACET_SEARCH_HIGHLIGHT_TAG": "mark",
    "FACET_SEARCH_MIGRATE_INDEX_ON_REINDEX": "false",
    "FACET_SEARCH_LOG_LEVEL": "info",
    "FACET_SEARCH_LOG_JSON": "true",
    "FACET_SEARCH_TRACING_ENABLED": "true",
}


# Set environment variables immediately when conftest.py is loaded
for key, value in TEST_ENV.items():
    os.environ[key] = value

# Now we can safely import config-dependent modules
from facet_search import Document, InMemorySearchEngine, Settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset engine environment variables to the test defaults before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)


@pytest.fixture
def engine():
    """A fresh, empty in-memory engine."""
    return InMemorySearchEngine(Settings())


@pytest.fixture
def fixed_time():
    return datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_documents(fixed_time):
    """Small mixed corpus across two indices."""
    return [
        Document(
            id="go-1",
            index="articles",
            type="post",
            title="Go concurrency patterns",
            content="Goroutines and channels make concurrency approachable.",
            tags=["go", "concurrency"],
            timestamp=fixed_time,
        ),
        Document(
            id="rust-1",
            index="articles",
            type="post",
            title="Rust ownership model",
            content="Ownership and borrowing replace a garbage collector.",
            tags=["rust"],
            timestamp=fixed_time.replace(day=16),
        ),
        Document(
            id="py-1",
            index="articles",
            type="guide",
            title="Python packaging guide",
            content="Build wheels with a pyproject file.",
            tags=["python", "packaging"],
            timestamp=fixed_time.replace(day=14),
        ),
        Document(
            id="faq-1",
            index="help",
            type="faq",
            title="How do I reset my password",
            content="Open settings and choose reset password.",
            tags=["account"],
            timestamp=fixed_time.replace(day=10),
        ),
    ]


@pytest.fixture
def populated_engine(engine, sample_documents):
    for doc in sample_documents:
        engine.index(doc)
    return engine
