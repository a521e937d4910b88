"""Transparent relevance scoring.

The score is a weighted sum of literal substring counts, chosen so every
ranking decision can be explained by hand:

- each occurrence of a query word in the title adds ``TITLE_WEIGHT``
- each occurrence in the content adds ``CONTENT_WEIGHT``
- a word contained in any tag adds ``TAG_WEIGHT`` once
- the whole (normalized) query appearing verbatim multiplies the sum by
  ``TITLE_PHRASE_BOOST`` (title) or ``CONTENT_PHRASE_BOOST`` (content only)

Counts are substring counts, not token matches: ``"go"`` counts inside
``"google"``.
"""

from __future__ import annotations

from collections.abc import Sequence

from facet_search.domain.model import Document


TITLE_WEIGHT = 2.0
CONTENT_WEIGHT = 1.0
TAG_WEIGHT = 1.5
TITLE_PHRASE_BOOST = 2.0
CONTENT_PHRASE_BOOST = 1.5


def tokenize(text: str) -> list[str]:
    """Lowercase ``text`` and split it on whitespace."""
    return text.lower().split()


def term_score(doc: Document, words: Sequence[str]) -> float:
    """Sum of per-word title, content and tag contributions, before phrase boosting."""
    title = doc.title.lower()
    content = doc.content.lower()
    tags = [tag.lower() for tag in doc.tags]

    score = 0.0
    for word in words:
        score += TITLE_WEIGHT * title.count(word)
        score += CONTENT_WEIGHT * content.count(word)
        if any(word in tag for tag in tags):
            score += TAG_WEIGHT
    return score


def phrase_boost(doc: Document, words: Sequence[str]) -> float:
    """Multiplier for documents containing the full query phrase."""
    phrase = " ".join(words)
    if not phrase:
        return 1.0
    if phrase in doc.title.lower():
        return TITLE_PHRASE_BOOST
    if phrase in doc.content.lower():
        return CONTENT_PHRASE_BOOST
    return 1.0


def score_document(doc: Document, words: Sequence[str]) -> float:
    """Score ``doc`` against already tokenized query ``words``."""
    score = term_score(doc, words)
    if score == 0:
        return 0.0
    return score * phrase_boost(doc, words)


def rank_by_score(docs: list[Document]) -> list[Document]:
    """Order documents by descending score."""
    return sorted(docs, key=lambda doc: doc.score, reverse=True)
