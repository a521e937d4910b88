"""Unit tests for facet aggregation."""

import pytest

from facet_search.domain.model import Document, FacetItem
from facet_search.search.facets import calculate_facets, count_facet


@pytest.fixture
def docs():
    return [
        Document(id="1", index="a", type="post", tags=["x", "y"]),
        Document(id="2", index="a", type="post", tags=["y"]),
        Document(id="3", index="b", type="", tags=[]),
        Document(id="4", index="b", type="guide", tags=["y", "z"]),
    ]


@pytest.mark.unit
class TestCountFacet:
    """Tests for single-field facet counting."""

    def test_tags_fan_out_to_every_tag(self, docs):
        items = count_facet(docs, "tags")

        assert items[0] == FacetItem(value="y", count=3)
        assert {item.value: item.count for item in items} == {"x": 1, "y": 3, "z": 1}

    def test_single_document_increments_each_tag_once(self):
        items = count_facet([Document(id="1", tags=["x", "y"])], "tags")

        assert {item.value: item.count for item in items} == {"x": 1, "y": 1}

    def test_type_skips_empty_values(self, docs):
        items = count_facet(docs, "type")

        assert items == [FacetItem(value="post", count=2), FacetItem(value="guide", count=1)]

    def test_index_counts_every_document(self, docs):
        items = count_facet(docs, "index")

        assert {item.value: item.count for item in items} == {"a": 2, "b": 2}

    def test_sorted_by_descending_count(self, docs):
        counts = [item.count for item in count_facet(docs, "tags")]

        assert counts == sorted(counts, reverse=True)

    def test_unknown_field_is_empty(self, docs):
        assert count_facet(docs, "author") == []

    def test_empty_result_set(self):
        assert count_facet([], "tags") == []


@pytest.mark.unit
def test_calculate_facets_returns_every_requested_field(docs):
    facets = calculate_facets(docs, ["type", "unknown", "index"])

    assert list(facets) == ["type", "unknown", "index"]
    assert facets["unknown"] == []
    assert sum(item.count for item in facets["index"]) == len(docs)
