"""Shared fixtures for the catalog search tests."""

import pytest

from catalog_search.models.search import SearchableItem


@pytest.fixture
def catalog_items():
    """Small algorithm catalog used across the test suite."""
    return [
        SearchableItem(
            id="1",
            title="Bubble Sort",
            category="Sorting",
            tags=["sorting", "comparison"],
            summary="Repeatedly swaps adjacent elements",
        ),
        SearchableItem(
            id="2",
            title="Binary Search",
            category="Searching",
            tags=["searching", "divide and conquer"],
            summary="Halves the search interval each step",
        ),
        SearchableItem(
            id="3",
            title="Depth First Search",
            category="Graph",
            tags=["graph", "traversal"],
            summary="Explores as far as possible along each branch",
        ),
        SearchableItem(
            id="4",
            title="Dijkstra's Algorithm",
            category="Graph",
            tags=["shortest path"],
            summary="Finds shortest paths from a source",
        ),
        SearchableItem(
            id="5",
            title="Linear Search",
            category="Searching",
            tags=["searching"],
            summary="Checks each element in turn",
        ),
    ]
