"""Unit tests for the search engine core functionality."""

import pytest

from catalog_search.core.context import SearchContext
from catalog_search.core.engine import SearchEngine
from catalog_search.models.search import (
    MatchType,
    SearchableItem,
    SearchOptions,
    SearchResult,
)


class TestSearchEngine:
    """Test cases for the SearchEngine class."""
    
    @pytest.fixture
    def engine(self):
        """Create a search engine instance for testing."""
        return SearchEngine()
    
    @pytest.fixture
    def context(self):
        """Create a fresh session context."""
        return SearchContext()
    
    @pytest.fixture
    def lexical_only(self):
        """Options with every advanced signal disabled."""
        return SearchOptions(
            enable_semantic_search=False,
            enable_phonetic_search=False,
            enable_contextual_search=False,
            enable_abbreviation_search=False,
            enable_synonym_search=False,
        )
    
    def test_engine_initialization(self, engine):
        """Test search engine initialization."""
        assert engine.options == SearchOptions()
        assert engine._stats["total_queries"] == 0
        assert engine._stats["exact_matches"] == 0
        assert engine._stats["no_matches"] == 0
    
    def test_exact_title_match(self, engine):
        """Test that an exact title is a single perfect match."""
        items = [SearchableItem(id="1", title="Bubble Sort")]
        
        results = engine.search("Bubble Sort", items)
        
        assert len(results) == 1
        assert results[0].score == 1.0
        assert results[0].type == MatchType.EXACT
    
    def test_title_prefix_match(self, engine, catalog_items):
        """Test that a title prefix ranks first as an exact match."""
        results = engine.search("bin", catalog_items)
        
        assert results[0].item.title == "Binary Search"
        assert results[0].score == pytest.approx(0.9)
        assert results[0].type == MatchType.EXACT
    
    def test_abbreviation_match(self, engine, catalog_items):
        """Test that an acronym finds its expansion."""
        results = engine.search("dfs", catalog_items)
        
        dfs = next(result for result in results if result.item.title == "Depth First Search")
        assert "abbreviation" in dfs.signals
        assert dfs.score >= 0.6
        assert dfs.explanation.startswith("Found through advanced matching")
    
    def test_did_you_mean(self, engine):
        """Test correcting a misspelled query."""
        items = [SearchableItem(id="1", title="Bubble Sort")]
        
        assert engine.did_you_mean("bubbel", items) == ["Bubble"]
    
    def test_no_match(self, engine, catalog_items):
        """Test that unrelated queries return nothing, even after the typo fallback."""
        assert engine.search("xyz123qqq", catalog_items) == []
        assert engine.get_stats()["no_matches"] == 1
    
    @pytest.mark.parametrize("query", ["", "   ", None])
    def test_empty_query(self, engine, catalog_items, query):
        """Test handling of empty queries."""
        assert engine.search(query, catalog_items) == []
        assert engine._stats["total_queries"] == 0
    
    def test_empty_catalog(self, engine):
        """Test searching an empty catalog."""
        assert engine.search("bubble", []) == []
    
    def test_result_invariants(self, engine, catalog_items):
        """Test ordering, uniqueness, bounds and result count."""
        options = SearchOptions(max_results=3)
        for query in ["search", "sort", "graph", "dfs", "find", "algorithm", "shortest path"]:
            results = engine.search(query, catalog_items, options)
            scores = [result.score for result in results]
            ids = [result.item.id for result in results]
            
            assert len(results) <= 3
            assert scores == sorted(scores, reverse=True)
            assert len(ids) == len(set(ids))
            assert all(0.0 <= score <= 1.0 for score in scores)
    
    def test_min_score_filter(self, engine, catalog_items):
        """Test that full-path results respect the score floor."""
        options = SearchOptions(min_score=0.5)
        results = engine.search("search", catalog_items, options)
        
        assert results
        assert all(result.score >= 0.5 for result in results)
    
    def test_deterministic(self, engine, catalog_items):
        """Test that repeated searches return identical rankings."""
        first = engine.search("search", catalog_items, context=SearchContext())
        second = engine.search("search", catalog_items, context=SearchContext())
        
        assert [(r.item.id, r.score) for r in first] == [(r.item.id, r.score) for r in second]
    
    def test_items_are_not_mutated(self, engine, catalog_items):
        """Test that searching leaves the catalog untouched."""
        before = [item.model_dump() for item in catalog_items]
        engine.search("search", catalog_items)
        
        assert [item.model_dump() for item in catalog_items] == before
    
    def test_fast_path_title_prefix(self, engine, catalog_items):
        """Test that two-character queries only check titles and categories."""
        results = engine.search("bi", catalog_items)
        
        assert len(results) == 1
        assert results[0].item.title == "Binary Search"
        assert results[0].score == pytest.approx(0.9)
        assert results[0].type == MatchType.EXACT
        assert results[0].matches == ["title"]
    
    def test_fast_path_category(self, engine, catalog_items):
        """Test category matches on the fast path."""
        results = engine.search("gr", catalog_items)
        
        assert {result.item.id for result in results} == {"3", "4"}
        assert all(result.score == pytest.approx(0.7) for result in results)
        assert all(result.type == MatchType.PARTIAL for result in results)
        assert all(result.matches == ["category"] for result in results)
    
    def test_highlight_disabled(self, engine, catalog_items):
        """Test that matched fields are omitted when highlighting is off."""
        results = engine.search("search", catalog_items, SearchOptions(highlight_matches=False))
        
        assert results
        assert all(result.matches is None for result in results)
    
    def test_invalid_max_results_uses_default(self, engine, catalog_items):
        """Test that a non-positive result limit falls back to the default."""
        results = engine.search("search", catalog_items, SearchOptions(max_results=0))
        
        assert 0 < len(results) <= 10
    
    def test_min_score_is_clamped(self, engine, catalog_items):
        """Test that an out-of-range score floor is clamped to 1."""
        results = engine.search("Bubble Sort", catalog_items, SearchOptions(min_score=5.0))
        
        assert [result.item.id for result in results] == ["1"]
    
    def test_typo_fallback(self, engine, catalog_items, lexical_only):
        """Test that a typo is searched as its correction."""
        results = engine.search("bubbel", catalog_items, lexical_only)
        
        assert len(results) == 1
        assert results[0].item.title == "Bubble Sort"
        assert results[0].type == MatchType.SUGGESTED
        assert results[0].score == pytest.approx(0.9 * 0.8)
        assert results[0].explanation == "Showing results for 'Bubble' (Substitute 2 character(s))"
        assert engine.get_stats()["suggested_matches"] == 1
    
    def test_typo_fallback_disabled(self, engine, catalog_items, lexical_only):
        """Test that no corrections are tried when typo suggestions are off."""
        options = lexical_only.merged(suggest_typos=False)
        
        assert engine.search("bubbel", catalog_items, options) == []
    
    def test_negative_suggestion_distance(self, engine, catalog_items, lexical_only):
        """Test that a negative distance disables corrections."""
        options = lexical_only.merged(max_suggestion_distance=-1)
        
        assert engine.search("bubbel", catalog_items, options) == []
    
    def test_early_truncation(self, engine):
        """Test that the scan stops once enough results have been found."""
        items = [SearchableItem(id=str(i), title=f"Sort Variant {i}") for i in range(40)]
        options = SearchOptions(max_results=4)
        
        results = engine.search("sort", items, options)
        
        assert len(results) == 4
        assert engine.get_stats()["early_truncations"] == 1
    
    def test_full_scan(self, engine):
        """Test that early truncation can be disabled."""
        items = [SearchableItem(id=str(i), title=f"Sort Variant {i}") for i in range(40)]
        options = SearchOptions(max_results=4, early_truncation=False)
        
        results = engine.search("sort", items, options)
        
        assert len(results) == 4
        assert engine.get_stats()["early_truncations"] == 0
    
    def test_contextual_boost(self, engine, catalog_items, context):
        """Test that a selection raises the item in later searches."""
        linear = catalog_items[4]
        before = next(r for r in engine.search("linear", catalog_items, context=context)
                      if r.item.id == linear.id)
        
        engine.record_interaction("linear", linear, context)
        after = next(r for r in engine.search("linear", catalog_items, context=context)
                     if r.item.id == linear.id)
        
        assert before.score == pytest.approx(0.9)
        assert after.score == 1.0
        assert "contextual" in after.signals

    def test_boosted_exact_match_keeps_lexical_explanation(self, engine, catalog_items, context):
        """Test that a contextual boost does not relabel an exact title match."""
        engine.record_interaction("binary", catalog_items[1], context)

        top = engine.search("binary", catalog_items, context=context)[0]

        assert top.item.title == "Binary Search"
        assert top.type == MatchType.EXACT
        assert top.signals == ["contextual"]
        assert top.explanation is None
        assert engine.explain(top) == "Exact match found in title or content"

    def test_session_suggestions(self, engine, catalog_items, context):
        """Test suggestions from recorded interactions."""
        engine.record_interaction("linear", catalog_items[4], context)
        engine.record_interaction("graph", None, context)
        
        assert engine.session_suggestions(context) == ["graph", "linear", "Searching"]
    
    def test_smart_search_short_acronym(self, engine, catalog_items):
        """Test that short queries still use abbreviations."""
        results = engine.smart_search("dfs", catalog_items)
        
        assert any(result.item.title == "Depth First Search" for result in results)
    
    def test_super_search(self, engine, catalog_items):
        """Test searching with every signal enabled."""
        results = engine.super_search("search", catalog_items)
        
        assert results
        assert len(results) <= 15
    
    def test_explain(self, engine):
        """Test user-facing explanations."""
        item = SearchableItem(id="1", title="Bubble Sort")
        explained = SearchResult(item=item, score=0.5, type=MatchType.FUZZY, explanation="Custom")
        phonetic = SearchResult(item=item, score=0.5, type=MatchType.PHONETIC)
        
        assert engine.explain(explained) == "Custom"
        assert engine.explain(phonetic) == "Found through phonetic matching (sounds similar)"
    
    def test_performance_metrics(self, engine, catalog_items):
        """Test performance metrics tracking."""
        engine.search("Bubble Sort", catalog_items)
        engine.search("dfs", catalog_items)
        engine.search("xyz123qqq", catalog_items)
        
        stats = engine.get_stats()
        
        assert stats["total_queries"] == 3
        assert stats["exact_matches"] == 1
        assert stats["fuzzy_matches"] == 1
        assert stats["no_matches"] == 1
        assert stats["no_match_rate"] == pytest.approx(1 / 3)
        assert "cache" in stats
    
    def test_analytics_tracking(self, engine, catalog_items):
        """Test that searches feed query analytics."""
        engine.search("xyz123qqq", catalog_items)
        
        assert engine.analytics.failed_queries() == [{"query": "xyz123qqq", "count": 1}]
    
    def test_clear_functionality(self, engine, catalog_items):
        """Test clearing statistics and analytics."""
        engine.search("search", catalog_items)
        engine.clear()
        
        assert engine.get_stats()["total_queries"] == 0
        assert engine.analytics.popular_queries() == []
