"""Unit tests for text normalization."""

import pytest

from catalog_search.core.normalizer import TextNormalizer


class TestTextNormalizer:
    """Test cases for the TextNormalizer class."""
    
    @pytest.fixture
    def normalizer(self):
        """Create a normalizer instance for testing."""
        return TextNormalizer()
    
    def test_normalize_lowercases(self, normalizer):
        """Test lower-casing."""
        assert normalizer.normalize("Bubble SORT") == "bubble sort"
    
    def test_normalize_none(self, normalizer):
        """Test that missing text normalizes to an empty string."""
        assert normalizer.normalize(None) == ""
        assert normalizer.normalize("") == ""
    
    def test_normalize_unicode(self, normalizer):
        """Test Unicode compatibility folding."""
        assert normalizer.normalize("ﬁnd") == "find"
    
    def test_tokenize(self, normalizer):
        """Test whitespace tokenization."""
        assert normalizer.tokenize("  Depth   First\tSearch ") == ["depth", "first", "search"]
        assert normalizer.tokenize(None) == []
    
    def test_split_words_keeps_case(self, normalizer):
        """Test splitting without lower-casing."""
        assert normalizer.split_words("Bubble Sort") == ["Bubble", "Sort"]
    
    def test_join_fields(self, normalizer):
        """Test joining optional fields."""
        assert normalizer.join_fields("Bubble Sort", None, "Sorting") == "bubble sort  sorting"
    
    def test_join_tags(self, normalizer):
        """Test joining tags."""
        assert normalizer.join_tags(["Graph", "Traversal"]) == "graph traversal"
