"""Unit tests for the string similarity primitives."""

import pytest

from catalog_search.core.string_metrics import (
    double_metaphone,
    is_fuzzy_match,
    levenshtein,
    ngram_similarity,
    ngrams,
    similarity,
    soundex,
)


class TestLevenshtein:
    """Test cases for edit distance and similarity."""
    
    def test_known_distance(self):
        """Test a textbook edit distance."""
        assert levenshtein("kitten", "sitting") == 3
    
    def test_distance_is_symmetric(self):
        """Test that distance does not depend on argument order."""
        pairs = [("bubble", "bubbel"), ("search", "serch"), ("", "abc")]
        for a, b in pairs:
            assert levenshtein(a, b) == levenshtein(b, a)
    
    def test_empty_strings(self):
        """Test distances involving empty strings."""
        assert levenshtein("", "") == 0
        assert levenshtein("", "abc") == 3
    
    def test_similarity_of_empty_strings(self):
        """Test that two empty strings are fully similar."""
        assert similarity("", "") == 1.0
        assert similarity("abc", "") == 0.0
    
    def test_similarity_is_case_insensitive(self):
        """Test case-insensitive similarity."""
        assert similarity("Bubble", "bubble") == 1.0
    
    def test_similarity_ratio(self):
        """Test the similarity ratio for a transposition."""
        assert similarity("bubbel", "bubble") == pytest.approx(1 - 2 / 6)
    
    def test_is_fuzzy_match(self):
        """Test the fuzzy match threshold."""
        assert is_fuzzy_match("bubbel", "bubble", 0.6) is True
        assert is_fuzzy_match("bubbel", "bubble", 0.7) is False


class TestPhoneticCodes:
    """Test cases for Soundex and the simplified Double Metaphone."""
    
    def test_soundex_classic_pair(self):
        """Test that Robert and Rupert share a code."""
        assert soundex("Robert") == "R163"
        assert soundex("Rupert") == "R163"
    
    def test_soundex_pads_short_words(self):
        """Test padding to four characters."""
        assert soundex("Lee") == "L000"
    
    def test_soundex_empty(self):
        """Test Soundex of an empty word."""
        assert soundex("") == ""
    
    def test_metaphone_digraphs(self):
        """Test the TH, PH and SH digraphs."""
        assert double_metaphone("Thomas")[0] == "0MS"
        assert double_metaphone("Philip")[0] == "FLP"
        assert double_metaphone("Smith")[0] == "SM0"
    
    def test_metaphone_leading_vowel(self):
        """Test that a leading vowel becomes A and H between vowels is kept."""
        assert double_metaphone("Ahab")[0] == "AH1"
    
    def test_metaphone_w_before_vowel(self):
        """Test that W is only kept before a vowel."""
        assert double_metaphone("Water")[0] == "WTR"
        assert double_metaphone("Bowl")[0] == "1L"
    
    @pytest.mark.parametrize(
        "word,expected",
        [
            ("heap", "HP"),
            ("hash", "HX"),
            ("show", "XW"),
            ("arrow", "ARRW"),
        ],
    )
    def test_metaphone_word_boundaries(self, word, expected):
        """Test that a word boundary counts as a vowel for H and W."""
        assert double_metaphone(word)[0] == expected

    def test_metaphone_length_limit(self):
        """Test that codes never exceed four characters."""
        primary, secondary = double_metaphone("Xavier")
        assert primary == "KSFR"
        assert len(double_metaphone("Knightsbridge")[0]) <= 4
        assert secondary == primary
    
    def test_metaphone_empty(self):
        """Test encoding an empty word."""
        assert double_metaphone("") == ("", "")


class TestNgrams:
    """Test cases for n-gram similarity."""
    
    def test_padded_bigrams(self):
        """Test that bigrams include the padding spaces."""
        assert ngrams("ab") == {" a", "ab", "b "}
    
    def test_identical_strings(self):
        """Test similarity of identical strings."""
        assert ngram_similarity("search", "Search") == 1.0
    
    def test_empty_input(self):
        """Test that empty input has no similarity."""
        assert ngram_similarity("", "abc") == 0.0
        assert ngram_similarity("abc", "") == 0.0
    
    def test_partial_overlap(self):
        """Test that partial overlap lies strictly between 0 and 1."""
        value = ngram_similarity("search", "research")
        assert 0.0 < value < 1.0
