"""Typo correction over the vocabulary of a catalog."""

from typing import Iterable, List, Sequence

from rapidfuzz import process
from rapidfuzz.distance import Levenshtein

from ..models.search import SearchableItem
from .normalizer import TextNormalizer
from .string_metrics import similarity


class TypoSuggester:
    """Proposes catalog words within a bounded edit distance of a query."""
    
    def __init__(self, max_suggestions: int = 3) -> None:
        """
        Initialize the typo suggester.
        
        Args:
            max_suggestions: Maximum number of corrections returned
        """
        self.max_suggestions = max_suggestions
        self.normalizer = TextNormalizer()
    
    def build_vocabulary(self, items: Iterable[SearchableItem]) -> List[str]:
        """
        Collect candidate words from a catalog.
        
        Titles are taken whole and word by word; tags and categories whole;
        searchable text word by word. Order of first appearance is kept.
        
        Args:
            items: Catalog items
            
        Returns:
            Distinct candidate words
        """
        vocabulary: List[str] = []
        seen = set()
        
        for item in items:
            words = [item.title]
            words.extend(self.normalizer.split_words(item.title))
            words.extend(item.tags)
            words.append(item.category or "")
            words.extend(self.normalizer.split_words(item.searchable_text))
            
            for word in words:
                if word and word not in seen:
                    seen.add(word)
                    vocabulary.append(word)
        
        return vocabulary
    
    def suggest(
        self,
        query: str,
        items: Sequence[SearchableItem],
        max_distance: int = 2,
    ) -> List[str]:
        """
        Suggest corrections for a query.
        
        Words at edit distance 1..max_distance that are not much shorter than
        the query are ranked by 1 - distance / max(length).
        
        Args:
            query: Possibly misspelled query
            items: Catalog to draw words from
            max_distance: Maximum edit distance of a suggestion
            
        Returns:
            Up to `max_suggestions` distinct words, best first
        """
        if not query or not query.strip() or not items or max_distance < 1:
            return []
        
        vocabulary = self.build_vocabulary(items)
        if not vocabulary:
            return []
        
        # Distance scorers treat score_cutoff as the largest distance kept
        matches = process.extract(
            query,
            vocabulary,
            scorer=Levenshtein.distance,
            processor=self.normalizer.normalize,
            score_cutoff=max_distance,
            limit=None,
        )
        
        scored = []
        for word, distance, index in matches:
            if distance == 0 or len(word) < len(query) - 1:
                continue
            score = 1.0 - distance / max(len(query), len(word))
            scored.append((score, index, word))
        
        scored.sort(key=lambda entry: (-entry[0], entry[1]))
        
        suggestions: List[str] = []
        seen = set()
        for _, _, word in scored:
            key = self.normalizer.normalize(word)
            if key in seen:
                continue
            seen.add(key)
            suggestions.append(word)
            if len(suggestions) >= self.max_suggestions:
                break
        
        return suggestions
    
    def did_you_mean(
        self,
        query: str,
        items: Sequence[SearchableItem],
        threshold: float = 0.6,
        max_distance: int = 2,
    ) -> List[str]:
        """
        Get "did you mean?" suggestions for a query.
        
        Args:
            query: Query to correct
            items: Catalog to draw words from
            threshold: Minimum similarity between query and suggestion
            max_distance: Maximum edit distance of a suggestion
            
        Returns:
            Up to three suggestions, never the query itself
        """
        if not query or not query.strip():
            return []
        
        lower_query = self.normalizer.normalize(query)
        return [
            suggestion
            for suggestion in self.suggest(query, items, max_distance)
            if self.normalizer.normalize(suggestion) != lower_query
            and similarity(query, suggestion) >= threshold
        ][:3]
    
    def describe_edit(self, query: str, target: str) -> str:
        """
        Get a description of edit operations needed to transform query to target.
        
        Args:
            query: Source string
            target: Target string
            
        Returns:
            Description of changes
        """
        if query == target:
            return "No changes"
        
        distance = Levenshtein.distance(query, target)
        
        if len(query) < len(target):
            return f"Insert {len(target) - len(query)} character(s)"
        elif len(query) > len(target):
            return f"Delete {len(query) - len(target)} character(s)"
        else:
            return f"Substitute {distance} character(s)"
