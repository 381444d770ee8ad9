"""Score fusion: combine the lexical base score with advanced signals."""

from typing import List, NamedTuple, Optional, Tuple

from ..models.search import MatchType, SearchableItem, SearchOptions
from . import scorers
from .context import SearchContext

ADVANCED_MATCH_EXPLANATION = (
    "Found through advanced matching (phonetic, semantic, or contextual)"
)
FUZZY_MATCH_EXPLANATION = "Fuzzy match based on similarity"


class ScoreBreakdown(NamedTuple):
    """Fused score of one item together with how it was reached."""
    
    score: float
    base_score: float
    signals: Tuple[str, ...]


class RelevanceEngine:
    """Fuses relevance signals under a tiered, short-circuiting policy."""
    
    def __init__(self, options: Optional[SearchOptions] = None) -> None:
        """
        Initialize the relevance engine.
        
        Args:
            options: Signal enable-flags (defaults enable every signal)
        """
        self.options = options or SearchOptions()
    
    def evaluate(
        self,
        query: str,
        item: SearchableItem,
        context: Optional[SearchContext] = None,
    ) -> ScoreBreakdown:
        """
        Calculate the fused relevance of an item.
        
        Each advanced signal only runs while the score is still below its
        gate, so strong lexical matches skip the costlier scorers. The
        contextual boost is always applied when enabled.
        
        Args:
            query: Search query
            item: Catalog item
            context: Session context for the contextual boost
            
        Returns:
            ScoreBreakdown with the score clamped to [0, 1]
        """
        options = self.options
        base = scorers.relevance(query, item)
        score = base
        signals: List[str] = []
        
        if options.enable_abbreviation_search and score < 0.8:
            abbreviation = scorers.abbreviation_score(query, item)
            if abbreviation > score:
                score = abbreviation
                signals.append("abbreviation")
        
        if options.enable_synonym_search and score < 0.7:
            synonym = scorers.synonym_score(query, item)
            if synonym > 0:
                score += synonym * 0.5
                signals.append("synonym")
        
        if options.enable_phonetic_search and score < 0.6:
            phonetic = scorers.phonetic_score(query, item) * 0.8
            if phonetic > score:
                score = phonetic
                signals.append("phonetic")
        
        if options.enable_semantic_search and score < 0.7:
            semantic = scorers.semantic_score(query, item)
            if semantic > 0:
                score += semantic * 0.6
                signals.append("semantic")
        
        if options.enable_contextual_search and context is not None:
            boost = context.contextual_boost(item, query)
            if boost > 0:
                score += boost
                signals.append("contextual")
        
        return ScoreBreakdown(min(score, 1.0), base, tuple(signals))
    
    def score(
        self,
        query: str,
        item: SearchableItem,
        context: Optional[SearchContext] = None,
    ) -> float:
        """Calculate only the fused relevance score of an item."""
        return self.evaluate(query, item, context).score


def classify(score: float) -> MatchType:
    """Map a fused score onto its match tier."""
    if score >= 0.9:
        return MatchType.EXACT
    if score >= 0.6:
        return MatchType.PARTIAL
    if score >= 0.4:
        return MatchType.FUZZY
    return MatchType.SEMANTIC


def explanation_for(
    match_type: MatchType, signals: Tuple[str, ...], base_score: float
) -> Optional[str]:
    """
    Describe why a result landed in its tier.
    
    Signals are named only when they lifted the result above the tier its
    lexical base score would have reached. Exact and partial lexical matches
    need no explanation.
    """
    if signals and classify(base_score) != match_type:
        return f"Found through advanced matching ({', '.join(signals)})"
    if match_type == MatchType.FUZZY:
        return FUZZY_MATCH_EXPLANATION
    if match_type == MatchType.SEMANTIC:
        return ADVANCED_MATCH_EXPLANATION
    return None
