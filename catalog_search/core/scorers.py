"""Independent relevance signals for a query against a catalog item.

Every scorer is a pure function returning a bounded, non-negative
contribution. The lexical base score runs as an ordered list of stages; a
stage may finish scoring early, which keeps the expensive signals off items
that clearly do not match.
"""

from dataclasses import dataclass
from typing import Callable, List

from ..models.search import SearchableItem
from .lexicon import ABBREVIATIONS, CONCEPT_PAIRS, JARGON, SYNONYMS
from .normalizer import TextNormalizer
from .string_metrics import double_metaphone, ngram_similarity, similarity, soundex

normalizer = TextNormalizer()

JARGON_HIT = 0.4
JARGON_CAP = 0.8
ABBREVIATION_EXPANSION_HIT = 0.6
ABBREVIATION_REVERSE_HIT = 0.5
ABBREVIATION_CAP = 0.8
SYNONYM_HIT = 0.3
SYNONYM_CAP = 0.6
SOUNDEX_HIT = 0.4
METAPHONE_HIT = 0.5
PHONETIC_CAP = 0.7
CONCEPT_HIT = 0.2
SEMANTIC_CAP = 0.8


@dataclass
class LexicalState:
    """Running state of the lexical base score for one item."""
    
    query: str
    lower_query: str
    lower_title: str
    item: SearchableItem
    score: float = 0.0
    finished: bool = False
    apply_length_boost: bool = True


LexicalStage = Callable[[LexicalState], None]


def _title_identity_stage(state: LexicalState) -> None:
    if state.lower_title == state.lower_query:
        state.score = 1.0
    elif state.lower_title.startswith(state.lower_query):
        state.score = 0.9
    else:
        return
    state.finished = True
    state.apply_length_boost = False


def _title_match_stage(state: LexicalState) -> None:
    if state.lower_query in state.lower_title:
        state.score += 0.7
        return
    
    title_similarity = similarity(state.lower_query, state.lower_title)
    if title_similarity >= 0.6:
        state.score += title_similarity * 0.6
    elif title_similarity < 0.3:
        word_order = flexible_score(state.query, state.item)
        if word_order > 0:
            state.score += word_order
            return
        jargon = jargon_score(state.query, state.item)
        if jargon > 0:
            state.score += jargon
            return
        # Nothing textual connects query and title
        state.score = 0.0
        state.finished = True


def _category_stage(state: LexicalState) -> None:
    if state.lower_query in normalizer.normalize(state.item.category):
        state.score += 0.4


def _auxiliary_fields_stage(state: LexicalState) -> None:
    if state.score <= 0.3 and len(state.query) > 3:
        return
    
    if state.lower_query in normalizer.normalize(state.item.summary):
        state.score += 0.2
    
    if state.score < 0.8:
        for tag in state.item.tags:
            if state.lower_query in normalizer.normalize(tag):
                state.score += 0.3
                break
    
    if state.score < 0.5:
        if state.lower_query in normalizer.normalize(state.item.searchable_text):
            state.score += 0.1


LEXICAL_STAGES: List[LexicalStage] = [
    _title_identity_stage,
    _title_match_stage,
    _category_stage,
    _auxiliary_fields_stage,
]


def relevance(query: str, item: SearchableItem) -> float:
    """
    Calculate the lexical base relevance of an item for a query.
    
    Args:
        query: Search query
        item: Catalog item
        
    Returns:
        Score in [0, 1]; 1.0 for an exact title, 0.9 for a title prefix
    """
    state = LexicalState(
        query=query,
        lower_query=normalizer.normalize(query),
        lower_title=normalizer.normalize(item.title),
        item=item,
    )
    
    for stage in LEXICAL_STAGES:
        stage(state)
        if state.finished:
            break
    
    score = state.score
    if score > 0 and state.apply_length_boost:
        # Queries covering more of the title are more specific
        if item.title:
            length_boost = min(0.2, (len(query) / len(item.title)) * 0.2)
        else:
            length_boost = 0.2
        score *= 1 + length_boost
    
    return min(max(score, 0.0), 1.0)


def flexible_score(query: str, item: SearchableItem) -> float:
    """
    Score multi-word queries independently of word order.
    
    "search linear" matches "Linear Search". Words of two characters or less
    are ignored.
    """
    query_words = normalizer.tokenize(query)
    if len(query_words) <= 1:
        return 0.0
    
    title_words = normalizer.tokenize(item.title)
    all_item_words = (
        title_words
        + normalizer.tokenize(item.category)
        + normalizer.tokenize(item.summary)
    )
    
    meaningful_words = [word for word in query_words if len(word) > 2]
    if not meaningful_words:
        return 0.0
    
    matched_words = 0
    title_matches = 0
    exact_matches = 0
    
    for query_word in meaningful_words:
        if query_word in title_words:
            title_matches += 1
            matched_words += 1
            exact_matches += 1
        elif any(query_word in word and len(word) > len(query_word) for word in title_words):
            title_matches += 1
            matched_words += 1
        elif any(query_word in word for word in all_item_words):
            matched_words += 1
    
    if matched_words == 0:
        return 0.0
    
    total = len(meaningful_words)
    return (
        (matched_words / total) * 0.5
        + (title_matches / total) * 0.3
        + (exact_matches / total) * 0.2
    )


def jargon_score(query: str, item: SearchableItem) -> float:
    """Score domain terms in the query whose related vocabulary the item uses."""
    lower_query = normalizer.normalize(query).strip()
    item_fields = (
        normalizer.normalize(item.title),
        normalizer.normalize(item.category),
        normalizer.normalize(item.summary),
    )
    
    score = 0.0
    for jargon, related_terms in JARGON.items():
        if jargon not in lower_query:
            continue
        if any(term in field for term in related_terms for field in item_fields):
            score += JARGON_HIT
    
    return min(score, JARGON_CAP)


def abbreviation_score(query: str, item: SearchableItem) -> float:
    """Score acronym expansions in either direction between query and item."""
    lower_query = normalizer.normalize(query).strip()
    item_text = normalizer.join_fields(item.title, item.summary, item.category)
    score = 0.0
    
    # Query is a known abbreviation
    for term in ABBREVIATIONS.get(lower_query, []):
        if term in item_text:
            score += ABBREVIATION_EXPANSION_HIT
            break
    
    # Item uses an abbreviation the query spells out
    for abbreviation, expansions in ABBREVIATIONS.items():
        if abbreviation in item_text and any(exp in lower_query for exp in expansions):
            score += ABBREVIATION_REVERSE_HIT
            break
    
    return min(score, ABBREVIATION_CAP)


def synonym_score(query: str, item: SearchableItem) -> float:
    """Score query words whose synonyms appear in the item text."""
    item_text = normalizer.join_fields(item.title, item.summary, item.category)
    score = 0.0
    
    for word in normalizer.tokenize(query):
        if any(synonym in item_text for synonym in SYNONYMS.get(word, [])):
            score += SYNONYM_HIT
    
    return min(score, SYNONYM_CAP)


def phonetic_score(query: str, item: SearchableItem) -> float:
    """Score query and title words that sound alike."""
    title_codes = [
        (soundex(word), double_metaphone(word))
        for word in normalizer.tokenize(item.title)
    ]
    score = 0.0
    
    for query_word in normalizer.tokenize(query):
        if len(query_word) < 3:
            continue
        
        query_soundex = soundex(query_word)
        query_primary, query_secondary = double_metaphone(query_word)
        
        for title_soundex, (title_primary, title_secondary) in title_codes:
            if query_soundex and query_soundex == title_soundex:
                score += SOUNDEX_HIT
            if (query_primary and query_primary == title_primary) or (
                query_secondary and query_secondary == title_secondary
            ):
                score += METAPHONE_HIT
    
    return min(score, PHONETIC_CAP)


def semantic_score(query: str, item: SearchableItem) -> float:
    """Score n-gram overlap plus related concepts between query and item."""
    score = ngram_similarity(query, item.title, 2) * 0.4
    
    if item.summary:
        score += ngram_similarity(query, item.summary, 2) * 0.2
    
    concept_words = normalizer.tokenize(query)
    item_concepts = normalizer.join_fields(
        item.title, item.summary, " ".join(item.tags)
    )
    
    for first, second in CONCEPT_PAIRS:
        query_has_first = any(first in word for word in concept_words)
        query_has_second = any(second in word for word in concept_words)
        if (query_has_first and second in item_concepts) or (
            query_has_second and first in item_concepts
        ):
            score += CONCEPT_HIT
    
    return min(score, SEMANTIC_CAP)


def matched_fields(query: str, item: SearchableItem, limit: int = 2) -> List[str]:
    """
    Find which item fields contain the query.
    
    Title and category are always checked; summary and tags only until
    `limit` fields have been found.
    """
    lower_query = normalizer.normalize(query)
    matches: List[str] = []
    
    if lower_query in normalizer.normalize(item.title):
        matches.append("title")
    if lower_query in normalizer.normalize(item.category):
        matches.append("category")
    if len(matches) < limit and lower_query in normalizer.normalize(item.summary):
        matches.append("summary")
    if len(matches) < limit and any(
        lower_query in normalizer.normalize(tag) for tag in item.tags
    ):
        matches.append("tags")
    
    return matches
