"""String similarity primitives: edit distance, phonetic codes and n-grams.

All functions here are pure and stateless. Edit distance is delegated to
rapidfuzz; the phonetic encoders implement the small rule sets the scorers
were tuned against.
"""

from typing import Set, Tuple

from rapidfuzz.distance import Levenshtein

SOUNDEX_CODES = {
    "B": "1", "F": "1", "P": "1", "V": "1",
    "C": "2", "G": "2", "J": "2", "K": "2", "Q": "2", "S": "2", "X": "2", "Z": "2",
    "D": "3", "T": "3",
    "L": "4",
    "M": "5", "N": "5",
    "R": "6",
}

VOWELS = "AEIOUY"

# Single-letter metaphone substitutions; digraphs and positional rules are
# handled in double_metaphone itself.
METAPHONE_CODES = {
    "B": "1",
    "D": "T",
    "F": "F",
    "V": "F",
    "G": "J",
    "J": "J",
    "K": "K",
    "Q": "K",
    "L": "L",
    "M": "M",
    "N": "M",
    "R": "R",
    "X": "KS",
    "Z": "S",
}

DIGRAPHS = {
    "C": ("X", "K"),
    "P": ("F", "P"),
    "S": ("X", "S"),
    "T": ("0", "T"),
}


def levenshtein(a: str, b: str) -> int:
    """
    Calculate the Levenshtein edit distance between two strings.
    
    Insertions, deletions and substitutions all cost 1, so the distance is
    symmetric.
    
    Args:
        a: First string
        b: Second string
        
    Returns:
        Minimum number of single-character edits turning a into b
    """
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """
    Calculate a case-insensitive similarity ratio in [0, 1].
    
    Two empty strings are identical and score 1.0.
    """
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1.0 - levenshtein(a.lower(), b.lower()) / max_len


def is_fuzzy_match(query: str, target: str, threshold: float = 0.6) -> bool:
    """Check whether two strings are at least threshold-similar."""
    return similarity(query, target) >= threshold


def soundex(word: str) -> str:
    """
    Encode a word with the Soundex algorithm.
    
    The first letter is kept, later consonants become digit classes,
    adjacent duplicate codes collapse and the code is padded to 4 characters.
    
    Args:
        word: Word to encode
        
    Returns:
        Four character Soundex code, or "" for empty input
    """
    if not word:
        return ""
    
    word = word.upper()
    code = word[0]
    
    for char in word[1:]:
        digit = SOUNDEX_CODES.get(char, "")
        if digit and digit != code[-1]:
            code += digit
    
    return (code + "000")[:4]


def _vowel_or_boundary(char: str) -> bool:
    return not char or char in VOWELS


def double_metaphone(word: str) -> Tuple[str, str]:
    """
    Encode a word with a simplified Double Metaphone rule set.
    
    This is an approximation of the published algorithm: CH/SH/TH/PH
    digraphs, H between vowels and W before a vowel are handled, a leading
    vowel becomes "A" and every other vowel is dropped. A word boundary
    counts as a vowel for the H and W rules, so "heap" keeps its H and
    "show" its W. The secondary code mirrors the primary.
    
    Args:
        word: Word to encode
        
    Returns:
        Tuple of (primary, secondary) codes, each at most 4 characters
    """
    if not word:
        return "", ""
    
    word = word.upper()
    primary = ""
    pos = 0
    
    while pos < len(word) and len(primary) < 4:
        char = word[pos]
        next_char = word[pos + 1] if pos + 1 < len(word) else ""
        prev_char = word[pos - 1] if pos > 0 else ""
        
        if char in DIGRAPHS:
            digraph_code, plain_code = DIGRAPHS[char]
            if next_char == "H":
                primary += digraph_code
                pos += 1
            else:
                primary += plain_code
        elif char in METAPHONE_CODES:
            primary += METAPHONE_CODES[char]
        elif char == "H":
            if _vowel_or_boundary(prev_char) and _vowel_or_boundary(next_char):
                primary += "H"
        elif char == "W":
            if _vowel_or_boundary(next_char):
                primary += "W"
        elif char in VOWELS and pos == 0:
            primary += "A"
        pos += 1
    
    secondary = primary
    return primary[:4], secondary[:4]


def ngrams(text: str, n: int = 2) -> Set[str]:
    """Collect the n-grams of a lower-cased, space-padded string."""
    padded = f" {text.lower()} "
    return {padded[i:i + n] for i in range(len(padded) - n + 1)}


def ngram_similarity(a: str, b: str, n: int = 2) -> float:
    """
    Calculate the Jaccard similarity of two strings' n-gram sets.
    
    Args:
        a: First string
        b: Second string
        n: N-gram size
        
    Returns:
        Similarity in [0, 1]; 0.0 when either input is empty
    """
    if not a or not b:
        return 0.0
    
    grams_a = ngrams(a, n)
    grams_b = ngrams(b, n)
    union = grams_a | grams_b
    if not union:
        return 0.0
    return len(grams_a & grams_b) / len(union)
