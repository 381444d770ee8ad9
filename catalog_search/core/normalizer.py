"""Text normalization utilities for consistent query and catalog processing."""

import re
import unicodedata
from typing import Iterable, List, Optional


class TextNormalizer:
    """Handles text normalization for consistent word processing."""
    
    def __init__(self) -> None:
        """Initialize the normalizer."""
        # Compile regex patterns for performance
        self.whitespace_regex = re.compile(r'\s+')
        
    def normalize(self, text: Optional[str]) -> str:
        """
        Normalize text for case-insensitive comparison.
        
        Args:
            text: Input text to normalize (None is treated as empty)
            
        Returns:
            Lower-cased text with Unicode compatibility forms folded
        """
        if not text:
            return ""
        
        # Convert to lowercase
        normalized = text.lower()
        
        # Normalize Unicode characters
        normalized = unicodedata.normalize('NFKC', normalized)
        
        return normalized
    
    def tokenize(self, text: Optional[str]) -> List[str]:
        """
        Tokenize text into lower-cased words split on whitespace.
        
        Args:
            text: Input text
            
        Returns:
            List of tokens
        """
        if not text:
            return []
        
        return [token for token in self.whitespace_regex.split(self.normalize(text)) if token]
    
    def split_words(self, text: Optional[str]) -> List[str]:
        """Split text on whitespace while keeping the original casing."""
        if not text:
            return []
        return [token for token in self.whitespace_regex.split(text) if token]
    
    def join_fields(self, *fields: Optional[str]) -> str:
        """Join optional text fields into one normalized blob."""
        return " ".join(self.normalize(field) for field in fields)
    
    def join_tags(self, tags: Iterable[str]) -> str:
        """Join a tag sequence into one normalized blob."""
        return self.normalize(" ".join(tags))
