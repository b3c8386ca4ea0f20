"""
Core text components.

Accent folding and the character-level tokenizer.
"""

from .diacritics import diacritics
from .tokenizer import normalize_text, tokenize, tokenize_to_string

__all__ = ['diacritics', 'normalize_text', 'tokenize', 'tokenize_to_string']
