"""
Address Token Module

Builds token tables from abbreviation data and canonicalizes free-form
address text into typed tokens.
"""

from .pipeline import TokenEngine
from .factory import TokenizerFactory
from .models import AnnotatedToken, CanonicalEntry, SemanticType, TokenGroup
from .exceptions import TokenConfigurationError, UnknownLanguageError
from .numeric import number_suffix, ordinal_suffix, written_numeric

__all__ = [
    'TokenEngine',
    'TokenizerFactory',
    'AnnotatedToken',
    'CanonicalEntry',
    'SemanticType',
    'TokenGroup',
    'TokenConfigurationError',
    'UnknownLanguageError',
    'number_suffix',
    'ordinal_suffix',
    'written_numeric',
]
