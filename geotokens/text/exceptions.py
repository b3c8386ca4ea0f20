"""
Errors raised while building token tables.
"""


class TokenConfigurationError(ValueError):
    """Abbreviation data or a regex rule cannot be turned into an engine."""


class UnknownLanguageError(TokenConfigurationError):
    """No abbreviation data exists for the requested language."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"No abbreviation data for language '{language}'")
