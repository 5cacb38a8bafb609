"""
errors.py — Exception hierarchy for the tarot deck core.

Lookup misses and partial draws are NOT errors; they surface as None or as
shorter result lists. Only construction and data loading raise.
"""

from __future__ import annotations


class TarotCoreError(Exception):
    """Base class for tarot-core errors."""


class InvalidSpreadError(TarotCoreError):
    """Raised when a spread id is not registered or a spread definition is inconsistent."""


class InvalidParameterError(TarotCoreError):
    """Raised when an input parameter is invalid."""


class DeckConstructionError(TarotCoreError):
    """Raised when the card set handed to a deck breaks its invariants."""


class TarotDataError(TarotCoreError):
    """Base class for card data loading failures."""


class DataFileNotFoundError(TarotDataError):
    """A data file expected by the loader does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Tarot data file not found: {path}")
        self.path = path


class MalformedCardDataError(TarotDataError):
    """A data file exists but cannot be parsed or fails validation."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Invalid tarot data in {path}: {detail}")
        self.path = path
        self.detail = detail
