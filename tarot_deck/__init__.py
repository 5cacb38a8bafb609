"""
tarot_deck — Tarot deck core: cards, shuffling, selection, spreads and readings.

Example:
    from tarot_deck import ReadingGenerator, TarotDataLoader, TarotDeck, CELTIC_CROSS

    deck = TarotDeck.from_loader(TarotDataLoader())
    deck.shuffle()
    reading = ReadingGenerator(deck).generate_reading(CELTIC_CROSS)
    print(reading.basic_interpretation())
"""

from .cards import Card, CardMeanings, VisualDescription
from .deck import TarotDeck
from .errors import (
    DataFileNotFoundError,
    DeckConstructionError,
    InvalidParameterError,
    InvalidSpreadError,
    MalformedCardDataError,
    TarotCoreError,
    TarotDataError,
)
from .loader import Numerology, SuitProperties, Tag, TarotDataLoader
from .reading import DrawnCard, Reading, ReadingGenerator
from .spreads import (
    CELTIC_CROSS,
    FIVE_CARD,
    SINGLE_CARD,
    THREE_CARD,
    SpreadDefinition,
    SpreadLayoutPosition,
    SpreadPosition,
    get_spread,
    list_spreads,
)
from .strategies import (
    RandomCardSelectionStrategy,
    SecureShuffleStrategy,
    SelectionStrategy,
    ShuffleStrategy,
    SimpleShuffleStrategy,
    TopCardSelectionStrategy,
)
from .types import Arcana, Element, MajorArcanaNumber, MinorRank, Suit, to_roman_numeral

__version__ = "0.1.0"
