from typing import Callable, List

import pytest

from tarot_deck.cards import Card, CardMeanings
from tarot_deck.deck import TarotDeck
from tarot_deck.loader import TarotDataLoader
from tarot_deck.strategies import SimpleShuffleStrategy
from tarot_deck.types import MajorArcanaNumber, Suit


def make_major(number: int) -> Card:
    return Card.major(
        number,
        MajorArcanaNumber(number).display_name,
        [f"keyword{number}"],
        CardMeanings(upright=(f"upright{number}",), reversed=(f"reversed{number}",)),
    )


def make_minor(suit: Suit, rank: int) -> Card:
    return Card.minor(
        suit,
        rank,
        [f"{suit.label.lower()}{rank}"],
        CardMeanings(upright=(f"upright {suit.label} {rank}",), reversed=(f"reversed {suit.label} {rank}",)),
    )


@pytest.fixture
def major_cards() -> List[Card]:
    return [make_major(n) for n in range(22)]


@pytest.fixture
def minor_cards() -> List[Card]:
    return [make_minor(suit, rank) for suit in Suit for rank in range(1, 15)]


@pytest.fixture
def make_deck(major_cards, minor_cards) -> Callable[..., TarotDeck]:
    """Factory for a full 78-card in-memory deck with a seeded shuffle."""

    def _make(seed: int = 7) -> TarotDeck:
        return TarotDeck(major_cards, minor_cards, shuffle_strategy=SimpleShuffleStrategy(seed=seed))

    return _make


@pytest.fixture
def deck(make_deck) -> TarotDeck:
    return make_deck()


@pytest.fixture
def empty_deck() -> TarotDeck:
    return TarotDeck([], [], shuffle_strategy=SimpleShuffleStrategy(seed=0))


@pytest.fixture(scope="session")
def bundled_loader() -> TarotDataLoader:
    return TarotDataLoader()
