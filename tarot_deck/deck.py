# -*- coding: utf-8 -*-
"""
deck.py — The tarot deck: shuffle / reset / draw / lookup.

The deck keeps major and minor arcana as two separate sequences. Shuffling
permutes each one independently, so arcana queries never need to
re-partition. Drawing samples the deck; it never removes cards.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, List, Optional, Set, Tuple

from .cards import Card
from .errors import DeckConstructionError
from .strategies import SecureShuffleStrategy, SelectionStrategy, ShuffleStrategy, TopCardSelectionStrategy
from .types import Arcana, Suit

if TYPE_CHECKING:
    from .loader import TarotDataLoader

logger = logging.getLogger(__name__)


def _rank_key(card: Card) -> int:
    return card.rank


def _minor_sort_key(card: Card) -> Tuple[str, int]:
    # suit label first ("Cups" < "Pentacles" < "Swords" < "Wands"), rank within suit
    return (card.suit.label, card.rank)


class TarotDeck:
    """A full deck (major + minor arcana) with a configured shuffle strategy."""

    def __init__(
        self,
        major_arcana: Iterable[Card],
        minor_arcana: Iterable[Card],
        shuffle_strategy: Optional[ShuffleStrategy] = None,
    ) -> None:
        self._major: List[Card] = list(major_arcana)
        self._minor: List[Card] = list(minor_arcana)
        self.shuffle_strategy: ShuffleStrategy = shuffle_strategy or SecureShuffleStrategy()
        self._validate()

    @classmethod
    def from_loader(
        cls,
        loader: "TarotDataLoader",
        shuffle_strategy: Optional[ShuffleStrategy] = None,
    ) -> "TarotDeck":
        """
        Build a deck from a data loader. Loader failures propagate unchanged;
        there is no fallback deck.
        """
        major = loader.load_all_major_arcana_cards()
        minor = loader.load_all_minor_arcana_cards()
        deck = cls(major, minor, shuffle_strategy=shuffle_strategy)
        logger.info("Built deck from %s: %d major, %d minor", loader.data_dir, len(major), len(minor))
        return deck

    def _validate(self) -> None:
        for card in self._major:
            if card.arcana is not Arcana.MAJOR:
                raise DeckConstructionError(f"Card '{card.id}' is not a major arcana card")
        for card in self._minor:
            if card.arcana is not Arcana.MINOR:
                raise DeckConstructionError(f"Card '{card.id}' is not a minor arcana card")
        seen: Set[str] = set()
        for card in self.all_cards:
            if card.id in seen:
                raise DeckConstructionError(f"Duplicate card id in deck: {card.id}")
            seen.add(card.id)

    # -------------------------
    # Views
    # -------------------------

    @property
    def all_cards(self) -> List[Card]:
        """Major arcana first, then minor, in current deck order."""
        return self._major + self._minor

    @property
    def count(self) -> int:
        return len(self._major) + len(self._minor)

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return (
            f"TarotDeck(major={len(self._major)}, minor={len(self._minor)}, "
            f"shuffle={self.shuffle_strategy.name!r})"
        )

    # -------------------------
    # Mutating operations
    # -------------------------

    def shuffle(self, strategy: Optional[ShuffleStrategy] = None) -> None:
        """Shuffle each arcana with `strategy`, or the deck's own strategy."""
        strategy = strategy or self.shuffle_strategy
        self._major = strategy.shuffle(self._major)
        self._minor = strategy.shuffle(self._minor)
        logger.debug("Shuffled deck with %s", strategy.name)

    def reset(self) -> None:
        """Restore canonical order. Idempotent."""
        self._major.sort(key=_rank_key)
        self._minor.sort(key=_minor_sort_key)
        logger.debug("Reset deck to canonical order")

    # -------------------------
    # Drawing
    # -------------------------

    def draw_cards(self, count: int, strategy: Optional[SelectionStrategy] = None) -> List[Card]:
        """
        Select up to `count` cards with the given strategy (top of deck by default).

        Cards are not removed from the deck: two draws with the top strategy and
        no shuffle in between return the same cards.
        """
        strategy = strategy or TopCardSelectionStrategy()
        cards = self.all_cards
        drawn = strategy.select_cards(cards, min(count, len(cards)))
        logger.debug("Drew %d/%d cards with %s strategy", len(drawn), count, strategy.name)
        return drawn

    # -------------------------
    # Lookups (absent -> None)
    # -------------------------

    def get_major_arcana(self, number: int) -> Optional[Card]:
        for card in self._major:
            if card.rank == number:
                return card
        return None

    def get_minor_arcana(self, suit: Suit, rank: int) -> Optional[Card]:
        for card in self._minor:
            if card.suit is suit and card.rank == rank:
                return card
        return None

    def get_cards(self, suit: Suit) -> List[Card]:
        """All minor cards of one suit, ascending by rank."""
        return sorted((c for c in self._minor if c.suit is suit), key=_rank_key)

    def get_major_arcana_cards(self) -> List[Card]:
        return sorted(self._major, key=_rank_key)

    def get_minor_arcana_cards(self) -> List[Card]:
        return sorted(self._minor, key=_minor_sort_key)
