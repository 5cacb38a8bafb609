# -*- coding: utf-8 -*-
"""
reading.py — Drawn cards, readings, and the reading generator.

Data flow: SpreadDefinition + TarotDeck -> ReadingGenerator -> Reading.

Notes:
- Positions are filled in declaration order; the text interpretation is
  rendered in deal order.
- A deck with fewer cards than the spread has positions yields a partial
  reading. This is not an error; inspect `len(reading.drawn_cards)`.
"""

from __future__ import annotations

import logging
import random
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from .cards import Card
from .deck import TarotDeck
from .errors import InvalidParameterError
from .spreads import SpreadDefinition, SpreadPosition
from .strategies import RandomCardSelectionStrategy, SelectionStrategy

logger = logging.getLogger(__name__)

DEFAULT_REVERSAL_PROBABILITY = 0.3


@dataclass(frozen=True, eq=False)
class DrawnCard:
    """A card bound to one spread position. Each instance has its own identity."""
    card: Card
    position: SpreadPosition
    is_reversed: bool = False
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DrawnCard):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def orientation(self) -> str:
        return "reversed" if self.is_reversed else "upright"

    def text_representation(self) -> str:
        return self.card.text_representation(self.is_reversed)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Reading:
    """The result of one generation: a spread and the cards drawn into it."""
    spread: SpreadDefinition
    drawn_cards: Tuple[DrawnCard, ...]
    user_context: Optional[str] = None
    timestamp: datetime = field(default_factory=_utcnow)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self) -> None:
        object.__setattr__(self, "drawn_cards", tuple(self.drawn_cards))

    @property
    def is_complete(self) -> bool:
        return len(self.drawn_cards) == self.spread.card_count

    def card_for(self, position: int) -> Optional[DrawnCard]:
        for drawn in self.drawn_cards:
            if drawn.position.position == position:
                return drawn
        return None

    def in_deal_order(self) -> List[DrawnCard]:
        return sorted(self.drawn_cards, key=lambda d: d.position.deal_order)

    def basic_interpretation(self) -> str:
        """Plain-text view of the reading, one block per card in deal order."""
        lines: List[str] = [f"Reading: {self.spread.name}", ""]
        if self.user_context is not None:
            lines += [f"Context: {self.user_context}", ""]
        for drawn in self.in_deal_order():
            lines.append(f"{drawn.position.name}: {drawn.text_representation()}")
            lines.append(f"Significance: {drawn.position.position_significance}")
            lines.append(drawn.card.rendering_description(drawn.is_reversed))
            lines.append("")
        return "\n".join(lines) + "\n"


class ReadingGenerator:
    """Draws cards from a deck into a spread and decides reversals."""

    def __init__(
        self,
        deck: TarotDeck,
        reversal_probability: float = DEFAULT_REVERSAL_PROBABILITY,
        rng: Optional[random.Random] = None,
    ) -> None:
        if not (0.0 <= float(reversal_probability) <= 1.0):
            raise InvalidParameterError("reversal_probability must be within [0.0, 1.0]")
        self.deck = deck
        self.reversal_probability = float(reversal_probability)
        self._rng = rng or random.Random()

    def _is_reversed(self, spread: SpreadDefinition) -> bool:
        if not spread.allow_reversals:
            return False
        # random() is in [0, 1): p=0 never reverses, p=1 always does
        return self._rng.random() < self.reversal_probability

    def generate_reading(
        self,
        spread: SpreadDefinition,
        selection_strategy: Optional[SelectionStrategy] = None,
        user_context: Optional[str] = None,
    ) -> Reading:
        strategy = selection_strategy or RandomCardSelectionStrategy()
        cards = self.deck.draw_cards(spread.card_count, strategy)

        drawn_cards: List[DrawnCard] = []
        for index, position in enumerate(spread.positions):
            if index >= len(cards):
                break
            drawn_cards.append(
                DrawnCard(card=cards[index], position=position, is_reversed=self._is_reversed(spread))
            )

        if len(drawn_cards) < spread.card_count:
            logger.info(
                "Partial reading for '%s': %d of %d positions filled",
                spread.id, len(drawn_cards), spread.card_count,
            )
        else:
            logger.info("Generated '%s' reading (%d cards)", spread.id, len(drawn_cards))
        return Reading(spread=spread, drawn_cards=tuple(drawn_cards), user_context=user_context)
