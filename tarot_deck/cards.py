# -*- coding: utf-8 -*-
"""
cards.py — Immutable card records.

A single `Card` type covers both arcana. `card.arcana` is the tag; major
cards carry no suit, minor cards carry a suit and a rank in 1..14.
Consumers branch on the tag (or on `is_major` / `is_minor`), never on the
Python type of the record.

Cards are built by the data loader (or by tests) and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .errors import InvalidParameterError
from .types import Arcana, Element, MajorArcanaNumber, MinorRank, Suit, to_roman_numeral


@dataclass(frozen=True)
class CardMeanings:
    """Upright / reversed meaning lists."""
    upright: Tuple[str, ...]
    reversed: Tuple[str, ...]

    def for_orientation(self, is_reversed: bool) -> Tuple[str, ...]:
        return self.reversed if is_reversed else self.upright


@dataclass(frozen=True)
class VisualDescription:
    background: str = ""
    foreground: str = ""


@dataclass(frozen=True)
class Card:
    """One tarot card (RWS)."""
    arcana: Arcana
    rank: int            # major: 0..21; minor: 1 (ace) .. 14 (king)
    name: str
    keywords: Tuple[str, ...]
    meanings: CardMeanings
    suit: Optional[Suit] = None
    significance: str = ""
    symbols: Tuple[str, ...] = ()
    visual_description: VisualDescription = field(default_factory=VisualDescription)
    emoji: Optional[str] = None
    background_color: Optional[str] = None

    # -------------------------
    # Construction helpers
    # -------------------------

    @classmethod
    def major(cls, number: int, name: str, keywords, meanings: CardMeanings, **extra) -> "Card":
        try:
            rank = MajorArcanaNumber(number)
        except ValueError:
            raise InvalidParameterError(f"Invalid major arcana number: {number}") from None
        return cls(
            arcana=Arcana.MAJOR,
            rank=int(rank),
            name=name,
            keywords=tuple(keywords),
            meanings=meanings,
            **extra,
        )

    @classmethod
    def minor(cls, suit: Suit, rank: int, keywords, meanings: CardMeanings,
              name: Optional[str] = None, **extra) -> "Card":
        try:
            minor_rank = MinorRank(rank)
        except ValueError:
            raise InvalidParameterError(f"Invalid minor arcana rank: {rank}") from None
        return cls(
            arcana=Arcana.MINOR,
            rank=int(minor_rank),
            name=name or f"{minor_rank.display_name} of {suit.label}",
            keywords=tuple(keywords),
            meanings=meanings,
            suit=suit,
            **extra,
        )

    def __post_init__(self) -> None:
        if self.arcana is Arcana.MAJOR and self.suit is not None:
            raise InvalidParameterError(f"Major arcana card '{self.name}' cannot have a suit")
        if self.arcana is Arcana.MINOR and self.suit is None:
            raise InvalidParameterError(f"Minor arcana card '{self.name}' requires a suit")

    # -------------------------
    # Identity & derived fields
    # -------------------------

    @property
    def id(self) -> str:
        """Stable key derived from classification, suit and rank."""
        if self.arcana is Arcana.MAJOR:
            return f"major-{self.rank}"
        return f"minor-{self.suit.label.lower()}-{self.rank}"

    @property
    def is_major(self) -> bool:
        return self.arcana is Arcana.MAJOR

    @property
    def is_minor(self) -> bool:
        return self.arcana is Arcana.MINOR

    @property
    def element(self) -> Optional[Element]:
        return self.suit.element if self.suit is not None else None

    @property
    def roman_numeral(self) -> Optional[str]:
        if self.arcana is not Arcana.MAJOR:
            return None
        return to_roman_numeral(self.rank)

    @property
    def full_name(self) -> str:
        if self.arcana is Arcana.MAJOR:
            return self.name
        return f"{MinorRank(self.rank).display_name} of {self.suit.label}"

    # -------------------------
    # Text views (consumed by rendering layers)
    # -------------------------

    def text_representation(self, is_reversed: bool = False) -> str:
        reversed_text = " (Reversed)" if is_reversed else ""
        if self.arcana is Arcana.MAJOR:
            return f"{self.roman_numeral} - {self.name}{reversed_text}"
        return f"{self.full_name}{reversed_text}"

    def rendering_description(self, is_reversed: bool = False) -> str:
        meanings = self.meanings.for_orientation(is_reversed)
        main_meaning = meanings[0] if meanings else "No meaning available"
        reversed_text = " (Reversed)" if is_reversed else ""
        return f"{self.full_name}{reversed_text}: {main_meaning}"
