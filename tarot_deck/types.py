# -*- coding: utf-8 -*-
"""
types.py — Enumerations shared by cards, decks and the data loader.

- Arcana / Suit / Element classification tags
- MinorRank (Ace=1 .. King=14) and MajorArcanaNumber (Fool=0 .. World=21)
- Roman numeral rendering for major arcana numbers
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Dict, List, Tuple


class Arcana(str, Enum):
    MAJOR = "Major"
    MINOR = "Minor"


class Element(str, Enum):
    WATER = "Water"
    EARTH = "Earth"
    AIR = "Air"
    FIRE = "Fire"


class Suit(str, Enum):
    """The four minor arcana suits. The value is the canonical label used for ordering."""
    CUPS = "Cups"
    PENTACLES = "Pentacles"
    SWORDS = "Swords"
    WANDS = "Wands"

    @property
    def label(self) -> str:
        return self.value

    @property
    def element(self) -> Element:
        return _SUIT_ELEMENTS[self]

    @classmethod
    def from_label(cls, label: str) -> "Suit":
        """Case-insensitive lookup by label ("cups", "Cups")."""
        for suit in cls:
            if suit.value.lower() == label.strip().lower():
                return suit
        raise ValueError(f"Unknown suit: {label!r}")


_SUIT_ELEMENTS: Dict[Suit, Element] = {
    Suit.CUPS: Element.WATER,
    Suit.PENTACLES: Element.EARTH,
    Suit.SWORDS: Element.AIR,
    Suit.WANDS: Element.FIRE,
}


class MinorRank(IntEnum):
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    PAGE = 11
    KNIGHT = 12
    QUEEN = 13
    KING = 14

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_name(cls, name: str) -> "MinorRank":
        """Parse "Ace", "two", "KING" ... into a rank."""
        key = name.strip().upper()
        if key not in cls.__members__:
            raise ValueError(f"Unknown minor arcana rank: {name!r}")
        return cls[key]


class MajorArcanaNumber(IntEnum):
    FOOL = 0
    MAGICIAN = 1
    HIGH_PRIESTESS = 2
    EMPRESS = 3
    EMPEROR = 4
    HIEROPHANT = 5
    LOVERS = 6
    CHARIOT = 7
    STRENGTH = 8
    HERMIT = 9
    WHEEL_OF_FORTUNE = 10
    JUSTICE = 11
    HANGED_MAN = 12
    DEATH = 13
    TEMPERANCE = 14
    DEVIL = 15
    TOWER = 16
    STAR = 17
    MOON = 18
    SUN = 19
    JUDGEMENT = 20
    WORLD = 21

    @property
    def display_name(self) -> str:
        return _MAJOR_NAMES[self.value]

    @property
    def roman_numeral(self) -> str:
        return to_roman_numeral(self.value)


_MAJOR_NAMES: List[str] = [
    "The Fool", "The Magician", "The High Priestess", "The Empress",
    "The Emperor", "The Hierophant", "The Lovers", "The Chariot",
    "Strength", "The Hermit", "Wheel of Fortune", "Justice",
    "The Hanged Man", "Death", "Temperance", "The Devil",
    "The Tower", "The Star", "The Moon", "The Sun",
    "Judgement", "The World",
]


_ROMAN_VALUES: List[Tuple[int, str]] = [
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
]


def to_roman_numeral(num: int) -> str:
    """
    Convert a non-negative integer to a roman numeral.
    Zero has no roman form; it renders as "0" (The Fool).
    """
    if num <= 0:
        return "0"
    parts: List[str] = []
    remaining = num
    for value, numeral in _ROMAN_VALUES:
        while remaining >= value:
            parts.append(numeral)
            remaining -= value
    return "".join(parts)
