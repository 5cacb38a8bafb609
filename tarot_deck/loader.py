# -*- coding: utf-8 -*-
"""
loader.py — Load validated card records from YAML data files.

Layout under the data directory (bundled default: tarot_deck/data):
  major-arcana/00-the-fool.yml ... 21-the-world.yml   one card per file
  minor-arcana/{cups,pentacles,swords,wands}.yml      `cards:` list per suit
  suits/{cups,pentacles,swords,wands}.yml             suit properties
  tarot-model/tags.yml, tarot-model/numerology.yml     symbol tags, numerology

Raw records are validated with pydantic before they become `Card`s. Any
problem raises a `TarotDataError` subclass:
- DataFileNotFoundError  — the expected file is missing
- MalformedCardDataError — undecodable text, YAML syntax error or schema violation

The loader is an ordinary object handed to `TarotDeck.from_loader`; parsed
files are cached per instance.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import yaml
from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

from .cards import Card, CardMeanings, VisualDescription
from .errors import DataFileNotFoundError, InvalidParameterError, MalformedCardDataError
from .types import Element, MajorArcanaNumber, MinorRank, Suit

logger = logging.getLogger(__name__)

BUNDLED_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")


# =========================
# Raw record schemas
# =========================

class _MeaningsRecord(BaseModel):
    upright: List[str]
    reversed: List[str]

    @field_validator("upright", "reversed")
    @classmethod
    def _non_empty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("meanings list must not be empty")
        return v


class _VisualRecord(BaseModel):
    background: str = ""
    foreground: str = ""


class _CardRecord(BaseModel):
    name: str = Field(..., min_length=1)
    keywords: List[str]
    meanings: _MeaningsRecord
    symbols: List[str] = Field(default_factory=list)
    significance: str = ""
    visual_description: _VisualRecord = Field(default_factory=_VisualRecord)
    emoji: Optional[str] = None


class _MajorCardRecord(_CardRecord):
    number: int = Field(..., ge=0, le=21)
    background_color: Optional[str] = None


class _MinorCardRecord(_CardRecord):
    pass


class _MinorSuitFile(BaseModel):
    cards: List[_MinorCardRecord]


class _SuitPropertiesRecord(BaseModel):
    element: Element
    general_meaning: str
    keywords: List[str]
    emoji: str


@dataclass(frozen=True)
class SuitProperties:
    suit: Suit
    element: Element
    general_meaning: str
    keywords: Tuple[str, ...]
    emoji: str


class _TagRecord(BaseModel):
    name: str
    lineage: str
    appearance: str
    interpretation: str
    meaning: str
    mythological_significance: str


class _NumerologyRecord(BaseModel):
    name: str
    meanings: List[str]
    appearances: List[str]
    significance: List[str]


@dataclass(frozen=True)
class Tag:
    """A symbol that recurs across cards, with its lineage and reading."""
    name: str
    lineage: str
    appearance: str
    interpretation: str
    meaning: str
    mythological_significance: str


@dataclass(frozen=True)
class Numerology:
    name: str
    meanings: Tuple[str, ...]
    appearances: Tuple[str, ...]
    significance: Tuple[str, ...]


_TAGS_ADAPTER = TypeAdapter(Dict[str, _TagRecord])
_NUMEROLOGY_ADAPTER = TypeAdapter(Dict[str, _NumerologyRecord])


def parse_minor_name(name: str) -> Tuple[MinorRank, Suit]:
    """Split "Ace of Cups" into (MinorRank.ACE, Suit.CUPS)."""
    parts = name.split(" of ")
    if len(parts) != 2:
        raise ValueError(f"Invalid minor arcana name format: {name!r}")
    return MinorRank.from_name(parts[0]), Suit.from_label(parts[1])


def _to_card_fields(record: _CardRecord) -> Dict[str, Any]:
    return {
        "keywords": tuple(record.keywords),
        "meanings": CardMeanings(
            upright=tuple(record.meanings.upright),
            reversed=tuple(record.meanings.reversed),
        ),
        "symbols": tuple(record.symbols),
        "significance": record.significance,
        "visual_description": VisualDescription(
            background=record.visual_description.background,
            foreground=record.visual_description.foreground,
        ),
        "emoji": record.emoji,
    }


# =========================
# Loader
# =========================

def major_arcana_filename(number: MajorArcanaNumber) -> str:
    """e.g. 00-the-fool.yml, 10-wheel-of-fortune.yml"""
    slug = number.display_name.lower().replace(" ", "-")
    return f"{int(number):02d}-{slug}.yml"


class TarotDataLoader:
    """Reads card data from a directory of YAML files."""

    def __init__(self, data_dir: Optional[str] = None) -> None:
        self.data_dir = data_dir or BUNDLED_DATA_DIR
        self._cache: Dict[str, Any] = {}

    def _read_yaml(self, relative_path: str) -> Any:
        if relative_path in self._cache:
            return self._cache[relative_path]
        path = os.path.join(self.data_dir, relative_path)
        if not os.path.isfile(path):
            raise DataFileNotFoundError(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise MalformedCardDataError(path, str(e)) from e
        logger.debug("Loaded %s", path)
        self._cache[relative_path] = data
        return data

    def _path(self, relative_path: str) -> str:
        return os.path.join(self.data_dir, relative_path)

    # -------------------------
    # Major arcana
    # -------------------------

    def load_major_arcana_card(self, number: MajorArcanaNumber) -> Card:
        try:
            number = MajorArcanaNumber(number)
        except ValueError:
            raise InvalidParameterError(f"Invalid major arcana number: {number}") from None
        rel = os.path.join("major-arcana", major_arcana_filename(number))
        raw = self._read_yaml(rel)
        try:
            record = _MajorCardRecord.model_validate(raw)
        except ValidationError as e:
            raise MalformedCardDataError(self._path(rel), str(e)) from e
        if record.number != int(number):
            raise MalformedCardDataError(
                self._path(rel), f"expected card number {int(number)}, got {record.number}"
            )
        return Card.major(
            record.number,
            record.name,
            background_color=record.background_color,
            **_to_card_fields(record),
        )

    def load_all_major_arcana_cards(self) -> List[Card]:
        cards = [self.load_major_arcana_card(n) for n in MajorArcanaNumber]
        logger.info("Loaded %d major arcana cards from %s", len(cards), self.data_dir)
        return sorted(cards, key=lambda c: c.rank)

    # -------------------------
    # Minor arcana
    # -------------------------

    def load_minor_arcana_cards(self, suit: Suit) -> List[Card]:
        rel = os.path.join("minor-arcana", f"{suit.label.lower()}.yml")
        raw = self._read_yaml(rel)
        try:
            suit_file = _MinorSuitFile.model_validate(raw)
        except ValidationError as e:
            raise MalformedCardDataError(self._path(rel), str(e)) from e

        cards: List[Card] = []
        for record in suit_file.cards:
            try:
                rank, card_suit = parse_minor_name(record.name)
            except ValueError as e:
                raise MalformedCardDataError(self._path(rel), str(e)) from e
            if card_suit is not suit:
                raise MalformedCardDataError(
                    self._path(rel), f"card '{record.name}' does not belong to suit {suit.label}"
                )
            cards.append(Card.minor(suit, int(rank), name=record.name, **_to_card_fields(record)))
        return sorted(cards, key=lambda c: c.rank)

    def load_all_minor_arcana_cards(self) -> List[Card]:
        cards: List[Card] = []
        for suit in Suit:
            cards.extend(self.load_minor_arcana_cards(suit))
        logger.info("Loaded %d minor arcana cards from %s", len(cards), self.data_dir)
        return cards

    # -------------------------
    # Suits
    # -------------------------

    def load_suit_properties(self, suit: Suit) -> SuitProperties:
        rel = os.path.join("suits", f"{suit.label.lower()}.yml")
        raw = self._read_yaml(rel)
        try:
            record = _SuitPropertiesRecord.model_validate(raw)
        except ValidationError as e:
            raise MalformedCardDataError(self._path(rel), str(e)) from e
        return SuitProperties(
            suit=suit,
            element=record.element,
            general_meaning=record.general_meaning,
            keywords=tuple(record.keywords),
            emoji=record.emoji,
        )

    # -------------------------
    # Symbols & numerology
    # -------------------------

    def load_tags(self) -> Dict[str, Tag]:
        """All symbol tags keyed by their YAML key (tarot-model/tags.yml)."""
        rel = os.path.join("tarot-model", "tags.yml")
        raw = self._read_yaml(rel)
        try:
            records = _TAGS_ADAPTER.validate_python(raw)
        except ValidationError as e:
            raise MalformedCardDataError(self._path(rel), str(e)) from e
        return {key: Tag(**record.model_dump()) for key, record in records.items()}

    def load_numerology(self) -> Dict[str, Numerology]:
        """Numerology entries keyed by number (tarot-model/numerology.yml)."""
        rel = os.path.join("tarot-model", "numerology.yml")
        raw = self._read_yaml(rel)
        try:
            records = _NUMEROLOGY_ADAPTER.validate_python(raw)
        except ValidationError as e:
            raise MalformedCardDataError(self._path(rel), str(e)) from e
        return {
            key: Numerology(
                name=record.name,
                meanings=tuple(record.meanings),
                appearances=tuple(record.appearances),
                significance=tuple(record.significance),
            )
            for key, record in records.items()
        }
