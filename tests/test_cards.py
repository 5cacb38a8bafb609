"""Tests for the Card record."""

import dataclasses

import pytest

from tarot_deck.cards import Card, CardMeanings
from tarot_deck.errors import InvalidParameterError
from tarot_deck.types import Arcana, Element, Suit
from tests.conftest import make_major, make_minor


class TestIdentity:
    def test_major_id(self) -> None:
        assert make_major(0).id == "major-0"
        assert make_major(21).id == "major-21"

    def test_minor_id(self) -> None:
        assert make_minor(Suit.CUPS, 1).id == "minor-cups-1"
        assert make_minor(Suit.PENTACLES, 14).id == "minor-pentacles-14"

    def test_identical_fields_give_identical_ids(self) -> None:
        a = make_minor(Suit.SWORDS, 7)
        b = make_minor(Suit.SWORDS, 7)
        assert a.id == b.id
        assert a == b

    def test_id_ignores_descriptive_fields(self) -> None:
        a = make_major(3)
        b = dataclasses.replace(a, name="Renamed", keywords=("other",))
        assert a.id == b.id

    def test_cards_are_immutable(self) -> None:
        card = make_major(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            card.name = "Changed"  # type: ignore[misc]


class TestTaggedUnion:
    def test_major_has_no_suit(self) -> None:
        card = make_major(5)
        assert card.arcana is Arcana.MAJOR
        assert card.is_major and not card.is_minor
        assert card.suit is None
        assert card.element is None
        assert card.roman_numeral == "V"

    def test_minor_fields(self) -> None:
        card = make_minor(Suit.WANDS, 12)
        assert card.arcana is Arcana.MINOR
        assert card.is_minor
        assert card.element is Element.FIRE
        assert card.full_name == "Knight of Wands"
        assert card.roman_numeral is None

    def test_major_with_suit_rejected(self) -> None:
        meanings = CardMeanings(("u",), ("r",))
        with pytest.raises(InvalidParameterError):
            Card(arcana=Arcana.MAJOR, rank=0, name="The Fool", keywords=(), meanings=meanings, suit=Suit.CUPS)

    def test_minor_without_suit_rejected(self) -> None:
        meanings = CardMeanings(("u",), ("r",))
        with pytest.raises(InvalidParameterError):
            Card(arcana=Arcana.MINOR, rank=1, name="Ace", keywords=(), meanings=meanings)

    def test_out_of_range_numbers_rejected(self) -> None:
        meanings = CardMeanings(("u",), ("r",))
        with pytest.raises(InvalidParameterError):
            Card.major(22, "Nope", [], meanings)
        with pytest.raises(InvalidParameterError):
            Card.minor(Suit.CUPS, 15, [], meanings)


class TestTextViews:
    def test_major_text_representation(self) -> None:
        card = make_major(21)
        assert card.text_representation() == "XXI - The World"
        assert card.text_representation(is_reversed=True) == "XXI - The World (Reversed)"

    def test_fool_text_representation(self) -> None:
        assert make_major(0).text_representation() == "0 - The Fool"

    def test_minor_text_representation(self) -> None:
        card = make_minor(Suit.CUPS, 1)
        assert card.text_representation() == "Ace of Cups"
        assert card.text_representation(True) == "Ace of Cups (Reversed)"

    def test_rendering_description_uses_orientation(self) -> None:
        card = make_major(2)
        assert card.rendering_description() == "The High Priestess: upright2"
        assert card.rendering_description(True) == "The High Priestess (Reversed): reversed2"

    def test_rendering_description_without_meanings(self) -> None:
        card = dataclasses.replace(make_minor(Suit.SWORDS, 3), meanings=CardMeanings((), ()))
        assert card.rendering_description() == "Three of Swords: No meaning available"
