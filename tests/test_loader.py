"""Tests for the YAML card data loader."""

from pathlib import Path

import pytest
import yaml

from tarot_deck.deck import TarotDeck
from tarot_deck.errors import (
    DataFileNotFoundError,
    InvalidParameterError,
    MalformedCardDataError,
    TarotDataError,
)
from tarot_deck.loader import TarotDataLoader, major_arcana_filename, parse_minor_name
from tarot_deck.types import Element, MajorArcanaNumber, MinorRank, Suit


def _card(name: str, **extra) -> dict:
    data = {
        "name": name,
        "keywords": ["k1", "k2"],
        "meanings": {"upright": ["up"], "reversed": ["down"]},
    }
    data.update(extra)
    return data


def _write(path: Path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")


class TestBundledData:
    def test_loads_all_major(self, bundled_loader: TarotDataLoader) -> None:
        cards = bundled_loader.load_all_major_arcana_cards()
        assert [c.rank for c in cards] == list(range(22))
        assert cards[0].name == "The Fool"
        assert cards[21].name == "The World"
        assert all(c.meanings.upright and c.meanings.reversed for c in cards)

    def test_loads_all_minor(self, bundled_loader: TarotDataLoader) -> None:
        cards = bundled_loader.load_all_minor_arcana_cards()
        assert len(cards) == 56
        assert cards[0].id == "minor-cups-1"
        assert cards[-1].id == "minor-wands-14"

    def test_single_card(self, bundled_loader: TarotDataLoader) -> None:
        card = bundled_loader.load_major_arcana_card(MajorArcanaNumber.WHEEL_OF_FORTUNE)
        assert card.id == "major-10"
        assert card.text_representation() == "X - Wheel of Fortune"

    def test_suit_properties(self, bundled_loader: TarotDataLoader) -> None:
        props = bundled_loader.load_suit_properties(Suit.SWORDS)
        assert props.element is Element.AIR
        assert props.keywords

    def test_tags(self, bundled_loader: TarotDataLoader) -> None:
        tags = bundled_loader.load_tags()
        assert tags["lemniscate"].name == "Lemniscate"
        assert tags["pomegranate"].mythological_significance

    def test_numerology(self, bundled_loader: TarotDataLoader) -> None:
        numerology = bundled_loader.load_numerology()
        assert sorted(numerology, key=int) == [str(n) for n in range(11)]
        assert numerology["1"].name == "One"
        assert "The Magician" in numerology["1"].appearances

    def test_full_deck(self, bundled_loader: TarotDataLoader) -> None:
        deck = TarotDeck.from_loader(bundled_loader)
        assert deck.count == 78
        assert len({c.id for c in deck.all_cards}) == 78
        assert deck.get_minor_arcana(Suit.PENTACLES, MinorRank.QUEEN).name == "Queen of Pentacles"


class TestHelpers:
    def test_major_filenames(self) -> None:
        assert major_arcana_filename(MajorArcanaNumber.FOOL) == "00-the-fool.yml"
        assert major_arcana_filename(MajorArcanaNumber.WHEEL_OF_FORTUNE) == "10-wheel-of-fortune.yml"

    def test_parse_minor_name(self) -> None:
        assert parse_minor_name("Page of Wands") == (MinorRank.PAGE, Suit.WANDS)
        with pytest.raises(ValueError):
            parse_minor_name("The Fool")


class TestFailures:
    def test_missing_file(self, tmp_path: Path) -> None:
        loader = TarotDataLoader(str(tmp_path))
        with pytest.raises(DataFileNotFoundError) as exc:
            loader.load_major_arcana_card(MajorArcanaNumber.FOOL)
        assert exc.value.path.endswith("00-the-fool.yml")

    def test_deck_construction_propagates_failure(self, tmp_path: Path) -> None:
        with pytest.raises(TarotDataError):
            TarotDeck.from_loader(TarotDataLoader(str(tmp_path)))

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "major-arcana" / "00-the-fool.yml"
        path.parent.mkdir(parents=True)
        path.write_text("name: [unclosed\n", encoding="utf-8")
        with pytest.raises(MalformedCardDataError):
            TarotDataLoader(str(tmp_path)).load_major_arcana_card(MajorArcanaNumber.FOOL)

    def test_empty_meanings(self, tmp_path: Path) -> None:
        data = _card("The Fool", number=0)
        data["meanings"]["reversed"] = []
        _write(tmp_path / "major-arcana" / "00-the-fool.yml", data)
        with pytest.raises(MalformedCardDataError, match="must not be empty"):
            TarotDataLoader(str(tmp_path)).load_major_arcana_card(MajorArcanaNumber.FOOL)

    def test_missing_required_field(self, tmp_path: Path) -> None:
        data = _card("The Fool", number=0)
        del data["keywords"]
        _write(tmp_path / "major-arcana" / "00-the-fool.yml", data)
        with pytest.raises(MalformedCardDataError):
            TarotDataLoader(str(tmp_path)).load_major_arcana_card(MajorArcanaNumber.FOOL)

    def test_number_mismatch(self, tmp_path: Path) -> None:
        _write(tmp_path / "major-arcana" / "00-the-fool.yml", _card("The Fool", number=1))
        with pytest.raises(MalformedCardDataError, match="expected card number 0"):
            TarotDataLoader(str(tmp_path)).load_major_arcana_card(MajorArcanaNumber.FOOL)

    def test_minor_card_in_wrong_suit(self, tmp_path: Path) -> None:
        _write(tmp_path / "minor-arcana" / "cups.yml", {"cards": [_card("Ace of Swords")]})
        with pytest.raises(MalformedCardDataError, match="does not belong"):
            TarotDataLoader(str(tmp_path)).load_minor_arcana_cards(Suit.CUPS)

    def test_minor_card_bad_name(self, tmp_path: Path) -> None:
        _write(tmp_path / "minor-arcana" / "cups.yml", {"cards": [_card("Jack of Cups")]})
        with pytest.raises(MalformedCardDataError):
            TarotDataLoader(str(tmp_path)).load_minor_arcana_cards(Suit.CUPS)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "major-arcana" / "00-the-fool.yml"
        path.parent.mkdir(parents=True)
        path.write_bytes(b"name: The \xff\xfe Fool\n")
        with pytest.raises(MalformedCardDataError) as exc:
            TarotDataLoader(str(tmp_path)).load_major_arcana_card(MajorArcanaNumber.FOOL)
        assert exc.value.path.endswith("00-the-fool.yml")

    @pytest.mark.parametrize("number", [22, -1])
    def test_out_of_range_major_number(self, tmp_path: Path, number: int) -> None:
        with pytest.raises(InvalidParameterError):
            TarotDataLoader(str(tmp_path)).load_major_arcana_card(number)


class TestCustomData:
    def test_minor_cards_sorted_by_rank(self, tmp_path: Path) -> None:
        _write(
            tmp_path / "minor-arcana" / "cups.yml",
            {"cards": [_card("King of Cups", emoji="🏆"), _card("Ace of Cups"), _card("Five of Cups")]},
        )
        cards = TarotDataLoader(str(tmp_path)).load_minor_arcana_cards(Suit.CUPS)
        assert [c.rank for c in cards] == [1, 5, 14]
        assert cards[-1].emoji == "🏆"
        assert cards[0].keywords == ("k1", "k2")

    def test_files_are_cached(self, tmp_path: Path) -> None:
        path = tmp_path / "minor-arcana" / "cups.yml"
        _write(path, {"cards": [_card("Ace of Cups")]})
        loader = TarotDataLoader(str(tmp_path))
        loader.load_minor_arcana_cards(Suit.CUPS)
        path.unlink()
        assert len(loader.load_minor_arcana_cards(Suit.CUPS)) == 1

    def test_custom_tags_and_numerology(self, tmp_path: Path) -> None:
        tag = {
            "name": "Star",
            "lineage": "l",
            "appearance": "a",
            "interpretation": "i",
            "meaning": "m",
            "mythological_significance": "s",
        }
        _write(tmp_path / "tarot-model" / "tags.yml", {"star": tag})
        _write(
            tmp_path / "tarot-model" / "numerology.yml",
            {"7": {"name": "Seven", "meanings": ["m"], "appearances": ["The Chariot"], "significance": ["s"]}},
        )
        loader = TarotDataLoader(str(tmp_path))
        assert loader.load_tags()["star"].meaning == "m"
        assert loader.load_numerology()["7"].appearances == ("The Chariot",)

    def test_tags_missing_field(self, tmp_path: Path) -> None:
        _write(tmp_path / "tarot-model" / "tags.yml", {"star": {"name": "Star"}})
        with pytest.raises(MalformedCardDataError):
            TarotDataLoader(str(tmp_path)).load_tags()

    def test_numerology_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DataFileNotFoundError):
            TarotDataLoader(str(tmp_path)).load_numerology()
