"""Tests for spread definitions and the spread registry."""

import pytest

from tarot_deck.errors import InvalidSpreadError
from tarot_deck.spreads import (
    CELTIC_CROSS,
    SINGLE_CARD,
    THREE_CARD,
    SpreadDefinition,
    SpreadLayoutPosition,
    SpreadPosition,
    get_spread,
    list_spreads,
)


class TestCommonSpreads:
    def test_single_card(self) -> None:
        assert SINGLE_CARD.name == "Single Card"
        assert SINGLE_CARD.card_count == 1
        assert len(SINGLE_CARD.layout) == 1

    def test_three_card(self) -> None:
        assert THREE_CARD.name == "Three Card Spread"
        assert [p.name for p in THREE_CARD.positions] == ["Past", "Present", "Future"]
        assert len(THREE_CARD.layout) == 3

    def test_celtic_cross(self) -> None:
        assert CELTIC_CROSS.name == "Celtic Cross"
        assert CELTIC_CROSS.card_count == 10
        assert len(CELTIC_CROSS.positions) == 10
        assert len(CELTIC_CROSS.layout) == 10
        assert CELTIC_CROSS.allow_reversals is True
        deal_orders = [p.deal_order for p in CELTIC_CROSS.positions]
        assert len(set(deal_orders)) == len(deal_orders)

    def test_celtic_cross_crossing_card_is_rotated(self) -> None:
        assert CELTIC_CROSS.layout_for(2).rotation == 90.0
        assert CELTIC_CROSS.layout_for(1).rotation is None

    @pytest.mark.parametrize("spread", list_spreads(), ids=lambda s: s.id)
    def test_layout_covers_every_position(self, spread: SpreadDefinition) -> None:
        assert {entry.position for entry in spread.layout} == {p.position for p in spread.positions}
        for entry in spread.layout:
            assert 0.0 <= entry.x <= 1.0
            assert 0.0 <= entry.y <= 1.0


class TestRegistry:
    def test_list_spreads(self) -> None:
        assert [s.id for s in list_spreads()] == ["single", "three_card", "five_card", "celtic_cross"]

    def test_get_spread(self) -> None:
        assert get_spread("celtic_cross") is CELTIC_CROSS

    def test_unknown_spread(self) -> None:
        with pytest.raises(InvalidSpreadError, match="not registered"):
            get_spread("horseshoe")


class TestValidation:
    def test_position_construction(self) -> None:
        position = SpreadPosition(1, "Test Position", "Test significance", 1)
        assert position.position == 1
        assert position.name == "Test Position"
        assert position.position_significance == "Test significance"
        assert position.deal_order == 1

    def test_duplicate_deal_order_rejected(self) -> None:
        with pytest.raises(InvalidSpreadError, match="deal orders"):
            SpreadDefinition(
                id="bad", name="Bad", description="",
                positions=[SpreadPosition(1, "A", "", 1), SpreadPosition(2, "B", "", 1)],
                layout=[],
            )

    def test_duplicate_position_rejected(self) -> None:
        with pytest.raises(InvalidSpreadError, match="position indices"):
            SpreadDefinition(
                id="bad", name="Bad", description="",
                positions=[SpreadPosition(1, "A", "", 1), SpreadPosition(1, "B", "", 2)],
                layout=[],
            )

    def test_layout_must_reference_positions(self) -> None:
        with pytest.raises(InvalidSpreadError, match="unknown position 3"):
            SpreadDefinition(
                id="bad", name="Bad", description="",
                positions=[SpreadPosition(1, "A", "", 1)],
                layout=[SpreadLayoutPosition(3, 0.5, 0.5)],
            )

    def test_lists_stored_as_tuples(self) -> None:
        spread = SpreadDefinition(
            id="ok", name="Ok", description="",
            positions=[SpreadPosition(1, "A", "", 2), SpreadPosition(2, "B", "", 1)],
            layout=[SpreadLayoutPosition(1, 0.0, 0.0)],
        )
        assert isinstance(spread.positions, tuple)
        assert [p.name for p in spread.positions_in_deal_order()] == ["B", "A"]
