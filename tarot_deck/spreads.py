# -*- coding: utf-8 -*-
"""
spreads.py — Spread definitions (positions + visual layout) and the spread registry.

A spread is static data: an ordered list of positions (with deal order) and a
parallel layout list of 2D coordinates in the unit square. Definitions are
checked for consistency when they are built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .errors import InvalidSpreadError


@dataclass(frozen=True)
class SpreadPosition:
    position: int                # 1-based index as declared
    name: str
    position_significance: str
    deal_order: int


@dataclass(frozen=True)
class SpreadLayoutPosition:
    position: int
    x: float
    y: float
    rotation: Optional[float] = None   # degrees


@dataclass(frozen=True)
class SpreadDefinition:
    """A named spread template."""
    id: str
    name: str
    description: str
    positions: Tuple[SpreadPosition, ...]
    layout: Tuple[SpreadLayoutPosition, ...]
    allow_reversals: bool = True
    preferred_strategy: Optional[str] = None

    def __post_init__(self) -> None:
        # accept lists from callers, store tuples
        object.__setattr__(self, "positions", tuple(self.positions))
        object.__setattr__(self, "layout", tuple(self.layout))

        indices = [p.position for p in self.positions]
        if len(set(indices)) != len(indices):
            raise InvalidSpreadError(f"Spread '{self.id}' has duplicate position indices")
        deal_orders = [p.deal_order for p in self.positions]
        if len(set(deal_orders)) != len(deal_orders):
            raise InvalidSpreadError(f"Spread '{self.id}' has duplicate deal orders")
        known = set(indices)
        for entry in self.layout:
            if entry.position not in known:
                raise InvalidSpreadError(
                    f"Spread '{self.id}' layout references unknown position {entry.position}"
                )

    @property
    def card_count(self) -> int:
        return len(self.positions)

    def positions_in_deal_order(self) -> List[SpreadPosition]:
        return sorted(self.positions, key=lambda p: p.deal_order)

    def layout_for(self, position: int) -> Optional[SpreadLayoutPosition]:
        for entry in self.layout:
            if entry.position == position:
                return entry
        return None


# =========================
# Common spreads
# =========================

SINGLE_CARD = SpreadDefinition(
    id="single",
    name="Single Card",
    description="A single card draw for daily guidance or simple questions",
    positions=(
        SpreadPosition(1, "Guidance", "The main message or guidance for your question", 1),
    ),
    layout=(
        SpreadLayoutPosition(1, 0.5, 0.5),
    ),
)

THREE_CARD = SpreadDefinition(
    id="three_card",
    name="Three Card Spread",
    description="A simple spread representing Past, Present, and Future",
    positions=(
        SpreadPosition(1, "Past", "Events and influences from the past affecting the current situation", 1),
        SpreadPosition(2, "Present", "The current situation and immediate influences", 2),
        SpreadPosition(3, "Future", "Potential outcomes and future developments", 3),
    ),
    layout=(
        SpreadLayoutPosition(1, 0.0, 0.5),
        SpreadLayoutPosition(2, 0.5, 0.5),
        SpreadLayoutPosition(3, 1.0, 0.5),
    ),
)

FIVE_CARD = SpreadDefinition(
    id="five_card",
    name="Five Card Spread",
    description="Issue, Action, Obstacle, Resource and Outcome laid out as a cross",
    positions=(
        SpreadPosition(1, "Issue", "The heart of the matter", 1),
        SpreadPosition(2, "Action", "What you can do about it", 2),
        SpreadPosition(3, "Obstacle", "What stands in the way", 3),
        SpreadPosition(4, "Resource", "What you can draw on", 4),
        SpreadPosition(5, "Outcome", "Where the current path leads", 5),
    ),
    layout=(
        SpreadLayoutPosition(1, 0.5, 0.5),
        SpreadLayoutPosition(2, 0.2, 0.5),
        SpreadLayoutPosition(3, 0.8, 0.5),
        SpreadLayoutPosition(4, 0.5, 0.85),
        SpreadLayoutPosition(5, 0.5, 0.15),
    ),
)

CELTIC_CROSS = SpreadDefinition(
    id="celtic_cross",
    name="Celtic Cross",
    description="The classic 10-card spread for comprehensive life readings",
    positions=(
        SpreadPosition(1, "Present Situation", "Your current circumstances and state of mind", 1),
        SpreadPosition(2, "Challenge", "The challenge or obstacle you face", 2),
        SpreadPosition(3, "Distant Past", "Past events that led to the current situation", 3),
        SpreadPosition(4, "Recent Past", "Recent events affecting the present", 4),
        SpreadPosition(5, "Possible Outcome", "What may happen if current path continues", 5),
        SpreadPosition(6, "Near Future", "What will likely happen in the immediate future", 6),
        SpreadPosition(7, "Your Approach", "Your approach to the situation", 7),
        SpreadPosition(8, "External Influences", "How others perceive you and external factors", 8),
        SpreadPosition(9, "Hopes and Fears", "Your inner emotions, hopes, and fears", 9),
        SpreadPosition(10, "Final Outcome", "The ultimate outcome based on current path", 10),
    ),
    layout=(
        SpreadLayoutPosition(1, 0.4, 0.5),                 # center
        SpreadLayoutPosition(2, 0.4, 0.5, rotation=90.0),  # crossing
        SpreadLayoutPosition(3, 0.4, 0.8),                 # below
        SpreadLayoutPosition(4, 0.1, 0.5),                 # left
        SpreadLayoutPosition(5, 0.4, 0.2),                 # above
        SpreadLayoutPosition(6, 0.7, 0.5),                 # right
        SpreadLayoutPosition(7, 0.85, 0.8),                # staff, bottom up
        SpreadLayoutPosition(8, 0.85, 0.65),
        SpreadLayoutPosition(9, 0.85, 0.35),
        SpreadLayoutPosition(10, 0.85, 0.2),
    ),
)


# =========================
# Spread registry
# =========================

SPREAD_REGISTRY: Dict[str, SpreadDefinition] = {
    s.id: s for s in (SINGLE_CARD, THREE_CARD, FIVE_CARD, CELTIC_CROSS)
}


def list_spreads() -> List[SpreadDefinition]:
    """Return all available spreads."""
    return list(SPREAD_REGISTRY.values())


def get_spread(spread_id: str) -> SpreadDefinition:
    """Get a single spread definition; raise if not registered."""
    if spread_id not in SPREAD_REGISTRY:
        raise InvalidSpreadError(f"Spread '{spread_id}' is not registered.")
    return SPREAD_REGISTRY[spread_id]
