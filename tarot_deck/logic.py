"""
logic.py — Orchestration layer that ties the deck core to UI/CLI needs.

Responsibilities:
- Provide a single high-level entry point `perform_reading(...)` for the UI.
- Build the deck from configured data, shuffle, draw into a spread, and
  attach asset image paths.
- Return a fully structured JSON-like dict that the UI can consume directly.

Notes:
- Image assets are expected under: ./assets/cards/{card_id}.png
- A seed makes the whole reading reproducible: it switches the shuffle to
  the seedable "simple" strategy and seeds the reversal draws. A deck passed
  in by the caller is reset to canonical order and shuffled the same way.
"""

from __future__ import annotations

import logging
import os
import random
from typing import Any, Dict, List, Optional

from .config import Settings, load_settings
from .deck import TarotDeck
from .loader import TarotDataLoader
from .reading import Reading, ReadingGenerator
from .spreads import get_spread
from .strategies import (
    Seed,
    ShuffleStrategy,
    SimpleShuffleStrategy,
    normalize_seed,
    selection_strategy_for,
    shuffle_strategy_for,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Paths & utilities
# -----------------------------------------------------------------------------

# Project root (resolve relative to this file)
_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
CARD_ASSETS_DIR = os.path.join(_PROJECT_ROOT, "assets", "cards")


def get_card_image_path(card_id: str, ext: str = "png") -> str:
    """
    Build a file path to a card image: ./assets/cards/{card_id}.png

    The path is returned whether or not the file exists; the UI decides
    how to fall back.
    """
    return os.path.join(CARD_ASSETS_DIR, f"{card_id}.{ext}")


def build_deck(settings: Settings, shuffle_strategy: Optional[ShuffleStrategy] = None) -> TarotDeck:
    """Load the configured card data into a new deck. Data errors propagate."""
    loader = TarotDataLoader(settings.data_dir)
    strategy = shuffle_strategy or shuffle_strategy_for(settings.shuffle_strategy)
    return TarotDeck.from_loader(loader, shuffle_strategy=strategy)


# -----------------------------------------------------------------------------
# Serialization
# -----------------------------------------------------------------------------

def reading_to_dict(reading: Reading, image_ext: str = "png") -> Dict[str, Any]:
    """Flatten a Reading into JSON-serializable data (cards in declaration order)."""
    cards: List[Dict[str, Any]] = []
    for index, drawn in enumerate(reading.drawn_cards):
        card = drawn.card
        cards.append(
            {
                "card_id": card.id,
                "card_name": card.full_name,
                "arcana": card.arcana.value,
                "suit": card.suit.label if card.suit else None,
                "rank": card.rank,
                "orientation": drawn.orientation,
                "position": drawn.position.position,
                "position_name": drawn.position.name,
                "deal_order": drawn.position.deal_order,
                "index": index,
                "text": drawn.text_representation(),
                "description": card.rendering_description(drawn.is_reversed),
                "image_path": get_card_image_path(card.id, ext=image_ext),
            }
        )
    return {
        "id": reading.id,
        "spread": reading.spread.id,
        "spread_name": reading.spread.name,
        "timestamp": reading.timestamp.isoformat(),
        "user_context": reading.user_context,
        "complete": reading.is_complete,
        "cards": cards,
        "interpretation": reading.basic_interpretation(),
    }


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def perform_reading(
    spread: str = "three_card",
    *,
    seed: Seed = None,
    reversal_probability: Optional[float] = None,
    selection: Optional[str] = None,
    question: Optional[str] = None,
    deck: Optional[TarotDeck] = None,
    settings: Optional[Settings] = None,
    image_ext: str = "png",
) -> Dict[str, Any]:
    """
    Perform a tarot reading.

    Args:
        spread: Spread id ("single", "three_card", "five_card", "celtic_cross").
        seed: Reproducibility seed (int or str). Falls back to settings.seed.
        reversal_probability: Probability of a reversed card, [0, 1].
        selection: "random" or "top"; defaults to the configured strategy.
        question: The querent's question, kept as the reading's context.
        deck: An existing deck to draw from; a fresh one is loaded otherwise.
        settings: Explicit settings; read from the environment when omitted.
        image_ext: Card image file extension (default "png").

    Returns:
        {
          "meta": {"seed", "spread", "shuffle", "selection",
                   "reversal_probability", "question"},
          "reading": {... reading_to_dict(...) ...}
        }
    """
    settings = settings or load_settings()
    spread_def = get_spread(spread)

    if seed is None:
        seed = settings.seed
    norm_seed = normalize_seed(seed)
    prob = settings.reversal_probability if reversal_probability is None else reversal_probability

    if norm_seed is not None:
        shuffle_strategy: ShuffleStrategy = SimpleShuffleStrategy(seed=norm_seed)
    else:
        shuffle_strategy = shuffle_strategy_for(settings.shuffle_strategy)

    if deck is None:
        deck = build_deck(settings, shuffle_strategy=shuffle_strategy)
    selection_strategy = selection_strategy_for(selection or settings.selection_strategy, shuffle_strategy)

    # 1) Shuffle and draw into the spread
    if norm_seed is not None:
        # a seeded reading starts from canonical order, whichever deck it uses
        deck.reset()
        deck.shuffle(shuffle_strategy)
    else:
        shuffle_strategy = deck.shuffle_strategy
        deck.shuffle()
    generator = ReadingGenerator(deck, reversal_probability=prob, rng=random.Random(norm_seed))
    reading = generator.generate_reading(spread_def, selection_strategy, user_context=question or None)

    return {
        "meta": {
            "seed": norm_seed,
            "spread": spread_def.id,
            "shuffle": shuffle_strategy.name,
            "selection": selection_strategy.name,
            "reversal_probability": float(prob),
            "question": question or None,
        },
        "reading": reading_to_dict(reading, image_ext=image_ext),
    }
