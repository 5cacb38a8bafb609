# -*- coding: utf-8 -*-
"""
strategies.py — Shuffle and card selection strategies.

Responsibilities:
- Unbiased shuffling (Fisher–Yates) over a cryptographically secure RNG
- A seedable, library-default shuffle for reproducible runs and tests
- Card selection from the top of a sequence, or after a shuffle
- Reproducible seeds (int or str; str is hashed)

Every strategy is pure: inputs are never mutated, a new list is returned.
"""

from __future__ import annotations

import hashlib
import random
from typing import List, Optional, Protocol, Sequence, TypeVar, Union

from .cards import Card
from .errors import InvalidParameterError

T = TypeVar("T")

Seed = Optional[Union[int, str]]


# =========================
# Seeds
# =========================

def normalize_seed(seed: Seed) -> Optional[int]:
    """
    Normalize seed to int. If str, hash with sha256 and take the first 8 bytes
    as an unsigned 64-bit integer. None stays None.
    """
    if seed is None:
        return None
    if isinstance(seed, bool):
        raise InvalidParameterError("seed must be int | str | None")
    if isinstance(seed, int):
        return seed
    if isinstance(seed, str):
        h = hashlib.sha256(seed.encode("utf-8")).digest()
        return int.from_bytes(h[:8], byteorder="big", signed=False)
    raise InvalidParameterError("seed must be int | str | None")


# =========================
# Shuffle strategies
# =========================

class ShuffleStrategy(Protocol):
    name: str
    description: str

    def shuffle(self, items: Sequence[T]) -> List[T]:
        ...


def fisher_yates_shuffle(items: Sequence[T], rng: random.Random) -> List[T]:
    """
    Fisher–Yates (Knuth) shuffle.
    Returns a new list and does not mutate the input.
    """
    arr = list(items)
    for i in range(len(arr) - 1, 0, -1):
        j = rng.randint(0, i)  # inclusive
        arr[i], arr[j] = arr[j], arr[i]
    return arr


class SecureShuffleStrategy:
    """Fisher–Yates over the operating system's CSPRNG; every permutation equally likely."""

    name = "Secure Fisher-Yates"
    description = "Cryptographically secure Fisher-Yates shuffle using SystemRandom"

    def __init__(self) -> None:
        # SystemRandom reads os.urandom and keeps no state, so sharing it is safe
        self._rng = random.SystemRandom()

    def shuffle(self, items: Sequence[T]) -> List[T]:
        return fisher_yates_shuffle(items, self._rng)


class SimpleShuffleStrategy:
    """Library-default shuffle on a seedable Mersenne Twister. Not for fairness guarantees."""

    name = "Simple"
    description = "Basic shuffle using the default (seedable) random number generator"

    def __init__(self, seed: Seed = None) -> None:
        self.seed = normalize_seed(seed)
        self._rng = random.Random(self.seed)

    def shuffle(self, items: Sequence[T]) -> List[T]:
        arr = list(items)
        self._rng.shuffle(arr)
        return arr


# =========================
# Selection strategies
# =========================

class SelectionStrategy(Protocol):
    name: str
    description: str

    def select_cards(self, cards: Sequence[Card], count: int) -> List[Card]:
        ...


class TopCardSelectionStrategy:
    name = "Top"
    description = "Select cards from the top of the deck in order"

    def select_cards(self, cards: Sequence[Card], count: int) -> List[Card]:
        if count <= 0:
            return []
        return list(cards[:count])


class RandomCardSelectionStrategy:
    name = "Random"
    description = "Select cards randomly from anywhere in the deck"

    def __init__(self, shuffle_strategy: Optional[ShuffleStrategy] = None) -> None:
        self.shuffle_strategy = shuffle_strategy or SecureShuffleStrategy()

    def select_cards(self, cards: Sequence[Card], count: int) -> List[Card]:
        if count <= 0:
            return []
        return self.shuffle_strategy.shuffle(cards)[:count]


# =========================
# Factories (resolve configured names)
# =========================

SHUFFLE_STRATEGIES = ("secure", "simple")
SELECTION_STRATEGIES = ("top", "random")


def shuffle_strategy_for(name: str, seed: Seed = None) -> ShuffleStrategy:
    """Build a shuffle strategy by name. The seed only applies to "simple"."""
    key = name.strip().lower()
    if key == "secure":
        return SecureShuffleStrategy()
    if key == "simple":
        return SimpleShuffleStrategy(seed=seed)
    raise InvalidParameterError(
        f"Unsupported shuffle strategy: {name!r} (expected one of {SHUFFLE_STRATEGIES})"
    )


def selection_strategy_for(name: str, shuffle_strategy: Optional[ShuffleStrategy] = None) -> SelectionStrategy:
    key = name.strip().lower()
    if key == "top":
        return TopCardSelectionStrategy()
    if key == "random":
        return RandomCardSelectionStrategy(shuffle_strategy=shuffle_strategy)
    raise InvalidParameterError(
        f"Unsupported selection strategy: {name!r} (expected one of {SELECTION_STRATEGIES})"
    )
