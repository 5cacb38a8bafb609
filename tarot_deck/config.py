"""
config.py — Environment-backed settings and logging setup.

Settings are read once by the entry points (main.py, streamlit.py, logic.py)
and passed down explicitly. The deck, strategies and generator never read
the environment themselves.

Environment (a .env file in the working directory is honoured):
  TAROT_DATA_DIR        card data directory (default: bundled data)
  TAROT_SHUFFLE         secure | simple            (default: secure)
  TAROT_SELECTION       random | top               (default: random)
  TAROT_REVERSAL_PROB   float in [0, 1]            (default: 0.3)
  TAROT_SEED            int or str, seeds "simple" shuffles and reversals
  LOG_LEVEL             DEBUG / INFO / WARNING / ERROR
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import InvalidParameterError
from .reading import DEFAULT_REVERSAL_PROBABILITY

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    data_dir: Optional[str] = None
    shuffle_strategy: str = "secure"
    selection_strategy: str = "random"
    reversal_probability: float = DEFAULT_REVERSAL_PROBABILITY
    seed: Optional[str] = None
    log_level: str = "INFO"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise InvalidParameterError(f"{name} must be a number, got {raw!r}") from None
    if not (0.0 <= value <= 1.0):
        raise InvalidParameterError(f"{name} must be within [0.0, 1.0], got {value}")
    return value


def load_settings(dotenv: bool = True) -> Settings:
    """Build Settings from the process environment (and .env when `dotenv`)."""
    if dotenv:
        load_dotenv()
    return Settings(
        data_dir=os.getenv("TAROT_DATA_DIR") or None,
        shuffle_strategy=os.getenv("TAROT_SHUFFLE", "secure").strip().lower(),
        selection_strategy=os.getenv("TAROT_SELECTION", "random").strip().lower(),
        reversal_probability=_float_env("TAROT_REVERSAL_PROB", DEFAULT_REVERSAL_PROBABILITY),
        seed=os.getenv("TAROT_SEED") or None,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def setup_logging(level: str = "INFO") -> None:
    """Call once at program start (main.py / streamlit.py)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )
