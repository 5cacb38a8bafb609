# streamlit.py — Minimal UI for tarot-deck readings
# Run:  streamlit run streamlit.py

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

import streamlit as st

from tarot_deck.config import load_settings, setup_logging
from tarot_deck.errors import TarotCoreError
from tarot_deck.logic import perform_reading
from tarot_deck.spreads import list_spreads

settings = load_settings()
setup_logging(settings.log_level)

# -----------------------------
# Page setup
# -----------------------------
st.set_page_config(
    page_title="Tarot Deck",
    page_icon="🔮",
    layout="wide",
)

st.title("🔮 Tarot Deck")
st.caption("Shuffle, draw into a spread, and read the cards in deal order.")

# -----------------------------
# Sidebar controls
# -----------------------------
st.sidebar.header("Controls")

spreads = {s.id: s for s in list_spreads()}
spread_id = st.sidebar.selectbox(
    "Spread",
    list(spreads.keys()),
    index=1,
    format_func=lambda sid: f"{spreads[sid].name} ({spreads[sid].card_count})",
)
st.sidebar.caption(spreads[spread_id].description)

selection = st.sidebar.radio(
    "Selection",
    options=["random", "top"],
    index=0 if settings.selection_strategy == "random" else 1,
    help="random: pick anywhere in the deck; top: deal from the top after shuffling.",
)

reversal_probability = st.sidebar.slider(
    "Reversed probability",
    min_value=0.0, max_value=1.0, value=float(settings.reversal_probability), step=0.05,
    help="Probability a drawn card is reversed.",
)

seed = st.sidebar.text_input(
    "Seed (optional)",
    value=settings.seed or "",
    placeholder="Leave empty for random each time",
    help="Enter a value to lock results; leave empty for a fresh random draw.",
)

image_ext = st.sidebar.selectbox("Image extension", options=["png", "jpg", "webp"], index=0)
show_paths = st.sidebar.checkbox("Show image paths (debug)", value=False)

# -----------------------------
# Main panel inputs
# -----------------------------
question = st.text_area(
    "Your question (optional)",
    placeholder="Type your question or context; it is kept with the reading.",
    height=100,
)

col_btn1, col_btn2 = st.columns([1, 1])
with col_btn1:
    run = st.button("🔀 Draw cards", use_container_width=True)
with col_btn2:
    clear = st.button("🧹 Clear output", use_container_width=True)

if clear:
    st.session_state.pop("reading_result", None)
    st.rerun()

# -----------------------------
# Execute draw
# -----------------------------
if run:
    with st.spinner("Drawing cards..."):
        seed_val: Optional[int | str]
        if seed.strip() == "":
            seed_val = None
        else:
            try:
                seed_val = int(seed)
            except ValueError:
                seed_val = seed
        try:
            st.session_state["reading_result"] = perform_reading(
                spread_id,
                seed=seed_val,
                reversal_probability=reversal_probability,
                selection=selection,
                question=question,
                settings=settings,
                image_ext=image_ext,
            )
        except TarotCoreError as e:
            st.error(f"Reading failed: {type(e).__name__}: {e}")

# -----------------------------
# Render output
# -----------------------------
result: Optional[Dict[str, Any]] = st.session_state.get("reading_result")
if result:
    meta = result["meta"]
    reading = result["reading"]
    cards: List[Dict[str, Any]] = reading["cards"]

    st.subheader(reading["spread_name"])

    sb1, sb2, sb3 = st.columns(3)
    with sb1:
        st.metric("Cards", len(cards))
        if not reading["complete"]:
            st.caption("Partial reading: the deck ran out of cards.")
    with sb2:
        st.metric("Selection", meta["selection"])
        st.caption(f"Shuffle: `{meta['shuffle']}`")
    with sb3:
        st.metric("Reversed prob", meta["reversal_probability"])
        st.caption(f"Seed: `{meta['seed']}`")

    # Cards grid, in deal order
    ordered = sorted(cards, key=lambda c: c["deal_order"])
    if ordered:
        cols_per_row = 5 if len(ordered) >= 5 else max(3, len(ordered))
        for start in range(0, len(ordered), cols_per_row):
            cols = st.columns(cols_per_row, gap="small")
            for col, card in zip(cols, ordered[start:start + cols_per_row]):
                caption = " · ".join([f"**{card['position_name']}**", card["text"]])
                path = card.get("image_path")
                if path and os.path.isfile(path):
                    col.image(path, caption=caption, use_column_width=True)
                    if show_paths:
                        col.caption(f"✓ {path}")
                else:
                    col.markdown(f"🖼️ *Image not found*\n\n{caption}\n\n{card['description']}")
                    if show_paths:
                        col.code(f"tried:\n{path}")

    st.markdown("---")
    st.subheader("Interpretation")
    st.text(reading["interpretation"])

    with st.expander("Debug JSON"):
        st.json(result, expanded=False)

else:
    st.info("Pick a spread, optionally enter a question, then click **Draw cards**.")
