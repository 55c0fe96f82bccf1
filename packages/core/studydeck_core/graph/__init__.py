"""LangGraph pipeline for building a card dataset from a content folder."""

from studydeck_core.graph.build_deck_graph import DeckPipelineState, build_deck_graph
from studydeck_core.graph.config import (
    FLASHCARDS_PRESET,
    PRACTICE_PRESET,
    PRESETS,
    BuildConfig,
    ContentSource,
    Strategy,
)

__all__ = [
    # Configuration
    "BuildConfig",
    "ContentSource",
    "Strategy",
    "PRESETS",
    "PRACTICE_PRESET",
    "FLASHCARDS_PRESET",
    # Pipeline
    "build_deck_graph",
    "DeckPipelineState",
]
