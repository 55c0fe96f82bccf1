"""studydeck-core: turn a folder of Markdown study notes into a card deck.

The extraction strategies parse loosely structured Markdown (``**Q:**``/``A:``
pairs, heading sections, good/bad code examples, an overview page) into cards
made of typed content blocks. The build graph walks a content folder, runs
the strategies per file and numbers the cards; exporters write the dataset
script the browser viewer loads, plain JSON, or Anki decks.

    >>> from studydeck_core import extract_qa
    >>> cards = extract_qa("**Q: What is X?**\\nA: X is a thing.\\n", "practice/x.md")
    >>> cards[0].answer[0].content
    'X is a thing.'

Building a whole deck:

    >>> from studydeck_core.graph import build_deck_graph, PRACTICE_PRESET
    >>> graph = build_deck_graph(PRACTICE_PRESET)
    >>> result = graph.invoke({"root": "."})
"""

from studydeck_core.extractors import (
    clean_markdown,
    extract_concepts,
    extract_index_overview,
    extract_qa,
    extract_sections,
)
from studydeck_core.graph import BuildConfig, build_deck_graph
from studydeck_core.schemas.cards import Card, CodeType

__version__ = "0.1.0"

__all__ = [
    # Extraction
    "extract_qa",
    "extract_sections",
    "extract_concepts",
    "extract_index_overview",
    "clean_markdown",
    # Pipeline
    "build_deck_graph",
    "BuildConfig",
    # Schemas
    "Card",
    "CodeType",
]
