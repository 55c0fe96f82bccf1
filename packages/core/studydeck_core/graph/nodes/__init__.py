"""Pipeline nodes for the deck build graph.

    - collect: find and read Markdown files under each content source
    - extract: run the configured extraction strategies per file
    - assign_ids: number the cards in dataset order
"""

from studydeck_core.graph.nodes import assign_ids, collect, extract

__all__ = [
    "assign_ids",
    "collect",
    "extract",
]
