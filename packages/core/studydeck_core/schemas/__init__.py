"""Data schemas for cards, content blocks and topics."""

from studydeck_core.schemas.cards import (
    Card,
    CodeBlock,
    CodeType,
    ContentBlock,
    ListBlock,
    TableBlock,
    TextBlock,
)
from studydeck_core.schemas.document import ExtractionStats, SourceFile
from studydeck_core.schemas.topics import TopicGroup, TopicInfo

__all__ = [
    # Cards
    "Card",
    "ContentBlock",
    "CodeType",
    # Blocks
    "TextBlock",
    "ListBlock",
    "TableBlock",
    "CodeBlock",
    # Sources
    "SourceFile",
    "ExtractionStats",
    # Topics
    "TopicInfo",
    "TopicGroup",
]
