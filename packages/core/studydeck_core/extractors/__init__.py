"""Markdown-to-card extraction strategies.

All four strategies are pure functions of ``(markdown, source_path)``:

    - extract_qa: ``**Q:**`` question/answer pairs
    - extract_sections: one card per ``##``/``###``/``####`` section
    - extract_concepts: one card per code fence tagged as a good/bad example
    - extract_index_overview: a single overview card for a landing document

They share the line classifier in ``lines`` and the block accumulators in
``accumulators``.
"""

from studydeck_core.extractors.cleanup import (
    clean_markdown,
    format_topic_label,
    normalize_topic_id,
    topic_info,
)
from studydeck_core.extractors.concepts import extract_concepts
from studydeck_core.extractors.overview import OverviewOptions, extract_index_overview
from studydeck_core.extractors.qa import PRACTICE_CATEGORY, extract_qa
from studydeck_core.extractors.sections import extract_sections

__all__ = [
    # Strategies
    "extract_qa",
    "extract_sections",
    "extract_concepts",
    "extract_index_overview",
    "OverviewOptions",
    "PRACTICE_CATEGORY",
    # Text helpers
    "clean_markdown",
    "format_topic_label",
    "normalize_topic_id",
    "topic_info",
]
