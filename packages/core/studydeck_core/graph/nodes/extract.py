"""Extract node: run the configured strategies over every collected file."""

from typing import Any

from studydeck_core.extractors import (
    extract_concepts,
    extract_index_overview,
    extract_qa,
    extract_sections,
)
from studydeck_core.extractors.cleanup import path_grouping
from studydeck_core.graph.config import BuildConfig, Strategy
from studydeck_core.schemas.cards import Card
from studydeck_core.schemas.document import ExtractionStats, SourceFile
from studydeck_core.utils.logging import get_logger

logger = get_logger(__name__)


def extract_file(
    source: SourceFile, config: BuildConfig, stats: ExtractionStats | None = None
) -> list[Card]:
    """Extract every card a single file yields under ``config``.

    Strategies run in the order Q&A, sections, concepts; the overview card, if
    this is the overview document, comes last.

    Args:
        source: File to extract from
        config: Build configuration
        stats: Optional counters updated in place

    Returns:
        Cards for the file
    """
    stats = stats if stats is not None else ExtractionStats()
    cards: list[Card] = []
    relative = source.relative

    if Strategy.QA in config.strategies:
        category = config.qa_category or path_grouping(relative)[0]
        qa_cards = extract_qa(source.text, relative, category=category)
        stats.qa += len(qa_cards)
        cards.extend(qa_cards)

    if Strategy.SECTIONS in config.strategies:
        section_cards = extract_sections(source.text, relative)
        stats.sections += len(section_cards)
        cards.extend(section_cards)

    if Strategy.CONCEPTS in config.strategies:
        concept_cards = extract_concepts(source.text, relative)
        stats.concepts += len(concept_cards)
        cards.extend(concept_cards)

    if config.overview_path and relative.lower() == config.overview_path.lower():
        overview = extract_index_overview(source.text, relative)
        if overview:
            stats.overview += 1
            cards.append(overview)

    if not cards:
        logger.debug(f"No cards extracted from {relative}")
    return cards


def create_extract_node(config: BuildConfig):
    """Create the extract node for a build configuration.

    Returns:
        Node function
    """

    def extract_node(state: dict[str, Any]) -> dict[str, Any]:
        """Extract cards from the collected files.

        Args:
            state: Pipeline state with ``files``

        Returns:
            Updated state with ``cards`` and ``stats``
        """
        files: list[SourceFile] = state.get("files", [])
        stats = ExtractionStats()
        cards: list[Card] = []

        for source in files:
            cards.extend(extract_file(source, config, stats))

        logger.info(
            f"Extracted {stats.total} cards from {len(files)} files "
            f"({stats.qa} Q&A, {stats.sections} sections, "
            f"{stats.concepts} concepts, {stats.overview} overview)"
        )

        return {
            **state,
            "cards": cards,
            "stats": stats,
            "current_step": "extract",
        }

    return extract_node
