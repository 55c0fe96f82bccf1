"""Concept extraction: one card per good or bad code example."""

from __future__ import annotations

from pathlib import PurePath

from studydeck_core.extractors.accumulators import CodeAccumulator
from studydeck_core.extractors.cleanup import (
    clean_markdown,
    normalize_topic_id,
    path_grouping,
    relative_source,
)
from studydeck_core.extractors.lines import (
    fence_language,
    heading,
    scan_code_type,
    split_lines,
)
from studydeck_core.schemas.cards import Card, CodeType


def _fallback_title(code_type: CodeType) -> str:
    polarity = "Good" if code_type == CodeType.GOOD else "Bad"
    return f"{polarity} Practice Example"


def extract_concepts(
    markdown: str,
    source_path: str | PurePath,
    *,
    root: str | PurePath | None = None,
) -> list[Card]:
    """Turn each fenced example tagged good or bad into its own card.

    The question is the latest ``##`` heading seen since the previous concept
    card, or a generic title naming the example's polarity.

    Args:
        markdown: Document text
        source_path: Path of the document
        root: Optional directory ``source_path`` is made relative to

    Returns:
        Concept cards, each holding exactly one code block
    """
    source_file = relative_source(source_path, root)
    category, topic = path_grouping(source_file)
    topic_id = normalize_topic_id(topic) or "general"

    lines = split_lines(markdown)
    code = CodeAccumulator()
    concepts: list[Card] = []
    title: str | None = None

    for index, line in enumerate(lines):
        language = fence_language(line)
        if language is not None:
            if not code.is_open:
                code.open(language, scan_code_type(lines, index))
                continue

            code_type = code.code_type
            block = code.close()
            if code_type is not None and block is not None:
                concepts.append(
                    Card(
                        question=title or _fallback_title(code_type),
                        answer=[block],
                        category=category,
                        topic=topic,
                        topic_id=topic_id,
                        source=source_file,
                        is_concept=True,
                    )
                )
                title = None
            continue

        if code.is_open:
            code.add(line)
            continue

        parsed = heading(line)
        if parsed and parsed[0] == 2:
            title = clean_markdown(parsed[1])

    return concepts
