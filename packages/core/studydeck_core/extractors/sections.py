"""Heading-based section extraction.

Every ``##``, ``###`` or ``####`` heading opens a section whose heading text
becomes the card question. A heading nested deeper than the open section is
kept inside it as a text block instead of starting a new card.
"""

from __future__ import annotations

from pathlib import PurePath

from studydeck_core.extractors.accumulators import ParserState
from studydeck_core.extractors.cleanup import (
    clean_markdown,
    normalize_topic_id,
    path_grouping,
    relative_source,
)
from studydeck_core.extractors.lines import (
    fence_language,
    heading,
    is_blank,
    is_horizontal_rule,
    list_item,
    scan_code_type,
    split_lines,
    table_cells,
)
from studydeck_core.schemas.cards import Card, TextBlock

SECTION_LEVELS = (2, 3, 4)


def extract_sections(
    markdown: str,
    source_path: str | PurePath,
    *,
    root: str | PurePath | None = None,
) -> list[Card]:
    """Extract one card per heading section.

    Args:
        markdown: Document text
        source_path: Path of the document; its first two segments give the
            category and topic
        root: Optional directory ``source_path`` is made relative to

    Returns:
        Section cards in document order, empty sections dropped
    """
    source_file = relative_source(source_path, root)
    category, topic = path_grouping(source_file)
    topic_id = normalize_topic_id(topic) or "general"

    lines = split_lines(markdown)
    state = ParserState()
    sections: list[Card] = []
    title: str | None = None
    level: int | None = None
    outside_fence = False

    def close_section() -> None:
        nonlocal title, level
        blocks = state.take_blocks()
        if title and blocks:
            sections.append(
                Card(
                    question=title,
                    answer=blocks,
                    category=category,
                    topic=topic,
                    topic_id=topic_id,
                    source=source_file,
                    is_section=True,
                )
            )
        state.reset()
        title = None
        level = None

    for index, line in enumerate(lines):
        if state.code.is_open:
            if fence_language(line) is not None:
                state.emit(state.code.close())
            else:
                state.code.add(line)
            continue

        # Code outside any section is skipped whole
        if outside_fence:
            if fence_language(line) is not None:
                outside_fence = False
            continue

        parsed = heading(line)
        if parsed and parsed[0] in SECTION_LEVELS:
            new_level, raw_text = parsed
            text = clean_markdown(raw_text)
            if title is not None and level is not None and new_level > level:
                state.flush_all()
                state.emit(TextBlock(content=text))
                continue
            if title is not None:
                close_section()
            title = text
            level = new_level
            continue

        language = fence_language(line)
        if language is not None:
            if title is None:
                outside_fence = True
            else:
                state.code.open(language, scan_code_type(lines, index))
            continue

        if title is None:
            continue

        cells = table_cells(line)
        if cells is not None:
            state.add_table_row(cells)
            continue
        if is_blank(line):
            state.flush_table()
            state.flush_list()
            continue

        if is_horizontal_rule(line):
            close_section()
            continue

        item = list_item(line)
        if item is not None:
            state.add_list_item(item)
            continue
        if state.bullets.is_open:
            state.bullets.continue_item(line)
            continue

        if line.startswith("#") or line.startswith("**Q:"):
            continue
        content = clean_markdown(line)
        if content:
            state.emit(TextBlock(content=content))

    if state.code.is_open:
        state.code.close()
    close_section()
    return sections
