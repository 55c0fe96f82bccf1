"""Index/overview extraction for the deck's landing document."""

from __future__ import annotations

from pathlib import PurePath

from pydantic import BaseModel, Field

from studydeck_core.extractors.accumulators import ParserState
from studydeck_core.extractors.cleanup import clean_markdown, relative_source
from studydeck_core.extractors.lines import (
    fence_language,
    heading,
    is_blank,
    is_horizontal_rule,
    list_item,
    split_lines,
)
from studydeck_core.extractors.qa import PRACTICE_CATEGORY
from studydeck_core.schemas.cards import Card, TextBlock


class OverviewOptions(BaseModel):
    """Overrides for the overview card."""

    question: str | None = Field(None, description="Use instead of the first heading")
    fallback_question: str = Field(
        "Practice Index", description="Question when the document has no heading"
    )
    topic: str = "Practice Index"
    topic_id: str = "practice-index"
    category: str = PRACTICE_CATEGORY


def extract_index_overview(
    markdown: str,
    source_path: str | PurePath,
    options: OverviewOptions | None = None,
    *,
    root: str | PurePath | None = None,
) -> Card | None:
    """Summarize a whole document as a single overview card.

    The first heading is the question, later headings and prose become text
    blocks, and lists become list blocks. Fenced code is skipped.

    Args:
        markdown: Document text
        source_path: Path of the document
        options: Optional question/topic overrides
        root: Optional directory ``source_path`` is made relative to

    Returns:
        The overview card, or None when nothing could be extracted
    """
    options = options or OverviewOptions()
    lines = split_lines(markdown)
    state = ParserState()
    question = options.question
    in_fence = False

    for line in lines:
        if fence_language(line) is not None:
            state.flush_all()
            in_fence = not in_fence
            continue
        if in_fence:
            continue

        if is_horizontal_rule(line):
            state.flush_all()
            continue

        parsed = heading(line)
        if parsed:
            state.flush_all()
            text = clean_markdown(parsed[1])
            if not question:
                question = text
            else:
                state.emit(TextBlock(content=text))
            continue

        item = list_item(line)
        if item is not None:
            state.flush_paragraph()
            state.add_list_item(item)
            continue

        if is_blank(line):
            state.flush_all()
            continue

        if state.bullets.is_open:
            state.bullets.continue_item(line)
            continue
        state.add_paragraph_line(line)

    blocks = state.take_blocks()
    if not blocks:
        return None

    return Card(
        question=question or options.fallback_question,
        answer=blocks,
        category=options.category,
        topic=options.topic,
        topic_id=options.topic_id,
        source=relative_source(source_path, root),
        is_index=True,
    )
