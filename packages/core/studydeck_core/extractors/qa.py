"""Q&A pair extraction.

Questions are bold ``**Q: ...**`` lines; the answer is everything that follows
until the next question, a ``##`` heading or the end of the document. An
``A:`` line starts the answer prose explicitly.
"""

from __future__ import annotations

from pathlib import PurePath

from studydeck_core.extractors.accumulators import ParserState
from studydeck_core.extractors.cleanup import clean_markdown, topic_info
from studydeck_core.extractors.lines import (
    ANSWER,
    QUESTION,
    TIP_PREFIX,
    fence_language,
    heading,
    is_blank,
    is_horizontal_rule,
    list_item,
    scan_code_type,
    split_lines,
    table_cells,
)
from studydeck_core.schemas.cards import Card
from studydeck_core.schemas.topics import TopicInfo

PRACTICE_CATEGORY = "practice"


class _QAPass:
    """State for one pass over one document."""

    def __init__(self, info: TopicInfo, category: str) -> None:
        self.info = info
        self.category = category
        self.state = ParserState()
        self.question: str | None = None
        self.cards: list[Card] = []

    def emit_pending(self) -> None:
        """Flush buffers and emit the open question if it has an answer."""
        self.state.flush_all()
        if self.question and self.state.blocks:
            self.cards.append(
                Card(
                    question=self.question,
                    answer=self.state.take_blocks(),
                    category=self.category,
                    topic=self.info.topic_label,
                    topic_id=self.info.topic_id,
                    source=self.info.source_file,
                )
            )

    def answer_line(self, line: str) -> None:
        """Handle a non-fence line while a question is open."""
        state = self.state

        if is_blank(line):
            state.flush_all()
            return

        parsed = heading(line)
        if parsed and parsed[0] in (3, 4):
            state.flush_all()
            state.add_paragraph_line(parsed[1])
            return
        if parsed and parsed[0] == 2:
            return

        cells = table_cells(line)
        if cells is not None:
            if not state.table.is_open:
                state.flush_paragraph()
                state.flush_list()
            state.add_table_row(cells)
            return
        if state.table.is_open:
            state.flush_table()

        item = list_item(line)
        if item is not None:
            if not state.bullets.is_open:
                state.flush_paragraph()
            state.add_list_item(item)
            return
        if state.bullets.is_open:
            state.bullets.continue_item(line)
            return

        if is_horizontal_rule(line) or line.startswith(TIP_PREFIX):
            return
        state.add_paragraph_line(line)


def extract_qa(
    markdown: str,
    source_path: str | PurePath,
    *,
    root: str | PurePath | None = None,
    category: str = PRACTICE_CATEGORY,
) -> list[Card]:
    """Extract ``**Q:**`` question/answer cards from a Markdown document.

    Args:
        markdown: Document text
        source_path: Path of the document, used for topic naming
        root: Optional directory ``source_path`` is made relative to
        category: Category assigned to every card

    Returns:
        Cards in document order; questions without answer content are dropped
    """
    lines = split_lines(markdown)
    qa = _QAPass(topic_info(source_path, root), category)
    state = qa.state

    for index, line in enumerate(lines):
        language = fence_language(line)
        if language is not None:
            if not state.code.is_open:
                state.flush_all()
                state.code.open(language, scan_code_type(lines, index))
            else:
                block = state.code.close()
                if qa.question:
                    state.emit(block)
            continue

        if state.code.is_open:
            state.code.add(line)
            continue

        question = QUESTION.match(line)
        if question:
            qa.emit_pending()
            state.reset()
            qa.question = clean_markdown(question.group(1))
            continue

        answer = ANSWER.match(line)
        if answer and qa.question:
            state.flush_all()
            state.add_paragraph_line(answer.group(1))
            continue

        if qa.question:
            qa.answer_line(line)

        # A level-2 heading ends the open question; what follows it up to
        # the next question is left to the section extractor.
        parsed = heading(line)
        if parsed and parsed[0] == 2:
            qa.emit_pending()
            state.reset()
            qa.question = None

    qa.emit_pending()
    return qa.cards
