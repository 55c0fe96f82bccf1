"""Block accumulators and the parser state that owns them.

Every extractor walks a document line by line. Multi-line constructs
(paragraphs, lists, tables, fenced code) are collected by one accumulator
each and turned into a content block by ``flush()``. ``ParserState`` holds the
accumulators together with the blocks produced so far, so the flush rules
live in one place instead of being repeated per extractor.

A block is placed where its first line appeared. When an accumulator stays
open while other blocks are emitted (the section extractor keeps tables and
lists open until a blank line), its block is inserted at the remembered
position on flush.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count

from studydeck_core.extractors.cleanup import clean_markdown
from studydeck_core.extractors.lines import DEFAULT_CODE_LANGUAGE, is_separator_row
from studydeck_core.schemas.cards import (
    CodeBlock,
    CodeType,
    ContentBlock,
    ListBlock,
    TableBlock,
    TextBlock,
)


@dataclass
class _Anchored:
    """Position bookkeeping shared by the buffered accumulators."""

    anchor: int | None = None
    sequence: int = 0

    @property
    def is_open(self) -> bool:
        return self.anchor is not None

    def _reset_anchor(self) -> None:
        self.anchor = None


@dataclass
class ParagraphAccumulator(_Anchored):
    """Collects prose lines into one text block."""

    lines: list[str] = field(default_factory=list)

    def add(self, line: str) -> None:
        self.lines.append(line.strip())

    def flush(self) -> TextBlock | None:
        """Join the lines with single spaces and clean the result."""
        text = " ".join(" ".join(self.lines).split())
        self.lines = []
        self._reset_anchor()
        if not text:
            return None
        return TextBlock(content=clean_markdown(text))


@dataclass
class ListAccumulator(_Anchored):
    """Collects list items; wrapped lines extend the last item."""

    items: list[str] = field(default_factory=list)

    def add_item(self, text: str) -> None:
        self.items.append(text)

    def continue_item(self, line: str) -> None:
        """Append a wrapped continuation line to the most recent item.

        Does nothing when no item has been collected yet.
        """
        if self.items:
            self.items[-1] = f"{self.items[-1]} {line.strip()}"

    def flush(self) -> ListBlock | None:
        items = [clean_markdown(item) for item in self.items]
        self.items = []
        self._reset_anchor()
        if not items:
            return None
        return ListBlock(items=items)


@dataclass
class TableAccumulator(_Anchored):
    """Collects pipe rows: header first, separators dropped, then data rows."""

    headers: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)
    _has_header: bool = False

    def add_row(self, cells: list[str]) -> None:
        """Route one row of raw cells.

        The first row becomes the header even if it looks like a separator;
        later separator rows are skipped.
        """
        if not self._has_header:
            self.headers = [clean_markdown(cell.strip()) for cell in cells]
            self._has_header = True
            return
        if is_separator_row(cells):
            return
        self.rows.append([clean_markdown(cell.strip()) for cell in cells])

    def flush(self) -> TableBlock | None:
        """Return the table, or None when it has no header or no data rows."""
        block = None
        if self.headers and self.rows:
            block = TableBlock(headers=self.headers, rows=self.rows)
        self.headers = []
        self.rows = []
        self._has_header = False
        self._reset_anchor()
        return block


@dataclass
class CodeAccumulator:
    """Collects verbatim lines between an opening and a closing fence."""

    is_open: bool = False
    language: str = ""
    code_type: CodeType | None = None
    lines: list[str] = field(default_factory=list)

    def open(self, language: str, code_type: CodeType | None = None) -> None:
        self.is_open = True
        self.language = language
        self.code_type = code_type
        self.lines = []

    def add(self, line: str) -> None:
        self.lines.append(line)

    def close(self) -> CodeBlock | None:
        """End the fence; return a code block unless it was empty."""
        block = None
        if self.lines:
            block = CodeBlock(
                language=self.language or DEFAULT_CODE_LANGUAGE,
                code="\n".join(self.lines),
                code_type=self.code_type or CodeType.NEUTRAL,
            )
        self.is_open = False
        self.language = ""
        self.code_type = None
        self.lines = []
        return block


@dataclass
class ParserState:
    """Everything one extraction pass over one document needs to remember."""

    blocks: list[ContentBlock] = field(default_factory=list)
    paragraph: ParagraphAccumulator = field(default_factory=ParagraphAccumulator)
    bullets: ListAccumulator = field(default_factory=ListAccumulator)
    table: TableAccumulator = field(default_factory=TableAccumulator)
    code: CodeAccumulator = field(default_factory=CodeAccumulator)
    _sequence: count = field(default_factory=count)

    def _start(self, accumulator: _Anchored) -> None:
        if not accumulator.is_open:
            accumulator.anchor = len(self.blocks)
            accumulator.sequence = next(self._sequence)

    def _buffered(self) -> tuple[_Anchored, ...]:
        return (self.paragraph, self.bullets, self.table)

    # Feeding

    def add_paragraph_line(self, line: str) -> None:
        self._start(self.paragraph)
        self.paragraph.add(line)

    def add_list_item(self, text: str) -> None:
        self._start(self.bullets)
        self.bullets.add_item(text)

    def add_table_row(self, cells: list[str]) -> None:
        self._start(self.table)
        self.table.add_row(cells)

    def emit(self, block: ContentBlock | None) -> None:
        """Append a finished block after everything emitted so far."""
        if block is not None:
            self.blocks.append(block)

    # Flushing

    def flush_paragraph(self) -> None:
        self._flush(self.paragraph)

    def flush_list(self) -> None:
        self._flush(self.bullets)

    def flush_table(self) -> None:
        self._flush(self.table)

    def _flush(self, accumulator: _Anchored) -> None:
        anchor, sequence = accumulator.anchor, accumulator.sequence
        block = accumulator.flush()  # type: ignore[attr-defined]
        if anchor is None or block is None:
            return
        self.blocks.insert(anchor, block)
        for other in self._buffered():
            if other.anchor is not None and (other.anchor, other.sequence) > (
                anchor,
                sequence,
            ):
                other.anchor += 1

    def flush_all(self) -> None:
        """Flush paragraph, list and table, latest-started first."""
        pending = [acc for acc in self._buffered() if acc.is_open]
        pending.sort(key=lambda acc: (acc.anchor, acc.sequence), reverse=True)
        for accumulator in pending:
            self._flush(accumulator)

    def take_blocks(self) -> list[ContentBlock]:
        """Flush everything and hand over the collected blocks, resetting state."""
        self.flush_all()
        blocks, self.blocks = self.blocks, []
        return blocks

    def reset(self) -> None:
        """Drop every buffer and block without emitting anything."""
        self.blocks = []
        self.paragraph = ParagraphAccumulator()
        self.bullets = ListAccumulator()
        self.table = TableAccumulator()
