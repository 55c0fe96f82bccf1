"""Line classification shared by every extraction strategy.

Each extractor reads Markdown one line at a time; the helpers here answer
"what kind of line is this" without keeping any state of their own.
"""

import re
from dataclasses import dataclass
from enum import Enum

from studydeck_core.schemas.cards import CodeType

DEFAULT_CODE_LANGUAGE = "csharp"
MARKER_SCAN_DISTANCE = 5
TIP_PREFIX = "\N{ELECTRIC LIGHT BULB}"

FENCE = re.compile(r"^```([A-Za-z0-9_]+)?")
HEADING = re.compile(r"^(#{1,6})\s+(.+)")
QUESTION = re.compile(r"^\*\*Q:\s*(.+?)\*\*$")
ANSWER = re.compile(r"^A:\s*(.+)")
TABLE_ROW = re.compile(r"^\s*\|(.+)\|\s*$")
LIST_ITEM = re.compile(r"^\s*(?:[-*]|\d+\.)\s+(.+)")
HORIZONTAL_RULE = re.compile(r"^---+$")
_SEPARATOR_CELL = re.compile(r"[\s:-]+")


class MarkerKind(str, Enum):
    """Which polarity a marker pattern announces."""

    BAD = "bad"
    GOOD = "good"


@dataclass(frozen=True)
class ExampleMarker:
    """A pattern that tags the next code fence as a good or bad example."""

    kind: MarkerKind
    pattern: re.Pattern[str]

    def matches(self, line: str) -> bool:
        return self.pattern.search(line) is not None


# Order matters: on a line carrying both kinds, the first match wins.
EXAMPLE_MARKERS: tuple[ExampleMarker, ...] = (
    ExampleMarker(MarkerKind.BAD, re.compile("\N{CROSS MARK}|bad example", re.IGNORECASE)),
    ExampleMarker(MarkerKind.GOOD, re.compile("\N{WHITE HEAVY CHECK MARK}|good example", re.IGNORECASE)),
)


def fence_language(line: str) -> str | None:
    """Return the language tag of a fence line ("" when untagged), else None."""
    match = FENCE.match(line)
    if not match:
        return None
    return match.group(1) or ""


def heading(line: str) -> tuple[int, str] | None:
    """Return ``(level, raw text)`` for an ATX heading line."""
    match = HEADING.match(line)
    if not match:
        return None
    return len(match.group(1)), match.group(2)


def is_blank(line: str) -> bool:
    return not line.strip()


def is_horizontal_rule(line: str) -> bool:
    return HORIZONTAL_RULE.match(line) is not None


def list_item(line: str) -> str | None:
    """Return the raw item text of a bullet or numbered list line."""
    match = LIST_ITEM.match(line)
    return match.group(1) if match else None


def table_cells(line: str) -> list[str] | None:
    """Split a pipe-delimited row into raw (unstripped) cells."""
    match = TABLE_ROW.match(line)
    if not match:
        return None
    return match.group(1).split("|")


def is_separator_row(cells: list[str]) -> bool:
    """True when every cell holds only dashes, colons or whitespace."""
    return all(_SEPARATOR_CELL.fullmatch(cell) for cell in cells)


def scan_code_type(lines: list[str], fence_index: int) -> CodeType | None:
    """Look back from an opening fence for the nearest good/bad marker.

    Up to ``MARKER_SCAN_DISTANCE`` lines above the fence are checked, nearest
    first. The first line carrying any marker decides.

    Args:
        lines: All lines of the document
        fence_index: Index of the opening fence line

    Returns:
        CodeType.GOOD or CodeType.BAD, or None when no marker was found
    """
    stop = max(0, fence_index - MARKER_SCAN_DISTANCE)
    for index in range(fence_index - 1, stop - 1, -1):
        candidate = lines[index].strip()
        for marker in EXAMPLE_MARKERS:
            if marker.matches(candidate):
                return CodeType(marker.kind.value)
    return None


def split_lines(markdown: str) -> list[str]:
    """Split on LF or CRLF, keeping a trailing empty line like ``str.split``."""
    return re.split(r"\r?\n", markdown)
