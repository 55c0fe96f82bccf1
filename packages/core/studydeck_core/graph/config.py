"""Configuration for the deck build pipeline.

A ``BuildConfig`` names the content folders to read, which extraction
strategies run on each file, and how the resulting dataset is published.
The two presets reproduce the practice-exercise site and the flash-card site.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Strategy(str, Enum):
    """Extraction strategies that can run on every collected file."""

    QA = "qa"
    SECTIONS = "sections"
    CONCEPTS = "concepts"


@dataclass(frozen=True)
class ContentSource:
    """A folder (relative to the content root) scanned for Markdown files."""

    key: str
    folder: str


@dataclass(frozen=True)
class BuildConfig:
    """Configuration values for one deck build."""

    sources: tuple[ContentSource, ...] = (ContentSource("practice", "practice"),)
    strategies: tuple[Strategy, ...] = (Strategy.QA,)

    # Relative path of the document summarized as an overview card
    overview_path: str | None = "practice/index.md"

    # Category given to Q&A cards; None uses the first path segment
    qa_category: str | None = "practice"

    # Dataset asset naming
    global_name: str = "PRACTICE_DATA"
    title: str = "practice Q&A data from practice/ folder"

    extensions: tuple[str, ...] = field(default=(".md",))


PRACTICE_PRESET = BuildConfig()

FLASHCARDS_PRESET = BuildConfig(
    sources=(
        ContentSource("notes", "notes"),
        ContentSource("practice", "practice"),
    ),
    strategies=(Strategy.QA, Strategy.SECTIONS, Strategy.CONCEPTS),
    overview_path=None,
    qa_category=None,
    global_name="FLASH_CARD_DATA",
    title="flash card data from notes/ and practice/ folders",
)

PRESETS: dict[str, BuildConfig] = {
    "practice": PRACTICE_PRESET,
    "flashcards": FLASHCARDS_PRESET,
}
