"""Review helpers used when studying a deck.

These mirror what the browser viewer does with the dataset: group cards by
topic for the sidebar, pick the next card at random, and compare a typed
answer against the reference answer with a simple bag-of-words overlap.
"""

from __future__ import annotations

import random
import re
from enum import Enum

from pydantic import BaseModel, Field

from studydeck_core.schemas.cards import Card, ListBlock, TableBlock, TextBlock
from studydeck_core.schemas.topics import TopicGroup

STOP_WORDS = frozenset(
    {
        "the", "and", "for", "with", "that", "this", "from", "into", "when", "where",
        "then", "than", "also", "just", "your", "you", "use", "using", "used", "over",
        "are", "was", "were", "is", "be", "been", "being", "has", "have", "had", "not",
        "can", "will", "should", "would", "could", "it", "its", "of", "to", "in", "on",
        "by", "or", "as", "at", "if", "an", "a",
    }
)  # fmt: skip

GOOD_RATIO = 0.7
OKAY_RATIO = 0.4
MAX_RANDOM_DRAWS = 10

_NON_WORD = re.compile(r"[^a-z0-9\s]")


class Tone(str, Enum):
    """How a self-check result should be presented."""

    GOOD = "good"
    OKAY = "okay"
    NEUTRAL = "neutral"
    WARNING = "warning"


class SelfCheckResult(BaseModel):
    """Outcome of comparing a typed answer with the reference answer."""

    tone: Tone
    message: str
    matched: int = Field(0, description="Distinct reference terms found")
    total: int = Field(0, description="Distinct reference terms")

    @property
    def ratio(self) -> float:
        return self.matched / self.total if self.total else 0.0

    @property
    def percent(self) -> int:
        return int(self.ratio * 100 + 0.5)


def group_by_topic(cards: list[Card]) -> dict[str, TopicGroup]:
    """Group cards by topic key, keeping first-seen order.

    Args:
        cards: Cards in dataset order

    Returns:
        Mapping of topic key to its label and cards
    """
    topics: dict[str, TopicGroup] = {}
    for card in cards:
        key = card.topic_id or card.topic or "General"
        if key not in topics:
            topics[key] = TopicGroup(label=card.topic or "General")
        topics[key].cards.append(card)
    return topics


def pick_random_card(
    cards: list[Card],
    exclude_id: str | None = None,
    rng: random.Random | None = None,
) -> Card | None:
    """Pick a random card, trying not to repeat ``exclude_id``.

    Gives up avoiding the excluded card after a few draws, so a deck where
    every card shares the id still returns something.
    """
    if not cards:
        return None
    if len(cards) == 1:
        return cards[0]

    rng = rng or random.Random()
    candidate = rng.choice(cards)
    draws = 1
    while candidate.id == exclude_id and draws < MAX_RANDOM_DRAWS:
        candidate = rng.choice(cards)
        draws += 1
    return candidate


def extract_answer_text(card: Card) -> str:
    """Join the comparable text of an answer; code blocks are left out."""
    parts: list[str] = []
    for block in card.answer:
        if isinstance(block, TextBlock):
            parts.append(block.content)
        elif isinstance(block, ListBlock):
            parts.append(" ".join(block.items))
        elif isinstance(block, TableBlock):
            cells = [*block.headers, *(cell for row in block.rows for cell in row)]
            parts.append(" ".join(cells))
    return " ".join(parts)


def tokenize(text: str) -> list[str]:
    """Lowercase word tokens longer than two characters, stop words removed."""
    words = _NON_WORD.sub(" ", text.lower()).split()
    return [word for word in words if len(word) > 2 and word not in STOP_WORDS]


def score_answer(card: Card | None, user_input: str) -> SelfCheckResult:
    """Score a typed answer by the share of reference terms it mentions.

    Args:
        card: Card being studied
        user_input: The learner's answer

    Returns:
        Result with a tone and a message for display
    """
    if card is None:
        return SelfCheckResult(
            tone=Tone.WARNING, message="Select a question to check your answer."
        )

    user_input = user_input.strip()
    if not user_input:
        return SelfCheckResult(
            tone=Tone.WARNING, message="Type your answer before checking."
        )

    expected_text = extract_answer_text(card)
    if not expected_text:
        return SelfCheckResult(
            tone=Tone.WARNING, message="This question has no text answer to compare."
        )

    expected = set(tokenize(expected_text))
    if not expected:
        return SelfCheckResult(
            tone=Tone.WARNING,
            message="No comparable text found in the reference answer.",
        )

    matched = len(expected & set(tokenize(user_input)))
    ratio = matched / len(expected)

    if ratio >= GOOD_RATIO:
        tone, verdict = Tone.GOOD, "Strong coverage of key points."
    elif ratio >= OKAY_RATIO:
        tone, verdict = Tone.OKAY, "Decent coverage. Add more specifics."
    else:
        tone, verdict = Tone.NEUTRAL, "Keep refining your answer."

    result = SelfCheckResult(
        tone=tone, message=verdict, matched=matched, total=len(expected)
    )
    result.message = (
        f"Match {result.percent}% ({matched}/{result.total} key terms). {verdict}"
    )
    return result
