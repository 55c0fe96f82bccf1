"""Tests for the study review helpers."""

import random

import pytest

from studydeck_core.review import (
    Tone,
    extract_answer_text,
    group_by_topic,
    pick_random_card,
    score_answer,
    tokenize,
)
from studydeck_core.schemas.cards import (
    Card,
    CodeBlock,
    ListBlock,
    TableBlock,
    TextBlock,
)


def make_card(question: str, topic_id: str, answer=None, card_id=None) -> Card:
    return Card(
        question=question,
        answer=answer if answer is not None else [TextBlock(content="x")],
        category="practice",
        topic=topic_id.title(),
        topic_id=topic_id,
        source=f"practice/{topic_id}.md",
        id=card_id,
    )


@pytest.fixture
def di_card() -> Card:
    """A card whose answer mixes every block type."""
    return make_card(
        "What is dependency injection?",
        "di",
        answer=[
            TextBlock(content="Dependencies supplied by a container."),
            ListBlock(items=["constructor injection", "lifetimes"]),
            TableBlock(headers=["Scope"], rows=[["singleton"]]),
            CodeBlock(language="csharp", code="services.AddSingleton<Foo>();"),
        ],
    )


class TestGrouping:
    """Tests for topic grouping."""

    def test_first_seen_order(self) -> None:
        """Test groups keep the order topics first appear in."""
        cards = [
            make_card("a", "linq"),
            make_card("b", "async"),
            make_card("c", "linq"),
        ]

        groups = group_by_topic(cards)

        assert list(groups) == ["linq", "async"]
        assert [c.question for c in groups["linq"].cards] == ["a", "c"]
        assert groups["async"].label == "Async"


class TestRandomPick:
    """Tests for random card selection."""

    def test_empty(self) -> None:
        """Test an empty deck gives nothing."""
        assert pick_random_card([]) is None

    def test_single_card_repeats(self) -> None:
        """Test a one-card deck returns that card even when excluded."""
        card = make_card("a", "t", card_id="card-1")
        assert pick_random_card([card], exclude_id="card-1") is card

    def test_avoids_excluded(self) -> None:
        """Test the excluded card is skipped when others exist."""
        cards = [make_card(str(i), "t", card_id=f"card-{i}") for i in range(1, 4)]
        rng = random.Random(7)

        for _ in range(20):
            picked = pick_random_card(cards, exclude_id="card-2", rng=rng)
            assert picked.id != "card-2"


class TestAnswerText:
    """Tests for comparable answer text."""

    def test_code_left_out(self, di_card: Card) -> None:
        """Test text, list and table content is joined and code skipped."""
        assert extract_answer_text(di_card) == (
            "Dependencies supplied by a container. "
            "constructor injection lifetimes Scope singleton"
        )

    def test_tokenize(self) -> None:
        """Test short words, stop words and punctuation are dropped."""
        assert tokenize("The DI container, it's used for Scoped lifetimes!") == [
            "container",
            "scoped",
            "lifetimes",
        ]


class TestScoring:
    """Tests for self-check scoring."""

    def test_no_card(self) -> None:
        """Test checking without a selected card warns."""
        assert score_answer(None, "anything").tone == Tone.WARNING

    def test_blank_input(self, di_card: Card) -> None:
        """Test an empty answer warns."""
        result = score_answer(di_card, "   ")
        assert result.tone == Tone.WARNING
        assert result.message == "Type your answer before checking."

    def test_code_only_answer(self) -> None:
        """Test a card without text content cannot be scored."""
        card = make_card(
            "Show it", "t", answer=[CodeBlock(language="csharp", code="x();")]
        )
        assert score_answer(card, "x").tone == Tone.WARNING

    def test_strong_match(self, di_card: Card) -> None:
        """Test covering most terms scores good."""
        result = score_answer(
            di_card,
            "Dependencies are supplied by a container using constructor "
            "injection, with lifetimes like singleton scope",
        )

        assert result.tone == Tone.GOOD
        assert (result.matched, result.total) == (8, 8)
        assert result.message.startswith("Match 100% (8/8 key terms).")

    def test_partial_match(self, di_card: Card) -> None:
        """Test covering half the terms scores okay."""
        result = score_answer(di_card, "a container with constructor injection and scope")

        assert result.tone == Tone.OKAY
        assert result.matched == 4
        assert result.percent == 50
        assert result.message.startswith("Match 50% (4/8 key terms).")

    def test_weak_match(self, di_card: Card) -> None:
        """Test an unrelated answer keeps the neutral tone."""
        result = score_answer(di_card, "something else entirely")

        assert result.tone == Tone.NEUTRAL
        assert result.matched == 0
