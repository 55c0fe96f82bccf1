"""Tests for markup cleanup and topic naming."""

import pytest

from studydeck_core.extractors.cleanup import (
    clean_markdown,
    format_topic_label,
    normalize_topic_id,
    path_grouping,
    relative_source,
    topic_info,
)


class TestCleanMarkdown:
    """Tests for clean_markdown."""

    def test_strips_bold_italic_code_and_links(self) -> None:
        """Test that every kind of inline markup is removed."""
        text = "  Use **async** and *await* with `Task` per [the docs](https://x.y)  "
        assert clean_markdown(text) == "Use async and await with Task per the docs"

    def test_bold_removed_before_italic(self) -> None:
        """Test nested emphasis collapses to plain text."""
        assert clean_markdown("***both***") == "both"

    @pytest.mark.parametrize(
        "text",
        [
            "plain text",
            "**bold** then *italic*",
            "***a*** `b` [c](d)",
            "*`*`*",
            "[`x`](u) and **[y](z)**",
            "  spaced  ",
        ],
    )
    def test_idempotent(self, text: str) -> None:
        """Test that cleaning twice gives the same result as once."""
        once = clean_markdown(text)
        assert clean_markdown(once) == once

    def test_leaves_unpaired_markers(self) -> None:
        """Test that a lone asterisk is not treated as markup."""
        assert clean_markdown("2 * 3") == "2 * 3"


class TestTopicNaming:
    """Tests for topic id and label derivation."""

    def test_normalize_topic_id(self) -> None:
        """Test lowercase, hyphen collapsing and trimming."""
        assert normalize_topic_id("  Async & Await__Basics! ") == "async-await-basics"

    def test_normalize_topic_id_is_idempotent(self) -> None:
        """Test that normalizing a normalized key changes nothing."""
        once = normalize_topic_id("C# / .NET -- Tips")
        assert normalize_topic_id(once) == once

    def test_format_topic_label(self) -> None:
        """Test separators become spaces and words are capitalized."""
        assert format_topic_label("dependency-injection__basics") == (
            "Dependency Injection Basics"
        )

    def test_topic_info_from_relative_path(self) -> None:
        """Test topic info for a path under a root."""
        info = topic_info("/repo/practice/async-await.md", root="/repo")

        assert info.source_file == "practice/async-await.md"
        assert info.topic_id == "async-await"
        assert info.topic_label == "Async Await"

    def test_topic_info_fallbacks(self) -> None:
        """Test the fallback id when the file name has no alphanumerics."""
        info = topic_info("practice/---.md")

        assert info.topic_id == "general"
        assert info.topic_label == "General"

    def test_backslashes_normalized(self) -> None:
        """Test that Windows separators become forward slashes."""
        assert relative_source("practice\\sub\\file.md") == "practice/sub/file.md"

    def test_path_grouping(self) -> None:
        """Test category and topic from path segments."""
        assert path_grouping("notes/linq/basics.md") == ("notes", "linq")
        assert path_grouping("README.md") == ("README.md", "General")
