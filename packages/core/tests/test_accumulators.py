"""Tests for the line classifier and block accumulators."""

from studydeck_core.extractors.accumulators import (
    CodeAccumulator,
    ListAccumulator,
    ParserState,
    TableAccumulator,
)
from studydeck_core.extractors.lines import (
    fence_language,
    heading,
    is_separator_row,
    list_item,
    scan_code_type,
    table_cells,
)
from studydeck_core.schemas.cards import (
    CodeType,
    ListBlock,
    TableBlock,
    TextBlock,
)


class TestLineClassifier:
    """Tests for line classification helpers."""

    def test_fence_language(self) -> None:
        """Test fence detection with and without a language tag."""
        assert fence_language("```csharp") == "csharp"
        assert fence_language("```") == ""
        assert fence_language("  ```") is None
        assert fence_language("text") is None

    def test_heading(self) -> None:
        """Test heading level and text."""
        assert heading("### Deep dive") == (3, "Deep dive")
        assert heading("#NoSpace") is None

    def test_list_item(self) -> None:
        """Test bullet and numbered list markers."""
        assert list_item("- item") == "item"
        assert list_item("  * nested") == "nested"
        assert list_item("12. twelfth") == "twelfth"
        assert list_item("**bold** line") is None
        assert list_item("---") is None

    def test_table_cells_and_separator(self) -> None:
        """Test pipe row splitting and separator detection."""
        assert table_cells("| A | B |") == [" A ", " B "]
        assert table_cells("not | a row") is None
        assert is_separator_row(table_cells("|---|:---:|"))
        assert not is_separator_row(table_cells("| - | x |"))


class TestScanCodeType:
    """Tests for the backward good/bad marker scan."""

    def test_nearest_marker_wins(self) -> None:
        """Test that a bad marker next to the fence beats a farther good one."""
        lines = ["✅ Good example", "text", "❌ Bad Example", "```csharp"]
        assert scan_code_type(lines, 3) == CodeType.BAD

    def test_nearest_good_marker_wins(self) -> None:
        """Test the reverse placement resolves to good."""
        lines = ["❌ Bad Example", "✅ Good example", "```"]
        assert scan_code_type(lines, 2) == CodeType.GOOD

    def test_both_markers_on_one_line(self) -> None:
        """Test that bad wins on a line carrying both markers."""
        lines = ["good example vs bad example", "```"]
        assert scan_code_type(lines, 1) == CodeType.BAD

    def test_window_is_five_lines(self) -> None:
        """Test markers more than five lines up are ignored."""
        lines = ["❌ Bad Example", "1", "2", "3", "4", "5", "```"]
        assert scan_code_type(lines, 6) is None
        assert scan_code_type(lines[1:], 5) is None
        assert scan_code_type(["❌", "1", "2", "3", "4", "```"], 5) == CodeType.BAD

    def test_case_insensitive_phrase(self) -> None:
        """Test the phrase markers ignore case."""
        assert scan_code_type(["GOOD EXAMPLE:", "```"], 1) == CodeType.GOOD


class TestAccumulators:
    """Tests for individual accumulators."""

    def test_list_continuation_extends_last_item(self) -> None:
        """Test continuation lines join the last item without adding items."""
        acc = ListAccumulator()
        acc.add_item("first")
        acc.add_item("second part")
        acc.continue_item("   wrapped **tail**")

        block = acc.flush()

        assert block == ListBlock(items=["first", "second part wrapped tail"])

    def test_list_continuation_without_items_is_ignored(self) -> None:
        """Test a continuation with no item contributes nothing."""
        acc = ListAccumulator()
        acc.continue_item("orphan")
        assert acc.flush() is None

    def test_table_requires_data_row(self) -> None:
        """Test a header plus separator only yields no table."""
        acc = TableAccumulator()
        acc.add_row([" A ", " B "])
        acc.add_row(["---", "---"])
        assert acc.flush() is None

    def test_table_rows_cleaned(self) -> None:
        """Test cells are stripped and cleaned."""
        acc = TableAccumulator()
        acc.add_row([" **A** ", " B "])
        acc.add_row(["---", "---"])
        acc.add_row([" `1` ", " 2 "])

        assert acc.flush() == TableBlock(headers=["A", "B"], rows=[["1", "2"]])

    def test_code_defaults(self) -> None:
        """Test default language and neutral code type."""
        acc = CodeAccumulator()
        acc.open("")
        acc.add("var x = 1;")
        acc.add("")

        block = acc.close()

        assert block is not None
        assert block.language == "csharp"
        assert block.code == "var x = 1;\n"
        assert block.code_type == CodeType.NEUTRAL
        assert not acc.is_open

    def test_empty_code_yields_nothing(self) -> None:
        """Test a fence with no lines produces no block."""
        acc = CodeAccumulator()
        acc.open("python", CodeType.GOOD)
        assert acc.close() is None


class TestParserState:
    """Tests for block placement in ParserState."""

    def test_paragraph_lines_joined(self) -> None:
        """Test paragraph lines are joined and whitespace collapsed."""
        state = ParserState()
        state.add_paragraph_line("First   line")
        state.add_paragraph_line("  second *line*")

        assert state.take_blocks() == [TextBlock(content="First line second line")]

    def test_open_table_keeps_its_position(self) -> None:
        """Test blocks emitted while a table is open land after it."""
        state = ParserState()
        state.add_table_row([" A "])
        state.add_table_row(["---"])
        state.add_table_row([" 1 "])
        state.emit(TextBlock(content="after"))
        state.add_table_row([" 2 "])

        blocks = state.take_blocks()

        assert blocks == [
            TableBlock(headers=["A"], rows=[["1"], ["2"]]),
            TextBlock(content="after"),
        ]

    def test_flush_order_follows_start_order(self) -> None:
        """Test two open accumulators flush in the order they started."""
        state = ParserState()
        state.add_list_item("item")
        state.add_table_row([" H "])
        state.add_table_row([" v "])

        state.flush_table()
        state.flush_list()

        assert state.blocks == [
            ListBlock(items=["item"]),
            TableBlock(headers=["H"], rows=[["v"]]),
        ]
