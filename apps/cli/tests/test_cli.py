"""Tests for the studydeck command line."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from deckbuilder.main import OutputFormat, app, default_output

runner = CliRunner()


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """A content root with one practice file."""
    practice = tmp_path / "practice"
    practice.mkdir()
    (practice / "async-await.md").write_text(
        "**Q: What does await do?**\nA: It suspends the method.\n", encoding="utf-8"
    )
    return tmp_path


def build(root: Path, *extra: str):
    output = root / "data.js"
    result = runner.invoke(
        app, ["build", "--root", str(root), "--output", str(output), *extra]
    )
    return result, output


class TestBuild:
    """Tests for the build command."""

    def test_writes_dataset(self, content_root: Path) -> None:
        """Test a practice build writes the dataset script."""
        result, output = build(content_root)

        assert result.exit_code == 0, result.output
        assert "Generated 1 cards" in result.output
        assert "window.PRACTICE_DATA" in output.read_text(encoding="utf-8")

    def test_json_format(self, content_root: Path) -> None:
        """Test the JSON output format."""
        result, output = build(content_root, "--format", "json")

        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="utf-8").startswith("[")

    def test_unknown_preset(self, content_root: Path) -> None:
        """Test an unknown preset exits with a usage error."""
        result, _ = build(content_root, "--preset", "nope")
        assert result.exit_code == 2

    def test_missing_source_fails(self, tmp_path: Path) -> None:
        """Test a missing content folder fails the build."""
        result, output = build(tmp_path)

        assert result.exit_code == 1
        assert not output.exists()


class TestDatasetCommands:
    """Tests for commands that read a built dataset."""

    def test_topics(self, content_root: Path) -> None:
        """Test topics are listed with their keys."""
        _, output = build(content_root)

        result = runner.invoke(app, ["topics", str(output)])

        assert result.exit_code == 0, result.output
        assert "async-await" in result.output

    def test_check_answer(self, content_root: Path) -> None:
        """Test scoring an answer against a chosen card."""
        _, output = build(content_root)

        result = runner.invoke(
            app, ["check", str(output), "suspends the method", "--card", "card-1"]
        )

        assert result.exit_code == 0, result.output
        assert "What does await do?" in result.output
        assert "good: Match 100%" in result.output

    def test_unreadable_dataset(self, tmp_path: Path) -> None:
        """Test a dataset without the expected global fails."""
        dataset = tmp_path / "data.js"
        dataset.write_text("window.OTHER = [];\n", encoding="utf-8")

        result = runner.invoke(app, ["topics", str(dataset)])

        assert result.exit_code == 1


class TestDefaultOutput:
    """Tests for the output path used when none is given."""

    def test_suffix_follows_format(self, tmp_path: Path) -> None:
        """Test the preset file name takes the format's suffix."""
        assert default_output(tmp_path, "practice", OutputFormat.JS) == (
            tmp_path / "data.js"
        )
        assert default_output(tmp_path, "flashcards", OutputFormat.APKG) == (
            tmp_path / "flash-card-data.apkg"
        )

    def test_build_without_output(self, content_root: Path) -> None:
        """Test a TSV build without --output writes a .tsv file."""
        result = runner.invoke(
            app, ["build", "--root", str(content_root), "--format", "tsv"]
        )

        assert result.exit_code == 0, result.output
        assert (content_root / "data.tsv").exists()
        assert not (content_root / "data.js").exists()
