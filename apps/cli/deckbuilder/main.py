"""Build a study deck from a folder of Markdown files."""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import structlog
import typer
from rich.console import Console
from rich.table import Table
from studydeck_core.exporters import (
    export_apkg,
    export_dataset,
    export_json,
    export_tsv,
    load_dataset,
)
from studydeck_core.exporters.dataset import DatasetFormatError, count_by_category
from studydeck_core.graph import PRESETS, build_deck_graph
from studydeck_core.review import group_by_topic, pick_random_card, score_answer
from studydeck_core.schemas.cards import Card
from studydeck_core.schemas.document import ExtractionStats
from studydeck_core.utils.logging import set_package_level

from deckbuilder.config import settings

logger = structlog.get_logger()

app = typer.Typer(
    name="studydeck",
    help="Build flashcard datasets from Markdown study notes",
    add_completion=False,
)
console = Console()

DEFAULT_OUTPUTS = {
    "practice": "data.js",
    "flashcards": "flash-card-data.js",
}


class OutputFormat(str, Enum):
    """Supported output formats."""

    JS = "js"
    JSON = "json"
    TSV = "tsv"
    APKG = "apkg"


def default_output(root: Path, preset_name: str, output_format: OutputFormat) -> Path:
    """Preset output file under the content root, suffixed for the format."""
    return (root / DEFAULT_OUTPUTS[preset_name]).with_suffix(f".{output_format.value}")


def configure_logging(level: str) -> None:
    """Apply one log level to structlog and the core package loggers."""
    numeric = getattr(logging, level.upper(), logging.INFO)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
    )
    set_package_level(numeric)


def write_output(
    cards: list[Card],
    output: Path,
    output_format: OutputFormat,
    global_name: str,
    title: str,
) -> None:
    """Write cards in the requested format."""
    if output_format == OutputFormat.JS:
        export_dataset(cards, output, global_name=global_name, title=title)
    elif output_format == OutputFormat.JSON:
        export_json(cards, output)
    elif output_format == OutputFormat.TSV:
        export_tsv(cards, output)
    else:
        export_apkg(cards, output.stem, output)


def print_summary(cards: list[Card], stats: ExtractionStats, output: Path) -> None:
    """Print card counts per strategy and per category."""
    console.print(f"\nGenerated {len(cards)} cards -> {output}")

    table = Table(title="Cards by category")
    table.add_column("Category")
    table.add_column("Cards", justify="right")
    for category, count in count_by_category(cards):
        table.add_row(category, str(count))
    console.print(table)

    console.print(
        f"{stats.qa} Q&A, {stats.sections} sections, "
        f"{stats.concepts} concepts, {stats.overview} overview"
    )


@app.callback()
def cli() -> None:
    """Study deck builder."""


@app.command()
def build(
    root: Optional[Path] = typer.Option(
        None, "--root", "-r", help="Content root with notes/ and practice/"
    ),
    preset: Optional[str] = typer.Option(
        None, "--preset", "-p", help="Build preset: practice or flashcards"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Output file path"
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.JS, "--format", "-f", help="Output format"
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level"),
) -> None:
    """Extract cards from Markdown and write the deck."""
    configure_logging(log_level or settings.log_level)

    preset_name = preset or settings.preset
    config = PRESETS.get(preset_name)
    if config is None:
        logger.error("unknown_preset", preset=preset_name, known=sorted(PRESETS))
        raise typer.Exit(code=2)

    content_root = root or settings.root
    target = output or settings.output or default_output(
        content_root, preset_name, output_format
    )

    logger.info("starting_build", root=str(content_root), preset=preset_name)
    result = build_deck_graph(config).invoke({"root": str(content_root)})

    errors = result.get("errors", [])
    if errors:
        for error in errors:
            logger.error("build_error", error=error)
        raise typer.Exit(code=1)

    cards: list[Card] = result.get("cards", [])
    stats: ExtractionStats = result.get("stats") or ExtractionStats()

    write_output(cards, target, output_format, config.global_name, config.title)
    logger.info("cards_built", total=len(cards), output=str(target))
    print_summary(cards, stats, target)


def _load_cards(dataset: Path, global_name: str) -> list[Card]:
    """Read a dataset script, exiting with an error message if it is unusable."""
    try:
        return load_dataset(dataset.read_text(encoding="utf-8"), global_name)
    except (OSError, DatasetFormatError) as e:
        logger.error("dataset_unreadable", dataset=str(dataset), error=str(e))
        raise typer.Exit(code=1) from e


@app.command()
def topics(
    dataset: Path = typer.Argument(..., help="Dataset script written by build"),
    global_name: str = typer.Option("PRACTICE_DATA", "--global", help="Dataset global"),
) -> None:
    """List the topics of a built dataset with their card counts."""
    cards = _load_cards(dataset, global_name)

    table = Table(title=f"Topics in {dataset.name}")
    table.add_column("Topic")
    table.add_column("Key")
    table.add_column("Cards", justify="right")
    for key, group in group_by_topic(cards).items():
        table.add_row(group.label, key, str(len(group.cards)))
    console.print(table)


@app.command()
def check(
    dataset: Path = typer.Argument(..., help="Dataset script written by build"),
    answer: str = typer.Argument(..., help="Your answer"),
    card_id: Optional[str] = typer.Option(
        None, "--card", "-c", help="Card id; a random card when omitted"
    ),
    global_name: str = typer.Option("PRACTICE_DATA", "--global", help="Dataset global"),
) -> None:
    """Score a typed answer against a card's reference answer."""
    cards = _load_cards(dataset, global_name)
    if card_id:
        card = next((c for c in cards if c.id == card_id), None)
    else:
        card = pick_random_card(cards)

    if card is not None:
        console.print(card.question, style="bold", markup=False)
    result = score_answer(card, answer)
    console.print(f"{result.tone.value}: {result.message}", markup=False)


def main() -> None:
    """Main entry point for the builder."""
    app()


if __name__ == "__main__":
    main()
