"""TSV export for Anki import."""

import csv
from io import StringIO
from pathlib import Path

from studydeck_core.exporters.render import answer_to_text
from studydeck_core.schemas.cards import Card


def card_tags(card: Card) -> list[str]:
    """Anki tags for a card: its category and topic key."""
    return [tag for tag in (card.category, card.topic_id) if tag]


def export_tsv(
    cards: list[Card],
    output: str | Path | None = None,
    include_tags: bool = True,
) -> str:
    """Export cards to TSV format for Anki import.

    Args:
        cards: Cards to export
        output: Optional output path (if None, returns string)
        include_tags: Include tags column

    Returns:
        TSV content as string
    """
    buffer = StringIO()
    writer = csv.writer(buffer, delimiter="\t", quoting=csv.QUOTE_MINIMAL)

    for card in cards:
        row = [card.question, answer_to_text(card)]
        if include_tags:
            row.append(" ".join(card_tags(card)))
        writer.writerow(row)

    content = buffer.getvalue()

    if output:
        path = Path(output)
        path.write_text(content, encoding="utf-8")

    return content
