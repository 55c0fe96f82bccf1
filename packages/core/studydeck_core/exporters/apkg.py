"""APKG export for Anki decks."""

import hashlib
from pathlib import Path

from studydeck_core.exporters.render import answer_to_html
from studydeck_core.exporters.tsv import card_tags
from studydeck_core.schemas.cards import Card
from studydeck_core.utils.logging import get_logger, log_exceptions

logger = get_logger(__name__)

_CARD_CSS = """
.card {
    font-family: arial;
    font-size: 18px;
    text-align: left;
    color: black;
    background-color: white;
}
pre {
    padding: 8px;
    border-radius: 6px;
    background-color: #f5f5f5;
    overflow-x: auto;
}
pre.code-good { border-left: 4px solid #2e7d32; }
pre.code-bad { border-left: 4px solid #c62828; }
table { border-collapse: collapse; }
th, td { border: 1px solid #ddd; padding: 4px 8px; }
"""


@log_exceptions(logger)
def export_apkg(
    cards: list[Card],
    deck_name: str,
    output: str | Path,
) -> Path:
    """Export cards to APKG format (Anki deck package).

    Args:
        cards: Cards to export
        deck_name: Name for the Anki deck
        output: Output file path

    Returns:
        Path to the created APKG file
    """
    import genanki

    logger.info(f"Exporting APKG: {deck_name} ({len(cards)} cards)")

    # Deterministic IDs so re-imports update the same deck
    deck_id = _generate_id(deck_name)
    model_id = _generate_id(f"{deck_name}_model")

    model = _create_model(model_id, deck_name)
    deck = genanki.Deck(deck_id, deck_name)

    for card in cards:
        note = genanki.Note(
            model=model,
            fields=[card.question, answer_to_html(card), card.source],
            tags=[tag.replace(" ", "_") for tag in card_tags(card)],
            guid=genanki.guid_for(card.source, card.question),
        )
        deck.add_note(note)

    output_path = Path(output)
    genanki.Package(deck).write_to_file(str(output_path))

    logger.info(f"Created APKG at {output_path}")
    return output_path


def _create_model(model_id: int, deck_name: str) -> "genanki.Model":
    """Create an Anki model with Front/Back/Source fields."""
    import genanki

    return genanki.Model(
        model_id,
        f"{deck_name} Model",
        fields=[
            {"name": "Front"},
            {"name": "Back"},
            {"name": "Source"},
        ],
        templates=[
            {
                "name": "Card 1",
                "qfmt": "{{Front}}",
                "afmt": '{{FrontSide}}<hr id="answer">{{Back}}'
                '<div class="source">{{Source}}</div>',
            },
        ],
        css=_CARD_CSS,
    )


def _generate_id(name: str) -> int:
    """Generate a deterministic 31-bit ID from a string."""
    hash_bytes = hashlib.md5(name.encode()).digest()
    return int.from_bytes(hash_bytes[:4], "big") & 0x7FFFFFFF
