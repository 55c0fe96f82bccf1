"""Dataset asset export: the script the browser viewer loads.

The asset assigns the card array to a global, e.g.::

    // Auto-generated practice Q&A data from practice/ folder
    // Generated on: 2024-01-01T00:00:00+00:00
    // Total cards: 2 Q&A

    window.PRACTICE_DATA = [...];
"""

import hashlib
import json
import re
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path

from studydeck_core.schemas.cards import Card
from studydeck_core.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_GLOBAL_NAME = "PRACTICE_DATA"


class DatasetFormatError(ValueError):
    """Raised when a dataset asset cannot be read back."""


def _cards_payload(cards: list[Card]) -> list[dict]:
    return [card.to_data() for card in cards]


def _count_summary(cards: list[Card]) -> str:
    """Describe the card mix, e.g. ``12 (10 Q&A, 2 sections)``."""
    sections = sum(1 for card in cards if card.is_section)
    concepts = sum(1 for card in cards if card.is_concept)
    overview = sum(1 for card in cards if card.is_index)
    qa = len(cards) - sections - concepts - overview

    parts = [f"{qa} Q&A"]
    if sections:
        parts.append(f"{sections} sections")
    if concepts:
        parts.append(f"{concepts} concepts")
    if overview:
        parts.append(f"{overview} overview")
    if len(parts) == 1:
        return parts[0]
    return f"{len(cards)} ({', '.join(parts)})"


def dataset_digest(cards: list[Card]) -> str:
    """Short content hash of the serialized cards."""
    payload = json.dumps(_cards_payload(cards), sort_keys=True, ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]


def render_dataset(
    cards: list[Card],
    global_name: str = DEFAULT_GLOBAL_NAME,
    title: str = "practice Q&A data",
    generated_at: datetime | None = None,
) -> str:
    """Render the dataset script text.

    Args:
        cards: Cards with ids assigned
        global_name: Name of the ``window`` property holding the cards
        title: Description placed in the header comment
        generated_at: Timestamp for the header (defaults to now, UTC)

    Returns:
        Script content
    """
    generated_at = generated_at or datetime.now(timezone.utc)
    body = json.dumps(_cards_payload(cards), indent=2, ensure_ascii=False)
    return (
        f"// Auto-generated {title}\n"
        f"// Generated on: {generated_at.isoformat()}\n"
        f"// Total cards: {_count_summary(cards)}\n"
        f"// Content hash: {dataset_digest(cards)}\n"
        "\n"
        f"window.{global_name} = {body};\n"
    )


def export_dataset(
    cards: list[Card],
    output: str | Path | None = None,
    global_name: str = DEFAULT_GLOBAL_NAME,
    title: str = "practice Q&A data",
) -> str:
    """Export cards as the viewer's dataset script.

    Args:
        cards: Cards with ids assigned
        output: Optional output path (if None, returns string only)
        global_name: Name of the ``window`` property holding the cards
        title: Description placed in the header comment

    Returns:
        Script content
    """
    content = render_dataset(cards, global_name=global_name, title=title)

    if output:
        path = Path(output)
        path.write_text(content, encoding="utf-8")
        logger.info(f"Wrote {len(cards)} cards to {path}")

    return content


def export_json(cards: list[Card], output: str | Path | None = None) -> str:
    """Export cards as a plain JSON array.

    Args:
        cards: Cards to export
        output: Optional output path (if None, returns string only)

    Returns:
        JSON content
    """
    content = json.dumps(_cards_payload(cards), indent=2, ensure_ascii=False) + "\n"

    if output:
        path = Path(output)
        path.write_text(content, encoding="utf-8")
        logger.info(f"Wrote {len(cards)} cards to {path}")

    return content


def load_dataset(script_text: str, global_name: str = DEFAULT_GLOBAL_NAME) -> list[Card]:
    """Read cards back from a dataset script.

    Args:
        script_text: Content written by ``export_dataset``
        global_name: Name of the ``window`` property holding the cards

    Returns:
        Parsed cards

    Raises:
        DatasetFormatError: If the assignment is missing or not a JSON array
    """
    pattern = re.compile(
        rf"^window\.{re.escape(global_name)}\s*=\s*(.*?);\s*$",
        re.MULTILINE | re.DOTALL,
    )
    match = pattern.search(script_text)
    if not match:
        raise DatasetFormatError(f"No window.{global_name} assignment found")

    try:
        payload = json.loads(match.group(1))
    except json.JSONDecodeError as e:
        raise DatasetFormatError(f"Invalid JSON for window.{global_name}: {e}") from e

    if not isinstance(payload, list):
        raise DatasetFormatError(f"window.{global_name} is not an array")
    return [Card.model_validate(item) for item in payload]


def count_by_category(cards: list[Card]) -> list[tuple[str, int]]:
    """Card counts per category, largest first."""
    return Counter(card.category for card in cards).most_common()
