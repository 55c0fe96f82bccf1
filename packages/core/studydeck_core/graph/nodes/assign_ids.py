"""Assign-ids node: number the cards once every file has been extracted."""

from typing import Any

from studydeck_core.schemas.cards import Card


def assign_ids(cards: list[Card]) -> list[Card]:
    """Return copies of ``cards`` with ``id`` set to ``card-<n>`` (1-based)."""
    return [
        card.model_copy(update={"id": f"card-{index}"})
        for index, card in enumerate(cards, start=1)
    ]


def assign_ids_node(state: dict[str, Any]) -> dict[str, Any]:
    """Give every card a stable identifier.

    IDs depend only on the card order, so they are stable for a fixed set of
    files and traversal order.

    Args:
        state: Pipeline state with ``cards``

    Returns:
        Updated state with numbered cards
    """
    return {
        **state,
        "cards": assign_ids(state.get("cards", [])),
        "current_step": "assign_ids",
    }
