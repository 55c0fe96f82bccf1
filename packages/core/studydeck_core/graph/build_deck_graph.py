"""Build the deck pipeline graph."""

from typing import TypedDict

from langgraph.graph import END, StateGraph

from studydeck_core.graph.config import BuildConfig
from studydeck_core.schemas.cards import Card
from studydeck_core.schemas.document import ExtractionStats, SourceFile


class DeckPipelineState(TypedDict, total=False):
    """State passed through the deck pipeline."""

    root: str
    files: list[SourceFile]
    cards: list[Card]
    stats: ExtractionStats
    current_step: str
    errors: list[str]


def build_deck_graph(config: BuildConfig | None = None):
    """Build a pipeline that turns a content folder into numbered cards.

    The graph runs ``collect -> extract -> assign_ids``. Invoke it with
    ``{"root": "<content root>"}``; the result holds ``cards``, ``stats`` and
    any collection ``errors``.

    Args:
        config: Optional build configuration (defaults to the practice preset)

    Returns:
        Compiled StateGraph ready for invocation
    """
    from studydeck_core.graph.nodes import assign_ids, collect, extract
    from studydeck_core.utils.logging import get_logger

    logger = get_logger(__name__)
    resolved_config = config or BuildConfig()
    logger.info(
        f"Building deck graph (sources={[s.folder for s in resolved_config.sources]}, "
        f"strategies={[s.value for s in resolved_config.strategies]})"
    )

    graph = StateGraph(DeckPipelineState)

    graph.add_node("collect", collect.create_collect_node(resolved_config))
    graph.add_node("extract", extract.create_extract_node(resolved_config))
    graph.add_node("assign_ids", assign_ids.assign_ids_node)

    graph.set_entry_point("collect")
    graph.add_edge("collect", "extract")
    graph.add_edge("extract", "assign_ids")
    graph.add_edge("assign_ids", END)

    return graph.compile()
