"""Render answer blocks as plain text or HTML for deck exporters."""

from html import escape

from studydeck_core.schemas.cards import (
    Card,
    CodeBlock,
    ContentBlock,
    ListBlock,
    TableBlock,
    TextBlock,
)


def block_to_text(block: ContentBlock) -> str:
    """Plain-text rendering of one block."""
    if isinstance(block, TextBlock):
        return block.content
    if isinstance(block, ListBlock):
        return "\n".join(f"- {item}" for item in block.items)
    if isinstance(block, TableBlock):
        lines = [" | ".join(block.headers)]
        lines.extend(" | ".join(row) for row in block.rows)
        return "\n".join(lines)
    if isinstance(block, CodeBlock):
        return block.code
    return ""


def answer_to_text(card: Card) -> str:
    """Plain-text rendering of a card's answer, blocks separated by blank lines."""
    return "\n\n".join(block_to_text(block) for block in card.answer)


def block_to_html(block: ContentBlock) -> str:
    """HTML rendering of one block."""
    if isinstance(block, TextBlock):
        return f"<p>{escape(block.content)}</p>"
    if isinstance(block, ListBlock):
        items = "".join(f"<li>{escape(item)}</li>" for item in block.items)
        return f"<ul>{items}</ul>"
    if isinstance(block, TableBlock):
        head = "".join(f"<th>{escape(cell)}</th>" for cell in block.headers)
        body = "".join(
            "<tr>" + "".join(f"<td>{escape(cell)}</td>" for cell in row) + "</tr>"
            for row in block.rows
        )
        return f"<table><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>"
    if isinstance(block, CodeBlock):
        language = escape(block.language)
        return (
            f'<pre class="code-{block.code_type.value}">'
            f'<code class="language-{language}">{escape(block.code)}</code></pre>'
        )
    return ""


def answer_to_html(card: Card) -> str:
    """HTML rendering of a card's answer."""
    return "\n".join(block_to_html(block) for block in card.answer)
