"""Inline markup cleanup and topic naming."""

import os
import re
from pathlib import Path, PurePath

from studydeck_core.schemas.topics import TopicInfo

DEFAULT_TOPIC_ID = "general"
DEFAULT_TOPIC_LABEL = "General"

# Applied in this order
_INLINE_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\*\*(.+?)\*\*"), r"\1"),  # bold
    (re.compile(r"\*(.+?)\*"), r"\1"),  # italic
    (re.compile(r"`(.+?)`"), r"\1"),  # inline code
    (re.compile(r"\[(.+?)\]\(.+?\)"), r"\1"),  # links
)

_SEPARATOR_RUN = re.compile(r"[-_]+")
_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")
_WORD_START = re.compile(r"\b[A-Za-z0-9_]")


def _strip_inline(text: str) -> str:
    for pattern, replacement in _INLINE_PATTERNS:
        text = pattern.sub(replacement, text)
    return text.strip()


def clean_markdown(text: str) -> str:
    """Remove bold, italic, inline code and link markup, then trim.

    Stripping repeats until nothing changes, so cleaning already-clean text
    is a no-op. Never call this on fenced code content.

    Args:
        text: Raw Markdown fragment

    Returns:
        Plain text
    """
    cleaned = _strip_inline(text)
    while cleaned != text:
        text = cleaned
        cleaned = _strip_inline(text)
    return cleaned


def normalize_topic_id(value: str) -> str:
    """Lowercase, collapse non-alphanumeric runs to hyphens, trim hyphens."""
    return _NON_ALNUM_RUN.sub("-", value.lower()).strip("-")


def format_topic_label(raw: str) -> str:
    """Turn a file stem such as ``async-await_basics`` into ``Async Await Basics``."""
    label = " ".join(_SEPARATOR_RUN.sub(" ", raw).split())
    return _WORD_START.sub(lambda match: match.group(0).upper(), label)


def relative_source(path: str | PurePath, root: str | PurePath | None = None) -> str:
    """Return ``path`` relative to ``root`` using forward slashes.

    Args:
        path: Source file path
        root: Optional directory the path is made relative to

    Returns:
        Normalized relative path
    """
    raw = str(path)
    if root is not None:
        raw = os.path.relpath(raw, str(root))
    return raw.replace("\\", "/")


def topic_info(path: str | PurePath, root: str | PurePath | None = None) -> TopicInfo:
    """Derive the source path, topic key and topic label from a file name.

    Args:
        path: Source file path
        root: Optional directory the source path is made relative to

    Returns:
        TopicInfo for the file
    """
    source_file = relative_source(path, root)
    stem = Path(source_file.rsplit("/", 1)[-1]).stem
    topic_id = normalize_topic_id(stem)
    topic_label = format_topic_label(stem or DEFAULT_TOPIC_LABEL)

    return TopicInfo(
        source_file=source_file,
        topic_id=topic_id or DEFAULT_TOPIC_ID,
        topic_label=topic_label or DEFAULT_TOPIC_LABEL,
    )


def path_grouping(source_file: str) -> tuple[str, str]:
    """Category and topic from the first and second path segments.

    Used by the section and concept extractors, which group by folder rather
    than by file name.
    """
    parts = source_file.split("/")
    category = parts[0]
    topic = parts[1] if len(parts) > 1 and parts[1] else DEFAULT_TOPIC_LABEL
    return category, topic
