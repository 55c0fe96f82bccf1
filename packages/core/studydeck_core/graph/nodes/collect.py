"""Collect node: find and read Markdown files under each content source."""

from pathlib import Path
from typing import Any

from studydeck_core.extractors.cleanup import relative_source
from studydeck_core.graph.config import BuildConfig, ContentSource
from studydeck_core.schemas.document import SourceFile
from studydeck_core.utils.logging import get_logger

logger = get_logger(__name__)


def _walk(directory: Path, extensions: tuple[str, ...]) -> list[Path]:
    """Recursively list matching files, directories in sorted order."""
    files: list[Path] = []
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            files.extend(_walk(entry, extensions))
        elif entry.is_file() and entry.name.lower().endswith(extensions):
            files.append(entry)
    return files


def collect_markdown_files(
    root: Path, source: ContentSource, extensions: tuple[str, ...] = (".md",)
) -> list[Path]:
    """List the Markdown files of one content source.

    Args:
        root: Content root directory
        source: Source folder to scan
        extensions: Lowercase file suffixes to accept

    Returns:
        File paths in traversal order

    Raises:
        FileNotFoundError: If the source folder does not exist
    """
    directory = root / source.folder
    if not directory.is_dir():
        raise FileNotFoundError(f"Content source not found: {directory}")
    return _walk(directory, extensions)


def create_collect_node(config: BuildConfig):
    """Create the collect node for a build configuration.

    Returns:
        Node function
    """

    def collect_node(state: dict[str, Any]) -> dict[str, Any]:
        """Read every Markdown file under the configured sources.

        Args:
            state: Pipeline state with the content ``root``

        Returns:
            Updated state with ``files``
        """
        root = Path(state.get("root") or ".")
        errors: list[str] = list(state.get("errors", []))
        files: list[SourceFile] = []

        for source in config.sources:
            try:
                paths = collect_markdown_files(root, source, config.extensions)
            except OSError as e:
                error_msg = f"Failed to scan {source.key}: {e}"
                logger.error(error_msg)
                errors.append(error_msg)
                continue

            logger.info(f"Found {len(paths)} markdown files in {source.key}/")
            for path in paths:
                try:
                    text = path.read_text(encoding="utf-8")
                except (OSError, UnicodeDecodeError) as e:
                    error_msg = f"Failed to read {path}: {e}"
                    logger.error(error_msg)
                    errors.append(error_msg)
                    continue
                files.append(
                    SourceFile(
                        key=source.key,
                        path=str(path),
                        relative=relative_source(path, root),
                        text=text,
                    )
                )

        return {
            **state,
            "files": files,
            "errors": errors,
            "current_step": "collect",
        }

    return collect_node
