"""File I/O operations for rendering."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import DirectoryCreationError, WriteError

logger = logging.getLogger(__name__)

GENERATED_RESOURCES_DIR = "generated-resources"


def resolve_output_path(output_file: Path, build_dir: Path) -> Path:
    """Resolve the output location of the generated resource.

    Args:
        output_file: Configured output path
        build_dir: Absolute build directory supplied by the build context

    Returns:
        ``output_file`` when absolute, otherwise a path under
        ``build_dir/generated-resources``
    """
    if output_file.is_absolute():
        return output_file
    return build_dir / GENERATED_RESOURCES_DIR / output_file


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    parent = path.parent
    if parent.is_dir():
        return
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(parent) from e


def write_text(path: Path, text: str, encoding: str) -> None:
    """Write text to a file, creating parent directories first.

    The file is written in place; a failure part way through can leave a
    truncated file behind.

    Args:
        path: Destination file path
        text: Text content to write
        encoding: Output charset
    """
    ensure_parent(path)

    try:
        with path.open("w", encoding=encoding) as handle:
            handle.write(text)
    except (OSError, UnicodeError) as e:
        raise WriteError(f"Failed to write output file {path}: {e}", path) from e

    logger.info(f"Generated resource written to: {path}")
