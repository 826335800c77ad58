"""Template source validation."""

from __future__ import annotations

import os
from pathlib import Path

from ..core.errors import (
    TemplateNotAFileError,
    TemplateNotFoundError,
    TemplateNotReadableError,
)


def validate_template(template_path: Path) -> None:
    """Check that the template exists, is a regular file and is readable.

    Checks run in that order and stop at the first failure.
    """
    try:
        exists = template_path.exists()
    except PermissionError as e:
        # An unsearchable parent directory hides the file from stat().
        raise TemplateNotReadableError(template_path) from e

    if not exists:
        raise TemplateNotFoundError(template_path)

    if not template_path.is_file():
        raise TemplateNotAFileError(template_path)

    if not os.access(template_path, os.R_OK):
        raise TemplateNotReadableError(template_path)
