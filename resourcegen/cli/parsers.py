"""CLI argument parsers and validators."""

from __future__ import annotations

import typer

from ..core.models import TemplateMode


def parse_property(value: str) -> tuple[str, str]:
    """Parse a property argument in format KEY=VALUE."""
    if "=" not in value:
        raise typer.BadParameter(f"Must be KEY=VALUE, got: {value!r}")
    key, raw = value.split("=", 1)
    if not key.strip():
        raise typer.BadParameter(f"Property name must not be empty, got: {value!r}")
    return key.strip(), raw


def parse_properties(values: list[str]) -> dict[str, str]:
    """Parse repeated KEY=VALUE arguments; a repeated key keeps the last value."""
    return dict(map(parse_property, values))


def parse_template_mode(value: str) -> TemplateMode:
    """Parse a template mode name."""
    try:
        return TemplateMode.parse(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
