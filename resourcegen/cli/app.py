"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path

import pydantic
import typer
from typing_extensions import Annotated

from ..core.errors import ConfigurationError, GenerationFailed
from ..core.models import GeneratorConfig
from ..core.settings import get_settings
from ..generator import generate as run_generation
from .parsers import parse_properties, parse_template_mode

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="resourcegen",
    help="Build-time resource generator driven by properties and environment variables.",
)


def _describe_errors(error: pydantic.ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )


def build_config(
    template_file: Path,
    output_file: Path,
    properties: dict[str, str],
    template_mode: str,
    encoding: str,
    build_dir: Path,
) -> GeneratorConfig:
    """Build the run configuration, reporting invalid values as ConfigurationError."""
    try:
        return GeneratorConfig(
            template_file=template_file,
            output_file=output_file,
            properties=properties,
            template_mode=parse_template_mode(template_mode),
            encoding=encoding,
            build_dir=build_dir,
        )
    except pydantic.ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {_describe_errors(e)}") from e


@app.command()
def generate(
    template: Annotated[
        Path,
        typer.Option(
            "--template",
            help="Template file to render.",
            metavar="PATH",
        ),
    ],
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            help="Output file (relative paths land in BUILD_DIR/generated-resources).",
            metavar="PATH",
        ),
    ],
    properties: Annotated[
        list[str],
        typer.Option(
            "--property",
            "-p",
            help="Template property (format: KEY=VALUE). Comma-separated values become lists. Repeatable.",
            metavar="KEY=VALUE",
        ),
    ] = [],
    template_mode: Annotated[
        str,
        typer.Option(
            "--mode",
            help="Template mode: structured-markup, plain-text, script, stylesheet or raw.",
            metavar="MODE",
        ),
    ] = "",
    encoding: Annotated[
        str,
        typer.Option(
            "--encoding",
            help="Charset of the template and the output file.",
            metavar="NAME",
        ),
    ] = "",
    build_dir: Annotated[
        str,
        typer.Option(
            "--build-dir",
            help="Build output directory (default: ./build).",
            metavar="DIR",
        ),
    ] = "",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Render a template with property and environment-driven context."""
    try:
        settings = get_settings()
    except pydantic.ValidationError as e:
        typer.echo(f"Error: Invalid settings: {_describe_errors(e)}", err=True)
        raise typer.Exit(code=1) from e

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="[%(levelname)s] %(message)s",
    )

    logger.debug("Starting resourcegen")

    try:
        config = build_config(
            template_file=template,
            output_file=output,
            properties=parse_properties(properties),
            template_mode=template_mode or settings.template_mode,
            encoding=encoding or settings.encoding,
            build_dir=Path(build_dir) if build_dir else settings.build_dir,
        )
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    try:
        output_path = run_generation(config)
    except GenerationFailed as e:
        chain = e.message_chain()
        typer.echo(f"Error: {chain[0]}", err=True)
        for message in chain[1:]:
            typer.echo(f"  caused by: {message}", err=True)
        raise typer.Exit(code=1) from e

    logger.debug(f"Completed: {output_path}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
