"""Template rendering engine."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Protocol

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..core.errors import RenderError
from ..core.models import RenderContext, TemplateMode
from ..environment.processor import to_template_variables

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    """Produces rendered text from a template on disk."""

    def render(
        self,
        template_name: str,
        base_directory: Path,
        mode: TemplateMode,
        encoding: str,
        context: RenderContext,
    ) -> str: ...


def _script_literal(value: Any) -> Any:
    """Emit values as JSON literals in script templates.

    Scalars become quoted, escaped strings and lists become arrays, so
    templates write ``const name = ${name};`` without surrounding quotes.
    """
    if isinstance(value, (list, tuple)):
        return json.dumps(list(value))
    return json.dumps(value)


def create_environment(
    base_directory: Path, mode: TemplateMode, encoding: str
) -> Environment:
    """Create a Jinja2 environment for one render.

    Args:
        base_directory: Directory used to resolve the template and its includes
        mode: Template mode controlling escaping and value output
        encoding: Charset used to read templates

    Returns:
        Environment with template caching disabled
    """
    finalize: Callable[[Any], Any] | None = None
    if mode is TemplateMode.SCRIPT:
        finalize = _script_literal

    return Environment(
        loader=FileSystemLoader(str(base_directory), encoding=encoding),
        undefined=StrictUndefined,
        autoescape=mode is TemplateMode.STRUCTURED_MARKUP,
        variable_start_string="${",
        variable_end_string="}",
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        cache_size=0,
        finalize=finalize,
    )


class JinjaRenderer:
    """Renderer backed by Jinja2, re-reading the template on every call."""

    def render(
        self,
        template_name: str,
        base_directory: Path,
        mode: TemplateMode,
        encoding: str,
        context: RenderContext,
    ) -> str:
        logger.debug(f"Rendering template {template_name} from {base_directory} ({mode.value})")

        env = create_environment(base_directory, mode, encoding)
        try:
            if mode is TemplateMode.RAW:
                source, _, _ = env.loader.get_source(env, template_name)
                return source
            template = env.get_template(template_name)
            return template.render(**to_template_variables(context))
        except UnicodeDecodeError as e:
            raise RenderError(
                f"Cannot decode template {template_name} as {encoding}: {e}",
                template_name,
            ) from e
        except Exception as e:
            raise RenderError(
                f"Failed to render template {template_name}: {e}", template_name
            ) from e
