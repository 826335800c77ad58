"""Generation run: validate, resolve properties, render, resolve output, write."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from .core.errors import GenerationFailed, ResourceGeneratorError, UnexpectedError
from .core.models import GeneratorConfig
from .environment.processor import resolve_properties
from .environment.provider import EnvironmentProvider, OsEnvironmentProvider
from .rendering.engine import JinjaRenderer, Renderer
from .rendering.io import resolve_output_path, write_text
from .rendering.validation import validate_template

logger = logging.getLogger(__name__)


class GenerationState(str, Enum):
    IDLE = "idle"
    VALIDATED = "validated"
    CONTEXT_BUILT = "context-built"
    RENDERED = "rendered"
    WRITTEN = "written"
    DONE = "done"
    FAILED = "failed"


class ResourceGenerator:
    """Runs a single generation for one configuration.

    A generator is single-use: states only move forward, and any failure
    leaves it in ``FAILED``.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        renderer: Renderer | None = None,
        environment: EnvironmentProvider | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or JinjaRenderer()
        self.environment = environment or OsEnvironmentProvider()
        self.state = GenerationState.IDLE
        self.output_path: Path | None = None

    def run(self) -> Path:
        """Generate the resource and return the path it was written to.

        Raises:
            GenerationFailed: chained to the error that aborted the run
        """
        if self.state is not GenerationState.IDLE:
            raise UnexpectedError(
                f"Generator already ran (state: {self.state.value})"
            )

        logger.info("Starting resource generation...")
        try:
            output_path = self._run()
        except ResourceGeneratorError as e:
            raise self._fail(e) from e
        except Exception as e:
            cause = UnexpectedError(f"Unexpected failure: {e}")
            cause.__cause__ = e
            raise self._fail(cause) from cause

        logger.info("Generation complete")
        return output_path

    def _run(self) -> Path:
        config = self.config
        template_file = config.template_file

        validate_template(template_file)
        self.state = GenerationState.VALIDATED

        context = resolve_properties(config.properties, self.environment.variables())
        self.state = GenerationState.CONTEXT_BUILT

        rendered = self.renderer.render(
            template_file.name,
            template_file.parent,
            config.template_mode,
            config.encoding,
            context,
        )
        self.state = GenerationState.RENDERED

        self.output_path = resolve_output_path(config.output_file, config.build_dir)
        write_text(self.output_path, rendered, config.encoding)
        self.state = GenerationState.WRITTEN

        self.state = GenerationState.DONE
        return self.output_path

    def _fail(self, cause: ResourceGeneratorError) -> GenerationFailed:
        failed_in = self.state
        self.state = GenerationState.FAILED
        logger.debug(f"Generation failed after state {failed_in.value}: {cause}")
        return GenerationFailed(
            f"Failed to generate resource from template {self.config.template_file}",
            failed_in.value,
        )


def generate(
    config: GeneratorConfig,
    renderer: Renderer | None = None,
    environment: EnvironmentProvider | None = None,
) -> Path:
    """Run one generation for ``config``; see ``ResourceGenerator.run``."""
    return ResourceGenerator(config, renderer, environment).run()
