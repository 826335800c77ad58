"""resourcegen - Build-time resource generator.

Renders a single template with explicit properties and environment
variables, and writes the result into the build tree.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core.errors import GenerationFailed, ResourceGeneratorError
from .core.models import GeneratorConfig, TemplateMode
from .generator import ResourceGenerator, generate

# Re-export main CLI entry point
from .cli import main

__all__ = [
    "GenerationFailed",
    "GeneratorConfig",
    "ResourceGenerator",
    "ResourceGeneratorError",
    "TemplateMode",
    "generate",
    "main",
]
