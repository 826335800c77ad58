"""Error taxonomy for resource generation."""

from __future__ import annotations

from pathlib import Path


class ResourceGeneratorError(Exception):
    """Base class for every failure raised by resourcegen."""


class ValidationError(ResourceGeneratorError):
    """Raised when the template source is unusable."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class TemplateNotFoundError(ValidationError):
    """Template path does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Template file does not exist: {path}", path)


class TemplateNotAFileError(ValidationError):
    """Template path exists but is not a regular file."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Template path is not a file: {path}", path)


class TemplateNotReadableError(ValidationError):
    """Template file cannot be read by the current process."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Cannot read template file: {path}", path)


class ConfigurationError(ResourceGeneratorError):
    """Raised when invocation parameters or properties are unusable."""

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class RenderError(ResourceGeneratorError):
    """Raised when the templating engine fails to produce output."""

    def __init__(self, message: str, template: str) -> None:
        super().__init__(message)
        self.template = template


class DirectoryCreationError(ResourceGeneratorError):
    """Raised when the output directory cannot be created."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Failed to create output directory: {path}")
        self.path = path


class WriteError(ResourceGeneratorError):
    """Raised on I/O failure while writing the output file."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class UnexpectedError(ResourceGeneratorError):
    """Wraps any failure outside the taxonomy above."""


class GenerationFailed(ResourceGeneratorError):
    """The single failure surfaced to callers; ``__cause__`` holds the origin."""

    def __init__(self, message: str, state: str) -> None:
        super().__init__(message)
        self.state = state

    def message_chain(self) -> list[str]:
        """Return this message followed by every chained cause."""
        messages: list[str] = []
        current: BaseException | None = self
        while current is not None:
            messages.append(str(current) or type(current).__name__)
            current = current.__cause__
        return messages
