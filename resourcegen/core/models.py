"""Domain models for generation configuration and property values."""

from __future__ import annotations

import codecs
from enum import Enum
from pathlib import Path
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing_extensions import Annotated

_LEGACY_MODE_NAMES = {
    "html": "structured-markup",
    "xml": "structured-markup",
    "text": "plain-text",
    "javascript": "script",
    "css": "stylesheet",
}


class TemplateMode(str, Enum):
    """Syntax dialect the template is parsed as."""

    STRUCTURED_MARKUP = "structured-markup"
    PLAIN_TEXT = "plain-text"
    SCRIPT = "script"
    STYLESHEET = "stylesheet"
    RAW = "raw"

    @classmethod
    def parse(cls, value: str | TemplateMode) -> TemplateMode:
        """Parse a mode name, accepting legacy engine names such as ``TEXT``."""
        if isinstance(value, cls):
            return value
        name = value.strip().lower().replace("_", "-")
        name = _LEGACY_MODE_NAMES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            allowed = ", ".join(mode.value for mode in cls)
            raise ValueError(
                f"Unknown template mode: {value!r} (expected one of: {allowed})"
            ) from None


class Scalar(BaseModel):
    """A single trimmed string value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["scalar"] = "scalar"
    value: str


class ListValue(BaseModel):
    """An ordered list of trimmed string values."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["list"] = "list"
    items: tuple[str, ...]


PropertyValue = Annotated[Union[Scalar, ListValue], Field(discriminator="kind")]

RenderContext = dict[str, PropertyValue]


class GeneratorConfig(BaseModel):
    """Parameters of a single generation run."""

    model_config = ConfigDict(frozen=True)

    template_file: Path = Field(..., description="Template file path")
    output_file: Path = Field(..., description="Output file path")
    properties: dict[str, str | None] = Field(
        default_factory=dict, description="Explicit template properties"
    )
    template_mode: TemplateMode = Field(
        default=TemplateMode.PLAIN_TEXT, description="Template rendering mode"
    )
    encoding: str = Field(default="UTF-8", description="Template and output charset")
    build_dir: Path = Field(
        default_factory=Path.cwd, description="Base directory for relative outputs"
    )

    @field_validator("template_mode", mode="before")
    @classmethod
    def _parse_mode(cls, value: str | TemplateMode) -> TemplateMode:
        return TemplateMode.parse(value)

    @field_validator("build_dir")
    @classmethod
    def _absolute_build_dir(cls, value: Path) -> Path:
        return value.absolute()

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {value!r}") from e
        return value
