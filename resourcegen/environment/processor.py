"""Property resolution from explicit configuration and environment variables."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ..core.errors import ConfigurationError
from ..core.models import ListValue, PropertyValue, RenderContext, Scalar

logger = logging.getLogger(__name__)

LIST_SEPARATOR = ","


def classify_value(value: str) -> PropertyValue:
    """Classify a raw string as a scalar or a list.

    Args:
        value: Raw property value

    Returns:
        ``ListValue`` of trimmed parts when the value contains a comma,
        otherwise a trimmed ``Scalar``. Empty parts are kept.
    """
    if LIST_SEPARATOR in value:
        return ListValue(items=tuple(part.strip() for part in value.split(LIST_SEPARATOR)))
    return Scalar(value=value.strip())


def resolve_properties(
    explicit: Mapping[str, str | None], environment: Mapping[str, str]
) -> RenderContext:
    """Merge explicit properties and environment variables into a render context.

    An explicit key shadows the environment entry of the same name entirely.

    Args:
        explicit: Properties configured for the invocation
        environment: Candidate properties from the environment

    Returns:
        Mapping of property name to classified value
    """
    raw: dict[str, str] = {
        key: value for key, value in environment.items() if key not in explicit
    }

    for key, value in explicit.items():
        if value is None:
            raise ConfigurationError(f"Property '{key}' has no value", key=key)
        raw[key] = value

    context: RenderContext = {}
    for key, value in raw.items():
        resolved = classify_value(value)
        if isinstance(resolved, ListValue):
            logger.debug(f"Processing {key} as list")
        context[key] = resolved

    logger.debug(
        f"Resolved {len(context)} propert(ies): {len(explicit)} explicit, "
        f"{len(context) - len(explicit)} from environment"
    )
    return context


def to_template_variables(context: RenderContext) -> dict[str, Any]:
    """Flatten classified values into plain strings and lists for the engine."""
    return {
        key: list(value.items) if isinstance(value, ListValue) else value.value
        for key, value in context.items()
    }
