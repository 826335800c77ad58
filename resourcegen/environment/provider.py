"""Environment variable providers."""

from __future__ import annotations

import os
from typing import Mapping, Protocol


class EnvironmentProvider(Protocol):
    """Supplies the environment variables that are candidate properties."""

    def variables(self) -> Mapping[str, str]: ...


class OsEnvironmentProvider:
    """Reads the process environment once and serves that snapshot."""

    def __init__(self) -> None:
        self._snapshot: dict[str, str] | None = None

    def variables(self) -> Mapping[str, str]:
        if self._snapshot is None:
            self._snapshot = dict(os.environ)
        return self._snapshot


class MappingEnvironmentProvider:
    """Serves a fixed mapping; used where the process environment must not leak in."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def variables(self) -> Mapping[str, str]:
        return self._values
