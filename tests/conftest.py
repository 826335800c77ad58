"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from resourcegen.core.models import RenderContext, TemplateMode
from resourcegen.core.settings import get_settings


class FakeRenderer:
    """Renderer double that records calls and returns fixed text."""

    def __init__(self, result: str = "rendered", error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[dict] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def render(
        self,
        template_name: str,
        base_directory: Path,
        mode: TemplateMode,
        encoding: str,
        context: RenderContext,
    ) -> str:
        self.calls.append(
            {
                "template_name": template_name,
                "base_directory": base_directory,
                "mode": mode,
                "encoding": encoding,
                "context": context,
            }
        )
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "templates"
    directory.mkdir()
    return directory


@pytest.fixture
def write_template(template_dir: Path) -> Callable[..., Path]:
    """Write a template file into the template directory and return its path."""

    def _write(name: str, content: str, encoding: str = "utf-8") -> Path:
        path = template_dir / name
        path.write_text(content, encoding=encoding)
        return path

    return _write


@pytest.fixture
def build_dir(tmp_path: Path) -> Path:
    return tmp_path / "build"


@pytest.fixture
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()
