"""Tests for configuration models."""

from pathlib import Path

import pydantic
import pytest

from resourcegen.core.models import GeneratorConfig, TemplateMode


class TestTemplateMode:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("plain-text", TemplateMode.PLAIN_TEXT),
            ("TEXT", TemplateMode.PLAIN_TEXT),
            ("HTML", TemplateMode.STRUCTURED_MARKUP),
            ("xml", TemplateMode.STRUCTURED_MARKUP),
            ("JAVASCRIPT", TemplateMode.SCRIPT),
            ("CSS", TemplateMode.STYLESHEET),
            ("RAW", TemplateMode.RAW),
            ("structured_markup", TemplateMode.STRUCTURED_MARKUP),
        ],
    )
    def test_parse(self, name, expected):
        assert TemplateMode.parse(name) is expected

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown template mode"):
            TemplateMode.parse("markdown")


class TestGeneratorConfig:
    def test_defaults(self):
        config = GeneratorConfig(template_file=Path("t.txt"), output_file=Path("o.txt"))

        assert config.properties == {}
        assert config.template_mode is TemplateMode.PLAIN_TEXT
        assert config.encoding == "UTF-8"

    def test_mode_accepts_legacy_names(self):
        config = GeneratorConfig(
            template_file=Path("t.txt"), output_file=Path("o.txt"), template_mode="HTML"
        )

        assert config.template_mode is TemplateMode.STRUCTURED_MARKUP

    def test_unknown_encoding_is_rejected(self):
        with pytest.raises(pydantic.ValidationError, match="Unknown encoding"):
            GeneratorConfig(
                template_file=Path("t.txt"),
                output_file=Path("o.txt"),
                encoding="no-such-charset",
            )

    def test_config_is_immutable(self):
        config = GeneratorConfig(template_file=Path("t.txt"), output_file=Path("o.txt"))

        with pytest.raises(pydantic.ValidationError):
            config.encoding = "latin-1"

    def test_relative_build_dir_is_made_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        config = GeneratorConfig(
            template_file=Path("t.txt"), output_file=Path("o.txt"), build_dir=Path("build")
        )

        assert config.build_dir == tmp_path / "build"
