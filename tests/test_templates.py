"""Tests for the template engine and logging setup."""

import logging

import pytest
from rich.console import Console

from tfplugingen.codegen.core.templates import TemplateEngine, TemplateError
from tfplugingen.logging_config import get_logger, setup_logging


class TestTemplateEngine:
    def test_filters(self, engine):
        rendered = engine.render_string(
            "{{ name|pascal_case }} {{ name|camel_case }} {{ text|go_quote }}",
            {"name": "example_thing", "text": 'a"b'},
        )
        assert rendered == 'ExampleThing exampleThing "a\\"b"'

    def test_memory_template_shadows_file(self, engine):
        engine.add_template("model.go.j2", "model {{ model.name }}")

        assert engine.has_template("model.go.j2")
        assert engine.render_template("model.go.j2", {"model": {"name": "x"}}) == "model x"

    def test_go_templates_available(self, engine):
        assert engine.has_template("schema.go.j2")
        assert engine.has_template("nested_object_value.go.j2")

    def test_missing_variable_raises(self, engine):
        with pytest.raises(TemplateError):
            engine.render_string("{{ missing }}", {})

    def test_missing_template_raises(self, engine):
        with pytest.raises(TemplateError, match="no_such.j2"):
            engine.render_template("no_such.j2", {})

    def test_missing_directory(self, tmp_path):
        engine = TemplateEngine(tmp_path / "absent")
        assert engine.render_string("ok", {}) == "ok"


class TestLogging:
    def test_logger_namespace(self):
        assert get_logger("custom").name == "tfplugingen.custom"
        assert get_logger("tfplugingen.codegen").name == "tfplugingen.codegen"

    def test_setup_logging_replaces_handler(self):
        console = Console(record=True)
        logger = setup_logging("debug", console=console)
        logger = setup_logging("INFO", console=console)

        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

        setup_logging("WARNING")
