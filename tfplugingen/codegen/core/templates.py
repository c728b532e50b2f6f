"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering with the filters
the Go templates rely on. Templates are loaded from the Go language package,
and in-memory templates can be registered on top of them.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import ChoiceLoader, DictLoader, Environment, FileSystemLoader, StrictUndefined
from jinja2 import TemplateError as Jinja2TemplateError

from ...logging_config import get_logger
from ..languages.go.literals import go_quote
from .errors import GeneratorError
from .naming import to_camel_case, to_pascal_case

logger = get_logger(__name__)

GO_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "languages" / "go" / "templates"


class TemplateError(GeneratorError):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files (Go templates
                when omitted)
        """
        self.template_dir = template_dir or GO_TEMPLATE_DIR
        self._memory = DictLoader({})
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        loaders = [self._memory]
        if self.template_dir.exists():
            loaders.append(FileSystemLoader(str(self.template_dir)))
        else:
            logger.warning("Template directory not found: %s", self.template_dir)

        # Generated Go is plain text; a missing variable is a template bug.
        self._env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

        self._env.filters["pascal_case"] = to_pascal_case
        self._env.filters["camel_case"] = to_camel_case
        self._env.filters["go_quote"] = go_quote

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Jinja2TemplateError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """
        Render a template string with the given context.

        Args:
            template_string: Template content as string
            context: Variables to pass to template

        Returns:
            Rendered content
        """
        try:
            template = self._env.from_string(template_string)
            return template.render(**context)
        except Jinja2TemplateError as e:
            raise TemplateError(f"Failed to render template string: {e}") from e

    def add_template(self, name: str, content: str):
        """
        Add an in-memory template, shadowing a file template of the same name.

        Args:
            name: Template name
            content: Template content
        """
        self._memory.mapping[name] = content

    def has_template(self, name: str) -> bool:
        return name in self._env.list_templates()


_default_engine = None


def get_default_template_engine() -> TemplateEngine:
    """Get the default template engine instance."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine()
    return _default_engine
