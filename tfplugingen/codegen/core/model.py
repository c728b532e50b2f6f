"""
Data model fields derived from schema nodes.

Each node contributes one field to the provider's model struct; the struct
itself is rendered by the ``model.go.j2`` template.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .naming import to_camel_case
from .templates import TemplateEngine, get_default_template_engine

# Framework value types used when a node has no custom value type.
BOOL_VALUE_TYPE = "types.Bool"
FLOAT64_VALUE_TYPE = "types.Float64"
INT64_VALUE_TYPE = "types.Int64"
LIST_VALUE_TYPE = "types.List"
MAP_VALUE_TYPE = "types.Map"
NUMBER_VALUE_TYPE = "types.Number"
OBJECT_VALUE_TYPE = "types.Object"
SET_VALUE_TYPE = "types.Set"
STRING_VALUE_TYPE = "types.String"


@dataclass(frozen=True)
class ModelField:
    """A model struct field: Go name, value type and ``tfsdk`` tag."""

    name: str
    tfsdk_name: str
    value_type: str


@dataclass(frozen=True)
class Model:
    name: str
    fields: Tuple[ModelField, ...] = ()

    def render(self, engine: Optional[TemplateEngine] = None) -> str:
        """Render the ``<name>Model`` struct declaration."""
        engine = engine or get_default_template_engine()
        return engine.render_template(
            "model.go.j2",
            {"model": {"name": to_camel_case(self.name), "fields": self.fields}},
        )
