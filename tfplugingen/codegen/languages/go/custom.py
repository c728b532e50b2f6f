"""
Renderers for custom Type/Value declarations and To/From helpers.

Each renderer prepares a template context from node data and hands it to the
template engine. Names arrive as raw snake_case attribute names; the Go
identifiers are derived here so templates only lay out text.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from ...core.naming import lower_first, to_camel_case, to_pascal_case, to_prefix_pascal_case
from ...core.schema import AssociatedExternalType
from ...core.templates import TemplateEngine, get_default_template_engine
from .naming import GO_RESERVED_WORDS
from .types import ConversionStrategy, ObjectField, ToFromConversion

NESTED_COLLECTION_KINDS = {
    "ListNested": "List",
    "MapNested": "Map",
    "SetNested": "Set",
}


def _engine(engine: Optional[TemplateEngine]) -> TemplateEngine:
    return engine or get_default_template_engine()


def go_local_name(name: str) -> str:
    """Return ``name`` usable as a Go local variable."""
    if name in GO_RESERVED_WORDS:
        return f"{name}_"
    return name


def _external_type_context(name: str, assoc_ext_type: AssociatedExternalType) -> dict:
    return {
        "name": to_pascal_case(name),
        "assoc": assoc_ext_type.to_pascal_case(),
        "type_ref": assoc_ext_type.type_reference(),
        "var": assoc_ext_type.to_camel_case(),
    }


# Custom Type/Value for primitive, collection and object attributes


def render_custom_type_value(
    name: str,
    base: str,
    elem_type: str = "",
    attr_types: str = "",
    is_object: bool = False,
    engine: Optional[TemplateEngine] = None,
) -> str:
    """
    Render the ``<Name>Type``/``<Name>Value`` pair embedding a base type.

    Args:
        name: Attribute name
        base: Framework base kind, e.g. ``Bool``, ``List`` or ``Object``
        elem_type: Element type expression for list, map and set
        attr_types: Attribute type lines for objects
        is_object: Whether to render the object variant

    Returns:
        Go source
    """
    return _engine(engine).render_template(
        "custom_type_value.go.j2",
        {
            "name": to_pascal_case(name),
            "base": base,
            "var": base.lower(),
            "elem_type": elem_type,
            "attr_types": attr_types,
            "is_object": is_object,
        },
    )


# To/From for primitive, collection and object attributes


def render_to_from_primitive(
    name: str,
    base: str,
    assoc_ext_type: AssociatedExternalType,
    to_func: str,
    from_func: str,
    engine: Optional[TemplateEngine] = None,
) -> str:
    context = _external_type_context(name, assoc_ext_type)
    context.update({"base": base, "to_func": to_func, "from_func": from_func})
    return _engine(engine).render_template("to_from_primitive.go.j2", context)


def render_to_from_collection(
    name: str,
    base: str,
    assoc_ext_type: AssociatedExternalType,
    elem_type: str,
    elem_value_type: str,
    elem_from: str,
    engine: Optional[TemplateEngine] = None,
) -> str:
    context = _external_type_context(name, assoc_ext_type)
    context.update(
        {
            "base": base,
            "elem_type": elem_type,
            "elem_value_type": elem_value_type,
            "elem_from": elem_from,
        }
    )
    return _engine(engine).render_template("to_from_collection.go.j2", context)


def render_to_from_object(
    name: str,
    assoc_ext_type: AssociatedExternalType,
    from_fields: Mapping[str, ObjectField],
    engine: Optional[TemplateEngine] = None,
) -> str:
    context = _external_type_context(name, assoc_ext_type)
    context["fields"] = [
        {"key": k, "api_field": to_pascal_case(k), "from_func": f.from_func}
        for k, f in sorted(from_fields.items())
    ]
    return _engine(engine).render_template("to_from_object.go.j2", context)


# Nested objects


@dataclass(frozen=True)
class NestedObjectField:
    """One attribute or block of a nested object, as seen by the templates."""

    key: str
    field: str
    var: str
    local: str
    nested_name: str
    kind: str
    attr_type: str
    attr_value: str
    collection: Optional[Dict[str, str]] = None

    @property
    def nested_collection(self) -> str:
        return NESTED_COLLECTION_KINDS.get(self.kind, "")

    @property
    def object_value(self) -> str:
        """Expression placed in the ``map[string]attr.Value`` of ToObjectValue."""
        if self.nested_collection or self.kind == "SingleNested":
            return self.local
        if self.collection or self.kind == "Object":
            return f"{self.var}Val"
        return f"v.{self.field}"


def nested_object_fields(
    name: str,
    attribute_types: Mapping[str, str],
    attr_types: Mapping[str, str],
    attr_values: Mapping[str, str],
    collection_types: Optional[Mapping[str, Dict[str, str]]] = None,
) -> List[NestedObjectField]:
    """
    Build the sorted field list of a nested object.

    Args:
        name: Nested object name, used to prefix colliding field names
        attribute_types: Field name to kind name, e.g. ``Bool``
        attr_types: Field name to ``attr.Type`` expression
        attr_values: Field name to ``attr.Value`` type
        collection_types: Field name to element type and value function for
            collections without an associated external type
    """
    collection_types = collection_types or {}
    fields = []
    for key in sorted(attr_values):
        prefixed = to_prefix_pascal_case(key, name)
        fields.append(
            NestedObjectField(
                key=key,
                field=prefixed,
                var=to_camel_case(key),
                local=go_local_name(lower_first(prefixed)),
                nested_name=to_pascal_case(key),
                kind=attribute_types.get(key, ""),
                attr_type=attr_types.get(key, ""),
                attr_value=attr_values[key],
                collection=collection_types.get(key),
            )
        )
    return fields


def render_nested_object_type(
    name: str, fields: List[NestedObjectField], engine: Optional[TemplateEngine] = None
) -> str:
    return _engine(engine).render_template(
        "nested_object_type.go.j2", {"name": to_pascal_case(name), "fields": fields}
    )


def render_nested_object_value(
    name: str, fields: List[NestedObjectField], engine: Optional[TemplateEngine] = None
) -> str:
    return _engine(engine).render_template(
        "nested_object_value.go.j2", {"name": to_pascal_case(name), "fields": fields}
    )


@dataclass(frozen=True)
class ObjectSubField:
    key: str
    pascal: str
    go_type: str = ""
    type: str = ""
    to_func: str = ""
    from_func: str = ""


@dataclass(frozen=True)
class ConversionField:
    """A field of a nested object together with its conversion plan."""

    key: str
    field: str
    api_field: str
    var: str
    nested_name: str
    plan: ToFromConversion
    object_fields: List[ObjectSubField] = field(default_factory=list)

    @property
    def strategy(self) -> str:
        return self.plan.strategy

    @property
    def ext_pascal(self) -> str:
        if self.plan.assoc_ext_type is None:
            return ""
        return self.plan.assoc_ext_type.to_pascal_case()


def _conversion_fields(name: str, plans: Mapping[str, ToFromConversion]) -> List[ConversionField]:
    fields = []
    for key, plan in sorted(plans.items()):
        sub_fields = [
            ObjectSubField(
                key=k,
                pascal=to_pascal_case(k),
                go_type=f.go_type,
                type=f.type,
                to_func=f.to_func,
                from_func=f.from_func,
            )
            for k, f in plan.sorted_object_fields()
        ]
        fields.append(
            ConversionField(
                key=key,
                field=to_prefix_pascal_case(key, name),
                api_field=to_pascal_case(key),
                var=to_camel_case(key),
                nested_name=to_pascal_case(key),
                plan=plan,
                object_fields=sub_fields,
            )
        )
    return fields


def render_to_from_nested_object(
    name: str,
    assoc_ext_type: AssociatedExternalType,
    to_funcs: Mapping[str, ToFromConversion],
    from_funcs: Mapping[str, ToFromConversion],
    engine: Optional[TemplateEngine] = None,
) -> str:
    """Render the To/From pair of a nested object with an external type."""
    context = _external_type_context(name, assoc_ext_type)
    context["to_fields"] = _conversion_fields(name, to_funcs)
    context["from_fields"] = _conversion_fields(name, from_funcs)
    return _engine(engine).render_template("to_from_nested_object.go.j2", context)


__all__ = [
    "ConversionStrategy",
    "NestedObjectField",
    "nested_object_fields",
    "render_custom_type_value",
    "render_nested_object_type",
    "render_nested_object_value",
    "render_to_from_collection",
    "render_to_from_nested_object",
    "render_to_from_object",
    "render_to_from_primitive",
]
