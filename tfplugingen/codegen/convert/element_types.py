"""
Element type and object attribute type expressions.

Three renderings of the same recursive descriptor are needed:

* the schema rendering, where a custom type replaces a whole level;
* the template rendering used inside generated Type/Value code, where a
  custom collection or object type keeps its ``ElemType``/``AttrTypes`` body;
* the plain framework rendering, which ignores custom types entirely.

Object attribute types are always rendered sorted by name.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ..core.errors import GeneratorError, UnimplementedError
from ..core.imports import ImportSet, attr_imports, types_imports
from ..core.schema import ElementKind, ElementType, ObjectAttributeType
from ..languages.go.literals import go_quote


def sorted_attribute_types(
    attribute_types: Iterable[ObjectAttributeType],
) -> List[ObjectAttributeType]:
    return sorted(attribute_types or (), key=lambda a: a.name)


def _framework_type(kind: ElementKind) -> str:
    return f"types.{kind.value}Type"


def _collection_type(kind: ElementKind, elem: str, custom: Optional[str] = None) -> str:
    base = custom or _framework_type(kind)
    return f"{base}{{\nElemType: {elem},\n}}"


def _object_type(attr_types: str, custom: Optional[str] = None) -> str:
    base = custom or _framework_type(ElementKind.OBJECT)
    return f"{base}{{\nAttrTypes: map[string]attr.Type{{\n{attr_types}\n}},\n}}"


def _require(element_type: Optional[ElementType]) -> ElementType:
    if element_type is None:
        raise GeneratorError("no matching element type found")
    return element_type


# Schema rendering


def _schema_element_type(e: ElementType) -> str:
    if e.custom_type is not None:
        return e.custom_type.type
    if e.kind.is_primitive:
        return _framework_type(e.kind)
    if e.kind.is_collection:
        return _collection_type(e.kind, _schema_element_type(_require(e.element_type)))
    return _object_type(_schema_attribute_types(e.attribute_types))


def _schema_attribute_types(attribute_types: Iterable[ObjectAttributeType]) -> str:
    return "\n".join(
        f"{go_quote(a.name)}: {_schema_element_type(a.type)},"
        for a in sorted_attribute_types(attribute_types)
    )


def _element_imports(e: Optional[ElementType]) -> ImportSet:
    if e is None:
        return ImportSet()
    if e.kind.is_primitive:
        if e.custom_type is not None and e.custom_type.has_import():
            return ImportSet([e.custom_type.import_])
        return types_imports()
    if e.kind.is_collection:
        return _element_imports(e.element_type)
    if e.custom_type is not None and e.custom_type.has_import():
        return ImportSet([e.custom_type.import_])
    # types.ObjectType{AttrTypes: map[string]attr.Type{...}} even when empty.
    return _attribute_types_imports(e.attribute_types) | attr_imports() | types_imports()


def _attribute_types_imports(attribute_types: Iterable[ObjectAttributeType]) -> ImportSet:
    attribute_types = sorted_attribute_types(attribute_types)
    if not attribute_types:
        return ImportSet()

    imports = ImportSet()
    for a in attribute_types:
        custom = a.type.custom_type
        if a.type.kind.is_primitive:
            if custom is not None and custom.has_import():
                imports = imports | ImportSet([custom.import_])
                continue
            imports = imports | attr_imports() | types_imports()
        elif a.type.kind.is_collection:
            if custom is not None and custom.has_import():
                imports = imports | ImportSet([custom.import_])
            imports = imports | _element_imports(a.type.element_type)
        else:
            imports = imports | _element_imports(a.type)

    # The map[string]attr.Type literal always needs the attr package.
    return imports | attr_imports()


@dataclass(frozen=True)
class ElementTypeCollection:
    """``ElementType`` line of a list, map or set attribute."""

    element_type: Optional[ElementType] = None

    def element_type_expression(self) -> str:
        if self.element_type is None:
            return ""
        return _schema_element_type(self.element_type)

    def imports(self) -> ImportSet:
        return _element_imports(self.element_type)

    def schema(self) -> str:
        return f"ElementType: {self.element_type_expression()},\n"


@dataclass(frozen=True)
class ObjectAttributeTypes:
    """``AttributeTypes`` line of an object attribute."""

    attribute_types: Tuple[ObjectAttributeType, ...] = ()

    def attribute_types_expression(self) -> str:
        return _schema_attribute_types(self.attribute_types)

    def imports(self) -> ImportSet:
        return _attribute_types_imports(self.attribute_types)

    def schema(self) -> str:
        body = self.attribute_types_expression()
        if not body:
            return ""
        return f"AttributeTypes: map[string]attr.Type{{\n{body}\n}},\n"


# Framework rendering (custom types ignored)


def element_type_string(element_type: Optional[ElementType]) -> str:
    """
    Render an element type using framework types only.

    Raises:
        GeneratorError: If the element type is missing
    """
    e = _require(element_type)
    if e.kind.is_primitive:
        return _framework_type(e.kind)
    if e.kind.is_collection:
        return _collection_type(e.kind, element_type_string(e.element_type))
    attr_types = attr_types_string(e.attribute_types)
    if attr_types:
        attr_types += ",\n"
    return f"types.ObjectType{{\nAttrTypes: map[string]attr.Type{{\n{attr_types}}},\n}}"


def attr_types_string(attribute_types: Iterable[ObjectAttributeType]) -> str:
    """Render ``"name": type`` pairs joined by ``,\\n`` with no trailing comma."""
    return ",\n".join(
        f"{go_quote(a.name)}: {element_type_string(a.type)}"
        for a in sorted_attribute_types(attribute_types)
    )


# Template rendering


def get_element_type(element_type: Optional[ElementType]) -> str:
    """Element type expression for generated Type/Value code."""
    if element_type is None:
        return ""
    e = element_type
    custom = e.custom_type.type if e.custom_type is not None else None
    if e.kind.is_primitive:
        return custom or _framework_type(e.kind)
    if e.kind.is_collection:
        return _collection_type(e.kind, get_element_type(e.element_type), custom)
    return _object_type(get_attr_types(e.attribute_types), custom)


def get_attr_types(attribute_types: Iterable[ObjectAttributeType]) -> str:
    return "\n".join(
        f"{go_quote(a.name)}: {get_element_type(a.type)},"
        for a in sorted_attribute_types(attribute_types)
    )


def get_element_value_type(element_type: Optional[ElementType]) -> str:
    if element_type is None:
        return ""
    if element_type.custom_type is not None:
        return element_type.custom_type.value_type
    return f"types.{element_type.kind.value}"


_ELEMENT_FROM_FUNCS = {
    ElementKind.BOOL: "types.BoolPointerValue",
    ElementKind.FLOAT64: "types.Float64PointerValue",
    ElementKind.INT64: "types.Int64PointerValue",
    ElementKind.NUMBER: "types.NumberValue",
    ElementKind.STRING: "types.StringPointerValue",
}

_ELEMENT_GO_TYPES = {
    ElementKind.BOOL: "*bool",
    ElementKind.FLOAT64: "*float64",
    ElementKind.INT64: "*int64",
    ElementKind.NUMBER: "*big.Float",
    ElementKind.STRING: "*string",
}


def _unimplemented_element(kind: ElementKind) -> UnimplementedError:
    return UnimplementedError(f"{kind.value.lower()} element type is not yet implemented")


def get_element_from_func(element_type: Optional[ElementType]) -> str:
    """
    Return the framework function building an element from an API pointer.

    Raises:
        UnimplementedError: For list, map, object and set elements
    """
    e = _require(element_type)
    if e.kind not in _ELEMENT_FROM_FUNCS:
        raise _unimplemented_element(e.kind)
    return _ELEMENT_FROM_FUNCS[e.kind]


def element_go_type(element_type: Optional[ElementType]) -> str:
    """
    Return the Go pointer type an element converts to.

    Raises:
        UnimplementedError: For list, map, object and set elements
    """
    e = _require(element_type)
    if e.kind not in _ELEMENT_GO_TYPES:
        raise _unimplemented_element(e.kind)
    return _ELEMENT_GO_TYPES[e.kind]
