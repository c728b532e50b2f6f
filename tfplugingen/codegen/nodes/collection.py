"""
Generators for list, map and set attributes.

A collection carries a single element type descriptor. The element type is
written to the schema only when no custom type replaces the whole attribute.
"""

from dataclasses import dataclass
from typing import ClassVar, Dict, Optional

from ..convert import (
    CustomTypeCollection,
    DefaultCustom,
    ElementTypeCollection,
    element_type_string,
)
from ..convert.element_types import (
    element_go_type,
    get_element_from_func,
    get_element_type,
    get_element_value_type,
)
from ..core.errors import NilDefinitionError
from ..core.imports import ImportSet
from ..core.model import LIST_VALUE_TYPE, MAP_VALUE_TYPE, SET_VALUE_TYPE
from ..core.naming import to_pascal_case
from ..core.schema import AttributeDefinition, ElementType, NodeKind
from ..languages.go.custom import render_custom_type_value, render_to_from_collection
from ..languages.go.types import (
    CollectionFields,
    ToFromConversion,
    associated_external_type_conversion,
)
from .base import GeneratorNode


@dataclass(frozen=True)
class GeneratorCollectionAttribute(GeneratorNode):
    value_type: ClassVar[str] = ""
    go_type_prefix: ClassVar[str] = "[]"

    custom_type: CustomTypeCollection = CustomTypeCollection()
    default: DefaultCustom = DefaultCustom()
    element_type: Optional[ElementType] = None
    element_type_collection: ElementTypeCollection = ElementTypeCollection()

    @classmethod
    def build(cls, name: str, definition: Optional[AttributeDefinition]):
        if definition is None:
            raise NilDefinitionError(f"{cls.type_name()} is nil")
        element_type_collection = ElementTypeCollection(definition.element_type)
        return cls(
            custom_type=CustomTypeCollection(
                definition.custom_type,
                definition.associated_external_type,
                cls.kind.value,
                element_type_collection.element_type_expression(),
                name,
            ),
            default=DefaultCustom(definition.default),
            element_type=definition.element_type,
            element_type_collection=element_type_collection,
            **cls.common_facets(definition),
        )

    def schema_body(self, name: str) -> str:
        custom_type = self.custom_type.schema()
        if not custom_type:
            custom_type = self.element_type_collection.schema()
        return custom_type + self.facets_schema() + self.default.schema()

    def imports(self) -> ImportSet:
        return ImportSet().union(
            self.custom_type.imports(),
            self.element_type_collection.imports(),
            self.default.imports(),
            self.plan_modifiers.imports(),
            self.validators.imports(),
            self.external_type_imports(),
        )

    def model_value_type(self, name: str) -> str:
        return self.custom_type.value_type() or self.value_type

    def attr_type(self, name: str) -> str:
        elem_type = element_type_string(self.element_type)
        base = f"basetypes.{self.kind.value}Type{{\nElemType: {elem_type},\n}}"
        if self.associated_external_type is not None:
            return f"{to_pascal_case(name)}Type{{\n{base}}}"
        return base

    def attr_value(self, name: str) -> str:
        if self.associated_external_type is not None:
            return f"{to_pascal_case(name)}Value"
        return f"basetypes.{self.kind.value}Value"

    def collection_type(self) -> Optional[Dict[str, str]]:
        """Element type and value constructor, used only without an external type."""
        if self.associated_external_type is not None:
            return None
        return {
            "element_type": element_type_string(self.element_type),
            "type_value_func": f"types.{self.kind.value}Value",
        }

    def to(self) -> ToFromConversion:
        if self.associated_external_type is not None:
            return associated_external_type_conversion(self.associated_external_type)
        go_type = f"{self.go_type_prefix}{element_go_type(self.element_type)}"
        return ToFromConversion(collection_type=CollectionFields(go_type=go_type))

    def from_(self) -> ToFromConversion:
        if self.associated_external_type is not None:
            return associated_external_type_conversion(self.associated_external_type)
        return ToFromConversion(
            collection_type=CollectionFields(
                element_type=element_type_string(self.element_type),
                type_value_from=f"types.{self.kind.value}ValueFrom",
            )
        )

    def custom_type_and_value(self, name: str) -> Optional[str]:
        if self.associated_external_type is None:
            return None
        return render_custom_type_value(
            name, self.kind.value, elem_type=get_element_type(self.element_type)
        )

    def to_from_functions(self, name: str) -> Optional[str]:
        if self.associated_external_type is None:
            return None
        elem_from = get_element_from_func(self.element_type)
        return render_to_from_collection(
            name,
            self.kind.value,
            self.associated_external_type,
            elem_type=get_element_type(self.element_type),
            elem_value_type=get_element_value_type(self.element_type),
            elem_from=elem_from,
        )


@dataclass(frozen=True)
class GeneratorListAttribute(GeneratorCollectionAttribute):
    kind: ClassVar[NodeKind] = NodeKind.LIST
    value_type: ClassVar[str] = LIST_VALUE_TYPE


@dataclass(frozen=True)
class GeneratorMapAttribute(GeneratorCollectionAttribute):
    kind: ClassVar[NodeKind] = NodeKind.MAP
    value_type: ClassVar[str] = MAP_VALUE_TYPE
    go_type_prefix: ClassVar[str] = "map[string]"


@dataclass(frozen=True)
class GeneratorSetAttribute(GeneratorCollectionAttribute):
    kind: ClassVar[NodeKind] = NodeKind.SET
    value_type: ClassVar[str] = SET_VALUE_TYPE
