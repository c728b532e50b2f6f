"""
Generator for object attributes.

An object attribute holds named sub-types rather than child nodes, so it has
no attributes of its own to recurse into.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from ..convert import CustomTypeObject, DefaultCustom, ObjectAttributeTypes
from ..convert.element_types import attr_types_string, get_attr_types
from ..core.errors import NilDefinitionError
from ..core.imports import ImportSet
from ..core.model import OBJECT_VALUE_TYPE
from ..core.naming import to_pascal_case
from ..core.schema import AttributeDefinition, NodeKind, ObjectAttributeType
from ..languages.go.custom import render_custom_type_value, render_to_from_object
from ..languages.go.types import (
    ToFromConversion,
    associated_external_type_conversion,
    object_fields_from,
    object_fields_to,
)
from .base import GeneratorNode


@dataclass(frozen=True)
class GeneratorObjectAttribute(GeneratorNode):
    kind: ClassVar[NodeKind] = NodeKind.OBJECT

    custom_type: CustomTypeObject = CustomTypeObject()
    default: DefaultCustom = DefaultCustom()
    attribute_types: Tuple[ObjectAttributeType, ...] = ()
    object_attribute_types: ObjectAttributeTypes = ObjectAttributeTypes()

    @classmethod
    def build(cls, name: str, definition: Optional[AttributeDefinition]):
        if definition is None:
            raise NilDefinitionError(f"{cls.type_name()} is nil")
        attribute_types = tuple(definition.attribute_types or ())
        return cls(
            custom_type=CustomTypeObject(
                definition.custom_type, definition.associated_external_type, name
            ),
            default=DefaultCustom(definition.default),
            attribute_types=attribute_types,
            object_attribute_types=ObjectAttributeTypes(attribute_types),
            **cls.common_facets(definition),
        )

    def schema_body(self, name: str) -> str:
        custom_type = self.custom_type.schema()
        if not custom_type:
            custom_type = self.object_attribute_types.schema()
        return custom_type + self.facets_schema() + self.default.schema()

    def imports(self) -> ImportSet:
        return ImportSet().union(
            self.custom_type.imports(),
            self.object_attribute_types.imports(),
            self.default.imports(),
            self.plan_modifiers.imports(),
            self.validators.imports(),
            self.external_type_imports(),
        )

    def model_value_type(self, name: str) -> str:
        return self.custom_type.value_type() or OBJECT_VALUE_TYPE

    def attr_type(self, name: str) -> str:
        if self.associated_external_type is not None:
            pascal = to_pascal_case(name)
            return (
                f"{pascal}Type{{\nbasetypes.ObjectType{{\n"
                f"AttrTypes: {pascal}Value{{}}.AttributeTypes(ctx),\n}}}}"
            )
        attr_types = attr_types_string(self.attribute_types)
        if attr_types:
            attr_types += ",\n"
        return f"basetypes.ObjectType{{\nAttrTypes: map[string]attr.Type{{\n{attr_types}}},\n}}"

    def attr_value(self, name: str) -> str:
        if self.associated_external_type is not None:
            return f"{to_pascal_case(name)}Value"
        return "basetypes.ObjectValue"

    def to(self) -> ToFromConversion:
        """
        Plan the conversion of this object to its API counterpart.

        Raises:
            UnimplementedError: When a sub-type is a list, map, object or set
        """
        if self.associated_external_type is not None:
            return associated_external_type_conversion(self.associated_external_type)
        return ToFromConversion(object_type=object_fields_to(self.attribute_types))

    def from_(self) -> ToFromConversion:
        if self.associated_external_type is not None:
            return associated_external_type_conversion(self.associated_external_type)
        return ToFromConversion(object_type=object_fields_from(self.attribute_types))

    def custom_type_and_value(self, name: str) -> Optional[str]:
        if self.associated_external_type is None:
            return None
        return render_custom_type_value(
            name,
            "Object",
            attr_types=get_attr_types(self.attribute_types),
            is_object=True,
        )

    def to_from_functions(self, name: str) -> Optional[str]:
        if self.associated_external_type is None:
            return None
        # Validates every field converts in both directions before rendering.
        object_fields_to(self.attribute_types)
        from_fields = object_fields_from(self.attribute_types)
        return render_to_from_object(name, self.associated_external_type, from_fields)
