"""
Generators for bool, float64, int64, number and string attributes.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from ..convert import (
    CustomTypePrimitive,
    DefaultBool,
    DefaultCustom,
    DefaultFloat64,
    DefaultInt64,
    DefaultString,
)
from ..core.errors import NilDefinitionError
from ..core.imports import ImportSet
from ..core.model import (
    BOOL_VALUE_TYPE,
    FLOAT64_VALUE_TYPE,
    INT64_VALUE_TYPE,
    NUMBER_VALUE_TYPE,
    STRING_VALUE_TYPE,
)
from ..core.naming import to_pascal_case
from ..core.schema import AttributeDefinition, NodeKind
from ..languages.go.custom import render_custom_type_value, render_to_from_primitive
from ..languages.go.types import ToFromConversion, associated_external_type_conversion
from .base import GeneratorNode


@dataclass(frozen=True)
class GeneratorPrimitiveAttribute(GeneratorNode):
    """A scalar attribute with an optional static or custom default."""

    default_class: ClassVar[type] = DefaultCustom
    value_type: ClassVar[str] = ""
    # Framework accessor and constructor used by the default conversion.
    to_func: ClassVar[str] = ""
    from_func: ClassVar[str] = ""

    custom_type: CustomTypePrimitive = CustomTypePrimitive()
    default: object = DefaultCustom()

    @classmethod
    def build(cls, name: str, definition: Optional[AttributeDefinition]):
        if definition is None:
            raise NilDefinitionError(f"{cls.type_name()} is nil")
        return cls(
            custom_type=CustomTypePrimitive(
                definition.custom_type, definition.associated_external_type, name
            ),
            default=cls.default_class(definition.default),
            **cls.common_facets(definition),
        )

    def schema_body(self, name: str) -> str:
        return self.custom_type.schema() + self.facets_schema() + self.default.schema()

    def imports(self) -> ImportSet:
        return ImportSet().union(
            self.custom_type.imports(),
            self.default.imports(),
            self.plan_modifiers.imports(),
            self.validators.imports(),
            self.external_type_imports(),
        )

    def model_value_type(self, name: str) -> str:
        return self.custom_type.value_type() or self.value_type

    def attr_type(self, name: str) -> str:
        if self.associated_external_type is not None:
            return f"{to_pascal_case(name)}Type{{}}"
        return f"basetypes.{self.kind.value}Type{{}}"

    def attr_value(self, name: str) -> str:
        if self.associated_external_type is not None:
            return f"{to_pascal_case(name)}Value"
        return f"basetypes.{self.kind.value}Value"

    def to(self) -> ToFromConversion:
        if self.associated_external_type is not None:
            return associated_external_type_conversion(self.associated_external_type)
        return ToFromConversion(default=self.to_func)

    def from_(self) -> ToFromConversion:
        if self.associated_external_type is not None:
            return associated_external_type_conversion(self.associated_external_type)
        return ToFromConversion(default=self.from_func)

    def custom_type_and_value(self, name: str) -> Optional[str]:
        if self.associated_external_type is None:
            return None
        return render_custom_type_value(name, self.kind.value)

    def to_from_functions(self, name: str) -> Optional[str]:
        if self.associated_external_type is None:
            return None
        return render_to_from_primitive(
            name,
            self.kind.value,
            self.associated_external_type,
            to_func=self.to_func,
            from_func=f"types.{self.from_func}",
        )


@dataclass(frozen=True)
class GeneratorBoolAttribute(GeneratorPrimitiveAttribute):
    kind: ClassVar[NodeKind] = NodeKind.BOOL
    default_class: ClassVar[type] = DefaultBool
    value_type: ClassVar[str] = BOOL_VALUE_TYPE
    to_func: ClassVar[str] = "ValueBoolPointer"
    from_func: ClassVar[str] = "BoolPointerValue"


@dataclass(frozen=True)
class GeneratorFloat64Attribute(GeneratorPrimitiveAttribute):
    kind: ClassVar[NodeKind] = NodeKind.FLOAT64
    default_class: ClassVar[type] = DefaultFloat64
    value_type: ClassVar[str] = FLOAT64_VALUE_TYPE
    to_func: ClassVar[str] = "ValueFloat64Pointer"
    from_func: ClassVar[str] = "Float64PointerValue"


@dataclass(frozen=True)
class GeneratorInt64Attribute(GeneratorPrimitiveAttribute):
    kind: ClassVar[NodeKind] = NodeKind.INT64
    default_class: ClassVar[type] = DefaultInt64
    value_type: ClassVar[str] = INT64_VALUE_TYPE
    to_func: ClassVar[str] = "ValueInt64Pointer"
    from_func: ClassVar[str] = "Int64PointerValue"


@dataclass(frozen=True)
class GeneratorNumberAttribute(GeneratorPrimitiveAttribute):
    """Numbers have no static default and convert through ``*big.Float``."""

    kind: ClassVar[NodeKind] = NodeKind.NUMBER
    value_type: ClassVar[str] = NUMBER_VALUE_TYPE
    to_func: ClassVar[str] = "ValueBigFloat"
    from_func: ClassVar[str] = "NumberValue"


@dataclass(frozen=True)
class GeneratorStringAttribute(GeneratorPrimitiveAttribute):
    kind: ClassVar[NodeKind] = NodeKind.STRING
    default_class: ClassVar[type] = DefaultString
    value_type: ClassVar[str] = STRING_VALUE_TYPE
    to_func: ClassVar[str] = "ValueStringPointer"
    from_func: ClassVar[str] = "StringPointerValue"
