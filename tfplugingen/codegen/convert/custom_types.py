"""
CustomType schema lines.

An explicit custom type always wins. Without one, a node with an associated
external type points at the generated ``<Name>Type``; nested objects always do.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.imports import ImportSet, types_imports
from ..core.naming import to_pascal_case
from ..core.schema import AssociatedExternalType, CustomType


def _custom_type_imports(custom_type: Optional[CustomType]) -> ImportSet:
    if custom_type is None:
        return types_imports()
    if custom_type.has_import():
        return ImportSet([custom_type.import_])
    return ImportSet()


def _render(custom_type: str) -> str:
    if not custom_type:
        return ""
    return f"CustomType: {custom_type},\n"


@dataclass(frozen=True)
class CustomTypePrimitive:
    custom_type: Optional[CustomType] = None
    associated_external_type: Optional[AssociatedExternalType] = None
    name: str = ""

    def imports(self) -> ImportSet:
        return _custom_type_imports(self.custom_type)

    def schema(self) -> str:
        if self.custom_type is not None:
            return _render(self.custom_type.type)
        if self.associated_external_type is not None:
            return _render(f"{to_pascal_case(self.name)}Type{{}}")
        return ""

    def value_type(self) -> str:
        if self.custom_type is not None:
            return self.custom_type.value_type
        if self.associated_external_type is not None:
            return f"{to_pascal_case(self.name)}Value"
        return ""


@dataclass(frozen=True)
class CustomTypeCollection:
    """Custom type of a list, map or set attribute."""

    custom_type: Optional[CustomType] = None
    associated_external_type: Optional[AssociatedExternalType] = None
    collection_type: str = "List"
    element_type: str = ""
    name: str = ""

    def imports(self) -> ImportSet:
        return _custom_type_imports(self.custom_type)

    def schema(self) -> str:
        if self.custom_type is not None:
            return _render(self.custom_type.type)
        if self.associated_external_type is not None:
            return _render(
                f"{to_pascal_case(self.name)}Type{{\n"
                f"types.{self.collection_type}Type{{\n"
                f"ElemType: {self.element_type},\n}},\n}}"
            )
        return ""

    def value_type(self) -> str:
        if self.custom_type is not None:
            return self.custom_type.value_type
        if self.associated_external_type is not None:
            return f"{to_pascal_case(self.name)}Value"
        return ""


@dataclass(frozen=True)
class CustomTypeObject:
    custom_type: Optional[CustomType] = None
    associated_external_type: Optional[AssociatedExternalType] = None
    name: str = ""

    def imports(self) -> ImportSet:
        return _custom_type_imports(self.custom_type)

    def schema(self) -> str:
        if self.custom_type is not None:
            return _render(self.custom_type.type)
        if self.associated_external_type is not None:
            pascal = to_pascal_case(self.name)
            return _render(
                f"{pascal}Type{{\ntypes.ObjectType{{\n"
                f"AttrTypes: {pascal}Value{{}}.AttributeTypes(ctx),\n}},\n}}"
            )
        return ""

    def value_type(self) -> str:
        if self.custom_type is not None:
            return self.custom_type.value_type
        if self.associated_external_type is not None:
            return f"{to_pascal_case(self.name)}Value"
        return ""


@dataclass(frozen=True)
class CustomTypeNestedObject:
    """Custom type of a nested object; the generated type is the fallback."""

    custom_type: Optional[CustomType] = None
    name: str = ""

    def imports(self) -> ImportSet:
        return _custom_type_imports(self.custom_type)

    def schema(self) -> str:
        if self.custom_type is not None:
            return _render(self.custom_type.type)
        pascal = to_pascal_case(self.name)
        return _render(
            f"{pascal}Type{{\nObjectType: types.ObjectType{{\n"
            f"AttrTypes: {pascal}Value{{}}.AttributeTypes(ctx),\n}},\n}}"
        )

    def value_type(self) -> str:
        if self.custom_type is not None:
            return self.custom_type.value_type
        return ""


@dataclass(frozen=True)
class CustomTypeNestedCollection:
    custom_type: Optional[CustomType] = None

    def imports(self) -> ImportSet:
        return _custom_type_imports(self.custom_type)

    def schema(self) -> str:
        if self.custom_type is not None:
            return _render(self.custom_type.type)
        return ""

    def value_type(self) -> str:
        if self.custom_type is not None:
            return self.custom_type.value_type
        return ""
