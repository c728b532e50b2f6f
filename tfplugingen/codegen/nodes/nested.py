"""
Generators for nested attributes and blocks.

List, map and set nested kinds wrap a nested object container; single nested
kinds own their child attributes (and, for blocks, child blocks) directly.
Every nested kind renders the generated ``<Name>Type``/``<Name>Value`` pair for
its object, and the To/From helpers when an external type is associated.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Optional

from ...logging_config import get_logger
from ..convert import (
    CustomTypeNestedCollection,
    CustomTypeNestedObject,
    DefaultCustom,
    PlanModifiers,
    Validators,
)
from ..core.errors import NilDefinitionError, UnimplementedError
from ..core.imports import ImportSet, attr_imports
from ..core.model import LIST_VALUE_TYPE, MAP_VALUE_TYPE, SET_VALUE_TYPE
from ..core.naming import to_pascal_case
from ..core.schema import (
    AssociatedExternalType,
    AttributeDefinition,
    NodeKind,
    custom_plan_modifiers,
    custom_validators,
)
from ..languages.go.custom import (
    nested_object_fields,
    render_nested_object_type,
    render_nested_object_value,
    render_to_from_nested_object,
)
from ..languages.go.types import ToFromConversion
from .base import GeneratorAttributes, GeneratorBlocks, GeneratorNode, merge_fields

logger = get_logger(__name__)


def render_nested_custom_type_and_value(
    name: str, attributes: GeneratorAttributes, blocks: GeneratorBlocks
) -> str:
    """
    Render the object Type and Value of a nested node, then its children.

    Attributes and blocks are merged into a single field list. Only
    attributes can be plain collections, so collection types come from
    attributes alone.
    """
    logger.debug("Rendering custom type and value for %s", name)
    fields = nested_object_fields(
        name,
        attribute_types=merge_fields(attributes, blocks, "attribute_types"),
        attr_types=merge_fields(attributes, blocks, "attr_types"),
        attr_values=merge_fields(attributes, blocks, "attr_values"),
        collection_types=attributes.collection_types(),
    )
    return (
        render_nested_object_type(name, fields)
        + render_nested_object_value(name, fields)
        + attributes.custom_type_and_value()
        + blocks.custom_type_and_value()
    )


def render_nested_to_from_functions(
    name: str,
    assoc_ext_type: Optional[AssociatedExternalType],
    attributes: GeneratorAttributes,
    blocks: GeneratorBlocks,
) -> Optional[str]:
    """
    Render the To/From pair of a nested object, then recurse into children.

    Returns:
        Go source, or None when no external type is associated

    Raises:
        UnimplementedError: When a child attribute cannot be converted
    """
    if assoc_ext_type is None:
        return None
    logger.debug("Rendering To/From functions for %s", name)
    to_funcs = attributes.to_funcs()
    from_funcs = attributes.from_funcs()
    return (
        render_to_from_nested_object(name, assoc_ext_type, to_funcs, from_funcs)
        + attributes.to_from_functions()
        + blocks.to_from_functions()
    )


def _new_attributes(attributes) -> GeneratorAttributes:
    from ..registry import new_attributes

    return new_attributes(attributes)


def _new_blocks(blocks) -> GeneratorBlocks:
    from ..registry import new_blocks

    return new_blocks(blocks)


# Nested object containers


@dataclass(frozen=True)
class GeneratorNestedAttributeObject:
    """The object inside a list, map or set nested attribute."""

    header: ClassVar[str] = "NestedObject: schema.NestedAttributeObject{\n"

    attributes: GeneratorAttributes = field(default_factory=GeneratorAttributes)
    custom_type: CustomTypeNestedObject = CustomTypeNestedObject()
    associated_external_type: Optional[AssociatedExternalType] = None
    plan_modifiers: PlanModifiers = PlanModifiers("Object")
    validators: Validators = Validators("Object")

    @classmethod
    def common_fields(cls, name: str, nested_object) -> dict:
        return {
            "attributes": _new_attributes(nested_object.attributes),
            "custom_type": CustomTypeNestedObject(nested_object.custom_type, name),
            "associated_external_type": nested_object.associated_external_type,
            "plan_modifiers": PlanModifiers(
                "Object", custom_plan_modifiers(nested_object.plan_modifiers)
            ),
            "validators": Validators("Object", custom_validators(nested_object.validators)),
        }

    @classmethod
    def build(cls, name: str, nested_object) -> "GeneratorNestedAttributeObject":
        return cls(**cls.common_fields(name, nested_object))

    def get_attributes(self) -> GeneratorAttributes:
        return self.attributes

    def get_blocks(self) -> GeneratorBlocks:
        return GeneratorBlocks()

    def children_schema(self) -> str:
        # The attributes map is always present, even when empty.
        return f"{self.attributes.map_header}{self.attributes.schema()}\n}},\n"

    def schema(self) -> str:
        return (
            self.header
            + self.children_schema()
            + self.custom_type.schema()
            + self.plan_modifiers.schema()
            + self.validators.schema()
            + "},\n"
        )

    def imports(self) -> ImportSet:
        return ImportSet().union(
            self.custom_type.imports(),
            self.plan_modifiers.imports(),
            self.validators.imports(),
            self.attributes.imports(),
        )


@dataclass(frozen=True)
class GeneratorNestedBlockObject(GeneratorNestedAttributeObject):
    """The object inside a list or set nested block."""

    header: ClassVar[str] = "NestedObject: schema.NestedBlockObject{\n"

    blocks: GeneratorBlocks = field(default_factory=GeneratorBlocks)

    @classmethod
    def build(cls, name: str, nested_object) -> "GeneratorNestedBlockObject":
        return cls(
            blocks=_new_blocks(nested_object.blocks),
            **cls.common_fields(name, nested_object),
        )

    def get_blocks(self) -> GeneratorBlocks:
        return self.blocks

    def children_schema(self) -> str:
        return self.attributes.schema_map() + self.blocks.schema_map()

    def imports(self) -> ImportSet:
        return super().imports() | self.blocks.imports()


# List, map and set nested kinds


@dataclass(frozen=True)
class GeneratorNestedCollection(GeneratorNode):
    """Shared behaviour of list, map and set nested attributes and blocks."""

    collection: ClassVar[str] = ""
    value_type: ClassVar[str] = ""
    nested_object_class: ClassVar[type] = GeneratorNestedAttributeObject
    has_default: ClassVar[bool] = True

    custom_type: CustomTypeNestedCollection = CustomTypeNestedCollection()
    default: DefaultCustom = DefaultCustom()
    nested_object: GeneratorNestedAttributeObject = field(
        default_factory=GeneratorNestedAttributeObject
    )

    @classmethod
    def build(cls, name: str, definition: Optional[AttributeDefinition]):
        if definition is None:
            raise NilDefinitionError(f"{cls.type_name()} is nil")
        nested_object = cls.nested_object_class.build(name, definition.nested_object)
        facets = cls.common_facets(definition)
        # Conversion is driven by the external type of the nested object.
        facets["associated_external_type"] = nested_object.associated_external_type
        return cls(
            custom_type=CustomTypeNestedCollection(definition.custom_type),
            default=DefaultCustom(definition.default if cls.has_default else None),
            nested_object=nested_object,
            **facets,
        )

    def schema_body(self, name: str) -> str:
        return (
            self.nested_object.schema()
            + self.custom_type.schema()
            + self.facets_schema()
            + self.default.schema()
        )

    def imports(self) -> ImportSet:
        return ImportSet().union(
            self.custom_type.imports(),
            self.default.imports(),
            self.plan_modifiers.imports(),
            self.validators.imports(),
            self.nested_object.imports(),
            attr_imports(),
            self.external_type_imports(),
        )

    def model_value_type(self, name: str) -> str:
        return self.custom_type.value_type() or self.value_type

    def attr_type(self, name: str) -> str:
        return (
            f"basetypes.{self.collection}Type{{\n"
            f"ElemType: {to_pascal_case(name)}Value{{}}.Type(ctx),\n}}"
        )

    def attr_value(self, name: str) -> str:
        return f"basetypes.{self.collection}Value"

    def _unimplemented(self) -> UnimplementedError:
        return UnimplementedError(f"{self.collection.lower()} nested type is not yet implemented")

    def to(self) -> ToFromConversion:
        raise self._unimplemented()

    def from_(self) -> ToFromConversion:
        raise self._unimplemented()

    def get_attributes(self) -> GeneratorAttributes:
        return self.nested_object.get_attributes()

    def get_blocks(self) -> GeneratorBlocks:
        return self.nested_object.get_blocks()

    def custom_type_and_value(self, name: str) -> Optional[str]:
        return render_nested_custom_type_and_value(
            name, self.get_attributes(), self.get_blocks()
        )

    def to_from_functions(self, name: str) -> Optional[str]:
        return render_nested_to_from_functions(
            name, self.associated_external_type, self.get_attributes(), self.get_blocks()
        )


@dataclass(frozen=True)
class GeneratorListNestedAttribute(GeneratorNestedCollection):
    kind: ClassVar[NodeKind] = NodeKind.LIST_NESTED
    collection: ClassVar[str] = "List"
    value_type: ClassVar[str] = LIST_VALUE_TYPE


@dataclass(frozen=True)
class GeneratorMapNestedAttribute(GeneratorNestedCollection):
    kind: ClassVar[NodeKind] = NodeKind.MAP_NESTED
    collection: ClassVar[str] = "Map"
    value_type: ClassVar[str] = MAP_VALUE_TYPE


@dataclass(frozen=True)
class GeneratorSetNestedAttribute(GeneratorNestedCollection):
    kind: ClassVar[NodeKind] = NodeKind.SET_NESTED
    collection: ClassVar[str] = "Set"
    value_type: ClassVar[str] = SET_VALUE_TYPE


@dataclass(frozen=True)
class GeneratorListNestedBlock(GeneratorNestedCollection):
    kind: ClassVar[NodeKind] = NodeKind.LIST_NESTED
    is_block: ClassVar[bool] = True
    collection: ClassVar[str] = "List"
    value_type: ClassVar[str] = LIST_VALUE_TYPE
    nested_object_class: ClassVar[type] = GeneratorNestedBlockObject
    has_default: ClassVar[bool] = False


@dataclass(frozen=True)
class GeneratorSetNestedBlock(GeneratorNestedCollection):
    kind: ClassVar[NodeKind] = NodeKind.SET_NESTED
    is_block: ClassVar[bool] = True
    collection: ClassVar[str] = "Set"
    value_type: ClassVar[str] = SET_VALUE_TYPE
    nested_object_class: ClassVar[type] = GeneratorNestedBlockObject
    has_default: ClassVar[bool] = False


# Single nested kinds


@dataclass(frozen=True)
class GeneratorSingleNestedAttribute(GeneratorNode):
    kind: ClassVar[NodeKind] = NodeKind.SINGLE_NESTED

    attributes: GeneratorAttributes = field(default_factory=GeneratorAttributes)
    custom_type: CustomTypeNestedObject = CustomTypeNestedObject()
    default: DefaultCustom = DefaultCustom()

    @classmethod
    def build(cls, name: str, definition: Optional[AttributeDefinition]):
        if definition is None:
            raise NilDefinitionError(f"{cls.type_name()} is nil")
        return cls(
            attributes=_new_attributes(definition.attributes),
            custom_type=CustomTypeNestedObject(definition.custom_type, name),
            default=DefaultCustom(definition.default),
            **cls.common_facets(definition),
        )

    def children_schema(self) -> str:
        return f"{self.attributes.map_header}{self.attributes.schema()}\n}},\n"

    def schema_body(self, name: str) -> str:
        return (
            self.children_schema()
            + self.custom_type.schema()
            + self.facets_schema()
            + self.default.schema()
        )

    def imports(self) -> ImportSet:
        return ImportSet().union(
            self.custom_type.imports(),
            self.default.imports(),
            self.plan_modifiers.imports(),
            self.validators.imports(),
            self.get_attributes().imports(),
            self.get_blocks().imports(),
            attr_imports(),
            self.external_type_imports(),
        )

    def model_value_type(self, name: str) -> str:
        return self.custom_type.value_type() or f"{to_pascal_case(name)}Value"

    def attr_type(self, name: str) -> str:
        return (
            "basetypes.ObjectType{\n"
            f"AttrTypes: {to_pascal_case(name)}Value{{}}.AttributeTypes(ctx),\n}}"
        )

    def attr_value(self, name: str) -> str:
        return "basetypes.ObjectValue"

    def to(self) -> ToFromConversion:
        raise UnimplementedError("single nested type is not yet implemented")

    def from_(self) -> ToFromConversion:
        raise UnimplementedError("single nested type is not yet implemented")

    def get_attributes(self) -> GeneratorAttributes:
        return self.attributes

    def custom_type_and_value(self, name: str) -> Optional[str]:
        return render_nested_custom_type_and_value(
            name, self.get_attributes(), self.get_blocks()
        )

    def to_from_functions(self, name: str) -> Optional[str]:
        return render_nested_to_from_functions(
            name, self.associated_external_type, self.get_attributes(), self.get_blocks()
        )


@dataclass(frozen=True)
class GeneratorSingleNestedBlock(GeneratorSingleNestedAttribute):
    """A single nested block; attributes and blocks are written only when present."""

    is_block: ClassVar[bool] = True

    blocks: GeneratorBlocks = field(default_factory=GeneratorBlocks)

    @classmethod
    def build(cls, name: str, definition: Optional[AttributeDefinition]):
        if definition is None:
            raise NilDefinitionError(f"{cls.type_name()} is nil")
        return cls(
            attributes=_new_attributes(definition.attributes),
            blocks=_new_blocks(definition.blocks),
            custom_type=CustomTypeNestedObject(definition.custom_type, name),
            **cls.common_facets(definition),
        )

    def children_schema(self) -> str:
        return self.attributes.schema_map() + self.blocks.schema_map()

    def get_blocks(self) -> GeneratorBlocks:
        return self.blocks
