"""
Typed input tree for schema code generation.

These dataclasses describe attributes, blocks and their facets as they arrive
from an upstream parser. Every attribute and block definition carries a
class-level ``kind`` tag; generator nodes are looked up from that tag.
"""

from dataclasses import dataclass, field, fields, is_dataclass, replace
from enum import Enum
from typing import ClassVar, Dict, Optional, Tuple

from .imports import BASETYPES_IMPORT, Import, ImportSet


class ComputedOptionalRequired(Enum):
    """Which of computed, optional and required apply to a node."""

    COMPUTED = "computed"
    COMPUTED_OPTIONAL = "computed_optional"
    OPTIONAL = "optional"
    REQUIRED = "required"


class NodeKind(Enum):
    """Closed set of attribute and block kinds."""

    BOOL = "Bool"
    FLOAT64 = "Float64"
    INT64 = "Int64"
    NUMBER = "Number"
    STRING = "String"
    LIST = "List"
    MAP = "Map"
    SET = "Set"
    OBJECT = "Object"
    LIST_NESTED = "ListNested"
    MAP_NESTED = "MapNested"
    SET_NESTED = "SetNested"
    SINGLE_NESTED = "SingleNested"

    @property
    def is_primitive(self) -> bool:
        return self in _PRIMITIVE_KINDS

    @property
    def is_collection(self) -> bool:
        return self in (NodeKind.LIST, NodeKind.MAP, NodeKind.SET)

    @property
    def is_nested(self) -> bool:
        return self in (
            NodeKind.LIST_NESTED,
            NodeKind.MAP_NESTED,
            NodeKind.SET_NESTED,
            NodeKind.SINGLE_NESTED,
        )


_PRIMITIVE_KINDS = frozenset(
    {NodeKind.BOOL, NodeKind.FLOAT64, NodeKind.INT64, NodeKind.NUMBER, NodeKind.STRING}
)


class ElementKind(Enum):
    """Kinds an element type or object attribute type can take."""

    BOOL = "Bool"
    FLOAT64 = "Float64"
    INT64 = "Int64"
    NUMBER = "Number"
    STRING = "String"
    LIST = "List"
    MAP = "Map"
    SET = "Set"
    OBJECT = "Object"

    @property
    def is_primitive(self) -> bool:
        return self in (
            ElementKind.BOOL,
            ElementKind.FLOAT64,
            ElementKind.INT64,
            ElementKind.NUMBER,
            ElementKind.STRING,
        )

    @property
    def is_collection(self) -> bool:
        return self in (ElementKind.LIST, ElementKind.MAP, ElementKind.SET)


@dataclass(frozen=True)
class CustomType:
    """User supplied replacement for the generated framework type."""

    type: str
    value_type: str = ""
    import_: Optional[Import] = None

    def has_import(self) -> bool:
        return self.import_ is not None and bool(self.import_.path)


@dataclass(frozen=True)
class AssociatedExternalType:
    """A native API type that generated values convert to and from."""

    type: str
    import_: Optional[Import] = None

    def type_reference(self) -> str:
        """Return the type without a leading pointer marker."""
        return self.type[1:] if self.type.startswith("*") else self.type

    def to_pascal_case(self) -> str:
        """
        Join the dotted parts of the type reference in PascalCase.

        Example:
            *apisdk.Type -> ApisdkType
        """
        parts = []
        for part in self.type_reference().split("."):
            if not part:
                continue
            parts.append(part[0].upper() + part[1:])
        return "".join(parts)

    def to_camel_case(self) -> str:
        pascal = self.to_pascal_case()
        if not pascal:
            return pascal
        return pascal[0].lower() + pascal[1:]

    def imports(self) -> ImportSet:
        if self.import_ is None or not self.import_.path:
            return ImportSet()
        return ImportSet([self.import_, Import(BASETYPES_IMPORT)])


@dataclass(frozen=True)
class CustomDefinition:
    """Go source expression plus the imports it needs."""

    schema_definition: str
    imports: Tuple[Import, ...] = ()


@dataclass(frozen=True)
class Validator:
    """A validator entry; only custom validators need generated code."""

    custom: Optional[CustomDefinition] = None


@dataclass(frozen=True)
class PlanModifier:
    """A plan modifier entry; only custom plan modifiers need generated code."""

    custom: Optional[CustomDefinition] = None


@dataclass(frozen=True)
class Default:
    """Static literal or custom expression used as an attribute default."""

    static: object = None
    custom: Optional[CustomDefinition] = None


@dataclass(frozen=True)
class ObjectAttributeType:
    """A named field of an object type."""

    name: str
    type: "ElementType"


@dataclass(frozen=True)
class ElementType:
    """
    Recursive type descriptor for collection elements and object fields.

    Collections carry ``element_type``; objects carry ``attribute_types``.
    """

    kind: ElementKind
    custom_type: Optional[CustomType] = None
    element_type: Optional["ElementType"] = None
    attribute_types: Tuple[ObjectAttributeType, ...] = ()


def custom_validators(validators) -> Tuple[CustomDefinition, ...]:
    """Return the custom definitions of ``validators`` in declaration order."""
    return tuple(v.custom for v in validators or () if v is not None and v.custom)


def custom_plan_modifiers(plan_modifiers) -> Tuple[CustomDefinition, ...]:
    return tuple(
        p.custom for p in plan_modifiers or () if p is not None and p.custom
    )


# Attribute definitions


@dataclass(frozen=True)
class AttributeDefinition:
    """Facets shared by every attribute and block."""

    kind: ClassVar[NodeKind]
    is_block: ClassVar[bool] = False

    computed_optional_required: Optional[ComputedOptionalRequired] = None
    custom_type: Optional[CustomType] = None
    associated_external_type: Optional[AssociatedExternalType] = None
    deprecation_message: Optional[str] = None
    description: Optional[str] = None
    sensitive: bool = False
    validators: Tuple[Validator, ...] = ()
    plan_modifiers: Tuple[PlanModifier, ...] = ()
    default: Optional[Default] = None

    @classmethod
    def type_name(cls) -> str:
        suffix = "Block" if cls.is_block else "Attribute"
        return f"{cls.kind.value}{suffix}"


@dataclass(frozen=True)
class BoolAttribute(AttributeDefinition):
    kind: ClassVar[NodeKind] = NodeKind.BOOL


@dataclass(frozen=True)
class Float64Attribute(AttributeDefinition):
    kind: ClassVar[NodeKind] = NodeKind.FLOAT64


@dataclass(frozen=True)
class Int64Attribute(AttributeDefinition):
    kind: ClassVar[NodeKind] = NodeKind.INT64


@dataclass(frozen=True)
class NumberAttribute(AttributeDefinition):
    kind: ClassVar[NodeKind] = NodeKind.NUMBER


@dataclass(frozen=True)
class StringAttribute(AttributeDefinition):
    kind: ClassVar[NodeKind] = NodeKind.STRING


@dataclass(frozen=True)
class ListAttribute(AttributeDefinition):
    kind: ClassVar[NodeKind] = NodeKind.LIST
    element_type: Optional[ElementType] = None


@dataclass(frozen=True)
class MapAttribute(AttributeDefinition):
    kind: ClassVar[NodeKind] = NodeKind.MAP
    element_type: Optional[ElementType] = None


@dataclass(frozen=True)
class SetAttribute(AttributeDefinition):
    kind: ClassVar[NodeKind] = NodeKind.SET
    element_type: Optional[ElementType] = None


@dataclass(frozen=True)
class ObjectAttribute(AttributeDefinition):
    kind: ClassVar[NodeKind] = NodeKind.OBJECT
    attribute_types: Tuple[ObjectAttributeType, ...] = ()


@dataclass(frozen=True)
class NestedAttributeObject:
    """The object wrapped by a list, map or set nested attribute."""

    attributes: Dict[str, AttributeDefinition] = field(default_factory=dict)
    custom_type: Optional[CustomType] = None
    associated_external_type: Optional[AssociatedExternalType] = None
    plan_modifiers: Tuple[PlanModifier, ...] = ()
    validators: Tuple[Validator, ...] = ()


@dataclass(frozen=True)
class NestedBlockObject:
    """The object wrapped by a list or set nested block."""

    attributes: Dict[str, AttributeDefinition] = field(default_factory=dict)
    blocks: Dict[str, "AttributeDefinition"] = field(default_factory=dict)
    custom_type: Optional[CustomType] = None
    associated_external_type: Optional[AssociatedExternalType] = None
    plan_modifiers: Tuple[PlanModifier, ...] = ()
    validators: Tuple[Validator, ...] = ()


@dataclass(frozen=True)
class ListNestedAttribute(AttributeDefinition):
    kind: ClassVar[NodeKind] = NodeKind.LIST_NESTED
    nested_object: NestedAttributeObject = field(default_factory=NestedAttributeObject)


@dataclass(frozen=True)
class MapNestedAttribute(AttributeDefinition):
    kind: ClassVar[NodeKind] = NodeKind.MAP_NESTED
    nested_object: NestedAttributeObject = field(default_factory=NestedAttributeObject)


@dataclass(frozen=True)
class SetNestedAttribute(AttributeDefinition):
    kind: ClassVar[NodeKind] = NodeKind.SET_NESTED
    nested_object: NestedAttributeObject = field(default_factory=NestedAttributeObject)


@dataclass(frozen=True)
class SingleNestedAttribute(AttributeDefinition):
    kind: ClassVar[NodeKind] = NodeKind.SINGLE_NESTED
    attributes: Dict[str, AttributeDefinition] = field(default_factory=dict)


# Block definitions


@dataclass(frozen=True)
class ListNestedBlock(AttributeDefinition):
    kind: ClassVar[NodeKind] = NodeKind.LIST_NESTED
    is_block: ClassVar[bool] = True
    nested_object: NestedBlockObject = field(default_factory=NestedBlockObject)


@dataclass(frozen=True)
class SetNestedBlock(AttributeDefinition):
    kind: ClassVar[NodeKind] = NodeKind.SET_NESTED
    is_block: ClassVar[bool] = True
    nested_object: NestedBlockObject = field(default_factory=NestedBlockObject)


@dataclass(frozen=True)
class SingleNestedBlock(AttributeDefinition):
    kind: ClassVar[NodeKind] = NodeKind.SINGLE_NESTED
    is_block: ClassVar[bool] = True
    attributes: Dict[str, AttributeDefinition] = field(default_factory=dict)
    blocks: Dict[str, AttributeDefinition] = field(default_factory=dict)


@dataclass(frozen=True)
class SchemaDefinition:
    """Root of one resource, data source or provider schema."""

    attributes: Dict[str, AttributeDefinition] = field(default_factory=dict)
    blocks: Dict[str, AttributeDefinition] = field(default_factory=dict)
    description: Optional[str] = None
    markdown_description: Optional[str] = None
    deprecation_message: Optional[str] = None


# Resource schemas are the only ones with defaults and plan modifiers.
RESOURCE_ONLY_FACETS = {"default": None, "plan_modifiers": ()}


def without_resource_facets(definition):
    """
    Copy a definition tree with defaults and plan modifiers cleared.

    Data source and provider schemas have neither field. Children under
    ``attributes``, ``blocks`` and ``nested_object`` are cleared as well;
    anything that is not a dataclass instance is returned unchanged.
    """
    if not is_dataclass(definition) or isinstance(definition, type):
        return definition

    changes = {}
    for f in fields(definition):
        if f.name in RESOURCE_ONLY_FACETS:
            changes[f.name] = RESOURCE_ONLY_FACETS[f.name]
        elif f.name in ("attributes", "blocks"):
            children = getattr(definition, f.name) or {}
            changes[f.name] = {k: without_resource_facets(v) for k, v in children.items()}
        elif f.name == "nested_object":
            changes[f.name] = without_resource_facets(definition.nested_object)
    return replace(definition, **changes)
