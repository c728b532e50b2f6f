"""
Conversion plans for To/From helper generation.

A node's ``to()`` and ``from_()`` describe how one field of a nested object
moves between the framework value and the associated external API type.
Exactly one strategy is set on a plan: delegation to the field's own
external type, a default framework accessor, a collection conversion, or a
field-by-field object conversion.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from ...core.errors import GeneratorError, UnimplementedError
from ...core.schema import AssociatedExternalType, ElementKind, ObjectAttributeType


class ConversionStrategy:
    """Names of the conversion strategies, used by templates."""

    ASSOCIATED_EXTERNAL_TYPE = "associated_external_type"
    DEFAULT = "default"
    COLLECTION = "collection"
    OBJECT = "object"


@dataclass(frozen=True)
class CollectionFields:
    """Go type and element helpers for a list, map or set field."""

    go_type: str = ""
    element_type: str = ""
    type_value_from: str = ""


@dataclass(frozen=True)
class ObjectField:
    """Conversion details of one object attribute field."""

    go_type: str = ""
    type: str = ""
    to_func: str = ""
    from_func: str = ""


@dataclass(frozen=True)
class ToFromConversion:
    assoc_ext_type: Optional[AssociatedExternalType] = None
    default: str = ""
    collection_type: Optional[CollectionFields] = None
    object_type: Dict[str, ObjectField] = field(default_factory=dict)

    @property
    def strategy(self) -> str:
        if self.assoc_ext_type is not None:
            return ConversionStrategy.ASSOCIATED_EXTERNAL_TYPE
        if self.collection_type is not None:
            return ConversionStrategy.COLLECTION
        if self.default:
            return ConversionStrategy.DEFAULT
        return ConversionStrategy.OBJECT

    def sorted_object_fields(self):
        return sorted(self.object_type.items())

    def __hash__(self) -> int:
        return hash(
            (
                self.assoc_ext_type,
                self.default,
                self.collection_type,
                tuple(sorted(self.object_type.items())),
            )
        )


def associated_external_type_conversion(
    assoc_ext_type: AssociatedExternalType,
) -> ToFromConversion:
    return ToFromConversion(assoc_ext_type=assoc_ext_type)


_OBJECT_FIELDS_TO = {
    ElementKind.BOOL: ObjectField("*bool", "types.Bool", to_func="ValueBoolPointer"),
    ElementKind.FLOAT64: ObjectField(
        "*float64", "types.Float64", to_func="ValueFloat64Pointer"
    ),
    ElementKind.INT64: ObjectField("*int64", "types.Int64", to_func="ValueInt64Pointer"),
    ElementKind.NUMBER: ObjectField("*big.Float", "types.Number", to_func="ValueBigFloat"),
    ElementKind.STRING: ObjectField(
        "*string", "types.String", to_func="ValueStringPointer"
    ),
}

_OBJECT_FIELDS_FROM = {
    ElementKind.BOOL: ObjectField(type="types.BoolType", from_func="BoolPointerValue"),
    ElementKind.FLOAT64: ObjectField(
        type="types.Float64Type", from_func="Float64PointerValue"
    ),
    ElementKind.INT64: ObjectField(type="types.Int64Type", from_func="Int64PointerValue"),
    ElementKind.NUMBER: ObjectField(type="types.NumberType", from_func="NumberValue"),
    ElementKind.STRING: ObjectField(
        type="types.StringType", from_func="StringPointerValue"
    ),
}


def _object_field(table: Dict[ElementKind, ObjectField], attr: ObjectAttributeType) -> ObjectField:
    kind = getattr(attr.type, "kind", None)
    if kind in table:
        return table[kind]
    if isinstance(kind, ElementKind):
        raise UnimplementedError(f"{kind.value.lower()} attribute type is not yet implemented")
    raise GeneratorError("no matching object attribute type found")


def object_field_to(attr: ObjectAttributeType) -> ObjectField:
    """
    Describe how an object field converts to its API Go type.

    Raises:
        UnimplementedError: For list, map, object and set fields
        GeneratorError: For an unrecognised field type
    """
    return _object_field(_OBJECT_FIELDS_TO, attr)


def object_field_from(attr: ObjectAttributeType) -> ObjectField:
    return _object_field(_OBJECT_FIELDS_FROM, attr)


def object_fields_to(attribute_types: Iterable[ObjectAttributeType]) -> Dict[str, ObjectField]:
    return {a.name: object_field_to(a) for a in attribute_types}


def object_fields_from(attribute_types: Iterable[ObjectAttributeType]) -> Dict[str, ObjectField]:
    return {a.name: object_field_from(a) for a in attribute_types}
