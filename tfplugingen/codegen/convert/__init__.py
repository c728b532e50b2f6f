"""
Schema facet converters.

Each converter wraps one facet of an attribute or block and knows how to
render its schema line and which imports that line requires.
"""

from .custom_types import (
    CustomTypeCollection,
    CustomTypeNestedCollection,
    CustomTypeNestedObject,
    CustomTypeObject,
    CustomTypePrimitive,
)
from .defaults import DefaultBool, DefaultCustom, DefaultFloat64, DefaultInt64, DefaultString
from .element_types import ElementTypeCollection, ObjectAttributeTypes, element_type_string
from .facets import ComputedOptionalRequiredFlags, DeprecationMessage, Description, Sensitive
from .validators import PlanModifiers, Validators

__all__ = [
    "ComputedOptionalRequiredFlags",
    "CustomTypeCollection",
    "CustomTypeNestedCollection",
    "CustomTypeNestedObject",
    "CustomTypeObject",
    "CustomTypePrimitive",
    "DefaultBool",
    "DefaultCustom",
    "DefaultFloat64",
    "DefaultInt64",
    "DefaultString",
    "DeprecationMessage",
    "Description",
    "ElementTypeCollection",
    "ObjectAttributeTypes",
    "PlanModifiers",
    "Sensitive",
    "Validators",
    "element_type_string",
]
