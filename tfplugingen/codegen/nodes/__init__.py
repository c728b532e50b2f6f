"""
Generator nodes for attributes and blocks.

One generator class exists per attribute kind and per block kind.
"""

from .base import GeneratorAttributes, GeneratorBlocks, GeneratorNode
from .collection import GeneratorListAttribute, GeneratorMapAttribute, GeneratorSetAttribute
from .nested import (
    GeneratorListNestedAttribute,
    GeneratorListNestedBlock,
    GeneratorMapNestedAttribute,
    GeneratorSetNestedAttribute,
    GeneratorSetNestedBlock,
    GeneratorSingleNestedAttribute,
    GeneratorSingleNestedBlock,
)
from .objects import GeneratorObjectAttribute
from .primitives import (
    GeneratorBoolAttribute,
    GeneratorFloat64Attribute,
    GeneratorInt64Attribute,
    GeneratorNumberAttribute,
    GeneratorStringAttribute,
)

ALL_GENERATORS = (
    GeneratorBoolAttribute,
    GeneratorFloat64Attribute,
    GeneratorInt64Attribute,
    GeneratorNumberAttribute,
    GeneratorStringAttribute,
    GeneratorListAttribute,
    GeneratorMapAttribute,
    GeneratorSetAttribute,
    GeneratorObjectAttribute,
    GeneratorListNestedAttribute,
    GeneratorMapNestedAttribute,
    GeneratorSetNestedAttribute,
    GeneratorSingleNestedAttribute,
    GeneratorListNestedBlock,
    GeneratorSetNestedBlock,
    GeneratorSingleNestedBlock,
)

__all__ = [
    "ALL_GENERATORS",
    "GeneratorAttributes",
    "GeneratorBlocks",
    "GeneratorBoolAttribute",
    "GeneratorFloat64Attribute",
    "GeneratorInt64Attribute",
    "GeneratorListAttribute",
    "GeneratorListNestedAttribute",
    "GeneratorListNestedBlock",
    "GeneratorMapAttribute",
    "GeneratorMapNestedAttribute",
    "GeneratorNode",
    "GeneratorNumberAttribute",
    "GeneratorObjectAttribute",
    "GeneratorSetAttribute",
    "GeneratorSetNestedAttribute",
    "GeneratorSetNestedBlock",
    "GeneratorSingleNestedAttribute",
    "GeneratorSingleNestedBlock",
    "GeneratorStringAttribute",
]
