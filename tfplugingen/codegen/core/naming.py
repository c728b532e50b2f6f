"""
Naming utilities for Terraform Plugin Framework identifiers.

Attribute and block names are snake_case identifiers; generated Go code
needs PascalCase and camelCase variants of them.
"""

import re
from enum import Enum

from ..languages.go.naming import GENERATED_METHOD_NAMES

# Same naming rules the framework enforces for attribute names.
_VALID_IDENTIFIER = re.compile(r"^[a-z_][a-z0-9_]*$")

# First letter, or an underscore followed by a letter or digit.
_SNAKE_LETTERS = re.compile(r"(^[a-z])|_[a-z0-9]")


class NamingCase(Enum):
    """Case styles produced from an identifier."""

    SNAKE_CASE = "snake"  # example_thing
    CAMEL_CASE = "camel"  # exampleThing
    PASCAL_CASE = "pascal"  # ExampleThing


def _lower_first(value: str) -> str:
    if not value:
        return value
    return value[0].lower() + value[1:]


class FrameworkIdentifier(str):
    """An attribute or block name with case conversion helpers."""

    def valid(self) -> bool:
        """Return whether the identifier is a valid framework attribute name."""
        return _VALID_IDENTIFIER.match(self) is not None

    def to_pascal_case(self) -> str:
        """
        Convert to PascalCase.

        Example:
            example_resource_thing -> ExampleResourceThing
        """
        return _SNAKE_LETTERS.sub(
            lambda m: m.group(0).replace("_", "").upper(), str(self)
        )

    def to_camel_case(self) -> str:
        """
        Convert to camelCase.

        Example:
            example_resource_thing -> exampleResourceThing
        """
        return _lower_first(self.to_pascal_case())

    def to_prefix_pascal_case(self, prefix: str) -> str:
        """
        Convert to PascalCase, prefixing names that collide with generated methods.

        A field named ``type`` on a value struct would shadow its ``Type``
        method, so it becomes ``<Prefix>Type`` instead.
        """
        pascal = self.to_pascal_case()
        if pascal in GENERATED_METHOD_NAMES:
            return FrameworkIdentifier(prefix).to_pascal_case() + pascal
        return pascal

    def to_case(self, case: NamingCase) -> str:
        if case == NamingCase.PASCAL_CASE:
            return self.to_pascal_case()
        if case == NamingCase.CAMEL_CASE:
            return self.to_camel_case()
        return str(self)


def to_pascal_case(name: str) -> str:
    return FrameworkIdentifier(name).to_pascal_case()


def to_camel_case(name: str) -> str:
    return FrameworkIdentifier(name).to_camel_case()


def to_prefix_pascal_case(name: str, prefix: str) -> str:
    return FrameworkIdentifier(name).to_prefix_pascal_case(prefix)


def is_valid_identifier(name: str) -> bool:
    return FrameworkIdentifier(name).valid()


def lower_first(value: str) -> str:
    """Lower-case the first character, leaving the rest untouched."""
    return _lower_first(value)
