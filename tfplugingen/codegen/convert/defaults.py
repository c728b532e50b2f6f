"""
Default value schema lines.

Bool, Float64, Int64 and String nodes accept a static literal or a custom
expression. Every other kind only accepts a custom expression.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.imports import (
    BOOL_DEFAULT_IMPORT,
    FLOAT64_DEFAULT_IMPORT,
    INT64_DEFAULT_IMPORT,
    STRING_DEFAULT_IMPORT,
    ImportSet,
)
from ..core.schema import Default
from ..languages.go.literals import go_float, go_quote


def _custom_imports(default: Optional[Default]) -> ImportSet:
    if default is None or default.custom is None:
        return ImportSet()
    return ImportSet(default.custom.imports)


def _custom_schema(default: Optional[Default]) -> str:
    if default is None or default.custom is None:
        return ""
    if not default.custom.schema_definition:
        return ""
    return f"Default: {default.custom.schema_definition},\n"


@dataclass(frozen=True)
class DefaultCustom:
    default: Optional[Default] = None

    def imports(self) -> ImportSet:
        return _custom_imports(self.default)

    def schema(self) -> str:
        return _custom_schema(self.default)


@dataclass(frozen=True)
class _StaticDefault:
    default: Optional[Default] = None

    import_path = ""

    def imports(self) -> ImportSet:
        if self.default is None:
            return ImportSet()
        imports = ImportSet()
        if self.default.static is not None:
            imports = ImportSet.of(self.import_path)
        return imports | _custom_imports(self.default)

    def schema(self) -> str:
        if self.default is None:
            return ""
        if self.default.static is not None:
            return f"Default: {self.static_call(self.default.static)},\n"
        return _custom_schema(self.default)

    def static_call(self, value) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class DefaultBool(_StaticDefault):
    import_path = BOOL_DEFAULT_IMPORT

    def static_call(self, value) -> str:
        return f"booldefault.StaticBool({'true' if value else 'false'})"


@dataclass(frozen=True)
class DefaultFloat64(_StaticDefault):
    import_path = FLOAT64_DEFAULT_IMPORT

    def static_call(self, value) -> str:
        return f"float64default.StaticFloat64({go_float(value)})"


@dataclass(frozen=True)
class DefaultInt64(_StaticDefault):
    import_path = INT64_DEFAULT_IMPORT

    def static_call(self, value) -> str:
        return f"int64default.StaticInt64({int(value)})"


@dataclass(frozen=True)
class DefaultString(_StaticDefault):
    import_path = STRING_DEFAULT_IMPORT

    def static_call(self, value) -> str:
        return f"stringdefault.StaticString({go_quote(str(value))})"
