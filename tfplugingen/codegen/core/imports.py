"""
Go import bookkeeping.

An ``ImportSet`` is an immutable, ordered collection of imports keyed by
path. Nodes build their imports by unioning sets; the first occurrence of a
path fixes both its position and its alias.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

FRAMEWORK = "github.com/hashicorp/terraform-plugin-framework"

CONTEXT_IMPORT = "context"
FMT_IMPORT = "fmt"
STRINGS_IMPORT = "strings"

TYPES_IMPORT = f"{FRAMEWORK}/types"
BASETYPES_IMPORT = f"{FRAMEWORK}/types/basetypes"
ATTR_IMPORT = f"{FRAMEWORK}/attr"
DIAG_IMPORT = f"{FRAMEWORK}/diag"
VALIDATOR_IMPORT = f"{FRAMEWORK}/schema/validator"
PLANMODIFIER_IMPORT = f"{FRAMEWORK}/resource/schema/planmodifier"
TFTYPES_IMPORT = "github.com/hashicorp/terraform-plugin-go/tftypes"

BOOL_DEFAULT_IMPORT = f"{FRAMEWORK}/resource/schema/booldefault"
FLOAT64_DEFAULT_IMPORT = f"{FRAMEWORK}/resource/schema/float64default"
INT64_DEFAULT_IMPORT = f"{FRAMEWORK}/resource/schema/int64default"
STRING_DEFAULT_IMPORT = f"{FRAMEWORK}/resource/schema/stringdefault"

SCHEMA_IMPORTS = {
    "resource": f"{FRAMEWORK}/resource/schema",
    "data_source": f"{FRAMEWORK}/datasource/schema",
    "provider": f"{FRAMEWORK}/provider/schema",
}


@dataclass(frozen=True)
class Import:
    """A single Go import, optionally aliased."""

    path: str
    alias: Optional[str] = None

    def render(self) -> str:
        if self.alias:
            return f'{self.alias} "{self.path}"'
        return f'"{self.path}"'


class ImportSet:
    """Immutable ordered set of imports, unique by path."""

    __slots__ = ("_imports",)

    def __init__(self, imports: Iterable[Import] = ()):
        ordered = {}
        for imp in imports:
            if imp is None or not imp.path:
                continue
            ordered.setdefault(imp.path, imp)
        self._imports: Tuple[Import, ...] = tuple(ordered.values())

    @classmethod
    def of(cls, *paths: str) -> "ImportSet":
        """Build a set from plain import paths."""
        return cls(Import(path) for path in paths)

    def union(self, *others: "ImportSet") -> "ImportSet":
        imports = list(self._imports)
        for other in others:
            imports.extend(other._imports)
        return ImportSet(imports)

    def __or__(self, other: "ImportSet") -> "ImportSet":
        if not isinstance(other, ImportSet):
            return NotImplemented
        return self.union(other)

    def all(self) -> Tuple[Import, ...]:
        return self._imports

    def paths(self) -> Tuple[str, ...]:
        return tuple(imp.path for imp in self._imports)

    def render(self) -> str:
        """Render the set as the body of a Go import block."""
        return "".join(f"{imp.render()}\n" for imp in self._imports)

    def __iter__(self) -> Iterator[Import]:
        return iter(self._imports)

    def __len__(self) -> int:
        return len(self._imports)

    def __bool__(self) -> bool:
        return bool(self._imports)

    def __contains__(self, item) -> bool:
        if isinstance(item, Import):
            item = item.path
        return any(imp.path == item for imp in self._imports)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ImportSet):
            return NotImplemented
        return self._imports == other._imports

    def __hash__(self) -> int:
        return hash(self._imports)

    def __repr__(self) -> str:
        return f"ImportSet({list(self.paths())!r})"


def types_imports() -> ImportSet:
    return ImportSet.of(TYPES_IMPORT)


def attr_imports() -> ImportSet:
    return ImportSet.of(ATTR_IMPORT)


def associated_external_type_imports() -> ImportSet:
    """Imports needed by the custom Type/Value and To/From code of a node."""
    return ImportSet.of(
        BASETYPES_IMPORT, ATTR_IMPORT, TFTYPES_IMPORT, DIAG_IMPORT, FMT_IMPORT
    )


def nested_object_imports() -> ImportSet:
    """Imports needed by generated nested object Type/Value code."""
    return ImportSet.of(
        FMT_IMPORT,
        STRINGS_IMPORT,
        DIAG_IMPORT,
        ATTR_IMPORT,
        TFTYPES_IMPORT,
        BASETYPES_IMPORT,
    )
