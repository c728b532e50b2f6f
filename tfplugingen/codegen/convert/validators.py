"""
Custom validator and plan modifier lists.

Entries keep declaration order; entries with no schema definition are
skipped, and nothing is rendered when no entries remain.
"""

from dataclasses import dataclass
from typing import Tuple

from ..core.imports import PLANMODIFIER_IMPORT, VALIDATOR_IMPORT, Import, ImportSet
from ..core.schema import CustomDefinition


@dataclass(frozen=True)
class _CustomList:
    type_name: str
    custom: Tuple[CustomDefinition, ...] = ()

    field_name = ""
    package = ""
    package_import = ""

    def imports(self) -> ImportSet:
        imports = []
        for definition in self.custom:
            for imp in definition.imports:
                if imp.path:
                    imports.append(Import(self.package_import))
                    imports.append(imp)
        return ImportSet(imports)

    def schema(self) -> str:
        entries = "".join(
            f"{definition.schema_definition},\n"
            for definition in self.custom
            if definition is not None and definition.schema_definition
        )
        if not entries:
            return ""
        return f"{self.field_name}: []{self.package}.{self.type_name}{{\n{entries}}},\n"


@dataclass(frozen=True)
class Validators(_CustomList):
    field_name = "Validators"
    package = "validator"
    package_import = VALIDATOR_IMPORT


@dataclass(frozen=True)
class PlanModifiers(_CustomList):
    field_name = "PlanModifiers"
    package = "planmodifier"
    package_import = PLANMODIFIER_IMPORT
