"""
Metadata facets: computed/optional/required flags, sensitivity, description
and deprecation message.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.schema import ComputedOptionalRequired
from ..languages.go.literals import go_quote


@dataclass(frozen=True)
class ComputedOptionalRequiredFlags:
    value: Optional[ComputedOptionalRequired] = None

    def is_required(self) -> bool:
        return self.value == ComputedOptionalRequired.REQUIRED

    def is_optional(self) -> bool:
        return self.value in (
            ComputedOptionalRequired.OPTIONAL,
            ComputedOptionalRequired.COMPUTED_OPTIONAL,
        )

    def is_computed(self) -> bool:
        return self.value in (
            ComputedOptionalRequired.COMPUTED,
            ComputedOptionalRequired.COMPUTED_OPTIONAL,
        )

    def schema(self) -> str:
        out = ""
        if self.is_required():
            out += "Required: true,\n"
        if self.is_optional():
            out += "Optional: true,\n"
        if self.is_computed():
            out += "Computed: true,\n"
        return out


@dataclass(frozen=True)
class Sensitive:
    sensitive: bool = False

    def schema(self) -> str:
        return "Sensitive: true,\n" if self.sensitive else ""


@dataclass(frozen=True)
class Description:
    """Rendered twice: as plain and as markdown description."""

    description: Optional[str] = None

    def schema(self) -> str:
        if self.description is None:
            return ""
        quoted = go_quote(self.description)
        return f"Description: {quoted},\nMarkdownDescription: {quoted},\n"


@dataclass(frozen=True)
class DeprecationMessage:
    message: Optional[str] = None

    def schema(self) -> str:
        if self.message is None:
            return ""
        return f"DeprecationMessage: {go_quote(self.message)},\n"
