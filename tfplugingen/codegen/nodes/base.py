"""
Shared node contract and the child collections of nested nodes.

Every generator node is a frozen dataclass built once from its definition.
Rendering methods only read the node's own fields and ask children for their
fragments, so rendering the same node twice yields identical output.
"""

from dataclasses import dataclass
from typing import ClassVar, Dict, Iterator, Mapping, Optional

from ..convert import (
    ComputedOptionalRequiredFlags,
    DeprecationMessage,
    Description,
    PlanModifiers,
    Sensitive,
    Validators,
)
from ..core.errors import UnimplementedError
from ..core.imports import ImportSet, associated_external_type_imports
from ..core.model import ModelField
from ..core.naming import to_pascal_case
from ..core.schema import (
    AssociatedExternalType,
    AttributeDefinition,
    NodeKind,
    custom_plan_modifiers,
    custom_validators,
)
from ..languages.go.literals import go_quote
from ..languages.go.types import ToFromConversion


@dataclass(frozen=True)
class GeneratorNode:
    """
    Base class of every attribute and block generator.

    Subclasses declare ``kind`` and ``is_block`` and provide the kind
    specific parts of the schema body, imports and model value type.
    """

    kind: ClassVar[NodeKind]
    is_block: ClassVar[bool] = False

    associated_external_type: Optional[AssociatedExternalType] = None
    computed_optional_required: ComputedOptionalRequiredFlags = ComputedOptionalRequiredFlags()
    deprecation_message: DeprecationMessage = DeprecationMessage()
    description: Description = Description()
    sensitive: Sensitive = Sensitive()
    plan_modifiers: PlanModifiers = PlanModifiers("")
    validators: Validators = Validators("")

    @classmethod
    def type_name(cls) -> str:
        """Framework schema type, e.g. ``BoolAttribute`` or ``ListNestedBlock``."""
        suffix = "Block" if cls.is_block else "Attribute"
        return f"{cls.kind.value}{suffix}"

    @classmethod
    def common_facets(cls, definition: AttributeDefinition) -> dict:
        """Converter values shared by every kind, keyed by field name."""
        return {
            "associated_external_type": definition.associated_external_type,
            "computed_optional_required": ComputedOptionalRequiredFlags(
                definition.computed_optional_required
            ),
            "deprecation_message": DeprecationMessage(definition.deprecation_message),
            "description": Description(definition.description),
            "sensitive": Sensitive(definition.sensitive),
            "plan_modifiers": PlanModifiers(
                _facet_type(cls.kind),
                custom_plan_modifiers(definition.plan_modifiers),
            ),
            "validators": Validators(
                _facet_type(cls.kind),
                custom_validators(definition.validators),
            ),
        }

    # Schema

    def schema(self, name: str) -> str:
        """
        Render the ``"name": schema.<Type>{...},`` fragment.

        Args:
            name: Attribute or block name

        Returns:
            Go source fragment without a trailing newline
        """
        return (
            f"{go_quote(name)}: schema.{self.type_name()}{{\n"
            f"{self.schema_body(name)}"
            "},"
        )

    def schema_body(self, name: str) -> str:
        raise NotImplementedError

    def facets_schema(self) -> str:
        """Flags, sensitive, description, deprecation, plan modifiers and validators."""
        return (
            self.computed_optional_required.schema()
            + self.sensitive.schema()
            + self.description.schema()
            + self.deprecation_message.schema()
            + self.plan_modifiers.schema()
            + self.validators.schema()
        )

    # Imports

    def imports(self) -> ImportSet:
        raise NotImplementedError

    def external_type_imports(self) -> ImportSet:
        """Conversion support imports, present only with an external type."""
        aet = self.associated_external_type
        if aet is None:
            return ImportSet()
        return associated_external_type_imports() | aet.imports()

    # Model

    def model_value_type(self, name: str) -> str:
        raise NotImplementedError

    def model_field(self, name: str) -> ModelField:
        return ModelField(
            name=to_pascal_case(name),
            tfsdk_name=name,
            value_type=self.model_value_type(name),
        )

    # Nested object support

    def attr_type(self, name: str) -> str:
        raise NotImplementedError

    def attr_value(self, name: str) -> str:
        raise NotImplementedError

    def collection_type(self) -> Optional[Dict[str, str]]:
        return None

    def to(self) -> ToFromConversion:
        raise NotImplementedError

    def from_(self) -> ToFromConversion:
        raise NotImplementedError

    def custom_type_and_value(self, name: str) -> Optional[str]:
        return None

    def to_from_functions(self, name: str) -> Optional[str]:
        return None

    def get_attributes(self) -> "GeneratorAttributes":
        return GeneratorAttributes()

    def get_blocks(self) -> "GeneratorBlocks":
        return GeneratorBlocks()


def _facet_type(kind: NodeKind) -> str:
    """Validator and plan modifier interface name of a kind."""
    if kind == NodeKind.SINGLE_NESTED:
        return "Object"
    if kind.is_nested:
        return kind.value[: -len("Nested")]
    return kind.value


class GeneratorAttributes(Mapping):
    """
    Immutable, name-sorted mapping of child generators.

    Every aggregate helper visits children in lexicographic order so that
    generated output does not depend on input declaration order.
    """

    map_header = "Attributes: map[string]schema.Attribute{"

    def __init__(self, nodes: Optional[Mapping[str, GeneratorNode]] = None):
        self._nodes = dict(sorted((nodes or {}).items()))

    def __getitem__(self, key: str) -> GeneratorNode:
        return self._nodes[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GeneratorAttributes):
            return NotImplemented
        return type(self) is type(other) and self._nodes == other._nodes

    def __hash__(self) -> int:
        return hash(tuple(self._nodes.items()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._nodes!r})"

    def sorted_keys(self):
        return list(self._nodes)

    def schema(self) -> str:
        """Concatenate child fragments, each starting on a new line."""
        out = []
        for key, node in self._nodes.items():
            fragment = node.schema(key)
            if not fragment.startswith("\n"):
                fragment = "\n" + fragment
            out.append(fragment)
        return "".join(out)

    def schema_map(self) -> str:
        """Render the ``Attributes``/``Blocks`` map, or nothing when empty."""
        body = self.schema()
        if not body:
            return ""
        return f"{self.map_header}{body}\n}},\n"

    def imports(self) -> ImportSet:
        return ImportSet().union(*(node.imports() for node in self._nodes.values()))

    def attribute_types(self) -> Dict[str, str]:
        """Kind name of each child, e.g. ``Bool`` or ``ListNested``."""
        return {k: node.kind.value for k, node in self._nodes.items()}

    def attr_types(self) -> Dict[str, str]:
        return {k: node.attr_type(k) for k, node in self._nodes.items()}

    def attr_values(self) -> Dict[str, str]:
        return {k: node.attr_value(k) for k, node in self._nodes.items()}

    def collection_types(self) -> Dict[str, Dict[str, str]]:
        types = {}
        for k, node in self._nodes.items():
            collection = node.collection_type()
            if collection is not None:
                types[k] = collection
        return types

    def to_funcs(self) -> Dict[str, ToFromConversion]:
        """
        Conversion plans of every child towards the external type.

        Raises:
            UnimplementedError: With the child's name prepended to its path
        """
        funcs = {}
        for k, node in self._nodes.items():
            try:
                funcs[k] = node.to()
            except UnimplementedError as e:
                raise e.nested(k) from e
        return funcs

    def from_funcs(self) -> Dict[str, ToFromConversion]:
        funcs = {}
        for k, node in self._nodes.items():
            try:
                funcs[k] = node.from_()
            except UnimplementedError as e:
                raise e.nested(k) from e
        return funcs

    def custom_type_and_value(self) -> str:
        parts = (node.custom_type_and_value(k) for k, node in self._nodes.items())
        return "".join(p for p in parts if p)

    def to_from_functions(self) -> str:
        parts = (node.to_from_functions(k) for k, node in self._nodes.items())
        return "".join(p for p in parts if p)


class GeneratorBlocks(GeneratorAttributes):
    map_header = "Blocks: map[string]schema.Block{"


def merge_fields(attributes: GeneratorAttributes, blocks: GeneratorBlocks, getter: str) -> Dict[str, object]:
    """Merge one per-child mapping of attributes and blocks; blocks win on a shared name."""
    merged = dict(getattr(attributes, getter)())
    merged.update(getattr(blocks, getter)())
    return merged


__all__ = [
    "GeneratorAttributes",
    "GeneratorBlocks",
    "GeneratorNode",
    "merge_fields",
]
