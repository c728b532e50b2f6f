"""
Node registry mapping definition kinds to generator classes.

The set of kinds is closed: every attribute and block definition carries a
``NodeKind`` tag, and the registry resolves ``(kind, is_block)`` to exactly one
generator class.
"""

from typing import Dict, List, Mapping, Optional, Tuple, Type

from ..logging_config import get_logger
from .core.errors import GeneratorError, UndefinedTypeError
from .core.schema import AttributeDefinition, NodeKind
from .nodes.base import GeneratorAttributes, GeneratorBlocks, GeneratorNode

logger = get_logger(__name__)

NodeKey = Tuple[NodeKind, bool]


class RegistryError(GeneratorError):
    """Exception raised for registry-related errors."""

    pass


class NodeRegistry:
    """Registry of generator classes keyed by node kind and block flag."""

    def __init__(self):
        self._generators: Dict[NodeKey, Type[GeneratorNode]] = {}

    def register(self, generator_class: Type[GeneratorNode], replace: bool = False):
        """
        Register a generator class under its own kind.

        Args:
            generator_class: Generator class declaring ``kind`` and ``is_block``
            replace: If True, replace an existing registration

        Raises:
            RegistryError: If the class is not a generator or the kind is taken
        """
        if not isinstance(generator_class, type) or not issubclass(generator_class, GeneratorNode):
            raise RegistryError(f"Generator class must inherit from GeneratorNode: {generator_class!r}")

        key = (generator_class.kind, generator_class.is_block)
        if key in self._generators and not replace:
            raise RegistryError(
                f"{generator_class.type_name()} already registered to "
                f"{self._generators[key].__name__}"
            )

        self._generators[key] = generator_class

    def unregister(self, kind: NodeKind, is_block: bool = False):
        self._generators.pop((kind, is_block), None)

    def get_generator_class(self, kind: NodeKind, is_block: bool = False) -> Type[GeneratorNode]:
        """
        Get the generator class for a kind.

        Raises:
            RegistryError: If no generator is registered
        """
        try:
            return self._generators[(kind, is_block)]
        except KeyError:
            suffix = "Block" if is_block else "Attribute"
            raise RegistryError(f"No generator registered for {kind.value}{suffix}") from None

    def is_supported(self, kind: NodeKind, is_block: bool = False) -> bool:
        return (kind, is_block) in self._generators

    def list_types(self) -> List[str]:
        """Registered framework type names, sorted."""
        return sorted(cls.type_name() for cls in self._generators.values())

    def create_node(self, name: str, definition, is_block: bool = False) -> GeneratorNode:
        """
        Build the generator node for one attribute or block definition.

        Args:
            name: Attribute or block name
            definition: Attribute or block definition
            is_block: Whether a block is expected

        Returns:
            Generator node

        Raises:
            UndefinedTypeError: If the definition is not a known attribute
                (or block) definition
        """
        if not isinstance(definition, AttributeDefinition) or definition.is_block != is_block:
            what = "block" if is_block else "attribute"
            raise UndefinedTypeError(f"{what} type not defined: {definition!r}")

        generator_class = self.get_generator_class(definition.kind, is_block)
        logger.debug("Building %s %r", generator_class.type_name(), name)
        return generator_class.build(name, definition)


_global_registry: Optional[NodeRegistry] = None


def get_registry() -> NodeRegistry:
    """Get the global node registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = NodeRegistry()
        _register_nodes(_global_registry)
    return _global_registry


def _register_nodes(registry: NodeRegistry):
    """Register every attribute and block generator."""
    from .nodes import ALL_GENERATORS

    for generator_class in ALL_GENERATORS:
        registry.register(generator_class)


# Public API functions using the global registry


def new_attribute(name: str, definition) -> GeneratorNode:
    return get_registry().create_node(name, definition)


def new_block(name: str, definition) -> GeneratorNode:
    return get_registry().create_node(name, definition, is_block=True)


def new_attributes(definitions: Optional[Mapping[str, object]]) -> GeneratorAttributes:
    """
    Build the generators for a mapping of attribute definitions.

    The first failing child aborts construction; its error propagates as is.
    """
    return GeneratorAttributes(
        {name: new_attribute(name, d) for name, d in (definitions or {}).items()}
    )


def new_blocks(definitions: Optional[Mapping[str, object]]) -> GeneratorBlocks:
    return GeneratorBlocks(
        {name: new_block(name, d) for name, d in (definitions or {}).items()}
    )
