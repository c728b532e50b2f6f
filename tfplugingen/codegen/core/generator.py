"""
Whole-schema generation.

``GeneratorSchema`` holds the generator nodes of one resource, data source or
provider schema and renders the pieces of the generated Go file: imports, the
schema function, the model struct, custom Type/Value code and To/From helpers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ...logging_config import get_logger, is_configured, setup_logging
from ..nodes.base import GeneratorAttributes, GeneratorBlocks
from .config import GeneratorConfig, get_config_manager
from .errors import GeneratorError, UnimplementedError
from .imports import CONTEXT_IMPORT, SCHEMA_IMPORTS, ImportSet, nested_object_imports
from .model import Model
from .naming import to_pascal_case
from .schema import SchemaDefinition, without_resource_facets
from .templates import TemplateEngine, get_default_template_engine

logger = get_logger(__name__)

SCHEMA_SUFFIXES = {
    "resource": "Resource",
    "data_source": "DataSource",
    "provider": "Provider",
}


@dataclass(frozen=True)
class GeneratorSchema:
    """Generator nodes and metadata of one schema."""

    attributes: GeneratorAttributes = field(default_factory=GeneratorAttributes)
    blocks: GeneratorBlocks = field(default_factory=GeneratorBlocks)
    description: Optional[str] = None
    markdown_description: Optional[str] = None
    deprecation_message: Optional[str] = None

    @classmethod
    def build(
        cls, definition: SchemaDefinition, generator_type: str = "resource"
    ) -> "GeneratorSchema":
        """
        Build generator nodes for every attribute and block of a schema.

        Defaults and plan modifiers exist only in resource schemas; for data
        sources and providers they are dropped before the nodes are built.

        Raises:
            GeneratorError: The first error of any child, unchanged
        """
        from ..registry import new_attributes, new_blocks

        if generator_type != "resource":
            logger.debug("Dropping defaults and plan modifiers for %s schema", generator_type)
            definition = without_resource_facets(definition)

        return cls(
            attributes=new_attributes(definition.attributes),
            blocks=new_blocks(definition.blocks),
            description=definition.description,
            markdown_description=definition.markdown_description,
            deprecation_message=definition.deprecation_message,
        )

    def _children(self):
        yield from self.attributes.items()
        yield from self.blocks.items()

    def imports(self, generator_type: str = "resource") -> ImportSet:
        """
        Collect the imports of the generated file.

        Context comes first, followed by the nested object support imports
        when any child is nested, the schema package and then child imports.
        """
        if generator_type not in SCHEMA_IMPORTS:
            raise GeneratorError(f"Unknown generator type: {generator_type}")

        imports = ImportSet.of(CONTEXT_IMPORT)
        if any(node.kind.is_nested for _, node in self._children()):
            imports = imports | nested_object_imports()
        imports = imports | ImportSet.of(SCHEMA_IMPORTS[generator_type])
        return imports.union(self.attributes.imports(), self.blocks.imports())

    def schema(
        self,
        name: str,
        package_name: str,
        generator_type: str = "resource",
        engine: Optional[TemplateEngine] = None,
    ) -> str:
        """
        Render the schema function, with package clause and imports.

        Args:
            name: Schema name, e.g. ``example_thing``
            package_name: Go package of the generated file
            generator_type: resource, data_source or provider

        Returns:
            Go source
        """
        engine = engine or get_default_template_engine()
        return engine.render_template(
            "schema.go.j2",
            {
                "package_name": package_name,
                "imports": self.imports(generator_type).render(),
                "name": to_pascal_case(name),
                "schema_suffix": SCHEMA_SUFFIXES[generator_type],
                "attributes": self.attributes.schema().lstrip("\n"),
                "blocks": self.blocks.schema().lstrip("\n"),
                "description": self.description,
                "markdown_description": self.markdown_description,
                "deprecation_message": self.deprecation_message,
            },
        )

    def models(self, name: str) -> Model:
        """Build the model struct holding one field per attribute and block."""
        children = sorted(self._children(), key=lambda item: item[0])
        fields = tuple(node.model_field(k) for k, node in children)
        return Model(name=name, fields=fields)

    def custom_type_value_bytes(self) -> str:
        """Concatenate custom Type/Value code of every child."""
        code = self.attributes.custom_type_and_value() + self.blocks.custom_type_and_value()
        if code:
            code += "\n"
        return code

    def to_from_functions(self, path: str = "", skipped: Optional[List[str]] = None) -> str:
        """
        Concatenate To/From helpers of every child.

        A child whose conversion is not implemented is logged and skipped;
        any other error aborts.

        Args:
            path: Attribute path prefix used in log messages
            skipped: Optional list collecting the paths of skipped children

        Returns:
            Go source
        """
        out = []
        for key, node in self._children():
            try:
                code = node.to_from_functions(key)
            except UnimplementedError as err:
                err_path = ".".join(filter(None, [path, key, err.path()]))
                logger.error("Skipping To/From functions for %s: %s", err_path, err.message)
                if skipped is not None:
                    skipped.append(err_path)
                continue
            if code:
                out.append(code)
        return "".join(out)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    name: str,
    definition: SchemaDefinition,
    config: Optional[GeneratorConfig] = None,
) -> GenerationResult:
    """
    Generate the Go file for one schema with error handling.

    Args:
        name: Schema name
        definition: Schema definition tree
        config: Generator configuration (defaults for resources when omitted)

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    config = config or get_config_manager().get_config()

    if not is_configured():
        setup_logging(config.log_level)

    try:
        warnings = get_config_manager().validate_config(config)

        generator_schema = GeneratorSchema.build(definition, config.generator_type)

        skipped: List[str] = []
        parts = [
            generator_schema.schema(name, config.package_name, config.generator_type),
            generator_schema.models(name).render(),
            generator_schema.custom_type_value_bytes(),
            generator_schema.to_from_functions(skipped=skipped),
        ]
        warnings.extend(f"To/From functions not generated for {p}" for p in skipped)

        metadata = {
            "name": name,
            "generator_type": config.generator_type,
            "package_name": config.package_name,
            "output_file": config.output_file,
            "attribute_count": len(generator_schema.attributes),
            "block_count": len(generator_schema.blocks),
            "skipped_conversions": skipped,
        }

        return GenerationResult("".join(parts), warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed for %s: %s", name, e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
