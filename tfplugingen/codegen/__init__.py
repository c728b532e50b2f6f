"""
Terraform Plugin Framework Code Generation Module

Generates Go schema, model and conversion code from schema definitions.
"""

from .core.config import ConfigManager, GeneratorConfig, load_config
from .core.errors import GeneratorError, NilDefinitionError, UndefinedTypeError, UnimplementedError
from .core.generator import GenerationResult, GeneratorSchema, generate_code
from .core.schema import NodeKind, SchemaDefinition
from .registry import NodeRegistry, get_registry, new_attribute, new_attributes, new_block, new_blocks

# Version info
__version__ = "0.1.0"


def quick_generate(name, definition, **options):
    """
    Quick code generation from a schema definition.

    Args:
        name: Schema name
        definition: SchemaDefinition to generate from
        **options: Configuration overrides (generator_type, package_name, ...)

    Returns:
        Generated code string
    """
    generator_type = options.pop("generator_type", "resource")
    config = load_config(generator_type, options)

    result = generate_code(name, definition, config)

    if result.success:
        return result.code
    else:
        raise RuntimeError(f"Code generation failed: {result.error_message}")


# Export main interfaces
__all__ = [
    "ConfigManager",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "GeneratorSchema",
    "NilDefinitionError",
    "NodeKind",
    "NodeRegistry",
    "SchemaDefinition",
    "UndefinedTypeError",
    "UnimplementedError",
    "generate_code",
    "get_registry",
    "load_config",
    "new_attribute",
    "new_attributes",
    "new_block",
    "new_blocks",
    "quick_generate",
]
