"""
Core code generation components.

Schema definitions, errors, imports, naming, configuration and templates
shared by every generator node.
"""

from .config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .errors import GeneratorError, NilDefinitionError, UndefinedTypeError, UnimplementedError
from .imports import Import, ImportSet
from .model import Model, ModelField
from .templates import TemplateEngine, TemplateError

__all__ = [
    # Errors
    "GeneratorError",
    "NilDefinitionError",
    "UndefinedTypeError",
    "UnimplementedError",
    # Imports
    "Import",
    "ImportSet",
    # Model struct
    "Model",
    "ModelField",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
]
