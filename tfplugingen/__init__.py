"""
tfplugingen - Terraform Plugin Framework schema code generator.

Turns a typed schema tree into the Go source a provider needs: schema
definitions, model structs, custom Type/Value types and To/From helpers.
"""

from .logging_config import get_logger, setup_logging

__version__ = "0.1.0"

__all__ = ["get_logger", "setup_logging", "__version__"]
