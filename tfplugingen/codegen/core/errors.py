"""
Error taxonomy for schema code generation.

Errors raised by a child node propagate to the caller unchanged; the only
rewrapping performed is the path extension of ``UnimplementedError`` when a
nested collection reports which child could not be converted.
"""

from typing import Tuple


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class NilDefinitionError(GeneratorError):
    """Raised when a node is constructed from a missing definition."""

    pass


class UndefinedTypeError(GeneratorError):
    """Raised when an input definition is not a known attribute or block kind."""

    pass


class UnimplementedError(GeneratorError):
    """
    Raised when a conversion path is deliberately unsupported.

    Carries the attribute path leading to the unsupported node, so the caller
    can report which part of a schema was skipped.
    """

    def __init__(self, message: str, path: Tuple[str, ...] = ()):
        super().__init__(message)
        self.message = message
        self._path = tuple(path)

    def __str__(self) -> str:
        if self._path:
            return f"{self.path()}: {self.message}"
        return self.message

    def path(self) -> str:
        """Return the dotted attribute path, e.g. ``parent.child``."""
        return ".".join(self._path)

    def nested(self, parent: str) -> "UnimplementedError":
        """Return a copy of this error with ``parent`` prepended to the path."""
        return UnimplementedError(self.message, (parent,) + self._path)
