"""Target language support for generated code."""
