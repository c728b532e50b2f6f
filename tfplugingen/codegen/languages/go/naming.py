"""
Go-specific naming data for generated Terraform types.
"""

# Methods every generated nested object value type defines. A struct field
# with one of these names would collide with the method of the same name.
GENERATED_METHOD_NAMES = frozenset(
    {
        "AttributeTypes",
        "Equal",
        "IsNull",
        "IsUnknown",
        "String",
        "ToObjectValue",
        "ToTerraformValue",
        "Type",
    }
)

# Go reserved words; a generated local variable must not use one of these.
GO_RESERVED_WORDS = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)


def validate_go_package_name(name: str) -> list:
    """
    Validate a Go package name.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not name:
        errors.append("Package name cannot be empty")
        return errors

    if not name.isidentifier():
        errors.append(f"'{name}' is not a valid Go identifier")

    if name[0].isupper():
        errors.append("Package names should be lowercase")

    if "-" in name:
        errors.append("Package names should not contain hyphens")

    if name in GO_RESERVED_WORDS:
        errors.append(f"'{name}' is a Go reserved word")

    return errors
