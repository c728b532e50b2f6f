"""Shared fixtures for tfplugingen tests."""

import pytest

from tfplugingen.codegen.core.imports import Import
from tfplugingen.codegen.core.schema import (
    AssociatedExternalType,
    BoolAttribute,
    ComputedOptionalRequired,
    CustomDefinition,
    CustomType,
    ElementKind,
    ElementType,
    ListAttribute,
    ObjectAttributeType,
    SchemaDefinition,
    SingleNestedBlock,
    StringAttribute,
    Validator,
)
from tfplugingen.codegen.core.templates import TemplateEngine

APISDK_IMPORT = "example.com/apisdk"


@pytest.fixture
def engine():
    """A fresh template engine over the Go templates."""
    return TemplateEngine()


@pytest.fixture
def aet():
    """An associated external type with its own import."""
    return AssociatedExternalType("*apisdk.Type", Import(APISDK_IMPORT))


@pytest.fixture
def custom_bool_type():
    return CustomType(
        type="my_custom_type",
        value_type="myCustomValue",
        import_=Import("github.com/my_account/my_project/attribute"),
    )


@pytest.fixture
def string_validator():
    return Validator(
        custom=CustomDefinition(
            schema_definition="stringvalidator.LengthAtLeast(1)",
            imports=(Import("github.com/hashicorp/terraform-plugin-framework-validators/stringvalidator"),),
        )
    )


@pytest.fixture
def string_element():
    return ElementType(kind=ElementKind.STRING)


@pytest.fixture
def object_attribute_types():
    """Object attribute types declared out of order."""
    return (
        ObjectAttributeType("str", ElementType(ElementKind.STRING)),
        ObjectAttributeType("bool", ElementType(ElementKind.BOOL)),
    )


@pytest.fixture
def example_schema():
    """Two attributes and one single nested block."""
    return SchemaDefinition(
        attributes={
            "tags": ListAttribute(
                computed_optional_required=ComputedOptionalRequired.OPTIONAL,
                element_type=ElementType(ElementKind.STRING),
            ),
            "name": StringAttribute(
                computed_optional_required=ComputedOptionalRequired.REQUIRED,
            ),
        },
        blocks={
            "config": SingleNestedBlock(
                attributes={
                    "enabled": BoolAttribute(
                        computed_optional_required=ComputedOptionalRequired.OPTIONAL,
                    ),
                },
            ),
        },
        description="An example thing.",
    )
