"""Tests for whole-schema generation."""

import logging

import pytest

from tfplugingen.codegen import quick_generate
from tfplugingen.codegen.core.config import GeneratorConfig
from tfplugingen.codegen.core.errors import UndefinedTypeError
from tfplugingen.codegen.core.generator import GeneratorSchema, generate_code
from tfplugingen.codegen.core.imports import (
    BOOL_DEFAULT_IMPORT,
    CONTEXT_IMPORT,
    FMT_IMPORT,
    PLANMODIFIER_IMPORT,
    SCHEMA_IMPORTS,
    TYPES_IMPORT,
    Import,
)
from tfplugingen.codegen.core.schema import (
    AssociatedExternalType,
    BoolAttribute,
    CustomDefinition,
    Default,
    ListNestedAttribute,
    NestedAttributeObject,
    PlanModifier,
    SchemaDefinition,
    SingleNestedBlock,
    StringAttribute,
    without_resource_facets,
)


@pytest.fixture
def generator_schema(example_schema):
    return GeneratorSchema.build(example_schema)


class TestImports:
    def test_plain_schema(self):
        generator_schema = GeneratorSchema.build(
            SchemaDefinition(attributes={"name": StringAttribute()})
        )

        assert generator_schema.imports().paths() == (
            CONTEXT_IMPORT,
            SCHEMA_IMPORTS["resource"],
            TYPES_IMPORT,
        )

    def test_nested_bundle_follows_context(self, generator_schema):
        paths = generator_schema.imports("data_source").paths()

        assert paths[0] == CONTEXT_IMPORT
        assert paths[1] == FMT_IMPORT
        assert SCHEMA_IMPORTS["data_source"] in paths
        assert SCHEMA_IMPORTS["resource"] not in paths


class TestSchema:
    def test_schema_function(self, generator_schema):
        code = generator_schema.schema("example_thing", "provider")

        assert code.startswith("// Code generated by tfplugingen; DO NOT EDIT.\n\npackage provider\n")
        assert 'import (\n"context"\n' in code
        assert "func ExampleThingResourceSchema(ctx context.Context) schema.Schema {" in code
        assert (
            "Attributes: map[string]schema.Attribute{\n"
            '"name": schema.StringAttribute{\nRequired: true,\n},\n'
            '"tags": schema.ListAttribute{\nElementType: types.StringType,\nOptional: true,\n},\n'
            "},\n"
        ) in code
        assert 'Blocks: map[string]schema.Block{\n"config": schema.SingleNestedBlock{\n' in code
        assert 'Description: "An example thing.",\n' in code
        assert "MarkdownDescription" not in code

    @pytest.mark.parametrize(
        "generator_type,suffix",
        [("resource", "Resource"), ("data_source", "DataSource"), ("provider", "Provider")],
    )
    def test_schema_suffix(self, generator_schema, generator_type, suffix):
        code = generator_schema.schema("example", "provider", generator_type)
        assert f"func Example{suffix}Schema(ctx context.Context) schema.Schema {{" in code

    def test_empty_schema_omits_maps(self):
        code = GeneratorSchema.build(SchemaDefinition()).schema("empty", "provider")

        assert "Attributes:" not in code
        assert "Blocks:" not in code


class TestModelsAndCode:
    def test_models_sorted_across_attributes_and_blocks(self, generator_schema):
        code = generator_schema.models("example_thing").render()

        assert "type exampleThingModel struct {" in code
        config = code.index('Config ConfigValue `tfsdk:"config"`')
        name = code.index('Name types.String `tfsdk:"name"`')
        tags = code.index('Tags types.List `tfsdk:"tags"`')
        assert config < name < tags

    def test_custom_type_value_bytes(self, generator_schema):
        code = generator_schema.custom_type_value_bytes()

        assert "type ConfigType struct" in code
        assert code.endswith("\n")

    def test_no_custom_code_for_plain_schema(self):
        generator_schema = GeneratorSchema.build(
            SchemaDefinition(attributes={"name": StringAttribute()})
        )

        assert generator_schema.custom_type_value_bytes() == ""
        assert generator_schema.to_from_functions() == ""


class TestToFromFunctions:
    @pytest.fixture
    def aet(self):
        return AssociatedExternalType("*apisdk.Type")

    def test_unimplemented_child_is_logged_and_skipped(self, aet, caplog):
        generator_schema = GeneratorSchema.build(
            SchemaDefinition(
                attributes={
                    "items": ListNestedAttribute(
                        nested_object=NestedAttributeObject(
                            attributes={"children": ListNestedAttribute()},
                            associated_external_type=aet,
                        )
                    ),
                    "flag": BoolAttribute(associated_external_type=aet),
                }
            )
        )

        skipped = []
        with caplog.at_level(logging.ERROR, logger="tfplugingen"):
            code = generator_schema.to_from_functions(skipped=skipped)

        assert skipped == ["items.children"]
        assert "items.children" in caplog.text
        assert "func (v FlagValue) ToApisdkType" in code
        assert "ItemsValue" not in code


USE_STATE = PlanModifier(
    custom=CustomDefinition(
        "boolplanmodifier.UseStateForUnknown()",
        (Import("github.com/hashicorp/terraform-plugin-framework/resource/schema/boolplanmodifier"),),
    )
)


@pytest.fixture
def resource_facets_schema():
    enabled = BoolAttribute(default=Default(static=True), plan_modifiers=(USE_STATE,))
    return SchemaDefinition(
        attributes={
            "enabled": enabled,
            "items": ListNestedAttribute(
                nested_object=NestedAttributeObject(
                    attributes={"enabled": enabled},
                    plan_modifiers=(PlanModifier(custom=CustomDefinition("objectMod()")),),
                )
            ),
        },
        blocks={"config": SingleNestedBlock(attributes={"enabled": enabled})},
    )


class TestResourceOnlyFacets:
    @pytest.mark.parametrize("generator_type", ["data_source", "provider"])
    def test_dropped_outside_resources(self, resource_facets_schema, generator_type):
        result = generate_code(
            "thing", resource_facets_schema, GeneratorConfig(generator_type=generator_type)
        )

        assert result.success
        assert "Default:" not in result.code
        assert "PlanModifiers:" not in result.code
        assert "/resource/schema/" not in result.code
        assert f'"{SCHEMA_IMPORTS[generator_type]}"' in result.code

    def test_kept_for_resources(self, resource_facets_schema):
        generator_schema = GeneratorSchema.build(resource_facets_schema, "resource")
        code = generator_schema.schema("thing", "provider")

        assert "Default: booldefault.StaticBool(true),\n" in code
        assert "PlanModifiers: []planmodifier.Object{\nobjectMod(),\n},\n" in code
        assert BOOL_DEFAULT_IMPORT in generator_schema.imports().paths()
        assert PLANMODIFIER_IMPORT in generator_schema.imports().paths()

    def test_build_for_data_source(self, resource_facets_schema):
        paths = GeneratorSchema.build(resource_facets_schema, "data_source").imports(
            "data_source"
        ).paths()

        assert BOOL_DEFAULT_IMPORT not in paths
        assert PLANMODIFIER_IMPORT not in paths

    def test_without_resource_facets_leaves_input_untouched(self, resource_facets_schema):
        stripped = without_resource_facets(resource_facets_schema)

        assert stripped.attributes["enabled"].default is None
        assert stripped.attributes["items"].nested_object.plan_modifiers == ()
        assert stripped.attributes["items"].nested_object.attributes["enabled"].plan_modifiers == ()
        assert stripped.blocks["config"].attributes["enabled"].default is None
        assert resource_facets_schema.attributes["enabled"].default == Default(static=True)
        assert without_resource_facets("oops") == "oops"


class TestGenerateCode:
    def test_success(self, example_schema):
        result = generate_code("example_thing", example_schema)

        assert result.success
        assert result.error_message is None
        assert "func ExampleThingResourceSchema" in result.code
        assert "type exampleThingModel struct" in result.code
        assert "type ConfigValue struct" in result.code
        assert result.metadata["attribute_count"] == 2
        assert result.metadata["block_count"] == 1
        assert result.metadata["generator_type"] == "resource"
        assert result.warnings == []

    def test_config_warnings(self, example_schema):
        config = GeneratorConfig(package_name="Bad-Name", output_file="out.txt")
        result = generate_code("example_thing", example_schema, config)

        assert result.success
        assert "Output file should have a .go extension: out.txt" in result.warnings
        assert "package Bad-Name" in result.code

    def test_skipped_conversion_warning(self):
        aet = AssociatedExternalType("*apisdk.Type")
        definition = SchemaDefinition(
            attributes={
                "items": ListNestedAttribute(
                    nested_object=NestedAttributeObject(
                        attributes={"children": ListNestedAttribute()},
                        associated_external_type=aet,
                    )
                )
            }
        )

        result = generate_code("example", definition)

        assert result.success
        assert result.metadata["skipped_conversions"] == ["items.children"]
        assert "To/From functions not generated for items.children" in result.warnings

    def test_failure_never_raises(self):
        result = generate_code("broken", SchemaDefinition(attributes={"bad": "oops"}))

        assert not result.success
        assert result.code == ""
        assert result.error_message.startswith("Code generation failed:")
        assert isinstance(result.exception, UndefinedTypeError)

    def test_unknown_generator_type(self, example_schema):
        result = generate_code(
            "example_thing", example_schema, GeneratorConfig(generator_type="widget")
        )
        assert not result.success


def test_quick_generate(example_schema):
    code = quick_generate("example_thing", example_schema, generator_type="provider", package_name="example")

    assert "package example" in code
    assert "func ExampleThingProviderSchema" in code
    assert '"github.com/hashicorp/terraform-plugin-framework/provider/schema"' in code


def test_quick_generate_raises_on_failure():
    with pytest.raises(RuntimeError, match="Code generation failed"):
        quick_generate("broken", SchemaDefinition(attributes={"bad": "oops"}))
