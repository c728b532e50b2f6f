"""Tests for schema fragments rendered by generator nodes."""

import pytest

from tfplugingen.codegen.core.model import Model
from tfplugingen.codegen.core.schema import (
    BoolAttribute,
    ComputedOptionalRequired,
    CustomDefinition,
    Default,
    ElementKind,
    ElementType,
    Float64Attribute,
    Int64Attribute,
    ListAttribute,
    ListNestedAttribute,
    ListNestedBlock,
    MapAttribute,
    MapNestedAttribute,
    NestedAttributeObject,
    NestedBlockObject,
    NumberAttribute,
    ObjectAttribute,
    PlanModifier,
    SetNestedBlock,
    SingleNestedAttribute,
    SingleNestedBlock,
    StringAttribute,
)
from tfplugingen.codegen.nodes import GeneratorAttributes, GeneratorBoolAttribute
from tfplugingen.codegen.registry import new_attribute, new_attributes, new_block

OPTIONAL = ComputedOptionalRequired.OPTIONAL
REQUIRED = ComputedOptionalRequired.REQUIRED
COMPUTED = ComputedOptionalRequired.COMPUTED


def nested_custom_type(name):
    return (
        f"CustomType: {name}Type{{\nObjectType: types.ObjectType{{\n"
        f"AttrTypes: {name}Value{{}}.AttributeTypes(ctx),\n}},\n}},\n"
    )


class TestPrimitiveSchema:
    def test_facet_order(self):
        node = new_attribute(
            "bool_attribute",
            BoolAttribute(
                computed_optional_required=OPTIONAL,
                sensitive=True,
                description="desc",
                deprecation_message="deprecated",
                default=Default(static=True),
            ),
        )

        assert node.schema("bool_attribute") == (
            '"bool_attribute": schema.BoolAttribute{\n'
            "Optional: true,\n"
            "Sensitive: true,\n"
            'Description: "desc",\n'
            'MarkdownDescription: "desc",\n'
            'DeprecationMessage: "deprecated",\n'
            "Default: booldefault.StaticBool(true),\n"
            "},"
        )

    def test_custom_type_first(self, custom_bool_type):
        node = new_attribute(
            "bool_attribute",
            BoolAttribute(computed_optional_required=COMPUTED, custom_type=custom_bool_type),
        )

        assert node.schema("bool_attribute") == (
            '"bool_attribute": schema.BoolAttribute{\n'
            "CustomType: my_custom_type,\n"
            "Computed: true,\n"
            "},"
        )

    def test_validators_after_plan_modifiers(self, string_validator):
        node = new_attribute(
            "name",
            StringAttribute(
                computed_optional_required=REQUIRED,
                validators=(string_validator,),
                plan_modifiers=(
                    PlanModifier(custom=CustomDefinition("stringplanmodifier.RequiresReplace()")),
                ),
            ),
        )

        assert node.schema("name") == (
            '"name": schema.StringAttribute{\n'
            "Required: true,\n"
            "PlanModifiers: []planmodifier.String{\nstringplanmodifier.RequiresReplace(),\n},\n"
            "Validators: []validator.String{\nstringvalidator.LengthAtLeast(1),\n},\n"
            "},"
        )

    @pytest.mark.parametrize(
        "definition,type_name,default",
        [
            (Float64Attribute(default=Default(static=1.5)), "Float64Attribute", "float64default.StaticFloat64(1.5)"),
            (Int64Attribute(default=Default(static=7)), "Int64Attribute", "int64default.StaticInt64(7)"),
            (StringAttribute(default=Default(static="x")), "StringAttribute", 'stringdefault.StaticString("x")'),
        ],
    )
    def test_static_defaults(self, definition, type_name, default):
        node = new_attribute("attr", definition)
        assert node.schema("attr") == f'"attr": schema.{type_name}{{\nDefault: {default},\n}},'

    def test_number_ignores_static_default(self):
        node = new_attribute("number", NumberAttribute(default=Default(static=1)))
        assert node.schema("number") == '"number": schema.NumberAttribute{\n},'

    def test_external_type_sets_custom_type(self, aet):
        node = new_attribute("bool_attribute", BoolAttribute(associated_external_type=aet))
        assert node.schema("bool_attribute") == (
            '"bool_attribute": schema.BoolAttribute{\n'
            "CustomType: BoolAttributeType{},\n"
            "},"
        )

    def test_rendering_is_repeatable(self):
        node = new_attribute("b", BoolAttribute(computed_optional_required=OPTIONAL))
        assert node.schema("b") == node.schema("b")


class TestCollectionSchema:
    def test_element_type(self, string_element):
        node = new_attribute(
            "list_attribute",
            ListAttribute(computed_optional_required=REQUIRED, element_type=string_element),
        )

        assert node.schema("list_attribute") == (
            '"list_attribute": schema.ListAttribute{\n'
            "ElementType: types.StringType,\n"
            "Required: true,\n"
            "},"
        )

    def test_custom_type_replaces_element_type(self, custom_bool_type, string_element):
        node = new_attribute(
            "map_attribute",
            MapAttribute(custom_type=custom_bool_type, element_type=string_element),
        )

        assert node.schema("map_attribute") == (
            '"map_attribute": schema.MapAttribute{\nCustomType: my_custom_type,\n},'
        )

    def test_custom_default(self, string_element):
        node = new_attribute(
            "list_attribute",
            ListAttribute(
                element_type=string_element,
                default=Default(custom=CustomDefinition("my_list_default.Default()")),
            ),
        )
        assert node.schema("list_attribute").endswith(
            "Default: my_list_default.Default(),\n},"
        )


class TestObjectSchema:
    def test_attribute_types(self, object_attribute_types):
        node = new_attribute(
            "object_attribute",
            ObjectAttribute(computed_optional_required=OPTIONAL, attribute_types=object_attribute_types),
        )

        assert node.schema("object_attribute") == (
            '"object_attribute": schema.ObjectAttribute{\n'
            "AttributeTypes: map[string]attr.Type{\n"
            '"bool": types.BoolType,\n"str": types.StringType,\n},\n'
            "Optional: true,\n"
            "},"
        )


class TestNestedSchema:
    def test_single_nested_attribute(self):
        node = new_attribute(
            "single",
            SingleNestedAttribute(
                computed_optional_required=REQUIRED,
                attributes={"b": BoolAttribute(computed_optional_required=COMPUTED)},
            ),
        )

        assert node.schema("single") == (
            '"single": schema.SingleNestedAttribute{\n'
            "Attributes: map[string]schema.Attribute{\n"
            '"b": schema.BoolAttribute{\nComputed: true,\n},\n'
            "},\n"
            + nested_custom_type("Single")
            + "Required: true,\n"
            "},"
        )

    def test_single_nested_attribute_always_writes_attributes(self):
        node = new_attribute("single", SingleNestedAttribute())
        assert "Attributes: map[string]schema.Attribute{\n},\n" in node.schema("single")

    def test_list_nested_attribute(self):
        node = new_attribute(
            "list_nested",
            ListNestedAttribute(
                computed_optional_required=OPTIONAL,
                nested_object=NestedAttributeObject(
                    attributes={"s": StringAttribute(computed_optional_required=OPTIONAL)},
                ),
            ),
        )

        assert node.schema("list_nested") == (
            '"list_nested": schema.ListNestedAttribute{\n'
            "NestedObject: schema.NestedAttributeObject{\n"
            "Attributes: map[string]schema.Attribute{\n"
            '"s": schema.StringAttribute{\nOptional: true,\n},\n'
            "},\n"
            + nested_custom_type("ListNested")
            + "},\n"
            "Optional: true,\n"
            "},"
        )

    def test_nested_object_plan_modifiers(self):
        node = new_attribute(
            "map_nested",
            MapNestedAttribute(
                nested_object=NestedAttributeObject(
                    plan_modifiers=(PlanModifier(custom=CustomDefinition("my.ObjectModifier()")),),
                ),
            ),
        )
        assert "PlanModifiers: []planmodifier.Object{\nmy.ObjectModifier(),\n},\n},\n" in node.schema(
            "map_nested"
        )

    def test_nested_collection_plan_modifiers_use_collection_type(self):
        node = new_attribute(
            "map_nested",
            MapNestedAttribute(
                plan_modifiers=(PlanModifier(custom=CustomDefinition("my.MapModifier()")),),
            ),
        )
        assert "PlanModifiers: []planmodifier.Map{\n" in node.schema("map_nested")

    def test_empty_single_nested_block(self):
        node = new_block("blk", SingleNestedBlock())
        assert node.schema("blk") == (
            '"blk": schema.SingleNestedBlock{\n' + nested_custom_type("Blk") + "},"
        )

    def test_single_nested_block_children(self):
        node = new_block(
            "blk",
            SingleNestedBlock(
                attributes={"a": BoolAttribute()},
                blocks={"inner": SingleNestedBlock()},
            ),
        )

        schema = node.schema("blk")
        assert schema.index("Attributes: map[string]schema.Attribute{") < schema.index(
            "Blocks: map[string]schema.Block{\n\"inner\": schema.SingleNestedBlock{"
        )

    def test_nested_block_object(self):
        node = new_block(
            "list_block",
            ListNestedBlock(nested_object=NestedBlockObject(blocks={"inner": SetNestedBlock()})),
        )

        schema = node.schema("list_block")
        assert schema.startswith(
            '"list_block": schema.ListNestedBlock{\n'
            "NestedObject: schema.NestedBlockObject{\n"
            "Blocks: map[string]schema.Block{\n"
            '"inner": schema.SetNestedBlock{\n'
            "NestedObject: schema.NestedBlockObject{\n"
        )
        assert "Attributes: map[string]schema.Attribute{" not in schema


class TestChildCollections:
    def test_children_sorted_and_newline_prefixed(self):
        attributes = new_attributes({"zeta": BoolAttribute(), "alpha": BoolAttribute()})

        assert attributes.sorted_keys() == ["alpha", "zeta"]
        assert attributes.schema() == (
            '\n"alpha": schema.BoolAttribute{\n},\n"zeta": schema.BoolAttribute{\n},'
        )

    def test_empty_map_is_omitted(self):
        assert GeneratorAttributes().schema_map() == ""

    def test_structural_equality(self):
        left = new_attributes({"a": BoolAttribute(computed_optional_required=OPTIONAL)})
        right = new_attributes({"a": BoolAttribute(computed_optional_required=OPTIONAL)})

        assert left == right
        assert left["a"] == right["a"]
        assert left["a"] != GeneratorBoolAttribute()

    def test_kind_names(self):
        attributes = new_attributes(
            {"list": ListAttribute(element_type=ElementType(ElementKind.STRING)), "single": SingleNestedAttribute()}
        )
        assert attributes.attribute_types() == {"list": "List", "single": "SingleNested"}


class TestRepeatability:
    @pytest.fixture
    def deep_block(self, object_attribute_types, string_validator):
        inner = SingleNestedBlock(
            attributes={
                "objects": ListAttribute(
                    element_type=ElementType(ElementKind.OBJECT, attribute_types=object_attribute_types)
                ),
                "name": StringAttribute(validators=(string_validator,)),
            },
            blocks={"leaf": SingleNestedBlock(attributes={"flag": BoolAttribute()})},
        )
        return ListNestedBlock(
            nested_object=NestedBlockObject(
                attributes={
                    "z": BoolAttribute(default=Default(static=True)),
                    "a": StringAttribute(validators=(string_validator,)),
                },
                blocks={"inner": inner},
            )
        )

    def test_same_node_renders_identically(self, deep_block):
        node = new_block("deep", deep_block)

        assert node.schema("deep") == node.schema("deep")
        assert node.imports().paths() == node.imports().paths()
        assert node.model_field("deep") == node.model_field("deep")
        model = Model("deepModel", (node.model_field("deep"),))
        assert model.render() == model.render()

    def test_rebuilt_node_renders_identically(self, deep_block):
        first, second = new_block("deep", deep_block), new_block("deep", deep_block)

        assert first == second
        assert first.schema("deep") == second.schema("deep")
        assert first.imports().paths() == second.imports().paths()
        assert first.model_field("deep") == second.model_field("deep")

    def test_imports_have_no_duplicate_paths(self, deep_block):
        paths = new_block("deep", deep_block).imports().paths()
        assert len(paths) == len(set(paths))
