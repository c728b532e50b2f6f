"""Tests for To/From conversion plans."""

import pytest

from tfplugingen.codegen.core.errors import GeneratorError, UnimplementedError
from tfplugingen.codegen.core.schema import (
    BoolAttribute,
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
    NumberAttribute,
    ObjectAttribute,
    ObjectAttributeType,
    SetAttribute,
    SetNestedAttribute,
    SingleNestedAttribute,
    SingleNestedBlock,
    StringAttribute,
)
from tfplugingen.codegen.languages.go.types import (
    CollectionFields,
    ConversionStrategy,
    ObjectField,
    ToFromConversion,
    object_field_to,
)
from tfplugingen.codegen.registry import new_attribute, new_attributes, new_block

STRING_ELEMENT = ElementType(ElementKind.STRING)


@pytest.mark.parametrize(
    "definition,to_func,from_func",
    [
        (BoolAttribute(), "ValueBoolPointer", "BoolPointerValue"),
        (Float64Attribute(), "ValueFloat64Pointer", "Float64PointerValue"),
        (Int64Attribute(), "ValueInt64Pointer", "Int64PointerValue"),
        (NumberAttribute(), "ValueBigFloat", "NumberValue"),
        (StringAttribute(), "ValueStringPointer", "StringPointerValue"),
    ],
)
def test_primitive_default_plans(definition, to_func, from_func):
    node = new_attribute("attr", definition)

    assert node.to() == ToFromConversion(default=to_func)
    assert node.from_() == ToFromConversion(default=from_func)
    assert node.to().strategy == ConversionStrategy.DEFAULT


def test_external_type_plan(aet):
    node = new_attribute("attr", StringAttribute(associated_external_type=aet))

    assert node.to() == ToFromConversion(assoc_ext_type=aet)
    assert node.from_().strategy == ConversionStrategy.ASSOCIATED_EXTERNAL_TYPE


class TestCollectionPlans:
    @pytest.mark.parametrize(
        "definition,go_type,value_from",
        [
            (ListAttribute(element_type=STRING_ELEMENT), "[]*string", "types.ListValueFrom"),
            (MapAttribute(element_type=STRING_ELEMENT), "map[string]*string", "types.MapValueFrom"),
            (SetAttribute(element_type=STRING_ELEMENT), "[]*string", "types.SetValueFrom"),
        ],
    )
    def test_plans(self, definition, go_type, value_from):
        node = new_attribute("attr", definition)

        assert node.to().collection_type == CollectionFields(go_type=go_type)
        assert node.from_().collection_type == CollectionFields(
            element_type="types.StringType", type_value_from=value_from
        )
        assert node.to().strategy == ConversionStrategy.COLLECTION

    def test_nested_element_is_unimplemented(self):
        node = new_attribute(
            "attr", ListAttribute(element_type=ElementType(ElementKind.LIST, element_type=STRING_ELEMENT))
        )
        with pytest.raises(UnimplementedError, match="list element type is not yet implemented"):
            node.to()


class TestObjectPlans:
    def test_field_plans(self, object_attribute_types):
        node = new_attribute("obj", ObjectAttribute(attribute_types=object_attribute_types))

        plan = node.to()
        assert plan.strategy == ConversionStrategy.OBJECT
        assert plan.object_type == {
            "str": ObjectField("*string", "types.String", to_func="ValueStringPointer"),
            "bool": ObjectField("*bool", "types.Bool", to_func="ValueBoolPointer"),
        }
        assert node.from_().object_type["str"] == ObjectField(
            type="types.StringType", from_func="StringPointerValue"
        )

    def test_empty_object_is_object_strategy(self):
        assert new_attribute("obj", ObjectAttribute()).to().strategy == ConversionStrategy.OBJECT

    @pytest.mark.parametrize("kind", [ElementKind.LIST, ElementKind.MAP, ElementKind.SET, ElementKind.OBJECT])
    def test_non_primitive_fields_are_unimplemented(self, kind):
        node = new_attribute(
            "obj", ObjectAttribute(attribute_types=(ObjectAttributeType("x", ElementType(kind)),))
        )
        with pytest.raises(UnimplementedError, match=f"{kind.value.lower()} attribute type"):
            node.to()

    def test_unrecognised_field_type(self):
        with pytest.raises(GeneratorError, match="no matching object attribute type found"):
            object_field_to(ObjectAttributeType("x", None))


class TestNestedPlans:
    @pytest.mark.parametrize(
        "factory,message",
        [
            (lambda: new_attribute("n", ListNestedAttribute()), "list nested type is not yet implemented"),
            (lambda: new_attribute("n", MapNestedAttribute()), "map nested type is not yet implemented"),
            (lambda: new_attribute("n", SetNestedAttribute()), "set nested type is not yet implemented"),
            (lambda: new_attribute("n", SingleNestedAttribute()), "single nested type is not yet implemented"),
            (lambda: new_block("n", ListNestedBlock()), "list nested type is not yet implemented"),
            (lambda: new_block("n", SingleNestedBlock()), "single nested type is not yet implemented"),
        ],
    )
    def test_nested_kinds_are_unimplemented(self, factory, message):
        node = factory()
        with pytest.raises(UnimplementedError, match=message):
            node.to()
        with pytest.raises(UnimplementedError, match=message):
            node.from_()

    def test_child_name_prepended_to_path(self):
        attributes = new_attributes(
            {
                "ok": BoolAttribute(),
                "items": ListNestedAttribute(nested_object=NestedAttributeObject()),
            }
        )

        with pytest.raises(UnimplementedError) as exc_info:
            attributes.to_funcs()

        assert exc_info.value.path() == "items"
        assert str(exc_info.value) == "items: list nested type is not yet implemented"

    def test_plans_for_all_children(self):
        attributes = new_attributes({"b": BoolAttribute(), "s": StringAttribute()})

        assert attributes.from_funcs() == {
            "b": ToFromConversion(default="BoolPointerValue"),
            "s": ToFromConversion(default="StringPointerValue"),
        }
