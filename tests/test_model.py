import pytest

from openenum.codegen.core.model import (
    EnumGenerationContext,
    EnumMember,
    SchemaError,
    load_enum_definitions,
    sort_members,
)


class TestLoadEnumDefinitions:
    def test_list_and_object_forms(self, status_document):
        status_document["enums"]["Color"] = ["red", "green"]

        enums = load_enum_definitions(status_document)

        assert [e.name for e in enums] == ["Color", "Status"]
        status = enums[1]
        assert status.documentation == "Lifecycle state of a resource."
        assert [m.value for m in status.members] == ["pending", "active", "retired"]
        assert status.get_member("active").documentation == "The resource is live."
        assert status.get_member("retired").deprecated is True
        assert status.get_member("missing") is None

    def test_name_hint(self):
        enums = load_enum_definitions(
            {"enums": {"Size": [{"value": "xl", "name": "ExtraLarge"}]}}
        )
        member = enums[0].members[0]
        assert member.name == "ExtraLarge"
        assert member.naming_source == "ExtraLarge"

    def test_empty_enums_section(self):
        assert load_enum_definitions({"enums": {}}) == []

    @pytest.mark.parametrize(
        "document, message",
        [
            ([], "must be a JSON object"),
            ({}, "no 'enums' section"),
            ({"enums": []}, "must map type names"),
            ({"enums": {"Status": []}}, "has no members"),
            ({"enums": {"Status": ["a", "a"]}}, "duplicate value"),
            ({"enums": {"Status": [1]}}, "string or object"),
            ({"enums": {"Status": [{"value": 1}]}}, "non-string value"),
            ({"enums": {"Status": [{"name": "A"}]}}, "missing 'value'"),
            ({"enums": {"Status": {"documentation": "x"}}}, "missing 'members'"),
            ({"enums": {"Status": "active"}}, "must be a list or object"),
        ],
    )
    def test_invalid_documents(self, document, message):
        with pytest.raises(SchemaError, match=message):
            load_enum_definitions(document)


class TestGenerationContext:
    def test_members_sorted_by_value(self):
        members = [EnumMember("b"), EnumMember("a"), EnumMember("C")]

        context = EnumGenerationContext.create("Letters", members)

        assert [m.value for m in context.sorted_members] == ["C", "a", "b"]

    def test_sort_is_stable_and_repeatable(self):
        members = [EnumMember("z"), EnumMember("m"), EnumMember("a")]
        assert sort_members(members) == sort_members(reversed(members))

    def test_named_and_unnamed_members(self):
        members = [
            EnumMember("a", derived_name="A"),
            EnumMember("!!", derived_name=None),
        ]

        context = EnumGenerationContext.create("Mixed", members)

        assert [m.value for m in context.named_members] == ["a"]
        assert [m.value for m in context.unnamed_members] == ["!!"]


def test_with_derived_name_returns_copy():
    member = EnumMember("active")
    named = member.with_derived_name("Active")

    assert member.derived_name is None
    assert named.derived_name == "Active"
    assert named.value == "active"
