import pytest

from openenum.codegen.core.model import EnumMember
from openenum.codegen.core.naming import NameSanitizer, NamingCase, derive_member_names
from openenum.codegen.languages.python.naming import (
    create_python_member_sanitizer,
    docstring_safe,
    python_string_literal,
)
from openenum.codegen.languages.rust.naming import (
    create_rust_sanitizer,
    rust_string_literal,
    validate_rust_module_name,
)


def derive(values, sanitizer=None, case=NamingCase.PASCAL_CASE, reserved=("Unknown",)):
    members = [v if isinstance(v, EnumMember) else EnumMember(v) for v in values]
    derived = derive_member_names(members, sanitizer or create_rust_sanitizer(), case, reserved)
    return {m.value: m.derived_name for m in derived}


class TestNameSanitizer:
    @pytest.mark.parametrize(
        "name, case, expected",
        [
            ("user-name", NamingCase.PASCAL_CASE, "UserName"),
            ("user name", NamingCase.SNAKE_CASE, "user_name"),
            ("userName", NamingCase.SNAKE_CASE, "user_name"),
            ("HTTPServer", NamingCase.SNAKE_CASE, "http_server"),
            ("in-progress", NamingCase.SCREAMING_SNAKE, "IN_PROGRESS"),
            ("in_progress", NamingCase.CAMEL_CASE, "inProgress"),
        ],
    )
    def test_case_conversion(self, name, case, expected):
        assert NameSanitizer().sanitize_name(name, case) == expected

    def test_reserved_word_gets_suffix(self):
        sanitizer = create_rust_sanitizer()
        assert sanitizer.sanitize_name("type", NamingCase.SNAKE_CASE) == "type_"

    def test_builtin_type_gets_suffix(self):
        sanitizer = create_rust_sanitizer()
        assert sanitizer.sanitize_name("option", NamingCase.PASCAL_CASE) == "Option_"

    def test_leading_digit_gets_prefix(self):
        assert NameSanitizer().sanitize_name("2fa", NamingCase.PASCAL_CASE) == "_2fa"

    def test_no_identifier_characters(self):
        sanitizer = NameSanitizer()
        assert sanitizer.derive_identifier("!!!", NamingCase.PASCAL_CASE) is None
        assert sanitizer.derive_identifier("", NamingCase.PASCAL_CASE) is None
        assert sanitizer.sanitize_name("***", NamingCase.PASCAL_CASE) == "Value"

    def test_repeated_names_are_deduplicated(self):
        sanitizer = NameSanitizer()
        first = sanitizer.derive_identifier("item", NamingCase.PASCAL_CASE)
        second = sanitizer.derive_identifier("item", NamingCase.PASCAL_CASE)
        assert (first, second) == ("Item", "Item_1")

    def test_reset_used_names(self):
        sanitizer = NameSanitizer()
        sanitizer.derive_identifier("item", NamingCase.PASCAL_CASE)
        sanitizer.reset_used_names()
        assert sanitizer.derive_identifier("item", NamingCase.PASCAL_CASE) == "Item"


class TestDeriveMemberNames:
    def test_names_in_canonical_order(self):
        members = derive_member_names(
            [EnumMember("b"), EnumMember("a")], create_rust_sanitizer(), NamingCase.PASCAL_CASE
        )
        assert [(m.value, m.derived_name) for m in members] == [("a", "A"), ("b", "B")]

    def test_catch_all_name_is_renamed(self):
        assert derive(["unknown", "Unknown"]) == {
            "Unknown": "UnknownValue",
            "unknown": "UnknownValue_1",
        }

    def test_duplicates_independent_of_input_order(self):
        forward = derive(["a-b", "a_b", "a b"])
        backward = derive(["a b", "a_b", "a-b"])

        assert forward == backward
        assert forward == {"a b": "AB", "a-b": "AB_1", "a_b": "AB_2"}

    def test_keywords_and_digits(self):
        assert derive(["self", "3d"]) == {"self": "Self_", "3d": "_3d"}

    def test_unnamed_members(self):
        assert derive(["", "!!!", "ok-value"]) == {"": None, "!!!": None, "ok-value": "OkValue"}

    def test_name_hint_takes_precedence(self):
        members = [EnumMember("xl", name="ExtraLarge"), EnumMember("s", name="ExtraLarge")]
        assert derive(members) == {"s": "ExtraLarge", "xl": "ExtraLarge_1"}

    def test_python_member_names(self):
        names = derive(
            ["class", "name", "from_str", "in-progress"],
            sanitizer=create_python_member_sanitizer(),
            case=NamingCase.SNAKE_CASE,
        )
        assert names == {
            "class": "class_",
            "from_str": "from_str_",
            "in-progress": "in_progress",
            "name": "name_",
        }


class TestLiterals:
    def test_rust_string_literal(self):
        assert rust_string_literal('say "hi"\n') == '"say \\"hi\\"\\n"'
        assert rust_string_literal("back\\slash") == '"back\\\\slash"'
        assert rust_string_literal("\x07") == '"\\u{7}"'
        assert rust_string_literal("café") == '"café"'

    def test_python_string_literal(self):
        for value in ['say "hi"\n', "tab\there", "back\\slash", "\x07bell", "café", ""]:
            assert eval(python_string_literal(value)) == value

    def test_docstring_safe(self):
        assert docstring_safe('ends with "quote"') == 'ends with "quote\\"'
        assert docstring_safe('has """ inside') == 'has \\"\\"\\" inside'


@pytest.mark.parametrize(
    "name, errors",
    [
        ("types", 0),
        ("Types", 1),
        ("mod", 1),
        ("my-types", 1),
        ("", 1),
    ],
)
def test_validate_rust_module_name(name, errors):
    assert len(validate_rust_module_name(name)) == errors
