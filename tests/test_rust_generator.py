import pytest

from openenum.codegen.core.config import ConfigError, load_config
from openenum.codegen.core.generator import generate_code
from openenum.codegen.core.model import EnumMember, EnumGenerationContext, load_enum_definitions
from openenum.codegen.languages.rust import (
    InfallibleEnumType,
    RustGenerator,
    create_minimal_generator,
    create_rust_generator,
)

DEFAULT_DERIVE = (
    "#[derive(::std::clone::Clone, ::std::fmt::Debug, ::std::cmp::Eq, ::std::hash::Hash, "
    "::std::cmp::Ord, ::std::cmp::PartialEq, ::std::cmp::PartialOrd)]"
)


def generate(document, **config):
    generator = create_rust_generator(config or None)
    return generator.generate(load_enum_definitions(document))


@pytest.fixture
def simple_code():
    return generate({"enums": {"Status": ["inactive", "active"]}})


class TestRustOutput:
    def test_enum_declaration(self, simple_code):
        expected = "\n".join(
            [
                DEFAULT_DERIVE,
                "pub enum Status {",
                "    #[allow(missing_docs)] // documentation missing in model",
                "    Active,",
                "    #[allow(missing_docs)] // documentation missing in model",
                "    Inactive,",
                "    /// `Unknown` contains new variants that have been added since this code was generated.",
                "    Unknown(crate::types::UnknownVariantValue),",
                "}",
            ]
        )
        assert expected in simple_code

    def test_from_impl(self, simple_code):
        expected = "\n".join(
            [
                "impl ::std::convert::From<&str> for Status {",
                "    fn from(s: &str) -> Self {",
                "        match s {",
                '            "active" => Status::Active,',
                '            "inactive" => Status::Inactive,',
                "            other => Status::Unknown(crate::types::UnknownVariantValue(other.to_owned())),",
                "        }",
                "    }",
                "}",
            ]
        )
        assert expected in simple_code

    def test_from_str_is_infallible(self, simple_code):
        assert "impl ::std::str::FromStr for Status {" in simple_code
        assert "    type Err = ::std::convert::Infallible;" in simple_code
        assert "        ::std::result::Result::Ok(Status::from(s))" in simple_code

    def test_as_str_and_values(self, simple_code):
        assert '            Status::Active => "active",' in simple_code
        assert "            Status::Unknown(value) => value.as_str()," in simple_code
        assert "    pub const fn values() -> &'static [&'static str] {" in simple_code
        assert '        &["active", "inactive"]' in simple_code
        assert "impl ::std::convert::AsRef<str> for Status {" in simple_code
        assert "impl ::std::fmt::Display for Status {" in simple_code

    def test_unknown_variant_value(self, simple_code):
        expected = "\n".join(
            [
                DEFAULT_DERIVE,
                "pub struct UnknownVariantValue(pub(crate) String);",
                "impl UnknownVariantValue {",
                "    pub(crate) fn as_str(&self) -> &str {",
                "        &self.0",
                "    }",
                "}",
            ]
        )
        assert expected in simple_code
        assert simple_code.index("pub enum Status") < simple_code.index(
            "pub struct UnknownVariantValue"
        )

    def test_header(self, simple_code):
        assert simple_code.startswith("// Code generated by openenum. DO NOT EDIT.\n")
        assert simple_code.endswith("}\n")

    def test_module_docs_and_no_header(self):
        code = generate({"enums": {"Status": ["a"]}}, module_docs="Storage enums.")
        assert code.startswith("// Code generated by openenum. DO NOT EDIT.\n//! Storage enums.\n")

        bare = generate({"enums": {"Status": ["a"]}}, add_header=False)
        assert "DO NOT EDIT" not in bare


class TestForwardCompatibilityDocs:
    def test_match_example_lists_members_in_order(self, simple_code):
        expected = "\n".join(
            [
                "/// ```text",
                "/// # let status = unimplemented!();",
                "/// match status {",
                "///     Status::Active => { /* ... */ },",
                "///     Status::Inactive => { /* ... */ },",
                '///     other @ _ if other.as_str() == "NewFeature" => { /* handles a case for `NewFeature` */ },',
                "///     _ => { /* ... */ },",
                "/// }",
                "/// ```",
            ]
        )
        assert expected in simple_code
        assert "/// When writing a match expression against `Status`" in simple_code
        assert "/// - It might inadvertently shadow other intended match arms." in simple_code

    def test_placeholder_avoids_existing_members(self):
        code = generate({"enums": {"Feature": ["NewFeature", "NewFeature2", "old"]}})

        assert 'other.as_str() == "NewFeature3"' in code
        assert "Feature::NewFeature3" in code
        assert 'other.as_str() == "NewFeature"' not in code


class TestSchemaDetails:
    def test_documentation_and_deprecation(self, status_document):
        code = generate(status_document)

        assert "/// Lifecycle state of a resource.\n///\n/// When writing" in code
        assert "    /// The resource is live.\n    Active," in code
        assert "    #[deprecated]\n    Retired," in code
        assert "#[allow(deprecated)]\nimpl ::std::convert::From<&str> for Status {" in code
        assert "#[allow(deprecated)]\nimpl Status {" in code

    def test_no_comments(self, status_document):
        code = generate(status_document, add_comments=False)

        assert "Lifecycle state" not in code
        assert "The resource is live." not in code
        assert "    #[allow(missing_docs)] // documentation missing in model\n    Active," in code

    def test_string_escaping(self):
        code = generate({"enums": {"Quote": ['say "hi"\n', "back\\slash"]}})

        assert '"back\\\\slash" => Quote::BackSlash,' in code
        assert '"say \\"hi\\"\\n" => Quote::SayHi,' in code

    def test_unnamed_members_only_in_values(self):
        code = generate({"enums": {"Symbol": ["plus", "***"]}})

        assert '&["***", "plus"]' in code
        assert '"***" =>' not in code
        assert '"plus" => Symbol::Plus,' in code

    def test_catch_all_name_collision(self):
        code = generate({"enums": {"State": ["Unknown", "known"]}})

        assert '"Unknown" => State::UnknownValue,' in code
        assert "    Unknown(crate::types::UnknownVariantValue)," in code

    def test_custom_module_and_visibility(self):
        code = generate(
            {"enums": {"Status": ["a"]}},
            module_name="models",
            visibility="pub(crate)",
            derives=["Clone", "Debug", "PartialEq"],
        )

        assert "Unknown(crate::models::UnknownVariantValue)" in code
        assert (
            "#[derive(::std::clone::Clone, ::std::fmt::Debug, ::std::cmp::PartialEq)]\n"
            "pub(crate) enum Status {"
        ) in code
        assert "pub(crate) struct UnknownVariantValue(pub(crate) String);" in code

    def test_minimal_generator(self):
        generator = create_minimal_generator()
        code = generator.generate(load_enum_definitions({"enums": {"Status": ["a"]}}))
        assert "#[derive(::std::clone::Clone, ::std::fmt::Debug, ::std::cmp::PartialEq)]" in code

    @pytest.mark.parametrize("derive", ["Copy", "Default"])
    def test_unsupported_derives_rejected(self, derive):
        with pytest.raises(ConfigError, match=f"cannot derive {derive}"):
            RustGenerator(load_config("rust", {"derives": ["Clone", derive]}))
        with pytest.raises(ConfigError, match=f"cannot derive {derive}"):
            create_rust_generator({"derives": [derive, "Debug"]})


class TestDeterminism:
    def test_member_order_does_not_matter(self):
        values = ["zeta", "alpha", "Mid", "mid-point", "mid_point", "0day"]
        first = generate({"enums": {"Status": values}})
        second = generate({"enums": {"Status": list(reversed(values))}})
        assert first == second

    def test_repeated_generation_is_identical(self, two_enum_document):
        generator = create_rust_generator()
        enums = load_enum_definitions(two_enum_document)
        assert generator.generate(enums) == generator.generate(enums)

    def test_wrapper_emitted_once(self, two_enum_document):
        code = generate(two_enum_document)

        assert code.count("pub struct UnknownVariantValue") == 1
        assert code.count("Unknown(crate::types::UnknownVariantValue),") == 2
        # Enums are written in type-name order
        assert code.index("pub enum Color") < code.index("pub enum Status")


class TestPolicy:
    def test_fragments_define_wrapper_once(self):
        policy = InfallibleEnumType("types")
        context = EnumGenerationContext.create(
            "Status", [EnumMember("a", derived_name="A")]
        )

        policy.impl_from_for_str(context)
        policy.additional_enum_members(context)

        assert len(policy.registry.definitions("types")) == 1
        assert policy.reserved_variant_names() == ("Unknown",)
        assert policy.additional_as_str_match_arms(context) == (
            "Status::Unknown(value) => value.as_str(),"
        )


class TestGenerateCode:
    def test_result_metadata_and_warnings(self):
        generator = create_rust_generator()
        enums = load_enum_definitions(
            {"enums": {"order_status": ["open", "%%", "retired"], "Feature": ["NewFeature"]}}
        )

        result = generate_code(generator, enums)

        assert result.success
        assert result.metadata == {
            "language": "rust",
            "file_extension": ".rs",
            "module_name": "types",
            "enum_count": 2,
            "member_count": 4,
            "policy": "InfallibleEnumType",
        }
        assert "Enum 'order_status' renamed to OrderStatus" in result.warnings
        assert any("'%%'" in warning for warning in result.warnings)
        assert any("'NewFeature2'" in warning for warning in result.warnings)
        assert "pub enum OrderStatus {" in result.code

    def test_enum_without_identifiers_fails(self):
        result = generate_code(
            create_rust_generator(), load_enum_definitions({"enums": {"Bad": ["!!!", "%"]}})
        )

        assert not result.success
        assert "no member with a usable identifier" in result.error_message
        assert result.code == ""

    def test_invalid_module_name_warns(self):
        generator = create_rust_generator({"module_name": "Bad-Name"})
        warnings = generator.validate_enums(load_enum_definitions({"enums": {"S": ["a"]}}))
        assert any(w.startswith("Module name:") for w in warnings)

    def test_crlf_line_endings(self):
        generator = create_rust_generator({"line_ending": "\r\n"})
        result = generate_code(generator, load_enum_definitions({"enums": {"S": ["a"]}}))
        assert "\r\n" in result.code
        assert "\n" not in result.code.replace("\r\n", "")
