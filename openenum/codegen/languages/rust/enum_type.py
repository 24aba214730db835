"""
Forward-compatible enum policy for Rust.

Enums generated with this policy have an ``Unknown`` variant that keeps
values added to the schema after the code was generated, so converting
from a string never fails.
"""

from typing import Callable, Optional, Tuple

from ...core.enum_type import (
    EnumType,
    forward_compatibility_intro,
    unknown_variant_caution,
)
from ...core.inline import InlineDefinitionRegistry, TypeReference
from ...core.model import EnumGenerationContext, EnumMember
from ...core.naming import NamingCase
from ...core.writer import SourceWriter
from .naming import create_rust_sanitizer, rust_string_literal

FROM = "::std::convert::From"


class InfallibleEnumType(EnumType):
    """Infallible enums have an `Unknown` variant and can't fail to parse."""

    #: Name of the generated unknown enum member name for enums with named members.
    UNKNOWN_VARIANT = "Unknown"

    #: Name of the opaque struct that is inner data for the generated unknown variant.
    UNKNOWN_VARIANT_VALUE = "UnknownVariantValue"

    def __init__(
        self,
        unknown_variant_module: str,
        registry: Optional[InlineDefinitionRegistry] = None,
        writer_factory: Optional[Callable[[], SourceWriter]] = None,
    ):
        """
        Initialize the policy.

        Args:
            unknown_variant_module: Module that holds the shared wrapper type
            registry: Registry deduplicating the wrapper per module
            writer_factory: Creates writers for emitted fragments
        """
        self.unknown_variant_module = unknown_variant_module
        self.registry = registry or InlineDefinitionRegistry()
        self._writer_factory = writer_factory or SourceWriter

    def _writer(self) -> SourceWriter:
        return self._writer_factory()

    def reserved_variant_names(self) -> Tuple[str, ...]:
        return (self.UNKNOWN_VARIANT,)

    def impl_from_for_str(self, context: EnumGenerationContext) -> str:
        writer = self._writer()
        writer.write_template(
            """
            impl {{ From }}<&str> for {{ enum_name }} {
                fn from(s: &str) -> Self {
                    match s {
            {{ match_arms | indent(12) }}
                    }
                }
            }
            """,
            From=FROM,
            enum_name=context.type_name,
            match_arms=self._from_match_arms(context),
        )
        return writer.render()

    def _from_match_arms(self, context: EnumGenerationContext) -> str:
        writer = self._writer()
        enum_name = context.type_name
        for member in context.named_members:
            writer.write(
                f"{rust_string_literal(member.value)} => {enum_name}::{member.derived_name},"
            )
        unknown_value = self.unknown_variant_value(context).qualified()
        writer.write(
            f"other => {enum_name}::{self.UNKNOWN_VARIANT}({unknown_value}(other.to_owned())),"
        )
        return writer.render()

    def impl_from_str(self, context: EnumGenerationContext) -> str:
        writer = self._writer()
        enum_name = context.type_name
        with writer.block(f"impl ::std::str::FromStr for {enum_name} {{"):
            writer.write("type Err = ::std::convert::Infallible;")
            writer.blank()
            with writer.block(
                "fn from_str(s: &str) -> ::std::result::Result<Self, "
                "<Self as ::std::str::FromStr>::Err> {"
            ):
                writer.write(f"::std::result::Result::Ok({enum_name}::from(s))")
        return writer.render()

    def additional_docs(self, context: EnumGenerationContext) -> str:
        writer = self._writer()
        self._render_forward_compatibility_note(
            writer,
            context.type_name,
            context.sorted_members,
            self.UNKNOWN_VARIANT,
            self.UNKNOWN_VARIANT_VALUE,
        )
        return writer.render()

    def additional_enum_members(self, context: EnumGenerationContext) -> str:
        writer = self._writer()
        writer.docs(
            f"`{self.UNKNOWN_VARIANT}` contains new variants that have been added "
            f"since this code was generated."
        )
        unknown_value = self.unknown_variant_value(context).qualified()
        writer.write(f"{self.UNKNOWN_VARIANT}({unknown_value}),")
        return writer.render()

    def additional_as_str_match_arms(self, context: EnumGenerationContext) -> str:
        return f"{context.type_name}::{self.UNKNOWN_VARIANT}(value) => value.as_str(),"

    def unknown_variant_value(self, context: EnumGenerationContext) -> TypeReference:
        """Return the shared wrapper type, defining it on first request."""
        return self.registry.get_or_define(
            self.unknown_variant_module,
            self.UNKNOWN_VARIANT_VALUE,
            lambda: self._render_unknown_variant_value(context),
        )

    def _render_unknown_variant_value(self, context: EnumGenerationContext) -> str:
        writer = self._writer()
        writer.docs(
            f"""
            Opaque struct used as inner data for the `{self.UNKNOWN_VARIANT}` variant defined in enums in
            the crate

            While this is not intended to be used directly, it is marked as `pub` because it is
            part of the enums that are public interface.
            """
        )
        metadata = context.visibility_metadata.render() if context.visibility_metadata else "pub "
        writer.write(f"{metadata}struct {self.UNKNOWN_VARIANT_VALUE}(pub(crate) String);")
        with writer.block(f"impl {self.UNKNOWN_VARIANT_VALUE} {{"):
            # pub(crate): code outside the crate must not read the wrapped string
            with writer.block("pub(crate) fn as_str(&self) -> &str {"):
                writer.write("&self.0")
        return writer.render()

    def _render_forward_compatibility_note(
        self,
        writer: SourceWriter,
        enum_name: str,
        sorted_members: Tuple[EnumMember, ...],
        unknown_variant: str,
        unknown_variant_value: str,
    ):
        """
        Generate the rustdoc describing how to write a match expression against a
        generated enum in a forward-compatible way.
        """
        binding = create_rust_sanitizer().sanitize_name(enum_name, NamingCase.SNAKE_CASE)
        example = self.example_value(sorted_members)

        writer.docs(forward_compatibility_intro(enum_name))
        writer.docs()
        writer.docs("Here is an example of how you can make a match expression forward-compatible:")
        writer.docs()
        writer.docs("```text")
        writer.docs(f"# let {binding} = unimplemented!();")
        writer.docs(f"match {binding} {{")
        for member in sorted_members:
            if member.derived_name:
                writer.docs(f"    {enum_name}::{member.derived_name} => {{ /* ... */ }},")
        writer.docs(
            f'    other @ _ if other.as_str() == "{example}" => '
            f"{{ /* handles a case for `{example}` */ }},"
        )
        writer.docs("    _ => { /* ... */ },")
        writer.docs("}")
        writer.docs("```")
        writer.docs(
            f"""
            The above code demonstrates that when `{binding}` represents
            `{example}`, the execution path will lead to the second last match arm,
            even though the enum does not contain a variant `{enum_name}::{example}`
            in the current version of SDK. The reason is that the variable `other`,
            created by the `@` operator, is bound to
            `{enum_name}::{unknown_variant}({unknown_variant_value}("{example}".to_owned()))`
            and calling `as_str` on it yields `"{example}"`.
            This match expression is forward-compatible when executed with a newer
            version of SDK where the variant `{enum_name}::{example}` is defined.
            Specifically, when `{binding}` represents `{example}`,
            the execution path will hit the second last match arm as before by virtue of
            calling `as_str` on `{enum_name}::{example}` also yielding `"{example}"`.
            """
        )
        writer.docs()
        writer.docs(unknown_variant_caution(unknown_variant, unknown_variant_value))
