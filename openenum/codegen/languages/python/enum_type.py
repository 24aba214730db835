"""
Forward-compatible enum policy for Python.

Mirrors the Rust policy: generated classes get an ``Unknown`` variant
wrapping values the schema did not know about at generation time.
"""

from typing import Callable, Iterable, Optional, Tuple

from ...core.enum_type import (
    EnumType,
    choose_example_value,
    forward_compatibility_intro,
    unknown_variant_caution,
)
from ...core.inline import InlineDefinitionRegistry, TypeReference
from ...core.model import EnumGenerationContext, EnumMember
from ...core.naming import NamingCase
from ...core.writer import SourceWriter
from .naming import create_python_member_sanitizer, create_python_sanitizer, python_string_literal


class InfallibleEnumType(EnumType):
    """Infallible enums have an `Unknown` variant and can't fail to parse."""

    UNKNOWN_VARIANT = "Unknown"
    UNKNOWN_VARIANT_VALUE = "UnknownVariantValue"

    def __init__(
        self,
        unknown_variant_module: str,
        registry: Optional[InlineDefinitionRegistry] = None,
        writer_factory: Optional[Callable[[], SourceWriter]] = None,
        variant_case: NamingCase = NamingCase.SCREAMING_SNAKE,
    ):
        self.unknown_variant_module = unknown_variant_module
        self.registry = registry or InlineDefinitionRegistry()
        self._writer_factory = writer_factory or (lambda: SourceWriter(doc_prefix=""))
        self.variant_case = variant_case

    def _writer(self) -> SourceWriter:
        return self._writer_factory()

    def reserved_variant_names(self) -> Tuple[str, ...]:
        return (self.UNKNOWN_VARIANT,)

    def example_value(self, members: Iterable[EnumMember]) -> str:
        return choose_example_value(members, variant_name=self._future_variant)

    def _future_variant(self, value: str) -> str:
        return create_python_member_sanitizer().sanitize_name(value, self.variant_case)

    def impl_from_for_str(self, context: EnumGenerationContext) -> str:
        unknown_value = self.unknown_variant_value(context).name
        writer = self._writer()
        writer.write("@classmethod")
        with writer.block(f"def from_str(cls, s: str) -> {context.type_name}:", closer=None):
            writer.write(
                f'"""Convert ``s`` to a ``{context.type_name}``; '
                f'unrecognized values become ``{self.UNKNOWN_VARIANT}``."""'
            )
            with writer.block("match s:", closer=None):
                for member in context.named_members:
                    with writer.block(
                        f"case {python_string_literal(member.value)}:", closer=None
                    ):
                        writer.write(f"return cls.{member.derived_name}")
                with writer.block("case other:", closer=None):
                    writer.write(
                        f"return cls.{self.UNKNOWN_VARIANT}({unknown_value}(other))"
                    )
        return writer.render()

    def impl_from_str(self, context: EnumGenerationContext) -> str:
        writer = self._writer()
        writer.write("@classmethod")
        with writer.block(f"def parse(cls, s: str) -> {context.type_name}:", closer=None):
            writer.write(
                f'''
                """Parse ``s`` into a ``{context.type_name}``.

                This operation cannot fail: it never raises.
                """
                return cls.from_str(s)
                '''
            )
        return writer.render()

    def additional_enum_members(self, context: EnumGenerationContext) -> str:
        unknown_value = self.unknown_variant_value(context).name
        writer = self._writer()
        writer.write("@classmethod")
        with writer.block(
            f"def {self.UNKNOWN_VARIANT}(cls, value: {unknown_value}) -> {context.type_name}:",
            closer=None,
        ):
            writer.write(
                f'"""``{self.UNKNOWN_VARIANT}`` contains new variants that have been '
                f'added since this code was generated."""'
            )
            writer.write(f"return cls({python_string_literal(self.UNKNOWN_VARIANT)}, value)")
        return writer.render()

    def additional_as_str_match_arms(self, context: EnumGenerationContext) -> str:
        unknown_value = self.unknown_variant_value(context).name
        writer = self._writer()
        with writer.block(f"case {unknown_value}() as value:", closer=None):
            writer.write("return value._as_str()")
        return writer.render()

    def additional_docs(self, context: EnumGenerationContext) -> str:
        enum_name = context.type_name
        binding = create_python_sanitizer().sanitize_name(enum_name, NamingCase.SNAKE_CASE)
        example = self.example_value(context.sorted_members)
        future_variant = self._future_variant(example)
        unknown_value = self.UNKNOWN_VARIANT_VALUE

        writer = self._writer()
        writer.docs(forward_compatibility_intro(enum_name, artifact="the generated code"))
        writer.docs()
        writer.docs("Here is an example of how you can make a match statement forward-compatible::")
        writer.docs()
        with writer.indented():
            with writer.block(f"match {binding}:", closer=None):
                for member in context.named_members:
                    with writer.block(f"case {enum_name}.{member.derived_name}:", closer=None):
                        writer.docs("...")
                with writer.block(f'case other if other.as_str() == "{example}":', closer=None):
                    writer.docs(f"# handles a case for `{example}`")
                    writer.docs("...")
                with writer.block("case _:", closer=None):
                    writer.docs("...")
        writer.docs()
        writer.docs(
            f"""
            The above code demonstrates that when `{binding}` represents
            `"{example}"`, the execution path will lead to the second last case,
            even though the class does not define a variant `{enum_name}.{future_variant}`
            in the current version of the generated code. The reason is that the
            variable `other` is bound to
            `{enum_name}.{self.UNKNOWN_VARIANT}({unknown_value}("{example}"))`
            and calling `as_str` on it returns `"{example}"`.
            The same match statement keeps working once the code is regenerated from a
            schema where `{enum_name}.{future_variant}` is defined: calling `as_str` on
            `{enum_name}.{future_variant}` also returns `"{example}"`, so the execution
            path still hits the second last case.
            """
        )
        writer.docs()
        writer.docs(unknown_variant_caution(self.UNKNOWN_VARIANT, unknown_value))
        return writer.render()

    def unknown_variant_value(self, context: EnumGenerationContext) -> TypeReference:
        """Return the shared wrapper class, defining it on first request."""
        return self.registry.get_or_define(
            self.unknown_variant_module,
            self.UNKNOWN_VARIANT_VALUE,
            lambda: self._render_unknown_variant_value(context),
        )

    def _render_unknown_variant_value(self, context: EnumGenerationContext) -> str:
        name = self.UNKNOWN_VARIANT_VALUE
        metadata = context.visibility_metadata.render() if context.visibility_metadata else ""

        writer = self._writer()
        writer.write(f"{metadata}class {name}:")
        with writer.indented():
            writer.write(
                f'''
                """Opaque value used as inner data for the ``{self.UNKNOWN_VARIANT}`` variant of
                enums in this module.

                While this is not intended to be used directly, it is public because it is
                part of the enums that are public interface. Instances are created only by
                the enums' ``from_str``; calling the constructor is internal to this module
                and not part of the public interface.
                """

                __slots__ = ("_value",)

                def __init__(self, value: str) -> None:
                    self._value = value
                '''
            )
            writer.blank()
            with writer.block("def _as_str(self) -> str:", closer=None):
                writer.write("# Private: code outside this module must not read the wrapped string")
                writer.write("return self._value")
            writer.blank()
            writer.write(
                f'''
                def __eq__(self, other: object) -> bool:
                    if not isinstance(other, {name}):
                        return NotImplemented
                    return self._value == other._value

                def __hash__(self) -> int:
                    return hash(self._value)

                def __repr__(self) -> str:
                    return f"{name}({{self._value!r}})"
                '''
            )
        return writer.render()
