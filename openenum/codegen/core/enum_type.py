"""
Enum generation policies.

An EnumType decides which variants an enum gets beyond one per member,
how strings convert to and from the enum, and what extra documentation
the enum carries. Language generators receive a policy and call its
emission operations while writing the enum; they never decide those
behaviours themselves.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional, Tuple

from .model import EnumGenerationContext, EnumMember

EXAMPLE_VALUE = "NewFeature"


class EnumType(ABC):
    """Abstract strategy for generating a string enum."""

    @abstractmethod
    def additional_enum_members(self, context: EnumGenerationContext) -> str:
        """Return variants to declare after the one-per-member variants."""
        pass

    @abstractmethod
    def impl_from_for_str(self, context: EnumGenerationContext) -> str:
        """Return the string to enum conversion."""
        pass

    @abstractmethod
    def impl_from_str(self, context: EnumGenerationContext) -> str:
        """Return the entry point for the language's generic parsing idiom."""
        pass

    @abstractmethod
    def additional_as_str_match_arms(self, context: EnumGenerationContext) -> str:
        """Return match arms for variants added by this policy."""
        pass

    def additional_docs(self, context: EnumGenerationContext) -> str:
        """Return documentation appended to the enum's doc comment."""
        return ""

    def reserved_variant_names(self) -> Tuple[str, ...]:
        """Variant names member identifiers must not take."""
        return ()

    def example_value(self, members: Iterable[EnumMember]) -> str:
        """Return the placeholder value used in the forward-compatibility docs."""
        return choose_example_value(members)


def choose_example_value(
    members: Iterable[EnumMember],
    base: str = EXAMPLE_VALUE,
    variant_name: Optional[Callable[[str], Optional[str]]] = None,
) -> str:
    """
    Pick the placeholder used in the forward-compatibility example.

    The placeholder must not be a value or variant name of the current
    schema, otherwise the example would describe an existing member.
    ``variant_name`` maps a candidate to the variant name the docs would
    show for it; that name must be free as well.
    """
    taken = set()
    for member in members:
        taken.add(member.value)
        if member.derived_name:
            taken.add(member.derived_name)

    def is_taken(candidate: str) -> bool:
        if candidate in taken:
            return True
        return variant_name is not None and variant_name(candidate) in taken

    candidate = base
    counter = 2
    while is_taken(candidate):
        candidate = f"{base}{counter}"
        counter += 1
    return candidate


def forward_compatibility_intro(type_name: str, artifact: str = "SDK") -> str:
    """Prose explaining why naive matching breaks when the schema grows."""
    return f"""
        When writing a match expression against `{type_name}`, it is important to ensure
        your code is forward-compatible. That is, if a match arm handles a case for a
        feature that is supported by the service but has not been represented as an enum
        variant in a current version of {artifact}, your code should continue to work when you
        upgrade {artifact} to a future version in which the enum does include a variant for that
        feature.
        """


def unknown_variant_caution(unknown_variant: str, unknown_variant_value: str) -> str:
    """Prose discouraging explicit matches on the catch-all variant."""
    return f"""
        Explicitly matching on the `{unknown_variant}` variant should
        be avoided for two reasons:
        - The inner data `{unknown_variant_value}` is opaque, and no further information can be extracted.
        - It might inadvertently shadow other intended match arms.
        """
