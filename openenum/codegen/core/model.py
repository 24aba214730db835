"""
Core enum model for code generation.

Converts a schema document into a normalized internal format
that generators and enum policies can work with consistently.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ...logging_config import get_logger

logger = get_logger(__name__)


class SchemaError(Exception):
    """Exception raised when a schema document describes an invalid enum."""

    pass


@dataclass(frozen=True)
class EnumMember:
    """One permitted value of a string enumeration."""

    value: str  # Literal wire value
    name: Optional[str] = None  # Explicit name hint from the schema
    documentation: Optional[str] = None
    deprecated: bool = False

    # Generated identifier, None when no valid identifier could be derived
    derived_name: Optional[str] = None

    @property
    def naming_source(self) -> str:
        """Return the text the member identifier is derived from."""
        return self.name if self.name else self.value

    def with_derived_name(self, derived_name: Optional[str]) -> "EnumMember":
        """Return a copy of this member carrying the given identifier."""
        return replace(self, derived_name=derived_name)


@dataclass(frozen=True)
class EnumDefinition:
    """Schema-level description of a string enumeration."""

    name: str
    members: Tuple[EnumMember, ...] = field(default_factory=tuple)
    documentation: Optional[str] = None

    def get_member(self, value: str) -> Optional[EnumMember]:
        """Get member by wire value."""
        for member in self.members:
            if member.value == value:
                return member
        return None


def sort_members(members: Iterable[EnumMember]) -> Tuple[EnumMember, ...]:
    """Sort members into canonical order (stable, by value)."""
    return tuple(sorted(members, key=lambda member: member.value))


@dataclass(frozen=True)
class EnumGenerationContext:
    """
    Generation-time parameters handed to an enum policy.

    Members are kept in canonical order so that every emission step sees
    the same sequence and regenerated output is byte-identical.
    """

    type_name: str
    sorted_members: Tuple[EnumMember, ...]
    visibility_metadata: Any = None

    @classmethod
    def create(
        cls,
        type_name: str,
        members: Iterable[EnumMember],
        visibility_metadata: Any = None,
    ) -> "EnumGenerationContext":
        """Build a context, sorting members into canonical order."""
        return cls(
            type_name=type_name,
            sorted_members=sort_members(members),
            visibility_metadata=visibility_metadata,
        )

    @property
    def named_members(self) -> Tuple[EnumMember, ...]:
        """Members that receive a variant of their own, in canonical order."""
        return tuple(m for m in self.sorted_members if m.derived_name)

    @property
    def unnamed_members(self) -> Tuple[EnumMember, ...]:
        """Members only representable through the catch-all variant."""
        return tuple(m for m in self.sorted_members if not m.derived_name)


def validate_members(type_name: str, members: Iterable[EnumMember]) -> None:
    """
    Validate the member list of an enum before generation.

    Raises:
        SchemaError: If the list is empty or contains duplicate values
    """
    seen = set()
    count = 0

    for member in members:
        count += 1
        if not isinstance(member.value, str):
            raise SchemaError(
                f"Enum '{type_name}' has a non-string value: {member.value!r}"
            )
        if member.value in seen:
            raise SchemaError(
                f"Enum '{type_name}' has duplicate value: {member.value!r}"
            )
        seen.add(member.value)

    if count == 0:
        raise SchemaError(f"Enum '{type_name}' has no members")


def _convert_member(type_name: str, raw: Any) -> EnumMember:
    """Convert one raw member entry to an EnumMember."""
    if isinstance(raw, str):
        return EnumMember(value=raw)

    if not isinstance(raw, dict):
        raise SchemaError(
            f"Enum '{type_name}' member must be a string or object, got {type(raw).__name__}"
        )

    if "value" not in raw:
        raise SchemaError(f"Enum '{type_name}' member is missing 'value': {raw!r}")

    value = raw["value"]
    if not isinstance(value, str):
        raise SchemaError(f"Enum '{type_name}' has a non-string value: {value!r}")

    return EnumMember(
        value=value,
        name=raw.get("name"),
        documentation=raw.get("documentation"),
        deprecated=bool(raw.get("deprecated", False)),
    )


def convert_enum_entry(type_name: str, entry: Any) -> EnumDefinition:
    """
    Convert one enum entry of a schema document to an EnumDefinition.

    Args:
        type_name: Name of the enum type
        entry: Either a list of members or an object with 'members'

    Returns:
        Validated enum definition
    """
    documentation = None

    if isinstance(entry, list):
        raw_members = entry
    elif isinstance(entry, dict):
        if "members" not in entry:
            raise SchemaError(f"Enum '{type_name}' is missing 'members'")
        raw_members = entry["members"]
        documentation = entry.get("documentation")
        if not isinstance(raw_members, list):
            raise SchemaError(f"Enum '{type_name}' members must be a list")
    else:
        raise SchemaError(
            f"Enum '{type_name}' must be a list or object, got {type(entry).__name__}"
        )

    members = tuple(_convert_member(type_name, raw) for raw in raw_members)
    validate_members(type_name, members)

    logger.debug("Loaded enum %s with %d members", type_name, len(members))
    return EnumDefinition(
        name=type_name, members=members, documentation=documentation
    )


def load_enum_definitions(document: Dict[str, Any]) -> List[EnumDefinition]:
    """
    Convert a schema document to enum definitions.

    The document looks like::

        {"enums": {"Status": {"documentation": "...", "members": [...]}}}

    Args:
        document: Parsed JSON schema document

    Returns:
        Enum definitions sorted by type name
    """
    if not isinstance(document, dict):
        raise SchemaError("Schema document must be a JSON object")

    enums = document.get("enums")
    if enums is None:
        raise SchemaError("Schema document has no 'enums' section")
    if not isinstance(enums, dict):
        raise SchemaError("'enums' must map type names to enum definitions")
    if not enums:
        logger.warning("Schema document defines no enums")

    return [convert_enum_entry(name, enums[name]) for name in sorted(enums)]
