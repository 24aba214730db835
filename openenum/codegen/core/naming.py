"""
Naming utilities for safe code generation.

Handles name sanitization, case conversions, keyword conflicts,
and derivation of enum member identifiers from wire values.
"""

import re
from typing import Dict, Iterable, Optional, Set, Tuple
from enum import Enum

from .model import EnumMember


class NamingCase(Enum):
    """Different naming case styles."""
    SNAKE_CASE = "snake"      # user_name
    CAMEL_CASE = "camel"      # userName
    PASCAL_CASE = "pascal"    # UserName
    SCREAMING_SNAKE = "screaming_snake"  # USER_NAME


class NameSanitizer:
    """Handles name sanitization and case conversion."""

    def __init__(self, reserved_words: Set[str] = None, builtin_types: Set[str] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            builtin_types: Set of builtin type names that might conflict
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()
        self._name_cache: Dict[str, str] = {}
        self._used_names: Set[str] = set()

    def sanitize_name(self, name: str, target_case: NamingCase = NamingCase.SNAKE_CASE,
                      suffix_on_conflict: str = "_") -> str:
        """
        Sanitize a name for safe use in target language.

        Falls back to ``value`` when nothing usable is left of the name.

        Args:
            name: Original name to sanitize
            target_case: Desired case style
            suffix_on_conflict: Suffix to add for conflicts

        Returns:
            Sanitized name safe for use
        """
        derived = self.derive_identifier(name, target_case, suffix_on_conflict)
        if derived is None:
            derived = self._resolve_conflicts(
                self._convert_case("value", target_case), suffix_on_conflict
            )
            self._used_names.add(derived)
        return derived

    def derive_identifier(self, name: str, target_case: NamingCase = NamingCase.SNAKE_CASE,
                          suffix_on_conflict: str = "_") -> Optional[str]:
        """
        Derive an identifier from arbitrary text.

        Returns:
            Sanitized name, or None if the text holds no letter or digit
        """
        cache_key = f"{name}_{target_case.value}"
        if cache_key in self._name_cache:
            converted = self._name_cache[cache_key]
        else:
            # Step 1: Basic cleanup
            cleaned = self._clean_basic(name)

            # Step 2: Convert to target case
            converted = self._convert_case(cleaned, target_case) if cleaned else ""

            # Identifiers cannot start with a digit
            if converted and converted[0].isdigit():
                converted = f"_{converted}"
            self._name_cache[cache_key] = converted

        if not converted:
            return None

        # Step 3: Handle conflicts; every call claims a fresh name
        final_name = self._resolve_conflicts(converted, suffix_on_conflict)
        self._used_names.add(final_name)

        return final_name

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - remove invalid characters."""
        # Replace anything but ASCII alphanumerics, underscore and hyphen
        cleaned = re.sub(r'[^a-zA-Z0-9_-]', '_', name)

        # Remove leading/trailing underscores and hyphens
        cleaned = cleaned.strip('_-')

        # Nothing alphanumeric survived
        if not re.search(r'[a-zA-Z0-9]', cleaned):
            return ""

        return cleaned

    def _convert_case(self, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.SNAKE_CASE:
            return self._to_snake_case(name)
        elif target_case == NamingCase.CAMEL_CASE:
            return self._to_camel_case(name)
        elif target_case == NamingCase.PASCAL_CASE:
            return self._to_pascal_case(name)
        elif target_case == NamingCase.SCREAMING_SNAKE:
            return self._to_snake_case(name).upper()
        else:
            return name

    def _to_snake_case(self, name: str) -> str:
        """Convert to snake_case."""
        # Replace hyphens with underscores
        name = name.replace('-', '_')

        # Insert underscore before uppercase letters
        name = re.sub(r'([a-z0-9])([A-Z])', r'\1_\2', name)
        # Split acronyms followed by a word: HTTPServer -> HTTP_Server
        name = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1_\2', name)

        # Convert to lowercase and clean up multiple underscores
        name = name.lower()
        name = re.sub(r'_+', '_', name)

        return name.strip('_')

    def _to_camel_case(self, name: str) -> str:
        """Convert to camelCase."""
        snake = self._to_snake_case(name)
        parts = snake.split('_')

        if not parts:
            return name

        # First part lowercase, rest title case
        return parts[0].lower() + ''.join(part.capitalize() for part in parts[1:])

    def _to_pascal_case(self, name: str) -> str:
        """Convert to PascalCase."""
        snake = self._to_snake_case(name)
        parts = snake.split('_')

        return ''.join(part.capitalize() for part in parts if part)

    def _resolve_conflicts(self, name: str, suffix: str) -> str:
        """Resolve naming conflicts with reserved words and existing names."""
        # Check reserved words and builtin types
        if name in self.reserved_words or name.lower() in self.builtin_types:
            name = f"{name}{suffix}"

        original_name = name

        # Check for duplicates
        counter = 1
        while name in self._used_names:
            if suffix == "_":
                name = f"{original_name}{suffix}{counter}"
            else:
                name = f"{original_name}{counter}"
            counter += 1

        return name

    def reset_used_names(self):
        """Reset the tracking of used names and the name cache."""
        self._used_names.clear()
        self._name_cache.clear()

    def add_used_name(self, name: str):
        """Manually add a name to the used names set."""
        self._used_names.add(name)


def derive_member_names(
    members: Iterable[EnumMember],
    sanitizer: NameSanitizer,
    target_case: NamingCase = NamingCase.PASCAL_CASE,
    reserved_names: Iterable[str] = (),
) -> Tuple[EnumMember, ...]:
    """
    Assign derived identifiers to enum members.

    Names are assigned in canonical order, so conflict suffixes do not
    depend on the order the schema listed the members in. A name that
    collides with a reserved name (such as the catch-all variant) gets
    ``Value`` appended. Members whose text yields no identifier keep
    ``derived_name=None``.

    Args:
        members: Members of one enum
        sanitizer: Language sanitizer, reset before use
        target_case: Case style for member identifiers
        reserved_names: Identifiers the enum policy owns

    Returns:
        Members in canonical order with derived names set
    """
    reserved = set(reserved_names)
    sanitizer.reset_used_names()
    for name in reserved:
        sanitizer.add_used_name(name)

    derived = []
    for member in sorted(members, key=lambda m: m.value):
        source = member.naming_source
        candidate = sanitizer.derive_identifier(source, target_case)
        if candidate is not None and _collides_with_reserved(candidate, reserved):
            candidate = sanitizer.derive_identifier(f"{source}_value", target_case)
        derived.append(member.with_derived_name(candidate))

    return tuple(derived)


def _collides_with_reserved(candidate: str, reserved: Set[str]) -> bool:
    """Check whether a conflict suffix was added because of a reserved name."""
    for name in reserved:
        if candidate == name or re.fullmatch(re.escape(name) + r"_\d+", candidate):
            return True
    return False
