"""
Rust-specific configuration and validation.

Extends the base configuration system with Rust-specific settings.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ...core.config import GeneratorConfig, ConfigError

# Traits the generated enums and helper types may derive
VALID_DERIVES = {
    "Clone",
    "Copy",
    "Debug",
    "Default",
    "Eq",
    "Hash",
    "Ord",
    "PartialEq",
    "PartialOrd",
}

DERIVE_PATHS = {
    "Clone": "::std::clone::Clone",
    "Copy": "::std::marker::Copy",
    "Debug": "::std::fmt::Debug",
    "Default": "::std::default::Default",
    "Eq": "::std::cmp::Eq",
    "Hash": "::std::hash::Hash",
    "Ord": "::std::cmp::Ord",
    "PartialEq": "::std::cmp::PartialEq",
    "PartialOrd": "::std::cmp::PartialOrd",
}

DEFAULT_DERIVES = ("Clone", "Debug", "Eq", "Hash", "Ord", "PartialEq", "PartialOrd")


@dataclass(frozen=True)
class RustMetadata:
    """Derives and visibility rendered in front of a type declaration."""

    derives: Tuple[str, ...] = DEFAULT_DERIVES
    visibility: str = "pub"

    def render(self) -> str:
        """Return the attribute lines and visibility keyword, ending in a space."""
        lines = []
        if self.derives:
            paths = ", ".join(DERIVE_PATHS[d] for d in sorted(self.derives))
            lines.append(f"#[derive({paths})]")
        lines.append(f"{self.visibility} " if self.visibility else "")
        return "\n".join(lines)


class RustConfig:
    """Rust-specific view of a generator configuration."""

    def __init__(self, config: GeneratorConfig):
        """Initialize Rust configuration from generic config."""
        custom = config.custom or {}

        self.derives = tuple(custom.get("derives", DEFAULT_DERIVES))
        self.visibility = custom.get("visibility", "pub")

        # Validate Rust-specific settings
        self._validate_rust_settings()

    def _validate_rust_settings(self):
        """Validate Rust-specific configuration."""
        unknown = [d for d in self.derives if d not in VALID_DERIVES]
        if unknown:
            raise ConfigError(f"Invalid derives: {', '.join(unknown)}")

        # The catch-all owns a String, so no Copy; no variant is #[default]
        for derive in ("Copy", "Default"):
            if derive in self.derives:
                raise ConfigError(f"Enums with an Unknown variant cannot derive {derive}")

        if self.visibility not in {"pub", "pub(crate)"}:
            raise ConfigError(f"Invalid visibility: {self.visibility}")

    def metadata(self) -> RustMetadata:
        """Build the metadata rendered on generated types."""
        return RustMetadata(derives=self.derives, visibility=self.visibility)


# Default configurations for different Rust use cases
SDK_CONFIG: Dict[str, Any] = {
    "module_name": "types",
    "add_comments": True,
    "derives": list(DEFAULT_DERIVES),
}

MINIMAL_CONFIG: Dict[str, Any] = {
    "module_name": "types",
    "add_comments": False,
    "derives": ["Clone", "Debug", "PartialEq"],
}
