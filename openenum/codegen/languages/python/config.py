"""
Python-specific configuration.

Decorators applied to generated classes and the typing imports they need.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ...core.config import ConfigError, GeneratorConfig

# Decorators the generator knows how to import
DECORATOR_IMPORTS = {
    "final": "final",
    "typing.final": "final",
}


@dataclass(frozen=True)
class PythonMetadata:
    """Decorators rendered in front of a class declaration."""

    decorators: Tuple[str, ...] = ("final",)

    def render(self) -> str:
        """Return decorator lines, ending in a newline when not empty."""
        return "".join(f"@{DECORATOR_IMPORTS[d]}\n" for d in self.decorators)

    def typing_imports(self) -> Tuple[str, ...]:
        """Names imported from typing for the decorators."""
        return tuple(sorted({DECORATOR_IMPORTS[d] for d in self.decorators}))


class PythonConfig:
    """Python-specific view of a generator configuration."""

    def __init__(self, config: GeneratorConfig):
        """Initialize Python configuration from generic config."""
        custom = config.custom or {}
        self.decorators = tuple(custom.get("decorators", ("final",)))
        self._validate_python_settings()

    def _validate_python_settings(self):
        """Validate Python-specific configuration."""
        unknown = [d for d in self.decorators if d not in DECORATOR_IMPORTS]
        if unknown:
            raise ConfigError(f"Unsupported decorators: {', '.join(unknown)}")

    def metadata(self) -> PythonMetadata:
        """Build the metadata rendered on generated classes."""
        return PythonMetadata(decorators=self.decorators)


# Preset configurations
TYPED_CONFIG: Dict[str, Any] = {
    "module_name": "types",
    "decorators": ["final"],
}

PLAIN_CONFIG: Dict[str, Any] = {
    "module_name": "types",
    "decorators": [],
}
