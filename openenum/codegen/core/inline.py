"""
Registry of definitions shared across the enums of one generation unit.

Enum policies request helper types (such as the catch-all wrapper) through
this registry. Each (module, name) pair is rendered at most once.
"""

import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from ...logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TypeReference:
    """Reference to a type defined in a generated module."""

    name: str
    module: str

    def qualified(self, separator: str = "::", prefix: str = "crate") -> str:
        """Return the fully qualified path of the type."""
        parts = [p for p in (prefix, self.module, self.name) if p]
        return separator.join(parts)


class InlineDefinitionRegistry:
    """Memoizing registry of inline type definitions keyed by module."""

    def __init__(self):
        """Initialize empty registry."""
        self._definitions: Dict[Tuple[str, str], str] = {}
        self._lock = threading.RLock()

    def get_or_define(
        self, module: str, name: str, render: Callable[[], str]
    ) -> TypeReference:
        """
        Return a reference to ``name`` in ``module``, rendering it if needed.

        Args:
            module: Generation unit the definition belongs to
            name: Type name
            render: Produces the definition source, called at most once

        Returns:
            Reference to the (possibly pre-existing) definition
        """
        key = (module, name)
        with self._lock:
            if key not in self._definitions:
                self._definitions[key] = render()
                logger.debug("Registered inline definition %s in %s", name, module)
        return TypeReference(name=name, module=module)

    def is_defined(self, module: str, name: str) -> bool:
        """Check if a definition has been registered."""
        with self._lock:
            return (module, name) in self._definitions

    def definitions(self, module: str) -> List[str]:
        """Get the definitions of a module in registration order."""
        with self._lock:
            return [
                source
                for (def_module, _), source in self._definitions.items()
                if def_module == module
            ]

    def reset(self):
        """Forget all definitions, starting a new generation unit."""
        with self._lock:
            self._definitions.clear()
