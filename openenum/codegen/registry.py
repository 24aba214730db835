"""
Generator registry for the supported target languages.

Maps language names and aliases to generator classes and builds
configured generator instances.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from ..logging_config import get_logger
from .core.config import GeneratorConfig, load_config
from .core.generator import CodeGenerator

logger = get_logger(__name__)

ConfigSource = Union[GeneratorConfig, Dict[str, Any], str, Path]


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class GeneratorRegistry:
    """Registry for managing available code generators."""

    def __init__(self):
        """Initialize empty registry."""
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator for a language.

        Args:
            language: Primary language name (e.g., 'rust')
            generator_class: Generator class implementing CodeGenerator
            aliases: Alternative names for this language
            replace: Replace an existing registration instead of keeping it

        Raises:
            RegistryError: If generator class is invalid or an alias conflicts
        """
        if not (isinstance(generator_class, type) and issubclass(generator_class, CodeGenerator)):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        language_key = language.lower()
        if language_key in self._generators and not replace:
            logger.debug("Generator for %s already registered", language_key)
            return

        for alias in aliases or []:
            alias_key = alias.lower()
            if alias_key == language_key:
                continue
            if not replace:
                if alias_key in self._generators:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing primary language"
                    )
                if self._aliases.get(alias_key, language_key) != language_key:
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )
            self._aliases[alias_key] = language_key

        self._generators[language_key] = generator_class

    def unregister(self, language: str):
        """Unregister a generator and its aliases."""
        language_key = self.resolve(language)
        self._generators.pop(language_key, None)
        for alias in [a for a, target in self._aliases.items() if target == language_key]:
            del self._aliases[alias]

    def resolve(self, language: str) -> str:
        """Return the primary name for a language name or alias."""
        language_key = language.lower()
        return self._aliases.get(language_key, language_key)

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        """
        Get generator class for language.

        Raises:
            RegistryError: If language not found
        """
        language_key = self.resolve(language)
        if language_key in self._generators:
            return self._generators[language_key]

        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def create_generator(
        self, language: str, config: Optional[ConfigSource] = None
    ) -> CodeGenerator:
        """
        Create generator instance for language.

        Args:
            language: Language name or alias
            config: Configuration as GeneratorConfig, overrides dict, or JSON file path

        Returns:
            Configured generator instance

        Raises:
            RegistryError: If generator creation fails
        """
        generator_class = self.get_generator_class(language)
        language_key = self.resolve(language)

        try:
            if isinstance(config, GeneratorConfig):
                final_config = config
            elif isinstance(config, (str, Path)):
                final_config = load_config(language_key, config_file=config)
            elif isinstance(config, dict):
                final_config = load_config(language_key, custom_config=config)
            elif config is None:
                final_config = load_config(language_key)
            else:
                raise RegistryError(f"Invalid config type: {type(config)}")

            return generator_class(final_config)

        except RegistryError:
            raise
        except Exception as e:
            raise RegistryError(f"Failed to create {language} generator: {e}") from e

    def list_languages(self) -> List[str]:
        """Get list of registered primary language names."""
        return sorted(self._generators.keys())

    def get_aliases_for_language(self, language: str) -> List[str]:
        """Get all aliases for a specific language."""
        language_key = self.resolve(language)
        return sorted(alias for alias, target in self._aliases.items() if target == language_key)

    def is_supported(self, language: str) -> bool:
        """Check if a language name or alias is registered."""
        return self.resolve(language) in self._generators

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Get information about a registered language.

        Raises:
            RegistryError: If language not found
        """
        language_key = self.resolve(language)
        generator = self.create_generator(language_key)

        return {
            "name": generator.language_name,
            "class": type(generator).__name__,
            "file_extension": generator.file_extension,
            "aliases": self.get_aliases_for_language(language_key),
            "policy": type(generator.enum_type).__name__,
            "module": type(generator).__module__,
        }


# Global registry instance - created once
_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _register_builtin_generators(_global_registry)
    return _global_registry


def _register_builtin_generators(registry: GeneratorRegistry):
    """Register the generators shipped with openenum."""
    from .languages.python import PythonGenerator
    from .languages.rust import RustGenerator

    registry.register("rust", RustGenerator, aliases=["rs"])
    registry.register("python", PythonGenerator, aliases=["py"])


# Public API functions using the global registry


def register_generator(
    language: str,
    generator_class: Type[CodeGenerator],
    aliases: Optional[List[str]] = None,
):
    """Register a generator in the global registry."""
    get_registry().register(language, generator_class, aliases)


def get_generator(language: str, config: Optional[ConfigSource] = None) -> CodeGenerator:
    """Get generator instance from global registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    """List all supported languages from global registry."""
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    """Check if language is supported by global registry."""
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    """Get information about a supported language."""
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Get information about all supported languages."""
    return {
        language: get_language_info(language) for language in list_supported_languages()
    }
