"""
openenum code generation module.

Generates forward-compatible string enums in various languages from
enum schema documents.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from .core.config import ConfigManager, GeneratorConfig, load_config
from .core.generator import CodeGenerator, GenerationResult, GeneratorError, generate_code
from .core.model import EnumDefinition, EnumMember, SchemaError, load_enum_definitions
from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    get_registry,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
)


def generate_from_document(
    document: Dict[str, Any],
    language: str = "rust",
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> GenerationResult:
    """
    Generate code from an enum schema document.

    Args:
        document: Parsed schema document (``{"enums": {...}}``)
        language: Target language name or alias
        config: Generator configuration, overrides dict, or JSON file path

    Returns:
        GenerationResult with generated code

    Raises:
        SchemaError: If the document is malformed
        RegistryError: If the language is unknown or the config is invalid
    """
    enums = load_enum_definitions(document)
    generator = get_generator(language, config)
    return generate_code(generator, enums)


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "EnumDefinition",
    "EnumMember",
    "SchemaError",
    "GeneratorConfig",
    "ConfigManager",
    "load_config",
    "load_enum_definitions",
    "generate_code",
    "generate_from_document",
    "get_generator",
    "get_registry",
    "get_language_info",
    "is_language_supported",
    "list_all_language_info",
    "list_supported_languages",
]
