"""
Core code generation components.

Provides the enum model, enum policies and base classes used by all
language generators.
"""

from .config import ConfigError, ConfigManager, GeneratorConfig, check_config, load_config
from .enum_type import EnumType, choose_example_value
from .generator import CodeGenerator, GenerationResult, GeneratorError, generate_code
from .inline import InlineDefinitionRegistry, TypeReference
from .model import (
    EnumDefinition,
    EnumGenerationContext,
    EnumMember,
    SchemaError,
    load_enum_definitions,
    sort_members,
)
from .naming import NameSanitizer, NamingCase, derive_member_names
from .templates import TemplateEngine, TemplateError, create_template_engine
from .writer import SourceWriter

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Enum model
    "EnumMember",
    "EnumDefinition",
    "EnumGenerationContext",
    "SchemaError",
    "load_enum_definitions",
    "sort_members",
    # Enum policies
    "EnumType",
    "choose_example_value",
    "InlineDefinitionRegistry",
    "TypeReference",
    # Naming utilities - language-agnostic
    "NameSanitizer",
    "NamingCase",
    "derive_member_names",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "check_config",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    "SourceWriter",
]
