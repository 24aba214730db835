"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ...logging_config import get_logger
from .config import GeneratorConfig, check_config
from .enum_type import EnumType, EXAMPLE_VALUE
from .inline import InlineDefinitionRegistry
from .model import EnumDefinition, EnumGenerationContext
from .naming import NameSanitizer, NamingCase, derive_member_names
from .templates import TemplateEngine, create_template_engine
from .writer import SourceWriter

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    #: Documentation-comment marker used by the source writer
    doc_prefix = "///"

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        enum_type: Optional[EnumType] = None,
    ):
        """
        Initialize generator.

        Args:
            config: Generator configuration
            enum_type: Enum policy; defaults to the language's infallible policy

        Raises:
            ConfigError: If the configuration would produce invalid code
        """
        self.config = config or GeneratorConfig()
        check_config(self.config)
        self.inline_registry = InlineDefinitionRegistry()
        self._template_engine = None
        self._setup_templates()
        self.enum_type = enum_type or self.create_enum_type()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_templates())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'rust', 'python')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.rs', '.py')."""
        pass

    @abstractmethod
    def create_enum_type(self) -> EnumType:
        """Create the default enum policy for this language."""
        pass

    @abstractmethod
    def create_sanitizer(self) -> NameSanitizer:
        """Create a name sanitizer for this language."""
        pass

    def create_member_sanitizer(self) -> NameSanitizer:
        """Create the sanitizer used for member identifiers."""
        return self.create_sanitizer()

    def get_templates(self) -> Dict[str, str]:
        """
        Return the in-memory templates for this generator.

        Subclasses should override this to provide their templates.
        """
        return {}

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @property
    def module_name(self) -> str:
        """Name of the generation unit."""
        return self.config.module_name

    def new_writer(self) -> SourceWriter:
        """Create a source writer following the configured code style."""
        return SourceWriter(
            indent_size=self.config.indent_size,
            use_tabs=self.config.use_tabs,
            doc_prefix=self.doc_prefix,
            template_engine=self.template_engine,
        )

    def visibility_metadata(self) -> Any:
        """Return the rendering hook applied to shared helper types."""
        return None

    def type_name(self, definition: EnumDefinition) -> str:
        """Return the generated type name for an enum."""
        sanitizer = self.create_sanitizer()
        return sanitizer.sanitize_name(
            definition.name, NamingCase(self.config.type_case)
        )

    def build_context(self, definition: EnumDefinition) -> EnumGenerationContext:
        """
        Derive member names and build the generation context for an enum.

        Raises:
            GeneratorError: If no member yields a usable identifier
        """
        members = derive_member_names(
            definition.members,
            self.create_member_sanitizer(),
            NamingCase(self.config.variant_case),
            self.enum_type.reserved_variant_names(),
        )
        context = EnumGenerationContext.create(
            self.type_name(definition), members, self.visibility_metadata()
        )

        if not context.named_members:
            raise GeneratorError(
                f"Enum '{definition.name}' has no member with a usable identifier"
            )

        for member in context.unnamed_members:
            logger.warning(
                "Member %r of %s has no identifier; it is only reachable through "
                "the catch-all variant",
                member.value,
                context.type_name,
            )
        return context

    def generate(self, enums: List[EnumDefinition]) -> str:
        """
        Generate one module containing all enums.

        The module is one generation unit: helper types shared by the
        enums are defined once, after the enums.
        """
        self.inline_registry.reset()
        logger.debug(
            "Generating %s module %s with %d enums",
            self.language_name,
            self.module_name,
            len(enums),
        )

        parts = []
        header = self.render_header()
        if header:
            parts.append(header)

        for definition in enums:
            parts.append(self.generate_single_enum(definition))

        parts.extend(self.inline_registry.definitions(self.module_name))

        footer = self.render_footer(enums)
        if footer:
            parts.append(footer)

        return "\n\n".join(parts) + "\n"

    @abstractmethod
    def generate_single_enum(self, definition: EnumDefinition) -> str:
        """
        Generate code for a single enum.

        Args:
            definition: Enum to generate code for

        Returns:
            Generated code for this enum only
        """
        pass

    def render_header(self) -> str:
        """Return text written before the enums."""
        return ""

    def render_footer(self, enums: List[EnumDefinition]) -> str:
        """Return text written after the enums and shared definitions."""
        return ""

    def validate_enums(self, enums: List[EnumDefinition]) -> List[str]:
        """
        Validate enums for structural issues.

        Args:
            enums: Enums to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        type_names = {}

        for definition in enums:
            type_name = self.type_name(definition)
            if type_name in type_names:
                warnings.append(
                    f"Enums '{type_names[type_name]}' and '{definition.name}' "
                    f"both map to type {type_name}"
                )
            type_names[type_name] = definition.name

            if type_name != definition.name:
                warnings.append(f"Enum '{definition.name}' renamed to {type_name}")

            members = derive_member_names(
                definition.members,
                self.create_member_sanitizer(),
                NamingCase(self.config.variant_case),
                self.enum_type.reserved_variant_names(),
            )
            for member in members:
                if member.derived_name is None:
                    warnings.append(
                        f"Value {member.value!r} of {definition.name} has no identifier "
                        f"and is only representable through the catch-all variant"
                    )
                if member.deprecated:
                    warnings.append(
                        f"Value {member.value!r} of {definition.name} is deprecated"
                    )

            example = self.enum_type.example_value(members)
            if example != EXAMPLE_VALUE:
                warnings.append(
                    f"Enum '{definition.name}' already uses '{EXAMPLE_VALUE}'; "
                    f"documentation example uses {example!r}"
                )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - remove excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        formatted = "\n".join(formatted_lines)
        if self.config.line_ending != "\n":
            formatted = formatted.replace("\n", self.config.line_ending)
        return formatted

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator, enums: List[EnumDefinition]
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        enums: Enums to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_enums(enums)
        code = generator.generate(enums)
        formatted_code = generator.format_code(code)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "module_name": generator.module_name,
            "enum_count": len(enums),
            "member_count": sum(len(d.members) for d in enums),
            "policy": type(generator.enum_type).__name__,
        }

        logger.info(
            "Generated %d enums for %s", len(enums), generator.language_name
        )
        return GenerationResult(formatted_code, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed: %s", e, exc_info=True)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
