"""
Python code generator implementation.

Generates forward-compatible string enum classes for Python 3.10+.
The classes are plain classes rather than ``enum.Enum`` subclasses,
since ``Enum`` cannot hold instances for values unknown at class
creation time.
"""

from typing import Any, Dict, List, Optional

from ....logging_config import get_logger
from ...core.config import GeneratorConfig, load_config
from ...core.enum_type import EnumType
from ...core.generator import CodeGenerator, GeneratorError
from ...core.model import EnumDefinition
from ...core.naming import NameSanitizer, NamingCase
from .config import PythonConfig, PythonMetadata
from .enum_type import InfallibleEnumType
from .naming import (
    create_python_member_sanitizer,
    create_python_sanitizer,
    docstring_safe,
    python_string_literal,
)
from .templates import PYTHON_TEMPLATES

logger = get_logger(__name__)

DEFAULT_SUMMARY = "String enum that tolerates values added after generation."


class PythonGenerator(CodeGenerator):
    """Code generator for forward-compatible Python string enums."""

    doc_prefix = ""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        enum_type: Optional[EnumType] = None,
    ):
        """Initialize Python generator with configuration."""
        config = config or load_config("python")
        self.python_config = PythonConfig(config)
        super().__init__(config, enum_type)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "python"

    @property
    def file_extension(self) -> str:
        """Return Python file extension."""
        return ".py"

    def get_templates(self) -> Dict[str, str]:
        """Return the Python templates."""
        return PYTHON_TEMPLATES

    def create_enum_type(self) -> EnumType:
        """Create the forward-compatible policy writing into this module."""
        return InfallibleEnumType(
            self.module_name,
            self.inline_registry,
            self.new_writer,
            NamingCase(self.config.variant_case),
        )

    def create_sanitizer(self) -> NameSanitizer:
        return create_python_sanitizer()

    def create_member_sanitizer(self) -> NameSanitizer:
        return create_python_member_sanitizer()

    def visibility_metadata(self) -> PythonMetadata:
        return self.python_config.metadata()

    def render_header(self) -> str:
        """Render the module docstring and imports."""
        # The imports are emitted even without the header comment
        imports = {"ClassVar"}
        imports.update(self.python_config.metadata().typing_imports())
        docs = self.config.custom.get("module_docs") if self.config.add_header else None
        context = {
            "add_header": self.config.add_header,
            "module_docs": docstring_safe(docs) if docs else None,
            "typing_imports": sorted(imports),
        }
        return self.render_template("module_header.py.j2", context)

    def render_footer(self, enums: List[EnumDefinition]) -> str:
        """Render ``__all__`` listing the enums and the shared wrapper."""
        exports = [self.type_name(definition) for definition in enums]
        wrapper = InfallibleEnumType.UNKNOWN_VARIANT_VALUE
        if self.inline_registry.is_defined(self.module_name, wrapper):
            exports.append(wrapper)
        return self.render_template("footer.py.j2", {"exports": exports})

    def generate_single_enum(self, definition: EnumDefinition) -> str:
        """Generate the Python class for a single definition."""
        context = self.build_context(definition)
        enum_type = self.enum_type

        logger.debug(
            "Generating class %s (%d members)",
            context.type_name,
            len(context.sorted_members),
        )

        if not isinstance(enum_type, InfallibleEnumType):
            raise GeneratorError(
                f"Python generator does not support policy {type(enum_type).__name__}"
            )

        class_context = {
            "metadata": context.visibility_metadata.render(),
            "enum_name": context.type_name,
            "summary": self._summary(definition),
            "docs": self._render_class_docs(definition, enum_type.additional_docs(context)),
            "variants": [self._variant_data(member) for member in context.named_members],
            "unknown_value": enum_type.unknown_variant_value(context).name,
            "unknown_variant": enum_type.UNKNOWN_VARIANT,
            "additional_members": enum_type.additional_enum_members(context),
            "from_impl": enum_type.impl_from_for_str(context),
            "from_str_impl": enum_type.impl_from_str(context),
            "additional_as_str_arms": enum_type.additional_as_str_match_arms(context),
            "values": [python_string_literal(m.value) for m in context.sorted_members],
        }
        return self.render_template("class.py.j2", class_context)

    def _summary(self, definition: EnumDefinition) -> str:
        if self.config.add_comments and definition.documentation:
            first_line = definition.documentation.strip().split("\n")[0]
            return docstring_safe(first_line)
        return DEFAULT_SUMMARY

    def _render_class_docs(self, definition: EnumDefinition, additional_docs: str) -> str:
        """Combine the remaining schema documentation with the policy's documentation."""
        writer = self.new_writer()
        rest = ""
        if self.config.add_comments and definition.documentation:
            rest = "\n".join(definition.documentation.strip().split("\n")[1:]).strip()
        if rest:
            writer.docs(docstring_safe(rest))
            if additional_docs:
                writer.docs()
        if additional_docs:
            writer.write(additional_docs)
        return writer.render()

    def _variant_data(self, member) -> Dict[str, Any]:
        """Build template data for one named member."""
        docs = ""
        if self.config.add_comments and member.documentation:
            docs = " ".join(member.documentation.split())
        if member.deprecated:
            docs = f"Deprecated. {docs}".strip()
        return {
            "name": member.derived_name,
            "name_literal": python_string_literal(member.derived_name),
            "value": python_string_literal(member.value),
            "docs": docstring_safe(docs) if docs else "",
        }

    def validate_enums(self, enums: List[EnumDefinition]) -> List[str]:
        """Validate enums for Python generation."""
        warnings = super().validate_enums(enums)

        if not self.module_name.isidentifier():
            warnings.append(f"Module name: '{self.module_name}' is not a valid identifier")

        return warnings


# Factory functions
def create_python_generator(config: Optional[Dict[str, Any]] = None) -> PythonGenerator:
    """Create a Python generator with default configuration."""
    return PythonGenerator(load_config("python", custom_config=config))


def create_plain_generator() -> PythonGenerator:
    """Create generator that emits classes without decorators."""
    from .config import PLAIN_CONFIG

    return create_python_generator(PLAIN_CONFIG)
