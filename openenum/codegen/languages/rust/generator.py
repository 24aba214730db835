"""
Rust code generator implementation.

Generates Rust enums with string conversions from enum definitions.
"""

from typing import Any, Dict, List, Optional

from ....logging_config import get_logger
from ...core.config import GeneratorConfig, load_config
from ...core.enum_type import EnumType
from ...core.generator import CodeGenerator
from ...core.model import EnumDefinition
from ...core.naming import NameSanitizer
from .config import RustConfig, RustMetadata
from .enum_type import InfallibleEnumType
from .naming import create_rust_sanitizer, rust_string_literal, validate_rust_module_name
from .templates import RUST_TEMPLATES

logger = get_logger(__name__)


class RustGenerator(CodeGenerator):
    """Code generator for forward-compatible Rust string enums."""

    doc_prefix = "///"

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        enum_type: Optional[EnumType] = None,
    ):
        """Initialize Rust generator with configuration."""
        config = config or load_config("rust")
        self.rust_config = RustConfig(config)
        super().__init__(config, enum_type)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "rust"

    @property
    def file_extension(self) -> str:
        """Return Rust file extension."""
        return ".rs"

    def get_templates(self) -> Dict[str, str]:
        """Return the Rust templates."""
        return RUST_TEMPLATES

    def create_enum_type(self) -> EnumType:
        """Create the forward-compatible policy writing into this module."""
        return InfallibleEnumType(
            self.module_name, self.inline_registry, self.new_writer
        )

    def create_sanitizer(self) -> NameSanitizer:
        return create_rust_sanitizer()

    def visibility_metadata(self) -> RustMetadata:
        return self.rust_config.metadata()

    def render_header(self) -> str:
        """Render the module header comment."""
        if not self.config.add_header:
            return ""
        context = {"module_docs": self.config.custom.get("module_docs")}
        return self.render_template("module_header.rs.j2", context)

    def generate_single_enum(self, definition: EnumDefinition) -> str:
        """Generate the Rust enum and its impls for a single definition."""
        context = self.build_context(definition)
        enum_type = self.enum_type

        logger.debug(
            "Generating enum %s (%d members)",
            context.type_name,
            len(context.sorted_members),
        )

        enum_context = {
            "docs": self._render_enum_docs(definition, enum_type.additional_docs(context)),
            "metadata": context.visibility_metadata.render(),
            "enum_name": context.type_name,
            "variants": [
                self._variant_data(member) for member in context.named_members
            ],
            "additional_members": enum_type.additional_enum_members(context),
        }

        impl_context = {
            "enum_name": context.type_name,
            "allow_deprecated": any(m.deprecated for m in context.named_members),
            "from_impl": enum_type.impl_from_for_str(context),
            "from_str_impl": enum_type.impl_from_str(context),
            "as_str_arms": [
                f"{context.type_name}::{member.derived_name} => "
                f"{rust_string_literal(member.value)},"
                for member in context.named_members
            ],
            "additional_as_str_arms": enum_type.additional_as_str_match_arms(context),
            "values": [rust_string_literal(m.value) for m in context.sorted_members],
        }

        return "\n\n".join(
            [
                self.render_template("enum.rs.j2", enum_context),
                self.render_template("enum_impl.rs.j2", impl_context),
            ]
        )

    def _render_enum_docs(self, definition: EnumDefinition, additional_docs: str) -> str:
        """Combine the schema documentation with the policy's documentation."""
        writer = self.new_writer()
        if self.config.add_comments and definition.documentation:
            writer.docs(definition.documentation)
            if additional_docs:
                writer.docs()
        if additional_docs:
            writer.write(additional_docs)
        return writer.render()

    def _variant_data(self, member) -> Dict[str, Any]:
        """Build template data for one named member."""
        docs = ""
        if self.config.add_comments and member.documentation:
            docs = self.new_writer().docs(member.documentation).render()
        return {
            "name": member.derived_name,
            "docs": docs,
            "deprecated": member.deprecated,
        }

    def validate_enums(self, enums: List[EnumDefinition]) -> List[str]:
        """Validate enums for Rust generation."""
        warnings = super().validate_enums(enums)

        for error in validate_rust_module_name(self.module_name):
            warnings.append(f"Module name: {error}")

        return warnings


# Factory functions
def create_rust_generator(config: Optional[Dict[str, Any]] = None) -> RustGenerator:
    """Create a Rust generator with default configuration."""
    return RustGenerator(load_config("rust", custom_config=config))


def create_minimal_generator() -> RustGenerator:
    """Create generator without schema documentation and few derives."""
    from .config import MINIMAL_CONFIG

    return create_rust_generator(MINIMAL_CONFIG)
