"""
Rust code generator module.

Generates forward-compatible Rust string enums with an `Unknown`
catch-all variant.
"""

from .config import MINIMAL_CONFIG, SDK_CONFIG, RustConfig, RustMetadata
from .enum_type import InfallibleEnumType
from .generator import RustGenerator, create_minimal_generator, create_rust_generator
from .naming import create_rust_sanitizer

__all__ = [
    "RustGenerator",
    "RustConfig",
    "RustMetadata",
    "InfallibleEnumType",
    "create_rust_sanitizer",
    # Factory functions
    "create_rust_generator",
    "create_minimal_generator",
    # Presets
    "SDK_CONFIG",
    "MINIMAL_CONFIG",
]
