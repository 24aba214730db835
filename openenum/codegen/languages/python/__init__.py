"""
Python code generator module.

Generates forward-compatible string enum classes with an ``Unknown``
catch-all constructor.
"""

from .config import PLAIN_CONFIG, TYPED_CONFIG, PythonConfig, PythonMetadata
from .enum_type import InfallibleEnumType
from .generator import PythonGenerator, create_plain_generator, create_python_generator
from .naming import create_python_member_sanitizer, create_python_sanitizer

__all__ = [
    "PythonGenerator",
    "PythonConfig",
    "PythonMetadata",
    "InfallibleEnumType",
    "create_python_sanitizer",
    "create_python_member_sanitizer",
    # Factory functions
    "create_python_generator",
    "create_plain_generator",
    # Presets
    "TYPED_CONFIG",
    "PLAIN_CONFIG",
]
