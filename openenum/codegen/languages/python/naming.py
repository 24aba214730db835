"""
Python-specific naming utilities and sanitization.

Handles Python keywords, builtins, and names owned by the generated classes.
"""

from ...core.naming import NameSanitizer


# Python reserved keywords
PYTHON_RESERVED_WORDS = {
    "False",
    "None",
    "True",
    "and",
    "as",
    "assert",
    "async",
    "await",
    "break",
    "class",
    "continue",
    "def",
    "del",
    "elif",
    "else",
    "except",
    "finally",
    "for",
    "from",
    "global",
    "if",
    "import",
    "in",
    "is",
    "lambda",
    "nonlocal",
    "not",
    "or",
    "pass",
    "raise",
    "return",
    "try",
    "while",
    "with",
    "yield",
}

# Python built-in types and functions that generated type names must not shadow
PYTHON_BUILTIN_TYPES = {
    "int",
    "float",
    "str",
    "bool",
    "list",
    "dict",
    "set",
    "tuple",
    "bytes",
    "bytearray",
    "frozenset",
    "range",
    "object",
    "type",
    "complex",
    "memoryview",
    "property",
    "staticmethod",
    "classmethod",
    "super",
    "len",
    "print",
    "open",
    "hash",
    "repr",
    "format",
    "iter",
    "next",
    "slice",
    "callable",
}

# Attributes of generated enum classes that member constants must not replace
PYTHON_ENUM_ATTRIBUTES = {
    "from_str",
    "parse",
    "as_str",
    "values",
    "name",
    "_name",
    "_value",
}


def create_python_sanitizer() -> NameSanitizer:
    """Create a name sanitizer for Python type names."""
    return NameSanitizer(PYTHON_RESERVED_WORDS, PYTHON_BUILTIN_TYPES)


def create_python_member_sanitizer() -> NameSanitizer:
    """Create a name sanitizer for enum member constants."""
    return NameSanitizer(PYTHON_RESERVED_WORDS | PYTHON_ENUM_ATTRIBUTES)


_PYTHON_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def python_string_literal(value: str) -> str:
    """Quote a string as a double-quoted Python string literal."""
    escaped = []
    for char in value:
        if char in _PYTHON_ESCAPES:
            escaped.append(_PYTHON_ESCAPES[char])
        elif not char.isprintable():
            code = ord(char)
            if code <= 0xFF:
                escaped.append(f"\\x{code:02x}")
            elif code <= 0xFFFF:
                escaped.append(f"\\u{code:04x}")
            else:
                escaped.append(f"\\U{code:08x}")
        else:
            escaped.append(char)
    return '"' + "".join(escaped) + '"'


def docstring_safe(text: str) -> str:
    """Escape text for embedding in a triple-quoted docstring."""
    text = text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
    # A trailing quote would merge with the closing delimiter
    if text.endswith('"'):
        text = text[:-1] + '\\"'
    return text
