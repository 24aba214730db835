"""
Rust-specific naming utilities and sanitization.

Handles Rust keywords, prelude names, and naming conventions.
"""

from ...core.naming import NameSanitizer


# Rust strict and reserved keywords
RUST_RESERVED_WORDS = {
    "as",
    "async",
    "await",
    "break",
    "const",
    "continue",
    "crate",
    "dyn",
    "else",
    "enum",
    "extern",
    "false",
    "fn",
    "for",
    "if",
    "impl",
    "in",
    "let",
    "loop",
    "match",
    "mod",
    "move",
    "mut",
    "pub",
    "ref",
    "return",
    "self",
    "Self",
    "static",
    "struct",
    "super",
    "trait",
    "true",
    "type",
    "unsafe",
    "use",
    "where",
    "while",
    # Reserved for future use
    "abstract",
    "become",
    "box",
    "do",
    "final",
    "gen",
    "macro",
    "override",
    "priv",
    "try",
    "typeof",
    "unsized",
    "virtual",
    "yield",
}

# Prelude types and variants that would shadow or confuse generated code
RUST_BUILTIN_TYPES = {
    "option",
    "result",
    "some",
    "none",
    "ok",
    "err",
    "vec",
    "box",
    "string",
}


def create_rust_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Rust."""
    return NameSanitizer(RUST_RESERVED_WORDS, RUST_BUILTIN_TYPES)


def validate_rust_module_name(name: str) -> list[str]:
    """
    Validate a Rust module name.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not name:
        errors.append("Module name cannot be empty")
        return errors

    if not name.isidentifier() or not name.isascii():
        errors.append(f"'{name}' is not a valid Rust identifier")

    if name != name.lower():
        errors.append("Module names should be snake_case")

    if name in RUST_RESERVED_WORDS:
        errors.append(f"'{name}' is a Rust keyword")

    return errors


_RUST_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def rust_string_literal(value: str) -> str:
    """Quote a string as a Rust string literal."""
    escaped = []
    for char in value:
        if char in _RUST_ESCAPES:
            escaped.append(_RUST_ESCAPES[char])
        elif not char.isprintable():
            escaped.append(f"\\u{{{ord(char):x}}}")
        else:
            escaped.append(char)
    return '"' + "".join(escaped) + '"'
