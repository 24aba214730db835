"""openenum: forward-compatible string enum code generation."""

__version__ = "0.1.0"
