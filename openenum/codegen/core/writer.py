"""
Source writer used by generators and enum policies.

Collects lines of generated source with indentation management,
a documentation-comment mode, and Jinja2-rendered templates with
named substitution slots.
"""

import textwrap
from contextlib import contextmanager
from typing import Iterator, List, Optional

from .templates import TemplateEngine, create_template_engine


class SourceWriter:
    """Accumulates generated source text."""

    def __init__(
        self,
        indent_size: int = 4,
        use_tabs: bool = False,
        doc_prefix: str = "///",
        template_engine: Optional[TemplateEngine] = None,
    ):
        """
        Initialize an empty writer.

        Args:
            indent_size: Spaces per indentation level
            use_tabs: Indent with tabs instead of spaces
            doc_prefix: Marker written before documentation lines
            template_engine: Engine used by write_template
        """
        self.indent_unit = "\t" if use_tabs else " " * indent_size
        self.doc_prefix = doc_prefix
        self._engine = template_engine
        self._lines: List[str] = []
        self._level = 0

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine, creating a bare one on first use."""
        if self._engine is None:
            self._engine = create_template_engine()
        return self._engine

    def write(self, text: str = "") -> "SourceWriter":
        """
        Write literal text at the current indentation.

        Multi-line text is dedented first, so triple-quoted blocks can be
        written with the indentation of the calling code.
        """
        text = textwrap.dedent(text).strip("\n") if "\n" in text else text
        prefix = self.indent_unit * self._level
        for line in text.split("\n"):
            self._lines.append(f"{prefix}{line}" if line.strip() else "")
        return self

    def write_template(self, template: str, **slots) -> "SourceWriter":
        """Render a Jinja2 template string with named slots and write it."""
        rendered = self.template_engine.render_string(textwrap.dedent(template), slots)
        return self.write(rendered.strip("\n"))

    def docs(self, text: str = "") -> "SourceWriter":
        """Write text in documentation-comment mode."""
        text = textwrap.dedent(text).strip("\n") if "\n" in text else text
        prefix = self.indent_unit * self._level
        for line in text.split("\n"):
            if self.doc_prefix:
                doc_line = f"{self.doc_prefix} {line}" if line else self.doc_prefix
            else:
                doc_line = line
            self._lines.append(f"{prefix}{doc_line}" if doc_line else "")
        return self

    def blank(self) -> "SourceWriter":
        """Write an empty line."""
        self._lines.append("")
        return self

    @contextmanager
    def indented(self) -> Iterator["SourceWriter"]:
        """Increase indentation for the duration of the block."""
        self._level += 1
        try:
            yield self
        finally:
            self._level -= 1

    @contextmanager
    def block(self, header: str, closer: Optional[str] = "}") -> Iterator["SourceWriter"]:
        """
        Write ``header``, an indented body and ``closer``.

        For brace languages the header should end with ``{``; pass
        ``closer=None`` for indentation-only blocks.
        """
        self.write(header)
        with self.indented():
            yield self
        if closer is not None:
            self.write(closer)

    def render(self) -> str:
        """Return the accumulated source."""
        return "\n".join(self._lines)

    def __str__(self) -> str:
        return self.render()
