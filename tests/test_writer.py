import pytest

from openenum.codegen.core.templates import TemplateError, create_template_engine
from openenum.codegen.core.writer import SourceWriter


class TestSourceWriter:
    def test_write_dedents_multiline_text(self):
        writer = SourceWriter()
        writer.write(
            """
            fn main() {
                run();
            }
            """
        )
        assert writer.render() == "fn main() {\n    run();\n}"

    def test_block_indents_body(self):
        writer = SourceWriter()
        with writer.block("impl Foo {"):
            with writer.block("fn bar() {"):
                writer.write("baz();")
        assert writer.render() == "impl Foo {\n    fn bar() {\n        baz();\n    }\n}"

    def test_indentation_only_block(self):
        writer = SourceWriter(indent_size=2)
        with writer.block("if x:", closer=None):
            writer.write("pass")
        assert writer.render() == "if x:\n  pass"

    def test_tabs(self):
        writer = SourceWriter(use_tabs=True)
        with writer.indented():
            writer.write("x")
        assert writer.render() == "\tx"

    def test_docs_prefix_and_blank_lines(self):
        writer = SourceWriter()
        writer.docs("First line.")
        writer.docs()
        writer.docs("Second\nparagraph.")
        assert writer.render() == "/// First line.\n///\n/// Second\n/// paragraph."

    def test_docs_without_prefix(self):
        writer = SourceWriter(doc_prefix="")
        with writer.indented():
            writer.docs("Docstring line.")
            writer.docs()
        assert writer.render() == "    Docstring line.\n"

    def test_write_template_slots(self):
        writer = SourceWriter()
        with writer.indented():
            writer.write_template(
                """
                impl {{ trait }} for {{ name }} {
                {{ body | indent(4) }}
                }
                """,
                trait="Display",
                name="Status",
                body="fn fmt() {}",
            )
        assert writer.render() == (
            "    impl Display for Status {\n        fn fmt() {}\n    }"
        )

    def test_blank_lines_carry_no_indentation(self):
        writer = SourceWriter()
        with writer.indented():
            writer.write("a\n\nb")
        assert writer.render() == "    a\n\n    b"


class TestTemplateEngine:
    def test_no_html_escaping(self):
        engine = create_template_engine()
        assert engine.render_string("{{ code }}", {"code": "&'static <str>"}) == "&'static <str>"

    def test_undefined_variables_fail(self):
        engine = create_template_engine()
        with pytest.raises(TemplateError):
            engine.render_string("{{ missing }}", {})

    def test_named_templates(self):
        engine = create_template_engine({"greet.j2": "hello {{ name }}"})
        assert engine.render_template("greet.j2", {"name": "world"}) == "hello world"

    def test_missing_template(self):
        with pytest.raises(TemplateError, match="nope.j2"):
            create_template_engine().render_template("nope.j2", {})

    def test_comment_filter(self):
        engine = create_template_engine()
        rendered = engine.render_string('{{ text | comment("//!") }}', {"text": "a\n\nb"})
        assert rendered == "//! a\n//!\n//! b"

