"""Tests for the Markdown Transformer and Jinja2 filters."""

import pytest

from doxbook.exceptions import CommentSyntaxError, ExtractionError, RenderError
from doxbook.parsers import parse_comments
from doxbook.transformers.filters import escape_table_cell, format_types, heading_signature
from doxbook.transformers.markdown_transformer import MarkdownTransformer
from schemas.source import ExtractedDocument, SourceFile


class TestFormatTypes:
    """Tests for the format_types filter."""

    def test_single_type(self):
        assert format_types(["String"]) == "`String`"

    def test_union_is_escaped_for_tables(self):
        """Union members are joined by an escaped pipe."""
        assert format_types(["Element", "String"]) == "`Element` \\| `String`"

    def test_empty(self):
        assert format_types([]) == ""
        assert format_types(None) == ""


class TestEscapeTableCell:
    """Tests for the escape_table_cell filter."""

    def test_escapes_pipes_and_collapses_lines(self):
        assert escape_table_cell("a | b\nc") == "a \\| b c"

    def test_empty(self):
        assert escape_table_cell("") == ""


class TestHeadingSignature:
    """Tests for the heading_signature filter."""

    def test_function_lists_params(self, valid_source):
        block = parse_comments(valid_source)[1]
        assert heading_signature(block) == "Widget(name, options)"

    def test_method_keeps_receiver(self, valid_source):
        block = parse_comments(valid_source)[2]
        assert heading_signature(block) == "Widget.prototype.render(target)"

    def test_skips_dotted_param_names(self):
        """options.x style params document fields, not arguments."""
        source = (
            "/**\n * Open.\n * @param {Object} options\n"
            " * @param {Number} options.port\n */\nfunction open(options) {}\n"
        )
        block = parse_comments(source)[0]
        assert heading_signature(block) == "open(options)"

    def test_property_uses_context_string(self):
        block = parse_comments("/** Defaults. */\nWidget.defaults = {};\n")[0]
        assert heading_signature(block) == "Widget.defaults"

    def test_no_context_uses_summary(self, valid_source):
        block = parse_comments(valid_source)[0]
        assert heading_signature(block) == "Widget module."


class TestMarkdownTransformer:
    """Tests for MarkdownTransformer."""

    @pytest.fixture
    def transformer(self):
        return MarkdownTransformer()

    def test_transform_returns_document_for_source_path(self, transformer, valid_source):
        """The document keeps the source path and holds UTF-8 Markdown."""
        source = SourceFile(contents=valid_source.encode("utf-8"), path="lib/widget.js")

        document = transformer.transform(source)

        assert isinstance(document, ExtractedDocument)
        assert document.path == "lib/widget.js"
        assert document.contents.decode("utf-8").startswith("# widget\n")

    def test_renders_headings_descriptions_params_and_returns(self, transformer, valid_source):
        markdown = transformer.render(parse_comments(valid_source), title="widget")

        assert "### `Widget(name, options)`" in markdown
        assert "### `Widget.prototype.render(target)`" in markdown
        assert "Create a widget." in markdown
        assert "Widgets render themselves into a target element." in markdown
        assert "| parameter | type | description |" in markdown
        assert "| `name` | `String` | widget name |" in markdown
        assert "| `target` | `Element` \\| `String` | where to render |" in markdown
        assert "**Returns** `Widget`, this instance" in markdown

    def test_block_without_context_renders_description_only(self, transformer, valid_source):
        markdown = transformer.render(parse_comments(valid_source))

        assert "Widget module." in markdown
        assert "### `Widget module.`" not in markdown

    def test_private_and_ignored_blocks_are_skipped(self, transformer, valid_source):
        source = valid_source + "\n/**\n * Hidden thing.\n * @ignore\n */\nfunction hidden() {}\n"
        markdown = transformer.render(parse_comments(source))

        assert "Internal helper." not in markdown
        assert "helper()" not in markdown
        assert "Hidden thing." not in markdown

    def test_title_is_optional(self, valid_source):
        transformer = MarkdownTransformer(include_title=False)
        source = SourceFile(contents=valid_source.encode("utf-8"), path="widget.js")

        markdown = transformer.transform(source).contents.decode("utf-8")

        assert not markdown.startswith("# ")
        assert markdown.startswith("Widget module.")

    def test_source_without_comments_renders_title_only(self, transformer):
        source = SourceFile(contents=b"var a = 1;\n", path="plain.js")
        assert transformer.transform(source).contents == b"# plain\n"

    def test_nothing_to_render(self, transformer):
        assert transformer.render([]) == ""

    def test_ends_with_single_newline(self, transformer, valid_source):
        markdown = transformer.render(parse_comments(valid_source), title="widget")
        assert markdown.endswith("\n")
        assert not markdown.endswith("\n\n")

    def test_malformed_comment_raises(self, transformer, unterminated_source):
        source = SourceFile(contents=unterminated_source.encode("utf-8"), path="b.js")
        with pytest.raises(CommentSyntaxError):
            transformer.transform(source)

    def test_binary_source_raises(self, transformer):
        source = SourceFile(contents=b"\xff\xfe\x00bad", path="blob.js")

        with pytest.raises(ExtractionError) as exc_info:
            transformer.transform(source)

        assert exc_info.value.path == "blob.js"

    def test_missing_template_raises_render_error(self, tmp_path, valid_source):
        transformer = MarkdownTransformer(template_name="missing.md.j2", templates_dir=tmp_path)
        with pytest.raises(RenderError):
            transformer.render(parse_comments(valid_source))

    def test_custom_template(self, tmp_path, valid_source):
        (tmp_path / "names.md.j2").write_text(
            "{% for c in comments %}{{ c.description.summary }}\n{% endfor %}"
        )
        transformer = MarkdownTransformer(template_name="names.md.j2", templates_dir=tmp_path)

        markdown = transformer.render(parse_comments(valid_source))

        assert markdown == "Widget module.\nCreate a widget.\nRender the widget.\n"
