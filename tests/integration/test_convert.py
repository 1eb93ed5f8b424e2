#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_convert.py
"""End-to-end tests for md2medium.convert.

These tests run real Markdown through mistune and the Medium renderer and
check the HTML fragment as Medium would receive it.
"""

import re

import pytest

import md2medium
from md2medium import (
    InlineCodeFormat,
    InvalidArgumentError,
    InvalidOptionsError,
    MarkdownParserOptions,
    MediumRendererOptions,
    ValidationError,
    convert,
)


def _pre_blocks(html):
    return re.findall(r"<pre>(.*?)</pre>", html, flags=re.DOTALL)


@pytest.mark.integration
class TestConvertBasics:
    """Basic conversion behaviour."""

    def test_heading_and_emphasis(self):
        html = convert("# Hello World\n\nThis is **bold** and this is *italic*.")
        assert re.search(r"<h1[^>]*>Hello World</h1>", html)
        assert "<strong>bold</strong>" in html
        assert "<em>italic</em>" in html
        assert "**" not in html
        assert "*" not in html

    def test_heading_gets_id(self):
        assert '<h1 id="hello-world">Hello World</h1>' in convert("# Hello World")

    def test_inline_code_italic(self):
        html = convert("Use the `Console.WriteLine()` method.", InlineCodeFormat.ITALIC)
        assert "<em>Console.WriteLine()</em>" in html
        assert "<strong>" not in html
        assert "&quot;" not in html

    def test_inline_code_default(self):
        assert convert("Run `make`") == "<p>Run &quot;make&quot;</p>\n"

    @pytest.mark.parametrize("fmt", ["bold-with-quotes", "BOLD_WITH_QUOTES", "bold_with_quotes"])
    def test_inline_code_format_strings(self, fmt):
        assert convert("`x`", fmt) == "<p><strong>&quot;x&quot;</strong></p>\n"

    def test_inline_code_format_none(self):
        assert convert("`x`", None) == "<p>&quot;x&quot;</p>\n"

    def test_table(self):
        html = convert("| Name | Qty |\n|------|-----|\n| Apple | 3 |\n| Kiwi | 12 |")
        blocks = _pre_blocks(html)
        assert len(blocks) == 1
        lines = blocks[0].split("<br>")
        assert len(lines) == 4
        assert all(line.startswith("|") for line in lines)
        assert lines[1] == "|-------|-----|"
        assert "<table" not in html

    def test_table_with_short_row(self):
        html = convert("| a | b |\n|---|---|\n| 1 |\n")
        assert html == "<pre>| a   | b   | <br>|-----|-----|<br>| 1   |     |</pre>\n"

    def test_table_with_extra_cells(self):
        html = convert("| a | b |\n|---|---|\n| 1 | 2 | 3 |\n")
        assert _pre_blocks(html) == ["| a   | b   | <br>|-----|-----|<br>| 1   | 2   |"]

    def test_table_in_block_quote(self):
        html = convert("> | a | b |\n> |---|---|\n> | 1 | 2 |\n")
        assert "<blockquote>" in html
        assert _pre_blocks(html) == ["| a   | b   | <br>|-----|-----|<br>| 1   | 2   |"]
        assert "|---|---|" not in html

    def test_table_in_list_item(self):
        html = convert("- Prices:\n\n  | a | b |\n  |---|---|\n  | 1 | 2 |\n")
        assert "<li>" in html
        assert _pre_blocks(html) == ["| a   | b   | <br>|-----|-----|<br>| 1   | 2   |"]

    def test_code_block(self):
        html = convert("```python\ndef f():\n\n    return 1\n```")
        assert html == "<pre>def f():<br>&nbsp;<br>    return 1</pre>\n"

    def test_code_block_line_markers(self):
        source_lines = ["a = 1", "", "b = 2", "   ", "c = a < b"]
        html = convert("```\n" + "\n".join(source_lines) + "\n```")
        body = _pre_blocks(html)[0]
        assert body.count("<br>") == len(source_lines) - 1
        assert body.count("&nbsp;") == 2
        assert "c = a &lt; b" in body

    def test_crlf_code_block(self):
        html = convert("```\r\none\r\ntwo\r\n```\r\n")
        assert _pre_blocks(html) == ["one<br>two"]

    def test_soft_breaks_become_br(self):
        assert convert("one\ntwo") == "<p>one<br>\ntwo</p>\n"

    def test_raw_html_is_dropped(self):
        html = convert("<div onclick=\"x()\">raw</div>\n\nText with <b>tag</b>.")
        assert "<div" not in html
        assert "<b>" not in html
        assert "Text with tag." in html

    def test_task_list_and_strikethrough(self):
        html = convert("- [x] ~~old~~ done\n- [ ] next")
        assert "&#9745; <del>old</del> done" in html
        assert "&#9744; next" in html

    def test_autolink(self):
        assert '<a href="https://example.com">https://example.com</a>' in convert("See https://example.com")

    def test_www_autolink(self):
        html = convert("See www.example.com today")
        assert '<a href="http://www.example.com">www.example.com</a>' in html

    def test_footnotes(self):
        html = convert("Claim[^1].\n\n[^1]: Evidence.")
        assert '<sup id="fnref-1"><a href="#fn-1">[1]</a></sup>' in html
        assert '<section class="footnotes">' in html
        assert "Evidence." in html

    def test_footnote_ids_use_lower_case_label(self):
        html = convert("Claim[^src].\n\n[^src]: Evidence.")
        assert '<sup id="fnref-src"><a href="#fn-src">[1]</a></sup>' in html
        assert '<li id="fn-src">' in html

    def test_duplicate_headings(self):
        html = convert("## Setup\n\n## Setup")
        assert 'id="setup"' in html
        assert 'id="setup-2"' in html


@pytest.mark.integration
class TestConvertEdgeCases:
    """Edge cases and argument validation."""

    @pytest.mark.parametrize("markdown", ["", " ", "\n\n", "\t \n"])
    def test_empty_input(self, markdown):
        assert convert(markdown) == ""

    def test_none_input(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            convert(None)
        assert exc_info.value.parameter_name == "markdown"
        assert isinstance(exc_info.value, ValidationError)

    @pytest.mark.parametrize("value", [b"# bytes", 12, ["# list"]])
    def test_non_string_input(self, value):
        with pytest.raises(InvalidArgumentError):
            convert(value)

    def test_unknown_inline_code_format(self):
        with pytest.raises(InvalidArgumentError):
            convert("`x`", "monospace")

    def test_single_character(self):
        assert convert("x") == "<p>x</p>\n"

    def test_malformed_markdown(self):
        html = convert("**unclosed *emphasis [link](")
        assert isinstance(html, str)
        assert html.startswith("<p>")

    def test_lone_surrogate(self):
        html = convert("Bad " + chr(0xD800) + " text")
        assert isinstance(html, str)

    def test_empty_table_cells(self):
        html = convert("| a | b |\n|---|---|\n|   |   |")
        assert _pre_blocks(html)[0].split("<br>")[2] == "|     |     |"

    def test_emoji_table_alignment(self):
        check = chr(0x2705)
        html = convert(f"| Task | Done |\n|------|------|\n| Ship | {check} |\n| Test | no |")
        lines = _pre_blocks(html)[0].split("<br>")
        assert lines[2] == f"| Ship | {check}   | "
        assert lines[3] == "| Test | no   |"


@pytest.mark.integration
class TestConvertOptions:
    """Parser and renderer options passed through convert."""

    def test_renderer_options_format_is_overridden(self):
        options = MediumRendererOptions(inline_code_format=InlineCodeFormat.BOLD)
        assert convert("`x`", InlineCodeFormat.ITALIC, renderer_options=options) == "<p><em>x</em></p>\n"

    def test_renderer_options_are_used(self):
        options = MediumRendererOptions(heading_ids=False, soft_break_as_hard=False)
        assert convert("# T\n\na\nb", renderer_options=options) == "<h1>T</h1>\n<p>a\nb</p>\n"

    def test_html_escape_mode(self):
        options = MediumRendererOptions(html_passthrough_mode="escape")
        assert "&lt;b&gt;" in convert("a <b>x</b>", renderer_options=options)

    def test_parser_options(self):
        html = convert("~~x~~", parser_options=MarkdownParserOptions(parse_strikethrough=False))
        assert "<del>" not in html
        assert "~~x~~" in html

    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError):
            convert("x", parser_options=MediumRendererOptions())  # type: ignore[arg-type]

    def test_wrong_renderer_options_type(self):
        with pytest.raises(InvalidOptionsError):
            convert("x", renderer_options=MarkdownParserOptions())  # type: ignore[arg-type]

    def test_validation_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            convert("x", "not_a_format")


@pytest.mark.integration
class TestPackageExports:
    """Public names exported from the package."""

    def test_version(self):
        assert md2medium.__version__

    @pytest.mark.parametrize(
        "name",
        [
            "convert",
            "InlineCodeFormat",
            "MediumRendererOptions",
            "MarkdownParserOptions",
            "MarkdownToAstConverter",
            "markdown_to_ast",
            "MediumHtmlRenderer",
            "HtmlRenderer",
            "display_width",
            "Md2MediumError",
            "ValidationError",
            "InvalidArgumentError",
            "InvalidOptionsError",
            "ParsingError",
            "RenderingError",
            "DependencyError",
        ],
    )
    def test_exported(self, name):
        assert hasattr(md2medium, name)
        assert name in md2medium.__all__
