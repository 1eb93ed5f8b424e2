#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_parser.py
"""Unit tests for MarkdownToAstConverter.

Tests cover:
- Block elements (headings, paragraphs, code, quotes, lists, tables)
- Inline elements (emphasis, links, images, breaks, code spans)
- GFM extensions (strikethrough, task lists, autolinks, footnotes)
- Raw HTML tokens
- Input validation and option handling

"""

import pytest

from md2medium.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    Text,
    ThematicBreak,
)
from md2medium.exceptions import InvalidOptionsError, ParsingError, ValidationError
from md2medium.options import MarkdownParserOptions, MediumRendererOptions
from md2medium.parsers.markdown import MarkdownToAstConverter, markdown_to_ast


@pytest.mark.unit
class TestBlockElements:
    """Tests for block-level Markdown constructs."""

    def test_empty_document(self):
        doc = markdown_to_ast("")
        assert isinstance(doc, Document)
        assert doc.children == []

    def test_heading_and_paragraph(self):
        doc = markdown_to_ast("# Hello\n\nThis is **bold**.")
        assert len(doc.children) == 2

        heading = doc.children[0]
        assert isinstance(heading, Heading)
        assert heading.level == 1
        assert heading.content == [Text(content="Hello")]

        paragraph = doc.children[1]
        assert isinstance(paragraph, Paragraph)
        assert isinstance(paragraph.content[1], Strong)
        assert paragraph.content[1].content == [Text(content="bold")]

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_heading_levels(self, level):
        doc = markdown_to_ast("#" * level + " Title")
        assert doc.children[0].level == level

    def test_fenced_code_block(self):
        doc = markdown_to_ast("```python\nprint(1)\n```")
        code = doc.children[0]
        assert isinstance(code, CodeBlock)
        assert code.content == "print(1)\n"
        assert code.language == "python"
        assert code.fenced is True

    def test_fenced_code_info_string(self):
        doc = markdown_to_ast("```js title=app.js\nx()\n```")
        code = doc.children[0]
        assert code.language == "js"
        assert code.metadata["info_string"] == "js title=app.js"

    def test_fenced_code_without_language(self):
        code = markdown_to_ast("```\nplain\n```").children[0]
        assert code.language is None

    def test_indented_code_block(self):
        doc = markdown_to_ast("Intro\n\n    indented code\n")
        code = doc.children[1]
        assert isinstance(code, CodeBlock)
        assert code.fenced is False
        assert code.content.rstrip("\n") == "indented code"

    def test_block_quote(self):
        doc = markdown_to_ast("> quoted *text*")
        quote = doc.children[0]
        assert isinstance(quote, BlockQuote)
        assert isinstance(quote.children[0], Paragraph)
        assert isinstance(quote.children[0].content[1], Emphasis)

    def test_thematic_break(self):
        doc = markdown_to_ast("a\n\n---\n\nb")
        assert isinstance(doc.children[1], ThematicBreak)

    def test_unordered_tight_list(self):
        doc = markdown_to_ast("- one\n- two")
        lst = doc.children[0]
        assert isinstance(lst, List)
        assert lst.ordered is False
        assert lst.tight is True
        assert len(lst.items) == 2
        first = lst.items[0].children[0]
        assert isinstance(first, Paragraph)
        assert first.metadata.get("tight") is True
        assert first.content == [Text(content="one")]

    def test_loose_list(self):
        doc = markdown_to_ast("- one\n\n- two")
        lst = doc.children[0]
        assert lst.tight is False
        assert not lst.items[0].children[0].metadata.get("tight")

    def test_ordered_list_start(self):
        lst = markdown_to_ast("3. three\n4. four").children[0]
        assert lst.ordered is True
        assert lst.start == 3

    def test_ordered_list_default_start(self):
        lst = markdown_to_ast("1. one").children[0]
        assert lst.start == 1

    def test_nested_list(self):
        lst = markdown_to_ast("- outer\n  - inner").children[0]
        nested = lst.items[0].children[1]
        assert isinstance(nested, List)
        assert nested.items[0].children[0].content == [Text(content="inner")]

    def test_html_block(self):
        doc = markdown_to_ast("<div>raw</div>\n\ntext")
        assert isinstance(doc.children[0], HTMLBlock)
        assert "<div>raw</div>" in doc.children[0].content


@pytest.mark.unit
class TestTables:
    """Tests for pipe table parsing."""

    def test_table_structure(self):
        doc = markdown_to_ast("| a | b |\n|---|---|\n| 1 | 2 |\n| 3 | 4 |")
        table = doc.children[0]
        assert isinstance(table, Table)
        assert table.header is not None
        assert table.header.is_header is True
        assert [cell.content for cell in table.header.cells] == [[Text(content="a")], [Text(content="b")]]
        assert len(table.rows) == 2
        assert all(not row.is_header for row in table.rows)
        assert table.rows[1].cells[1].content == [Text(content="4")]

    def test_alignments(self):
        table = markdown_to_ast("| l | c | r | n |\n|:--|:-:|--:|---|\n| 1 | 2 | 3 | 4 |").children[0]
        assert table.alignments == ["left", "center", "right", None]

    def test_inline_content_in_cells(self):
        table = markdown_to_ast("| a |\n|---|\n| `x` **y** |").children[0]
        content = table.rows[0].cells[0].content
        assert isinstance(content[0], Code)
        assert isinstance(content[-1], Strong)

    def test_tables_disabled(self):
        options = MarkdownParserOptions(parse_tables=False)
        doc = markdown_to_ast("| a | b |\n|---|---|\n| 1 | 2 |", options)
        assert not any(isinstance(child, Table) for child in doc.children)

    def test_short_row_is_padded(self):
        table = markdown_to_ast("| a | b |\n|---|---|\n| 1 |\n").children[0]
        assert isinstance(table, Table)
        assert [cell.content for cell in table.rows[0].cells] == [[Text(content="1")], []]

    def test_extra_cells_are_dropped(self):
        table = markdown_to_ast("| a | b |\n|---|---|\n| 1 | 2 | 3 |\n").children[0]
        assert isinstance(table, Table)
        assert [cell.content for cell in table.rows[0].cells] == [[Text(content="1")], [Text(content="2")]]

    def test_padded_cells_keep_column_alignment(self):
        table = markdown_to_ast("| a | b |\n|:--|--:|\n| 1 |\n").children[0]
        assert [cell.alignment for cell in table.rows[0].cells] == ["left", "right"]

    def test_rows_without_outer_pipes(self):
        table = markdown_to_ast("a | b\n--|--\n1 | 2\n3 |\n").children[0]
        assert isinstance(table, Table)
        assert len(table.rows) == 2
        assert table.rows[1].cells[1].content == []

    def test_header_and_delimiter_mismatch_is_not_a_table(self):
        doc = markdown_to_ast("| a | b |\n|---|\n| 1 | 2 |\n")
        assert not any(isinstance(child, Table) for child in doc.children)

    def test_table_in_block_quote(self):
        quote = markdown_to_ast("> | a | b |\n> |---|---|\n> | 1 | 2 |\n").children[0]
        assert isinstance(quote, BlockQuote)
        assert isinstance(quote.children[0], Table)
        assert quote.children[0].rows[0].cells[1].content == [Text(content="2")]

    def test_table_in_list_item(self):
        lst = markdown_to_ast("- Prices:\n\n  | a | b |\n  |---|---|\n  | 1 | 2 |\n").children[0]
        assert isinstance(lst, List)
        tables = [child for child in lst.items[0].children if isinstance(child, Table)]
        assert len(tables) == 1
        assert len(tables[0].rows) == 1


@pytest.mark.unit
class TestInlineElements:
    """Tests for inline Markdown constructs."""

    def _inline(self, markdown):
        return markdown_to_ast(markdown).children[0].content

    def test_emphasis_and_strong(self):
        content = self._inline("*em* and **strong**")
        assert isinstance(content[0], Emphasis)
        assert isinstance(content[2], Strong)

    def test_code_span(self):
        content = self._inline("Use `a < b` here")
        assert content[1] == Code(content="a < b")

    def test_link(self):
        content = self._inline('[site](https://example.com "Title")')
        link = content[0]
        assert isinstance(link, Link)
        assert link.url == "https://example.com"
        assert link.title == "Title"
        assert link.content == [Text(content="site")]

    def test_image(self):
        image = self._inline("![a cat](cat.png)")[0]
        assert isinstance(image, Image)
        assert image.url == "cat.png"
        assert image.alt_text == "a cat"

    def test_soft_break(self):
        content = self._inline("one\ntwo")
        assert content[1] == LineBreak(soft=True)

    def test_hard_break(self):
        content = self._inline("one  \ntwo")
        assert content[1] == LineBreak(soft=False)

    def test_strikethrough(self):
        content = self._inline("~~old~~ new")
        assert isinstance(content[0], Strikethrough)

    def test_strikethrough_disabled(self):
        doc = markdown_to_ast("~~old~~", MarkdownParserOptions(parse_strikethrough=False))
        assert not any(isinstance(node, Strikethrough) for node in doc.children[0].content)

    def test_autolink(self):
        content = self._inline("Visit https://example.com today")
        links = [node for node in content if isinstance(node, Link)]
        assert links and links[0].url == "https://example.com"

    def test_www_autolink(self):
        content = self._inline("Visit www.example.com/docs today")
        links = [node for node in content if isinstance(node, Link)]
        assert len(links) == 1
        assert links[0].url == "http://www.example.com/docs"
        assert links[0].content == [Text(content="www.example.com/docs")]

    def test_www_autolink_leaves_trailing_punctuation(self):
        content = self._inline("See www.example.com.")
        link = next(node for node in content if isinstance(node, Link))
        assert link.url == "http://www.example.com"
        assert content[-1] == Text(content=".")

    def test_www_inside_a_word_stays_text(self):
        content = self._inline("awww.example.com")
        assert not any(isinstance(node, Link) for node in content)

    def test_www_autolink_disabled(self):
        doc = markdown_to_ast("www.example.com", MarkdownParserOptions(parse_autolinks=False))
        assert not any(isinstance(node, Link) for node in doc.children[0].content)

    def test_inline_html(self):
        content = self._inline("a <span>b</span> c")
        assert any(isinstance(node, HTMLInline) for node in content)


@pytest.mark.unit
class TestExtensions:
    """Tests for task lists and footnotes."""

    def test_task_list(self):
        lst = markdown_to_ast("- [x] done\n- [ ] todo\n- plain").children[0]
        assert [item.task_status for item in lst.items] == ["checked", "unchecked", None]
        assert lst.items[0].children[0].content == [Text(content="done")]

    def test_task_lists_disabled(self):
        lst = markdown_to_ast("- [x] done", MarkdownParserOptions(parse_task_lists=False)).children[0]
        assert lst.items[0].task_status is None

    def test_footnotes(self):
        doc = markdown_to_ast("Claim[^src].\n\n[^src]: The source.")
        paragraph = doc.children[0]
        references = [node for node in paragraph.content if isinstance(node, FootnoteReference)]
        assert references[0].identifier == "src"
        assert references[0].metadata["index"] == 1

        definition = doc.children[-1]
        assert isinstance(definition, FootnoteDefinition)
        assert definition.identifier == "src"
        assert definition.metadata["index"] == 1
        assert isinstance(definition.content[0], Paragraph)

    def test_footnote_labels_are_case_insensitive(self):
        doc = markdown_to_ast("Claim[^Src].\n\n[^SRC]: The source.")
        reference = next(node for node in doc.children[0].content if isinstance(node, FootnoteReference))
        definition = doc.children[-1]
        assert reference.identifier == "src"
        assert definition.identifier == "src"


@pytest.mark.unit
class TestParserInputs:
    """Tests for input handling and validation."""

    def test_bytes_input(self):
        doc = MarkdownToAstConverter().parse("# Café".encode("utf-8"))
        assert doc.children[0].content == [Text(content="Café")]

    def test_invalid_utf8(self):
        with pytest.raises(ValidationError):
            MarkdownToAstConverter().parse(b"\xff\xfe\xfa")

    def test_unsupported_input_type(self):
        with pytest.raises(ValidationError):
            MarkdownToAstConverter().parse(42)  # type: ignore[arg-type]

    def test_crlf_input(self):
        doc = markdown_to_ast("# Title\r\n\r\nBody\r\n")
        assert isinstance(doc.children[0], Heading)
        assert doc.children[1].content == [Text(content="Body")]

    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError):
            MarkdownToAstConverter(MediumRendererOptions())  # type: ignore[arg-type]

    def test_mistune_failure_is_wrapped(self, monkeypatch):
        import mistune

        class _BrokenMarkdown:
            def parse(self, text):
                raise RuntimeError("tokenizer exploded")

        monkeypatch.setattr(mistune, "create_markdown", lambda **kwargs: _BrokenMarkdown())
        with pytest.raises(ParsingError) as exc_info:
            markdown_to_ast("text")
        assert exc_info.value.parsing_stage == "tokenization"
        assert isinstance(exc_info.value.original_error, RuntimeError)

    def test_parser_is_reusable(self):
        converter = MarkdownToAstConverter()
        first = converter.parse("Note[^1]\n\n[^1]: one")
        second = converter.parse("plain")
        assert any(isinstance(child, FootnoteDefinition) for child in first.children)
        assert not any(isinstance(child, FootnoteDefinition) for child in second.children)
