#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/parsers/markdown.py
"""Markdown parsing on top of mistune 3."""

from __future__ import annotations

import logging
from typing import Any, Union

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
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    TaskStatus,
    Text,
    ThematicBreak,
)
from md2medium.constants import DEPS_MARKDOWN
from md2medium.exceptions import ParsingError
from md2medium.options.markdown import MarkdownParserOptions
from md2medium.parsers.base import BaseParser
from md2medium.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


class MarkdownToAstConverter(BaseParser):
    r"""Parse Markdown with mistune and build the md2medium document tree.

    mistune runs in AST mode (``renderer=None``); its token dicts are mapped
    onto node classes by the ``_block_*`` and ``_inline_*`` methods below.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Which GitHub-flavoured extensions to enable

    Examples
    --------
        >>> doc = MarkdownToAstConverter().parse("# Hello\\n\\nThis is **bold**.")
        >>> [type(node).__name__ for node in doc.children]
        ['Heading', 'Paragraph']

    """

    options_class = MarkdownParserOptions
    parser_name = "markdown"

    def __init__(self, options: MarkdownParserOptions | None = None):
        super().__init__(options)
        self.options: MarkdownParserOptions

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: Union[str, bytes]) -> Document:
        """Parse Markdown input into AST Document.

        Parameters
        ----------
        input_data : str or bytes
            Markdown text, or UTF-8 encoded bytes

        Returns
        -------
        Document
            AST document node. Footnote definitions, if any, are the last
            children, in order of first reference.

        Raises
        ------
        ParsingError
            If mistune fails on the input

        """
        markdown_content = self._load_text_content(input_data)

        import mistune

        plugins = self.options.get_plugins()
        logger.debug(f"Parsing {len(markdown_content)} characters of Markdown with plugins {plugins}")

        # A fresh parser per call; mistune keeps per-document state on it
        markdown = mistune.create_markdown(plugins=plugins, renderer=None)

        try:
            tokens, _state = markdown.parse(markdown_content)
        except Exception as e:
            raise ParsingError(
                f"Failed to parse Markdown: {e}", parsing_stage="tokenization", original_error=e
            ) from e

        children = self._process_tokens(tokens)
        logger.debug(f"Parsed {len(children)} top-level nodes")
        return Document(children=children)

    # Block tokens. ``_block_<type>`` handles a mistune block token of that
    # type; types without a handler (``blank_line``) produce nothing.

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            handler = getattr(self, f"_block_{token.get('type', '')}", None)
            if handler is None:
                continue
            result = handler(token)
            if isinstance(result, list):
                nodes.extend(result)
            else:
                nodes.append(result)
        return nodes

    def _block_heading(self, token: dict[str, Any]) -> Heading:
        level = token.get("attrs", {}).get("level", 1)
        if not isinstance(level, int) or not 1 <= level <= 6:
            level = 1
        return Heading(level=level, content=self._inline_nodes(token))

    def _block_paragraph(self, token: dict[str, Any]) -> Paragraph:
        return Paragraph(content=self._inline_nodes(token))

    def _block_block_text(self, token: dict[str, Any]) -> Paragraph:
        # text of a tight list item
        return Paragraph(content=self._inline_nodes(token), metadata={"tight": True})

    def _block_block_code(self, token: dict[str, Any]) -> CodeBlock:
        """Build a CodeBlock from fenced or indented code.

        The first word of the fence info string becomes ``language``; the
        whole info string is kept in ``metadata["info_string"]``. ``raw``
        is kept byte for byte, blank lines included.
        """
        info = (token.get("attrs", {}).get("info") or "").strip()
        return CodeBlock(
            content=token.get("raw", ""),
            language=info.split(maxsplit=1)[0] if info else None,
            fenced=token.get("style") != "indent",
            metadata={"info_string": info} if info else {},
        )

    def _block_block_quote(self, token: dict[str, Any]) -> BlockQuote:
        return BlockQuote(children=self._process_tokens(token.get("children", [])))

    def _block_list(self, token: dict[str, Any]) -> List:
        attrs = token.get("attrs", {})
        return List(
            ordered=attrs.get("ordered", False),
            items=[self._list_item(child) for child in token.get("children", [])],
            start=attrs.get("start", 1),
            tight=token.get("tight", True),
        )

    def _list_item(self, token: dict[str, Any]) -> ListItem:
        # the task_lists plugin sets attrs["checked"]
        attrs = token.get("attrs", {})
        task_status: TaskStatus | None = None
        if "checked" in attrs:
            task_status = "checked" if attrs["checked"] else "unchecked"
        return ListItem(children=self._process_tokens(token.get("children", [])), task_status=task_status)

    def _block_table(self, token: dict[str, Any]) -> Table:
        """Build a Table from mistune's ``table_head``/``table_body`` sections.

        Header cells hang directly off ``table_head``; body cells sit inside
        ``table_row`` tokens. Column alignments come from the header cells.
        """
        table = Table()
        for section in token.get("children", []):
            kind = section.get("type")
            if kind == "table_head":
                table.header = TableRow(cells=self._table_cells(section), is_header=True)
                table.alignments = [cell.alignment for cell in table.header.cells]
            elif kind == "table_body":
                table.rows.extend(TableRow(cells=self._table_cells(row)) for row in section.get("children", []))

        logger.debug(f"Parsed table with {len(table.rows)} body rows and {len(table.alignments)} columns")
        return table

    def _table_cells(self, row_token: dict[str, Any]) -> list[TableCell]:
        return [
            TableCell(content=self._inline_nodes(cell), alignment=cell.get("attrs", {}).get("align"))
            for cell in row_token.get("children", [])
            if cell.get("type") == "table_cell"
        ]

    def _block_thematic_break(self, token: dict[str, Any]) -> ThematicBreak:
        return ThematicBreak()

    def _block_block_html(self, token: dict[str, Any]) -> HTMLBlock:
        return HTMLBlock(content=token.get("raw", ""))

    def _block_footnotes(self, token: dict[str, Any]) -> list[Node]:
        """Turn mistune's trailing ``footnotes`` token into FootnoteDefinitions.

        It holds one ``footnote_item`` per referenced footnote, ordered by
        first reference; unreferenced definitions never appear.
        """
        definitions: list[Node] = []
        for item in token.get("children", []):
            attrs = item.get("attrs", {})
            definitions.append(
                FootnoteDefinition(
                    identifier=_footnote_identifier(attrs.get("key", "")),
                    content=self._process_tokens(item.get("children", [])),
                    metadata={"index": attrs.get("index")},
                )
            )
        return definitions

    # Inline tokens, dispatched the same way through ``_inline_<type>``.

    def _inline_nodes(self, token: dict[str, Any]) -> list[Node]:
        nodes: list[Node] = []
        for child in token.get("children", []):
            token_type = child.get("type", "")
            handler = getattr(self, f"_inline_{token_type}", None)
            if handler is None:
                logger.debug(f"Ignoring unsupported inline token type: {token_type!r}")
                continue
            nodes.append(handler(child))
        return nodes

    def _inline_text(self, token: dict[str, Any]) -> Text:
        return Text(content=token.get("raw", ""))

    def _inline_codespan(self, token: dict[str, Any]) -> Code:
        return Code(content=token.get("raw", ""))

    def _inline_strong(self, token: dict[str, Any]) -> Strong:
        return Strong(content=self._inline_nodes(token))

    def _inline_emphasis(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(content=self._inline_nodes(token))

    def _inline_strikethrough(self, token: dict[str, Any]) -> Strikethrough:
        return Strikethrough(content=self._inline_nodes(token))

    def _inline_link(self, token: dict[str, Any]) -> Link:
        # bare URLs and www. host names arrive as links as well
        attrs = token.get("attrs", {})
        return Link(url=attrs.get("url", ""), content=self._inline_nodes(token), title=attrs.get("title"))

    def _inline_image(self, token: dict[str, Any]) -> Image:
        attrs = token.get("attrs", {})
        alt_text = "".join(
            child.get("raw", "") for child in token.get("children", []) if child.get("type") == "text"
        )
        return Image(url=attrs.get("url", ""), alt_text=alt_text, title=attrs.get("title"))

    def _inline_linebreak(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=False)

    def _inline_softbreak(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=True)

    def _inline_inline_html(self, token: dict[str, Any]) -> HTMLInline:
        return HTMLInline(content=token.get("raw", ""))

    def _inline_footnote_ref(self, token: dict[str, Any]) -> FootnoteReference:
        # the key is in "raw", the display number in attrs["index"]
        return FootnoteReference(
            identifier=_footnote_identifier(token.get("raw", "")),
            metadata={"index": token.get("attrs", {}).get("index")},
        )


def _footnote_identifier(key: Any) -> str:
    # mistune upper-cases footnote keys; labels match case-insensitively, so lower-case them
    return str(key).lower()


def markdown_to_ast(markdown_content: Union[str, bytes], options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert Markdown to AST.

    Parameters
    ----------
    markdown_content : str or bytes
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> from md2medium.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\\n\\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownToAstConverter(options).parse(markdown_content)
