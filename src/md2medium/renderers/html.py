#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/renderers/html.py
"""Plain HTML fragment renderer.

Output has no ``<html>`` or ``<body>`` wrapper and every block ends with a
newline. :class:`~md2medium.renderers.medium.MediumHtmlRenderer` builds on
this class and changes only tables, code blocks and inline code.
"""

from __future__ import annotations

import logging

from md2medium.ast.nodes import (
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
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from md2medium.ast.utils import extract_text
from md2medium.ast.visitors import NodeVisitor
from md2medium.exceptions import Md2MediumError, RenderingError
from md2medium.options.html import HtmlRendererOptions
from md2medium.renderers.base import BaseRenderer, InlineContentMixin
from md2medium.utils.html_sanitizer import sanitize_html_content
from md2medium.utils.html_utils import escape_html
from md2medium.utils.text import slugify

logger = logging.getLogger(__name__)

CHECKED_BOX = "&#9745; "
UNCHECKED_BOX = "&#9744; "


class HtmlRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to an HTML fragment.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from md2medium.ast import Document, Heading, Text
        >>> doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])
        >>> HtmlRenderer().render_to_string(doc)
        '<h1 id="title">Title</h1>\\n'

    """

    options_class = HtmlRendererOptions
    renderer_name = "html"

    def __init__(self, options: HtmlRendererOptions | None = None):
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions
        self._output: list[str] = []
        self._heading_slugs: set[str] = set()
        self._footnote_definitions: list[FootnoteDefinition] = []

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to an HTML fragment.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            HTML text; footnotes, if any, are appended as a trailing section

        Raises
        ------
        RenderingError
            If an unexpected error occurs while rendering

        """
        self._output = []
        self._heading_slugs = set()
        self._footnote_definitions = []

        try:
            document.accept(self)
            if self._footnote_definitions:
                self._render_footnotes_section()
        except Md2MediumError:
            raise
        except Exception as e:
            raise RenderingError(
                f"Failed to render HTML: {e!r}", rendering_stage="rendering", original_error=e
            ) from e

        return "".join(self._output)

    def _emit(self, *chunks: str) -> None:
        self._output.extend(chunks)

    def _class_attr(self, node_type: str) -> str:
        """Return ``' class="..."'`` from ``css_class_map`` for ``node_type``, or ``""``."""
        classes = (self.options.css_class_map or {}).get(node_type) or ""
        if not isinstance(classes, str):
            classes = " ".join(classes)
        return f' class="{escape_html(classes)}"' if classes else ""

    def _wrap_inline(self, tag: str, node: Emphasis | Strong | Strikethrough) -> None:
        self._emit(f"<{tag}>", self._render_inline_content(node.content), f"</{tag}>")

    def _render_footnotes_section(self) -> None:
        """Append the collected footnote definitions as an ordered list."""
        self._emit('<section class="footnotes">\n<ol>\n')
        for footnote in self._footnote_definitions:
            identifier = escape_html(footnote.identifier)
            body = self._render_inline_content(footnote.content).rstrip("\n")

            back_link = f'<a href="#fnref-{identifier}" class="footnote-back">&#8617;</a>'
            if body.endswith("</p>"):
                body = f"{body[:-4]} {back_link}</p>"
            else:
                body = f"{body} {back_link}" if body else back_link
            self._emit(f'<li id="fn-{identifier}">{body}</li>\n')
        self._emit("</ol>\n</section>\n")

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        self.visit_each(node.children)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node.

        Parameters
        ----------
        node : Heading
            Heading to render

        """
        level = min(6, max(1, node.level))
        content = self._render_inline_content(node.content)
        css_class = self._class_attr("Heading")

        id_attr = ""
        if self.options.heading_ids:
            heading_id = slugify(
                extract_text(node.content, joiner=""),
                seen_slugs=self._heading_slugs,
                max_length=self.options.heading_id_max_length,
            )
            id_attr = f' id="{heading_id}"'

        self._emit(f"<h{level}{id_attr}{css_class}>{content}</h{level}>\n")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        content = self._render_inline_content(node.content)
        css_class = self._class_attr("Paragraph")
        self._emit(f"<p{css_class}>{content}</p>\n")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        """
        class_attr = f' class="language-{escape_html(node.language)}"' if node.language else ""
        escaped_content = escape_html(node.content, enabled=self.options.escape_html)
        pre_class = self._class_attr("CodeBlock")
        self._emit(f"<pre{pre_class}><code{class_attr}>{escaped_content}</code></pre>\n")

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node."""
        css_class = self._class_attr("BlockQuote")
        self._emit(f"<blockquote{css_class}>\n")

        self.visit_each(node.children)

        self._emit("</blockquote>\n")

    def visit_list(self, node: List) -> None:
        """Render a List node."""
        tag = "ol" if node.ordered else "ul"
        start_attr = f' start="{node.start}"' if node.ordered and node.start != 1 else ""
        css_class = self._class_attr("List")

        self._emit(f"<{tag}{start_attr}{css_class}>\n")

        self.visit_each(node.items)

        self._emit(f"</{tag}>\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node.

        The text of a tight list item is written without a ``<p>`` wrapper.
        Task list items get a checkbox entity in front of their first
        paragraph.

        Parameters
        ----------
        node : ListItem
            List item to render

        """
        css_class = self._class_attr("ListItem")
        self._emit(f"<li{css_class}>")

        checkbox = ""
        if node.task_status:
            checkbox = CHECKED_BOX if node.task_status == "checked" else UNCHECKED_BOX
        if checkbox and not (node.children and isinstance(node.children[0], Paragraph)):
            self._emit(checkbox)
            checkbox = ""

        last_index = len(node.children) - 1
        for index, child in enumerate(node.children):
            prefix = checkbox if index == 0 else ""
            if isinstance(child, Paragraph) and child.metadata.get("tight"):
                self._emit(prefix + self._render_inline_content(child.content))
                if index < last_index:
                    self._emit("\n")
            elif isinstance(child, Paragraph) and prefix:
                para_css_class = self._class_attr("Paragraph")
                content = self._render_inline_content(child.content)
                self._emit(f"<p{para_css_class}>{prefix}{content}</p>\n")
            else:
                if index == 0 and not isinstance(child, Paragraph):
                    self._emit("\n")
                child.accept(self)

        self._emit("</li>\n")

    def visit_table(self, node: Table) -> None:
        """Render a Table node as an HTML table.

        Parameters
        ----------
        node : Table
            Table to render

        """
        css_class = self._class_attr("Table")
        self._emit(f"<table{css_class}>\n")

        if node.header:
            self._emit("<thead>\n")
            self._render_table_row(node.header, node, "th")
            self._emit("</thead>\n")

        if node.rows:
            self._emit("<tbody>\n")
            for row in node.rows:
                self._render_table_row(row, node, "td")
            self._emit("</tbody>\n")

        self._emit("</table>\n")

    def _render_table_row(self, row: TableRow, table: Table, tag: str) -> None:
        self._emit("<tr>")
        for i, cell in enumerate(row.cells):
            alignment = cell.alignment or (table.alignments[i] if i < len(table.alignments) else None)
            align = f' style="text-align: {alignment}"' if alignment else ""
            content = self._render_inline_content(cell.content)
            self._emit(f"<{tag}{align}>{content}</{tag}>")
        self._emit("</tr>\n")

    # rows and cells are written by visit_table
    def visit_table_row(self, node: TableRow) -> None:
        return None

    def visit_table_cell(self, node: TableCell) -> None:
        return None

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        css_class = self._class_attr("ThematicBreak")
        self._emit(f"<hr{css_class}>\n")

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Render an HTMLBlock node according to ``html_passthrough_mode``."""
        sanitized = sanitize_html_content(node.content, mode=self.options.html_passthrough_mode)
        if sanitized:
            self._emit(sanitized)
            if not sanitized.endswith("\n"):
                self._emit("\n")

    def visit_footnote_definition(self, node: FootnoteDefinition) -> None:
        """Collect a FootnoteDefinition for the trailing footnotes section."""
        self._footnote_definitions.append(node)

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._emit(escape_html(node.content, enabled=self.options.escape_html))

    def visit_emphasis(self, node: Emphasis) -> None:
        self._wrap_inline("em", node)

    def visit_strong(self, node: Strong) -> None:
        self._wrap_inline("strong", node)

    def visit_strikethrough(self, node: Strikethrough) -> None:
        self._wrap_inline("del", node)

    def visit_code(self, node: Code) -> None:
        """Render a Code node."""
        escaped = escape_html(node.content, enabled=self.options.escape_html)
        self._emit(f"<code>{escaped}</code>")

    def visit_link(self, node: Link) -> None:
        """Render a Link node.

        Parameters
        ----------
        node : Link
            Link to render

        """
        content = self._render_inline_content(node.content)
        title_attr = f' title="{escape_html(node.title)}"' if node.title else ""
        css_class = self._class_attr("Link")
        href = escape_html(node.url)
        self._emit(f'<a href="{href}"{title_attr}{css_class}>{content}</a>')

    def visit_image(self, node: Image) -> None:
        """Render an Image node."""
        alt = escape_html(node.alt_text)
        title_attr = f' title="{escape_html(node.title)}"' if node.title else ""
        css_class = self._class_attr("Image")
        src = escape_html(node.url)
        self._emit(f'<img src="{src}" alt="{alt}"{title_attr}{css_class}>')

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node.

        Soft breaks become ``<br>`` when ``soft_break_as_hard`` is set and a
        plain newline otherwise.

        Parameters
        ----------
        node : LineBreak
            Line break to render

        """
        if node.soft and not self.options.soft_break_as_hard:
            self._emit("\n")
        else:
            self._emit("<br>\n")

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Render an HTMLInline node according to ``html_passthrough_mode``."""
        sanitized = sanitize_html_content(node.content, mode=self.options.html_passthrough_mode)
        if sanitized:
            self._emit(sanitized)

    def visit_footnote_reference(self, node: FootnoteReference) -> None:
        """Render a FootnoteReference node as a superscript link."""
        identifier = escape_html(node.identifier)
        label = node.metadata.get("index") or identifier
        self._emit(f'<sup id="fnref-{identifier}"><a href="#fn-{identifier}">[{label}]</a></sup>')
