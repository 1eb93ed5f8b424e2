#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/ast/visitors.py
"""Base class for objects that walk the md2medium document tree.

Every node's ``accept`` calls ``visitor.visit_<kind>(node)``. A visitor must
handle every kind the Markdown parser can produce, so each ``visit_*`` method
is abstract here. The Medium renderer only swaps out three of them by
subclassing :class:`~md2medium.renderers.html.HtmlRenderer`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

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
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)


class NodeVisitor(ABC):
    """Double-dispatch target for :meth:`Node.accept`.

    Return values are up to the subclass. The HTML renderers return ``None``
    and append to an output buffer instead.
    """

    def visit_each(self, nodes: Iterable[Node]) -> list[Any]:
        """Visit ``nodes`` in order and collect what each visit returned."""
        return [node.accept(self) for node in nodes]

    # Blocks

    @abstractmethod
    def visit_document(self, node: Document) -> Any: ...

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any: ...

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any: ...

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Handle a fenced or indented code block.

        ``node.content`` keeps the source's blank lines. Medium closes a
        ``<pre>`` at the first empty line, so renderers targeting it must not
        pass the content through unchanged.
        """

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any: ...

    @abstractmethod
    def visit_list(self, node: List) -> Any: ...

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any: ...

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Handle a table; rows are available through ``node.all_rows()``."""

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any: ...

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any: ...

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any: ...

    @abstractmethod
    def visit_html_block(self, node: HTMLBlock) -> Any: ...

    @abstractmethod
    def visit_footnote_definition(self, node: FootnoteDefinition) -> Any: ...

    # Inlines

    @abstractmethod
    def visit_text(self, node: Text) -> Any: ...

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any: ...

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any: ...

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any: ...

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Handle an inline code span; ``node.content`` is the raw, unescaped text."""

    @abstractmethod
    def visit_link(self, node: Link) -> Any: ...

    @abstractmethod
    def visit_image(self, node: Image) -> Any: ...

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Handle a line break; ``node.soft`` tells soft from hard."""

    @abstractmethod
    def visit_html_inline(self, node: HTMLInline) -> Any: ...

    @abstractmethod
    def visit_footnote_reference(self, node: FootnoteReference) -> Any: ...
