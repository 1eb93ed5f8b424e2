#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/ast/nodes.py
"""Document tree produced by the Markdown parser.

Nodes are plain dataclasses. Blocks hold ``children`` (or ``items``/``rows``),
inline containers hold ``content``, and leaves hold a string. Each class
names its visitor method in the class statement, so ``Heading(...).accept(v)``
calls ``v.visit_heading``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal, Optional

Alignment = Literal["left", "center", "right"]
TaskStatus = Literal["checked", "unchecked"]


class Node:
    """Base class for every node in the tree.

    Subclasses declare ``visit="<name>"`` in their class statement and get an
    ``accept`` that calls ``visitor.visit_<name>(self)``. All nodes carry a
    ``metadata`` dict for parser annotations such as list tightness.
    """

    visit_method: ClassVar[str] = ""
    metadata: dict[str, Any]

    def __init_subclass__(cls, visit: str = "", **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if visit:
            cls.visit_method = f"visit_{visit}"

    def accept(self, visitor: Any) -> Any:
        """Call the visitor method for this node type and return its result."""
        if not self.visit_method:
            raise TypeError(f"{type(self).__name__} does not declare a visitor method")
        return getattr(visitor, self.visit_method)(self)


# Blocks


@dataclass
class Document(Node, visit="document"):
    """Root node holding the block-level children of a parsed document.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document, footnote definitions included
    metadata : dict, default = empty dict
        Document-level metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Heading(Node, visit="heading"):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    metadata : dict, default = empty dict
        Heading metadata

    """

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")


@dataclass
class Paragraph(Node, visit="paragraph"):
    """Paragraph of inline content."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class CodeBlock(Node, visit="code_block"):
    """Fenced or indented code block.

    Parameters
    ----------
    content : str
        Raw code content, never parsed as markdown
    language : str or None, default = None
        Info string of a fenced block (first word only)
    fenced : bool, default = True
        False for indented code blocks
    metadata : dict, default = empty dict
        Code block metadata

    """

    content: str
    language: Optional[str] = None
    fenced: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class BlockQuote(Node, visit="block_quote"):
    """Block quote containing other block elements."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class List(Node, visit="list"):
    """Ordered or unordered list.

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    items : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Starting number for ordered lists
    tight : bool, default = True
        Whether list is tight (no blank lines between items)
    metadata : dict, default = empty dict
        List metadata

    """

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: int = 1
    tight: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class ListItem(Node, visit="list_item"):
    """List item holding block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the list item
    task_status : {'checked', 'unchecked'} or None, default = None
        Checkbox state for task list items
    metadata : dict, default = empty dict
        List item metadata

    """

    children: list[Node] = field(default_factory=list)
    task_status: Optional[TaskStatus] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Table(Node, visit="table"):
    """Pipe table.

    Parameters
    ----------
    rows : list of TableRow, default = empty list
        Body rows
    header : TableRow or None, default = None
        Header row, marked with ``is_header=True``
    alignments : list, default = empty list
        Column alignments ('left', 'center', 'right', or None)
    metadata : dict, default = empty dict
        Table metadata

    """

    rows: list[TableRow] = field(default_factory=list)
    header: Optional[TableRow] = None
    alignments: list[Alignment | None] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def all_rows(self) -> list[TableRow]:
        """Return the header row (if any) followed by the body rows."""
        rows: list[TableRow] = []
        if self.header is not None:
            rows.append(self.header)
        rows.extend(self.rows)
        return rows


@dataclass
class TableRow(Node, visit="table_row"):
    """Table row containing cells.

    Parameters
    ----------
    cells : list of TableCell, default = empty list
        Cells in this row
    is_header : bool, default = False
        Whether this is a header row
    metadata : dict, default = empty dict
        Row metadata

    """

    cells: list[TableCell] = field(default_factory=list)
    is_header: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class TableCell(Node, visit="table_cell"):
    """Table cell with inline content and optional alignment."""

    content: list[Node] = field(default_factory=list)
    alignment: Alignment | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class ThematicBreak(Node, visit="thematic_break"):
    """Horizontal rule."""

    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class HTMLBlock(Node, visit="html_block"):
    """Raw HTML block.

    Parameters
    ----------
    content : str
        Raw HTML content, preserved as written in the source
    metadata : dict, default = empty dict
        HTML block metadata

    Warnings
    --------
    The content is not sanitized. Renderers decide what to do with it through
    ``HtmlRendererOptions.html_passthrough_mode``.

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class FootnoteDefinition(Node, visit="footnote_definition"):
    """Footnote definition (``[^id]: content``).

    Parameters
    ----------
    identifier : str
        Footnote identifier matching a FootnoteReference
    content : list of Node, default = empty list
        Block-level content of the footnote
    metadata : dict, default = empty dict
        Footnote definition metadata

    """

    identifier: str
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


# Inlines


@dataclass
class Text(Node, visit="text"):
    """Plain text run."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Emphasis(Node, visit="emphasis"):
    """Emphasized (italic) inline content."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Strong(Node, visit="strong"):
    """Strong (bold) inline content."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Strikethrough(Node, visit="strikethrough"):
    """Strikethrough inline content (``~~text~~``)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Code(Node, visit="code"):
    """Inline code span.

    Parameters
    ----------
    content : str
        Raw code text, unescaped
    metadata : dict, default = empty dict
        Code metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Link(Node, visit="link"):
    """Hyperlink.

    Parameters
    ----------
    url : str
        Link destination URL
    content : list of Node, default = empty list
        Inline nodes representing link text
    title : str or None, default = None
        Optional link title (tooltip)
    metadata : dict, default = empty dict
        Link metadata

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Image(Node, visit="image"):
    """Embedded image.

    Parameters
    ----------
    url : str
        Image source URL
    alt_text : str, default = ''
        Alternative text description
    title : str or None, default = None
        Optional image title
    metadata : dict, default = empty dict
        Image metadata

    """

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class LineBreak(Node, visit="line_break"):
    """Line break.

    Parameters
    ----------
    soft : bool, default = False
        True for soft breaks (a plain newline in the source), False for hard
        breaks (trailing double space or backslash)
    metadata : dict, default = empty dict
        Line break metadata

    """

    soft: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class HTMLInline(Node, visit="html_inline"):
    """Inline raw HTML, preserved unsanitized like HTMLBlock."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class FootnoteReference(Node, visit="footnote_reference"):
    """Inline footnote reference (``[^id]``)."""

    identifier: str
    metadata: dict[str, Any] = field(default_factory=dict)


_CHILD_ATTRIBUTES = ("children", "items", "cells", "content")


def get_node_children(node: Node) -> list[Node]:
    """Return the direct children of ``node``; leaves give ``[]``.

    A table's header row comes before its body rows.

    >>> heading = Heading(level=1, content=[Text("Hello"), Strong(content=[Text("world")])])
    >>> len(get_node_children(heading))
    2

    """
    if isinstance(node, Table):
        return node.all_rows()
    for attribute in _CHILD_ATTRIBUTES:
        value = getattr(node, attribute, None)
        # Text and Code keep a string in ``content``
        if isinstance(value, list):
            return list(value)
    return []
