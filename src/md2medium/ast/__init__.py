#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

Markdown is parsed into these nodes before rendering, which keeps parsing
separate from HTML generation and lets a renderer replace the output of
individual node kinds without touching the rest.

- nodes: AST node classes representing document structure
- visitors: Visitor pattern base class for AST traversal
- utils: Helpers such as plain-text extraction

Examples
--------
    >>> from md2medium.ast import Document, Heading, Paragraph, Text
    >>> from md2medium.renderers.html import HtmlRenderer
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])
    >>> HtmlRenderer().render_to_string(doc)
    '<h1 id="title">Title</h1>\n<p>Hello world</p>\n'

"""

from __future__ import annotations

from md2medium.ast.nodes import (
    Alignment,
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
    get_node_children,
)
from md2medium.ast.utils import extract_text, iter_nodes
from md2medium.ast.visitors import NodeVisitor

__all__ = [
    "Alignment",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "FootnoteDefinition",
    "FootnoteReference",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "TaskStatus",
    "Text",
    "ThematicBreak",
    "extract_text",
    "get_node_children",
    "iter_nodes",
]
