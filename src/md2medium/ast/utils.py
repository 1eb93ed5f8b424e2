#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/ast/utils.py
"""Tree walking helpers used for heading anchors and table cells."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Union

from md2medium.ast.nodes import Code, Text, get_node_children

if TYPE_CHECKING:
    from md2medium.ast.nodes import Node


def iter_nodes(node_or_nodes: Union[Node, list[Node]]) -> Iterator[Node]:
    """Yield every node in document order, parents before their children."""
    pending = list(node_or_nodes) if isinstance(node_or_nodes, list) else [node_or_nodes]
    pending.reverse()
    while pending:
        node = pending.pop()
        yield node
        pending.extend(reversed(get_node_children(node)))


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = " ") -> str:
    """Concatenate the non-empty ``Text`` and ``Code`` contents below a node.

    ``joiner=""`` gives the visible text of inline content, since Text nodes
    keep their own spacing.

        >>> from md2medium.ast import Emphasis, Heading, Text
        >>> heading = Heading(level=1, content=[Text(content="Hello "), Emphasis(content=[Text(content="world")])])
        >>> extract_text(heading, joiner="")
        'Hello world'

    """
    return joiner.join(
        node.content for node in iter_nodes(node_or_nodes) if isinstance(node, (Text, Code)) and node.content
    )


__all__ = ["extract_text", "iter_nodes"]
