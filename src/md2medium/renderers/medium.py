#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/renderers/medium.py
"""Medium-compatible HTML rendering from AST.

Medium's story importer keeps only a small set of tags. It has no table
element, merges ``<pre><code>`` into plain paragraphs and drops ``<code>``
entirely. MediumHtmlRenderer keeps the generic HTML output for every node
except three:

- Table: flattened into an aligned, pipe-delimited text table inside ``<pre>``
- CodeBlock: ``<pre>`` with explicit ``<br>`` line markers
- Code (inline): wrapped in the emphasis/quote markup chosen by
  :class:`~md2medium.options.medium.InlineCodeFormat`

"""

from __future__ import annotations

import logging
from typing import Any

from md2medium.ast.nodes import Code, CodeBlock, Table
from md2medium.constants import QUOTE_ENTITY
from md2medium.options.medium import InlineCodeFormat, MediumRendererOptions
from md2medium.renderers.html import HtmlRenderer
from md2medium.utils.display_width import get_width_function
from md2medium.utils.html_utils import escape_html, render_preformatted
from md2medium.utils.tables import layout_table, table_to_rows

logger = logging.getLogger(__name__)

_INLINE_CODE_WRAPPERS: dict[InlineCodeFormat, tuple[str, str]] = {
    InlineCodeFormat.DOUBLE_QUOTES: (QUOTE_ENTITY, QUOTE_ENTITY),
    InlineCodeFormat.BOLD: ("<strong>", "</strong>"),
    InlineCodeFormat.ITALIC: ("<em>", "</em>"),
    InlineCodeFormat.BOLD_AND_ITALIC: ("<strong><em>", "</em></strong>"),
    InlineCodeFormat.BOLD_WITH_QUOTES: (f"<strong>{QUOTE_ENTITY}", f"{QUOTE_ENTITY}</strong>"),
    InlineCodeFormat.ITALIC_WITH_QUOTES: (f"<em>{QUOTE_ENTITY}", f"{QUOTE_ENTITY}</em>"),
    InlineCodeFormat.ALL: (f"<strong><em>{QUOTE_ENTITY}", f"{QUOTE_ENTITY}</em></strong>"),
}


def format_inline_code(text: str, fmt: Any = InlineCodeFormat.DOUBLE_QUOTES) -> str:
    """Escape inline code text and wrap it in the markup for ``fmt``.

    Parameters
    ----------
    text : str
        Raw code span content
    fmt : InlineCodeFormat
        Wrapper to apply. Values that are not InlineCodeFormat members use
        DOUBLE_QUOTES.

    Returns
    -------
    str
        Wrapped markup

    Examples
    --------
    >>> format_inline_code("a < b", InlineCodeFormat.BOLD)
    '<strong>a &lt; b</strong>'
    >>> format_inline_code("x")
    '&quot;x&quot;'

    """
    if not isinstance(fmt, InlineCodeFormat):
        fmt = InlineCodeFormat.DOUBLE_QUOTES
    opening, closing = _INLINE_CODE_WRAPPERS[fmt]
    return f"{opening}{escape_html(text, quote=False)}{closing}"


class MediumHtmlRenderer(HtmlRenderer):
    """Render AST nodes to HTML that Medium's importer accepts.

    Parameters
    ----------
    options : MediumRendererOptions or None, default = None
        Medium rendering options

    Raises
    ------
    DependencyError
        If ``width_strategy="wcwidth"`` and wcwidth is not installed

    Examples
    --------
        >>> from md2medium.ast import Document, Paragraph, Code
        >>> doc = Document(children=[Paragraph(content=[Code(content="ls")])])
        >>> MediumHtmlRenderer().render_to_string(doc)
        '<p>&quot;ls&quot;</p>\\n'

    """

    options_class = MediumRendererOptions
    renderer_name = "medium"

    def __init__(self, options: MediumRendererOptions | None = None):
        super().__init__(options)
        self.options: MediumRendererOptions
        self._width_fn = get_width_function(self.options.width_strategy)

    def visit_table(self, node: Table) -> None:
        """Render a Table node as a preformatted text table.

        A table without rows produces no output at all.

        Parameters
        ----------
        node : Table
            Table to render

        """
        rows, header_row_count = table_to_rows(node)
        if not rows:
            return

        text = layout_table(rows, header_row_count, self._width_fn, self.options.min_column_width)
        self._emit(render_preformatted(text) + "\n")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a fenced or indented CodeBlock as ``<pre>`` with ``<br>`` markers."""
        logger.debug(f"Rendering code block (language={node.language}, {len(node.content)} characters)")
        self._emit(render_preformatted(node.content) + "\n")

    def visit_code(self, node: Code) -> None:
        """Render an inline Code node with the configured inline code format."""
        self._emit(format_inline_code(node.content, self.options.inline_code_format))
