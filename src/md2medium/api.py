#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/api.py
"""Public conversion entry point.

``convert()`` runs one parse and one render per call: the Markdown source is
parsed into an AST with :class:`~md2medium.parsers.markdown.MarkdownToAstConverter`
and rendered by a fresh :class:`~md2medium.renderers.medium.MediumHtmlRenderer`.

"""

from __future__ import annotations

import logging
from typing import Any, Optional

from md2medium.exceptions import InvalidArgumentError
from md2medium.options.markdown import MarkdownParserOptions
from md2medium.options.medium import InlineCodeFormat, MediumRendererOptions
from md2medium.parsers.markdown import MarkdownToAstConverter
from md2medium.renderers.medium import MediumHtmlRenderer
from md2medium.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def convert(
    markdown: Any,
    inline_code_format: Any = InlineCodeFormat.DOUBLE_QUOTES,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[MediumRendererOptions] = None,
) -> str:
    """Convert Markdown text to a Medium-compatible HTML fragment.

    Parameters
    ----------
    markdown : str
        Markdown source text
    inline_code_format : InlineCodeFormat or str, default InlineCodeFormat.DOUBLE_QUOTES
        Markup for inline code spans. Strings are matched case-insensitively
        against member names and values; ``None`` means DOUBLE_QUOTES.
    parser_options : MarkdownParserOptions, optional
        Markdown extensions to enable
    renderer_options : MediumRendererOptions, optional
        Rendering options. Their ``inline_code_format`` is replaced by the
        ``inline_code_format`` argument.

    Returns
    -------
    str
        HTML fragment, or ``""`` for empty and whitespace-only input

    Raises
    ------
    InvalidArgumentError
        If ``markdown`` is not a string or ``inline_code_format`` is unknown
    InvalidOptionsError
        If an options object has the wrong type
    DependencyError
        If mistune (or wcwidth, for the wcwidth width strategy) is missing
    ParsingError
        If the Markdown parser fails
    RenderingError
        If rendering fails unexpectedly

    Examples
    --------
    >>> convert("Run `ls` now")
    '<p>Run &quot;ls&quot; now</p>\\n'
    >>> convert("Run `ls` now", "bold")
    '<p>Run <strong>ls</strong> now</p>\\n'

    """
    if markdown is None:
        raise InvalidArgumentError("markdown", None, message="markdown must be a string, got None")
    if not isinstance(markdown, str):
        raise InvalidArgumentError(
            "markdown",
            markdown,
            message=f"markdown must be a string, got {type(markdown).__name__}",
        )

    fmt = InlineCodeFormat.coerce(inline_code_format)

    if not markdown.strip():
        logger.debug("Empty or whitespace-only input, nothing to convert")
        return ""

    if renderer_options is None:
        renderer_options = MediumRendererOptions(inline_code_format=fmt)
    elif isinstance(renderer_options, MediumRendererOptions):
        renderer_options = renderer_options.create_updated(inline_code_format=fmt)

    parser = MarkdownToAstConverter(parser_options)
    renderer = MediumHtmlRenderer(renderer_options)

    with debug_timer(logger, "Markdown parsing"):
        document = parser.parse(markdown)

    with debug_timer(logger, "Medium HTML rendering"):
        return renderer.render_to_string(document)
