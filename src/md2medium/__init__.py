"""md2medium - Convert Markdown into HTML that Medium's story importer accepts.

Medium imports only a narrow subset of HTML. It has no table element, collapses
``<pre><code>`` blocks and drops inline ``<code>``. md2medium parses Markdown
into an AST and renders it to an HTML fragment that survives the import:

- Tables become aligned, pipe-delimited text tables inside ``<pre>``
- Code blocks become ``<pre>`` with explicit ``<br>`` line markers
- Inline code is wrapped in bold, italic and/or quote markup

Everything else (headings, emphasis, links, images, lists, task lists, block
quotes, footnotes) renders as ordinary HTML.

Requirements
------------
- Python 3.10+
- mistune 3 for Markdown parsing
- wcwidth (optional) for complete East Asian Width tables

Examples
--------
Basic conversion:

    >>> from md2medium import convert
    >>> html = convert("# Title\\n\\nUse `pip install`.")

Italic inline code:

    >>> from md2medium import InlineCodeFormat
    >>> html = convert("Call `main()`", InlineCodeFormat.ITALIC)

Working with the AST directly:

    >>> from md2medium import markdown_to_ast, MediumHtmlRenderer
    >>> doc = markdown_to_ast("| a | b |\\n|---|---|\\n| 1 | 2 |")
    >>> html = MediumHtmlRenderer().render_to_string(doc)

See Also
--------
md2medium.ast : AST node definitions and utilities
md2medium.options : Parser and renderer configuration

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2medium requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from md2medium.api import convert
from md2medium.exceptions import (
    DependencyError,
    InvalidArgumentError,
    InvalidOptionsError,
    Md2MediumError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2medium.options import (
    BaseParserOptions,
    BaseRendererOptions,
    HtmlRendererOptions,
    InlineCodeFormat,
    MarkdownParserOptions,
    MediumRendererOptions,
)
from md2medium.parsers import MarkdownToAstConverter, markdown_to_ast
from md2medium.renderers import HtmlRenderer, MediumHtmlRenderer, format_inline_code
from md2medium.utils.display_width import display_width

__all__ = [
    "__version__",
    "convert",
    "markdown_to_ast",
    "format_inline_code",
    "display_width",
    # Parsing and rendering
    "MarkdownToAstConverter",
    "HtmlRenderer",
    "MediumHtmlRenderer",
    # Options
    "BaseParserOptions",
    "BaseRendererOptions",
    "HtmlRendererOptions",
    "InlineCodeFormat",
    "MarkdownParserOptions",
    "MediumRendererOptions",
    # Exceptions
    "Md2MediumError",
    "ValidationError",
    "InvalidArgumentError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "DependencyError",
]
