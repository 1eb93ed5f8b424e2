#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for md2medium parsing and rendering.

Options are frozen dataclasses; use ``create_updated()`` to derive a modified
copy instead of mutating an instance.
"""

from __future__ import annotations

from md2medium.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2medium.options.html import HtmlRendererOptions
from md2medium.options.markdown import MarkdownParserOptions
from md2medium.options.medium import InlineCodeFormat, MediumRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "InlineCodeFormat",
    "MarkdownParserOptions",
    "MediumRendererOptions",
]
