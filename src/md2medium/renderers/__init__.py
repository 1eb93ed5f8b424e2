#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers that turn the md2medium AST into output text."""

from md2medium.renderers.base import BaseRenderer, InlineContentMixin
from md2medium.renderers.html import HtmlRenderer
from md2medium.renderers.medium import MediumHtmlRenderer, format_inline_code

__all__ = ["BaseRenderer", "HtmlRenderer", "InlineContentMixin", "MediumHtmlRenderer", "format_inline_code"]
