#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/utils/__init__.py
"""Utility modules for md2medium package.

This package contains display width measurement, table flattening,
HTML escaping and preformatted block helpers, slug generation, and the
dependency-checking decorators.
"""

from md2medium.utils.display_width import display_width, get_width_function
from md2medium.utils.html_utils import escape_html, render_preformatted
from md2medium.utils.tables import extract_cell_text, layout_table
from md2medium.utils.text import slugify

__all__ = [
    "display_width",
    "escape_html",
    "extract_cell_text",
    "get_width_function",
    "layout_table",
    "render_preformatted",
    "slugify",
]
