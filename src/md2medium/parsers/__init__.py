#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers that turn source text into the md2medium AST."""

from md2medium.parsers.base import BaseParser
from md2medium.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = ["BaseParser", "MarkdownToAstConverter", "markdown_to_ast"]
