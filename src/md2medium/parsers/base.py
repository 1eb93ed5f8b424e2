#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/parsers/base.py
"""Common base for parsers that build the md2medium document tree.

Renderers consume :class:`~md2medium.ast.Document` only, never mistune tokens,
so a parser is the single place that knows about the parsing library.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Union

from md2medium.ast import Document
from md2medium.exceptions import InvalidOptionsError, ValidationError
from md2medium.options.base import BaseParserOptions


class BaseParser(ABC):
    """Build a :class:`Document` from source text.

    Subclasses set ``options_class`` and ``parser_name``; ``None`` options
    become ``options_class()``.

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not an instance of ``options_class``

    """

    options_class: ClassVar[type[BaseParserOptions]] = BaseParserOptions
    parser_name: ClassVar[str] = "base"

    def __init__(self, options: BaseParserOptions | None = None):
        if options is None:
            options = self.options_class()
        elif not isinstance(options, self.options_class):
            raise InvalidOptionsError(
                converter_name=self.parser_name,
                expected_type=self.options_class,
                received_type=type(options),
            )
        self.options = options

    @staticmethod
    def _load_text_content(input_data: Union[str, bytes]) -> str:
        # bytes must be UTF-8; anything else is rejected outright
        if isinstance(input_data, str):
            return input_data
        if not isinstance(input_data, bytes):
            raise ValidationError(
                f"Unsupported input type: {type(input_data).__name__}",
                parameter_name="input_data",
                parameter_value=type(input_data),
            )
        try:
            return input_data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValidationError(
                "Input bytes are not valid UTF-8",
                parameter_name="input_data",
                original_error=e,
            ) from e

    @abstractmethod
    def parse(self, input_data: Union[str, bytes]) -> Document:
        """Parse ``input_data`` (text, or UTF-8 bytes) into a document tree.

        Raises
        ------
        ParsingError
            If the underlying parser fails
        DependencyError
            If the parsing library is not installed
        ValidationError
            If ``input_data`` is neither text nor UTF-8 bytes

        """
