#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/renderers/base.py
"""Shared plumbing for the HTML renderers: option checks, output, inline buffers."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, ClassVar, Union

from md2medium.ast import Document
from md2medium.ast.nodes import Node
from md2medium.exceptions import InvalidOptionsError
from md2medium.options.base import BaseRendererOptions

OutputTarget = Union[str, Path, IO[bytes], IO[str]]


class BaseRenderer(ABC):
    """Turn a :class:`Document` into text.

    Subclasses set ``options_class`` to the options dataclass they accept and
    ``renderer_name`` to the name used in error messages. Passing ``None``
    gives the subclass's default options.

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not an instance of ``options_class``

    """

    options_class: ClassVar[type[BaseRendererOptions]] = BaseRendererOptions
    renderer_name: ClassVar[str] = "base"

    def __init__(self, options: BaseRendererOptions | None = None):
        if options is None:
            options = self.options_class()
        elif not isinstance(options, self.options_class):
            raise InvalidOptionsError(
                converter_name=self.renderer_name,
                expected_type=self.options_class,
                received_type=type(options),
            )
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Return the rendered document.

        Raises
        ------
        RenderingError
            If a node cannot be rendered

        """

    def render(self, doc: Document, output: OutputTarget) -> None:
        """Render ``doc`` and write it to ``output`` (see :meth:`write_text_output`)."""
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def write_text_output(text: str, output: OutputTarget) -> None:
        """Write ``text`` to a path, a text stream or a binary stream.

        Paths and binary streams get UTF-8.

        Raises
        ------
        TypeError
            If ``output`` is neither a path nor has a ``write`` method

        Examples
        --------
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("<p>Hi</p>", buffer)
            >>> buffer.getvalue()
            '<p>Hi</p>'

        """
        if isinstance(output, (str, Path)):
            Path(output).write_text(text, encoding="utf-8")
        elif isinstance(output, io.TextIOBase):
            output.write(text)
        elif hasattr(output, "write"):
            output.write(text.encode("utf-8"))  # type: ignore[arg-type]
        else:
            raise TypeError(f"Unsupported output type: {type(output).__name__}")


class InlineContentMixin:
    """Render inline children into a string instead of the main buffer.

    Used by visitors that append to ``self._output``: a parent such as
    ``<strong>`` needs its children's markup before it can wrap them.
    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        outer = self._output
        self._output = []
        try:
            for node in content:
                node.accept(self)
            return "".join(self._output)
        finally:
            self._output = outer
