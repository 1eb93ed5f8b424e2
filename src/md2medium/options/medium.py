#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Medium-compatible HTML rendering.

Medium's importer accepts a narrow HTML subset. The options here control how
inline code spans are emphasized and how table columns are measured when a
table is flattened into preformatted text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from md2medium.constants import (
    DEFAULT_MIN_COLUMN_WIDTH,
    DEFAULT_WIDTH_STRATEGY,
    WIDTH_STRATEGIES,
    WidthStrategy,
)
from md2medium.exceptions import InvalidArgumentError
from md2medium.options.html import HtmlRendererOptions


class InlineCodeFormat(str, Enum):
    """How inline code spans are marked up, since Medium drops ``<code>``."""

    BOLD = "bold"
    ITALIC = "italic"
    DOUBLE_QUOTES = "double_quotes"
    BOLD_AND_ITALIC = "bold_and_italic"
    BOLD_WITH_QUOTES = "bold_with_quotes"
    ITALIC_WITH_QUOTES = "italic_with_quotes"
    ALL = "all"

    @classmethod
    def coerce(cls, value: Any, parameter_name: str = "inline_code_format") -> InlineCodeFormat:
        """Resolve a member from a member, its value, or its name.

        Strings are matched case-insensitively and hyphens are accepted in
        place of underscores, so ``"bold-with-quotes"``, ``"BOLD_WITH_QUOTES"``
        and ``"bold_with_quotes"`` all resolve to ``BOLD_WITH_QUOTES``.
        ``None`` resolves to ``DOUBLE_QUOTES``.

        Parameters
        ----------
        value : Any
            Value to resolve
        parameter_name : str, default "inline_code_format"
            Argument name reported in the error

        Returns
        -------
        InlineCodeFormat
            The matching member

        Raises
        ------
        InvalidArgumentError
            If the value does not name a member

        """
        if value is None:
            return cls.DOUBLE_QUOTES
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_")
            for member in cls:
                if key == member.value:
                    return member
        raise InvalidArgumentError(
            parameter_name,
            value,
            message=(
                f"Unsupported {parameter_name} {value!r}. "
                f"Expected one of: {', '.join(member.value for member in cls)}"
            ),
        )


@dataclass(frozen=True)
class MediumRendererOptions(HtmlRendererOptions):
    """Configuration options for rendering AST to Medium-compatible HTML.

    Parameters
    ----------
    inline_code_format : InlineCodeFormat, default InlineCodeFormat.DOUBLE_QUOTES
        Markup wrapped around inline code spans.
    width_strategy : {"heuristic", "wcwidth"}, default "heuristic"
        How the display width of table cell text is measured:
        - "heuristic": emoji and common symbol blocks count as two columns
        - "wcwidth": full East Asian Width tables from the wcwidth package
    min_column_width : int, default 3
        Narrowest column a flattened table may have.

    Examples
    --------
    Italic inline code with complete width tables:
        >>> options = MediumRendererOptions(
        ...     inline_code_format=InlineCodeFormat.ITALIC,
        ...     width_strategy="wcwidth",
        ... )

    """

    inline_code_format: InlineCodeFormat = field(
        default=InlineCodeFormat.DOUBLE_QUOTES,
        metadata={
            "help": "Markup used for inline code spans",
            "choices": [member.value for member in InlineCodeFormat],
            "importance": "core",
        },
    )
    width_strategy: WidthStrategy = field(
        default=DEFAULT_WIDTH_STRATEGY,
        metadata={
            "help": "Display width measurement for table cells: heuristic or wcwidth",
            "choices": WIDTH_STRATEGIES,
            "importance": "advanced",
        },
    )
    min_column_width: int = field(
        default=DEFAULT_MIN_COLUMN_WIDTH,
        metadata={"help": "Minimum width of a flattened table column", "type": int, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate Medium renderer option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if not isinstance(self.inline_code_format, InlineCodeFormat):
            # Frozen dataclass: normalize string values in place
            object.__setattr__(self, "inline_code_format", InlineCodeFormat.coerce(self.inline_code_format))
        if self.width_strategy not in WIDTH_STRATEGIES:
            raise ValueError(f"width_strategy must be one of {WIDTH_STRATEGIES}, got {self.width_strategy!r}")
        if self.min_column_width < 1:
            raise ValueError(f"min_column_width must be at least 1, got {self.min_column_width}")
