#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/options/html.py
"""Options understood by :class:`~md2medium.renderers.html.HtmlRenderer`."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2medium.constants import (
    DEFAULT_HEADING_ID_MAX_LENGTH,
    DEFAULT_HEADING_IDS,
    DEFAULT_HTML_ESCAPE_HTML,
    DEFAULT_HTML_PASSTHROUGH_MODE,
    DEFAULT_SOFT_BREAK_AS_HARD,
    HTML_PASSTHROUGH_MODES,
    HtmlPassthroughMode,
)
from md2medium.options.base import BaseRendererOptions


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """How the document tree becomes an HTML fragment.

    Parameters
    ----------
    escape_html : bool, default True
        Escape ``&``, ``<``, ``>`` and quotes in text and code
    html_passthrough_mode : {"pass-through", "escape", "drop"}, default "drop"
        What happens to raw HTML from the source. Only pass it through for
        trusted input.
    soft_break_as_hard : bool, default True
        Emit ``<br>`` for a plain newline inside a paragraph. Medium joins
        such lines otherwise.
    heading_ids : bool, default True
        Give headings an ``id`` slugified from their text
    heading_id_max_length : int, default 100
        Truncation length for those ids
    css_class_map : dict or None, default None
        Node class name to CSS class (or list of classes), e.g.
        ``{"BlockQuote": ["quote", "pull"]}``

    Raises
    ------
    ValueError
        For an unknown passthrough mode or a non-positive id length

    """

    escape_html: bool = field(
        default=DEFAULT_HTML_ESCAPE_HTML,
        metadata={"help": "Escape special characters in text", "importance": "security"},
    )
    html_passthrough_mode: HtmlPassthroughMode = field(
        default=DEFAULT_HTML_PASSTHROUGH_MODE,
        metadata={
            "help": "Treatment of raw HTML in the source",
            "choices": HTML_PASSTHROUGH_MODES,
            "importance": "security",
        },
    )
    soft_break_as_hard: bool = field(
        default=DEFAULT_SOFT_BREAK_AS_HARD,
        metadata={"help": "Turn soft line breaks into <br>", "importance": "core"},
    )
    heading_ids: bool = field(
        default=DEFAULT_HEADING_IDS,
        metadata={"help": "Add slug ids to headings", "importance": "core"},
    )
    heading_id_max_length: int = field(
        default=DEFAULT_HEADING_ID_MAX_LENGTH,
        metadata={"help": "Longest heading id before truncation", "type": int, "importance": "advanced"},
    )
    css_class_map: dict[str, str | list[str]] | None = field(
        default=None,
        metadata={"help": "Extra CSS classes per node type", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.html_passthrough_mode not in HTML_PASSTHROUGH_MODES:
            raise ValueError(
                f"html_passthrough_mode must be one of {HTML_PASSTHROUGH_MODES}, got {self.html_passthrough_mode!r}"
            )
        if self.heading_id_max_length <= 0:
            raise ValueError(f"heading_id_max_length must be positive, got {self.heading_id_max_length}")
