#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2medium.

This module centralizes hardcoded values and default configuration constants
used across the library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Parsing Defaults - Markdown extensions enabled by default
3. Rendering Defaults - Generic HTML output settings
4. Medium Output - Preformatted block markers and table layout
5. Display Width - Character classes used for monospace width estimation
6. Dependencies - Package requirements for optional features
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HtmlPassthroughMode = Literal["pass-through", "escape", "drop"]
WidthStrategy = Literal["heuristic", "wcwidth"]

HTML_PASSTHROUGH_MODES: list[str] = ["pass-through", "escape", "drop"]
WIDTH_STRATEGIES: list[str] = ["heuristic", "wcwidth"]

# =============================================================================
# Parsing Defaults
# =============================================================================

DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_FOOTNOTES = True
DEFAULT_PARSE_TASK_LISTS = True
DEFAULT_PARSE_AUTOLINKS = True

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_HTML_ESCAPE_HTML = True
# Raw HTML embedded in the source is removed from the output
DEFAULT_HTML_PASSTHROUGH_MODE: HtmlPassthroughMode = "drop"
DEFAULT_SOFT_BREAK_AS_HARD = True
DEFAULT_HEADING_IDS = True
DEFAULT_HEADING_ID_MAX_LENGTH = 100

# =============================================================================
# Medium Output
# =============================================================================

PREFORMATTED_OPEN = "<pre>"
PREFORMATTED_CLOSE = "</pre>"
LINE_BREAK_MARKER = "<br>"
BLANK_LINE_PLACEHOLDER = "&nbsp;"
QUOTE_ENTITY = "&quot;"

DEFAULT_MIN_COLUMN_WIDTH = 3
DEFAULT_WIDTH_STRATEGY: WidthStrategy = "heuristic"

TABLE_CELL_SEPARATOR = "|"
TABLE_RULE_CHAR = "-"

# =============================================================================
# Display Width
# =============================================================================

# Variation selectors, zero-width joiner, Mongolian free variation selectors
ZERO_WIDTH_CHARACTERS: frozenset[str] = frozenset(
    {
        "\ufe0e",
        "\ufe0f",
        "\u200d",
        "\u180b",
        "\u180c",
        "\u180d",
    }
)

# Inclusive (start, end) code point ranges rendered double width
WIDE_SYMBOL_RANGES: tuple[tuple[int, int], ...] = (
    (0x2600, 0x27BF),  # Miscellaneous Symbols, Dingbats
    (0x2300, 0x23FF),  # Miscellaneous Technical
    (0x2B00, 0x2BFF),  # Miscellaneous Symbols and Arrows
)

SUPPLEMENTARY_PLANE_START = 0x10000
HIGH_SURROGATE_RANGE = (0xD800, 0xDBFF)
LOW_SURROGATE_RANGE = (0xDC00, 0xDFFF)

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
DEPS_WCWIDTH = [("wcwidth", "wcwidth", ">=0.2.6")]

DEFAULT_INLINE_CODE_FORMAT_ENV = "MD2MEDIUM_INLINE_CODE_FORMAT"
