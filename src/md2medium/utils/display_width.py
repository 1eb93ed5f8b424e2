#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/utils/display_width.py
"""Monospace display width of text.

Flattened tables are padded with spaces, so cell widths have to be measured
in terminal columns rather than characters. Two strategies are available:

- heuristic (default): zero-width format characters count 0, supplementary
  plane characters (most emoji) and the Miscellaneous Symbols, Dingbats,
  Miscellaneous Technical and Symbols-and-Arrows blocks count 2, everything
  else counts 1. CJK ideographs are measured as 1 column.
- wcwidth: East Asian Width tables from the ``wcwidth`` package.
"""

from __future__ import annotations

import logging
from typing import Callable

from md2medium.constants import (
    DEFAULT_WIDTH_STRATEGY,
    DEPS_WCWIDTH,
    HIGH_SURROGATE_RANGE,
    LOW_SURROGATE_RANGE,
    SUPPLEMENTARY_PLANE_START,
    WIDE_SYMBOL_RANGES,
    WIDTH_STRATEGIES,
    ZERO_WIDTH_CHARACTERS,
    WidthStrategy,
)
from md2medium.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

WidthFunction = Callable[[str], int]


def _is_high_surrogate(code_point: int) -> bool:
    return HIGH_SURROGATE_RANGE[0] <= code_point <= HIGH_SURROGATE_RANGE[1]


def _is_low_surrogate(code_point: int) -> bool:
    return LOW_SURROGATE_RANGE[0] <= code_point <= LOW_SURROGATE_RANGE[1]


def _is_wide_symbol(code_point: int) -> bool:
    return any(start <= code_point <= end for start, end in WIDE_SYMBOL_RANGES)


def display_width(text: str) -> int:
    """Return the heuristic monospace width of ``text``.

    Parameters
    ----------
    text : str
        Text to measure

    Returns
    -------
    int
        Width in columns, never negative

    Notes
    -----
    An explicit surrogate pair (as produced by decoding with
    ``errors="surrogatepass"``) is measured as one double-width character.
    A lone surrogate counts as 1.

    Examples
    --------
    >>> display_width("A"), display_width("\\u2705"), display_width("")
    (1, 2, 0)

    """
    width = 0
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        code_point = ord(char)
        index += 1

        if char in ZERO_WIDTH_CHARACTERS:
            continue

        if code_point >= SUPPLEMENTARY_PLANE_START:
            width += 2
        elif _is_high_surrogate(code_point) and index < length and _is_low_surrogate(ord(text[index])):
            index += 1
            width += 2
        elif _is_wide_symbol(code_point):
            width += 2
        else:
            width += 1

    return width


def wcwidth_display_width(text: str) -> int:
    """Return the width of ``text`` using the ``wcwidth`` package.

    Non-printable characters (for which wcwidth reports -1) count as 0.
    The caller is expected to have checked the dependency, see
    :func:`get_width_function`.
    """
    import wcwidth

    width = 0
    for char in text:
        char_width = wcwidth.wcwidth(char)
        if char_width > 0:
            width += char_width
    return width


@requires_dependencies("wcwidth width strategy", DEPS_WCWIDTH)
def _load_wcwidth_function() -> WidthFunction:
    return wcwidth_display_width


def get_width_function(strategy: WidthStrategy = DEFAULT_WIDTH_STRATEGY) -> WidthFunction:
    """Return the width function for a strategy name.

    Parameters
    ----------
    strategy : {"heuristic", "wcwidth"}, default "heuristic"
        Width strategy

    Returns
    -------
    callable
        Function mapping a string to its column width

    Raises
    ------
    ValueError
        If the strategy name is unknown
    DependencyError
        If the "wcwidth" strategy is requested and wcwidth is not installed

    """
    if strategy == "heuristic":
        return display_width
    if strategy == "wcwidth":
        return _load_wcwidth_function()
    raise ValueError(f"width strategy must be one of {WIDTH_STRATEGIES}, got {strategy!r}")


__all__ = ["WidthFunction", "display_width", "get_width_function", "wcwidth_display_width"]
