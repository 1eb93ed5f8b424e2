"""HTML-related utility helpers."""

from __future__ import annotations

import re
from html import escape as _html_escape

from md2medium.constants import (
    BLANK_LINE_PLACEHOLDER,
    LINE_BREAK_MARKER,
    PREFORMATTED_CLOSE,
    PREFORMATTED_OPEN,
)

_LINE_TERMINATOR = re.compile(r"\r\n|\r|\n")


def escape_html(text: str, *, enabled: bool = True, quote: bool = True) -> str:
    """Escape HTML special characters when enabled.

    With ``quote=False`` only ``&``, ``<`` and ``>`` are replaced.
    """
    if not enabled:
        return text
    return _html_escape(text, quote=quote)


def split_lines(raw: str) -> list[str]:
    """Split text on CRLF, LF or a lone CR, dropping one trailing empty line.

    Parameters
    ----------
    raw : str
        Text to split

    Returns
    -------
    list of str
        Lines without their terminators. Empty for ``""`` and for a lone
        line terminator.

    """
    lines = _LINE_TERMINATOR.split(raw)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def render_preformatted(raw: str) -> str:
    """Render line-oriented text as a ``<pre>`` block that uses ``<br>`` markers.

    Medium's importer does not keep newlines inside ``<pre>``, so every line
    boundary becomes an explicit ``<br>``. Blank and whitespace-only lines
    become ``&nbsp;`` so they are not collapsed. Only ``&``, ``<`` and ``>``
    are escaped. Code blocks and flattened tables both go through here.

    Parameters
    ----------
    raw : str
        Raw block content

    Returns
    -------
    str
        ``<pre>...</pre>`` markup, ``<pre></pre>`` when there are no lines

    Examples
    --------
    >>> render_preformatted("a < b\\n\\nc\\n")
    '<pre>a &lt; b<br>&nbsp;<br>c</pre>'

    """
    lines = split_lines(raw)
    if not lines:
        return PREFORMATTED_OPEN + PREFORMATTED_CLOSE

    rendered = [
        BLANK_LINE_PLACEHOLDER if not line.strip() else escape_html(line, quote=False)
        for line in lines
    ]
    return PREFORMATTED_OPEN + LINE_BREAK_MARKER.join(rendered) + PREFORMATTED_CLOSE


__all__ = ["escape_html", "render_preformatted", "split_lines"]
