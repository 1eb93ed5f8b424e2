#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/utils/html_sanitizer.py
"""Raw HTML handling.

The parser keeps ``<div>``, ``<script>`` and friends verbatim in
``HTMLBlock``/``HTMLInline`` nodes. Medium's importer strips most tags anyway,
so the renderers drop them unless told otherwise.
"""

from __future__ import annotations

import logging

from md2medium.constants import DEFAULT_HTML_PASSTHROUGH_MODE, HtmlPassthroughMode
from md2medium.utils.html_utils import escape_html

logger = logging.getLogger(__name__)


def sanitize_html_content(content: str, mode: HtmlPassthroughMode = DEFAULT_HTML_PASSTHROUGH_MODE) -> str:
    """Return raw HTML unchanged (``"pass-through"``), escaped (``"escape"``) or as ``""`` (``"drop"``).

    Raises
    ------
    ValueError
        For any other ``mode``

    Examples
    --------
    >>> sanitize_html_content("<script>alert('xss')</script>", mode="escape")
    '&lt;script&gt;alert(&#x27;xss&#x27;)&lt;/script&gt;'

    """
    if mode == "drop":
        if content.strip():
            logger.debug(f"Dropping raw HTML ({len(content)} characters)")
        return ""
    if mode == "escape":
        return escape_html(content)
    if mode == "pass-through":
        return content
    raise ValueError(f"Unknown HTML passthrough mode: {mode!r}")
