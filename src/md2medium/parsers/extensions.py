#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/parsers/extensions.py
"""GitHub-flavoured mistune rules that mistune's bundled plugins are stricter about.

Both functions are mistune plugins. :class:`MarkdownParserOptions` names them
by dotted path, which ``mistune.create_markdown`` imports like any other
plugin name.

``pipe_tables``
    Replaces the ``table`` and ``nptable`` block rules. Body rows with fewer
    cells than the header are padded with empty cells and extra cells are
    dropped, so a ragged row no longer turns the whole table back into a
    paragraph. The rules keep their names, so mistune's ``table_in_quote`` and
    ``table_in_list`` plugins pick them up inside blockquotes and list items.

``www_autolinks``
    Links bare ``www.`` host names, which mistune's ``url`` plugin leaves as
    text. The link target gets an ``http://`` prefix.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Callable, Match, Optional

from mistune.util import escape_url

if TYPE_CHECKING:
    from mistune.block_parser import BlockParser
    from mistune.core import BlockState, InlineState
    from mistune.inline_parser import InlineParser
    from mistune.markdown import Markdown

TABLE_PATTERN = r"^ {0,3}\|[^\n]*\|[ \t]*(?:\n|$)"
NP_TABLE_PATTERN = r"^ {0,3}\S[^\n]*\|[^\n]*(?:\n|$)"

# "www." not glued to a preceding word, scheme or address; trailing punctuation stays text
WWW_LINK_PATTERN = r"""(?<![\w.:/@-])www\.[^\s<]*[^<.,:;"')\]\s*_~?!]"""

_ALIGNMENTS = (
    (re.compile(r"^ *:-+: *$"), "center"),
    (re.compile(r"^ *:-+ *$"), "left"),
    (re.compile(r"^ *-+: *$"), "right"),
    (re.compile(r"^ *-+ *$"), None),
)


def _split_cells(text: str) -> list[str]:
    # an unescaped pipe separates cells; "\|" stays inside the cell for the inline parser
    cells = []
    start = 0
    for pos, char in enumerate(text):
        if char != "|":
            continue
        backslashes = len(text[:pos]) - len(text[:pos].rstrip("\\"))
        if backslashes % 2 == 0:
            cells.append(text[start:pos].strip())
            start = pos + 1
    cells.append(text[start:].strip())
    return cells


def _strip_pipe_row(line: str) -> Optional[str]:
    text = line.rstrip("\n").strip(" \t")
    if len(text) < 2 or not text.startswith("|") or not text.endswith("|"):
        return None
    return text[1:-1]


def _strip_bare_row(line: str) -> Optional[str]:
    text = line.rstrip("\n").rstrip(" \t")
    if not text or "|" not in text:
        return None
    return text


def _parse_alignments(delimiter: str) -> Optional[list[Optional[str]]]:
    alignments: list[Optional[str]] = []
    for cell in _split_cells(delimiter):
        if not cell.strip():
            alignments.append(None)
            continue
        for pattern, alignment in _ALIGNMENTS:
            if pattern.match(cell):
                alignments.append(alignment)
                break
        else:
            return None
    return alignments


def _cell_tokens(cells: list[str], alignments: list[Optional[str]], head: bool) -> list[dict[str, Any]]:
    # pad short rows, drop cells past the header's column count
    cells = (cells + [""] * len(alignments))[: len(alignments)]
    return [
        {"type": "table_cell", "text": text, "attrs": {"align": alignment, "head": head}}
        for text, alignment in zip(cells, alignments)
    ]


def _parse_rows(m: Match[str], state: "BlockState", strip_row: Callable[[str], Optional[str]]) -> Optional[int]:
    header = strip_row(m.group(0))
    if header is None:
        return None

    pos = m.end()
    delimiter_line = state.get_line(pos)
    delimiter = strip_row(delimiter_line)
    if delimiter is None:
        return None

    header_cells = _split_cells(header)
    alignments = _parse_alignments(delimiter)
    if alignments is None or len(alignments) != len(header_cells):
        return None
    pos += len(delimiter_line)

    rows = []
    while pos < state.cursor_max:
        line = state.get_line(pos)
        text = strip_row(line)
        if text is None:
            break
        rows.append({"type": "table_row", "children": _cell_tokens(_split_cells(text), alignments, head=False)})
        pos += len(line)

    head = {"type": "table_head", "children": _cell_tokens(header_cells, alignments, head=True)}
    state.append_token({"type": "table", "children": [head, {"type": "table_body", "children": rows}]})
    return pos


def parse_pipe_table(block: "BlockParser", m: Match[str], state: "BlockState") -> Optional[int]:
    """Table whose rows all start and end with ``|``."""
    return _parse_rows(m, state, _strip_pipe_row)


def parse_bare_table(block: "BlockParser", m: Match[str], state: "BlockState") -> Optional[int]:
    """Table whose rows omit the outer pipes (``a | b``)."""
    return _parse_rows(m, state, _strip_bare_row)


def parse_www_link(inline: "InlineParser", m: Match[str], state: "InlineState") -> int:
    text = m.group(0)
    pos = m.end()
    if state.in_link:
        inline.process_text(text, state)
        return pos
    state.append_token(
        {
            "type": "link",
            "children": [{"type": "text", "raw": text}],
            "attrs": {"url": escape_url("http://" + text)},
        }
    )
    return pos


def pipe_tables(md: "Markdown") -> None:
    """Register the pipe table rules under mistune's own ``table``/``nptable`` names."""
    md.block.register("table", TABLE_PATTERN, parse_pipe_table, before="paragraph")
    md.block.register("nptable", NP_TABLE_PATTERN, parse_bare_table, before="paragraph")


def www_autolinks(md: "Markdown") -> None:
    md.inline.register("www_link", WWW_LINK_PATTERN, parse_www_link)
