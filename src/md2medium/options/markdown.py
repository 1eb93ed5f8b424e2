#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/options/markdown.py
"""Switches for the mistune plugins used by the Markdown parser."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2medium.constants import (
    DEFAULT_PARSE_AUTOLINKS,
    DEFAULT_PARSE_FOOTNOTES,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_TABLES,
    DEFAULT_PARSE_TASK_LISTS,
)
from md2medium.options.base import BaseParserOptions

PIPE_TABLES_PLUGIN = "md2medium.parsers.extensions.pipe_tables"
WWW_AUTOLINKS_PLUGIN = "md2medium.parsers.extensions.www_autolinks"

# option name -> mistune plugins, in registration order
_PLUGIN_SWITCHES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("parse_strikethrough", ("strikethrough",)),
    ("parse_tables", (PIPE_TABLES_PLUGIN, "table_in_quote", "table_in_list")),
    ("parse_footnotes", ("footnotes",)),
    ("parse_task_lists", ("task_lists",)),
    ("parse_autolinks", ("url", WWW_AUTOLINKS_PLUGIN)),
)


def _switch(default: bool, help_text: str, importance: str = "core"):
    return field(default=default, metadata={"help": help_text, "importance": importance})


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """GitHub-flavoured extensions understood by the parser.

    All of them are on by default. Turning one off makes its syntax come
    through as plain text: ``| a | b |`` stays a paragraph when
    ``parse_tables`` is False.

    Parameters
    ----------
    parse_tables : bool, default True
        Pipe tables, also inside blockquotes and list items
    parse_strikethrough : bool, default True
        ``~~struck~~``
    parse_footnotes : bool, default True
        ``[^1]`` references and their definitions
    parse_task_lists : bool, default True
        ``- [ ]`` and ``- [x]`` list items
    parse_autolinks : bool, default True
        Bare ``https://`` URLs and ``www.`` host names

    """

    parse_tables: bool = _switch(DEFAULT_PARSE_TABLES, "Recognise pipe tables")
    parse_strikethrough: bool = _switch(DEFAULT_PARSE_STRIKETHROUGH, "Recognise ~~strikethrough~~")
    parse_footnotes: bool = _switch(DEFAULT_PARSE_FOOTNOTES, "Recognise [^footnote] references", "advanced")
    parse_task_lists: bool = _switch(DEFAULT_PARSE_TASK_LISTS, "Recognise - [ ] task list items", "advanced")
    parse_autolinks: bool = _switch(DEFAULT_PARSE_AUTOLINKS, "Link bare URLs", "advanced")

    def get_plugins(self) -> list[str]:
        """Names of the mistune plugins to register for these options.

        Built-in plugins go by their short name, the md2medium ones by dotted
        path; ``mistune.create_markdown`` accepts both.
        """
        return [plugin for option, plugins in _PLUGIN_SWITCHES if getattr(self, option) for plugin in plugins]
