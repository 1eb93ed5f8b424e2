#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/utils/text.py
"""Heading anchors.

    >>> seen = set()
    >>> slugify("Intro", seen_slugs=seen), slugify("Intro", seen_slugs=seen)
    ('intro', 'intro-2')

"""

from __future__ import annotations

import re
import unicodedata
from typing import Set

_SEPARATOR_RUN = re.compile(r"[\s_-]+")
_NOT_SLUG_CHAR = re.compile(r"[^a-z0-9-]")
FALLBACK_SLUG = "section"


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def _next_free(slug: str, seen_slugs: Set[str]) -> str:
    candidate, counter = slug, 1
    while candidate in seen_slugs:
        counter += 1
        candidate = f"{slug}-{counter}"
    seen_slugs.add(candidate)
    return candidate


def slugify(text: str, *, seen_slugs: Set[str] | None = None, max_length: int = 100) -> str:
    """Turn heading text into a lowercase, hyphen-separated anchor.

    Accents are removed, whitespace and underscores become hyphens and any
    other punctuation disappears. Text with nothing left yields ``"section"``.

    Parameters
    ----------
    text : str
        Plain heading text
    seen_slugs : set of str, optional
        Anchors already used in the document. A repeat gets ``-2``, ``-3``
        and so on, and the returned anchor is recorded in the set.
    max_length : int, default 100
        Truncation length, applied before any numeric suffix

    Examples
    --------
        >>> slugify("API Reference (v2.0)")
        'api-reference-v20'
        >>> slugify("Café résumé")
        'cafe-resume'

    """
    slug = _SEPARATOR_RUN.sub("-", _strip_accents(text).lower())
    slug = _NOT_SLUG_CHAR.sub("", slug)
    slug = re.sub(r"-{2,}", "-", slug).strip("-")
    slug = slug[:max_length].rstrip("-") or FALLBACK_SLUG

    if seen_slugs is None:
        return slug
    return _next_free(slug, seen_slugs)
