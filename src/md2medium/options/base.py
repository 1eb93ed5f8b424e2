"""Base classes for md2medium parser and renderer options.

Every option class is a frozen dataclass. Field metadata carries a ``help``
string (reused by the command line) and an ``importance`` tag; ``choices``
lists the accepted values for string options.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Copy-on-write helpers for frozen option dataclasses."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        ``__post_init__`` runs again on the copy, so the new values are
        validated the same way as at construction.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            The updated copy

        """
        return replace(self, **kwargs)

    @classmethod
    def field_help(cls, name: str) -> str:
        """Return the ``help`` metadata of a field, or ``""`` when it has none.

        Raises
        ------
        KeyError
            If the class has no field called ``name``

        """
        for option_field in fields(cls):
            if option_field.name == name:
                return option_field.metadata.get("help", "")
        raise KeyError(f"{cls.__name__} has no option {name!r}")


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options."""

    def __post_init__(self) -> None:
        """Validate option values; subclasses extend this."""
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options."""

    def __post_init__(self) -> None:
        """Validate option values; subclasses extend this."""
        pass
