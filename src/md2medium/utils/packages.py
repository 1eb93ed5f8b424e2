#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/utils/packages.py
"""Installed-distribution lookups used by :func:`requires_dependencies`."""

from __future__ import annotations

from importlib import metadata
from typing import Optional, Tuple

from packaging.specifiers import SpecifierSet
from packaging.version import InvalidVersion, Version


def get_package_version(package_name: str) -> Optional[str]:
    """Return the installed version of distribution ``package_name``, or None.

    ``package_name`` is the name pip knows (``wcwidth``), which is not always
    the import name.
    """
    try:
        return metadata.version(package_name)
    except metadata.PackageNotFoundError:
        return None


def check_version_requirement(package_name: str, version_spec: str) -> Tuple[bool, Optional[str]]:
    """Test an installed distribution against a PEP 440 specifier such as ``">=3.0.0"``.

    Returns
    -------
    tuple of (bool, str or None)
        Whether the requirement holds, and the installed version (None when
        the distribution is absent). A version string that ``packaging``
        cannot parse never satisfies the requirement.

    Raises
    ------
    packaging.specifiers.InvalidSpecifier
        If ``version_spec`` is malformed

    """
    installed = get_package_version(package_name)
    if installed is None:
        return False, None

    specifier = SpecifierSet(version_spec)
    try:
        parsed = Version(installed)
    except InvalidVersion:
        return False, installed
    return specifier.contains(parsed, prereleases=True), installed
