#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2medium/utils/decorators.py
"""Dependency gating and debug timing.

``requires_dependencies`` guards the mistune parser and the wcwidth width
strategy; ``debug_timer`` wraps the parse and render phases of ``convert``.
"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Optional, Tuple

from md2medium.exceptions import DependencyError
from md2medium.utils.packages import check_version_requirement

PackageRequirement = Tuple[str, str, str]


def _probe(
    packages: List[PackageRequirement],
) -> Tuple[List[Tuple[str, str]], List[Tuple[str, str, str]], Optional[ImportError]]:
    missing: List[Tuple[str, str]] = []
    mismatches: List[Tuple[str, str, str]] = []
    first_error: Optional[ImportError] = None

    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as e:
            missing.append((install_name, version_spec))
            first_error = first_error or e
            continue
        if not version_spec:
            continue
        satisfied, installed = check_version_requirement(install_name, version_spec)
        if not satisfied:
            mismatches.append((install_name, version_spec, installed or "unknown"))

    return missing, mismatches, first_error


def requires_dependencies(converter_name: str, packages: List[PackageRequirement]) -> Callable:
    """Refuse to run the decorated function until its packages import.

    Parameters
    ----------
    converter_name : str
        Feature name shown in the error, e.g. ``"wcwidth width strategy"``
    packages : list of (install_name, import_name, version_spec)
        ``install_name`` is the name pip knows, ``import_name`` the module to
        import, ``version_spec`` a PEP 440 specifier or ``""``.

    Raises
    ------
    DependencyError
        Listing every missing or mismatched package, raised from the first
        ImportError seen

    Examples
    --------
        >>> @requires_dependencies("markdown", [("mistune", "mistune", ">=3.0.0")])
        ... def parse(self, input_data):
        ...     import mistune

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing, mismatches, first_error = _probe(packages)
            if missing or mismatches:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    version_mismatches=mismatches,
                    original_import_error=first_error,
                ) from first_error
            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log ``"<operation> completed in N.NNs"`` at DEBUG when the block exits normally.

    Does nothing when ``logger`` is not enabled for DEBUG.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return
    started = time.perf_counter()
    yield
    logger.debug(f"{operation} completed in {time.perf_counter() - started:.2f}s")
